"""Engine configuration.

Values can be overridden through environment variables; CLI options take
precedence over both.
"""

import copy
import os

DEFAULT_CONTENT_TYPE = "application/json"

FALLBACK_EXAMPLE = {"data": "example"}

MAX_RESOLVE_DEPTH = int(os.getenv("API_EXAMPLE_SYNTH_MAX_RESOLVE_DEPTH", "64"))
MAX_SYNTHESIS_DEPTH = int(os.getenv("API_EXAMPLE_SYNTH_MAX_SYNTHESIS_DEPTH", "32"))

_seed = os.getenv("API_EXAMPLE_SYNTH_SEED", "")
DEFAULT_SEED = int(_seed) if _seed.strip() else None


def fallback_example() -> dict:
    """Return a fresh copy of the placeholder used when nothing can be synthesized."""
    return copy.deepcopy(FALLBACK_EXAMPLE)
