"""Resolution of composite schemas (allOf / oneOf / anyOf)."""

from collections.abc import Callable
from typing import Any

COMPOSITION_KEYWORDS = ("allOf", "oneOf", "anyOf")


def is_composite(node: Any) -> bool:
    return isinstance(node, dict) and any(
        isinstance(node.get(key), list) for key in COMPOSITION_KEYWORDS
    )


def normalize_composition(node: dict, resolve: Callable[[Any], Any]) -> dict:
    """Resolve every member of the node's composition keywords.

    Members are resolved independently and carried forward as siblings: allOf
    members are not merged and no oneOf/anyOf branch is picked. Returns a copy;
    ``node`` itself is left untouched.
    """
    result = dict(node)
    for key in COMPOSITION_KEYWORDS:
        members = result.get(key)
        if isinstance(members, list):
            result[key] = [resolve(member) for member in members]
    return result
