"""Request body descriptors: content-type selection, schema resolution, example."""

import copy
import logging
from typing import Any

from api_example_synth import config
from api_example_synth.parser.base import RequestBodyDescriptor, render_example
from api_example_synth.schema.context import SpecContext
from api_example_synth.schema.resolver import resolve_all, resolve_reference
from api_example_synth.schema.synthesizer import ExampleSynthesizer

logger = logging.getLogger(__name__)

__all__ = ["build_request_body", "render_example", "select_content_type"]


def select_content_type(content: dict) -> str | None:
    """Prefer application/json, otherwise the lexicographically first media type."""
    if not content:
        return None
    if config.DEFAULT_CONTENT_TYPE in content:
        return config.DEFAULT_CONTENT_TYPE
    return sorted(content)[0]


def build_request_body(
    request_body: dict | None,
    ctx: SpecContext,
    synthesizer: ExampleSynthesizer | None = None,
) -> RequestBodyDescriptor | None:
    """Build the descriptor for an OpenAPI ``requestBody`` object.

    Returns None when there is no body or it declares no content. The example
    is the media type's own ``example``, else the first of its ``examples``,
    else a synthesized one, else the fallback placeholder.
    """
    if not request_body:
        return None

    # requestBody may itself point into #/components/requestBodies
    request_body = resolve_reference(request_body, ctx)
    content = request_body.get("content") if isinstance(request_body, dict) else None
    if not isinstance(content, dict) or not content:
        return None

    content_type = select_content_type(content)
    media = content[content_type]
    if not isinstance(media, dict):
        media = {}

    schema = resolve_all(media.get("schema"), ctx)

    example, source = _declared_example(media, ctx)
    if example is None:
        synthesizer = synthesizer or ExampleSynthesizer()
        example, source = synthesizer.synthesize(schema), "generated"
    if example is None:
        logger.debug("No example for %s body, using fallback", content_type)
        example, source = config.fallback_example(), "fallback"

    return RequestBodyDescriptor(
        content_type=content_type,
        body_schema=schema,
        required=request_body.get("required") is True,
        example=example,
        example_source=source,
    )


def _declared_example(media: dict, ctx: SpecContext) -> tuple[Any, str]:
    if media.get("example") is not None:
        return copy.deepcopy(media["example"]), "media"

    examples = media.get("examples")
    if isinstance(examples, dict):
        for entry in examples.values():
            entry = resolve_reference(entry, ctx)
            if isinstance(entry, dict) and entry.get("value") is not None:
                return copy.deepcopy(entry["value"]), "examples"

    return None, ""
