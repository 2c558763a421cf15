"""$ref resolution against a SpecContext.

Resolution never raises. A pointer that cannot be followed leaves the
reference node in place, which the synthesizer later treats as opaque.
"""

import logging
from typing import Any
from urllib.parse import unquote

from api_example_synth import config
from api_example_synth.schema.composition import is_composite, normalize_composition
from api_example_synth.schema.context import SpecContext

logger = logging.getLogger(__name__)

POINTER_PREFIX = "#/"

_MISSING = object()


def is_reference(node: Any) -> bool:
    return isinstance(node, dict) and "$ref" in node


def pointer_segments(pointer: str) -> list[str]:
    """Split ``#/a/b~1c`` into ``["a", "b/c"]``.

    Segments are percent-decoded, then JSON-pointer unescaped.
    """
    parts = pointer[len(POINTER_PREFIX):].split("/")
    return [unquote(p).replace("~1", "/").replace("~0", "~") for p in parts]


class _ResolutionPass:
    """Per-call bookkeeping shared by every recursive step of one resolution."""

    def __init__(self):
        self.expanded: dict[str, Any] = {}  # pointer -> resolved subtree
        self.warned: set[str] = set()

    def warn_once(self, key: str, msg: str, *args: Any) -> None:
        if key not in self.warned:
            self.warned.add(key)
            logger.warning(msg, *args)


def resolve_reference(
    node: Any,
    ctx: SpecContext,
    *,
    trail: tuple[str, ...] = (),
    depth: int = 0,
    state: _ResolutionPass | None = None,
) -> Any:
    """Resolve a single reference node to the schema it points at.

    Non-reference nodes are returned unchanged. The located target is passed
    through :func:`resolve_all`, so chains of references resolve in one call.

    ``trail`` holds the pointers already being resolved on the current path;
    meeting one of them again means the document is self-referential, and the
    reference is left as-is instead of being followed. Each pointer is
    expanded once per call; later occurrences reuse the same subtree.
    """
    if not is_reference(node):
        return node

    pointer = node["$ref"]
    if not isinstance(pointer, str) or not pointer.startswith(POINTER_PREFIX):
        logger.debug("Ignoring non-local or malformed $ref %r", pointer)
        return node

    state = state or _ResolutionPass()
    if pointer in state.expanded:
        return state.expanded[pointer]

    if pointer in trail:
        state.warn_once(pointer, "Circular reference %s (via %s)", pointer, " -> ".join(trail))
        return node

    if depth > config.MAX_RESOLVE_DEPTH:
        state.warn_once(pointer, "Reference %s exceeds max resolution depth %d", pointer, config.MAX_RESOLVE_DEPTH)
        return node

    target = _walk(ctx.document, pointer_segments(pointer))
    if target is _MISSING:
        state.warn_once(pointer, "Unresolved reference %s in %s", pointer, ctx.source or "document")
        return node

    resolved = resolve_all(target, ctx, trail=trail + (pointer,), depth=depth + 1, state=state)
    state.expanded[pointer] = resolved
    return resolved


def resolve_all(
    node: Any,
    ctx: SpecContext,
    *,
    trail: tuple[str, ...] = (),
    depth: int = 0,
    state: _ResolutionPass | None = None,
) -> Any:
    """Return a copy of ``node`` with every nested reference resolved.

    Follows ``properties``, ``items`` and the composition keywords. Values
    that are not schema objects are returned as they are.
    """
    if not isinstance(node, dict):
        return node

    state = state or _ResolutionPass()

    if is_reference(node):
        return resolve_reference(node, ctx, trail=trail, depth=depth, state=state)

    if depth > config.MAX_RESOLVE_DEPTH:
        state.warn_once("", "Schema nesting exceeds max resolution depth %d", config.MAX_RESOLVE_DEPTH)
        return node

    def resolve(child: Any) -> Any:
        return resolve_all(child, ctx, trail=trail, depth=depth + 1, state=state)

    resolved = dict(node)

    properties = resolved.get("properties")
    if isinstance(properties, dict):
        resolved["properties"] = {name: resolve(prop) for name, prop in properties.items()}

    if "items" in resolved:
        resolved["items"] = resolve(resolved["items"])

    if is_composite(resolved):
        resolved = normalize_composition(resolved, resolve)

    return resolved


def _walk(document: Any, segments: list[str]) -> Any:
    current = document
    for segment in segments:
        if isinstance(current, dict) and segment in current:
            current = current[segment]
        elif isinstance(current, dict) and segment.isdigit() and int(segment) in current:
            # YAML reads unquoted keys such as 200: as integers
            current = current[int(segment)]
        elif isinstance(current, list) and segment.isdigit() and int(segment) < len(current):
            current = current[int(segment)]
        else:
            return _MISSING
        if current is None:
            return _MISSING
    return current
