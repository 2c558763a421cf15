"""Example value synthesis from resolved schemas."""

import copy
import logging
import math
from typing import Any

from api_example_synth import config
from api_example_synth.schema.heuristics import FormatHeuristics

logger = logging.getLogger(__name__)


class ExampleSynthesizer:
    """Builds a placeholder value that structurally matches a schema.

    Expects schemas whose references were already resolved. A reference that
    is still present is treated like any other untyped node.
    """

    def __init__(self, heuristics: FormatHeuristics | None = None, max_depth: int | None = None):
        self.heuristics = heuristics or FormatHeuristics()
        self.max_depth = config.MAX_SYNTHESIS_DEPTH if max_depth is None else max_depth

    def synthesize(self, node: Any, name: str = "root", depth: int = 0) -> Any:
        """Return an example for ``node``, or None when it cannot be synthesized.

        ``name`` is the property the node describes and feeds the name-based
        heuristics. Array items are named ``<name>_item``.
        """
        if not isinstance(node, dict):
            return None

        if depth > self.max_depth:
            logger.debug("Stopping synthesis of %r at depth %d", name, depth)
            return None

        if node.get("example") is not None:
            return copy.deepcopy(node["example"])

        schema_type = _declared_type(node)
        if schema_type is None and isinstance(node.get("properties"), dict):
            schema_type = "object"

        if "default" in node:
            return copy.deepcopy(node["default"])

        if schema_type == "string":
            return self._string(node, name)
        if schema_type in ("number", "integer"):
            return self._number(node, name, schema_type)
        if schema_type == "boolean":
            return False
        if schema_type == "array":
            if "items" in node:
                return [self.synthesize(node["items"], f"{name}_item", depth + 1)]
            return []
        if schema_type == "object":
            properties = node.get("properties")
            if not isinstance(properties, dict):
                return {}
            return {
                key: self.synthesize(prop, str(key), depth + 1)
                for key, prop in properties.items()
            }

        logger.debug("Cannot synthesize %r: no usable type", name)
        return None

    def _string(self, node: dict, name: str) -> Any:
        value = self.heuristics.for_format(node.get("format"))
        if value is not None:
            return value
        enum = node.get("enum")
        if isinstance(enum, list) and enum:
            return copy.deepcopy(enum[0])
        value = self.heuristics.for_string_name(name)
        if value is not None:
            return value
        return self.heuristics.filler()

    def _number(self, node: dict, name: str, schema_type: str) -> Any:
        minimum = _number_or_none(node.get("minimum"))
        maximum = _number_or_none(node.get("maximum"))
        if minimum is not None and maximum is None:
            return minimum
        if minimum is not None and maximum is not None:
            return _midpoint(minimum, maximum)
        enum = node.get("enum")
        if isinstance(enum, list) and enum:
            return copy.deepcopy(enum[0])
        value = self.heuristics.for_number_name(name)
        if value is not None:
            return value
        return 42 if schema_type == "integer" else 42.5


def _number_or_none(value: Any) -> int | float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def _midpoint(minimum: int | float, maximum: int | float) -> int | float:
    """floor((minimum + maximum) / 2), exact for integer bounds."""
    if isinstance(minimum, int) and isinstance(maximum, int):
        return (minimum + maximum) // 2
    middle = minimum / 2 + maximum / 2
    if not math.isfinite(middle):
        return minimum
    return math.floor(middle)


def _declared_type(node: dict) -> str | None:
    schema_type = node.get("type")
    if isinstance(schema_type, list):
        # OpenAPI 3.1 style: ["string", "null"]
        schema_type = next((t for t in schema_type if t != "null"), None)
    return schema_type if isinstance(schema_type, str) else None
