"""Representative literal values keyed by string format and property name."""

import random
from collections.abc import Callable
from typing import Any

FORMAT_EXAMPLES = {
    "email": "user@example.com",
    "date": "2024-01-01",
    "date-time": "2024-01-01T12:00:00Z",
    "uuid": "123e4567-e89b-12d3-a456-426614174000",
}

FILLER_WORDS = (
    "nisi",
    "est magna Excepteur ipsum",
    "officia",
    "dolor ea adipisicing cillum",
    "Lorem ipsum",
    "consectetur",
    "adipiscing elit",
    "sed do eiusmod",
    "tempor incididunt",
    "labore et dolore",
    "magna aliqua",
)

Rule = tuple[Callable[[str], bool], Callable[["FormatHeuristics"], Any]]


def name_contains(fragment: str) -> Callable[[str], bool]:
    return lambda name: fragment in str(name).lower()


def literal(value: Any) -> Callable[["FormatHeuristics"], Any]:
    return lambda heuristics: value


# Evaluated in order, first match wins.
STRING_NAME_RULES: list[Rule] = [
    (name_contains("name"), literal("Example Name")),
    (name_contains("title"), literal("Example Title")),
    (name_contains("description"), literal("Example description text")),
    (name_contains("id"), literal("example-id-123")),
    (name_contains("email"), literal("user@example.com")),
    (name_contains("password"), lambda h: h.filler()),
    (name_contains("type"), literal(FILLER_WORDS[0])),
    (name_contains("phone"), literal("+1-555-0123")),
    (name_contains("address"), literal("123 Main Street")),
    (name_contains("city"), literal("New York")),
    (name_contains("country"), literal("United States")),
    (name_contains("token"), literal("eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9")),
    (name_contains("url"), literal("https://example.com")),
    (name_contains("code"), literal("ABC123")),
]

NUMBER_NAME_RULES: list[Rule] = [
    (name_contains("id"), literal(1)),
    (name_contains("count"), literal(10)),
    (name_contains("price"), literal(99.99)),
    (name_contains("age"), literal(25)),
]


class FormatHeuristics:
    """Lookup of placeholder values.

    Randomness comes from ``rng`` only. Pass a seeded ``random.Random`` (or use
    :meth:`seeded`) for reproducible output.
    """

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()

    @classmethod
    def seeded(cls, seed: int) -> "FormatHeuristics":
        return cls(random.Random(seed))

    def for_format(self, fmt: str | None) -> str | None:
        return FORMAT_EXAMPLES.get(fmt) if isinstance(fmt, str) else None

    def for_string_name(self, name: str) -> str | None:
        return self._match(STRING_NAME_RULES, name)

    def for_number_name(self, name: str) -> int | float | None:
        return self._match(NUMBER_NAME_RULES, name)

    def filler(self) -> str:
        return self.rng.choice(FILLER_WORDS)

    def _match(self, rules: list[Rule], name: str) -> Any:
        for predicate, generate in rules:
            if predicate(name):
                return generate(self)
        return None
