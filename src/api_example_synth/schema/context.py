"""Resolution context: the root document that ``$ref`` pointers are resolved against."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class SpecContext(BaseModel):
    """Immutable lookup root for one resolution pass.

    Passed explicitly to every resolver call, so independent documents can be
    processed side by side without interfering with each other.
    """

    model_config = ConfigDict(frozen=True)

    document: dict[str, Any]
    source: str = ""  # file name or other label, used in log messages
