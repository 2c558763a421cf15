"""Data models for parsed API documents.

The endpoint-load workflow turns an OpenAPI document into these models; the
request body of each endpoint carries its resolved schema and example.
"""

import json
from typing import Any

from pydantic import BaseModel, Field, computed_field


class Param(BaseModel):
    """A single API parameter (query, path, header, or cookie)."""

    name: str
    location: str  # query / path / header / cookie
    required: bool
    param_type: str  # string / integer / boolean / array / object
    description: str = ""
    constraints: dict = {}  # minimum, maximum, pattern, enum, etc.
    example: Any = None


class RequestBodyDescriptor(BaseModel):
    """Resolved request body of an endpoint, ready to pre-fill an editor."""

    content_type: str = Field(serialization_alias="contentType")
    body_schema: Any = Field(default=None, serialization_alias="schema")
    required: bool = False
    example: Any = None
    example_source: str = "generated"  # media / examples / generated / fallback

    @computed_field
    @property
    def example_text(self) -> str:
        return render_example(self.example)


class ApiEndpoint(BaseModel):
    """A single API endpoint with all its metadata."""

    method: str  # GET / POST / PUT / DELETE / PATCH / HEAD / OPTIONS
    path: str  # /api/users/{id}
    summary: str
    operation_id: str = ""
    parameters: list[Param]
    request_body: RequestBodyDescriptor | None
    responses: dict  # {status_code: {description}}
    auth_required: bool
    tags: list[str]


def render_example(value: Any) -> str:
    """Serialize an example for display.

    Strings are shown as they are (they are often pre-serialized bodies);
    everything else is pretty-printed JSON.
    """
    if isinstance(value, str):
        return value
    return json.dumps(value, indent=2, ensure_ascii=False, default=str)
