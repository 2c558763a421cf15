"""OpenAPI document loader.

Parses OpenAPI 3.x documents into ApiEndpoint models. Each document gets its
own SpecContext, which every $ref lookup for that document goes through.
"""

from pathlib import Path

import yaml

from .base import ApiEndpoint, Param
from api_example_synth.schema.context import SpecContext
from api_example_synth.schema.request_body import build_request_body
from api_example_synth.schema.resolver import resolve_all, resolve_reference
from api_example_synth.schema.synthesizer import ExampleSynthesizer

HTTP_METHODS = ("get", "post", "put", "delete", "patch", "head", "options")

HEADER_EXAMPLES = {
    "accept-language": "en-US",
    "authorization": "Bearer {{ token }}",
    "content-type": "application/json",
    "accept": "application/json",
    "user-agent": "MyApp/1.0",
    "x-api-key": "{{ apiKey }}",
    "x-api-version": "v1",
}


def load_document(file_path: Path) -> dict:
    """Read an OpenAPI document (YAML or JSON) from disk."""
    text = file_path.read_text(encoding="utf-8")
    doc = yaml.safe_load(text)
    if not isinstance(doc, dict):
        raise ValueError(f"{file_path} does not contain an OpenAPI document")
    return doc


def parse_openapi(file_path: Path, synthesizer: ExampleSynthesizer | None = None) -> list[ApiEndpoint]:
    """Parse an OpenAPI file into a list of ApiEndpoint."""
    return parse_document(load_document(file_path), synthesizer=synthesizer, source=file_path.name)


def parse_document(
    doc: dict,
    synthesizer: ExampleSynthesizer | None = None,
    source: str = "",
) -> list[ApiEndpoint]:
    """Parse an already loaded OpenAPI document into a list of ApiEndpoint."""
    ctx = SpecContext(document=doc, source=source)
    synthesizer = synthesizer or ExampleSynthesizer()

    endpoints = []
    paths = doc.get("paths") or {}

    for path, path_item in paths.items():
        if not isinstance(path_item, dict):
            continue
        shared_params = path_item.get("parameters", [])

        for method, operation in path_item.items():
            if method.lower() not in HTTP_METHODS or not isinstance(operation, dict):
                continue

            params = _parse_parameters(shared_params + operation.get("parameters", []), ctx)
            request_body = build_request_body(operation.get("requestBody"), ctx, synthesizer)
            auth_required = "security" in operation or "security" in doc

            endpoints.append(
                ApiEndpoint(
                    method=method.upper(),
                    path=path,
                    summary=operation.get("summary", ""),
                    operation_id=operation.get("operationId", ""),
                    parameters=params,
                    request_body=request_body,
                    responses=_parse_responses(operation.get("responses", {})),
                    auth_required=auth_required,
                    tags=operation.get("tags", []),
                )
            )

    return endpoints


def _parse_parameters(params: list, ctx: SpecContext) -> list[Param]:
    # Operation-level parameters override path-level ones with the same name and location
    merged: dict[tuple[str, str], dict] = {}
    for p in params:
        p = resolve_reference(p, ctx)
        if not isinstance(p, dict) or "name" not in p:
            continue
        merged[(p["name"], p.get("in", "query"))] = p

    result = []
    for p in merged.values():
        schema = resolve_all(p.get("schema") or {}, ctx)
        constraints = {}
        for key in ("minimum", "maximum", "minLength", "maxLength", "pattern", "enum"):
            if key in schema:
                constraints[key] = schema[key]

        location = p.get("in", "query")
        param_type = schema.get("type")
        result.append(
            Param(
                name=p["name"],
                location=location,
                required=location == "path" or p.get("required", False),
                param_type=param_type if isinstance(param_type, str) else "string",
                description=p.get("description", ""),
                constraints=constraints,
                example=_param_example(p, schema),
            )
        )
    return result


def _param_example(param: dict, schema: dict):
    example = param.get("example")
    if example is None:
        example = schema.get("example")
    if example is not None or param.get("in") != "header":
        return example

    enum = schema.get("enum")
    if isinstance(enum, list) and enum:
        return enum[0]

    name = param["name"].lower()
    if name in HEADER_EXAMPLES:
        return HEADER_EXAMPLES[name]
    if "token" in name:
        return "{{ token }}"
    if "key" in name:
        return "{{ apiKey }}"
    return "example-value"


def _parse_responses(responses: dict) -> dict:
    result = {}
    for status_code, resp in responses.items():
        description = resp.get("description", "") if isinstance(resp, dict) else ""
        result[str(status_code)] = {"description": description}
    return result
