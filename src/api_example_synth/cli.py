"""CLI entry point for api-example-synth."""

import fnmatch
import json
from pathlib import Path

import click
import yaml

from api_example_synth import config
from api_example_synth.logging_config import setup_logging
from api_example_synth.parser.base import ApiEndpoint, render_example
from api_example_synth.parser.swagger import load_document, parse_document
from api_example_synth.schema.context import SpecContext
from api_example_synth.schema.heuristics import FormatHeuristics
from api_example_synth.schema.resolver import resolve_all
from api_example_synth.schema.synthesizer import ExampleSynthesizer


def _load(doc_path: Path) -> dict:
    try:
        return load_document(doc_path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise click.ClickException(f"Cannot load {doc_path}: {e}") from e


def _make_synthesizer(seed: int | None) -> ExampleSynthesizer:
    if seed is None:
        seed = config.DEFAULT_SEED
    heuristics = FormatHeuristics() if seed is None else FormatHeuristics.seeded(seed)
    return ExampleSynthesizer(heuristics=heuristics)


def _filter_endpoints(endpoints: list[ApiEndpoint], patterns: tuple[str, ...]) -> list[ApiEndpoint]:
    """Keep endpoints matching any of "METHOD /glob" or "/glob"."""
    if not patterns:
        return endpoints

    result = []
    for ep in endpoints:
        for pattern in patterns:
            method, _, path_glob = pattern.strip().rpartition(" ")
            if method and method.upper() != ep.method:
                continue
            if fnmatch.fnmatchcase(ep.path, path_glob):
                result.append(ep)
                break
    return result


def _render_markdown(endpoints: list[ApiEndpoint]) -> str:
    sections = []
    for ep in endpoints:
        body = ep.request_body
        if body is None:
            continue
        lang = "json" if "json" in body.content_type else ""
        sections.append(
            f"## {ep.method} {ep.path}\n\n"
            f"- Content-Type: `{body.content_type}`\n"
            f"- Required: {'yes' if body.required else 'no'}\n\n"
            f"```{lang}\n{body.example_text}\n```"
        )
    return "\n\n".join(sections) + "\n" if sections else ""


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """API Example Synth: resolve $ref pointers and synthesize request body examples."""
    setup_logging(verbose)


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
@click.option("-e", "--endpoint", "patterns", multiple=True, help='Only endpoints matching "METHOD /path*" or "/path*".')
@click.option("--seed", type=int, default=None, help="Seed for reproducible filler values.")
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None, help="Write the Markdown to this file.")
def bodies(doc_path: Path, patterns: tuple[str, ...], seed: int | None, output: Path | None):
    """Generate example request bodies for every endpoint in an OpenAPI document."""
    doc = _load(doc_path)
    endpoints = parse_document(doc, synthesizer=_make_synthesizer(seed), source=doc_path.name)
    endpoints = _filter_endpoints(endpoints, patterns)
    with_body = [ep for ep in endpoints if ep.request_body is not None]
    markdown = _render_markdown(with_body)

    if output is None:
        click.echo(markdown, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(markdown, encoding="utf-8")
    click.echo(f"Wrote {len(with_body)} request bodies to {output}")


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
@click.argument("pointer")
def resolve(doc_path: Path, pointer: str):
    """Print the schema at POINTER with every $ref resolved."""
    ctx = SpecContext(document=_load(doc_path), source=doc_path.name)
    schema = resolve_all({"$ref": pointer}, ctx)
    click.echo(json.dumps(schema, indent=2, ensure_ascii=False, default=str))


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
@click.argument("pointer")
@click.option("--seed", type=int, default=None, help="Seed for reproducible filler values.")
def example(doc_path: Path, pointer: str, seed: int | None):
    """Print a synthesized example for the schema at POINTER."""
    ctx = SpecContext(document=_load(doc_path), source=doc_path.name)
    schema = resolve_all({"$ref": pointer}, ctx)
    value = _make_synthesizer(seed).synthesize(schema)
    if value is None:
        value = config.fallback_example()
    click.echo(render_example(value))
