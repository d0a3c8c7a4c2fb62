"""CLI entry point for openapi-codegen."""

import asyncio
import json
from pathlib import Path

import click
import yaml

from openapi_codegen.core.config import ClientConfig
from openapi_codegen.core.errors import ApiError
from openapi_codegen.core.models import ApiRequestOptions
from openapi_codegen.core.request import request
from openapi_codegen.parser.detect import detect_version
from openapi_codegen.parser.swagger import load_document, parse_enums


def _parse_pairs(pairs: tuple[str, ...], sep: str, option: str) -> list[tuple[str, str]]:
    """Split ``key<sep>value`` option values."""
    result = []
    for pair in pairs:
        key, found, value = pair.partition(sep)
        if not found or not key.strip():
            raise click.BadParameter(f"expected KEY{sep}VALUE, got {pair!r}", param_hint=option)
        result.append((key.strip(), value.strip()))
    return result


def _build_query(pairs: list[tuple[str, str]]) -> dict[str, str | list[str]]:
    """Group repeated keys into lists, keeping first-seen key order."""
    query: dict[str, str | list[str]] = {}
    for key, value in pairs:
        if key not in query:
            query[key] = value
        elif isinstance(query[key], list):
            query[key].append(value)
        else:
            query[key] = [query[key], value]
    return query


@click.group()
def main():
    """OpenAPI codegen: request runtime and enum extension tooling."""
    pass


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Write the enums YAML to this file instead of stdout.")
def enums(doc_path: Path, output: Path | None):
    """Dump every enum in an OpenAPI/Swagger document, x-enum-* extensions applied."""
    doc = load_document(doc_path)
    if detect_version(doc) is None:
        raise click.ClickException(f"{doc_path} is not an OpenAPI or Swagger document")

    found = parse_enums(doc)
    data = {name: [m.model_dump() for m in members] for name, members in found.items()}
    text = yaml.safe_dump(data, sort_keys=False, allow_unicode=True)

    if output is None:
        click.echo(text, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    click.echo(f"{len(found)} enums saved to {output}")


@main.command("request")
@click.argument("method")
@click.argument("path")
@click.option("--base-url", envvar="API_BASE_URL", default="", help="Base URL prepended to PATH.")
@click.option("--token", envvar="API_TOKEN", default="", help="Bearer token for the Authorization header.")
@click.option("-q", "--query", multiple=True, help="Query parameter as KEY=VALUE, repeatable.")
@click.option("-H", "--header", multiple=True, help="Request header as NAME:VALUE, repeatable.")
@click.option("--data", default=None, help="Request body text.")
@click.option("--json", "as_json", is_flag=True, help="Parse --data as JSON.")
@click.option("--response-header", default=None, help="Return this response header instead of the body.")
def request_command(
    method: str,
    path: str,
    base_url: str,
    token: str,
    query: tuple[str, ...],
    header: tuple[str, ...],
    data: str | None,
    as_json: bool,
    response_header: str | None,
):
    """Send a single request and print the result as JSON."""
    body = data
    if data is not None and as_json:
        try:
            body = json.loads(data)
        except json.JSONDecodeError as e:
            raise click.BadParameter(f"invalid JSON: {e}", param_hint="--data")

    options = ApiRequestOptions(
        method=method.upper(),
        path=path,
        query=_build_query(_parse_pairs(query, "=", "--query")) or None,
        headers=dict(_parse_pairs(header, ":", "--header")) or None,
        body=body,
        response_header=response_header,
    )
    config = ClientConfig.from_env().model_copy(update={"base": base_url, "token": token})

    try:
        result = asyncio.run(request(options, config))
    except ApiError as e:
        raise click.ClickException(f"{e.status} {e}")

    click.echo(result.model_dump_json(indent=2))
