import json
from typing import Any, Dict, Tuple

import click

from .._client import MongoDBDataAPI
from .._request import MongoDBRequest
from ..models.errors import ConfigurationMissingError, MRHError


def _json_object(value: str, param_hint: str) -> Dict[str, Any]:
    try:
        parsed = json.loads(value)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"invalid JSON: {e}", param_hint=param_hint) from e
    if not isinstance(parsed, dict):
        raise click.BadParameter("expected a JSON object", param_hint=param_hint)
    return parsed


def _parse_headers(headers: Tuple[str, ...]) -> Dict[str, str]:
    parsed: Dict[str, str] = {}
    for header in headers:
        name, sep, value = header.partition("=")
        if not sep or not name:
            raise click.BadParameter(
                f"'{header}' is not in NAME=VALUE form", param_hint="--header"
            )
        parsed[name.strip()] = value.strip()
    return parsed


@click.command()
@click.argument("endpoint")
@click.option(
    "--query", "-q", default="{}", help="Per-call query as a JSON object"
)
@click.option(
    "--base-query", default="{}", help="Default query fields as a JSON object"
)
@click.option(
    "--header",
    "-H",
    "headers",
    multiple=True,
    help="Extra request header in NAME=VALUE form, may be repeated",
)
@click.option("--debug", is_flag=True, help="Log the outgoing request")
def send(
    endpoint: str,
    query: str,
    base_query: str,
    headers: Tuple[str, ...],
    debug: bool,
) -> None:
    r"""Send a single request to the MongoDB Data API and print the result.

    Connection settings are read from the environment (or a .env file).

    \b
    Examples:
        mrh send /find -q '{"collection": "books", "limit": 5}'
        mrh send /deleteOne --base-query '{"collection": "books"}' \
            -q '{"filter": {"title": "Dune"}}'
    """
    request: MongoDBRequest[str] = MongoDBRequest()
    request.endpoint = endpoint
    request.base_query = _json_object(base_query, "--base-query")
    request.query = _json_object(query, "--query")
    request.headers = _parse_headers(headers)

    ctx = click.get_current_context()
    try:
        api = MongoDBDataAPI(debug=debug)
        result = api.send_sync(request)
    except ConfigurationMissingError as e:
        click.echo(f"❌ {e.message}", err=True)
        ctx.exit(1)
    except MRHError as e:
        click.echo(e.message, err=True)
        ctx.exit(1)

    click.echo(json.dumps(result, indent=2))
