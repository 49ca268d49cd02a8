"""
lambda-fetch CLI — `lambda-fetch` command.

Commands:
  lambda-fetch get <uri>            Fetch a URI locally
  lambda-fetch invoke <event-file>  Run a Lambda event through the handler
"""

import asyncio
import base64
import json
from typing import Optional

try:
    import click
    from rich.console import Console
    from rich.table import Table
except ImportError:
    raise SystemExit("CLI requires extras: pip install lambda-fetch[cli]")

from lambda_fetch.config import Settings
from lambda_fetch.errors import LambdaFetchError
from lambda_fetch.fetch import fetch
from lambda_fetch.handler import FailureResponse, FetchHandler, LocalContext
from lambda_fetch.log import configure_logging
from lambda_fetch.models.request import Request

console = Console()


def _parse_header(raw: str) -> tuple[str, str]:
    name, sep, value = raw.partition(":")
    if not sep:
        raise click.BadParameter(f"expected 'Name: value', got {raw!r}")
    return name.strip(), value


def _settings(timeout: Optional[float]) -> Settings:
    settings = Settings.from_env()
    if timeout is not None:
        settings = settings.model_copy(update={"timeout": timeout})
    configure_logging(settings.log_level)
    return settings


@click.group()
@click.version_option("0.1.0")
def main():
    """lambda-fetch — fetch an HTTP(S) URI and report status, headers and body."""


@main.command("get")
@click.argument("uri")
@click.option("-H", "--header", "headers", multiple=True, help="Request header as 'Name: value'.")
@click.option("--timeout", type=float, default=None, help="Per-phase timeout in seconds.")
@click.option("--raw", is_flag=True, help="Print the result as JSON with the body still base64.")
def get_cmd(uri: str, headers: tuple[str, ...], timeout: Optional[float], raw: bool):
    """GET a URI through the fetch pipeline."""
    settings = _settings(timeout)
    request = Request(uri=uri, headers=dict(_parse_header(h) for h in headers))

    try:
        with console.status(f"Fetching {uri}..."):
            result = asyncio.run(fetch(request, settings=settings))
    except LambdaFetchError as e:
        console.print(f"[red]{e.code}: {e.message}[/red]")
        raise SystemExit(1)

    if raw:
        click.echo(result.model_dump_json(indent=2))
        return

    colour = "green" if result.status < 400 else "yellow"
    console.print(f"[{colour}]HTTP {result.status}[/{colour}]")
    table = Table("Header", "Value")
    for name, value in sorted(result.headers.items()):
        table.add_row(name, value)
    console.print(table)
    console.print(base64.b64decode(result.body).decode("utf-8", errors="replace"), markup=False, highlight=False)


@main.command("invoke")
@click.argument("event_file", type=click.File("r"))
@click.option("--timeout", type=float, default=60.0, help="Simulated Lambda timeout in seconds.")
def invoke_cmd(event_file, timeout: float):
    """Run a JSON event file through the Lambda handler."""
    try:
        event = json.load(event_file)
    except json.JSONDecodeError as e:
        console.print(f"[red]Invalid event JSON: {e}[/red]")
        raise SystemExit(1)

    handler = FetchHandler(_settings(None))
    try:
        envelope = handler(event, LocalContext(timeout=timeout))
    except FailureResponse as e:
        click.echo(e.to_envelope().model_dump_json(indent=2))
        raise SystemExit(1)
    click.echo(json.dumps(envelope, indent=2))


if __name__ == "__main__":
    main()
