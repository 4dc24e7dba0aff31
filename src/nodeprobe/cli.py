"""Command-line interface for poking at pages with CSS selectors."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import click
import httpx
import structlog
from rich.console import Console
from rich.table import Table

from nodeprobe import __version__
from nodeprobe.config import Settings, load_settings
from nodeprobe.dom import Document, NodeList
from nodeprobe.errors import NodeProbeError
from nodeprobe.http import HttpFetcher
from nodeprobe.observability import configure_logging

console = Console()
logger = structlog.get_logger(__name__)


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def _load_document(source: str, settings: Settings, fetcher: HttpFetcher) -> Document:
    if _is_url(source):
        return fetcher.get(source).document
    path = Path(source)
    if not path.is_file():
        raise click.BadParameter(f"not a URL or readable file: {source}", param_hint="SOURCE")
    return Document.parse(
        path.read_text(encoding="utf-8"),
        backend=settings.parser.backend,
        fetcher=fetcher,
    )


def _print_values(values: Any, as_json: bool) -> None:
    if as_json:
        click.echo(json.dumps(values))
        return
    if isinstance(values, list):
        table = Table(show_header=True, header_style="bold")
        table.add_column("#", justify="right")
        table.add_column("value")
        for i, value in enumerate(values):
            table.add_row(str(i), "" if value is None else str(value))
        console.print(table)
        return
    console.print("" if values is None else values, markup=False, highlight=False)


@click.group()
@click.version_option(version=__version__)
@click.option("--config", "-c", type=click.Path(exists=True, dir_okay=False), help="Configuration file path")
@click.option(
    "--backend",
    type=click.Choice(["selectolax", "bs4"]),
    default=None,
    help="HTML parser backend (overrides the configuration)",
)
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    help="Logging level",
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[str], backend: Optional[str], log_level: Optional[str]) -> None:
    """nodeprobe - query HTML pages with CSS selectors."""
    ctx.ensure_object(dict)
    settings = load_settings(Path(config) if config else None)
    if backend:
        settings.parser.backend = backend  # type: ignore[assignment]
    if log_level:
        settings.monitoring.log_level = log_level
    configure_logging(settings.monitoring)
    ctx.obj["settings"] = settings


@cli.command()
@click.argument("source")
@click.argument("selector")
@click.option("--html", "inner_html", is_flag=True, help="Print inner HTML instead of text")
@click.option("--attr", "attribute", default=None, help="Print the value of this attribute")
@click.option("--count", "count_only", is_flag=True, help="Print only the number of matches")
@click.option("--json", "as_json", is_flag=True, help="Print values as JSON")
@click.pass_context
def select(
    ctx: click.Context,
    source: str,
    selector: str,
    inner_html: bool,
    attribute: Optional[str],
    count_only: bool,
    as_json: bool,
) -> None:
    """Print what SELECTOR matches in SOURCE (a file path or an http(s) URL)."""
    settings: Settings = ctx.obj["settings"]
    try:
        with HttpFetcher(settings) as fetcher:
            nodes: NodeList = _load_document(source, settings, fetcher).query_selector(selector)
            if count_only:
                click.echo(str(nodes.size()))
                return
            if attribute:
                values = nodes.attribute(attribute)
            elif inner_html:
                values = nodes.inner_html()
            else:
                values = nodes.text()
            _print_values(values, as_json)
    except (NodeProbeError, httpx.HTTPError) as e:
        logger.debug("select failed", source=source, selector=selector, error=str(e))
        raise click.ClickException(str(e)) from e


@cli.command()
@click.argument("source")
@click.argument("selector")
@click.pass_context
def follow(ctx: click.Context, source: str, selector: str) -> None:
    """Follow the first link SELECTOR matches in SOURCE and report where it led."""
    settings: Settings = ctx.obj["settings"]
    try:
        with HttpFetcher(settings) as fetcher:
            response = _load_document(source, settings, fetcher).query_selector(selector).follow()
            click.echo(f"{response.status_code} {response.url}")
    except (NodeProbeError, httpx.HTTPError) as e:
        logger.debug("follow failed", source=source, selector=selector, error=str(e))
        raise click.ClickException(str(e)) from e


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
