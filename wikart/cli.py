"""Command line interface for wiki articles."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Any, Optional

import click
import yaml  # type: ignore

from wikart import parser
from wikart.config import Settings
from wikart.errors import MalformedDocumentError, RegistryLoadError
from wikart.json_utils import article_to_dict, json_dumps, registry_to_dict
from wikart.registry import ArticleRegistry, load_directory
from wikart.xlsx import write_workbook

try:
    __version__ = version("wikart")
except PackageNotFoundError:
    __version__ = "0.0.1-dev"

# Mapping from format names to file extensions.
EXTENSIONS = {"json": ".json", "yaml": ".yaml", "xlsx": ".xlsx"}


@click.group()
@click.option("--debug/--no-debug", default=False)
@click.option("--trace/--no-trace", default=False)
@click.option(
    "--log-file",
    type=click.Path(file_okay=True, dir_okay=False),
    envvar="WIKART_LOG_FILE",
)
@click.option(
    "--articles-dir",
    type=click.Path(file_okay=False, dir_okay=True),
    envvar="WIKART_ARTICLES",
    default=None,
    help="Directory holding the wiki documents.",
)
@click.version_option(__version__, prog_name="wikart")
@click.pass_context
def cli(
    ctx: click.Context,
    debug: bool,
    trace: bool,
    log_file: Optional[str] = None,
    articles_dir: Optional[str] = None,
) -> None:
    """Configure logging and load settings.

    Args:
        ctx: Click context object.
        debug: Toggle debug logging.
        trace: Toggle trace logging.
        log_file: Optional path to the log file.
        articles_dir: Directory holding the wiki documents.
    """
    try:
        settings = Settings.from_env()
    except ValueError as exc:
        raise click.ClickException(f"Invalid settings: {exc}") from exc
    if log_file:
        settings.log_file = log_file
    if articles_dir:
        settings.articles_dir = Path(articles_dir)

    if trace:
        level = 1
    elif debug:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        filename=settings.log_file,
        level=level,
        format="[%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    if trace:
        logging.debug("Trace mode is on")
    if debug:
        logging.debug("Debug mode is on")

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


def _load_registry(ctx: click.Context) -> ArticleRegistry:
    """Build the registry from the configured articles directory."""

    settings: Settings = ctx.obj["settings"]
    try:
        return load_directory(settings.articles_dir)
    except FileNotFoundError as exc:
        raise click.ClickException(str(exc)) from exc
    except RegistryLoadError as exc:
        raise click.ClickException(f"Failed to load articles: {exc}") from exc


def _emit(data: Any, output_format: str, path: Optional[Path]) -> None:
    """Write ``data`` as JSON or YAML to ``path`` or the console."""

    if output_format == "yaml":
        content = yaml.safe_dump(data, allow_unicode=True, sort_keys=False)
    else:
        content = json_dumps(data, indent=True)

    if path:
        path.write_text(content, encoding="utf-8")
    else:
        click.echo(content)


@cli.command()
@click.argument(
    "document", type=click.Path(exists=True, file_okay=True, dir_okay=False)
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(file_okay=True, dir_okay=True),
    default=None,
    help="Write output to FILE or DIRECTORY instead of the console.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"]),
    default="json",
    help="Output format.",
)
def convert(
    document: str,
    output_path: Optional[str] = None,
    output_format: str = "json",
) -> None:
    """Parse a single wiki document into structured data.

    Args:
        document: Path of the markup file to parse.
        output_path: Optional file or directory path for the converted data.
            If a directory is provided, the file name is derived from the
            document name.
        output_format: Format of the converted data.
    """

    source = Path(document)
    try:
        text = source.read_text(encoding="utf-8", errors="replace")
        article = parser.parse_article(text)
    except MalformedDocumentError as exc:
        raise click.ClickException(f"{source}: {exc}") from exc

    final_path: Optional[Path] = None
    if output_path:
        final_path = Path(output_path)
        if final_path.is_dir():
            final_path = final_path / f"{source.stem}{EXTENSIONS[output_format]}"

    _emit(article_to_dict(article), output_format, final_path)


@cli.command()
@click.argument("key")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"]),
    default="json",
    help="Output format.",
)
@click.pass_context
def show(ctx: click.Context, key: str, output_format: str = "json") -> None:
    """Print the article stored under ``key``."""

    registry = _load_registry(ctx)
    article = registry.lookup(key)
    if article is None:
        raise click.ClickException(f"No article named {key!r}")

    _emit(article_to_dict(article), output_format, None)


@cli.command()
@click.argument("query", default="")
@click.option(
    "--limit",
    type=int,
    default=None,
    help="Maximum number of titles (at most 25).",
)
@click.pass_context
def search(ctx: click.Context, query: str, limit: Optional[int] = None) -> None:
    """Print article titles containing ``query``."""

    settings: Settings = ctx.obj["settings"]
    registry = _load_registry(ctx)
    titles = registry.search(
        query, settings.search_limit if limit is None else limit
    )
    for title in titles:
        click.echo(title)


@cli.command()
@click.argument("output_path", type=click.Path(file_okay=True, dir_okay=True))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml", "xlsx"]),
    default="json",
    help="Output format.",
)
@click.pass_context
def export(ctx: click.Context, output_path: str, output_format: str) -> None:
    """Export every article of the registry.

    Args:
        ctx: Click context object.
        output_path: File or directory receiving the export. A directory
            gets an ``articles`` file with the matching extension.
        output_format: Format of the exported data.
    """

    registry = _load_registry(ctx)

    final_path = Path(output_path)
    if final_path.is_dir():
        final_path = final_path / f"articles{EXTENSIONS[output_format]}"

    if output_format == "xlsx":
        write_workbook(registry, final_path)
    else:
        _emit(registry_to_dict(registry), output_format, final_path)

    click.echo(f"Exported {len(registry)} articles to {final_path}")
