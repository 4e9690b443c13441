"""Command-line interface for readingtime."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import click
import structlog
from rich.console import Console

from readingtime import __version__
from readingtime.bot import format_reply, serve
from readingtime.config import Settings, load_settings
from readingtime.crawler import PageFetcher
from readingtime.estimator import ReadingTimeEstimator
from readingtime.exceptions import ReadingTimeError, UrlParseFailed
from readingtime.extractor import available_strategies
from readingtime.message import Message, parse_url, select_url
from readingtime.observability import configure_logging, start_metrics_server

console = Console()
logger = structlog.get_logger(__name__)


async def _fetch(url: str, settings: Settings) -> str:
    async with PageFetcher(settings.fetch) as fetcher:
        return await fetcher.fetch_html(url)


def _read_source(source: str, settings: Settings) -> str:
    path = Path(source)
    if path.is_file():
        return path.read_text(encoding="utf-8")
    candidate = parse_url(source)
    return asyncio.run(_fetch(str(candidate), settings))


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Configuration file path",
)
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (overrides LOG_LEVEL)",
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[Path], log_level: Optional[str]) -> None:
    """readingtime - estimate how long a web page takes to read."""
    settings = load_settings(config)
    if log_level:
        settings = settings.model_copy(update={"log_level": log_level.upper()})
    configure_logging(settings)
    ctx.obj = settings


@cli.command()
@click.argument("source")
@click.option("--wpm", type=click.FloatRange(min=0, min_open=True), default=None, help="Words per minute")
@click.option("--strategy", type=click.Choice(available_strategies()), default=None, help="Extraction strategy")
@click.pass_obj
def estimate(settings: Settings, source: str, wpm: Optional[float], strategy: Optional[str]) -> None:
    """Estimate the reading time of SOURCE, a URL or a local HTML file."""
    estimator = ReadingTimeEstimator.from_strategy(strategy or settings.extraction.strategy)
    try:
        html = _read_source(source, settings)
        result = estimator.estimate(html, wpm or settings.wpm)
    except ReadingTimeError as e:
        raise click.ClickException(str(e)) from e

    console.print(f"Words: {result.word_count}", highlight=False)
    console.print(format_reply(result.minutes), highlight=False)


@cli.command("pick-url")
@click.argument("text")
def pick_url(text: str) -> None:
    """Print the URL that would be analyzed for a message with TEXT."""
    try:
        candidate = select_url(Message(text=text))
        if candidate is None:
            raise UrlParseFailed(None, "no URL in message")
    except UrlParseFailed as e:
        raise click.ClickException(str(e)) from e
    console.print(str(candidate), markup=False, highlight=False, soft_wrap=True)


@cli.command()
@click.pass_obj
def run(settings: Settings) -> None:
    """Start the Telegram bot."""
    if settings.bot_token is None:
        logger.error("BOT_TOKEN not set!")
        raise click.ClickException("BOT_TOKEN not set!")
    if settings.monitoring.prometheus_port:
        start_metrics_server(settings.monitoring.prometheus_port)
        logger.info("Metrics exporter started", port=settings.monitoring.prometheus_port)
    logger.info("Configuration loaded", wpm=settings.wpm, strategy=settings.extraction.strategy)
    asyncio.run(serve(settings))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
