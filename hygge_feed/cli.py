"""
Command-line interface for the hygge feed data model.

Usage:
    hygge-feed weights
    hygge-feed articles feed.json --limit 10
    hygge-feed inspect feed.json --strict
"""

import logging
from collections import Counter
from pathlib import Path

import click
from pydantic import ValidationError

from .config import get_settings
from .errors import PaginationStateError
from .feed import check_pagination, get_all_articles_from_feed
from .logs import configure_logging
from .models import UserFeed
from .weights import WEIGHTS

logger = logging.getLogger(__name__)


def _load_feed(path: str) -> UserFeed:
    """Parse a feed JSON file, turning validation errors into CLI errors."""
    try:
        return UserFeed.model_validate_json(Path(path).read_bytes())
    except ValidationError as e:
        raise click.ClickException(f"Invalid feed in {path}:\n{e}")


@click.group()
def cli():
    """Hygge feed data model tools."""
    configure_logging()


@cli.command()
def weights():
    """Show the interaction weight table."""
    click.echo("Interaction Weights")
    click.echo("=" * 40)

    for interaction_type, weight in sorted(WEIGHTS.items(), key=lambda kv: kv[1]):
        click.echo(f"  {interaction_type.value:10} {weight}")


@cli.command()
@click.argument("feed_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--limit", default=None, type=click.IntRange(min=0), help="Show at most this many articles")
def articles(feed_path: str, limit: int | None):
    """
    List the articles in a feed file, in feed order.

    Examples:
        hygge-feed articles feed.json
        hygge-feed articles feed.json --limit 5
    """
    feed = _load_feed(feed_path)
    found = get_all_articles_from_feed(feed)

    if not found:
        click.echo("No articles in feed")
        return

    shown = found if limit is None else found[:limit]
    for article in shown:
        score = f"{article.hygge_score:.1f}" if article.hygge_score is not None else "-"
        click.echo(f"[{score:>4}] {article.title[:60]}")
        click.echo(f"       {article.news_source.name} - {article.url}")

    click.echo(f"\n{len(shown)} of {len(found)} article(s)")


@cli.command()
@click.argument("feed_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--strict", is_flag=True,
              help="Fail if has_more disagrees with next_cursor")
def inspect(feed_path: str, strict: bool):
    """Summarize the sections of a feed file and check its pagination."""
    strict = strict or get_settings().feed.strict_pagination

    feed = _load_feed(feed_path)
    logger.debug("Loaded %d section(s) from %s", len(feed.sections), feed_path)

    click.echo("Feed Sections")
    click.echo("=" * 40)

    for section in feed.sections:
        counts = Counter(str(item.media_type) for item in section.contentItems)
        breakdown = ", ".join(f"{t}: {n}" for t, n in sorted(counts.items())) or "empty"
        click.echo(f"{section.title or section.id}")
        click.echo(f"  {len(section.contentItems)} item(s) ({breakdown})")

    click.echo()
    click.echo(f"has_more: {feed.has_more}, next_cursor: {feed.next_cursor}")

    try:
        consistent = check_pagination(feed, strict=strict)
    except PaginationStateError as e:
        raise click.ClickException(f"Pagination mismatch: {e}")

    if not consistent:
        click.echo("Warning: has_more disagrees with next_cursor")


if __name__ == "__main__":
    cli()
