"""
Helpers for pulling typed content out of a user feed.

Everything here reads the sections already present on the UserFeed;
nothing fetches further pages. Following `next_cursor` is the caller's job.
"""

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import TypeGuard, TypeVar

from .errors import PaginationStateError
from .models import (
    ArticleContentItem,
    ContentItem,
    EventContentItem,
    MediaType,
    MovieContentItem,
    UserFeed,
)

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=ContentItem)


# ============================================
# TYPE GUARDS
# ============================================

def is_article_content_item(item: ContentItem) -> TypeGuard[ArticleContentItem]:
    return item.media_type == MediaType.ARTICLE


def is_movie_content_item(item: ContentItem) -> TypeGuard[MovieContentItem]:
    return item.media_type == MediaType.MOVIE


def is_event_content_item(item: ContentItem) -> TypeGuard[EventContentItem]:
    return item.media_type == MediaType.EVENT


# ============================================
# EXTRACTION
# ============================================

def get_content_items_by_type(
    content_items: Iterable[ContentItem],
    check_type: Callable[[ContentItem], TypeGuard[T]],
) -> list[T]:
    """
    Keep the items that pass a type guard, in their original order.

    Args:
        content_items: Mixed content items
        check_type: One of the is_*_content_item guards

    Returns:
        The matching items, narrowed to the guarded type.
    """
    return [item for item in content_items if check_type(item)]


def iter_feed_content_items(feed: UserFeed) -> Iterator[ContentItem]:
    """Yield every item of the feed, section by section, in render order."""
    for section in feed.sections:
        yield from section.contentItems


def get_all_articles_from_feed(feed: UserFeed) -> list[ArticleContentItem]:
    """All articles in the feed, section order first, then item order."""
    return get_content_items_by_type(
        iter_feed_content_items(feed), is_article_content_item
    )


def get_all_movies_from_feed(feed: UserFeed) -> list[MovieContentItem]:
    return get_content_items_by_type(
        iter_feed_content_items(feed), is_movie_content_item
    )


def get_all_events_from_feed(feed: UserFeed) -> list[EventContentItem]:
    return get_content_items_by_type(
        iter_feed_content_items(feed), is_event_content_item
    )


# ============================================
# PAGINATION
# ============================================

def check_pagination(feed: UserFeed, strict: bool = False) -> bool:
    """
    Check that `has_more` agrees with `next_cursor` being set.

    Feed assembly is supposed to keep the two in step, but nothing
    upstream enforces it.

    Args:
        feed: The feed page to check
        strict: Raise instead of warning on a mismatch

    Returns:
        True if consistent, False if not (non-strict only).

    Raises:
        PaginationStateError: On a mismatch when strict is set.
    """
    if feed.has_more == (feed.next_cursor is not None):
        return True

    if strict:
        raise PaginationStateError(feed.has_more, feed.next_cursor)

    logger.warning(
        "Inconsistent feed pagination: has_more=%s, next_cursor=%r",
        feed.has_more,
        feed.next_cursor,
    )
    return False
