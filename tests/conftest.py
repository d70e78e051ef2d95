from datetime import datetime, timezone

import pytest

from hygge_feed.models import (
    ArticleContentItem,
    ContentItem,
    EventContentItem,
    FeedSection,
    MovieContentItem,
    NewsSource,
    UserFeed,
)

NOW = datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def news_source() -> NewsSource:
    return NewsSource(
        link="https://goodnews.example",
        category_id="world",
        source_id="goodnews",
        name="Good News Daily",
        logo_url="https://goodnews.example/logo.png",
        color_hex="#ffcc00",
    )


@pytest.fixture
def make_article(news_source):
    def _make(item_id: str, **overrides) -> ArticleContentItem:
        fields = {
            "id": item_id,
            "title": f"Article {item_id}",
            "description": "Something calm happened",
            "timestamp": NOW,
            "url": f"https://goodnews.example/{item_id}",
            "ingested_date": "2024-05-01",
            "news_source": news_source,
        }
        fields.update(overrides)
        return ArticleContentItem(**fields)
    return _make


@pytest.fixture
def make_movie():
    def _make(item_id: str, **overrides) -> MovieContentItem:
        fields = {
            "id": item_id,
            "title": f"Movie {item_id}",
            "description": "A cosy film",
            "timestamp": NOW,
            "genres": ["Drama"],
            "vote_average": 7.9,
        }
        fields.update(overrides)
        return MovieContentItem(**fields)
    return _make


@pytest.fixture
def make_event():
    def _make(item_id: str, **overrides) -> EventContentItem:
        fields = {
            "id": item_id,
            "title": f"Event {item_id}",
            "description": "Candle making workshop",
            "timestamp": NOW,
            "location": "Copenhagen",
            "startDate": datetime(2024, 6, 1, 18, 0, tzinfo=timezone.utc),
            "endDate": datetime(2024, 6, 1, 20, 0, tzinfo=timezone.utc),
        }
        fields.update(overrides)
        return EventContentItem(**fields)
    return _make


@pytest.fixture
def make_item():
    def _make(item_id: str, media_type: str = "video", **overrides) -> ContentItem:
        fields = {
            "id": item_id,
            "title": f"Item {item_id}",
            "description": "Plain content",
            "timestamp": NOW,
            "media_type": media_type,
        }
        fields.update(overrides)
        return ContentItem(**fields)
    return _make


@pytest.fixture
def mixed_feed(make_article, make_movie, make_event, make_item) -> UserFeed:
    return UserFeed(
        sections=[
            FeedSection(
                id="top",
                title="Top stories",
                section_title_color="#223344",
                contentItems=[make_article("x"), make_movie("y")],
            ),
            FeedSection(
                id="more",
                title=None,
                section_title_color="#556677",
                contentItems=[make_item("v"), make_article("z"), make_event("e")],
            ),
        ],
        next_cursor="cursor-2",
        has_more=True,
    )
