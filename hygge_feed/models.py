"""
Data models for the hygge feed.

Uses Pydantic for validation and serialization. Field names are the
wire/storage names shared with ingestion, scoring and feed assembly,
so they are kept verbatim (including the camelCase ones).
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    TypeAdapter,
    field_validator,
    model_validator,
)

# Bumped whenever a variant gains or loses fields.
SCHEMA_VERSION = 3


class MediaType(str, Enum):
    """Discriminant of a content item. Values are wire strings, never reuse one."""
    ARTICLE = "article"
    VIDEO = "video"
    AUDIO = "audio"
    POST = "post"
    BUSINESS = "business"
    EVENT = "event"
    UPDATE = "update"
    WEATHER = "weather"
    MOVIE = "movie"


class JigsawLayout(str, Enum):
    """Layout hint for the jigsaw feed renderer."""
    PROMINENT = "prominent"
    AVERAGE = "average"
    MINOR = "minor"


class InteractionType(str, Enum):
    """What a user did with a content item."""
    VIEW = "view"
    LIKE = "like"
    SHARE = "share"
    COMMENT = "comment"
    FOLLOW = "follow"
    PURCHASE = "purchase"
    SAVE = "save"


WeightMap = dict[InteractionType, float]


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, use_enum_values=True)


# ============================================
# CONTENT TAXONOMY
# ============================================

class Category(_FrozenModel):
    """A content category a user can subscribe to."""
    name: str
    category_id: str
    icon_name: str
    subscribed: bool | None = None


class NewsSource(_FrozenModel):
    """Attribution record for an article, owned by ingestion."""
    link: str
    category_id: str
    source_id: str
    name: str
    logo_url: str
    color_hex: str


class ContentItem(_FrozenModel):
    """
    Base shape shared by every piece of feed content.

    Items whose media type has no dedicated variant (video, audio, ...,
    or a tag this version doesn't know yet) are plain ContentItems. A
    media type that does have a variant can't be carried by the base
    model, so `media_type == "article"` always means the value is an
    ArticleContentItem.
    """
    id: str
    title: str
    description: str
    timestamp: datetime
    # Tags from newer producers are kept as plain strings
    media_type: MediaType | str
    tags: list[str] | None = None
    # Opaque bag for forward-compatible metadata; not interpreted here.
    additional_data: dict[str, Any] | None = None
    jigsaw_layout: JigsawLayout | None = None
    schema_version: int = SCHEMA_VERSION

    @field_validator("media_type", mode="before")
    @classmethod
    def media_type_value(cls, value):
        return value.value if isinstance(value, MediaType) else value

    @model_validator(mode="after")
    def check_variant(self):
        variant = _variant_for(self.media_type)
        if variant is not None and not isinstance(self, variant):
            raise ValueError(
                f"media_type '{self.media_type}' requires {variant.__name__}"
            )
        return self


class ArticleContentItem(ContentItem):
    """A scraped news article, hydrated with ML scores."""
    media_type: Literal["article"] = "article"

    url: str
    ingested_date: str
    image_url: str | None = None
    thumbnail_image_url: str | None = None
    authors: list[str] | None = None
    raw_tags: list[str] = Field(default_factory=list)
    date_published: str | None = None
    word_count: int | None = None
    domain: str | None = None
    excerpt: str | None = None
    news_source: NewsSource

    # Scoring (filled by the ML service)
    hygge_description: str | None = None
    hygge_score: float | None = None
    reason_for_score: str | None = None
    eta_to_read: float | None = None  # minutes
    personal_score: float | None = None
    final_score: float | None = None

    def to_preprocessed(self) -> "PreprocessedArticleData":
        """Strip the article down to what the scoring service needs."""
        return PreprocessedArticleData(
            id=self.id,
            title=self.title,
            description=self.description,
            word_count=self.word_count,
            authors=self.authors,
        )


class CastMember(_FrozenModel):
    name: str
    character: str | None = None
    profile_url: str | None = None


class CrewMember(_FrozenModel):
    name: str
    job: str
    department: str | None = None


class MovieContentItem(ContentItem):
    """A movie, as pulled from TMDb."""
    media_type: Literal["movie"] = "movie"

    tmdb_id: int | None = None
    original_title: str | None = None
    release_date: str | None = None
    runtime_minutes: int | None = None
    genres: list[str] = Field(default_factory=list)
    cast: list[CastMember] = Field(default_factory=list)
    crew: list[CrewMember] = Field(default_factory=list)

    # Audience metrics
    vote_average: float | None = None
    vote_count: int | None = None
    popularity: float | None = None

    # Imagery and theming
    poster_url: str | None = None
    backdrop_url: str | None = None
    primary_color: str | None = None
    secondary_color: str | None = None


class EventContentItem(ContentItem):
    """Something happening at a place and time."""
    media_type: Literal["event"] = "event"

    location: str
    startDate: datetime
    endDate: datetime

    @model_validator(mode="after")
    def check_dates(self):
        try:
            reversed_dates = self.endDate < self.startDate
        except TypeError:
            raise ValueError(
                "startDate and endDate must both be naive or both timezone-aware"
            ) from None
        if reversed_dates:
            raise ValueError("endDate precedes startDate")
        return self


CONTENT_VARIANTS: dict[MediaType, type[ContentItem]] = {
    MediaType.ARTICLE: ArticleContentItem,
    MediaType.MOVIE: MovieContentItem,
    MediaType.EVENT: EventContentItem,
}


def _variant_for(media_type: Any) -> type[ContentItem] | None:
    try:
        return CONTENT_VARIANTS.get(MediaType(media_type))
    except ValueError:
        return None


def _content_item_tag(value: Any) -> str:
    if isinstance(value, dict):
        media_type = value.get("media_type")
    else:
        media_type = getattr(value, "media_type", None)
    variant = _variant_for(media_type)
    # Anything without a variant, known or not, is base-only
    return MediaType(media_type).value if variant is not None else "base"


AnyContentItem = Annotated[
    Union[
        Annotated[ArticleContentItem, Tag("article")],
        Annotated[MovieContentItem, Tag("movie")],
        Annotated[EventContentItem, Tag("event")],
        Annotated[ContentItem, Tag("base")],
    ],
    Discriminator(_content_item_tag),
]

_content_item_adapter = TypeAdapter(AnyContentItem)


def parse_content_item(data: dict[str, Any]) -> ContentItem:
    """
    Build the right content item variant from raw data.

    Media types without a variant come back as a plain ContentItem.

    Raises:
        pydantic.ValidationError: If the data doesn't fit the variant.
    """
    return _content_item_adapter.validate_python(data)


# ============================================
# FEED
# ============================================

class FeedSection(_FrozenModel):
    """A named group of content items, rendered in the given order."""
    id: str
    title: str | None = None
    section_title_color: str
    contentItems: list[AnyContentItem] = Field(default_factory=list)


class UserFeed(_FrozenModel):
    """
    One page of a user's feed.

    `next_cursor` is None at the end of the feed and `has_more` should
    agree with it; see feed.check_pagination.
    """
    sections: list[FeedSection]
    next_cursor: str | None = None
    has_more: bool = False


class RedisContentItem(_FrozenModel):
    """A content item as cached in Redis."""
    id: str
    metadata: AnyContentItem


# ============================================
# INTERACTIONS
# ============================================

class Interaction(_FrozenModel):
    """A recorded user action against a content item."""
    interaction_id: str
    user_id: str
    interaction_type: InteractionType
    content_id: str
    content_details: AnyContentItem  # snapshot at interaction time
    timestamp: datetime
    duration_in_seconds: float | None = None
    interaction_data: dict[str, Any] | None = None


class ConversationMessage(_FrozenModel):
    role: Literal["user", "system", "assistant"]
    content: str


# ============================================
# CLUSTERS
# ============================================

class ArticleCluster(_FrozenModel):
    """Related articles grouped by the clustering job."""
    cluster_title: str
    cluster_uuid: str
    cluster_id: str
    article_uuids: list[str]
    articles_data: list[ArticleContentItem]
    average_hygge_score: float
    news_categories: list[str]
    score_for_user: float | None = None
    category_counts: dict[str, int] = Field(default_factory=dict)


class FeedCluster(_FrozenModel):
    """Same as ArticleCluster, but over any kind of content."""
    cluster_title: str
    cluster_uuid: str
    content_ids: list[str]
    content_items: list[AnyContentItem]
    average_hygge_score: float
    category_counts: dict[str, int] = Field(default_factory=dict)
    score_for_user: float | None = None


# ============================================
# ML EXCHANGE
# ============================================

class PreprocessedArticleData(_FrozenModel):
    """Slimmed down article sent to the scoring service."""
    id: str
    title: str
    description: str
    word_count: int | None = None
    authors: list[str] | None = None


class PostProcessedArticleData(PreprocessedArticleData):
    """What the scoring service sends back."""
    tags: list[str]
    reason: str
    improved_description: str
    hygge_score: float
    original_description: str
    eta_to_read: float
