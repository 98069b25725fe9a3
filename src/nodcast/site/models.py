"""Data models for the podcast site document and rendered pages."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class PageKind(str, Enum):
    """Kind of page the renderer can produce."""

    HOME = "home"
    CATEGORY = "category"


class PodcastInfo(BaseModel):
    """Show-level information displayed in headers and footers."""

    model_config = ConfigDict(frozen=True)

    title: str
    tagline: str
    description: str
    rss_feed: str
    contact_email: str


class Category(BaseModel):
    """A named grouping of episodes with display styling.

    Display fields default to empty strings; a missing ``color`` only
    surfaces when that category's banner is rendered.

    Attributes:
        key: Unique id, taken from the key in the document's category mapping
        title: Display title
        description: Short description for cards and banners
        icon: Icon token (usually an emoji)
        color: Hex color string, e.g. "#4a90e2"
    """

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    key: str
    title: str = ""
    description: str = ""
    icon: str = ""
    color: str = ""


class Episode(BaseModel):
    """A single episode listed on a category page.

    Only the fields used for filtering and aggregates are looked at closely;
    display fields default to empty strings so one sparse episode doesn't
    take the whole document down. An empty ``duration`` fails later, when
    stats are computed.
    """

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    category: str = ""
    episode_number: int | str = ""
    title: str = ""
    duration: str = ""  # "NN min"
    format: str = ""
    focus: str = ""
    description: str = ""
    audio_file: str = ""
    technique_details: dict[str, str] | None = None

    @field_validator("technique_details", mode="before")
    @classmethod
    def _stringify_details(cls, value: Any) -> Any:
        """Render non-string detail values (numbers, flags) as text."""
        if isinstance(value, dict):
            return {
                str(label): item if isinstance(item, str) else str(item)
                for label, item in value.items()
            }
        return value


class Document(BaseModel):
    """The site data document.

    ``episodes`` is None when the source document omitted it entirely,
    which the renderer treats as content being unavailable.
    """

    model_config = ConfigDict(frozen=True)

    podcast: PodcastInfo
    categories: dict[str, Category] = Field(default_factory=dict)
    episodes: list[Episode] | None = None

    @model_validator(mode="before")
    @classmethod
    def _inject_category_keys(cls, data: Any) -> Any:
        """Copy each mapping key into its category as ``key``."""
        if isinstance(data, dict) and isinstance(data.get("categories"), dict):
            categories = {}
            for key, value in data["categories"].items():
                if isinstance(value, dict):
                    value = {**value, "key": key}
                categories[key] = value
            data = {**data, "categories": categories}
        return data

    @classmethod
    def fallback(cls) -> "Document":
        """Built-in minimal document used when loading fails."""
        return cls(
            podcast=PodcastInfo(
                title="Nodcast",
                tagline="Evidence-Based Relaxation for Better Sleep",
                description="Content temporarily unavailable. Please check back soon.",
                rss_feed="nodcast_rss/feed.xml",
                contact_email="contact@nodcast.com",
            ),
            categories={},
            episodes=[],
        )

    def episodes_in(self, category_key: str) -> list[Episode]:
        """Episodes belonging to a category, in document order."""
        return [ep for ep in self.episodes or [] if ep.category == category_key]


class PageFragments(BaseModel):
    """The three top-level HTML fragments of a rendered page."""

    header: str
    main: str
    footer: str


class Redirect(BaseModel):
    """Outcome telling the host page to navigate elsewhere instead of rendering."""

    location: str = "index.html"
