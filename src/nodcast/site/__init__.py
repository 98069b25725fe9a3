"""Podcast site loading and rendering."""

from nodcast.site.builder import SiteBuilder
from nodcast.site.loader import DataLoader
from nodcast.site.models import (
    Category,
    Document,
    Episode,
    PageFragments,
    PageKind,
    PodcastInfo,
    Redirect,
)
from nodcast.site.renderer import SiteRenderer

__all__ = [
    "DataLoader",
    "SiteRenderer",
    "SiteBuilder",
    "Document",
    "PodcastInfo",
    "Category",
    "Episode",
    "PageKind",
    "PageFragments",
    "Redirect",
]
