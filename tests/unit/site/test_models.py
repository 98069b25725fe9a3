"""Tests for site data models."""

from typing import Any

import pytest
from pydantic import ValidationError

from nodcast.site.models import Category, Document, PageKind, Redirect


class TestDocument:
    """Tests for Document validation."""

    def test_category_keys_injected(self, sample_document: Document) -> None:
        assert list(sample_document.categories) == ["sleep", "breathing", "focus"]
        assert sample_document.categories["sleep"].key == "sleep"
        assert sample_document.categories["focus"].key == "focus"

    def test_technique_details_optional(self, sample_document: Document) -> None:
        assert sample_document.episodes is not None
        assert sample_document.episodes[3].technique_details is None
        assert sample_document.episodes[0].technique_details == {
            "method": "4-7-8",
            "sleep_latency": "Reduced by 15 min",
        }

    def test_missing_episodes_is_none(self, sample_document_dict: dict[str, Any]) -> None:
        del sample_document_dict["episodes"]
        document = Document.model_validate(sample_document_dict)
        assert document.episodes is None

    def test_missing_categories_defaults_empty(
        self, sample_document_dict: dict[str, Any]
    ) -> None:
        del sample_document_dict["categories"]
        document = Document.model_validate(sample_document_dict)
        assert document.categories == {}

    def test_missing_podcast_rejected(self, sample_document_dict: dict[str, Any]) -> None:
        del sample_document_dict["podcast"]
        with pytest.raises(ValidationError):
            Document.model_validate(sample_document_dict)

    def test_immutable(self, sample_document: Document) -> None:
        with pytest.raises(ValidationError):
            sample_document.podcast.title = "Changed"  # type: ignore[misc]

    def test_accepts_category_instances(self, sample_document: Document) -> None:
        category = Category(
            key="calm", title="Calm", description="d", icon="i", color="#123456"
        )
        document = Document(podcast=sample_document.podcast, categories={"calm": category})
        assert document.categories["calm"] == category

    def test_episodes_in_keeps_document_order(self, sample_document: Document) -> None:
        titles = [ep.title for ep in sample_document.episodes_in("sleep")]
        assert titles == ["Body Scan for Sleep", "Counting Waves"]

    def test_episodes_in_unknown_category(self, sample_document: Document) -> None:
        assert sample_document.episodes_in("missing") == []

    def test_fallback(self) -> None:
        document = Document.fallback()
        assert document.podcast.title == "Nodcast"
        assert document.podcast.tagline == "Evidence-Based Relaxation for Better Sleep"
        assert document.categories == {}
        assert document.episodes == []


class TestPageModels:
    """Tests for page kind and outcome models."""

    def test_page_kind_from_string(self) -> None:
        assert PageKind("home") is PageKind.HOME
        assert PageKind("category") is PageKind.CATEGORY

    def test_unknown_page_kind(self) -> None:
        with pytest.raises(ValueError):
            PageKind("about")

    def test_redirect_defaults_to_home(self) -> None:
        assert Redirect().location == "index.html"
