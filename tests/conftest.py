"""Shared fixtures for Nodcast tests."""

import json
from pathlib import Path
from typing import Any

import pytest

from nodcast.site.models import Document


@pytest.fixture
def sample_document_dict() -> dict[str, Any]:
    """Raw data document as it appears in episodes.json."""
    return {
        "podcast": {
            "title": "Nodcast",
            "tagline": "Sleep better tonight",
            "description": "Guided relaxation sessions.",
            "rss_feed": "nodcast_rss/feed.xml",
            "contact_email": "hello@nodcast.com",
        },
        "categories": {
            "sleep": {
                "title": "Sleep",
                "description": "Drift off gently",
                "icon": "🌙",
                "color": "#4a5fc1",
            },
            "breathing": {
                "title": "Breathing",
                "description": "Slow your breath",
                "icon": "🌬",
                "color": "#2a9d8f",
            },
            "focus": {
                "title": "Focus",
                "description": "Nothing here yet",
                "icon": "🎯",
                "color": "#000000",
            },
        },
        "episodes": [
            {
                "category": "sleep",
                "episode_number": 1,
                "title": "Body Scan for Sleep",
                "duration": "10 min",
                "format": "Guided",
                "focus": "Muscle relaxation",
                "description": "A slow scan from head to toe.",
                "audio_file": "audio/ep1.mp3",
                "technique_details": {
                    "method": "4-7-8",
                    "sleep_latency": "Reduced by 15 min",
                },
            },
            {
                "category": "sleep",
                "episode_number": 2,
                "title": "Counting Waves",
                "duration": "20 min",
                "format": "Soundscape",
                "focus": "Wind down",
                "description": "Ocean sounds with counting.",
                "audio_file": "audio/ep2.mp3",
                "technique_details": {"method": "4-7-8"},
            },
            {
                "category": "breathing",
                "episode_number": 3,
                "title": "Box Breathing",
                "duration": "5 min",
                "format": "Guided",
                "focus": "Calm",
                "description": "Four counts in, hold, out, hold.",
                "audio_file": "audio/ep3.mp3",
                "technique_details": {"method": "box"},
            },
            {
                "category": "archived",
                "episode_number": 4,
                "title": "Orphaned Episode",
                "duration": "7 min",
                "format": "Talk",
                "focus": "None",
                "description": "Its category no longer exists.",
                "audio_file": "audio/ep4.mp3",
            },
        ],
    }


@pytest.fixture
def sample_document(sample_document_dict: dict[str, Any]) -> Document:
    """Validated sample document."""
    return Document.model_validate(sample_document_dict)


@pytest.fixture
def data_file(tmp_path: Path, sample_document_dict: dict[str, Any]) -> Path:
    """Sample document written to data/episodes.json under tmp_path."""
    path = tmp_path / "data" / "episodes.json"
    path.parent.mkdir()
    path.write_text(json.dumps(sample_document_dict), encoding="utf-8")
    return path
