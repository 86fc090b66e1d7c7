"""Pytest fixtures for draft-markdown tests."""

import json

import pytest
from pathlib import Path

from draft_markdown.formatting.ir import ContentState


@pytest.fixture
def sample_raw() -> dict:
    """Sample raw content state as saved by a Draft.js editor."""
    return {
        "blocks": [
            {
                "key": "a1",
                "text": "Release notes",
                "type": "header-one",
                "depth": 0,
                "inlineStyleRanges": [],
                "entityRanges": [],
                "data": {},
            },
            {
                "key": "b2",
                "text": "Read the docs now",
                "type": "unstyled",
                "depth": 0,
                "inlineStyleRanges": [
                    {"offset": 0, "length": 4, "style": "BOLD"},
                ],
                "entityRanges": [
                    {"offset": 9, "length": 4, "key": 0},
                ],
                "data": {},
            },
            {
                "key": "c3",
                "text": "nested item",
                "type": "unordered-list-item",
                "depth": 1,
                "inlineStyleRanges": [],
                "entityRanges": [],
                "data": {},
            },
            {
                "key": "d4",
                "text": "",
                "type": "atomic",
                "depth": 0,
                "inlineStyleRanges": [],
                "entityRanges": [
                    {"offset": 0, "length": 1, "key": 1},
                ],
                "data": {},
            },
        ],
        "entityMap": {
            "0": {
                "type": "LINK",
                "mutability": "MUTABLE",
                "data": {"url": "https://example.com/docs"},
            },
            "1": {
                "type": "IMAGE",
                "mutability": "IMMUTABLE",
                "data": {"src": "banner.png"},
            },
        },
    }


@pytest.fixture
def sample_markdown() -> str:
    """Expected markdown for sample_raw."""
    return (
        "# Release notes\n"
        "**Read** the[docs](https://example.com/docs) now\n"
        "    - nested item\n"
        "!(banner.png)\n"
    )


@pytest.fixture
def sample_document(sample_raw: dict) -> ContentState:
    """Sample raw content loaded into the IR."""
    return ContentState.from_raw(sample_raw)


@pytest.fixture
def tmp_json_file(tmp_path: Path, sample_raw: dict) -> Path:
    """Create a temporary raw content file for testing."""
    file_path = tmp_path / "post.json"
    file_path.write_text(json.dumps(sample_raw), encoding="utf-8")
    return file_path
