"""Formatting utilities for modelling and rendering rich-text content."""

from draft_markdown.formatting.ir import (
    BLOCK_TYPE_PREFIXES,
    Block,
    BlockType,
    ContentState,
    Entity,
    EntityRange,
    InlineStyleRange,
    MissingEntityError,
)
from draft_markdown.formatting.styles import (
    CharacterStyle,
    PropertyStyle,
    StyleSection,
    ToggleStyle,
    build_style_vector,
    split_runs,
)
from draft_markdown.formatting.sections import EntitySection, get_entity_sections
from draft_markdown.formatting.renderer import MarkdownRenderer, draft_to_markdown

__all__ = [
    "BLOCK_TYPE_PREFIXES",
    "Block",
    "BlockType",
    "ContentState",
    "Entity",
    "EntityRange",
    "InlineStyleRange",
    "MissingEntityError",
    "CharacterStyle",
    "PropertyStyle",
    "StyleSection",
    "ToggleStyle",
    "build_style_vector",
    "split_runs",
    "EntitySection",
    "get_entity_sections",
    "MarkdownRenderer",
    "draft_to_markdown",
]
