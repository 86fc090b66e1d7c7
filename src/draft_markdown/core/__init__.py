"""Core conversion logic for draft-markdown."""

from draft_markdown.core.converter import ConversionError, DocumentConverter

__all__ = [
    "ConversionError",
    "DocumentConverter",
]
