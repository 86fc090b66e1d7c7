"""draft-markdown: convert rich-text content state to markdown."""

__version__ = "0.1.0"

from draft_markdown.formatting.ir import ContentState
from draft_markdown.formatting.renderer import MarkdownRenderer, draft_to_markdown

__all__ = ["ContentState", "MarkdownRenderer", "draft_to_markdown", "__version__"]
