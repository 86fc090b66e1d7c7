"""Markdown renderer turning the content IR into markdown text.

Rendering works block by block. Each block is split into entity
sections; each entity section is split into runs of constant toggle
styles (bold, italic, ...), and each of those into runs of constant
property styles (color, font size, ...). The innermost runs are escaped
and wrapped in a styled ``<span>``, toggle markup is wrapped around
them, and finally the entity markup (link, image) around the section.
"""

import logging
from typing import Any, Mapping, Optional, Union

from draft_markdown.config import get_settings
from draft_markdown.formatting.ir import Block, ContentState, Entity, format_value
from draft_markdown.formatting.sections import EntitySection, get_entity_sections
from draft_markdown.formatting.styles import (
    PROPERTY_KEYS,
    TOGGLE_KEYS,
    TOGGLE_ORDER,
    StyleSection,
    StyleVector,
    ToggleStyle,
    build_style_vector,
    split_runs,
)

logger = logging.getLogger(__name__)

NBSP = "&nbsp;"
LINE_TERMINATOR = "\n"

_ESCAPES = {
    "\n": "\\s\\s\n",
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
}


def escape_text(text: str) -> str:
    """Escape reserved characters, each character exactly once."""
    return "".join(_ESCAPES.get(ch, ch) for ch in text)


def apply_toggle_markup(toggles: ToggleStyle, content: str) -> str:
    """Wrap content with the markup of every toggle style that is on.

    Toggles nest in canonical order with BOLD outermost, e.g. bold code
    renders as **`x`**.
    """
    for style in reversed(TOGGLE_ORDER):
        if style in toggles:
            content = style.wrap(content)
    return content


def render_property_section(section: StyleSection) -> str:
    """Escape a run's text and wrap it in a span carrying its property styles."""
    content = escape_text(section.text)
    properties = section.style.present_properties
    if not properties:
        return content
    declarations = "".join(
        f"{prop.css_name}: {value};" for prop, value in properties
    )
    return f'<span style="{declarations}">{content}</span>'


def render_entity_markup(entity: Entity, text: str) -> str:
    """Wrap text with the markup of its entity."""
    if entity.type in ("LINK", "MENTION"):
        return f"[{text}]({entity.url})"
    if entity.type == "IMAGE":
        return f"!({entity.src})"
    return text


def replace_leading_spaces(text: str) -> str:
    """Replace each leading space with a non-breaking space."""
    stripped = text.lstrip(" ")
    return NBSP * (len(text) - len(stripped)) + stripped


def replace_trailing_spaces(text: str) -> str:
    """Replace each trailing space with a non-breaking space."""
    stripped = text.rstrip(" ")
    return stripped + NBSP * (len(text) - len(stripped))


def block_style(data: Mapping[str, Any]) -> str:
    """Build an inline style string from block data, in mapping order."""
    return "".join(f"{key}:{format_value(value)};" for key, value in data.items())


class MarkdownRenderer:
    """Render a ContentState into Markdown/HTML-hybrid text."""

    def __init__(self, indent_width: Optional[int] = None) -> None:
        """Initialize the renderer.

        Args:
            indent_width: Spaces per depth level for list items
                (default from settings, normally 4)
        """
        if indent_width is None:
            indent_width = get_settings().indent_width
        self.indent_width = indent_width

    def render(self, document: Optional[ContentState]) -> str:
        """Render every block of a document, joined in document order."""
        if document is None or not document.blocks:
            return ""
        return "".join(self.render_block(block, document) for block in document.blocks)

    def render_block(self, block: Block, document: ContentState) -> str:
        """Render one block with its prefix, block style and indentation."""
        content = self.render_block_content(block, document)
        style = block_style(block.data)
        if style:
            content = f'<span style="{style}">{content}</span>'

        markdown = f"{block.prefix}{content}{LINE_TERMINATOR}"
        if block.is_list:
            markdown = " " * (block.depth * self.indent_width) + markdown
        return markdown

    def render_block_content(self, block: Block, document: ContentState) -> str:
        """Render the inline content of a block.

        Atomic blocks render only their first entity with empty content.
        Otherwise the first entity section gets its leading spaces and
        the last one its trailing spaces replaced with &nbsp;.
        """
        if block.is_atomic:
            entity = document.entity(block.entity_ranges[0].key)
            logger.debug("Block %r is atomic (%s)", block.key, entity.type)
            return render_entity_markup(entity, "")

        vector = build_style_vector(block)
        sections = get_entity_sections(block.entity_ranges, len(block.text))
        logger.debug(
            "Block %r: %d characters, %d entity sections",
            block.key,
            len(block.text),
            len(sections),
        )

        parts: list[str] = []
        for index, section in enumerate(sections):
            text = self.render_entity_section(block, vector, section, document)
            if index == 0:
                text = replace_leading_spaces(text)
            if index == len(sections) - 1:
                text = replace_trailing_spaces(text)
            parts.append(text)
        return "".join(parts)

    def render_entity_section(
        self,
        block: Block,
        vector: StyleVector,
        section: EntitySection,
        document: ContentState,
    ) -> str:
        """Render one entity section: toggle runs, property runs, entity.

        Raises:
            MissingEntityError: If the section's entity is not in the map
        """
        toggle_parts: list[str] = []
        for toggle_run in split_runs(
            block.text, vector, TOGGLE_KEYS, section.start, section.end
        ):
            property_runs = split_runs(
                block.text, vector, PROPERTY_KEYS, toggle_run.start, toggle_run.end
            )
            content = "".join(render_property_section(run) for run in property_runs)
            toggle_parts.append(apply_toggle_markup(toggle_run.toggles, content))

        text = "".join(toggle_parts)
        if section.has_entity:
            text = render_entity_markup(document.entity(section.entity_key), text)
        return text


def draft_to_markdown(
    document: Union[ContentState, Mapping[str, Any], None],
    indent_width: Optional[int] = None,
) -> str:
    """Convert a document, or its raw JSON mapping, to markdown."""
    if document is not None and not isinstance(document, ContentState):
        document = ContentState.from_raw(document)
    return MarkdownRenderer(indent_width=indent_width).render(document)
