"""Inline style kinds, per-character style vectors and run splitting."""

from dataclasses import dataclass
from enum import Enum, Flag, auto
from typing import Optional, Sequence, Union

from draft_markdown.formatting.ir import Block


class ToggleStyle(Flag):
    """On/off inline styles (combinable with |)."""

    NONE = 0
    BOLD = auto()
    ITALIC = auto()
    UNDERLINE = auto()
    STRIKETHROUGH = auto()
    CODE = auto()
    SUPERSCRIPT = auto()
    SUBSCRIPT = auto()

    def wrap(self, content: str) -> str:
        """Wrap content with the markup of a single toggle style."""
        opening, closing = TOGGLE_MARKUP[self]
        return f"{opening}{content}{closing}"


class PropertyStyle(Enum):
    """Inline styles carrying a value, keyed by their raw tag prefix."""

    COLOR = ("color-", "color")
    BGCOLOR = ("bgcolor-", "background-color")
    FONTSIZE = ("fontsize-", "font-size")
    FONTFAMILY = ("fontfamily-", "font-family")

    def __init__(self, prefix: str, css_name: str) -> None:
        self.prefix = prefix
        self.css_name = css_name


# Canonical toggle order, outermost markup first
TOGGLE_ORDER: tuple[ToggleStyle, ...] = (
    ToggleStyle.BOLD,
    ToggleStyle.ITALIC,
    ToggleStyle.UNDERLINE,
    ToggleStyle.STRIKETHROUGH,
    ToggleStyle.CODE,
    ToggleStyle.SUPERSCRIPT,
    ToggleStyle.SUBSCRIPT,
)

PROPERTY_ORDER: tuple[PropertyStyle, ...] = tuple(PropertyStyle)

TOGGLE_MARKUP: dict[ToggleStyle, tuple[str, str]] = {
    ToggleStyle.BOLD: ("**", "**"),
    ToggleStyle.ITALIC: ("*", "*"),
    ToggleStyle.UNDERLINE: ("__", "__"),
    ToggleStyle.STRIKETHROUGH: ("~~", "~~"),
    ToggleStyle.CODE: ("`", "`"),
    ToggleStyle.SUPERSCRIPT: ("<sup>", "</sup>"),
    ToggleStyle.SUBSCRIPT: ("<sub>", "</sub>"),
}

StyleKey = Union[ToggleStyle, PropertyStyle]
ParsedStyle = Union[ToggleStyle, tuple[PropertyStyle, str]]

_PROPERTY_INDEX = {prop: index for index, prop in enumerate(PROPERTY_ORDER)}
_TOGGLE_NAMES = {style.name: style for style in TOGGLE_ORDER}


def parse_style_tag(tag: str) -> Optional[ParsedStyle]:
    """Convert a raw inline style tag into a style kind.

    Returns:
        A ToggleStyle for bare names ("BOLD"), a (PropertyStyle, value)
        pair for prefixed tags ("color-red"), or None for tags that are
        not recognized.
    """
    for prop in PROPERTY_ORDER:
        if tag.startswith(prop.prefix):
            return prop, tag[len(prop.prefix):]
    return _TOGGLE_NAMES.get(tag)


@dataclass(frozen=True)
class CharacterStyle:
    """Styles applied to a single character offset.

    Attributes:
        toggles: Combined toggle flags
        properties: One value per PROPERTY_ORDER slot, None when absent
    """

    toggles: ToggleStyle = ToggleStyle.NONE
    properties: tuple[Optional[str], ...] = (None,) * len(PROPERTY_ORDER)

    def get(self, key: StyleKey) -> Union[bool, Optional[str]]:
        """Get the value of one style kind at this offset."""
        if isinstance(key, ToggleStyle):
            return key in self.toggles
        return self.properties[_PROPERTY_INDEX[key]]

    def signature(self, keys: Sequence[StyleKey]) -> tuple:
        return tuple(self.get(key) for key in keys)

    @property
    def present_properties(self) -> list[tuple[PropertyStyle, str]]:
        """Get the property styles that carry a value, in fixed order."""
        return [
            (prop, value)
            for prop, value in zip(PROPERTY_ORDER, self.properties)
            if value
        ]

    @property
    def present_toggles(self) -> list[ToggleStyle]:
        """Get the toggle styles that are on, outermost first."""
        return [style for style in TOGGLE_ORDER if style in self.toggles]


StyleVector = tuple[CharacterStyle, ...]


def build_style_vector(block: Block) -> StyleVector:
    """Expand a block's inline style ranges into one style per character.

    Ranges are applied in input order. Where two ranges of the same
    property kind cover an offset, the later range's value wins. Ranges
    reaching past the text are clipped; unrecognized tags are ignored.
    """
    length = len(block.text)
    toggles = [ToggleStyle.NONE] * length
    properties: list[list[Optional[str]]] = [
        [None] * len(PROPERTY_ORDER) for _ in range(length)
    ]

    for style_range in block.inline_style_ranges:
        parsed = parse_style_tag(style_range.style)
        if parsed is None:
            continue
        start = max(style_range.offset, 0)
        end = min(style_range.end, length)
        if isinstance(parsed, ToggleStyle):
            for i in range(start, end):
                toggles[i] |= parsed
        else:
            prop, value = parsed
            slot = _PROPERTY_INDEX[prop]
            for i in range(start, end):
                # Empty values ("color-") count as absent
                properties[i][slot] = value or None

    return tuple(
        CharacterStyle(toggles=toggles[i], properties=tuple(properties[i]))
        for i in range(length)
    )


@dataclass(frozen=True)
class StyleSection:
    """A maximal run of characters with constant styles for some key set.

    Attributes:
        start: Offset of the first character
        end: Offset past the last character
        text: The characters of the run
        style: Styles at the run's first offset
    """

    start: int
    end: int
    text: str
    style: CharacterStyle

    @property
    def toggles(self) -> ToggleStyle:
        return self.style.toggles


def split_runs(
    text: str,
    vector: StyleVector,
    keys: Sequence[StyleKey],
    start: int,
    end: int,
) -> list[StyleSection]:
    """Split text[start:end] into runs where the selected keys stay constant.

    A new run begins at ``start`` and wherever any key in ``keys`` differs
    from the previous offset. Styles outside ``keys`` never split a run.
    """
    sections: list[StyleSection] = []
    end = min(end, len(text))
    run_start = start
    previous: Optional[tuple] = None

    for i in range(start, end):
        current = vector[i].signature(keys)
        if i != start and current != previous:
            sections.append(
                StyleSection(run_start, i, text[run_start:i], vector[run_start])
            )
            run_start = i
        previous = current

    if run_start < end:
        sections.append(
            StyleSection(run_start, end, text[run_start:end], vector[run_start])
        )
    return sections


# Key sets for the two nesting levels of rendering
TOGGLE_KEYS: tuple[StyleKey, ...] = TOGGLE_ORDER
PROPERTY_KEYS: tuple[StyleKey, ...] = PROPERTY_ORDER
