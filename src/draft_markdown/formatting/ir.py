"""Intermediate Representation for rich-text content.

This module defines the immutable document model that the renderer
consumes: blocks of text carrying inline style ranges, entity ranges and
block-level style data, plus the entity map they reference. Every type
can be built from the raw JSON shape produced by Draft.js ``convertToRaw``.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union


EntityKey = Union[int, str]


# =============================================================================
# Block Types
# =============================================================================

class BlockType:
    """Block type names understood by the renderer."""

    UNSTYLED = "unstyled"
    HEADER_ONE = "header-one"
    HEADER_TWO = "header-two"
    HEADER_THREE = "header-three"
    HEADER_FOUR = "header-four"
    HEADER_FIVE = "header-five"
    HEADER_SIX = "header-six"
    UNORDERED_LIST_ITEM = "unordered-list-item"
    ORDERED_LIST_ITEM = "ordered-list-item"
    BLOCKQUOTE = "blockquote"

    LIST_TYPES = frozenset({UNORDERED_LIST_ITEM, ORDERED_LIST_ITEM})


# Markdown symbol written in front of each block type
BLOCK_TYPE_PREFIXES: Mapping[str, str] = MappingProxyType({
    BlockType.UNSTYLED: "",
    BlockType.HEADER_ONE: "# ",
    BlockType.HEADER_TWO: "## ",
    BlockType.HEADER_THREE: "### ",
    BlockType.HEADER_FOUR: "#### ",
    BlockType.HEADER_FIVE: "##### ",
    BlockType.HEADER_SIX: "###### ",
    BlockType.UNORDERED_LIST_ITEM: "- ",
    BlockType.ORDERED_LIST_ITEM: "1. ",
    BlockType.BLOCKQUOTE: "> ",
})


def get_block_prefix(block_type: Optional[str]) -> str:
    """Return the markdown symbol for a block type ("" when unknown)."""
    if not block_type:
        return ""
    return BLOCK_TYPE_PREFIXES.get(block_type, "")


def is_list(block_type: Optional[str]) -> bool:
    """Check if a block type is an ordered or unordered list item."""
    return block_type in BlockType.LIST_TYPES


def format_value(value: Any) -> str:
    """Format a data value the way it reads in the JSON it came from.

    Booleans become true/false, None becomes null and whole floats drop
    their fractional part, so {"bold": True} renders as "bold:true;".
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class MissingEntityError(KeyError):
    """An entity range references a key absent from the entity map."""

    def __init__(self, key: EntityKey) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Entity {self.key!r} not found in entity map"


# =============================================================================
# Ranges and Entities
# =============================================================================

@dataclass(frozen=True)
class InlineStyleRange:
    """A half-open range of characters carrying one inline style tag.

    Attributes:
        style: Raw style tag, e.g. "BOLD" or "color-#ff0000"
        offset: Index of the first styled character
        length: Number of styled characters
    """

    style: str
    offset: int
    length: int

    @property
    def end(self) -> int:
        return self.offset + self.length

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "InlineStyleRange":
        return cls(
            style=str(raw["style"]),
            offset=int(raw["offset"]),
            length=int(raw["length"]),
        )


@dataclass(frozen=True)
class EntityRange:
    """A half-open range of characters bound to an entity.

    Attributes:
        key: Key of the entity in the document's entity map
        offset: Index of the first character
        length: Number of characters
    """

    key: EntityKey
    offset: int
    length: int

    @property
    def end(self) -> int:
        return self.offset + self.length

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "EntityRange":
        return cls(
            key=raw["key"],
            offset=int(raw["offset"]),
            length=int(raw["length"]),
        )


@dataclass(frozen=True)
class Entity:
    """An out-of-line object (link, mention, image) referenced by text.

    Attributes:
        type: Entity type, "LINK", "MENTION", "IMAGE" or anything else
        data: Entity payload (``url`` for links, ``src`` for images)
    """

    type: str
    data: Mapping[str, Any] = field(default_factory=dict)

    @property
    def url(self) -> str:
        return format_value(self.data.get("url", ""))

    @property
    def src(self) -> str:
        return format_value(self.data.get("src", ""))

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "Entity":
        return cls(
            type=str(raw.get("type", "")),
            data=dict(raw.get("data") or {}),
        )


# =============================================================================
# Blocks and Documents
# =============================================================================

@dataclass(frozen=True)
class Block:
    """One paragraph, heading, list item or quote of a document.

    Attributes:
        text: Plain text of the block
        type: Block type name (see BlockType)
        depth: Nesting depth, used to indent list items
        inline_style_ranges: Style ranges, free to overlap each other
        entity_ranges: Entity ranges, sorted by offset and non-overlapping
        data: Block-level style properties (CSS name -> value)
        key: Draft.js block key
    """

    text: str = ""
    type: str = BlockType.UNSTYLED
    depth: int = 0
    inline_style_ranges: tuple[InlineStyleRange, ...] = ()
    entity_ranges: tuple[EntityRange, ...] = ()
    data: Mapping[str, Any] = field(default_factory=dict)
    key: str = ""

    @property
    def is_atomic(self) -> bool:
        """Check if the block is only an entity reference with no text."""
        return len(self.entity_ranges) > 0 and not self.text

    @property
    def is_list(self) -> bool:
        return is_list(self.type)

    @property
    def prefix(self) -> str:
        """Get the markdown symbol for this block's type."""
        return get_block_prefix(self.type)

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "Block":
        return cls(
            text=str(raw.get("text") or ""),
            type=str(raw.get("type") or BlockType.UNSTYLED),
            depth=int(raw.get("depth") or 0),
            inline_style_ranges=tuple(
                InlineStyleRange.from_raw(r)
                for r in raw.get("inlineStyleRanges") or []
            ),
            entity_ranges=tuple(
                EntityRange.from_raw(r) for r in raw.get("entityRanges") or []
            ),
            data=dict(raw.get("data") or {}),
            key=str(raw.get("key") or ""),
        )


@dataclass(frozen=True)
class ContentState:
    """Complete document: ordered blocks plus the entity map they share.

    Attributes:
        blocks: Blocks in document order
        entity_map: Entity key -> Entity (string keys when built from raw)
    """

    blocks: tuple[Block, ...] = ()
    entity_map: Mapping[EntityKey, Entity] = field(default_factory=dict)

    def entity(self, key: EntityKey) -> Entity:
        """Look up an entity by key.

        Raw content uses integer keys on ranges and string keys in the
        entity map, so both spellings resolve to the same entity.

        Raises:
            MissingEntityError: If the key is not in the entity map
        """
        for candidate in (key, str(key)):
            if candidate in self.entity_map:
                return self.entity_map[candidate]
        raise MissingEntityError(key)

    @classmethod
    def from_raw(cls, raw: Optional[Mapping[str, Any]]) -> "ContentState":
        """Build a document from raw ``{"blocks": [...], "entityMap": {...}}``."""
        if not raw:
            return cls()
        entity_map = raw.get("entityMap") or {}
        return cls(
            blocks=tuple(Block.from_raw(b) for b in raw.get("blocks") or []),
            entity_map={
                str(key): Entity.from_raw(value)
                for key, value in entity_map.items()
            },
        )
