"""Partitioning of a block into entity and entity-free sections."""

from dataclasses import dataclass
from typing import Optional, Sequence

from draft_markdown.formatting.ir import EntityKey, EntityRange


@dataclass(frozen=True)
class EntitySection:
    """A stretch of a block bound to one entity, or to none.

    Attributes:
        start: Offset of the first character
        end: Offset past the last character
        entity_key: Key of the entity covering the section, if any
    """

    start: int
    end: int
    entity_key: Optional[EntityKey] = None

    @property
    def has_entity(self) -> bool:
        return self.entity_key is not None


def get_entity_sections(
    entity_ranges: Sequence[EntityRange],
    block_length: int,
) -> list[EntitySection]:
    """Split a block into sections with the same entity or no entity.

    Entity ranges must be sorted by offset and non-overlapping. A plain
    section that precedes an entity range ends at ``offset - 1``, so the
    character just before each entity is not part of any section.
    """
    sections: list[EntitySection] = []
    last_offset = 0

    for entity_range in entity_ranges:
        if entity_range.offset > last_offset:
            sections.append(EntitySection(last_offset, entity_range.offset - 1))
        sections.append(
            EntitySection(
                entity_range.offset,
                entity_range.end,
                entity_key=entity_range.key,
            )
        )
        last_offset = entity_range.end

    if last_offset < block_length:
        sections.append(EntitySection(last_offset, block_length))

    return sections
