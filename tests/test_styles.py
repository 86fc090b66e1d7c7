"""Tests for style kinds, style vectors and run splitting."""

import pytest

from draft_markdown.formatting.ir import Block, InlineStyleRange
from draft_markdown.formatting.styles import (
    PROPERTY_KEYS,
    TOGGLE_KEYS,
    CharacterStyle,
    PropertyStyle,
    ToggleStyle,
    build_style_vector,
    parse_style_tag,
    split_runs,
)


def block_with(text: str, *ranges: tuple[str, int, int]) -> Block:
    return Block(
        text=text,
        inline_style_ranges=tuple(InlineStyleRange(s, o, n) for s, o, n in ranges),
    )


class TestParseStyleTag:
    """Tests for raw tag parsing."""

    @pytest.mark.parametrize("name", ["BOLD", "ITALIC", "CODE", "SUBSCRIPT"])
    def test_toggle_names(self, name: str):
        assert parse_style_tag(name) is ToggleStyle[name]

    @pytest.mark.parametrize(
        "tag, expected",
        [
            ("color-#ff0000", (PropertyStyle.COLOR, "#ff0000")),
            ("bgcolor-rgb(0,0,0)", (PropertyStyle.BGCOLOR, "rgb(0,0,0)")),
            ("fontsize-12px", (PropertyStyle.FONTSIZE, "12px")),
            ("fontfamily-Times New Roman", (PropertyStyle.FONTFAMILY, "Times New Roman")),
        ],
    )
    def test_property_tags(self, tag: str, expected: tuple):
        assert parse_style_tag(tag) == expected

    @pytest.mark.parametrize("tag", ["bold", "HIGHLIGHT", "NONE", "", "colour-red"])
    def test_unrecognized(self, tag: str):
        assert parse_style_tag(tag) is None


class TestBuildStyleVector:
    """Tests for expanding ranges into per-character styles."""

    def test_one_entry_per_character(self):
        vector = build_style_vector(block_with("hello"))
        assert len(vector) == 5
        assert all(style == CharacterStyle() for style in vector)

    def test_toggle_range(self):
        vector = build_style_vector(block_with("hello", ("BOLD", 1, 3)))
        assert [s.get(ToggleStyle.BOLD) for s in vector] == [
            False, True, True, True, False,
        ]

    def test_toggles_combine(self):
        vector = build_style_vector(
            block_with("ab", ("BOLD", 0, 2), ("ITALIC", 1, 1))
        )
        assert vector[0].toggles == ToggleStyle.BOLD
        assert vector[1].toggles == ToggleStyle.BOLD | ToggleStyle.ITALIC

    def test_property_value(self):
        vector = build_style_vector(block_with("ab", ("fontsize-20", 1, 1)))
        assert vector[0].get(PropertyStyle.FONTSIZE) is None
        assert vector[1].get(PropertyStyle.FONTSIZE) == "20"

    def test_same_kind_overlap_last_wins(self):
        vector = build_style_vector(
            block_with("abcd", ("color-red", 0, 3), ("color-blue", 2, 2))
        )
        assert [s.get(PropertyStyle.COLOR) for s in vector] == [
            "red", "red", "blue", "blue",
        ]

    def test_range_clipped_to_text(self):
        vector = build_style_vector(block_with("ab", ("BOLD", 1, 10)))
        assert len(vector) == 2
        assert vector[1].get(ToggleStyle.BOLD) is True

    def test_empty_property_value_is_absent(self):
        vector = build_style_vector(block_with("a", ("color-", 0, 1)))
        assert vector[0].present_properties == []

    def test_present_toggles_in_canonical_order(self):
        vector = build_style_vector(
            block_with("a", ("SUBSCRIPT", 0, 1), ("CODE", 0, 1), ("BOLD", 0, 1))
        )
        assert vector[0].present_toggles == [
            ToggleStyle.BOLD, ToggleStyle.CODE, ToggleStyle.SUBSCRIPT,
        ]


class TestSplitRuns:
    """Tests for the run splitter."""

    def test_overlapping_toggles_give_three_runs(self):
        block = block_with("abcdefg", ("BOLD", 0, 5), ("ITALIC", 2, 5))
        runs = split_runs(block.text, build_style_vector(block), TOGGLE_KEYS, 0, 7)

        assert [(r.start, r.end, r.text) for r in runs] == [
            (0, 2, "ab"), (2, 5, "cde"), (5, 7, "fg"),
        ]
        assert runs[0].toggles == ToggleStyle.BOLD
        assert runs[1].toggles == ToggleStyle.BOLD | ToggleStyle.ITALIC
        assert runs[2].toggles == ToggleStyle.ITALIC

    def test_unselected_keys_do_not_split(self):
        block = block_with("abcd", ("color-red", 0, 2), ("BOLD", 0, 4))
        vector = build_style_vector(block)

        toggle_runs = split_runs(block.text, vector, TOGGLE_KEYS, 0, 4)
        property_runs = split_runs(block.text, vector, PROPERTY_KEYS, 0, 4)

        assert len(toggle_runs) == 1
        assert [(r.start, r.end) for r in property_runs] == [(0, 2), (2, 4)]

    def test_runs_cover_sub_range(self):
        block = block_with("abcdef", ("ITALIC", 0, 3))
        runs = split_runs(block.text, build_style_vector(block), TOGGLE_KEYS, 2, 5)
        assert [(r.start, r.end) for r in runs] == [(2, 3), (3, 5)]
        assert "".join(r.text for r in runs) == "cde"

    def test_empty_range(self):
        block = block_with("abc")
        assert split_runs(block.text, build_style_vector(block), TOGGLE_KEYS, 1, 1) == []

    def test_attributes_from_first_offset(self):
        block = block_with("ab", ("color-red", 0, 1), ("color-blue", 1, 1))
        runs = split_runs(block.text, build_style_vector(block), TOGGLE_KEYS, 0, 2)
        assert len(runs) == 1
        assert runs[0].style.get(PropertyStyle.COLOR) == "red"
