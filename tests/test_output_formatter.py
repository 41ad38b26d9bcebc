"""Tests for output formatting."""

from __future__ import annotations

import pytest

from json2sections.output_formatter import (
    count_fragments,
    format_count,
    format_sections,
    render_fragments,
    render_outline,
)
from json2sections.schemas import Fragment, FragmentStyle, Section


@pytest.fixture
def sections() -> list[Section]:
    return [
        Section(heading="Overview", content=[Fragment(text="Strong.")], level=0),
        Section(
            heading="Details",
            content=[
                Fragment(text="Reach:", style=FragmentStyle.KEY),
                Fragment(text="high", style=FragmentStyle.VALUE),
            ],
            level=1,
        ),
    ]


class TestFormatCount:
    """Tests for format_count."""

    @pytest.mark.parametrize(
        ("count", "expected"),
        [
            (None, "N/A"),
            (0, "0"),
            (999, "999"),
            (999.9, "999"),
            (1000, "1.0K"),
            (1500, "1.5K"),
            (1_000_000, "1.0M"),
            (2_500_000, "2.5M"),
            (float("nan"), "N/A"),
            (float("inf"), "N/A"),
            (float("-inf"), "N/A"),
        ],
    )
    def test_format_count(self, count: float | None, expected: str) -> None:
        assert format_count(count) == expected


class TestFormatSections:
    """Tests for the decode digest."""

    def test_outline_indents_by_level(self, sections: list[Section]) -> None:
        assert render_outline(sections) == "Overview\n    Details"

    def test_digest(self, sections: list[Section]) -> None:
        result = format_sections(sections)

        assert result.outline == "Sections:\nOverview\n    Details"
        assert result.content == "Overview\n\nStrong.\n\nDetails\n\nReach: high"
        assert result.summary.startswith("Sections: 2\nFragments: 3\nDeepest level: 1")

    def test_empty_digest(self) -> None:
        result = format_sections([])

        assert result.content == ""
        assert result.summary.startswith("Sections: 0\nFragments: 0")

    def test_count_fragments(self, sections: list[Section]) -> None:
        assert count_fragments(sections) == 3


class TestRenderFragments:
    """Tests for render_fragments."""

    def test_quotes_are_rewrapped(self) -> None:
        fragments = [Fragment(text="said "), Fragment(text="Hello There", style=FragmentStyle.QUOTE)]
        assert render_fragments(fragments) == 'said "Hello There"'

    def test_structural_newlines_survive_inside(self) -> None:
        fragments = [
            Fragment(text="one."),
            Fragment(text="\n", style=FragmentStyle.STRUCTURAL),
            Fragment(text="two."),
        ]
        assert render_fragments(fragments) == "one.\ntwo."
