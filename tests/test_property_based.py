from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from format_ascii.formatter import format_blocks
from format_ascii.regions import find_box_regions
from format_ascii.renderer import format_box_region

BOX_ALPHABET = "+-=|│─┌┐└┘├┤┬┴┼║═╔╗╚╝╠╣╦╩╬ ab"
NON_BORDER_ALPHABET = "|│║─═- ab"

body_strategy = st.lists(st.text(alphabet=BOX_ALPHABET, max_size=12), max_size=12)


def _fence(tag: str, body: list[str]) -> str:
    return "\n".join([f"```{tag}", *body, "```", ""])


@given(body_strategy, st.sampled_from(["text", "ascii"]))
def test_formatting_is_idempotent(body: list[str], tag: str):
    first = format_blocks(_fence(tag, body))
    second = format_blocks(first.formatted)

    assert second.changed is False
    assert second.formatted == first.formatted


@given(body_strategy)
def test_formatting_is_deterministic(body: list[str]):
    content = _fence("text", body)

    assert format_blocks(content) == format_blocks(content)


@given(st.lists(st.text(alphabet=NON_BORDER_ALPHABET, max_size=12), max_size=12))
def test_blocks_without_borders_are_untouched(body: list[str]):
    content = _fence("text", body)

    result = format_blocks(content)

    assert result.changed is False
    assert result.formatted == content


@given(body_strategy)
def test_untagged_blocks_are_untouched(body: list[str]):
    content = _fence("", body)

    result = format_blocks(content)

    assert result.changed is False
    assert result.formatted == content


@given(body_strategy)
def test_line_count_is_preserved(body: list[str]):
    content = _fence("ascii", body)

    assert format_blocks(content).formatted.count("\n") == content.count("\n")


cell_strategy = st.text(alphabet="abc xyz", max_size=8)


@given(
    st.integers(min_value=1, max_value=4).flatmap(
        lambda columns: st.lists(
            st.lists(cell_strategy, min_size=columns, max_size=columns), min_size=1, max_size=6
        )
    ),
    st.sampled_from(["", "  ", "\t"]),
)
def test_rendered_region_has_uniform_line_length(rows: list[list[str]], indent: str):
    lines = [f"{indent}+-+"]
    for cells in rows:
        lines.append(indent + "|" + "|".join(cells) + "|")
    lines.append(f"{indent}+-+")

    assert len(find_box_regions(lines)) == 1
    rendered = format_box_region(lines)

    assert len({len(line) for line in rendered}) == 1
    assert all(line.startswith(indent) for line in rendered)
