import numpy as np
import pytest

from textjustify import TextColumn, TextFragmenter
from textjustify.fragment import word_splitter


def test_word_splitter():
    assert word_splitter("  Lorem   ipsum dolor ") == [(2, 7), (10, 15), (16, 21)]
    assert word_splitter("") == []
    assert word_splitter("   ") == []


def test_fragments_are_spans_into_text():
    text = "Lorem     ipsum    dolor"
    fragments = TextFragmenter()(text)

    assert len(fragments) == 3
    assert fragments.starts.tolist() == [0, 10, 19]
    assert fragments.ends.tolist() == [5, 15, 24]
    assert fragments.widths.tolist() == [5, 5, 5]
    assert [fragments.get_fragment_str(i) for i in range(3)] == ["Lorem", "ipsum", "dolor"]


def test_empty_text():
    fragments = TextFragmenter()("")

    assert len(fragments) == 0
    assert fragments.widths.dtype == np.int64


def test_widths_count_scalars():
    fragments = TextFragmenter()("漢字 cafe\u0301 ß")

    assert fragments.widths.tolist() == [2, 5, 1]


def test_custom_splitter():
    fragments = TextFragmenter(splitter=lambda s: [(0, 3), (4, 6)])("abc de")

    assert [fragments.get_fragment_str(i) for i in range(len(fragments))] == ["abc", "de"]


def test_invalid_spans():
    with pytest.raises(ValueError):
        TextFragmenter(splitter=lambda s: [(0, 3), (2, 6)])("abc de")

    with pytest.raises(ValueError):
        TextFragmenter(splitter=lambda s: [(0, 0)])("abc")

    with pytest.raises(ValueError):
        TextFragmenter(splitter=lambda s: [(0, 3), (4, 9)])("abc de")


def test_width_is_always_character_count():
    with pytest.raises(TypeError):
        TextFragmenter(measure=lambda s: np.full(len(s), 2))

    fragments = TextFragmenter()("ab cd ef")
    column = TextColumn(fragments, column_width=12)

    assert fragments.widths.tolist() == [2, 2, 2]
    assert column.to_list() == ["ab   cd   ef"]


def test_wide_glyphs_fill_column():
    fragments = TextFragmenter()("漢字 かな 日本語 です")
    lines = TextColumn(fragments, column_width=8).to_list()

    assert lines == ["漢字    かな", "日本語   です"]
    assert all(len(line) == 8 for line in lines)
