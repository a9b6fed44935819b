import pytest

from pinyintable.lookup_table import LookupTable, Orientation, Text


def make_table(count=7, page_size=3, round=False):
    table = LookupTable(page_size=page_size, round=round)
    for n in range(count):
        table.append_candidate(f"c{n}")
    return table


def test_text_append_attribute():
    text = Text("hello")
    text.append_attribute(1, 2, 0, 5)
    assert [tuple(a) for a in text.attributes] == [(1, 2, 0, 5)]
    assert str(text) == "hello"


def test_append_candidate_coerces_str():
    table = make_table(count=2)
    assert len(table) == 2
    assert table.candidate(1) == Text("c1")


def test_append_candidate_rejects_other_types():
    with pytest.raises(TypeError):
        LookupTable().append_candidate(42)


def test_candidate_out_of_range():
    with pytest.raises(IndexError):
        make_table(count=2).candidate(2)


def test_default_orientation_is_system():
    assert LookupTable().orientation == Orientation.SYSTEM


def test_page_down_until_last_page():
    page_size = 3
    table = make_table(page_size=page_size)
    assert table.page_down()
    assert table.cursor_pos == page_size
    assert table.page_down()
    assert table.cursor_pos == 2 * page_size
    assert not table.page_down()
    assert table.cursor_pos == 2 * page_size


def test_page_down_round_wraps():
    table = make_table(round=True)
    table.cursor_pos = len(table) - 1
    assert table.page_down()
    assert table.cursor_pos == (len(table) - 1) % table.page_size


def test_page_up_without_round_stops():
    table = make_table()
    assert not table.page_up()
    assert table.cursor_pos == 0


def test_page_up_round_clamps_to_last():
    table = make_table(round=True)
    table.cursor_pos = 1
    assert table.page_up()
    assert table.cursor_pos == len(table) - 1


def test_page_up_after_page_down_returns():
    table = make_table()
    table.cursor_pos = 1
    table.page_down()
    table.page_up()
    assert table.cursor_pos == 1


def test_cursor_up_and_down():
    table = make_table()
    assert not table.cursor_up()
    assert table.cursor_down()
    assert table.cursor_pos == 1
    assert table.cursor_up()
    assert table.cursor_pos == 0


def test_cursor_round_wraps_both_ways():
    table = make_table(round=True)
    assert table.cursor_up()
    assert table.cursor_pos == len(table) - 1
    assert table.cursor_down()
    assert table.cursor_pos == 0


def test_cursor_down_stops_at_end_without_round():
    table = make_table()
    table.cursor_pos = len(table) - 1
    assert not table.cursor_down()


def test_empty_table_moves_nothing():
    table = LookupTable(round=True)
    assert not table.page_down()
    assert not table.page_up()
    assert not table.cursor_down()
    assert not table.cursor_up()


def test_page_candidates_follow_cursor():
    table = make_table()
    assert [t.text for t in table.page_candidates()] == ["c0", "c1", "c2"]
    table.cursor_pos = len(table) - 1
    assert [t.text for t in table.page_candidates()] == ["c6"]


def test_clear_resets_cursor():
    table = make_table()
    table.cursor_down()
    table.clear()
    assert len(table) == 0
    assert table.cursor_pos == 0


def test_set_cursor_out_of_range():
    with pytest.raises(IndexError):
        make_table(count=2).cursor_pos = 2


def test_page_size_must_be_positive():
    with pytest.raises(ValueError):
        LookupTable(page_size=0)
    with pytest.raises(ValueError):
        LookupTable().page_size = 0


def test_labels_grow_on_set():
    table = LookupTable()
    table.set_label(2, "c")
    assert table.labels == (None, None, Text("c"))
    table.append_label("d")
    assert table.labels[-1] == Text("d")