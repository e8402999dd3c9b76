from launcher_plugins.result_list import ResultList


def test_push_returns_positions():
    items = ResultList()

    assert items.push("a") == 0
    assert items.push("b") == 1
    assert len(items) == 2
    assert list(items) == ["a", "b"]


def test_get_out_of_range_is_none():
    items = ResultList()
    items.push("a")

    assert items.get(0) == "a"
    assert items.get(1) is None
    assert items.get(-1) is None


def test_clear_invalidates_previous_ids():
    items = ResultList()
    items.push("a")
    items.push("b")

    items.clear()

    assert len(items) == 0
    assert items.get(0) is None
    assert items.push("c") == 0
