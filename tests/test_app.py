import pytest

from sift.app import SiftApp
from sift.events import Outcome
from sift.store import EntryStore
from sift.widgets.entry_list import EntryList


def _app(lines) -> SiftApp:
    return SiftApp(EntryStore.load(lines))


@pytest.mark.anyio
async def test_enter_commits_first_entry() -> None:
    app = _app(["alpha", "beta"])
    async with app.run_test() as pilot:
        await pilot.press("enter")
        await pilot.pause()

    assert app.return_value == Outcome(committed=True, text="alpha")


@pytest.mark.anyio
async def test_typing_filters_and_highlights_best() -> None:
    app = _app(["banana", "apple", "apply"])
    async with app.run_test() as pilot:
        await pilot.press("a", "p", "p", "l")
        await pilot.pause()

        assert app.controller.query == "appl"
        assert [e.name for e in app.controller.store.visible_entries()] == ["apple", "apply"]
        assert app.controller.selected.name == "apple"

        await pilot.press("enter")
        await pilot.pause()

    assert app.return_value == Outcome(committed=True, text="apple")


@pytest.mark.anyio
async def test_backspace_and_clear_edit_query() -> None:
    app = _app(["one", "two"])
    async with app.run_test() as pilot:
        await pilot.press("t", "w", "x")
        await pilot.press("backspace")
        await pilot.pause()
        assert app.controller.query == "tw"

        await pilot.press("ctrl+u")
        await pilot.pause()
        assert app.controller.query == ""
        assert app.controller.selected.name == "one"


@pytest.mark.anyio
async def test_down_then_enter_commits_second_row() -> None:
    app = _app(["one", "two", "three"])
    async with app.run_test() as pilot:
        await pilot.press("down", "down")
        await pilot.pause()
        assert app.controller.selected.name == "two"

        await pilot.press("enter")
        await pilot.pause()

    assert app.return_value == Outcome(committed=True, text="two")


@pytest.mark.anyio
async def test_escape_cancels() -> None:
    app = _app(["one", "two"])
    async with app.run_test() as pilot:
        await pilot.press("o")
        await pilot.press("escape")
        await pilot.pause()

    assert app.return_value == Outcome(committed=False)


@pytest.mark.anyio
async def test_enter_without_entries_keeps_running() -> None:
    app = _app([])
    async with app.run_test() as pilot:
        await pilot.press("enter")
        await pilot.pause()
        assert app.return_value is None
        assert app.is_running

        await pilot.press("escape")
        await pilot.pause()

    assert app.return_value == Outcome(committed=False)


@pytest.mark.anyio
async def test_list_rows_track_visible_entries() -> None:
    app = _app(["apple", "banana", "apply"])
    async with app.run_test() as pilot:
        await pilot.press("a", "p", "p", "l")
        await pilot.pause()

        entry_list = app.screen.query_one(EntryList)
        store = app.controller.store
        assert entry_list.count == 2
        assert entry_list.total_count == 3
        assert [store[i].name for i in entry_list.row_ids] == ["apple", "apply"]


@pytest.mark.anyio
async def test_long_entries_stay_on_one_row() -> None:
    long_name = "/very/long/path/" * 20
    app = _app([long_name, "short"])
    async with app.run_test(size=(40, 10)) as pilot:
        await pilot.pause()
        entry_list = app.screen.query_one(EntryList)
        rendered = entry_list.render()

        assert rendered.no_wrap
        assert rendered.overflow == "ellipsis"
        assert rendered.plain.count("\n") == entry_list.size.height
        assert len(entry_list.row_ids) == 2
