"""Tests for the board screen's keyboard actions."""

import pytest
from textual.widgets import Button, Input

from liteboard.document import dumps
from liteboard.ui.card import CardWidget
from liteboard.ui.column import ColumnHeader, ColumnWidget
from liteboard.ui.detail import CardEditScreen
from liteboard.ui.prompt import ConfirmScreen, PromptScreen
from tests.helpers import make_board, order
from tests.ui.helpers import settle, wait_for_board


def header(screen, column_id):
    return next(h for h in screen.query(ColumnHeader) if h.column_id == column_id)


def card_widget(screen, card_id):
    return next(w for w in screen.query(CardWidget) if w.card_id == card_id)


async def answer_prompt(pilot, text):
    await settle(pilot)
    assert isinstance(pilot.app.screen, PromptScreen)
    pilot.app.screen.query_one("#prompt-input", Input).value = text
    await pilot.press("enter")
    await settle(pilot)


async def confirm(pilot, yes=True):
    await settle(pilot)
    assert isinstance(pilot.app.screen, ConfirmScreen)
    pilot.app.screen.query_one("#yes" if yes else "#no", Button).press()
    await settle(pilot)


@pytest.mark.asyncio
async def test_add_column(app, board_state):
    async with app.run_test() as pilot:
        screen = await wait_for_board(pilot)
        await pilot.press("a")
        await answer_prompt(pilot, "Review")
        assert board_state.board.columns[-1].title == "Review"
        assert len(screen.query(ColumnWidget)) == 4
        assert isinstance(screen.focused, ColumnHeader)


@pytest.mark.asyncio
async def test_add_column_cancelled(app, board_state):
    async with app.run_test() as pilot:
        await wait_for_board(pilot)
        await pilot.press("a")
        await settle(pilot)
        await pilot.press("escape")
        await settle(pilot)
        assert len(board_state.board.columns) == 3


@pytest.mark.asyncio
async def test_add_card_to_focused_column(app, board_state):
    async with app.run_test() as pilot:
        screen = await wait_for_board(pilot)
        header(screen, "doing").focus()
        await pilot.pause()
        await pilot.press("n")
        await answer_prompt(pilot, "Write tests")
        (card_id,) = order(board_state.board, "doing")
        assert board_state.board.cards[card_id].title == "Write tests"
        assert screen.focused.card_id == card_id


@pytest.mark.asyncio
async def test_add_card_blank_title_is_rejected(app, board_state):
    async with app.run_test() as pilot:
        await wait_for_board(pilot)
        before = board_state.board
        await pilot.press("n")
        await answer_prompt(pilot, "   ")
        assert board_state.board is before


@pytest.mark.asyncio
async def test_rename_column(app, board_state):
    async with app.run_test() as pilot:
        screen = await wait_for_board(pilot)
        header(screen, "done").focus()
        await pilot.pause()
        await pilot.press("r")
        await settle(pilot)
        assert pilot.app.screen.query_one("#prompt-input", Input).value == "done"
        pilot.app.screen.query_one("#prompt-input", Input).value = "Shipped"
        await pilot.press("enter")
        await settle(pilot)
        assert board_state.board.columns[2].title == "Shipped"


@pytest.mark.asyncio
async def test_delete_column_with_cards(app, board_state):
    async with app.run_test() as pilot:
        await wait_for_board(pilot)
        await pilot.press("ctrl+d")
        await confirm(pilot)
        assert [c.id for c in board_state.board.columns] == ["doing", "done"]
        assert board_state.board.cards == {}


@pytest.mark.asyncio
async def test_delete_card(app, board_state):
    async with app.run_test() as pilot:
        screen = await wait_for_board(pilot)
        card_widget(screen, "c2").focus()
        await pilot.pause()
        await pilot.press("delete")
        await confirm(pilot)
        assert order(board_state.board, "backlog") == ["c1"]


@pytest.mark.asyncio
async def test_delete_card_declined(app, board_state):
    async with app.run_test() as pilot:
        await wait_for_board(pilot)
        await pilot.press("delete")
        await confirm(pilot, yes=False)
        assert order(board_state.board, "backlog") == ["c1", "c2"]


@pytest.mark.asyncio
async def test_move_card_to_column(app, board_state):
    async with app.run_test() as pilot:
        screen = await wait_for_board(pilot)
        await pilot.press("m")
        assert screen.carrying == "c1"
        assert card_widget(screen, "c1").has_class("carrying")
        header(screen, "done").focus()
        await pilot.pause()
        await pilot.press("m")
        await settle(pilot)
        assert order(board_state.board, "backlog") == ["c2"]
        assert order(board_state.board, "done") == ["c1"]
        assert screen.carrying is None
        assert screen.focused.card_id == "c1"


@pytest.mark.asyncio
async def test_move_card_within_column(app, board_state):
    async with app.run_test() as pilot:
        screen = await wait_for_board(pilot)
        card_widget(screen, "c2").focus()
        await pilot.pause()
        await pilot.press("m")
        card_widget(screen, "c1").focus()
        await pilot.pause()
        await pilot.press("m")
        await settle(pilot)
        assert order(board_state.board, "backlog") == ["c2", "c1"]


@pytest.mark.asyncio
async def test_move_cancelled(app, board_state):
    async with app.run_test() as pilot:
        screen = await wait_for_board(pilot)
        before = board_state.board
        await pilot.press("m")
        await pilot.press("escape")
        assert screen.carrying is None
        assert not card_widget(screen, "c1").has_class("carrying")
        assert board_state.board is before


@pytest.mark.asyncio
async def test_search_filters_cards(app, board_state):
    async with app.run_test() as pilot:
        screen = await wait_for_board(pilot)
        await pilot.press("slash")
        assert isinstance(screen.focused, Input)
        screen.query_one("#search", Input).value = "second"
        await settle(pilot)
        assert [w.card_id for w in screen.query(CardWidget)] == ["c2"]
        assert len(screen.query(ColumnWidget)) == 3
        assert len(board_state.board.cards) == 2

        screen.query_one("#search", Input).value = ""
        await settle(pilot)
        assert len(screen.query(CardWidget)) == 2


@pytest.mark.asyncio
async def test_edit_card(app, board_state):
    async with app.run_test() as pilot:
        await wait_for_board(pilot)
        await pilot.press("enter")
        await settle(pilot)
        editor = pilot.app.screen
        assert isinstance(editor, CardEditScreen)
        editor.query_one("#labels", Input).value = "docs, urgent"
        editor.query_one("#save", Button).press()
        await settle(pilot)
        assert board_state.board.cards["c1"].labels == ("docs", "urgent")


@pytest.mark.asyncio
async def test_export(app, board_state, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    async with app.run_test() as pilot:
        await wait_for_board(pilot)
        await pilot.press("ctrl+e")
        await settle(pilot)
    exported = tmp_path / app.settings.export_filename
    assert exported.read_text() == dumps(board_state.board)


@pytest.mark.asyncio
async def test_import(app, board_state, tmp_path):
    path = tmp_path / "incoming.json"
    path.write_text(dumps(make_board({"x": ["n1"], "y": []})))
    async with app.run_test() as pilot:
        screen = await wait_for_board(pilot)
        await pilot.press("ctrl+o")
        await answer_prompt(pilot, str(path))
        assert [c.id for c in board_state.board.columns] == ["x", "y"]
        assert [w.card_id for w in screen.query(CardWidget)] == ["n1"]


@pytest.mark.asyncio
async def test_import_invalid_file_keeps_board(app, board_state, tmp_path):
    path = tmp_path / "bad.json"
    path.write_text('{"columns": "not-an-array", "cards": {}}')
    async with app.run_test() as pilot:
        await wait_for_board(pilot)
        before = board_state.board
        await pilot.press("ctrl+o")
        await answer_prompt(pilot, str(path))
        assert board_state.board is before


@pytest.mark.asyncio
async def test_import_binary_file_keeps_board(app, board_state, tmp_path):
    path = tmp_path / "binary.json"
    path.write_bytes(b"\xff\xfe\x00garbage")
    async with app.run_test() as pilot:
        await wait_for_board(pilot)
        before = board_state.board
        await pilot.press("ctrl+o")
        await answer_prompt(pilot, str(path))
        assert board_state.board is before


@pytest.mark.asyncio
async def test_arrow_keys_change_column(app):
    async with app.run_test() as pilot:
        screen = await wait_for_board(pilot)
        await pilot.press("right")
        assert isinstance(screen.focused, ColumnHeader)
        assert screen.focused.column_id == "doing"
        await pilot.press("right", "right")
        assert screen.focused.column_id == "done"
        await pilot.press("left")
        assert screen.focused.column_id == "doing"
