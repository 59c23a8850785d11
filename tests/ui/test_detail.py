"""Tests for the card editor modal."""

import pytest
from textual.app import App
from textual.widgets import Button, Checkbox, Input, TextArea

from liteboard.ui.detail import DELETE, CardEditScreen, ChecklistRow
from tests.helpers import make_card, make_item

NO_RESULT = object()


class EditorApp(App):
    """Minimal app that opens the editor and records how it closed."""

    def __init__(self, card):
        super().__init__()
        self.card = card
        self.result = NO_RESULT

    def on_mount(self) -> None:
        self.push_screen(CardEditScreen(self.card), self._on_editor_closed)

    def _on_editor_closed(self, result) -> None:
        self.result = result


@pytest.fixture
def card():
    return make_card(
        "c1",
        "Write docs",
        "User guide",
        labels=["docs"],
        checklist=[make_item("i1", "outline"), make_item("i2", "draft", done=True)],
    )


@pytest.mark.asyncio
async def test_fields_are_filled(card):
    app = EditorApp(card)
    async with app.run_test() as pilot:
        await pilot.pause()
        screen = app.screen
        assert screen.query_one("#title", Input).value == "Write docs"
        assert screen.query_one("#description", TextArea).text == "User guide"
        assert screen.query_one("#labels", Input).value == "docs"
        rows = list(screen.query(ChecklistRow))
        assert [r.item_id for r in rows] == ["i1", "i2"]
        assert [r.query_one(Checkbox).value for r in rows] == [False, True]


@pytest.mark.asyncio
async def test_save_returns_edited_card(card):
    app = EditorApp(card)
    async with app.run_test() as pilot:
        await pilot.pause()
        screen = app.screen
        screen.query_one("#title", Input).value = "  Write the docs  "
        screen.query_one("#description", TextArea).text = "Admin guide"
        screen.query_one("#labels", Input).value = "docs, , urgent"
        screen.query_one("#save", Button).press()
        await pilot.pause()
    assert app.result.id == "c1"
    assert app.result.title == "Write the docs"
    assert app.result.description == "Admin guide"
    assert app.result.labels == ("docs", "urgent")
    assert app.result.checklist == card.checklist


@pytest.mark.asyncio
async def test_enter_in_title_saves(card):
    app = EditorApp(card)
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press("enter")
        await pilot.pause()
    assert app.result == card


@pytest.mark.asyncio
async def test_blank_title_keeps_editor_open(card):
    app = EditorApp(card)
    async with app.run_test() as pilot:
        await pilot.pause()
        app.screen.query_one("#title", Input).value = "   "
        await pilot.press("ctrl+s")
        await pilot.pause()
        assert isinstance(app.screen, CardEditScreen)
        assert app.result is NO_RESULT


@pytest.mark.asyncio
async def test_cancel(card):
    app = EditorApp(card)
    async with app.run_test() as pilot:
        await pilot.pause()
        app.screen.query_one("#title", Input).value = "Changed"
        await pilot.press("escape")
        await pilot.pause()
    assert app.result is None


@pytest.mark.asyncio
async def test_delete(card):
    app = EditorApp(card)
    async with app.run_test() as pilot:
        await pilot.pause()
        app.screen.query_one("#delete", Button).press()
        await pilot.pause()
    assert app.result == DELETE


@pytest.mark.asyncio
async def test_checklist_editing(card):
    app = EditorApp(card)
    async with app.run_test() as pilot:
        await pilot.pause()
        screen = app.screen

        new_item = screen.query_one("#new-item", Input)
        new_item.focus()
        await pilot.pause()
        new_item.value = "review"
        await pilot.press("enter")
        await pilot.pause()
        assert new_item.value == ""
        assert len(screen.query(ChecklistRow)) == 3

        first = screen.query(ChecklistRow).first()
        first.query_one(Checkbox).value = True
        await pilot.pause()

        second = list(screen.query(ChecklistRow))[1]
        second.query_one(".item-remove", Button).press()
        await pilot.pause()
        assert len(screen.query(ChecklistRow)) == 2

        screen.query_one("#save", Button).press()
        await pilot.pause()

    items = app.result.checklist
    assert [i.text for i in items] == ["outline", "review"]
    assert [i.done for i in items] == [True, False]
    assert items[1].id.startswith("chk_")


@pytest.mark.asyncio
async def test_blank_checklist_item_ignored(card):
    app = EditorApp(card)
    async with app.run_test() as pilot:
        await pilot.pause()
        new_item = app.screen.query_one("#new-item", Input)
        new_item.focus()
        await pilot.pause()
        new_item.value = "   "
        await pilot.press("enter")
        await pilot.pause()
        assert len(app.screen.query(ChecklistRow)) == 2
