"""Card editor modal."""

from dataclasses import replace

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Button, Checkbox, Input, Label, TextArea

from liteboard.errors import ValidationError
from liteboard.ids import ChecklistItemId
from liteboard.model.board import Card, ChecklistItem
from liteboard.model.card import add_checklist_item, parse_labels, remove_checklist_item, toggle_checklist_item

DELETE = "delete"


class ChecklistRow(Horizontal):
    """One checklist item: checkbox plus remove button."""

    DEFAULT_CSS = """
    ChecklistRow {
        height: auto;
    }
    ChecklistRow Checkbox {
        width: 1fr;
    }
    ChecklistRow Button {
        min-width: 5;
    }
    """

    def __init__(self, item: ChecklistItem):
        super().__init__()
        self.item_id = item.id
        self.item = item

    def compose(self) -> ComposeResult:
        yield Checkbox(self.item.text, self.item.done, classes="item-toggle")
        yield Button("✕", classes="item-remove", variant="error")


class CardEditScreen(ModalScreen[Card | str | None]):
    """Edit a card's title, description, labels and checklist.

    Dismisses with the edited Card on save, ``DELETE`` on delete, and None
    on cancel.
    """

    CSS = """
    CardEditScreen {
        align: center middle;
    }
    #editor {
        width: 80;
        height: 90%;
        border: thick $primary;
        background: $surface;
        padding: 1 2;
    }
    #editor Label {
        margin-top: 1;
        text-style: bold;
    }
    #description {
        height: 6;
    }
    #checklist {
        height: auto;
        max-height: 12;
    }
    #editor-buttons {
        height: 3;
        align: right middle;
    }
    #editor-buttons Button {
        margin-left: 1;
    }
    """

    BINDINGS = [
        ("escape", "cancel", "Cancel"),
        ("ctrl+s", "save", "Save"),
    ]

    def __init__(self, card: Card):
        super().__init__()
        self.card = card

    def compose(self) -> ComposeResult:
        with Vertical(id="editor"):
            yield Label("Card Title")
            yield Input(self.card.title, placeholder="Enter card title...", id="title")
            yield Label("Description")
            yield TextArea(self.card.description, id="description")
            yield Label("Labels")
            yield Input(
                ", ".join(self.card.labels),
                placeholder="Enter labels separated by commas...",
                id="labels",
            )
            yield Label("Checklist")
            with VerticalScroll(id="checklist"):
                for item in self.card.checklist:
                    yield ChecklistRow(item)
            yield Input(placeholder="Add checklist item...", id="new-item")
            with Horizontal(id="editor-buttons"):
                yield Button("Cancel", id="cancel")
                yield Button("Delete", id="delete", variant="error")
                yield Button("Save", id="save", variant="primary")

    def on_mount(self) -> None:
        self.query_one("#title", Input).focus()

    def _collect(self) -> Card:
        """Fold the form fields into the working copy."""
        return replace(
            self.card,
            title=self.query_one("#title", Input).value,
            description=self.query_one("#description", TextArea).text,
            labels=parse_labels(self.query_one("#labels", Input).value),
        )

    async def _render_checklist(self) -> None:
        container = self.query_one("#checklist", VerticalScroll)
        await container.remove_children()
        await container.mount_all([ChecklistRow(item) for item in self.card.checklist])

    @on(Input.Submitted, "#new-item")
    async def add_item(self, event: Input.Submitted) -> None:
        event.stop()
        try:
            self.card = add_checklist_item(self.card, event.value)
        except ValidationError:
            return
        event.input.value = ""
        await self._render_checklist()

    @on(Input.Submitted, "#title")
    def submit_title(self, event: Input.Submitted) -> None:
        event.stop()
        self.action_save()

    @on(Checkbox.Changed, ".item-toggle")
    def toggle_item(self, event: Checkbox.Changed) -> None:
        event.stop()
        row = event.checkbox.parent
        if isinstance(row, ChecklistRow):
            current = next((i for i in self.card.checklist if i.id == row.item_id), None)
            if current is not None and current.done != event.value:
                self.card = toggle_checklist_item(self.card, ChecklistItemId(row.item_id))

    @on(Button.Pressed, ".item-remove")
    async def remove_item(self, event: Button.Pressed) -> None:
        event.stop()
        row = event.button.parent
        if isinstance(row, ChecklistRow):
            self.card = remove_checklist_item(self.card, ChecklistItemId(row.item_id))
            await row.remove()

    @on(Button.Pressed, "#save")
    def on_save(self) -> None:
        self.action_save()

    @on(Button.Pressed, "#delete")
    def on_delete(self) -> None:
        self.dismiss(DELETE)

    @on(Button.Pressed, "#cancel")
    def on_cancel(self) -> None:
        self.action_cancel()

    def action_save(self) -> None:
        card = self._collect()
        if not card.title.strip():
            self.notify("Card title must not be empty", severity="error")
            return
        self.dismiss(replace(card, title=card.title.strip()))

    def action_cancel(self) -> None:
        self.dismiss(None)
