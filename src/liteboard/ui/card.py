"""Card widget for liteboard UI."""

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.message import Message
from textual.widgets import Static

from liteboard.model.board import Card
from liteboard.model.card import checklist_progress

LABEL_COLORS = ["blue", "green", "yellow", "red", "magenta"]
ICON_CHECKLIST = "✔"
DESCRIPTION_EXCERPT = 60

# Arrow keys move focus between cards and columns instead of scrolling.
NAV_BINDINGS = [
    Binding("up", "app.focus_previous", show=False),
    Binding("down", "app.focus_next", show=False),
    Binding("left", "screen.focus_column(-1)", show=False),
    Binding("right", "screen.focus_column(1)", show=False),
]


def build_labels_text(labels: tuple[str, ...]) -> Text:
    """Render labels as coloured badges, cycling through LABEL_COLORS."""
    text = Text()
    for i, label in enumerate(labels):
        if i:
            text.append(" ")
        color = LABEL_COLORS[i % len(LABEL_COLORS)]
        text.append(f" {label} ", style=f"bold white on {color}")
    return text


def build_footer_text(card: Card) -> str:
    """Description excerpt and checklist progress, if any."""
    parts = []
    lines = card.description.strip().splitlines()
    if lines:
        excerpt = lines[0]
        if len(excerpt) > DESCRIPTION_EXCERPT:
            excerpt = excerpt[: DESCRIPTION_EXCERPT - 1] + "…"
        parts.append(excerpt)
    if card.checklist:
        done, total = checklist_progress(card)
        parts.append(f"{ICON_CHECKLIST} {done}/{total}")
    return "\n".join(parts)


class CardWidget(Static, can_focus=True):
    """A single card in a column."""

    BINDINGS = [
        ("enter", "open_card", "Edit"),
        ("delete", "delete_card", "Delete"),
        *NAV_BINDINGS,
    ]

    class EditRequested(Message):
        """Posted when the card's editor should open."""

        def __init__(self, card_id: str):
            super().__init__()
            self.card_id = card_id

    class DeleteRequested(Message):
        """Posted when the card should be deleted."""

        def __init__(self, card_id: str):
            super().__init__()
            self.card_id = card_id

    DEFAULT_CSS = """
    CardWidget {
        width: 100%;
        height: auto;
        padding: 0 1;
        margin-bottom: 1;
        background: $surface;
    }
    CardWidget:focus {
        background: $primary;
    }
    CardWidget.carrying {
        border: dashed $warning;
    }
    CardWidget #card-title {
        text-style: bold;
    }
    CardWidget #card-footer {
        color: $text-muted;
    }
    """

    def __init__(self, card: Card):
        super().__init__()
        self.card = card
        self.card_id = card.id

    def compose(self) -> ComposeResult:
        if self.card.labels:
            yield Static(build_labels_text(self.card.labels), id="card-labels")
        yield Static(Text(self.card.title), id="card-title")
        footer = build_footer_text(self.card)
        if footer:
            yield Static(Text(footer), id="card-footer")

    def on_click(self, event) -> None:
        event.stop()
        self.focus()
        if event.chain > 1:
            self.action_open_card()

    def action_open_card(self) -> None:
        self.post_message(self.EditRequested(self.card_id))

    def action_delete_card(self) -> None:
        self.post_message(self.DeleteRequested(self.card_id))
