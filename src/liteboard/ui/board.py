"""Board screen showing kanban columns and cards."""

from pathlib import Path

from textual import work
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.screen import Screen
from textual.widgets import Footer, Input

from liteboard.config import Settings
from liteboard.errors import ValidationError
from liteboard.ids import CardId, ColumnId
from liteboard.model.board import Board
from liteboard.model.card import find_card_column
from liteboard.model.search import filter_board
from liteboard.state import BoardState
from liteboard.ui.card import CardWidget
from liteboard.ui.column import ColumnHeader, ColumnWidget
from liteboard.ui.detail import DELETE, CardEditScreen
from liteboard.ui.prompt import ConfirmScreen, PromptScreen
from liteboard.ui.watcher import StateWatcherMixin


class BoardScreen(StateWatcherMixin, Screen):
    """Main board screen showing all columns."""

    DEFAULT_CSS = """
    BoardScreen #board-header {
        height: 3;
        padding: 0 1;
    }
    BoardScreen #search {
        width: 1fr;
    }
    BoardScreen #columns {
        height: 1fr;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel_move", "Cancel move", show=False),
        ("slash", "focus_search", "Search"),
        ("a", "add_column", "Add list"),
        ("n", "add_card", "Add card"),
        ("r", "rename_column", "Rename list"),
        ("ctrl+d", "delete_column", "Delete list"),
        ("m", "move", "Move card"),
        ("ctrl+e", "export", "Export"),
        ("ctrl+o", "import", "Import"),
        ("ctrl+r", "reset", "Reset"),
    ]

    def __init__(self, state: BoardState, settings: Settings):
        self._init_watcher()
        super().__init__()
        self.board_state = state
        self.settings = settings
        self.search_text = ""
        self.carrying: CardId | None = None
        self._pending_focus: str | None = None

    def compose(self) -> ComposeResult:
        with Horizontal(id="board-header"):
            yield Input(placeholder="Search cards...", id="search")
        yield Horizontal(id="columns")
        yield Footer()

    def on_mount(self) -> None:
        self.state_watch(self.board_state, self._on_board_changed)
        self.rebuild()

    @property
    def view(self) -> Board:
        """The board as currently filtered by the search box."""
        return filter_board(self.board_state.board, self.search_text)

    def _on_board_changed(self, old, new) -> None:
        if new is not None:
            self.rebuild()

    @work(exclusive=True, group="rebuild")
    async def rebuild(self) -> None:
        """Re-render all columns from the current view, keeping focus where it was."""
        focus_id = self._pending_focus or self._focused_target_id()
        self._pending_focus = None
        view = self.view
        container = self.query_one("#columns", Horizontal)
        await container.remove_children()
        await container.mount_all([ColumnWidget(col, view) for col in view.columns])
        for widget in self.query(CardWidget):
            widget.set_class(widget.card_id == self.carrying, "carrying")
        if not isinstance(self.focused, Input):
            self._focus_target(focus_id)

    # -- focus helpers --

    def _focused_target_id(self) -> str | None:
        """Id of the focused card or column header."""
        focused = self.focused
        if isinstance(focused, CardWidget):
            return focused.card_id
        if isinstance(focused, ColumnHeader):
            return focused.column_id
        return None

    def _focused_column_id(self) -> ColumnId | None:
        """The column the focus is in, or the first column."""
        focused = self.focused
        if isinstance(focused, ColumnHeader):
            return focused.column_id
        if isinstance(focused, CardWidget):
            col = find_card_column(self.board_state.board, focused.card_id)
            if col is not None:
                return col.id
        columns = self.board_state.board.columns
        return columns[0].id if columns else None

    def _focus_target(self, target_id: str | None) -> None:
        for widget in self.query(CardWidget):
            if widget.card_id == target_id:
                widget.focus()
                return
        headers = list(self.query(ColumnHeader))
        for header in headers:
            if header.column_id == target_id:
                header.focus()
                return
        cards = list(self.query(CardWidget))
        if cards:
            cards[0].focus()
        elif headers:
            headers[0].focus()

    def action_focus_column(self, delta: int) -> None:
        """Jump to the neighbouring column's header."""
        headers = list(self.query(ColumnHeader))
        if not headers:
            return
        current = self._focused_column_id()
        index = next((i for i, h in enumerate(headers) if h.column_id == current), 0)
        headers[max(0, min(index + delta, len(headers) - 1))].focus()

    def action_focus_search(self) -> None:
        self.query_one("#search", Input).focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "search":
            self.search_text = event.value
            self.rebuild()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "search":
            self._focus_target(None)

    # -- columns --

    def action_add_column(self) -> None:
        def on_title(title: str | None) -> None:
            if title is None:
                return
            self._pending_focus = self.board_state.add_column(title.strip() or None)

        self.app.push_screen(PromptScreen("New list title", value="New List"), on_title)

    def action_rename_column(self) -> None:
        column_id = self._focused_column_id()
        if column_id is None:
            return
        current = next(c.title for c in self.board_state.board.columns if c.id == column_id)

        def on_title(title: str | None) -> None:
            if title is not None:
                self._pending_focus = column_id
                self.board_state.rename_column(column_id, title)

        self.app.push_screen(PromptScreen("Rename list", value=current), on_title)

    def action_delete_column(self) -> None:
        column_id = self._focused_column_id()
        if column_id is None:
            return

        def on_confirm(confirmed: bool) -> None:
            if confirmed:
                self.board_state.delete_column(column_id)

        self.app.push_screen(ConfirmScreen("Are you sure you want to delete this list?"), on_confirm)

    # -- cards --

    def action_add_card(self) -> None:
        column_id = self._focused_column_id()
        if column_id is None:
            self.notify("Add a list first", severity="warning")
            return

        def on_title(title: str | None) -> None:
            if title is None:
                return
            try:
                self._pending_focus = self.board_state.add_card(column_id, title)
            except ValidationError as e:
                self.notify(str(e), severity="error")

        self.app.push_screen(PromptScreen("Card title", placeholder="Enter a title for this card..."), on_title)

    def _confirm_delete_card(self, card_id: CardId) -> None:
        def on_confirm(confirmed: bool) -> None:
            if confirmed:
                self.board_state.delete_card(card_id)

        self.app.push_screen(ConfirmScreen("Are you sure you want to delete this card?"), on_confirm)

    def on_card_widget_edit_requested(self, event: CardWidget.EditRequested) -> None:
        card = self.board_state.board.cards.get(event.card_id)
        if card is None:
            return

        def on_result(result) -> None:
            if result == DELETE:
                self._confirm_delete_card(card.id)
            elif result is not None:
                self._pending_focus = card.id
                self.board_state.update_card(result)

        self.app.push_screen(CardEditScreen(card), on_result)

    def on_card_widget_delete_requested(self, event: CardWidget.DeleteRequested) -> None:
        self._confirm_delete_card(event.card_id)

    def action_move(self) -> None:
        """Pick up the focused card, or drop the carried one on the focused target."""
        if self.carrying is None:
            if isinstance(self.focused, CardWidget):
                self.carrying = self.focused.card_id
                self.focused.add_class("carrying")
                self.notify("Move to a card or list title and press m to drop, escape to cancel")
            return
        card_id = self.carrying
        self.carrying = None
        self._pending_focus = card_id
        self.board_state.move_card(card_id, self._focused_target_id())
        for widget in self.query(CardWidget):
            widget.remove_class("carrying")

    def action_cancel_move(self) -> None:
        if self.carrying is None:
            return
        self.carrying = None
        for widget in self.query(CardWidget):
            widget.remove_class("carrying")

    # -- documents --

    def action_export(self) -> None:
        path = Path.cwd() / self.settings.export_filename
        try:
            path.write_text(self.board_state.export_document(), encoding="utf-8")
        except OSError as e:
            self.notify(f"Export failed: {e}", severity="error")
            return
        self.notify(f"Exported to {path}")

    def action_import(self) -> None:
        def on_path(path: str | None) -> None:
            if not path:
                return
            try:
                data = Path(path).expanduser().read_bytes()
                self.board_state.import_document(data)
            except (OSError, ValidationError):
                self.notify("Invalid JSON file.", severity="error")
                return
            self.notify("Board imported")

        self.app.push_screen(
            PromptScreen("Import a board file exported from this app", placeholder="path/to/board.json"),
            on_path,
        )

    def action_reset(self) -> None:
        def on_confirm(confirmed: bool) -> None:
            if confirmed:
                self.app.reset_board()

        self.app.push_screen(ConfirmScreen("This will reset the board to default. Are you sure?"), on_confirm)
