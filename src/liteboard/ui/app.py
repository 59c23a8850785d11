"""Main Textual application for liteboard."""

from textual import work
from textual.app import App, ComposeResult
from textual.screen import Screen
from textual.widgets import Static

from liteboard.config import Settings
from liteboard.state import BoardState
from liteboard.storage import LocalStore
from liteboard.ui.board import BoardScreen


class LoadingScreen(Screen):
    """Shown until the board is available, so nothing can edit a half-loaded board."""

    CSS = """
    LoadingScreen {
        align: center middle;
    }
    #loading {
        width: auto;
        color: $text-muted;
    }
    """

    def compose(self) -> ComposeResult:
        yield Static("Loading board…", id="loading")


class LiteboardApp(App):
    """Single-user kanban board TUI."""

    TITLE = "liteboard"
    BINDINGS = [("ctrl+q", "quit", "Quit")]

    def __init__(self, settings: Settings, board_state: BoardState | None = None):
        super().__init__()
        self.settings = settings
        if board_state is None:
            board_state = BoardState(LocalStore(settings.store_path), settings.seed_url)
        self.board_state = board_state

    def on_mount(self) -> None:
        self.push_screen(LoadingScreen())
        self.load_board()

    @work(exclusive=True, group="lifecycle")
    async def load_board(self) -> None:
        """Run startup (store, then seed, then defaults) and show the board."""
        await self.board_state.start()
        await self.switch_screen(BoardScreen(self.board_state, self.settings))

    @work(exclusive=True, group="lifecycle")
    async def reset_board(self) -> None:
        """Drop the stored board and go through startup again."""
        await self.switch_screen(LoadingScreen())
        await self.board_state.reset()
        await self.switch_screen(BoardScreen(self.board_state, self.settings))
