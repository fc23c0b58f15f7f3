"""
TXT Chapter Reader TUI - Terminal User Interface

Shows the chapters found in a text file and lets the reader split, merge,
delete and undo, all through an EditSession.

Usage:
    python -m txtchapters.tui.app book.txt
    # or
    txtchapters-tui book.txt
"""

import sys

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Footer, Header, ListView

from ..config import AppConfig, get_config
from ..edit_session import EditSession
from ..errors import TxtChaptersError, format_error_for_user
from ..text_loader import read_text_file
from .panels import ChapterListPanel, ContentPanel


class ChapterReaderApp(App):
    """Main TXT Chapter Reader application."""

    TITLE = "TXT Chapter Reader"
    SUB_TITLE = "Split, merge and tidy chapters"

    CSS = """
    #app-container {
        width: 100%;
        height: 100%;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        # Editing (priority so they work while the text has focus)
        Binding("i", "insert_marker", "Marker", priority=True),
        Binding("s", "execute_split", "Split", priority=True),
        Binding("m", "merge_chapters", "Merge↓", priority=True),
        Binding("x", "delete_chapter", "Delete", priority=True),
        Binding("u", "undo", "Undo", priority=True),
    ]

    def __init__(
        self,
        source_file: str | None = None,
        text: str | None = None,
        config: AppConfig | None = None,
        legacy_titles: bool = False,
        detect: str | None = None,
    ) -> None:
        super().__init__()
        self.source_file = source_file
        self.initial_text = text
        self.app_config = config or get_config()
        self.legacy_titles = legacy_titles
        self.detect = detect
        self.session = EditSession(
            title_policy=self.app_config.title_policy(legacy=legacy_titles),
            max_undo=self.app_config.max_undo,
            notify=self._session_notify,
        )

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="app-container"):
            yield ChapterListPanel()
            yield ContentPanel()
        yield Footer()

    async def on_mount(self) -> None:
        text = self.initial_text
        if text is None and self.source_file:
            try:
                text = read_text_file(self.source_file, self.app_config.encodings)
            except TxtChaptersError as e:
                self.notify(format_error_for_user(e), severity="error")

        if text is not None:
            self.load_text(text)
        await self.refresh_view()

    def load_text(self, text: str) -> None:
        """Segment text and start a fresh edit session over it."""
        self.session = EditSession.from_text(
            text,
            segmenter=self.app_config.build_segmenter(self.detect),
            title_policy=self.app_config.title_policy(legacy=self.legacy_titles),
            max_undo=self.app_config.max_undo,
            notify=self._session_notify,
        )

    def _session_notify(self, message: str, severity: str) -> None:
        self.notify(message, severity=severity)

    async def refresh_view(self) -> None:
        """Re-render the chapter list and the selected chapter."""
        await self.query_one(ChapterListPanel).show_chapters(
            self.session.chapters,
            self.session.selected_index,
            self.session.editing_index,
        )
        self.query_one(ContentPanel).show_chapter(self.session.current_chapter)

    def on_list_view_highlighted(self, event: ListView.Highlighted) -> None:
        self._follow_list(event.list_view.index)

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        self._follow_list(event.list_view.index)

    def _follow_list(self, index: int | None) -> None:
        """Make the highlighted row the session's selected chapter."""
        # refresh_view re-highlights the current selection; that must not
        # clear a staged split marker
        if index is None or self.session.is_empty or index == self.session.selected_index:
            return
        self.session.select_chapter(index)
        self.query_one(ChapterListPanel).mark_editing(self.session.editing_index)
        self.query_one(ContentPanel).show_chapter(self.session.current_chapter)

    # ── Editing actions ──────────────────────────────────────────────────

    async def action_insert_marker(self) -> None:
        content = self.query_one(ContentPanel)
        if content.cursor_in_text:
            self.session.stage_cursor(content.cursor_offset())
        self.session.insert_split_marker()
        await self.refresh_view()

    async def action_execute_split(self) -> None:
        self.session.execute_split()
        await self.refresh_view()

    async def action_merge_chapters(self) -> None:
        """Merge the selected chapter with the one below it."""
        self.session.combine_chapters(self.session.selected_index)
        await self.refresh_view()

    async def action_delete_chapter(self) -> None:
        if self.session.is_empty:
            return
        self.session.delete_chapter(self.session.selected_index)
        await self.refresh_view()

    async def action_undo(self) -> None:
        if not self.session.can_undo:
            self.notify("Nothing to undo", severity="warning")
            return
        self.session.undo()
        await self.refresh_view()


def main(path: str | None = None, **kwargs) -> None:
    """Run the TXT Chapter Reader TUI."""
    if path is None and len(sys.argv) > 1:
        path = sys.argv[1]
    app = ChapterReaderApp(source_file=path, **kwargs)
    app.run()


if __name__ == "__main__":
    main()
