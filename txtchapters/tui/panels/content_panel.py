"""Content panel: title and read-only text of the selected chapter."""

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Label, Static, TextArea

from ...models import Chapter

PLACEHOLDER = "Open a .txt file to view its chapters"


def location_to_offset(text: str, row: int, column: int) -> int:
    """Map a (row, column) cursor location to a character offset in text.

    Out-of-range rows and columns are clamped, so the result is always a
    valid insertion point.
    """
    lines = text.split("\n")
    row = max(0, min(row, len(lines) - 1))
    column = max(0, min(column, len(lines[row])))
    return sum(len(line) + 1 for line in lines[:row]) + column


class ContentPanel(Vertical):
    """Shows the selected chapter and exposes the text cursor as an offset."""

    DEFAULT_CSS = """
    ContentPanel {
        width: 3fr;
        height: 100%;
        padding: 0 1;
    }

    ContentPanel > #chapter-title {
        text-style: bold;
        margin-bottom: 1;
    }

    ContentPanel > #chapter-content {
        height: 1fr;
    }
    """

    def compose(self) -> ComposeResult:
        yield Label("", id="chapter-title")
        yield Static(PLACEHOLDER, id="no-chapters")
        yield TextArea("", id="chapter-content", read_only=True)

    def show_chapter(self, chapter: Chapter | None) -> None:
        text_area = self.query_one("#chapter-content", TextArea)
        placeholder = self.query_one("#no-chapters", Static)

        if chapter is None:
            self.query_one("#chapter-title", Label).update("")
            text_area.load_text("")
            text_area.display = False
            placeholder.display = True
            return

        self.query_one("#chapter-title", Label).update(chapter.title)
        text_area.load_text(chapter.content)
        text_area.display = True
        placeholder.display = False

    @property
    def cursor_in_text(self) -> bool:
        """True when the reader has moved focus into the chapter text."""
        return self.query_one("#chapter-content", TextArea).has_focus

    def cursor_offset(self) -> int:
        text_area = self.query_one("#chapter-content", TextArea)
        row, column = text_area.cursor_location
        return location_to_offset(text_area.text, row, column)
