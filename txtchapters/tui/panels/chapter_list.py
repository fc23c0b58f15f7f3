"""Chapter list panel: one row per chapter, highlight follows the selection."""

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Label, ListItem, ListView

from ...models import Chapter


class ChapterListItem(ListItem):
    """A chapter row in the list."""

    def __init__(self, chapter: Chapter, index: int, editing: bool = False) -> None:
        super().__init__()
        self.chapter = chapter
        self.chapter_index = index
        self.editing = editing  # Carries a staged split marker

    def compose(self) -> ComposeResult:
        yield Label(self._build_label())

    def _build_label(self) -> str:
        """Build the display label for this chapter."""
        marker = "✂" if self.editing else " "

        title = self.chapter.title
        if len(title) > 40:
            title = title[:37] + "..."

        return f"{marker} {title} ({self.chapter.char_count:,}c)"

    def set_editing(self, editing: bool) -> None:
        if self.editing != editing:
            self.editing = editing
            self.refresh_display()

    def refresh_display(self) -> None:
        self.query_one(Label).update(self._build_label())


class ChapterListPanel(Vertical):
    """Panel listing every chapter of the loaded document."""

    DEFAULT_CSS = """
    ChapterListPanel {
        width: 1fr;
        min-width: 24;
        height: 100%;
        border: round $primary-darken-1;
    }

    ChapterListPanel > #chapter-stats {
        height: auto;
        padding: 0 1;
        background: $surface-darken-1;
    }

    ChapterListPanel > #chapter-list {
        height: 1fr;
    }
    """

    def compose(self) -> ComposeResult:
        yield Label("", id="chapter-stats")
        yield ListView(id="chapter-list")

    async def show_chapters(
        self,
        chapters: list[Chapter],
        selected_index: int,
        editing_index: int | None = None,
    ) -> None:
        """Rebuild the list from the current chapters."""
        total_chars = sum(c.char_count for c in chapters)
        self.query_one("#chapter-stats", Label).update(f"{len(chapters)} ch, {total_chars:,}c")

        list_view = self.query_one("#chapter-list", ListView)
        await list_view.clear()
        await list_view.extend(
            [
                ChapterListItem(chapter, i, editing=(i == editing_index))
                for i, chapter in enumerate(chapters)
            ]
        )
        list_view.index = selected_index if chapters else None

    def mark_editing(self, editing_index: int | None) -> None:
        for item in self.query(ChapterListItem):
            item.set_editing(item.chapter_index == editing_index)

    @property
    def item_count(self) -> int:
        return len(self.query(ChapterListItem))
