from __future__ import annotations

from rich.text import Text
from textual.widgets import Static

from ..render import InsertPanel, ScreenLayout


class PathListPanel(Static):
    def show(self, layout: ScreenLayout) -> None:
        self.border_title = layout.list_title
        self.update(layout.list_text)

    @property
    def visible_rows(self) -> int:
        return max(1, self.content_size.height)


class InsertEntryPanel(Static):
    def show(self, panel: InsertPanel | None) -> None:
        if panel is None:
            self.add_class("hidden")
            self.border_title = None
            self.update(Text())
            return
        self.remove_class("hidden")
        self.border_title = panel.title
        self.update(panel.text)


class KeyHelpBar(Static):
    def show(self, text: Text) -> None:
        self.update(text)
