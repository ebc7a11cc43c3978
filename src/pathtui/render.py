"""Pure projection from a session snapshot to what the screen shows.

Nothing here touches widgets or mutates the session; the app re-renders
from scratch on every key and every tick.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from rich.text import Text

from .input_mode import ComposingInsertion, Mode, Session
from .path_list import Side

LIST_TITLE = "PATH Entries"
HIGHLIGHT_SYMBOL = ">> "
HIGHLIGHT_STYLE = "bold yellow"
INPUT_STYLE = "cyan"
CURSOR_STYLE = "reverse"
KEY_STYLE = "bold"
EMPTY_LIST_TEXT = "(no entries)"

NAVIGATION_BINDINGS: tuple[tuple[str, str], ...] = (
    ("a", "Insert after"),
    ("b", "Insert before"),
    ("d", "Delete"),
    ("↑/k", "Up"),
    ("↓/j", "Down"),
    ("q/ESC/Ctrl+C", "Quit"),
)
COMPOSING_BINDINGS: tuple[tuple[str, str], ...] = (
    ("Enter", "Insert"),
    ("Backspace", "Delete char"),
    ("ESC", "Cancel"),
)


@dataclass(frozen=True)
class InsertPanel:
    title: str
    text: Text


@dataclass(frozen=True)
class ScreenLayout:
    list_title: str
    list_text: Text
    scroll_offset: int
    insert_panel: InsertPanel | None
    help_text: Text


def render_session(session: Session, list_height: int, scroll_offset: int = 0) -> ScreenLayout:
    entries = session.paths.entries
    selection = session.paths.selection
    offset = visible_offset(len(entries), selection, list_height, scroll_offset)
    return ScreenLayout(
        list_title=LIST_TITLE,
        list_text=render_list(entries, selection, offset, list_height),
        scroll_offset=offset,
        insert_panel=render_insert_panel(session.mode),
        help_text=render_help(session.mode),
    )


def visible_offset(count: int, selection: int | None, height: int, offset: int) -> int:
    """Scroll offset that keeps the selection on screen, moving as little as possible."""
    height = max(1, height)
    max_offset = max(0, count - height)
    offset = max(0, min(offset, max_offset))
    if selection is None:
        return offset
    if selection < offset:
        return selection
    if selection >= offset + height:
        return selection - height + 1
    return offset


def render_list(
    entries: Sequence[str],
    selection: int | None,
    offset: int,
    height: int,
) -> Text:
    text = Text(no_wrap=True, overflow="ellipsis")
    if not entries:
        text.append(EMPTY_LIST_TEXT, style="dim")
        return text
    window = entries[offset : offset + max(1, height)]
    pad = " " * len(HIGHLIGHT_SYMBOL)
    for row, entry in enumerate(window):
        index = offset + row
        if row:
            text.append("\n")
        if index == selection:
            text.append(f"{HIGHLIGHT_SYMBOL}{entry}", style=HIGHLIGHT_STYLE)
        else:
            text.append(f"{pad}{entry}")
    return text


def render_insert_panel(mode: Mode) -> InsertPanel | None:
    if not isinstance(mode, ComposingInsertion):
        return None
    title = "Insert Before" if mode.side == Side.BEFORE else "Insert After"
    text = Text(mode.buffer, style=INPUT_STYLE, no_wrap=True)
    text.append(" ", style=CURSOR_STYLE)
    return InsertPanel(title=title, text=text)


def render_help(mode: Mode) -> Text:
    bindings = COMPOSING_BINDINGS if isinstance(mode, ComposingInsertion) else NAVIGATION_BINDINGS
    text = Text()
    for idx, (key, label) in enumerate(bindings):
        if idx:
            text.append("   ")
        text.append(key, style=KEY_STYLE)
        text.append(f": {label}")
    return text
