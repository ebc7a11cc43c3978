from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Union

from .path_list import Direction, PathList, Side

ExistsProbe = Callable[[str], bool]

QUIT_KEYS = frozenset({"q", "escape", "ctrl+c"})
MOVE_KEYS = {
    "up": Direction.UP,
    "k": Direction.UP,
    "down": Direction.DOWN,
    "j": Direction.DOWN,
}
INSERT_KEYS = {
    "a": Side.AFTER,
    "b": Side.BEFORE,
}
DELETE_KEY = "d"
COMMIT_KEYS = frozenset({"enter", "return"})
CANCEL_KEY = "escape"
BACKSPACE_KEY = "backspace"


@dataclass(frozen=True)
class Navigating:
    pass


@dataclass(frozen=True)
class ComposingInsertion:
    side: Side
    buffer: str = ""


Mode = Union[Navigating, ComposingInsertion]


@dataclass(frozen=True)
class KeyPress:
    """A key as seen by the state machine.

    ``key`` is the Textual key name (``"up"``, ``"ctrl+c"``, ``"a"``);
    ``character`` is set only for printable input.
    """

    key: str
    character: str | None = None


@dataclass(frozen=True)
class KeyOutcome:
    mode: Mode
    quit: bool = False
    inserted: str | None = None
    deleted: str | None = None
    rejected: str | None = None


@dataclass
class Session:
    paths: PathList
    mode: Mode = field(default_factory=Navigating)

    @property
    def composing(self) -> bool:
        return isinstance(self.mode, ComposingInsertion)


def handle_key(session: Session, press: KeyPress, exists: ExistsProbe) -> KeyOutcome:
    """Apply one key to the session and return what happened."""
    if isinstance(session.mode, ComposingInsertion):
        outcome = _handle_composing_key(session.paths, session.mode, press, exists)
    else:
        outcome = _handle_navigating_key(session.paths, press)
    session.mode = outcome.mode
    return outcome


def _handle_navigating_key(paths: PathList, press: KeyPress) -> KeyOutcome:
    key = press.key
    if key in QUIT_KEYS:
        return KeyOutcome(Navigating(), quit=True)
    side = INSERT_KEYS.get(key)
    if side is not None:
        return KeyOutcome(ComposingInsertion(side))
    if key == DELETE_KEY:
        return KeyOutcome(Navigating(), deleted=paths.delete_selected())
    direction = MOVE_KEYS.get(key)
    if direction is not None:
        paths.move_selection(direction)
    return KeyOutcome(Navigating())


def _handle_composing_key(
    paths: PathList,
    mode: ComposingInsertion,
    press: KeyPress,
    exists: ExistsProbe,
) -> KeyOutcome:
    key = press.key
    if key in COMMIT_KEYS:
        text = mode.buffer.strip()
        if not text:
            return KeyOutcome(Navigating())
        if not exists(text):
            return KeyOutcome(Navigating(), rejected=text)
        paths.insert(text, mode.side)
        return KeyOutcome(Navigating(), inserted=text)
    if key == CANCEL_KEY:
        return KeyOutcome(Navigating())
    if key == BACKSPACE_KEY:
        return KeyOutcome(ComposingInsertion(mode.side, mode.buffer[:-1]))
    if press.character:
        return KeyOutcome(ComposingInsertion(mode.side, mode.buffer + press.character))
    return KeyOutcome(mode)


def handle_paste(session: Session, text: str) -> KeyOutcome:
    """Append pasted text to the buffer; pastes are ignored while navigating."""
    mode = session.mode
    if not isinstance(mode, ComposingInsertion):
        return KeyOutcome(mode)
    printable = "".join(char for char in text if char.isprintable())
    session.mode = ComposingInsertion(mode.side, mode.buffer + printable)
    return KeyOutcome(session.mode)
