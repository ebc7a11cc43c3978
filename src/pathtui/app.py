from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.theme import Theme

from .config import load_config
from .input_mode import (
    ExistsProbe,
    KeyOutcome,
    KeyPress,
    Session,
    handle_key,
    handle_paste,
)
from .logs import setup_logging
from .path_list import PathList
from .paths import config_path
from .render import render_session
from .shell_command import (
    JoinError,
    ShellKind,
    generate_shell_command,
    shell_kind_from_name,
)
from .sources import detect_shell, path_exists, read_path_entries
from .ui.panels import InsertEntryPanel, KeyHelpBar, PathListPanel

logger = logging.getLogger(__name__)

REDRAW_INTERVAL = 0.1
DESCRIPTION = (
    "Interactively edit the entries of PATH and print one shell statement "
    "that applies the result, e.g. eval \"$(pathtui)\"."
)

TOKYO_NIGHT_THEME = Theme(
    name="tokyo-night",
    primary="#7aa2f7",
    secondary="#7dcfff",
    accent="#bb9af7",
    warning="#e0af68",
    error="#f7768e",
    success="#9ece6a",
    foreground="#c0caf5",
    background="#1a1b26",
    surface="#1f2335",
    panel="#24283b",
    boost="#2f334d",
)


class PathEditorApp(App[list[str]]):
    ENABLE_COMMAND_PALETTE = False

    BINDINGS = [
        Binding("ctrl+c", "interrupt", "Quit", show=False, priority=True),
    ]

    CSS = """
    Screen {
        background: $background;
        color: $text;
    }

    #root {
        height: 100%;
        padding: 1 1;
    }

    #path_list {
        height: 1fr;
        border: round $primary;
        background: $surface;
    }

    #insert_panel {
        height: 3;
        border: round $accent;
        background: $panel;
    }

    #key_help {
        height: 3;
        border: round $secondary;
    }

    .hidden {
        display: none;
    }
    """

    def __init__(
        self,
        entries: Sequence[str],
        exists: ExistsProbe = path_exists,
        notify_missing: bool = False,
    ) -> None:
        super().__init__()
        self.register_theme(TOKYO_NIGHT_THEME)
        self.theme = TOKYO_NIGHT_THEME.name
        self._session = Session(PathList(entries))
        self._exists = exists
        self._notify_missing = notify_missing
        self._scroll_offset = 0
        self._list_panel: PathListPanel | None = None
        self._insert_panel: InsertEntryPanel | None = None
        self._key_help: KeyHelpBar | None = None

    @property
    def session(self) -> Session:
        return self._session

    def compose(self) -> ComposeResult:
        with Vertical(id="root"):
            yield PathListPanel(id="path_list")
            yield InsertEntryPanel(id="insert_panel", classes="hidden")
            yield KeyHelpBar(id="key_help")

    def on_mount(self) -> None:
        self._list_panel = self.query_one("#path_list", PathListPanel)
        self._insert_panel = self.query_one("#insert_panel", InsertEntryPanel)
        self._key_help = self.query_one("#key_help", KeyHelpBar)
        logger.info("Session started with %d entries", len(self._session.paths))
        self._redraw()
        self.set_interval(REDRAW_INTERVAL, self._redraw)

    def on_key(self, event: events.Key) -> None:
        character = event.character if event.is_printable else None
        self.dispatch_press(KeyPress(event.key, character))
        # Every key belongs to the state machine; skip the default bindings.
        event.stop()
        event.prevent_default()

    def on_paste(self, event: events.Paste) -> None:
        handle_paste(self._session, event.text)
        self._redraw()
        event.stop()

    def action_interrupt(self) -> None:
        self.dispatch_press(KeyPress("ctrl+c"))

    async def action_quit(self) -> None:
        # ctrl+q follows the same rule as q: only while navigating.
        self.dispatch_press(KeyPress("q"))

    def dispatch_press(self, press: KeyPress) -> KeyOutcome:
        outcome = handle_key(self._session, press, self._exists)
        self._report(outcome)
        if outcome.quit:
            entries = self._session.paths.entries
            logger.info("Quit with %d entries", len(entries))
            self.exit(entries)
            return outcome
        self._redraw()
        return outcome

    def _report(self, outcome: KeyOutcome) -> None:
        if outcome.deleted is not None:
            logger.info("Deleted %s", outcome.deleted)
        if outcome.inserted is not None:
            logger.info(
                "Inserted %s at %s",
                outcome.inserted,
                self._session.paths.selection,
            )
        if outcome.rejected is not None:
            logger.info("Discarded missing path %s", outcome.rejected)
            if self._notify_missing:
                self.notify(f"Path does not exist: {outcome.rejected}", severity="warning")

    def _redraw(self) -> None:
        if self._list_panel is None or self._insert_panel is None or self._key_help is None:
            return
        layout = render_session(
            self._session,
            self._list_panel.visible_rows,
            self._scroll_offset,
        )
        self._scroll_offset = layout.scroll_offset
        self._list_panel.show(layout)
        self._insert_panel.show(layout.insert_panel)
        self._key_help.show(layout.help_text)


def emit_command(entries: Sequence[str], shell: ShellKind, separator: str = os.pathsep) -> int:
    try:
        command = generate_shell_command(entries, shell, separator)
    except JoinError as exc:
        logger.error("Cannot join entries: %s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(command)
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathtui",
        description=DESCRIPTION,
        epilog=f"Config file: {config_path()}",
    )
    parser.add_argument(
        "--shell",
        choices=[kind.value for kind in ShellKind],
        help="Output syntax (default: detected from $SHELL)",
    )
    parser.add_argument(
        "--notify-missing",
        action="store_true",
        default=None,
        help="Show a notice when an inserted path does not exist",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Log level for the log file",
    )
    parser.add_argument("--config", help="Path to an alternative config file")
    return parser


def _cli_help_text() -> str:
    return _build_parser().format_help()


def _resolve_shell(cli_shell: str | None, config_shell: ShellKind | None) -> ShellKind:
    if cli_shell:
        return ShellKind(cli_shell)
    if config_shell is not None:
        return config_shell
    return shell_kind_from_name(detect_shell())


def main(argv: Sequence[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    config_file = Path(args.config).expanduser() if args.config else None
    config, config_error = load_config(config_file)
    if config_error:
        print(f"Warning: {config_error}", file=sys.stderr)
    if args.log_level:
        config.log_level = args.log_level
    setup_logging(config.logging_level)

    shell = _resolve_shell(args.shell, config.shell_kind)
    notify_missing = args.notify_missing if args.notify_missing is not None else bool(config.notify_missing)
    app = PathEditorApp(read_path_entries(), notify_missing=notify_missing)
    result = app.run()
    if app.return_code:
        raise SystemExit(app.return_code)
    if result is None:
        raise SystemExit(1)
    status = emit_command(result, shell)
    if status:
        raise SystemExit(status)
