"""Interactive branch picker using Textual."""

import asyncio
import signal
import sys
from typing import Optional

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Static

from .constants import CONFIRM_HINT, HINT_TEXT, PROMPTS, RENAME_HINT, TUI_STYLES
from .exceptions import TerminalError
from .formatters import format_ref_row
from .logging_config import get_logger
from .models.keys import KeyEvent, KeyKind
from .services.git.actions import describe
from .session import Mode, Outcome, Session, SessionResult

logger = get_logger(__name__)

# Rows taken by the prompt and the status bar
CHROME_ROWS = 2

_KEY_MAP = {
    "up": KeyKind.UP,
    "down": KeyKind.DOWN,
    "ctrl+p": KeyKind.UP,
    "ctrl+n": KeyKind.DOWN,
    "pageup": KeyKind.PAGE_UP,
    "pagedown": KeyKind.PAGE_DOWN,
    "left": KeyKind.LEFT,
    "right": KeyKind.RIGHT,
    "home": KeyKind.HOME,
    "end": KeyKind.END,
    "ctrl+pageup": KeyKind.FIRST,
    "ctrl+pagedown": KeyKind.LAST,
    "enter": KeyKind.CONFIRM,
    "escape": KeyKind.CANCEL,
    "ctrl+c": KeyKind.CANCEL,
    "backspace": KeyKind.BACKSPACE,
    "delete": KeyKind.DELETE,
    # Ctrl+Backspace arrives as ^H on many terminals
    "ctrl+h": KeyKind.CLEAR,
    "ctrl+backspace": KeyKind.CLEAR,
    "ctrl+u": KeyKind.CLEAR,
}


def translate_key(event: events.Key) -> KeyEvent:
    """Map a Textual key event onto the picker's key vocabulary."""
    kind = _KEY_MAP.get(event.key)
    if kind is not None:
        return KeyEvent(kind)
    if event.is_printable and event.character:
        return KeyEvent.character(event.character)
    return KeyEvent(KeyKind.OTHER)


def build_prompt(session: Session) -> Text:
    """Header row: action prompt, query and match count."""
    query, caret = session.query, session.caret
    prompt = Text(PROMPTS[session.action.value], style="bold")
    prompt.append(query[:caret])
    # The character under the caret, or a blank cell past the end
    prompt.append(query[caret:caret + 1] or " ", style=TUI_STYLES["caret"])
    prompt.append(query[caret + 1:])
    prompt.append(f"  {len(session.filtered)}/{len(session.refs)}", style=TUI_STYLES["hint"])
    return prompt


def build_list(session: Session, width: int) -> Text:
    """The visible window of the filtered ref list."""
    rows = session.visible_rows()
    if not rows:
        return Text("  No matching branches", style=TUI_STYLES["hint"])
    return Text("\n").join(format_ref_row(ref, selected, width) for ref, selected in rows)


def build_status(session: Session) -> Text:
    """Footer row: confirmation prompt, rename input, inline message or key hints."""
    pending = session.pending
    if session.mode is Mode.CONFIRMING and pending is not None:
        status = Text(describe(pending.ref, pending.kind), style=TUI_STYLES["confirm"])
        status.append(f"  {CONFIRM_HINT}", style=TUI_STYLES["hint"])
        return status
    if session.mode is Mode.RENAMING and pending is not None:
        status = Text(describe(pending.ref, pending.kind) + " ", style=TUI_STYLES["confirm"])
        status.append(session.new_name)
        status.append(f"  {RENAME_HINT}", style=TUI_STYLES["hint"])
        return status
    if session.message:
        style = TUI_STYLES["error"] if session.message_is_error else TUI_STYLES["info"]
        return Text(session.message, style=style)
    return Text(HINT_TEXT, style=TUI_STYLES["hint"])


class PickerApp(App[SessionResult]):
    """Full-screen branch picker.

    Textual switches to the alternate screen in raw mode while the app runs
    and restores the terminal however it stops. All picker state lives in
    the Session; this class only translates keys and repaints.
    """

    ENABLE_COMMAND_PALETTE = False
    TITLE = "git-utils"

    CSS = """
    Screen {
        background: $surface;
        layout: vertical;
    }

    #prompt {
        height: 1;
    }

    #ref-list {
        height: 1fr;
    }

    #status-bar {
        dock: bottom;
        height: 1;
        background: $panel;
    }
    """

    BINDINGS = [
        Binding("ctrl+c", "cancel", "Cancel", show=False, priority=True),
    ]

    def __init__(self, session: Session):
        super().__init__()
        self.session = session
        self._exited = False
        self._signals = []

    def compose(self) -> ComposeResult:
        """Create child widgets."""
        yield Static(id="prompt")
        yield Static(id="ref-list")
        yield Static(id="status-bar")

    def on_mount(self) -> None:
        """Hook signals and draw the first frame."""
        self._install_signal_handlers()
        self.session.resize(self._list_height())
        self.render_session()

    def on_unmount(self) -> None:
        loop = asyncio.get_running_loop()
        for signum in self._signals:
            loop.remove_signal_handler(signum)
        self._signals = []

    def _install_signal_handlers(self) -> None:
        """Route termination signals through the normal exit path."""
        loop = asyncio.get_running_loop()
        for name in ("SIGTERM", "SIGHUP"):
            signum = getattr(signal, name, None)
            if signum is None:
                continue
            try:
                loop.add_signal_handler(signum, self.exit_interactive_mode)
            except (NotImplementedError, RuntimeError, ValueError) as e:
                logger.debug(f"Cannot handle {name}: {e}")
                continue
            self._signals.append(signum)

    def _list_height(self) -> int:
        return max(1, self.size.height - CHROME_ROWS)

    def on_resize(self, event: events.Resize) -> None:
        """Keep the cursor visible when the terminal changes size."""
        self.session.resize(max(1, event.size.height - CHROME_ROWS))
        self.render_session()

    def on_key(self, event: events.Key) -> None:
        """Feed every key press to the session, then repaint."""
        key = translate_key(event)
        # Unmapped keys still reach the session: they dismiss a confirmation
        if key.kind is not KeyKind.OTHER:
            event.stop()
            event.prevent_default()
        self.session.handle_key(key)
        self.render_session()

    def render_session(self) -> None:
        """Repaint the whole picker from the session state."""
        if self.session.is_finished:
            self.exit_interactive_mode()
            return
        self.query_one("#prompt", Static).update(build_prompt(self.session))
        self.query_one("#ref-list", Static).update(build_list(self.session, self.size.width))
        self.query_one("#status-bar", Static).update(build_status(self.session))

    def exit_interactive_mode(self) -> None:
        """Stop the app and hand the session result back. Safe to call repeatedly."""
        if self._exited:
            return
        self._exited = True
        if not self.session.is_finished:
            self.session.cancel()
        self.exit(self.session.result)

    def action_cancel(self) -> None:
        """Ctrl+C: behaves like Escape."""
        self.session.handle_key(KeyEvent(KeyKind.CANCEL))
        self.render_session()

    async def action_quit(self) -> None:
        """Override quit action so leaving by Textual's own key is a cancel."""
        self.exit_interactive_mode()

    async def action_help_quit(self) -> None:
        self.action_cancel()


def run_picker(session: Session) -> SessionResult:
    """Run the picker full-screen until the session ends.

    Raises:
        TerminalError: If there is no interactive terminal or the UI fails to start
    """
    if not (sys.stdin.isatty() and sys.stdout.isatty()):
        raise TerminalError("Can only be run in an interactive tty")

    app = PickerApp(session)
    result: Optional[SessionResult] = app.run()

    if result is None:
        if app.return_code not in (None, 0):
            raise TerminalError("The terminal UI stopped unexpectedly")
        result = session.result if session.is_finished else SessionResult(Outcome.CANCELLED)

    logger.debug(f"Picker finished: {result.outcome.value}")
    return result
