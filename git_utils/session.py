"""State machine behind the interactive branch picker.

The session owns all picker state and changes it only in handle_key(), one
key at a time. It never touches the terminal, so a test can drive it with a
list of KeyEvents and inspect the result.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple, Union

from git_utils import view_model
from git_utils.constants import EXIT_CANCELLED, EXIT_FAILURE, EXIT_SUCCESS
from git_utils.exceptions import ActionError
from git_utils.filtering import filter_refs
from git_utils.logging_config import get_logger
from git_utils.models.keys import KeyEvent, KeyKind
from git_utils.models.ref import ActionKind, ActionRequest, ActionResult, Ref
from git_utils.view_model import ListView

if TYPE_CHECKING:
    from git_utils.config import Config
    from git_utils.services.git.actions import ActionExecutor

logger = get_logger(__name__)

CONFIRM_CHARACTERS = ("y", "Y")


class Mode(Enum):
    """What the picker is currently doing."""
    BROWSING = "browsing"
    CONFIRMING = "confirming"  # Waiting for a yes/no on a destructive action
    RENAMING = "renaming"  # Editing the new name of a branch
    EXITING = "exiting"


class Outcome(Enum):
    """How the session ended."""
    PENDING = "pending"
    CANCELLED = "cancelled"
    SUCCEEDED = "succeeded"


@dataclass(frozen=True)
class SessionResult:
    """What the picker hands back to its caller."""
    outcome: Outcome
    action_result: Optional[ActionResult] = None

    @property
    def exit_code(self) -> int:
        if self.outcome is Outcome.SUCCEEDED:
            return EXIT_SUCCESS
        if self.outcome is Outcome.CANCELLED:
            return EXIT_CANCELLED
        return EXIT_FAILURE


class Session:
    """Interactive picker state for one run."""

    def __init__(
        self,
        refs: Sequence[Ref],
        executor: "ActionExecutor",
        config: Union["Config", dict, None] = None,
        height: int = 10,
    ):
        """Initialize the session.

        Args:
            refs: Snapshot of the refs to pick from, in display order
            executor: Runs the confirmed action
            config: Configuration dictionary or Config object
            height: Number of list rows visible at once
        """
        config = config if config is not None else {}
        self.refs: Tuple[Ref, ...] = tuple(refs)
        self.executor = executor
        self.action = ActionKind(config.get("action", ActionKind.CHECKOUT.value))
        self.wrap = config.get("wrap_cursor", False)
        self.confirm_destructive = config.get("confirm_destructive", True)
        self.height = max(1, height)

        self.query: str = config.get("initial_query", "") or ""
        self.caret = len(self.query)  # Insertion point within the query
        self.filtered: List[Ref] = filter_refs(self.refs, self.query)
        self.view = ListView()

        self.mode = Mode.BROWSING
        self.pending: Optional[ActionRequest] = None
        self.new_name = ""
        self.message: Optional[str] = None
        self.message_is_error = False

        self.outcome = Outcome.PENDING
        self.action_result: Optional[ActionResult] = None

        # Start on the checked-out branch when it is listed
        for index, ref in enumerate(self.filtered):
            if ref.is_current:
                self.view = view_model.jump(self.view, index, len(self.filtered), self.height)
                break

    @property
    def selected_ref(self) -> Optional[Ref]:
        index = self.view.selection(len(self.filtered))
        return None if index is None else self.filtered[index]

    @property
    def result(self) -> SessionResult:
        return SessionResult(self.outcome, self.action_result)

    @property
    def is_finished(self) -> bool:
        return self.mode is Mode.EXITING

    def visible_rows(self) -> List[Tuple[Ref, bool]]:
        """(ref, is_selected) for every row inside the window."""
        count = len(self.filtered)
        selected = self.view.selection(count)
        return [
            (self.filtered[index], index == selected)
            for index in self.view.visible_range(count, self.height)
        ]

    def resize(self, height: int) -> None:
        self.height = max(1, height)
        self.view = view_model.clamp(self.view, len(self.filtered), self.height)

    def cancel(self) -> None:
        """Leave without doing anything."""
        if self.mode is Mode.EXITING:
            return
        logger.debug("Session cancelled")
        self.pending = None
        self.mode = Mode.EXITING
        self.outcome = Outcome.CANCELLED

    def handle_key(self, event: KeyEvent) -> Mode:
        """Apply one key press and return the resulting mode."""
        handlers = {
            Mode.BROWSING: self._handle_browsing,
            Mode.CONFIRMING: self._handle_confirming,
            Mode.RENAMING: self._handle_renaming,
        }
        handler = handlers.get(self.mode)
        if handler is not None:
            handler(event)
        return self.mode

    def _handle_browsing(self, event: KeyEvent) -> None:
        kind = event.kind
        count = len(self.filtered)
        query, caret = self.query, self.caret

        if kind is KeyKind.CANCEL:
            self.cancel()
        elif kind is KeyKind.CONFIRM:
            self._request_action()
        elif kind is KeyKind.CHARACTER and event.char:
            self._set_query(query[:caret] + event.char + query[caret:], caret + len(event.char))
        elif kind is KeyKind.BACKSPACE:
            if caret > 0:
                self._set_query(query[:caret - 1] + query[caret:], caret - 1)
        elif kind is KeyKind.DELETE:
            if caret < len(query):
                self._set_query(query[:caret] + query[caret + 1:], caret)
        elif kind is KeyKind.CLEAR:
            if query:
                self._set_query("", 0)
        elif kind is KeyKind.LEFT:
            self.caret = max(0, caret - 1)
        elif kind is KeyKind.RIGHT:
            self.caret = min(len(query), caret + 1)
        elif kind is KeyKind.HOME:
            self.caret = 0
        elif kind is KeyKind.END:
            self.caret = len(query)
        elif kind is KeyKind.UP:
            self._move(view_model.move(self.view, -1, count, self.height, wrap=self.wrap))
        elif kind is KeyKind.DOWN:
            self._move(view_model.move(self.view, 1, count, self.height, wrap=self.wrap))
        elif kind is KeyKind.PAGE_UP:
            self._move(view_model.move(self.view, -self.height, count, self.height))
        elif kind is KeyKind.PAGE_DOWN:
            self._move(view_model.move(self.view, self.height, count, self.height))
        elif kind is KeyKind.FIRST:
            self._move(view_model.jump(self.view, 0, count, self.height))
        elif kind is KeyKind.LAST:
            self._move(view_model.jump(self.view, count - 1, count, self.height))

    def _handle_confirming(self, event: KeyEvent) -> None:
        confirmed = event.kind is KeyKind.CONFIRM or (
            event.kind is KeyKind.CHARACTER and event.char in CONFIRM_CHARACTERS
        )
        if confirmed and self.pending is not None:
            self._dispatch(self.pending)
        else:
            self._back_to_browsing()

    def _handle_renaming(self, event: KeyEvent) -> None:
        kind = event.kind
        if kind is KeyKind.CANCEL:
            self._back_to_browsing()
        elif kind is KeyKind.CONFIRM and self.pending is not None:
            self._dispatch(ActionRequest(self.pending.ref, ActionKind.RENAME, self.new_name))
        elif kind is KeyKind.CHARACTER and event.char:
            self.new_name += event.char
        elif kind is KeyKind.BACKSPACE:
            self.new_name = self.new_name[:-1]
        elif kind is KeyKind.CLEAR:
            self.new_name = ""

    def _set_query(self, query: str, caret: int) -> None:
        self.query = query
        self.caret = caret
        self.filtered = filter_refs(self.refs, query)
        self.view = view_model.clamp(self.view, len(self.filtered), self.height)
        self._clear_message()

    def _move(self, view: ListView) -> None:
        self.view = view
        self._clear_message()

    def _clear_message(self) -> None:
        self.message = None
        self.message_is_error = False

    def _request_action(self) -> None:
        ref = self.selected_ref
        if ref is None:
            return

        request = ActionRequest(ref, self.action)
        if self.action is ActionKind.RENAME:
            self.pending = request
            self.new_name = ref.name
            self.mode = Mode.RENAMING
            self._clear_message()
        elif self.action.is_destructive and self.confirm_destructive:
            self.pending = request
            self.mode = Mode.CONFIRMING
            self._clear_message()
        else:
            self._dispatch(request)

    def _back_to_browsing(self) -> None:
        self.pending = None
        self.new_name = ""
        self.mode = Mode.BROWSING

    def _dispatch(self, request: ActionRequest) -> None:
        try:
            result = self.executor.execute(request)
        except ActionError as e:
            logger.warning(f"{request.kind.value} failed: {e}")
            self._back_to_browsing()
            self.message = str(e)
            self.message_is_error = True
            return

        self.pending = None
        self.action_result = result
        self.outcome = Outcome.SUCCEEDED
        self.mode = Mode.EXITING
