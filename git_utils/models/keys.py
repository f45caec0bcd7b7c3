"""Key events delivered to the picker session."""
from enum import Enum
from dataclasses import dataclass


class KeyKind(Enum):
    """Kinds of input the session understands."""
    CHARACTER = "character"
    UP = "up"
    DOWN = "down"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    FIRST = "first"  # Jump to the top of the list
    LAST = "last"  # Jump to the bottom of the list
    LEFT = "left"
    RIGHT = "right"
    HOME = "home"  # Caret to the start of the input line
    END = "end"  # Caret to the end of the input line
    CONFIRM = "confirm"
    CANCEL = "cancel"
    BACKSPACE = "backspace"
    DELETE = "delete"  # Erase the character under the caret
    CLEAR = "clear"  # Erase the whole input line
    OTHER = "other"


@dataclass(frozen=True)
class KeyEvent:
    """A single keystroke. `char` is only set for CHARACTER events."""
    kind: KeyKind
    char: str = ""

    @classmethod
    def character(cls, char: str) -> "KeyEvent":
        return cls(KeyKind.CHARACTER, char)
