# app/keys.py
from dataclasses import dataclass

BACKSPACE = "Backspace"
ENTER = "Enter"

# Keys the verifier never treats as content; the host keeps its default handling
PASS_THROUGH_KEYS = frozenset({
    "ArrowLeft", "ArrowRight", "ArrowUp", "ArrowDown",
    "Home", "End", "PageUp", "PageDown",
    "Delete", "Tab",
    "Shift", "CapsLock", "Alt", "Control", "Meta",
})


@dataclass(frozen=True)
class KeyDescriptor:
    """
    One keydown as the host saw it. `key` follows DOM naming:
    a single character for printable keys, otherwise a name
    such as "Backspace", "ArrowLeft" or "Enter".
    """
    key: str
    ctrl: bool = False
    meta: bool = False
    alt: bool = False
    shift: bool = False

    @property
    def is_chord(self) -> bool:
        # Ctrl+Alt together is AltGr on Windows, which types characters
        return (self.ctrl and not self.alt) or self.meta

    @property
    def is_single_char(self) -> bool:
        return len(self.key) == 1


def is_check_shortcut(key: KeyDescriptor) -> bool:
    """Ctrl+Enter (Cmd+Enter on macOS) asks for a comparison."""
    return key.key == ENTER and (key.ctrl or key.meta)
