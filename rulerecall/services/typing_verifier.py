# services/typing_verifier.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple
import logging

from rulerecall.app.keys import BACKSPACE, ENTER, PASS_THROUGH_KEYS, KeyDescriptor
from rulerecall.app.settings import TypingSettings
from rulerecall.app.validation import is_allowed_char

logger = logging.getLogger(__name__)


class Classification(Enum):
    CORRECT = "correct"
    INCORRECT = "incorrect"
    CURSOR = "cursor"
    UNTOUCHED = "untouched"


class TypingState(Enum):
    EMPTY = "empty"
    IN_PROGRESS = "in_progress"
    COMPLETE = "complete"


class KeyOutcome(Enum):
    APPENDED = "appended"
    DELETED = "deleted"
    IGNORED = "ignored"            # backspace with nothing typed
    REJECTED = "rejected"          # swallowed; host suppresses the event
    PASSED_THROUGH = "passed"      # not content; host keeps default handling


@dataclass(frozen=True)
class TypingUpdate:
    new_input: str
    classifications: Tuple[Classification, ...]
    is_complete: bool
    state: TypingState
    outcome: KeyOutcome

    @property
    def suppress(self) -> bool:
        return self.outcome is KeyOutcome.REJECTED


def is_complete(target: str, typed: str) -> bool:
    return len(typed) == len(target) and typed == target


def typing_state(target: str, typed: str) -> TypingState:
    if is_complete(target, typed):
        return TypingState.COMPLETE
    if not typed:
        return TypingState.EMPTY
    return TypingState.IN_PROGRESS


def classify(target: str, typed: str) -> List[Classification]:
    """One entry per target position, recomputed from scratch."""
    n = len(typed)
    out: List[Classification] = []
    for i, ch in enumerate(target):
        if i < n:
            out.append(Classification.CORRECT if typed[i] == ch else Classification.INCORRECT)
        elif i == n:
            out.append(Classification.CURSOR)
        else:
            out.append(Classification.UNTOUCHED)
    return out


class TypingVerifier:
    def __init__(self, settings: Optional[TypingSettings] = None):
        self.settings = settings or TypingSettings()

    def _content_char(self, key: KeyDescriptor) -> Optional[str]:
        """Character a key would insert, or None if it is not content."""
        if key.key == ENTER and self.settings.accept_enter:
            return "\n"
        if key.is_single_char and is_allowed_char(key.key, self.settings.extra_characters):
            return key.key
        return None

    def apply_key(self, target: str, typed: str, key: KeyDescriptor) -> Tuple[str, KeyOutcome]:
        if key.key == BACKSPACE:
            if not typed:
                return typed, KeyOutcome.IGNORED
            return typed[:-1], KeyOutcome.DELETED

        if key.is_chord or key.key in PASS_THROUGH_KEYS:
            return typed, KeyOutcome.PASSED_THROUGH

        ch = self._content_char(key)
        if ch is None:
            return typed, KeyOutcome.REJECTED

        # the only place input grows
        if len(typed) >= len(target):
            return typed, KeyOutcome.REJECTED
        return typed + ch, KeyOutcome.APPENDED

    def handle_key(self, target: str, typed: str, key: KeyDescriptor) -> TypingUpdate:
        target = target or ""
        typed = typed or ""
        if len(typed) > len(target):
            logger.warning(
                "typed input is longer than its target (%d > %d)", len(typed), len(target)
            )
        new_input, outcome = self.apply_key(target, typed, key)
        logger.debug("key %r -> %s (%d/%d)", key.key, outcome.value, len(new_input), len(target))
        return TypingUpdate(
            new_input=new_input,
            classifications=tuple(classify(target, new_input)),
            is_complete=is_complete(target, new_input),
            state=typing_state(target, new_input),
            outcome=outcome,
        )


def handle_typing_key_event(target: str, typed: str, key: KeyDescriptor,
                            settings: Optional[TypingSettings] = None) -> TypingUpdate:
    return TypingVerifier(settings).handle_key(target, typed, key)
