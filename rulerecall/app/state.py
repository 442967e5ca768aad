from __future__ import annotations
from typing import List, Optional, Tuple

from rulerecall.app.calculation import typing_accuracy, typing_progress
from rulerecall.app.keys import KeyDescriptor
from rulerecall.app.settings import TypingSettings
from rulerecall.services.typing_verifier import (
    Classification,
    TypingState,
    TypingUpdate,
    TypingVerifier,
    classify,
    is_complete,
    typing_state,
)


class TypingSession:
    """
    Target text plus what has been typed against it. Input only changes
    through press(), and a new target always clears it, so it can never
    outgrow the target.
    """

    def __init__(self, target: Optional[str] = "", settings: Optional[TypingSettings] = None):
        self._target = target or ""
        self._typed = ""
        self.settings = settings

    def __repr__(self):
        return f"TypingSession(target={self._target!r}, typed={self._typed!r})"

    @property
    def target(self) -> str:
        return self._target

    @target.setter
    def target(self, text: Optional[str]):
        self.reset(text or "")

    @property
    def settings(self) -> TypingSettings:
        return self._verifier.settings

    @settings.setter
    def settings(self, settings: Optional[TypingSettings]):
        self._verifier = TypingVerifier(settings)

    @property
    def typed(self) -> str:
        return self._typed

    def reset(self, text: Optional[str] = None):
        if text is not None:
            self._target = text
        self._typed = ""

    def press(self, key: KeyDescriptor) -> TypingUpdate:
        update = self._verifier.handle_key(self._target, self._typed, key)
        self._typed = update.new_input
        return update

    @property
    def state(self) -> TypingState:
        return typing_state(self.target, self._typed)

    @property
    def is_complete(self) -> bool:
        return is_complete(self.target, self._typed)

    def classifications(self) -> List[Classification]:
        return classify(self.target, self._typed)

    def progress(self) -> Tuple[int, int]:
        return typing_progress(self._typed, self.target)

    def accuracy(self) -> float:
        return typing_accuracy(self._typed, self.target)
