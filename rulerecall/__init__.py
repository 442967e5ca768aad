from rulerecall.app.keys import KeyDescriptor, is_check_shortcut
from rulerecall.app.rules import Rule, rule_id
from rulerecall.app.settings import (
    DiffSettings,
    Settings,
    TypingSettings,
    load_settings,
    settings_from_dict,
)
from rulerecall.app.state import TypingSession
from rulerecall.app.validation import has_answer
from rulerecall.services.diff_engine import (
    DiffEngine,
    DiffResult,
    DiffSegment,
    SegmentKind,
    compare_texts,
)
from rulerecall.services.progress import ProgressTracker
from rulerecall.services.typing_verifier import (
    Classification,
    KeyOutcome,
    TypingState,
    TypingUpdate,
    TypingVerifier,
    classify,
    handle_typing_key_event,
    is_complete,
    typing_state,
)

__version__ = "0.1.0"

__all__ = [
    "Classification",
    "DiffEngine",
    "DiffResult",
    "DiffSegment",
    "DiffSettings",
    "KeyDescriptor",
    "KeyOutcome",
    "ProgressTracker",
    "Rule",
    "SegmentKind",
    "Settings",
    "TypingSession",
    "TypingSettings",
    "TypingState",
    "TypingUpdate",
    "TypingVerifier",
    "classify",
    "compare_texts",
    "handle_typing_key_event",
    "has_answer",
    "is_check_shortcut",
    "is_complete",
    "load_settings",
    "rule_id",
    "settings_from_dict",
    "typing_state",
]
