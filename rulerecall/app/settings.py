# app/settings.py
from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any
import json
import logging

from rulerecall.app.errors import SettingsError

logger = logging.getLogger(__name__)

CLEANUP_MODES = ("semantic", "efficiency", "none")


@dataclass(frozen=True)
class DiffSettings:
    # 0 means no deadline, which keeps diffs reproducible
    timeout: float = 0.0
    edit_cost: int = 4
    cleanup: str = "semantic"
    checklines: bool = False


@dataclass(frozen=True)
class TypingSettings:
    accept_enter: bool = False
    extra_characters: str = ""


@dataclass(frozen=True)
class Settings:
    diff: DiffSettings = field(default_factory=DiffSettings)
    typing: TypingSettings = field(default_factory=TypingSettings)


DEFAULT_SETTINGS = Settings()


# -------- helpers --------
def _check_keys(section: str, d: Dict[str, Any], allowed: set) -> None:
    if not isinstance(d, dict):
        raise SettingsError(f"Section '{section}' must be an object")
    unknown = set(d.keys()) - allowed
    if unknown:
        raise SettingsError(
            f"Unknown {section} settings: {', '.join(sorted(unknown))}"
        )


def _diff_from_dict(d: Dict[str, Any]) -> DiffSettings:
    _check_keys("diff", d, {"timeout", "edit_cost", "cleanup", "checklines"})
    base = DiffSettings()

    timeout = d.get("timeout", base.timeout)
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout < 0:
        raise SettingsError(f"diff.timeout must be a non-negative number, got {timeout!r}")

    edit_cost = d.get("edit_cost", base.edit_cost)
    if isinstance(edit_cost, bool) or not isinstance(edit_cost, int) or edit_cost < 0:
        raise SettingsError(f"diff.edit_cost must be a non-negative integer, got {edit_cost!r}")

    cleanup = d.get("cleanup", base.cleanup)
    if cleanup not in CLEANUP_MODES:
        raise SettingsError(
            f"diff.cleanup must be one of {', '.join(CLEANUP_MODES)}, got {cleanup!r}"
        )

    checklines = d.get("checklines", base.checklines)
    if not isinstance(checklines, bool):
        raise SettingsError(f"diff.checklines must be true or false, got {checklines!r}")

    return DiffSettings(
        timeout=float(timeout),
        edit_cost=edit_cost,
        cleanup=cleanup,
        checklines=checklines,
    )


def _typing_from_dict(d: Dict[str, Any]) -> TypingSettings:
    _check_keys("typing", d, {"accept_enter", "extra_characters"})
    base = TypingSettings()

    accept_enter = d.get("accept_enter", base.accept_enter)
    if not isinstance(accept_enter, bool):
        raise SettingsError(f"typing.accept_enter must be true or false, got {accept_enter!r}")

    extra = d.get("extra_characters", base.extra_characters)
    if not isinstance(extra, str):
        raise SettingsError(f"typing.extra_characters must be a string, got {extra!r}")

    return TypingSettings(accept_enter=accept_enter, extra_characters=extra)


# -------- public API --------
def settings_from_dict(d: Dict[str, Any]) -> Settings:
    """
    Build Settings from a plain dict shaped like
    {"diff": {...}, "typing": {...}}. Missing sections and keys keep
    their defaults; unknown keys and bad values raise SettingsError.
    """
    _check_keys("root", d, {"diff", "typing"})
    return Settings(
        diff=_diff_from_dict(d.get("diff", {})),
        typing=_typing_from_dict(d.get("typing", {})),
    )


def load_settings(path) -> Settings:
    """Load settings from a JSON file; a missing file means defaults."""
    p = Path(path)
    if not p.exists():
        logger.debug("No settings file at %s, using defaults", p)
        return DEFAULT_SETTINGS
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise SettingsError(f"Could not read settings from {p}: {e}") from e
    settings = settings_from_dict(data)
    logger.info("Loaded settings from %s", p)
    return settings
