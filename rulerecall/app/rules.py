from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rule:
    name: str
    text: str
    id: Optional[str] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Rule":
        missing = {"name", "text"} - set(d.keys())
        if missing:
            raise ValueError(f"Missing rule keys: {', '.join(sorted(missing))}")
        rule_id = d.get("id")
        return cls(
            name=str(d["name"]),
            text=str(d["text"]),
            id=str(rule_id) if rule_id is not None and rule_id != "" else None,
        )


def rule_id(rule: Rule, topic: str = "", subtopic: str = "") -> str:
    """Stable key for progress tracking; rules without an id get one from their location."""
    if rule.id:
        return rule.id
    logger.warning("Rule %r has no id, deriving one from topic/subtopic", rule.name)
    return f"{topic or 'unknown-topic'}-{subtopic or 'unknown-subtopic'}-{rule.name}"
