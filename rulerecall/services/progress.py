# services/progress.py
from typing import Dict, Iterable, List

from rulerecall.app.calculation import round_half_up

MASTERED = "mastered"
NEEDS_REVIEW = "needs-review"
DIDNT_KNOW = "didnt-know"

CONFIDENCE_LEVELS = (MASTERED, NEEDS_REVIEW, DIDNT_KNOW)


class ProgressTracker:
    """
    Self-ratings per rule id. Rating a rule "mastered" also records it in
    the mastered set, which later ratings do not undo.
    """

    def __init__(self):
        self.confidence: Dict[str, str] = {}
        self.mastered = set()

    def rate(self, rule_id: str, level: str):
        if not rule_id:
            return
        if level not in CONFIDENCE_LEVELS:
            raise ValueError(f"Unknown confidence level: {level!r}")
        self.confidence[rule_id] = level
        if level == MASTERED:
            self.mark_mastered(rule_id)

    def mark_mastered(self, rule_id: str):
        if rule_id:
            self.mastered.add(rule_id)

    def is_mastered(self, rule_id: str) -> bool:
        return rule_id in self.mastered

    def mastered_percentage(self, rule_ids: Iterable[str]) -> int:
        ids = list(rule_ids)
        if not ids:
            return 0
        done = sum(1 for r in ids if r in self.mastered)
        return round_half_up(100 * done, len(ids))

    def needing_review(self) -> List[str]:
        return sorted(r for r, lvl in self.confidence.items() if lvl != MASTERED)

    def snapshot(self) -> dict:
        return {
            "mastered": sorted(self.mastered),
            "confidence": dict(self.confidence),
        }

    @classmethod
    def from_snapshot(cls, data: dict) -> "ProgressTracker":
        """Rebuild a tracker from snapshot(); unknown levels raise ValueError."""
        tracker = cls()
        for rid, level in (data.get("confidence") or {}).items():
            if level not in CONFIDENCE_LEVELS:
                raise ValueError(f"Unknown confidence level for {rid!r}: {level!r}")
            tracker.confidence[str(rid)] = level
        for rid in data.get("mastered") or []:
            tracker.mark_mastered(str(rid))
        return tracker
