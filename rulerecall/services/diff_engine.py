# services/diff_engine.py
"""
Character-level comparison of a learner's answer against the rule text.

The alignment itself comes from google's diff-match-patch; this module
tags its output, applies the configured cleanup pass and derives the
similarity score. Characters are Python code points, so a combining
accent counts as its own character.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional, Tuple
import logging

import diff_match_patch as dmp_module

from rulerecall.app.calculation import similarity_score
from rulerecall.app.settings import DiffSettings

logger = logging.getLogger(__name__)


class SegmentKind(IntEnum):
    MISSING = -1   # in the reference, absent from the candidate
    EQUAL = 0
    EXTRA = 1      # in the candidate, absent from the reference


_LABELS = {
    SegmentKind.EQUAL: "Correct",
    SegmentKind.MISSING: "Missing",
    SegmentKind.EXTRA: "Extra/Incorrect",
}


@dataclass(frozen=True)
class DiffSegment:
    kind: SegmentKind
    text: str

    @property
    def label(self) -> str:
        return _LABELS[self.kind]


@dataclass(frozen=True)
class DiffResult:
    segments: Tuple[DiffSegment, ...]
    similarity_score: int

    def _length_of(self, kind: SegmentKind) -> int:
        return sum(len(s.text) for s in self.segments if s.kind == kind)

    @property
    def matching_chars(self) -> int:
        return self._length_of(SegmentKind.EQUAL)

    @property
    def missing_chars(self) -> int:
        return self._length_of(SegmentKind.MISSING)

    @property
    def extra_chars(self) -> int:
        return self._length_of(SegmentKind.EXTRA)

    def reference_text(self) -> str:
        return "".join(s.text for s in self.segments if s.kind != SegmentKind.EXTRA)

    def candidate_text(self) -> str:
        return "".join(s.text for s in self.segments if s.kind != SegmentKind.MISSING)

    def as_tuples(self) -> List[Tuple[int, str]]:
        return [(int(s.kind), s.text) for s in self.segments]


class DiffEngine:
    def __init__(self, settings: Optional[DiffSettings] = None):
        self.settings = settings or DiffSettings()
        # one configured instance per engine, never the library defaults
        self._dmp = dmp_module.diff_match_patch()
        self._dmp.Diff_Timeout = self.settings.timeout
        self._dmp.Diff_EditCost = self.settings.edit_cost

    def _raw_diff(self, reference: str, candidate: str) -> list:
        diffs = self._dmp.diff_main(reference, candidate, self.settings.checklines)
        cleanup = self.settings.cleanup
        if cleanup == "semantic":
            self._dmp.diff_cleanupSemantic(diffs)
        elif cleanup == "efficiency":
            self._dmp.diff_cleanupEfficiency(diffs)
        return diffs

    def compare(self, reference: str, candidate: str) -> DiffResult:
        reference = reference or ""
        candidate = candidate or ""
        segments = tuple(
            DiffSegment(SegmentKind(op), text)
            for op, text in self._raw_diff(reference, candidate)
            if text
        )
        matching = sum(len(s.text) for s in segments if s.kind == SegmentKind.EQUAL)
        score = similarity_score(matching, len(reference), len(candidate))
        logger.debug(
            "compare: %d segments, %d/%d matching, score %d",
            len(segments), matching, max(len(reference), len(candidate)), score,
        )
        return DiffResult(segments=segments, similarity_score=score)


def compare_texts(reference: str, candidate: str,
                  settings: Optional[DiffSettings] = None) -> DiffResult:
    """
    Diff `candidate` against `reference` and score it.
    Callers should skip this when has_answer(candidate) is False.
    """
    return DiffEngine(settings).compare(reference, candidate)
