"""
Tests for the answer comparison and similarity scoring.
"""

import pytest

from rulerecall.app.errors import SettingsError
from rulerecall.app.settings import DiffSettings, settings_from_dict
from rulerecall.services.diff_engine import (
    DiffEngine,
    DiffSegment,
    SegmentKind,
    compare_texts,
)

PAIRS = [
    ("The rule is X.", "The rule is Y."),
    ("A contract requires offer, acceptance and consideration.",
     "A contract needs an offer, acceptance, and consideration"),
    ("Hearsay is an out-of-court statement.", ""),
    ("", "something typed"),
    ("abc", "xyz"),
    ("abc", "abcdef"),
    ("café naïve", "café naive"),
    ("§ 2-207 “battle of the forms”", "§2-207 battle of forms"),
    ("mouse", "sofas"),
]


class TestCompareExamples:
    def test_single_substitution(self):
        result = compare_texts("The rule is X.", "The rule is Y.")
        assert list(result.segments) == [
            DiffSegment(SegmentKind.EQUAL, "The rule is "),
            DiffSegment(SegmentKind.MISSING, "X"),
            DiffSegment(SegmentKind.EXTRA, "Y"),
            DiffSegment(SegmentKind.EQUAL, "."),
        ]
        assert result.similarity_score == 93

    def test_identical_text_is_one_equal_segment(self):
        text = "Consideration is a bargained-for exchange."
        result = compare_texts(text, text)
        assert list(result.segments) == [DiffSegment(SegmentKind.EQUAL, text)]
        assert result.similarity_score == 100

    def test_no_shared_characters_scores_zero(self):
        result = compare_texts("abc", "xyz")
        assert result.similarity_score == 0
        assert result.matching_chars == 0

    def test_both_empty(self):
        result = compare_texts("", "")
        assert result.segments == ()
        assert result.similarity_score == 0

    def test_empty_candidate(self):
        result = compare_texts("Offer and acceptance.", "")
        assert result.as_tuples() == [(-1, "Offer and acceptance.")]
        assert result.similarity_score == 0

    def test_missing_word(self):
        result = compare_texts("The quick fox", "The fox")
        assert result.missing_chars == 6
        assert result.extra_chars == 0
        assert result.matching_chars == 7
        assert result.similarity_score == 54

    def test_padded_answer_scored_against_longer_text(self):
        result = compare_texts("abc", "abcdef")
        assert result.as_tuples() == [(0, "abc"), (1, "def")]
        assert result.similarity_score == 50

    def test_labels(self):
        result = compare_texts("The rule is X.", "The rule is Y.")
        assert [s.label for s in result.segments] == [
            "Correct", "Missing", "Extra/Incorrect", "Correct",
        ]


class TestCompareProperties:
    @pytest.mark.parametrize("reference,candidate", PAIRS)
    def test_reconstructs_both_texts(self, reference, candidate):
        result = compare_texts(reference, candidate)
        assert result.reference_text() == reference
        assert result.candidate_text() == candidate

    @pytest.mark.parametrize("reference,candidate", PAIRS)
    def test_score_within_bounds(self, reference, candidate):
        score = compare_texts(reference, candidate).similarity_score
        assert 0 <= score <= 100

    @pytest.mark.parametrize("reference,candidate", PAIRS)
    def test_no_adjacent_segments_share_a_kind(self, reference, candidate):
        segments = compare_texts(reference, candidate).segments
        for left, right in zip(segments, segments[1:]):
            assert left.kind != right.kind
        assert all(s.text for s in segments)

    @pytest.mark.parametrize("reference,candidate", PAIRS)
    def test_repeatable(self, reference, candidate):
        first = compare_texts(reference, candidate)
        second = compare_texts(reference, candidate)
        assert first == second

    def test_combining_marks_count_as_characters(self):
        # "e" + U+0301 is two code points
        result = compare_texts("e\u0301", "e")
        assert result.as_tuples() == [(0, "e"), (-1, "\u0301")]
        assert result.similarity_score == 50


class TestCleanupModes:
    def test_semantic_cleanup_folds_stray_matches(self):
        result = DiffEngine(DiffSettings(cleanup="semantic")).compare("mouse", "sofas")
        assert result.matching_chars == 0
        assert result.similarity_score == 0

    def test_without_cleanup_keeps_character_matches(self):
        result = DiffEngine(DiffSettings(cleanup="none")).compare("mouse", "sofas")
        assert result.matching_chars > 0
        assert result.reference_text() == "mouse"
        assert result.candidate_text() == "sofas"

    def test_efficiency_cleanup_reconstructs(self):
        engine = DiffEngine(DiffSettings(cleanup="efficiency", edit_cost=4))
        result = engine.compare("The buyer must pay.", "A buyer shall pay.")
        assert result.reference_text() == "The buyer must pay."
        assert result.candidate_text() == "A buyer shall pay."

    def test_engines_do_not_share_settings(self):
        fast = DiffEngine(DiffSettings(timeout=0.5))
        default = DiffEngine()
        assert fast._dmp.Diff_Timeout == 0.5
        assert default._dmp.Diff_Timeout == 0.0

    def test_settings_from_dict_feed_the_engine(self):
        settings = settings_from_dict({"diff": {"cleanup": "none"}})
        result = compare_texts("mouse", "sofas", settings.diff)
        assert result.matching_chars > 0

    def test_bad_cleanup_mode_rejected(self):
        with pytest.raises(SettingsError):
            settings_from_dict({"diff": {"cleanup": "aggressive"}})
