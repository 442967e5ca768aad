from typing import Tuple


def round_half_up(numerator: int, denominator: int) -> int:
    """
    Integer rounding of numerator/denominator with halves going up,
    matching JavaScript's Math.round for non-negative values.
    """
    return (2 * numerator + denominator) // (2 * denominator)


def similarity_score(matching_chars: int, reference_len: int, candidate_len: int) -> int:
    """
    Percentage of matching characters against the longer of the two texts.
    Both texts empty -> 0.
    """
    total = max(reference_len, candidate_len)
    if total <= 0:
        return 0
    score = round_half_up(100 * matching_chars, total)
    return max(0, min(100, score))


def typing_progress(typed: str, target: str) -> Tuple[int, int]:
    return min(len(typed), len(target)), len(target)


def typing_accuracy(typed: str, target: str) -> float:
    """Share of typed characters that match the target at the same position."""
    if not typed:
        return 1.0
    correct = sum(1 for i, ch in enumerate(typed) if i < len(target) and target[i] == ch)
    return max(0.0, min(1.0, correct / len(typed)))
