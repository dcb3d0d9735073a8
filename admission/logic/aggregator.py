"""
APS Aggregator

Totals a student's Admission Point Score from a full subject list:
sum of the best 6 levels, Life Orientation excluded.
"""

from typing import List, Sequence, Tuple

from .contracts import Subject, ApsBreakdown
from .constants import APS_SUBJECT_COUNT
from .subjects import is_excluded_subject


def split_subjects(
    subjects: Sequence[Subject]
) -> Tuple[List[Subject], List[Subject], List[Subject]]:
    """
    Partition subjects into (counted, excluded, dropped).

    Eligible subjects are ranked by level, highest first; ties keep input
    order. The first APS_SUBJECT_COUNT are counted, the rest are dropped.
    The input sequence is not modified.
    """
    excluded = [s for s in subjects if is_excluded_subject(s)]
    valid = [s for s in subjects if not is_excluded_subject(s)]

    ranked = sorted(valid, key=lambda s: s.level, reverse=True)

    counted = ranked[:APS_SUBJECT_COUNT]
    dropped = ranked[APS_SUBJECT_COUNT:]
    return counted, excluded, dropped


def total_aps(subjects: Sequence[Subject]) -> int:
    """
    Compute the APS for a subject list.

    Levels are summed as given, so out-of-range levels are not corrected.
    Returns 0 for an empty list or a list holding only Life Orientation.

    Args:
        subjects: The student's full subject list

    Returns:
        Sum of the levels of the best 6 qualifying subjects
    """
    counted, _, _ = split_subjects(subjects)
    return sum(s.level for s in counted)


def score_subjects(subjects: Sequence[Subject]) -> ApsBreakdown:
    """
    Compute the APS along with which subjects were counted, excluded and dropped.
    """
    counted, excluded, dropped = split_subjects(subjects)
    return ApsBreakdown(
        total=sum(s.level for s in counted),
        counted=counted,
        excluded=excluded,
        dropped=dropped,
    )
