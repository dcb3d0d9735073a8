"""
Subject helpers

Name normalization used by the exclusion rule, and level-consistent
construction of subject lists from captured marks.
"""

from typing import Any, Iterable, List, Mapping, Union

from .constants import EXCLUDED_SUBJECTS
from .contracts import Subject, SubjectInput


def normalize_subject_name(name: str) -> str:
    """Trim surrounding whitespace and case-fold a subject name."""
    return name.strip().casefold()


def is_excluded_subject(subject: Any) -> bool:
    """True when the subject never counts towards the APS (Life Orientation)."""
    return normalize_subject_name(subject.name) in EXCLUDED_SUBJECTS


def capture_subjects(
    raw_subjects: Iterable[Union[SubjectInput, Mapping[str, Any]]]
) -> List[Subject]:
    """
    Build subjects from captured name/mark pairs.

    Levels supplied by the source (a manual form, an extracted document) are
    discarded and recomputed from the mark.

    Args:
        raw_subjects: SubjectInput models or dicts with ``name`` and ``mark``

    Returns:
        List of Subject in input order
    """
    subjects: List[Subject] = []
    for raw in raw_subjects:
        if isinstance(raw, Mapping):
            name, mark = raw["name"], raw["mark"]
        else:
            name, mark = raw.name, raw.mark
        subjects.append(Subject.from_mark(name, mark))
    return subjects
