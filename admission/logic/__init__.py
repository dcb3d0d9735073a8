"""
APS Logic Module

Provides the deterministic Admission Point Score engine for matric results.
"""

from .contracts import (
    Subject,
    SubjectInput,
    ApsBreakdown,
    StudentProfile,
)
from .levels import level_of
from .aggregator import total_aps, score_subjects
from .subjects import normalize_subject_name, is_excluded_subject, capture_subjects
from .engine import ApsEngine, build_profile

__all__ = [
    # Core scoring
    "level_of",
    "total_aps",
    "score_subjects",

    # Subject helpers
    "normalize_subject_name",
    "is_excluded_subject",
    "capture_subjects",

    # Main engine
    "ApsEngine",
    "build_profile",

    # Contracts
    "Subject",
    "SubjectInput",
    "ApsBreakdown",
    "StudentProfile",
]
