"""
APS Engine

Orchestrates subject capture and scoring for a student profile.
This is the primary entry point for the profile-management layer.
"""

import logging
import time
from typing import Any, Dict, Iterable, Optional, Union, Mapping

from .contracts import SubjectInput, StudentProfile, ApsBreakdown
from .subjects import capture_subjects
from .aggregator import score_subjects
from .constants import DEFAULT_STUDENT_NAME, DEFAULT_ID_NUMBER, ENGINE_VERSION

logger = logging.getLogger(__name__)

RawSubject = Union[SubjectInput, Mapping[str, Any]]


class ApsEngine:
    """
    Turns captured results into a scored student profile.

    Pipeline flow:
    1. Capture - Build subjects and derive each level from its mark
    2. Aggregation - Total the best 6 levels, excluding Life Orientation
    3. Profile Assembly - Attach the score to a caller-owned profile

    The engine holds no student data between calls.
    """

    def __init__(self):
        self.version = ENGINE_VERSION

    def score(self, raw_subjects: Iterable[RawSubject]) -> ApsBreakdown:
        """
        Score captured subjects.

        Args:
            raw_subjects: SubjectInput models or dicts with ``name`` and ``mark``

        Returns:
            ApsBreakdown with the total and per-subject outcome
        """
        subjects = capture_subjects(raw_subjects)
        return score_subjects(subjects)

    def build_profile(
        self,
        raw_subjects: Iterable[RawSubject],
        name: Optional[str] = None,
        id_number: Optional[str] = None,
    ) -> StudentProfile:
        """
        Build a student profile with its APS attached.

        Args:
            raw_subjects: Captured subjects
            name: Student name, defaults to "Student"
            id_number: ID number, defaults to "N/A"

        Returns:
            StudentProfile
        """
        start_time = time.perf_counter()

        subjects = capture_subjects(raw_subjects)
        breakdown = score_subjects(subjects)

        profile = StudentProfile(
            name=name or DEFAULT_STUDENT_NAME,
            id_number=id_number or DEFAULT_ID_NUMBER,
            subjects=subjects,
            aps_score=breakdown.total,
        )

        processing_time = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"📊 APS {profile.aps_score} from {len(breakdown.counted)} counted, "
            f"{len(breakdown.excluded)} excluded, {len(breakdown.dropped)} dropped "
            f"subjects ({processing_time:.2f}ms)"
        )
        return profile

    def build_profile_from_dict(self, profile_data: Dict[str, Any]) -> StudentProfile:
        """
        Build a profile from a dictionary.

        Convenience method for API integration. Accepts ``subjects`` plus
        optional ``name`` and ``id_number`` (or ``idNumber``).
        """
        return self.build_profile(
            profile_data.get("subjects", []),
            name=profile_data.get("name"),
            id_number=profile_data.get("id_number") or profile_data.get("idNumber"),
        )


# Convenience function for simple usage
def build_profile(
    raw_subjects: Iterable[RawSubject],
    name: Optional[str] = None,
    id_number: Optional[str] = None,
) -> StudentProfile:
    """
    Convenience function to score subjects into a profile.
    """
    engine = ApsEngine()
    return engine.build_profile(raw_subjects, name=name, id_number=id_number)
