"""
Data Contracts for the APS Engine

Defines Pydantic models for subjects (input) and the scored profile (output).
These contracts are the API boundary for the scoring engine.
"""

from typing import List, Optional
from pydantic import BaseModel, Field

from .levels import level_of


# =============================================================================
# VALUE TYPES
# =============================================================================

class Subject(BaseModel):
    """
    One examined subject for one student.

    ``level`` is derived from ``mark``; build subjects with ``from_mark`` and
    change marks with ``with_mark`` so the two never disagree.
    """
    name: str
    mark: float
    level: int

    class Config:
        frozen = True

    @classmethod
    def from_mark(cls, name: str, mark: float) -> "Subject":
        return cls(name=name, mark=mark, level=level_of(mark))

    def with_mark(self, mark: float) -> "Subject":
        """Return a copy with a new mark and its recomputed level."""
        return Subject.from_mark(self.name, mark)


# =============================================================================
# INPUT CONTRACTS
# =============================================================================

class SubjectInput(BaseModel):
    """
    Subject as entered by a student or read from a results document.
    Any supplied level is ignored; it is always recomputed from the mark.
    """
    name: str = Field(..., min_length=1, pattern=r"\S")
    mark: float = Field(..., ge=0, le=100)
    level: Optional[int] = None


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class ApsBreakdown(BaseModel):
    """How each subject contributed to the APS total."""
    total: int = 0
    counted: List[Subject] = Field(default_factory=list)
    excluded: List[Subject] = Field(default_factory=list)
    dropped: List[Subject] = Field(default_factory=list)


class StudentProfile(BaseModel):
    """
    Caller-owned profile with the score attached.
    The engine computes ``aps_score`` but never stores the profile.
    """
    name: str
    id_number: str
    subjects: List[Subject] = Field(default_factory=list)
    aps_score: int = 0
