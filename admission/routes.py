"""
APS API Routes

Exposes the APS engine and the AI advisor via REST API.
"""

import logging
from typing import Optional, List, Dict, Any
from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError

from .logic.contracts import SubjectInput, Subject, StudentProfile
from .logic.levels import level_of
from .logic.subjects import capture_subjects
from .logic.aggregator import score_subjects
from .logic.engine import ApsEngine
from .logic.constants import MIN_SUBJECTS_FOR_ANALYSIS, ENGINE_VERSION
from .ai.advisor import advisor
from .ai.guidance import DEADLINE_GUIDE, SPECIFIC_CLOSING_DATES, RESOURCES


router = APIRouter(prefix="/aps", tags=["aps"])
logger = logging.getLogger(__name__)

engine = ApsEngine()


# =============================================================================
# REQUEST/RESPONSE SCHEMAS
# =============================================================================

class LevelRequest(BaseModel):
    """Request body for the level endpoint."""
    mark: float = Field(..., description="Percentage mark")


class ScoreRequest(BaseModel):
    """Request body for the score endpoint."""
    subjects: List[SubjectInput] = Field(
        ...,
        description="Subjects with percentage marks; levels are derived",
        example=[
            {"name": "Mathematics", "mark": 78},
            {"name": "English Home Language", "mark": 65},
            {"name": "Life Orientation", "mark": 82},
        ]
    )


class ProfileRequest(ScoreRequest):
    """Request body for the profile endpoint."""
    name: Optional[str] = None
    id_number: Optional[str] = None
    analyze: bool = Field(
        default=True,
        description="Include AI-generated course, bursary and career recommendations"
    )


class ExtractRequest(BaseModel):
    """Request body for the extract endpoint."""
    base64_data: str = Field(..., min_length=1)
    mime_type: str = Field(..., min_length=1)


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post("/level", summary="Map a mark to its achievement level")
def get_level(request: LevelRequest):
    return {"mark": request.mark, "level": level_of(request.mark)}


@router.post("/score", summary="Calculate APS for a subject list")
def get_score(request: ScoreRequest):
    """
    Calculate the APS: sum of the best 6 levels, Life Orientation excluded.

    **Response:**
    - `aps_score`: The total
    - `subjects`: Subjects with derived levels, in input order
    - `breakdown`: Which subjects were counted, excluded or dropped
    """
    subjects = capture_subjects(request.subjects)
    breakdown = score_subjects(subjects)
    return {
        "aps_score": breakdown.total,
        "subjects": [_serialize_subject(s) for s in subjects],
        "breakdown": {
            "counted": [_serialize_subject(s) for s in breakdown.counted],
            "excluded": [_serialize_subject(s) for s in breakdown.excluded],
            "dropped": [_serialize_subject(s) for s in breakdown.dropped],
        },
    }


@router.post("/profile", summary="Build a scored student profile")
def create_profile(request: ProfileRequest):
    """
    Score the subjects into a student profile and, when requested, ask the
    AI advisor for recommendations.

    **Request Body:**
    - `subjects`: Subjects with marks; at least 3 when `analyze` is set
    - `name`, `id_number`: Optional student details
    - `analyze`: Include AI recommendations (default: True)
    """
    try:
        if request.analyze and len(request.subjects) < MIN_SUBJECTS_FOR_ANALYSIS:
            raise HTTPException(
                status_code=400,
                detail=f"At least {MIN_SUBJECTS_FOR_ANALYSIS} subjects are required, got {len(request.subjects)}"
            )

        profile = engine.build_profile(
            request.subjects, name=request.name, id_number=request.id_number
        )
        response_data: Dict[str, Any] = {
            "profile": _serialize_profile(profile),
            "warnings": [],
            "engine_version": ENGINE_VERSION,
        }

        # AI Analysis Layer
        if request.analyze:
            analysis = advisor.analyze_profile(profile.subjects, profile.aps_score)
            if analysis is None:
                response_data["warnings"].append("Recommendations are unavailable right now.")
            response_data["analysis"] = analysis

        return response_data

    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Profile scoring failed")
        return JSONResponse(
            status_code=500,
            content={"error": str(e)}
        )


@router.post("/extract", summary="Read results from a document and score them")
def extract_profile(request: ExtractRequest):
    """
    Extract subjects from an uploaded results document, re-derive each level
    from its mark and score the profile.
    """
    if not advisor.is_configured:
        raise HTTPException(status_code=503, detail="AI advisor is not configured")

    try:
        result = advisor.extract_results(request.base64_data, request.mime_type)
        if result is None:
            raise HTTPException(
                status_code=502,
                detail="Failed to extract data. Try a clearer image or use manual entry."
            )

        try:
            subjects = [SubjectInput(**s) for s in result.get("subjects") or []]
        except (ValidationError, TypeError) as e:
            raise HTTPException(status_code=502, detail=f"Extracted subjects are malformed: {e}")

        if len(subjects) < MIN_SUBJECTS_FOR_ANALYSIS:
            logger.warning(f"[EXTRACT] Insufficient subjects extracted: {len(subjects)}")
            raise HTTPException(
                status_code=400,
                detail=f"Only found {len(subjects)} subjects. Please try a clearer image or use manual entry."
            )

        profile = engine.build_profile(
            subjects, name=result.get("name"), id_number=result.get("idNumber")
        )
        logger.info(f"[EXTRACT] Success: Extracted {len(profile.subjects)} subjects for {profile.name}")
        return {"profile": _serialize_profile(profile)}

    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Results extraction failed")
        return JSONResponse(
            status_code=500,
            content={"error": str(e)}
        )


@router.get("/resources", summary="Application resources and deadlines")
def get_resources():
    return {
        "resources": RESOURCES,
        "deadlines": DEADLINE_GUIDE,
        "closing_dates": SPECIFIC_CLOSING_DATES,
    }


def _serialize_subject(subject: Subject) -> Dict[str, Any]:
    """Convert Subject to JSON-serializable dict."""
    return {"name": subject.name, "mark": subject.mark, "level": subject.level}


def _serialize_profile(profile: StudentProfile) -> Dict[str, Any]:
    """Convert StudentProfile to JSON-serializable dict."""
    return {
        "name": profile.name,
        "id_number": profile.id_number,
        "subjects": [_serialize_subject(s) for s in profile.subjects],
        "aps_score": profile.aps_score,
    }


# =============================================================================
# HEALTH CHECK
# =============================================================================

@router.get("/health", summary="APS engine health check")
def health_check():
    """Check if APS engine is operational."""
    return {
        "status": "ok",
        "engine": "aps",
        "version": ENGINE_VERSION,
        "advisor_configured": advisor.is_configured,
    }
