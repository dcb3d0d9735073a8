from typing import Dict, Any, List, Sequence
import json

from ..logic.contracts import Subject
from ..logic.subjects import is_excluded_subject
from .guidance import DEADLINE_GUIDE, SPECIFIC_CLOSING_DATES
from .safety_rules import SAFETY_RULES, SYSTEM_ROLE_DEFINITION, ANALYSIS_OUTPUT_INSTRUCTION


def build_system_prompt() -> str:
    """Constructs the static system prompt."""
    rules_str = "\n".join([f"- {rule}" for rule in SAFETY_RULES])

    return f"""{SYSTEM_ROLE_DEFINITION}

SAFETY RULES (NON-NEGOTIABLE):
{rules_str}

OUTPUT FORMAT:
{ANALYSIS_OUTPUT_INSTRUCTION}
"""


def build_user_prompt(subjects: Sequence[Subject], aps_score: int) -> str:
    """
    Constructs the user prompt from the student's subjects and APS.
    """
    deadlines = {**DEADLINE_GUIDE, "closing_dates": SPECIFIC_CLOSING_DATES}

    user_content = f"""
STUDENT RESULTS:
{json.dumps(_minimize_subject_data(subjects), indent=2)}

APS (best 6 subjects, Life Orientation excluded): {aps_score}

APPLICATION DEADLINES:
{json.dumps(deadlines, indent=2)}

TASK:
Recommend courses, bursaries, careers and an action plan for this student. Adhere strictly to the safety rules.
"""
    return user_content


def _minimize_subject_data(subjects: Sequence[Subject]) -> List[Dict[str, Any]]:
    """Helper to reduce subject data for the prompt."""
    return [
        {
            "subject": s.name,
            "mark": s.mark,
            "level": s.level,
            "counts_for_aps": not is_excluded_subject(s),
        }
        for s in subjects
    ]
