"""
APS Engine Constants

Defines the national achievement-level thresholds and the subject selection
rules used when totalling an Admission Point Score.
All values are deterministic with no AI/ML components.
"""

from typing import List, Tuple

# =============================================================================
# ACHIEVEMENT LEVELS
# =============================================================================

# (lower bound inclusive, level), ordered from highest to lowest band
LEVEL_THRESHOLDS: List[Tuple[float, int]] = [
    (80, 7),   # Outstanding achievement
    (70, 6),   # Meritorious achievement
    (60, 5),   # Substantial achievement
    (50, 4),   # Adequate achievement
    (40, 3),   # Moderate achievement
    (30, 2),   # Elementary achievement
]

# Anything below the lowest threshold
MIN_LEVEL = 1
MAX_LEVEL = 7

# =============================================================================
# APS SELECTION RULES
# =============================================================================

# Number of best subjects that count towards the APS
APS_SUBJECT_COUNT = 6

# Normalized subject names that never count towards the APS
EXCLUDED_SUBJECTS: Tuple[str, ...] = (
    "life orientation",
)

MAX_APS = APS_SUBJECT_COUNT * MAX_LEVEL

# =============================================================================
# CAPTURE / ANALYSIS
# =============================================================================

# Fewer subjects than this usually means the results document was misread
MIN_SUBJECTS_FOR_ANALYSIS = 3

DEFAULT_STUDENT_NAME = "Student"
DEFAULT_ID_NUMBER = "N/A"

ENGINE_VERSION = "1.0.0"
