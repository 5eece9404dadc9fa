# proofing/__init__.py

"""Position-aware grammar correction and error highlighting."""

from proofing.core.domain import (
    CorrectionResult,
    HighlightResult,
    Issue,
    MarkedSpan,
    Suggestion,
    TextStatistics,
)
from proofing.core.exceptions import OffsetOverlapError, ProofingError
from proofing.engine.corrector import correct
from proofing.engine.highlighter import highlight
from proofing.engine.statistics import compute_statistics

__all__ = [
    "Issue",
    "CorrectionResult",
    "HighlightResult",
    "MarkedSpan",
    "Suggestion",
    "TextStatistics",
    "ProofingError",
    "OffsetOverlapError",
    "correct",
    "highlight",
    "compute_statistics",
]
__version__ = "0.1.0"
