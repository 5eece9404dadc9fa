# proofing/engine/corrector.py

"""Applies replacement candidates to produce the corrected text."""

from typing import Callable, Iterable, Optional

from proofing.core.domain import CorrectionResult, Issue
from proofing.engine.spans import patch

# Picks the replacement for an issue; None or "" leaves the span unchanged
CandidatePolicy = Callable[[Issue], Optional[str]]


def first_candidate(issue: Issue) -> Optional[str]:
    """Default policy: the checker's top-ranked candidate."""
    return issue.first_candidate


def correct(
    original_text: str,
    issues: Iterable[Issue],
    choose: CandidatePolicy = first_candidate,
) -> CorrectionResult:
    """Returns ``original_text`` with the chosen replacement of each issue applied.

    Issues without a usable candidate are skipped and do not appear in
    ``applied_issues``.

    Args:
        original_text: Text the issue offsets refer to
        issues: Non-overlapping issues in any order
        choose: Candidate selection policy

    Returns:
        CorrectionResult with the corrected text and the applied issues

    Raises:
        OffsetOverlapError: If an issue span is invalid or overlaps another.
    """

    def render(issue: Issue, span_text: str) -> Optional[str]:
        replacement = choose(issue)
        return replacement or None

    corrected, applied = patch(original_text, issues, render)
    return CorrectionResult(
        original_text=original_text,
        corrected_text=corrected,
        applied_issues=applied,
    )
