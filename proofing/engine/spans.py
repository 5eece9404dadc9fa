# proofing/engine/spans.py

"""Shared ordering, validation and patching of issue spans.

Issue offsets always refer to the original text. ``patch`` walks the issues
left to right and keeps a running ``drift``, the total length change of the
edits applied so far, to map each offset onto the text built so far.
"""

import logging
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from proofing.core.domain import Issue
from proofing.core.exceptions import OffsetOverlapError

logger = logging.getLogger(__name__)

# Returns the text to put in place of an issue span, or None to leave it as is
SpanRenderer = Callable[[Issue, str], Optional[str]]


def sort_issues(issues: Iterable[Issue]) -> List[Issue]:
    """Returns a new list ordered by offset.

    Issues sharing an offset keep their input order.
    """
    indexed = list(enumerate(issues))
    indexed.sort(key=lambda pair: (pair[1].offset, pair[0]))
    return [issue for _, issue in indexed]


def validate_spans(ordered: Sequence[Issue], text_length: int) -> None:
    """Checks sorted issues against the text bounds and each other.

    Raises:
        OffsetOverlapError: For the first issue that is out of bounds or
            starts before the previous issue ends.
    """
    previous_end = 0
    for issue in ordered:
        if issue.offset < 0 or issue.length < 0:
            raise OffsetOverlapError(issue.offset, issue.length, "negative offset or length")
        if issue.end > text_length:
            raise OffsetOverlapError(
                issue.offset, issue.length, f"span ends past text length {text_length}"
            )
        if issue.offset < previous_end:
            raise OffsetOverlapError(
                issue.offset, issue.length, f"overlaps previous span ending at {previous_end}"
            )
        previous_end = issue.end


def patch(
    text: str, issues: Iterable[Issue], render: SpanRenderer
) -> Tuple[str, Tuple[Issue, ...]]:
    """Applies ``render`` to every issue span, left to right.

    Args:
        text: Original text the issue offsets refer to
        issues: Issues in any order
        render: Produces the replacement for a span, or None to skip it

    Returns:
        The patched text and the issues that were rendered, in offset order

    Raises:
        OffsetOverlapError: If any span is invalid. Nothing is returned in
            that case, so callers never see a partially patched text.
    """
    ordered = sort_issues(issues)
    validate_spans(ordered, len(text))

    current = text
    drift = 0
    patched: List[Issue] = []

    for issue in ordered:
        span_text = text[issue.offset : issue.end]
        replacement = render(issue, span_text)
        if replacement is None:
            continue

        start = issue.offset + drift
        end = start + issue.length
        if not 0 <= start <= end <= len(current):
            raise OffsetOverlapError(
                issue.offset, issue.length, f"adjusted span [{start}, {end}) out of bounds"
            )

        current = current[:start] + replacement + current[end:]
        drift += len(replacement) - issue.length
        patched.append(issue)

    logger.debug(
        "Patched %d of %d spans, final drift %d", len(patched), len(ordered), drift
    )
    return current, tuple(patched)
