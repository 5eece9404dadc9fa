# proofing/engine/highlighter.py

"""Marks issue spans in the original text."""

import html
from typing import Callable, Iterable, List

from proofing.core.definitions import Markers
from proofing.core.domain import HighlightResult, Issue, MarkedSpan
from proofing.engine.spans import patch, sort_issues, validate_spans

Wrap = Callable[[str], str]


def marker_wrap(open_marker: str = Markers.OPEN, close_marker: str = Markers.CLOSE) -> Wrap:
    """Builds a wrap function surrounding a span with a fixed marker pair."""

    def wrap(span_text: str) -> str:
        return f"{open_marker}{span_text}{close_marker}"

    return wrap


def highlight(
    original_text: str,
    issues: Iterable[Issue],
    wrap: Wrap = marker_wrap(),
) -> HighlightResult:
    """Wraps every issue span of ``original_text``.

    All issues are marked, including those without replacement candidates.
    Only decoration is inserted: ``strip_markup`` on the result gives back
    ``original_text``.

    Raises:
        OffsetOverlapError: If an issue span is invalid or overlaps another.
    """
    wrapped: List[str] = []

    def render(issue: Issue, span_text: str) -> str:
        wrapped.append(wrap(span_text))
        return wrapped[-1]

    markup, marked = patch(original_text, issues, render)

    spans: List[MarkedSpan] = []
    drift = 0
    for issue, piece in zip(marked, wrapped):
        start = issue.offset + drift
        span_text = original_text[issue.offset : issue.end]
        spans.append(MarkedSpan(start=start, end=start + len(piece), text=span_text))
        drift += len(piece) - issue.length

    return HighlightResult(markup=markup, spans=tuple(spans))


def highlight_html(
    original_text: str,
    issues: Iterable[Issue],
    css_class: str = Markers.HTML_CLASS,
) -> HighlightResult:
    """Renders the highlight as HTML with the whole text escaped.

    Each span becomes ``<span class="{css_class}">...</span>``. Text between
    spans is escaped as well.

    Raises:
        OffsetOverlapError: If an issue span is invalid or overlaps another.
    """
    ordered = sort_issues(issues)
    validate_spans(ordered, len(original_text))

    open_tag = f'<span class="{html.escape(css_class, quote=True)}">'
    parts: List[str] = []
    spans: List[MarkedSpan] = []
    length = 0
    pos = 0
    for issue in ordered:
        gap = html.escape(original_text[pos : issue.offset], quote=False)
        span_text = original_text[issue.offset : issue.end]
        piece = f"{open_tag}{html.escape(span_text, quote=False)}</span>"
        parts.extend((gap, piece))
        length += len(gap)
        spans.append(MarkedSpan(start=length, end=length + len(piece), text=span_text))
        length += len(piece)
        pos = issue.end
    parts.append(html.escape(original_text[pos:], quote=False))
    return HighlightResult(markup="".join(parts), spans=tuple(spans))


def strip_markup(result: HighlightResult) -> str:
    """Removes the wrappers of a highlight by position.

    Marker-like text that was already present in the original is kept.
    """
    parts = []
    pos = 0
    for span in result.spans:
        parts.append(result.markup[pos : span.start])
        parts.append(span.text)
        pos = span.end
    parts.append(result.markup[pos:])
    return "".join(parts)
