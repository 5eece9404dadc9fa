"""Tests for highlighting issue spans in the original text."""

import pytest

from proofing import Issue, OffsetOverlapError, highlight
from proofing.engine.highlighter import highlight_html, marker_wrap, strip_markup

TEXT = "teh qick fox"
ISSUES = [
    Issue(offset=0, length=3, message="Possible typo", replacements=("the",)),
    Issue(offset=4, length=4, message="Possible typo", replacements=("quick",)),
]


def test_default_markers():
    assert highlight(TEXT, ISSUES).markup == "[[teh]] [[qick]] fox"


def test_no_issues_returns_text():
    marked = highlight(TEXT, [])
    assert marked.markup == TEXT
    assert marked.spans == ()


def test_issue_without_candidates_still_marked():
    issues = [Issue(offset=9, length=3, replacements=())]
    assert highlight(TEXT, issues).markup == "teh qick [[fox]]"


def test_custom_wrap_drift():
    markup = highlight(TEXT, reversed(ISSUES), lambda s: f"<b>{s}</b>").markup
    assert markup == "<b>teh</b> <b>qick</b> fox"


def test_custom_marker_pair():
    wrap = marker_wrap("{", "}")
    assert highlight("a b c", [Issue(offset=2, length=1)], wrap).markup == "a {b} c"


# ── Spans and stripping ──────────────────────────────────────────────

def test_spans_locate_wrapped_regions():
    marked = highlight(TEXT, ISSUES)
    assert [(s.start, s.end, s.text) for s in marked.spans] == [(0, 7, "teh"), (8, 16, "qick")]
    assert marked.markup[8:16] == "[[qick]]"


def test_content_preserved_after_stripping():
    text = "Their going too the store, isnt it?"
    issues = [
        Issue(offset=0, length=5, replacements=("They're",)),
        Issue(offset=12, length=3, replacements=("to",)),
        Issue(offset=27, length=4, replacements=()),
    ]
    marked = highlight(text, issues)
    assert marked.markup == "[[Their]] going [[too]] the store, [[isnt]] it?"
    assert strip_markup(marked) == text


def test_strip_keeps_marker_text_from_original():
    text = "see [[a]] here"
    marked = highlight(text, [Issue(offset=10, length=4)])
    assert marked.markup == "see [[a]] [[here]]"
    assert strip_markup(marked) == text


def test_strip_after_custom_wrap():
    text = "<b>x</b> teh"
    marked = highlight(text, [Issue(offset=9, length=3)], lambda s: f"<b>{s}</b>")
    assert marked.markup == "<b>x</b> <b>teh</b>"
    assert strip_markup(marked) == text


def test_strip_with_zero_length_issue():
    text = "ab"
    marked = highlight(text, [Issue(offset=1, length=0), Issue(offset=1, length=1)])
    assert marked.markup == "a[[]][[b]]"
    assert strip_markup(marked) == text


def test_overlap_rejected_without_output():
    issues = [Issue(offset=0, length=5), Issue(offset=3, length=4)]
    with pytest.raises(OffsetOverlapError):
        highlight(TEXT, issues)


# ── HTML ─────────────────────────────────────────────────────────────

def test_html_escapes_whole_text():
    marked = highlight_html("a < b teh & c", [Issue(offset=6, length=3)])
    assert marked.markup == 'a &lt; b <span class="error-highlight">teh</span> &amp; c'


def test_html_custom_class():
    marked = highlight_html("teh", [Issue(offset=0, length=3)], css_class="typo")
    assert marked.markup == '<span class="typo">teh</span>'


def test_html_private_use_characters_kept():
    text = "\ue000x\ue001 teh"
    marked = highlight_html(text, [Issue(offset=4, length=3)])
    assert marked.markup == '\ue000x\ue001 <span class="error-highlight">teh</span>'
    assert strip_markup(marked) == text


def test_html_spans_point_at_tags():
    marked = highlight_html("a < b teh & c", [Issue(offset=6, length=3)])
    span = marked.spans[0]
    assert marked.markup[span.start : span.end] == '<span class="error-highlight">teh</span>'
    assert strip_markup(marked) == "a &lt; b teh &amp; c"


def test_html_overlap_rejected():
    with pytest.raises(OffsetOverlapError):
        highlight_html(TEXT, [Issue(offset=0, length=5), Issue(offset=3, length=4)])
