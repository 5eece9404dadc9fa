# proofing/core/domain.py

"""Domain models for issues and proofreading results."""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from proofing.core.definitions import LONG_SENTENCE_THRESHOLD, Messages


@dataclass(frozen=True)
class Issue:
    """A single span flagged by the grammar checker.

    Attributes:
        offset: Start index in the original text
        length: Number of characters covered by the issue
        message: Human-readable description of the problem
        replacements: Ordered replacement candidates, index 0 is the default
        rule_id: Identifier of the checker rule, when known
    """

    offset: int
    length: int
    message: str = ""
    replacements: Tuple[str, ...] = ()
    rule_id: Optional[str] = None

    def __post_init__(self) -> None:
        if isinstance(self.replacements, str):
            raise TypeError("replacements must be a sequence of strings, not a single str")
        # Accept any iterable of candidates but store an immutable tuple
        if not isinstance(self.replacements, tuple):
            object.__setattr__(self, "replacements", tuple(self.replacements))

    @property
    def end(self) -> int:
        return self.offset + self.length

    @property
    def first_candidate(self) -> Optional[str]:
        return self.replacements[0] if self.replacements else None


@dataclass(frozen=True)
class CorrectionResult:
    """Output of the corrector.

    Attributes:
        original_text: Text the issues refer to
        corrected_text: Text with the chosen replacements applied
        applied_issues: Issues that contributed a replacement, in offset order
    """

    original_text: str
    corrected_text: str
    applied_issues: Tuple[Issue, ...] = ()

    @property
    def changed(self) -> bool:
        return self.corrected_text != self.original_text


@dataclass(frozen=True)
class MarkedSpan:
    """Position of one wrapped span inside the markup.

    Attributes:
        start: Start index of the wrapped span in the markup
        end: End index of the wrapped span in the markup
        text: Original text the wrapper surrounds
    """

    start: int
    end: int
    text: str


@dataclass(frozen=True)
class HighlightResult:
    """Original text with every issue span wrapped in a marker.

    ``spans`` lists the wrapped regions of ``markup`` in order, so the
    decoration can be removed by position.
    """

    markup: str
    spans: Tuple[MarkedSpan, ...] = ()


@dataclass(frozen=True)
class TextStatistics:
    """Word and sentence counts for a text."""

    word_count: int
    sentence_count: int
    avg_words_per_sentence: int
    long_sentence_threshold: int = LONG_SENTENCE_THRESHOLD

    @property
    def insight(self) -> str:
        if self.avg_words_per_sentence > self.long_sentence_threshold:
            return Messages.LONG_SENTENCES
        return Messages.GOOD_STRUCTURE

    def summary(self) -> str:
        return (
            f"Word count: {self.word_count}. "
            f"Sentences: {self.sentence_count}. "
            f"Avg words per sentence: {self.avg_words_per_sentence}. "
            f"{self.insight}"
        )


@dataclass(frozen=True)
class Suggestion:
    """Display form of an issue against the text it was raised on."""

    message: str
    flagged_text: str
    replacement: Optional[str] = None

    @classmethod
    def from_issue(cls, text: str, issue: Issue) -> "Suggestion":
        return cls(
            message=issue.message,
            flagged_text=text[issue.offset : issue.end],
            replacement=issue.first_candidate or None,
        )

    @property
    def display(self) -> str:
        replacement = self.replacement or Messages.NO_SUGGESTION
        return f'{self.message}: "{self.flagged_text}" → "{replacement}"'


@dataclass
class ProofreadReport:
    """Result object returned by the proofreading service.

    Attributes:
        original_text: Text that was checked
        correction: Corrector output, ``None`` when the run failed
        highlight: Highlighter output, ``None`` when the run failed
        statistics: Statistics of the corrected text, ``None`` when the run failed
        issues: Issues reported by the checker, in checker order
        suggestions: One entry per issue, in checker order
        metadata: Counters and failure details
    """

    original_text: str
    correction: Optional[CorrectionResult] = None
    highlight: Optional[HighlightResult] = None
    statistics: Optional[TextStatistics] = None
    issues: Tuple[Issue, ...] = ()
    suggestions: Tuple[Suggestion, ...] = ()
    metadata: dict = field(default_factory=dict)

    @property
    def failed(self) -> bool:
        return self.metadata.get("status") == "failed"
