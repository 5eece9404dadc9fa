# proofing/core/definitions.py

"""Constants for markup markers, messages and style thresholds."""


class Markers:
    """Default marker pair used to wrap flagged spans."""

    OPEN = "[["
    CLOSE = "]]"
    HTML_CLASS = "error-highlight"


class Messages:
    """User-facing strings shared by the pipeline and the UI."""

    NO_SUGGESTION = "No suggestion"
    NO_ISSUES = "No grammar issues found!"
    ALREADY_CORRECT = "Text is already correct!"
    NO_TEXT = "Please enter some text to check."
    LONG_SENTENCES = "Consider breaking into shorter sentences."
    GOOD_STRUCTURE = "Good sentence structure!"


# Average words per sentence above which long sentences are reported
LONG_SENTENCE_THRESHOLD = 20

DEFAULT_LANGUAGE = "en-US"
