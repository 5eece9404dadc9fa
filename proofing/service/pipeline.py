# proofing/service/pipeline.py

"""Main proofreading service pipeline."""

import logging
import threading
from typing import Optional, Sequence

from proofing.core.definitions import Messages
from proofing.core.domain import Issue, ProofreadReport, Suggestion
from proofing.core.exceptions import (
    CheckerError,
    ConfigurationError,
    NoTextError,
    OffsetOverlapError,
)
from proofing.engine.corrector import CandidatePolicy, correct, first_candidate
from proofing.engine.highlighter import highlight, marker_wrap
from proofing.engine.statistics import compute_statistics
from proofing.service.checker import LanguageToolChecker
from proofing.service.config import Settings, get_settings
from proofing.service.text_source import resolve_text

logger = logging.getLogger(__name__)


class CheckerService:
    """Singleton holder for the grammar checker.

    Creating a LanguageTool client is expensive, so one instance is shared
    by every request. The instance is rebuilt when the requested language
    or server differs from the one it was built for.
    """

    _instance: Optional[LanguageToolChecker] = None
    _lock = threading.Lock()

    @classmethod
    def get_instance(cls, settings: Optional[Settings] = None) -> LanguageToolChecker:
        """Returns the shared checker for ``settings`` (process-wide settings by default)."""
        settings = settings or get_settings()
        key = (settings.language, settings.languagetool_url)

        instance = cls._instance
        if instance is None or (instance.language, instance.remote_server) != key:
            with cls._lock:
                instance = cls._instance
                if instance is None or (instance.language, instance.remote_server) != key:
                    if instance is not None:
                        logger.info(
                            "Rebuilding checker for new settings",
                            extra={"language": settings.language},
                        )
                        instance.close()
                    instance = LanguageToolChecker(
                        language=settings.language,
                        remote_server=settings.languagetool_url,
                    )
                    cls._instance = instance
        return instance

    @classmethod
    def reset(cls) -> None:
        with cls._lock:
            if cls._instance is not None:
                cls._instance.close()
            cls._instance = None


def proofread(
    text: str,
    issues: Sequence[Issue],
    settings: Optional[Settings] = None,
    choose: CandidatePolicy = first_candidate,
) -> ProofreadReport:
    """Corrects, highlights and summarizes ``text`` for a known issue list.

    Raises:
        OffsetOverlapError: If the issues cannot be mapped onto the text.
    """
    settings = settings or get_settings()
    issues = tuple(issues)

    correction = correct(text, issues, choose=choose)
    marked = highlight(text, issues, marker_wrap(settings.marker_open, settings.marker_close))
    statistics = compute_statistics(
        correction.corrected_text, long_sentence_threshold=settings.long_sentence_threshold
    )
    suggestions = tuple(Suggestion.from_issue(text, issue) for issue in issues)

    return ProofreadReport(
        original_text=text,
        correction=correction,
        highlight=marked,
        statistics=statistics,
        issues=issues,
        suggestions=suggestions,
        metadata={
            "status": "ok",
            "issue_count": len(issues),
            "applied_count": len(correction.applied_issues),
            "already_correct": not correction.changed,
        },
    )


def proofread_text(
    raw_text: Optional[str],
    checker: Optional[LanguageToolChecker] = None,
    settings: Optional[Settings] = None,
) -> ProofreadReport:
    """Main entry point: resolves the text, checks it and builds the report.

    Args:
        raw_text: User input
        checker: Grammar checker to use, the shared instance by default
        settings: Settings to use, the process-wide settings by default

    Returns:
        ProofreadReport. On failure the report carries no outputs and its
        metadata describes the error.
    """
    try:
        text = resolve_text(raw_text)
    except NoTextError as e:
        return ProofreadReport(
            original_text="",
            metadata={"status": "failed", "error": str(e), "error_type": type(e).__name__},
        )

    try:
        settings = settings or get_settings()
        checker = checker or CheckerService.get_instance(settings)

        logger.info("Starting proofreading request", extra={"text_length": len(text)})
        issues = checker.check(text)
        report = proofread(text, issues, settings=settings)

        logger.info(
            "Proofreading completed",
            extra={
                "text_length": len(text),
                "issue_count": report.metadata["issue_count"],
                "applied_count": report.metadata["applied_count"],
            },
        )
        if report.metadata["already_correct"]:
            report.metadata["info"] = Messages.ALREADY_CORRECT
        return report

    except (CheckerError, ConfigurationError, OffsetOverlapError) as e:
        logger.error(
            f"Known error during proofreading: {type(e).__name__}",
            exc_info=True,
            extra={"text_length": len(text)},
        )
        return ProofreadReport(
            original_text=text,
            metadata={
                "error": str(e),
                "status": "failed",
                "error_type": type(e).__name__,
            },
        )
