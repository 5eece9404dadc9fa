# proofing/service/checker.py

"""LanguageTool access, returning issues in Python string indices."""

import logging
import threading
from typing import Any, Iterable, List, Optional

import language_tool_python
from language_tool_python.utils import LanguageToolError
from pydantic import BaseModel, Field, ValidationError

from proofing.core.definitions import DEFAULT_LANGUAGE
from proofing.core.domain import Issue
from proofing.core.exceptions import MalformedResponseError, ServiceError

logger = logging.getLogger(__name__)


class LanguageToolChecker:
    """Lazily creates one LanguageTool client and converts its matches.

    ``tool`` may be any object with a ``check(text)`` method returning
    LanguageTool-style matches; it is created on first use otherwise.
    """

    def __init__(
        self,
        language: str = DEFAULT_LANGUAGE,
        remote_server: Optional[str] = None,
        tool: Any = None,
    ) -> None:
        self.language = language
        self.remote_server = remote_server
        self._tool = tool
        self._lock = threading.Lock()

    def _get_tool(self) -> Any:
        if self._tool is None:
            with self._lock:
                # Double-checked locking pattern
                if self._tool is None:
                    logger.info(
                        "Initializing LanguageTool client",
                        extra={"language": self.language, "remote_server": self.remote_server},
                    )
                    try:
                        if self.remote_server:
                            self._tool = language_tool_python.LanguageTool(
                                self.language, remote_server=self.remote_server
                            )
                        else:
                            self._tool = language_tool_python.LanguageToolPublicAPI(self.language)
                    except (LanguageToolError, OSError) as e:
                        logger.error("Failed to initialize LanguageTool client", exc_info=True)
                        raise ServiceError(f"Grammar checker unavailable: {e}") from e
        return self._tool

    def check(self, text: str) -> List[Issue]:
        """Returns the issues LanguageTool reports for ``text``.

        Raises:
            ServiceError: If the checker call fails.
        """
        tool = self._get_tool()
        try:
            matches = tool.check(text)
        except (LanguageToolError, OSError) as e:
            logger.error(
                "Grammar check failed", exc_info=True, extra={"text_length": len(text)}
            )
            raise ServiceError(f"Grammar check failed: {e}") from e

        issues = issues_from_matches(matches)
        logger.info(
            "Grammar check completed",
            extra={"text_length": len(text), "issue_count": len(issues)},
        )
        return issues

    def close(self) -> None:
        if self._tool is not None and hasattr(self._tool, "close"):
            self._tool.close()
        self._tool = None


def issues_from_matches(matches: Iterable[Any]) -> List[Issue]:
    """Converts ``language_tool_python`` Match objects to issues."""
    return [
        Issue(
            offset=match.offset,
            length=match.errorLength,
            message=match.message,
            replacements=tuple(match.replacements),
            rule_id=getattr(match, "ruleId", None),
        )
        for match in matches
    ]


# Raw LanguageTool v2 /check response


class _Replacement(BaseModel):
    value: str = ""


class _Rule(BaseModel):
    id: Optional[str] = None


class _Match(BaseModel):
    offset: int = Field(ge=0)
    length: int = Field(ge=0)
    message: str = ""
    replacements: List[_Replacement] = Field(default_factory=list)
    rule: Optional[_Rule] = None


class _CheckResponse(BaseModel):
    matches: List[_Match]


def _utf16_index_map(text: str) -> List[int]:
    """Maps each UTF-16 code unit position to a Python string index."""
    mapping: List[int] = []
    for index, char in enumerate(text):
        mapping.append(index)
        if ord(char) > 0xFFFF:
            mapping.append(index)
    mapping.append(len(text))
    return mapping


def _to_index(mapping: List[int], unit: int, text_length: int) -> int:
    if unit < len(mapping):
        return mapping[unit]
    # Past the end: keep it out of bounds so span validation reports it
    return text_length + unit - (len(mapping) - 1)


def issues_from_payload(text: str, payload: Any) -> List[Issue]:
    """Parses a raw LanguageTool JSON response for ``text``.

    Offsets in the payload count UTF-16 code units and are converted to
    Python string indices.

    Raises:
        MalformedResponseError: If the issue list is missing or invalid.
    """
    if not isinstance(payload, dict) or "matches" not in payload:
        raise MalformedResponseError("Checker response has no 'matches' list")
    try:
        response = _CheckResponse.model_validate(payload)
    except ValidationError as e:
        raise MalformedResponseError(f"Invalid checker response: {e}") from e

    needs_mapping = any(ord(char) > 0xFFFF for char in text)
    mapping = _utf16_index_map(text) if needs_mapping else None

    issues: List[Issue] = []
    for match in response.matches:
        offset, end = match.offset, match.offset + match.length
        if mapping is not None:
            offset = _to_index(mapping, offset, len(text))
            end = _to_index(mapping, end, len(text))
        issues.append(
            Issue(
                offset=offset,
                length=end - offset,
                message=match.message,
                replacements=tuple(r.value for r in match.replacements),
                rule_id=match.rule.id if match.rule else None,
            )
        )
    return issues
