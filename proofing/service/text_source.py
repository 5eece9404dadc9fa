# proofing/service/text_source.py

"""Resolves the text to proofread from user input."""

import logging
from typing import Optional

from proofing.core.definitions import Messages
from proofing.core.exceptions import NoTextError

logger = logging.getLogger(__name__)


def resolve_text(raw_text: Optional[str]) -> str:
    """Returns the trimmed input text.

    Raises:
        NoTextError: If nothing but whitespace was supplied.
    """
    text = (raw_text or "").strip()
    if not text:
        logger.warning("No text supplied for proofreading")
        raise NoTextError(Messages.NO_TEXT)
    return text
