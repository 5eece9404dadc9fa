# proofing/engine/statistics.py

"""Word and sentence statistics for style insights."""

import math
import re

from proofing.core.definitions import LONG_SENTENCE_THRESHOLD
from proofing.core.domain import TextStatistics

# Pre-compiled patterns
WORD = re.compile(r"\S+")
SENTENCE_END = re.compile(r"[.!?]+")


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def compute_statistics(
    text: str, long_sentence_threshold: int = LONG_SENTENCE_THRESHOLD
) -> TextStatistics:
    """Counts words and sentences in ``text``.

    A run of terminal punctuation ("?!", "...") ends one sentence. Text
    without terminal punctuation still counts as one sentence.
    """
    word_count = len(WORD.findall(text))
    sentence_count = len(SENTENCE_END.findall(text)) or 1
    return TextStatistics(
        word_count=word_count,
        sentence_count=sentence_count,
        avg_words_per_sentence=_round_half_up(word_count / sentence_count),
        long_sentence_threshold=long_sentence_threshold,
    )
