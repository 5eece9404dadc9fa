"""Tests for word and sentence statistics."""

from proofing import compute_statistics
from proofing.core.definitions import Messages


def test_no_terminal_punctuation_counts_one_sentence():
    stats = compute_statistics("hello world")
    assert stats.word_count == 2
    assert stats.sentence_count == 1
    assert stats.avg_words_per_sentence == 2


def test_empty_text():
    stats = compute_statistics("")
    assert stats.word_count == 0
    assert stats.sentence_count == 1
    assert stats.avg_words_per_sentence == 0


def test_punctuation_runs_count_once():
    stats = compute_statistics("Hi there. How are you?!")
    assert stats.word_count == 5
    assert stats.sentence_count == 2
    # 2.5 rounds up
    assert stats.avg_words_per_sentence == 3


def test_ellipsis_is_one_boundary():
    stats = compute_statistics("Wait... what")
    assert stats.sentence_count == 1
    assert stats.word_count == 2


def test_whitespace_runs_and_newlines():
    stats = compute_statistics("  one\ttwo\n\nthree  ")
    assert stats.word_count == 3


def test_long_sentences_insight():
    stats = compute_statistics(" ".join(["word"] * 21) + ".")
    assert stats.avg_words_per_sentence == 21
    assert stats.insight == Messages.LONG_SENTENCES


def test_good_structure_insight():
    stats = compute_statistics("Short and sweet.")
    assert stats.insight == Messages.GOOD_STRUCTURE


def test_custom_threshold():
    stats = compute_statistics("one two three four.", long_sentence_threshold=3)
    assert stats.insight == Messages.LONG_SENTENCES


def test_summary():
    stats = compute_statistics("Hello world. Bye.")
    assert stats.summary() == (
        "Word count: 3. Sentences: 2. Avg words per sentence: 2. Good sentence structure!"
    )
