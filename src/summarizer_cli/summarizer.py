from __future__ import annotations
from collections import Counter
from decimal import Decimal, ROUND_HALF_UP
from types import MappingProxyType
from typing import Iterable, List, Mapping, Sequence
import logging
import math
from .models import MetricsRecord, Sentence, SummaryError, SummaryResult
from .stopwords import STOPWORDS
from .text import split_sentences, tokenize

logger = logging.getLogger(__name__)

_EMPTY_TABLE: Mapping[str, float] = MappingProxyType({})

class MetricsError(ArithmeticError):
    """Metrics requested with a zero word or sentence denominator."""

def _round_half_up(value: float, places: int = 0) -> float:
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))

def build_frequency_table(words: Iterable[str]) -> Mapping[str, float]:
    """
    Normalized word importance: count / max count over non-stopword tokens
    longer than two characters. Returns a read-only mapping.
    """
    counts = Counter(
        w for w in (word.lower() for word in words)
        if len(w) > 2 and w not in STOPWORDS
    )
    if not counts:
        return _EMPTY_TABLE
    max_count = max(counts.values())
    return MappingProxyType({w: c / max_count for w, c in counts.items()})

def score_sentences(sentences: Sequence[Sentence], table: Mapping[str, float]) -> List[Sentence]:
    scored = []
    for s in sentences:
        words = [w.lower() for w in tokenize(s.text)]
        total = sum(table.get(w, 0.0) for w in words)
        # averaged over every token, stopwords included
        avg = total / len(words) if words else 0.0
        scored.append(Sentence(text=s.text, index=s.index, word_count=len(words), score=avg))
    return scored

def target_count(sentence_count: int, ratio: float) -> int:
    if ratio <= 0:
        return 1
    if ratio >= 100:
        return sentence_count
    target = math.floor(sentence_count * ratio / 100 + 0.5)
    return min(sentence_count, max(1, target))

def select_sentences(scored: Sequence[Sentence], count: int) -> List[Sentence]:
    # sorted() is stable, so equal scores keep reading order
    top = sorted(scored, key=lambda s: s.score, reverse=True)[:count]
    return sorted(top, key=lambda s: s.index)

def compute_metrics(
    original_sentences: int,
    original_words: int,
    summary_sentences: int,
    summary_words: int,
    ratio: float,
) -> MetricsRecord:
    if original_words == 0 or original_sentences == 0 or summary_sentences == 0:
        raise MetricsError(
            f"cannot compute metrics: words={original_words} "
            f"sentences={original_sentences} selected={summary_sentences}"
        )
    return MetricsRecord(
        original_sentence_count=original_sentences,
        original_word_count=original_words,
        summary_sentence_count=summary_sentences,
        summary_word_count=summary_words,
        word_reduction_percent=_round_half_up((1 - summary_words / original_words) * 100, 1),
        sentence_reduction_percent=_round_half_up((1 - summary_sentences / original_sentences) * 100, 1),
        compression_ratio=ratio,
        average_sentence_length=_round_half_up(summary_words / summary_sentences, 1),
    )

def _summarize(text: str, ratio: float) -> SummaryResult:
    clean = text.strip()
    if not clean:
        return SummaryResult(summary_text="", error=SummaryError.EMPTY_INPUT)

    if math.isnan(ratio):
        return SummaryResult(summary_text="", error=SummaryError.INVALID_RATIO)

    sentences = split_sentences(clean)
    if not sentences:
        return SummaryResult(summary_text=clean, error=SummaryError.NO_VALID_SENTENCES)

    words = tokenize(clean)
    if not words:
        return SummaryResult(summary_text="", error=SummaryError.NO_WORDS_FOUND)

    table = build_frequency_table(words)
    logger.debug("%d sentences, %d words, %d scored terms", len(sentences), len(words), len(table))

    if not table:
        # nothing but stopwords and short words: fall back to the opening sentence
        first = sentences[0]
        metrics = compute_metrics(len(sentences), len(words), 1, first.word_count, ratio)
        return SummaryResult(summary_text=first.text, metrics=metrics, degenerate=True)

    scored = score_sentences(sentences, table)
    selected = select_sentences(scored, target_count(len(sentences), ratio))
    logger.debug("selected sentence indices: %s", [s.index for s in selected])

    summary_text = " ".join(s.text for s in selected)
    metrics = compute_metrics(
        len(sentences),
        len(words),
        len(selected),
        sum(s.word_count for s in selected),
        ratio,
    )
    return SummaryResult(summary_text=summary_text, metrics=metrics)

def summarize(text: str, ratio: float = 40) -> SummaryResult:
    """
    Lightweight extractive summary:
    - Split into sentences, drop those without letters
    - Score words by normalized frequency (stopwords excluded)
    - Rank sentences by average word importance
    - Keep ratio% of them, in document order

    Never raises: every failure comes back as a tagged SummaryResult.
    """
    try:
        return _summarize(text, ratio)
    except Exception:
        logger.exception("summarization failed")
        return SummaryResult(summary_text="", error=SummaryError.INTERNAL_ERROR)
