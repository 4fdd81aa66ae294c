from __future__ import annotations
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Optional

class SummaryError(str, Enum):
    EMPTY_INPUT = "empty_input"
    NO_VALID_SENTENCES = "no_valid_sentences"
    NO_WORDS_FOUND = "no_words_found"
    INVALID_RATIO = "invalid_ratio"
    INTERNAL_ERROR = "internal_error"

    @property
    def message(self) -> str:
        return _ERROR_MESSAGES[self]

_ERROR_MESSAGES = {
    SummaryError.EMPTY_INPUT: "No text provided",
    SummaryError.NO_VALID_SENTENCES: "No valid sentences found",
    SummaryError.NO_WORDS_FOUND: "No words found",
    SummaryError.INVALID_RATIO: "Compression ratio must be a number",
    SummaryError.INTERNAL_ERROR: "An error occurred during summarization",
}

@dataclass(frozen=True)
class Sentence:
    text: str
    index: int  # position among valid sentences, not the raw split position
    word_count: int
    score: float = 0.0

@dataclass(frozen=True)
class MetricsRecord:
    original_sentence_count: int
    original_word_count: int
    summary_sentence_count: int
    summary_word_count: int
    word_reduction_percent: float
    sentence_reduction_percent: float
    compression_ratio: float  # echoed as requested, never rounded
    average_sentence_length: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

@dataclass(frozen=True)
class SummaryResult:
    """
    Outcome of one summarization call.

    Either `summary_text` + `metrics` are meaningful, or `error` is set.
    `no_valid_sentences` is the one error that still carries text: the
    trimmed input, returned verbatim. `degenerate` marks the all-stopwords
    fallback, which is not an error.
    """
    summary_text: str
    metrics: Optional[MetricsRecord] = None
    error: Optional[SummaryError] = None
    degenerate: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "summary": self.summary_text,
            "metrics": self.metrics.to_dict() if self.metrics else None,
            "error": self.error.message if self.error else None,
            "degenerate": self.degenerate,
        }

@dataclass(frozen=True)
class TextStats:
    characters: int
    words: int
    sentences: int
    reading_minutes: int
