from .models import MetricsRecord, Sentence, SummaryError, SummaryResult, TextStats
from .summarizer import summarize

__version__ = "0.1.0"

__all__ = [
    "MetricsRecord",
    "Sentence",
    "SummaryError",
    "SummaryResult",
    "TextStats",
    "summarize",
]
