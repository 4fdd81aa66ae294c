from __future__ import annotations
import math
import re
from typing import List
from .models import Sentence, TextStats

SENTENCE_SPLIT = re.compile(r"(?<=[.!?])\s+")
WORD_PATTERN = re.compile(r"[a-zA-Z0-9]+(?:'[a-zA-Z]+)?")
_HAS_LETTER = re.compile(r"[a-zA-Z]")

def tokenize(text: str) -> List[str]:
    return WORD_PATTERN.findall(text)

def count_words(text: str) -> int:
    return len(tokenize(text))

def _is_valid(piece: str) -> bool:
    return bool(piece) and _HAS_LETTER.search(piece) is not None

def split_sentences(text: str) -> List[Sentence]:
    """
    Split on whitespace following . ! or ?, keep pieces containing a letter.
    Indices are assigned after filtering, so they describe reading order
    among the surviving sentences only.
    """
    pieces = [p.strip() for p in SENTENCE_SPLIT.split(text)]
    valid = [p for p in pieces if _is_valid(p)]
    return [Sentence(text=p, index=i, word_count=count_words(p)) for i, p in enumerate(valid)]

def text_stats(text: str, words_per_minute: int = 200) -> TextStats:
    clean = text.strip()
    if not clean:
        return TextStats(characters=0, words=0, sentences=0, reading_minutes=0)
    words = count_words(clean)
    return TextStats(
        characters=len(clean),
        words=words,
        sentences=len(split_sentences(clean)),
        reading_minutes=math.ceil(words / words_per_minute),
    )
