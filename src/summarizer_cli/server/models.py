from pydantic import BaseModel, Field
from typing import Optional

class SummarizeRequest(BaseModel):
    text: str
    ratio: Optional[int] = Field(None, description="Percent of sentences to keep")

class StatsRequest(BaseModel):
    text: str

class MetricsDTO(BaseModel):
    original_sentence_count: int
    original_word_count: int
    summary_sentence_count: int
    summary_word_count: int
    word_reduction_percent: float
    sentence_reduction_percent: float
    compression_ratio: float
    average_sentence_length: float

class SummaryResponse(BaseModel):
    summary: str
    metrics: Optional[MetricsDTO] = None
    error: Optional[str] = None
    degenerate: bool = False

class StatsResponse(BaseModel):
    characters: int
    words: int
    sentences: int
    reading_minutes: int
