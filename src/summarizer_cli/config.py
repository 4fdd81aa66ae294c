from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional
import json
from pathlib import Path
from .text import count_words

DEFAULT_CONFIG_PATH = Path("summarizer.json")

@dataclass
class SummarizerConfig:
    default_ratio: int = 40
    min_ratio: int = 20
    max_ratio: int = 70
    ratio_step: int = 10
    min_chars: int = 50
    min_words: int = 10
    words_per_minute: int = 200
    output_dir: str = "."
    log_level: str = "WARNING"

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "SummarizerConfig":
        # Simple dict→dataclass conversion
        return SummarizerConfig(
            default_ratio=int(data.get("default_ratio", 40)),
            min_ratio=int(data.get("min_ratio", 20)),
            max_ratio=int(data.get("max_ratio", 70)),
            ratio_step=int(data.get("ratio_step", 10)),
            min_chars=int(data.get("min_chars", 50)),
            min_words=int(data.get("min_words", 10)),
            words_per_minute=int(data.get("words_per_minute", 200)),
            output_dir=str(data.get("output_dir", ".")),
            log_level=str(data.get("log_level", "WARNING")).upper(),
        )

    @staticmethod
    def load(path: Path) -> "SummarizerConfig":
        return SummarizerConfig.load_json_str(Path(path).read_text(encoding="utf-8"))

    @staticmethod
    def load_json_str(s: str) -> "SummarizerConfig":
        return SummarizerConfig.from_dict(json.loads(s) or {})

    @staticmethod
    def load_or_default(path: Optional[Path]) -> "SummarizerConfig":
        if path is not None and Path(path).exists():
            return SummarizerConfig.load(path)
        return SummarizerConfig()

    def dump(self) -> str:
        data = {
            "default_ratio": self.default_ratio,
            "min_ratio": self.min_ratio,
            "max_ratio": self.max_ratio,
            "ratio_step": self.ratio_step,
            "min_chars": self.min_chars,
            "min_words": self.min_words,
            "words_per_minute": self.words_per_minute,
            "output_dir": self.output_dir,
            "log_level": self.log_level,
        }
        return json.dumps(data, indent=2)

    def validate_input(self, text: str) -> Optional[str]:
        """Caller-side usability checks run before summarizing. Returns a message or None."""
        clean = text.strip()
        if not clean:
            return "Please enter some text to summarize"
        if len(clean) < self.min_chars:
            return f"Please enter a longer text (at least {self.min_chars} characters) for meaningful summarization"
        if count_words(clean) < self.min_words:
            return f"Please enter at least {self.min_words} words for meaningful summarization"
        return None

    def validate_ratio(self, ratio: float) -> Optional[str]:
        if not self.min_ratio <= ratio <= self.max_ratio:
            return f"Ratio must be between {self.min_ratio} and {self.max_ratio}"
        if self.ratio_step and (ratio - self.min_ratio) % self.ratio_step:
            return f"Ratio must move in steps of {self.ratio_step}"
        return None

def write_default_config(path: Path) -> None:
    if path.exists():
        raise FileExistsError(f"{path} already exists")
    path.write_text(SummarizerConfig().dump(), encoding="utf-8")
