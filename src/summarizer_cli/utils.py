from __future__ import annotations
from pathlib import Path
from typing import Optional
import time

SUMMARY_SUFFIX = ".txt"

def read_text_file(path: Path) -> str:
    path = Path(path)
    if path.suffix.lower() != SUMMARY_SUFFIX:
        raise ValueError("Please upload a .txt file")
    return path.read_text(encoding="utf-8-sig")

def download_filename(now_ms: Optional[int] = None) -> str:
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"summary_{now_ms}{SUMMARY_SUFFIX}"

def write_summary(summary: str, directory: Path, now_ms: Optional[int] = None) -> Path:
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    out = directory / download_filename(now_ms)
    out.write_text(summary, encoding="utf-8")
    return out
