from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from dataclasses import asdict
from pathlib import Path
from typing import Optional
import asyncio
import logging
import os
from .models import SummarizeRequest, SummaryResponse, StatsRequest, StatsResponse
from ..config import SummarizerConfig
from ..models import SummaryResult
from ..summarizer import summarize
from ..text import text_stats
from ..utils import SUMMARY_SUFFIX, download_filename

CONFIG_PATH = Path(os.environ.get("SUMMARIZER_CONFIG", "summarizer.json"))

logger = logging.getLogger(__name__)

app = FastAPI(title="Summarizer Service", version="0.1")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

config = SummarizerConfig.load_or_default(CONFIG_PATH)

async def _run(text: str, ratio: Optional[int]) -> SummaryResult:
    if ratio is None:
        ratio = config.default_ratio
    problem = config.validate_input(text) or config.validate_ratio(ratio)
    if problem:
        raise HTTPException(status_code=400, detail=problem)
    # keep the event loop free while scoring large inputs
    return await asyncio.to_thread(summarize, text.strip(), ratio)

def _to_response(result: SummaryResult) -> SummaryResponse:
    return SummaryResponse(**result.to_dict())

@app.get("/health")
def health():
    return {"ok": True}

@app.post("/summarize", response_model=SummaryResponse)
async def summarize_text(req: SummarizeRequest):
    return _to_response(await _run(req.text, req.ratio))

@app.post("/summarize/file", response_model=SummaryResponse)
async def summarize_file(file: UploadFile = File(...), ratio: Optional[int] = Form(None)):
    if not (file.filename or "").lower().endswith(SUMMARY_SUFFIX):
        raise HTTPException(status_code=400, detail="Please upload a .txt file")
    raw = await file.read()
    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="File is not valid UTF-8 text")
    logger.info("summarizing upload %s (%d bytes)", file.filename, len(raw))
    return _to_response(await _run(text, ratio))

@app.post("/summarize/download")
async def download_summary(req: SummarizeRequest):
    result = await _run(req.text, req.ratio)
    if not result.summary_text:
        raise HTTPException(status_code=422, detail=result.error.message if result.error else "Empty summary")
    filename = download_filename()
    return PlainTextResponse(
        result.summary_text,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )

@app.post("/stats", response_model=StatsResponse)
def stats(req: StatsRequest):
    return StatsResponse(**asdict(text_stats(req.text, config.words_per_minute)))
