import os
import logging
from typing import Optional
from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse, PlainTextResponse

from core.ai import ProviderError, get_provider
from core.config import settings
from core.csv_parser import is_csv_filename, parse_csv_file, save_upload
from core.models import ChatRequest, ChatResponse, UploadResponse
from core.prompt import build_prompt, render_preview
from core.store import dataset

router = APIRouter()

NO_ANSWER = "No response from AI."


def _server_error(detail: str, error: Exception) -> JSONResponse:
    return JSONResponse(status_code=500, content={"detail": detail, "error": str(error)})


@router.get("/", response_class=PlainTextResponse)
def read_root():
    return "CSV chat backend is running."


@router.post("/upload", response_model=UploadResponse)
async def upload_csv(file: Optional[UploadFile] = File(None)):
    if file is None or not file.filename:
        raise HTTPException(status_code=400, detail="No file uploaded")

    filename = os.path.basename(file.filename)
    if settings.require_csv_extension and not is_csv_filename(filename):
        raise HTTPException(status_code=400, detail="Only .csv files are allowed")

    if file.size is not None and file.size > settings.max_upload_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File exceeds the {settings.max_upload_bytes} byte upload limit",
        )

    logging.info(f"--- Upload Received: {filename} ---")
    try:
        path = await run_in_threadpool(save_upload, file.file, settings.upload_dir, filename)
        rows = await run_in_threadpool(parse_csv_file, path)
        count = dataset.replace(rows, filename=filename)
    except Exception as e:
        logging.error(f"Unexpected error in upload_csv: {e}")
        return _server_error("File upload failed", e)
    finally:
        await file.close()

    return {"message": "CSV uploaded and parsed successfully", "rows": count, "filename": filename}


@router.post("/chat", response_model=ChatResponse)
async def chat(request: Optional[ChatRequest] = None, provider=Depends(get_provider)):
    user_query = request.user_query if request else None
    if not user_query or not user_query.strip():
        raise HTTPException(status_code=400, detail="Query is required")

    logging.info(f"--- New Query Received: {user_query} ---")
    preview = render_preview(dataset.snapshot(), settings.preview_style, settings.preview_rows)
    prompt = build_prompt(preview, user_query)

    try:
        answer = await run_in_threadpool(provider.generate, prompt)
    except ProviderError as e:
        logging.error(f"Provider error in chat: {e}")
        return _server_error("Failed to get AI response", e)

    return {"answer": answer or NO_ANSWER}
