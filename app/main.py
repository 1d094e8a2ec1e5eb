import base64
import hashlib
from urllib.parse import quote

from fastapi import Depends, FastAPI, UploadFile, File, HTTPException
from fastapi.responses import Response

from .config import Settings, configure_logging, load_settings
from .errors import CsvValidatorError, EmptyInput, InvalidFileType
from .models import HealthResponse, NormalizeResponse, ValidationReport
from .report import preview, validation_report
from .session import SessionState, check_filename, export, load, process

configure_logging(load_settings().log_level)

app = FastAPI(
    title="csv-validator",
    description="Column-count validation and accent normalization for semicolon-delimited files",
    version="0.1.0",
)


def get_settings() -> Settings:
    return load_settings()


def _sha256_hex(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def _raise_http(exc: CsvValidatorError):
    status = 422 if isinstance(exc, (InvalidFileType, EmptyInput)) else 500
    raise HTTPException(status_code=status, detail=exc.message) from exc


async def _load_upload(file: UploadFile, settings: Settings) -> SessionState:
    try:
        check_filename(file.filename)
    except InvalidFileType as exc:
        _raise_http(exc)

    # read one byte past the limit so oversized bodies are never held whole
    raw = await file.read(settings.max_upload_bytes + 1)
    if len(raw) > settings.max_upload_bytes:
        raise HTTPException(status_code=413, detail="File too large")

    try:
        return load(file.filename, raw, settings.input_encoding)
    except CsvValidatorError as exc:
        _raise_http(exc)


def _report(state: SessionState) -> dict:
    return {
        "filename": state.filename,
        **validation_report(state.parsed),
        "encoding": state.encoding_report,
    }


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.post("/validate", response_model=ValidationReport)
async def validate_csv(file: UploadFile = File(...), settings: Settings = Depends(get_settings)):
    state = await _load_upload(file, settings)
    return _report(state)


@app.post("/normalize", response_model=NormalizeResponse)
async def normalize_csv(file: UploadFile = File(...), settings: Settings = Depends(get_settings)):
    state = await _load_upload(file, settings)
    try:
        state = process(state)
        output = export(state)
    except CsvValidatorError as exc:
        _raise_http(exc)

    return {
        "report": _report(state),
        "changed_count": state.normalized.changed_count,
        "preview": preview(state.normalized),
        "processed_csv": {
            "filename": output.filename,
            "encoding": output.encoding,
            "media_type": output.media_type,
            "sha256": _sha256_hex(output.content),
            "content_b64": base64.b64encode(output.content).decode("ascii"),
        },
    }


@app.post("/normalize/download")
async def download_csv(file: UploadFile = File(...), settings: Settings = Depends(get_settings)):
    state = await _load_upload(file, settings)
    try:
        output = export(process(state))
    except CsvValidatorError as exc:
        _raise_http(exc)

    return Response(
        content=output.content,
        media_type=output.media_type,
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{quote(output.filename)}"},
    )
