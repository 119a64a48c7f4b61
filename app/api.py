from datetime import date
from functools import lru_cache
from typing import Any, Dict, List, Optional
import logging

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, model_validator

from presets.professional import current_week
from routing.errors import GENERIC_FAILURE_MESSAGE, UnknownPresetError
from routing.payloads import GenerationPayload
from routing.router import PayloadRouter
from routing.settings import load_settings

from .services.generation_client import GenerationClient, GenerationClientError

logger = logging.getLogger(__name__)

# -------------------------------------------------------------------------
# Environment / logging setup
# -------------------------------------------------------------------------

settings = load_settings()
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Preset Payload Router API")


# -------------------------------------------------------------------------
# Dependencies (overridable in tests)
# -------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_router() -> PayloadRouter:
    return PayloadRouter(settings=settings)


def get_today() -> date:
    return date.today()


def get_generation_client() -> GenerationClient:
    try:
        return GenerationClient(
            api_url=settings.generation_api_url,
            api_key=settings.generation_api_key,
        )
    except RuntimeError as e:
        logger.exception("Generation client is not configured: %s", e)
        raise HTTPException(status_code=502, detail=GENERIC_FAILURE_MESSAGE)


# -------------------------------------------------------------------------
# Pydantic models
# -------------------------------------------------------------------------


class PayloadRequest(BaseModel):
    """Either a catalog preset id or a free-text prompt, plus the source image."""

    preset_id: Optional[str] = None
    prompt: Optional[str] = None
    image_url: str
    num_variations: int = 1

    @model_validator(mode="after")
    def _exactly_one_source(self) -> "PayloadRequest":
        if (self.preset_id is None) == (self.prompt is None):
            raise ValueError("Provide exactly one of preset_id or prompt")
        return self


class PresetSummary(BaseModel):
    id: str
    label: str
    tag: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    is_randomized: bool = False
    week: Optional[int] = None


class GenerateResponse(BaseModel):
    image_url: Optional[str] = None
    payload: Dict[str, Any]
    raw_response: Any = None


# -------------------------------------------------------------------------
# Error mapping
# -------------------------------------------------------------------------


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("Invalid request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"detail": "Invalid request body"})


def _build(router: PayloadRouter, req: PayloadRequest) -> GenerationPayload:
    try:
        if req.preset_id is not None:
            return router.build_payload(req.preset_id, req.image_url, req.num_variations)
        return router.build_free_text_payload(req.prompt, req.image_url, req.num_variations)
    except UnknownPresetError as e:
        # Internal detail is logged; callers only see the generic message
        logger.warning("Payload build failed: %s", e)
        raise HTTPException(status_code=404, detail=e.user_message)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


# -------------------------------------------------------------------------
# Endpoints
# -------------------------------------------------------------------------


@app.get("/health")
def health() -> Dict[str, str]:
    """Simple health check for monitoring / liveness checks."""

    return {"status": "ok"}


@app.get("/presets", response_model=List[PresetSummary])
def list_presets(
    category: Optional[str] = None,
    featured: bool = False,
    router: PayloadRouter = Depends(get_router),
    today: date = Depends(get_today),
) -> List[PresetSummary]:
    """UI-facing preset list. Family names stay internal.

    `featured=true` keeps only the looks in this week's rotation slot.
    """

    week = current_week(today) if featured else None
    return [
        PresetSummary(
            id=entry.id,
            label=entry.label,
            tag=entry.tag,
            category=entry.category,
            description=entry.description,
            is_randomized=entry.is_randomized,
            week=entry.week,
        )
        for entry in router.registry.entries()
        if (category is None or entry.category == category)
        and (week is None or entry.week == week)
    ]


@app.post("/payload")
def build_payload(
    req: PayloadRequest,
    router: PayloadRouter = Depends(get_router),
) -> Dict[str, Any]:
    return _build(router, req).to_wire()


@app.post("/generate", response_model=GenerateResponse)
async def generate(
    req: PayloadRequest,
    router: PayloadRouter = Depends(get_router),
    client: GenerationClient = Depends(get_generation_client),
) -> GenerateResponse:
    payload = _build(router, req)
    try:
        result = await client.dispatch(payload)
    except GenerationClientError as e:
        logger.exception("Generation dispatch failed: %s", e)
        raise HTTPException(status_code=502, detail=GENERIC_FAILURE_MESSAGE)

    return GenerateResponse(
        image_url=result.get("image_url"),
        payload=payload.to_wire(),
        raw_response=result.get("raw_response"),
    )
