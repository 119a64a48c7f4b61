# routing/settings.py

"""
Environment-driven settings for the routing engine and the API.

Values come from the process environment (optionally populated from a
local `.env` file). Every knob has a default so the engine runs without
any configuration:

  EDIT_MODEL_ID=fal-ai/nano-banana/edit
  DIFFUSION_MODEL_ID=stable-diffusion-v35-large
  DIFFUSION_GUIDANCE_SCALE=4.0
  ROTATION_RESET_WINDOW_SEC=300
"""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

# Guidance for diffusion payloads is pinned inside this band.
GUIDANCE_FLOOR = 4.0
GUIDANCE_CEILING = 4.5

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class EngineSettings:
    edit_model_id: str = "fal-ai/nano-banana/edit"
    diffusion_model_id: str = "stable-diffusion-v35-large"
    diffusion_guidance_scale: float = 4.0
    diffusion_inference_steps: int = 30
    rotation_reset_window_sec: Optional[float] = 300.0
    free_text_strength: float = 0.15
    max_variations: int = 4
    generation_api_url: Optional[str] = None
    generation_api_key: Optional[str] = None
    log_level: str = "INFO"


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("[Settings] %s=%r is not a number, using %s", name, raw, default)
        return default
    if not math.isfinite(value):
        logger.warning("[Settings] %s=%r is not finite, using %s", name, raw, default)
        return default
    return value


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("[Settings] %s=%r is not an integer, using %s", name, raw, default)
        return default


def load_settings() -> EngineSettings:
    """Read EngineSettings from the environment."""
    guidance = _float_env("DIFFUSION_GUIDANCE_SCALE", 4.0)
    guidance = max(GUIDANCE_FLOOR, min(GUIDANCE_CEILING, guidance))

    window: Optional[float] = _float_env("ROTATION_RESET_WINDOW_SEC", 300.0)
    if window is not None and window <= 0:
        # Exhaustion is then the only reset trigger
        window = None

    log_level = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()
    if log_level not in LOG_LEVELS:
        logger.warning("[Settings] LOG_LEVEL=%r is not a logging level, using INFO", log_level)
        log_level = "INFO"

    return EngineSettings(
        edit_model_id=os.getenv("EDIT_MODEL_ID") or "fal-ai/nano-banana/edit",
        diffusion_model_id=os.getenv("DIFFUSION_MODEL_ID") or "stable-diffusion-v35-large",
        diffusion_guidance_scale=guidance,
        diffusion_inference_steps=max(1, _int_env("DIFFUSION_INFERENCE_STEPS", 30)),
        rotation_reset_window_sec=window,
        free_text_strength=_float_env("FREE_TEXT_STRENGTH", 0.15),
        max_variations=max(1, _int_env("MAX_VARIATIONS", 4)),
        generation_api_url=os.getenv("GENERATION_API_URL"),
        generation_api_key=os.getenv("GENERATION_API_KEY"),
        log_level=log_level,
    )
