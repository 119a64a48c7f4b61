# routing/safety.py

"""
Identity-preserving numeric limits.

Each family has a strength band wide enough to show the effect and
narrow enough to keep the face recognisable. Values outside the band
are clamped, never rejected.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Tuple

from presets.schema import PresetFamily, RegionLayer

from .settings import GUIDANCE_CEILING, GUIDANCE_FLOOR

Range = Tuple[float, float]

PROFESSIONAL_RANGE: Range = (0.08, 0.22)
REGION_SUBJECT_RANGE: Range = (0.12, 0.22)
REGION_BACKGROUND_RANGE: Range = (0.55, 0.80)

STRENGTH_RANGES: Dict[PresetFamily, Range] = {
    PresetFamily.MOOD_MASK: (0.10, 0.15),
    PresetFamily.REACTION_OVERLAY: (0.12, 0.18),
    PresetFamily.GLITCH_OVERLAY: (0.20, 0.30),
    PresetFamily.PROFESSIONAL: PROFESSIONAL_RANGE,
    # Used for region-aware presets routed without a subject lock
    PresetFamily.REGION_AWARE_EDITING: REGION_SUBJECT_RANGE,
}

BACKGROUND_REGION_KEYS = frozenset({"background"})


def clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def clamp_strength(family: PresetFamily, strength: float) -> float:
    lo, hi = STRENGTH_RANGES[family]
    return clamp(strength, lo, hi)


def region_range(layer: RegionLayer) -> Range:
    if layer.key in BACKGROUND_REGION_KEYS:
        return REGION_BACKGROUND_RANGE
    return REGION_SUBJECT_RANGE


def clamp_region_denoise(layer: RegionLayer) -> float:
    lo, hi = region_range(layer)
    return clamp(layer.denoise, lo, hi)


def region_strength(regions: Iterable[RegionLayer]) -> Optional[float]:
    """
    Collapse per-region denoise into one strength: the max of the clamped
    values. Returns None when there are no regions.
    """
    values = [clamp_region_denoise(layer) for layer in regions]
    return max(values) if values else None


def diffusion_guidance(configured: float = GUIDANCE_FLOOR) -> float:
    """Fixed low guidance for diffusion payloads, bounded to the allowed band."""
    return clamp(configured, GUIDANCE_FLOOR, GUIDANCE_CEILING)
