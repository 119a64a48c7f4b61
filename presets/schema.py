# presets/schema.py

"""
Structural schema shared by every preset catalog.

Catalog modules only hold data; this module defines what a row looks
like. Entries are frozen pydantic models so a resolved preset can never
be mutated by the router or by a caller holding a reference to it.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PresetFamily(str, Enum):
    """The five disjoint preset taxonomies."""

    REGION_AWARE_EDITING = "region_aware_editing"
    MOOD_MASK = "mood_mask"
    REACTION_OVERLAY = "reaction_overlay"
    GLITCH_OVERLAY = "glitch_overlay"
    PROFESSIONAL = "professional"


class SubjectLockSpec(BaseModel):
    """Identity lock requested by a region-aware preset."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = True
    weight: float = 0.8


class ControlSpec(BaseModel):
    """One ControlNet conditioning signal (ip_face, depth, lineart, pose, ...)."""

    model_config = ConfigDict(frozen=True)

    type: str
    weight: float


class RegionLayer(BaseModel):
    """A named region with its own denoise value and blend mode."""

    model_config = ConfigDict(frozen=True)

    key: str
    denoise: float
    blend: str = "normal"


class PresetEntry(BaseModel):
    """
    One catalog row.

    For randomized presets, `base_prompt` is the template carrying
    `{TOKEN}` placeholders and `generator` names the fragment generator
    that fills them; `prompt` is a pre-rendered default instance.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    family: PresetFamily
    prompt: str
    negative_prompt: Optional[str] = None
    strength: float = Field(ge=0.0, le=1.0)
    guidance_scale: Optional[float] = None
    num_inference_steps: Optional[int] = None
    features: Tuple[str, ...] = ()

    # UI metadata
    tag: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    # Featured-rotation slot; None keeps the preset out of the weekly rotation
    week: Optional[int] = Field(default=None, ge=1)

    # Randomized presets
    is_randomized: bool = False
    base_prompt: Optional[str] = None
    generator: Optional[str] = None

    # Region-aware editing
    subject_lock: Optional[SubjectLockSpec] = None
    controls: Tuple[ControlSpec, ...] = ()
    regions: Tuple[RegionLayer, ...] = ()

    @model_validator(mode="after")
    def _check_randomized_fields(self) -> "PresetEntry":
        if self.is_randomized and not (self.base_prompt and self.generator):
            raise ValueError(
                f"randomized preset {self.id!r} needs both base_prompt and generator"
            )
        return self

    @property
    def locks_subject(self) -> bool:
        return bool(self.subject_lock and self.subject_lock.enabled)
