# routing/payloads.py

"""
Normalized request bodies for the two model families.

`to_wire()` gives the JSON-ready dict sent to the inference backend;
optional sub-objects that are not set are left out.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class _Payload(BaseModel):
    model_config = ConfigDict(frozen=True)

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class SubjectLockPayload(_Payload):
    reference_image_url: str
    weight: float


class ControlNetPayload(_Payload):
    type: str
    weight: float
    image_url: Optional[str] = None


class EditModelPayload(_Payload):
    model: str
    prompt: str
    image_url: str
    strength: float = Field(ge=0.0, le=1.0)


class DiffusionModelPayload(_Payload):
    model: str
    prompt: str
    negative_prompt: str
    image_url: str
    strength: float = Field(ge=0.0, le=1.0)
    num_inference_steps: int
    guidance_scale: float
    num_variations: int = 1
    subject_lock: Optional[SubjectLockPayload] = None
    control_nets: Optional[List[ControlNetPayload]] = None


GenerationPayload = Union[EditModelPayload, DiffusionModelPayload]
