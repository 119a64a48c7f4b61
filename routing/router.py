# routing/router.py

"""
PayloadRouter: preset id (or free text) + source image -> model payload.

  1. classify the id into a family
  2. look the entry up in that family's catalog
  3. render the prompt (randomized presets draw fresh fragments)
  4. clamp strength for the family and pick the model shape
  5. prepend the single-frame guard to diffusion prompts

The router is built once per process. Its only mutable state is the
rotation registry it was given.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Mapping, Optional

from fragments.generators import FRAGMENT_GENERATORS, FragmentGenerator, template_tokens
from fragments.rotation import RotationRegistry
from presets.catalog import CatalogRegistry, default_registry
from presets.professional import BASE_NEGATIVE_PROMPT, SINGLE_FRAME_GUARD
from presets.schema import PresetEntry, PresetFamily

from .classifier import FamilyClassifier
from .errors import TemplateConsistencyError, UnknownPresetError
from .payloads import (
    ControlNetPayload,
    DiffusionModelPayload,
    EditModelPayload,
    GenerationPayload,
    SubjectLockPayload,
)
from .safety import PROFESSIONAL_RANGE, clamp, clamp_strength, diffusion_guidance, region_strength
from .settings import EngineSettings, load_settings

logger = logging.getLogger(__name__)

Handler = Callable[[PresetEntry, str, str, int], GenerationPayload]


def guard_prompt(prompt: str) -> str:
    if prompt.startswith(SINGLE_FRAME_GUARD):
        return prompt
    return f"{SINGLE_FRAME_GUARD} {prompt}"


class PayloadRouter:
    def __init__(
        self,
        registry: Optional[CatalogRegistry] = None,
        rotation: Optional[RotationRegistry] = None,
        settings: Optional[EngineSettings] = None,
        generators: Optional[Mapping[str, FragmentGenerator]] = None,
        classifier: Optional[FamilyClassifier] = None,
    ) -> None:
        self.settings = settings or load_settings()
        self.registry = registry or default_registry()
        self.rotation = rotation or RotationRegistry(
            reset_window=self.settings.rotation_reset_window_sec
        )
        self.generators: Dict[str, FragmentGenerator] = dict(
            FRAGMENT_GENERATORS if generators is None else generators
        )
        self.classifier = classifier or FamilyClassifier(self.registry)

        self._handlers: Dict[PresetFamily, Handler] = {
            PresetFamily.REGION_AWARE_EDITING: self._region_aware,
            PresetFamily.MOOD_MASK: self._edit,
            PresetFamily.REACTION_OVERLAY: self._edit,
            PresetFamily.GLITCH_OVERLAY: self._edit,
            PresetFamily.PROFESSIONAL: self._professional,
        }
        missing = set(PresetFamily) - set(self._handlers)
        if missing:
            raise RuntimeError(f"No payload handler for {sorted(f.value for f in missing)}")

        self._check_templates()
        logger.info("[Router] Ready with %d presets", len(self.registry))

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def build_payload(
        self, preset_id: str, image_url: str, num_variations: int = 1
    ) -> GenerationPayload:
        family = self.classifier.classify(preset_id)
        entry = self.registry.catalog(family).get(preset_id)
        if entry is None:
            # A custom classifier rule claimed an id its catalog does not hold
            raise UnknownPresetError(preset_id)

        prompt = self._render(entry)
        payload = self._handlers[family](entry, prompt, image_url, num_variations)
        logger.info(
            "[Router] %s -> %s (%s, strength=%.2f)",
            preset_id,
            family.value,
            type(payload).__name__,
            payload.strength,
        )
        return payload

    def build_free_text_payload(
        self, prompt: str, image_url: str, num_variations: int = 1
    ) -> DiffusionModelPayload:
        text = (prompt or "").strip()
        if not text:
            raise ValueError("prompt must not be empty")

        strength = clamp(self.settings.free_text_strength, *PROFESSIONAL_RANGE)
        logger.info("[Router] free text -> diffusion (strength=%.2f)", strength)
        return DiffusionModelPayload(
            model=self.settings.diffusion_model_id,
            prompt=guard_prompt(text),
            negative_prompt=BASE_NEGATIVE_PROMPT,
            image_url=image_url,
            strength=strength,
            num_inference_steps=self.settings.diffusion_inference_steps,
            guidance_scale=diffusion_guidance(self.settings.diffusion_guidance_scale),
            num_variations=self._variations(num_variations),
        )

    # ------------------------------------------------------------------
    # Family handlers
    # ------------------------------------------------------------------

    def _edit(
        self, entry: PresetEntry, prompt: str, image_url: str, num_variations: int
    ) -> EditModelPayload:
        # num_variations does not apply to the edit model
        return EditModelPayload(
            model=self.settings.edit_model_id,
            prompt=prompt,
            image_url=image_url,
            strength=clamp_strength(entry.family, entry.strength),
        )

    def _professional(
        self, entry: PresetEntry, prompt: str, image_url: str, num_variations: int
    ) -> DiffusionModelPayload:
        return self._diffusion(
            entry,
            prompt,
            image_url,
            num_variations,
            strength=clamp_strength(PresetFamily.PROFESSIONAL, entry.strength),
        )

    def _region_aware(
        self, entry: PresetEntry, prompt: str, image_url: str, num_variations: int
    ) -> DiffusionModelPayload:
        if not entry.locks_subject:
            logger.debug("[Router] %s has no subject lock, using plain diffusion", entry.id)
            return self._diffusion(
                entry,
                prompt,
                image_url,
                num_variations,
                strength=clamp_strength(PresetFamily.REGION_AWARE_EDITING, entry.strength),
            )

        # One strength for all regions until per-region masks are supported downstream
        strength = region_strength(entry.regions)
        if strength is None:
            strength = clamp_strength(PresetFamily.REGION_AWARE_EDITING, entry.strength)

        control_nets: Optional[List[ControlNetPayload]] = None
        if entry.controls:
            control_nets = [
                ControlNetPayload(type=c.type, weight=c.weight, image_url=image_url)
                for c in entry.controls
            ]

        return self._diffusion(
            entry,
            prompt,
            image_url,
            num_variations,
            strength=strength,
            subject_lock=SubjectLockPayload(
                reference_image_url=image_url,
                weight=entry.subject_lock.weight,
            ),
            control_nets=control_nets,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _diffusion(
        self,
        entry: PresetEntry,
        prompt: str,
        image_url: str,
        num_variations: int,
        strength: float,
        subject_lock: Optional[SubjectLockPayload] = None,
        control_nets: Optional[List[ControlNetPayload]] = None,
    ) -> DiffusionModelPayload:
        return DiffusionModelPayload(
            model=self.settings.diffusion_model_id,
            prompt=guard_prompt(prompt),
            negative_prompt=entry.negative_prompt or BASE_NEGATIVE_PROMPT,
            image_url=image_url,
            strength=strength,
            num_inference_steps=entry.num_inference_steps or self.settings.diffusion_inference_steps,
            # Preset guidance is ignored on purpose; diffusion runs at a fixed low value
            guidance_scale=diffusion_guidance(self.settings.diffusion_guidance_scale),
            num_variations=self._variations(num_variations),
            subject_lock=subject_lock,
            control_nets=control_nets,
        )

    def _variations(self, requested: int) -> int:
        return int(clamp(int(requested), 1, self.settings.max_variations))

    def _render(self, entry: PresetEntry) -> str:
        if not entry.is_randomized:
            return entry.prompt
        generator = self.generators[entry.generator]
        return generator.render(entry.base_prompt, self.rotation)

    def _check_templates(self) -> None:
        for entry in self.registry.entries():
            if not entry.is_randomized:
                leftover = template_tokens(entry.prompt)
                if leftover:
                    raise TemplateConsistencyError(
                        f"Preset {entry.id!r} is not randomized but has placeholders "
                        f"{sorted(leftover)}"
                    )
                continue

            generator = self.generators.get(entry.generator)
            if generator is None:
                raise TemplateConsistencyError(
                    f"Preset {entry.id!r} names unknown generator {entry.generator!r}"
                )
            unknown = template_tokens(entry.base_prompt) - generator.tokens
            if unknown:
                raise TemplateConsistencyError(
                    f"Preset {entry.id!r} uses {sorted(unknown)} which "
                    f"{generator.name!r} does not fill"
                )
            mismatches = generator.mismatches()
            if mismatches:
                raise TemplateConsistencyError(
                    f"Preset {entry.id!r} uses generator {generator.name!r} whose "
                    f"vocabularies cannot fill its tokens: {'; '.join(mismatches)}"
                )
