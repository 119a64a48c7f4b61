# presets/glitch_overlay.py

from __future__ import annotations

from typing import List

from .schema import PresetEntry, PresetFamily

_FAMILY = PresetFamily.GLITCH_OVERLAY


GLITCH_OVERLAY_PRESETS: List[PresetEntry] = [
    PresetEntry(
        id="neo_tokyo_base",
        label="Base",
        family=_FAMILY,
        prompt=(
            "Transform the image into a cyberpunk anime portrait with neon overlays and "
            "glitch effects. Preserve the subject's original ethnicity, skin tone, and "
            "facial identity entirely. Do not alter race, age, gender, or features. Apply "
            "only stylized overlays such as neon light bloom, subtle cel-shading, and light "
            "tech artifacts. Background may include digital Tokyo ambiance."
        ),
        negative_prompt=(
            "whitewashing, different race, different person, anime character face, facial "
            "replacement, skin tone change, distorted identity, cartoon, gender swap, "
            "hairstyle change, full transformation, doll face, beauty filter"
        ),
        strength=0.3,
        guidance_scale=7.0,
        num_inference_steps=20,
        features=("cyberpunk_enhancement", "identity_preservation", "neon_effects"),
    ),
    PresetEntry(
        id="neo_tokyo_visor",
        label="Glitch Visor",
        family=_FAMILY,
        prompt=(
            "Add a cyberpunk glitch visor effect and UI overlay to the subject while "
            "strictly preserving their identity, ethnicity, skin tone, and facial "
            "structure. Apply holographic HUD elements and digital lens artifacts without "
            "altering facial features or hair. The enhancement should feel layered and "
            "non-invasive."
        ),
        negative_prompt=(
            "anime face, face replacement, identity change, whitewashing, different person, "
            "race change, distorted features, digital mask, plastic skin, new character"
        ),
        strength=0.35,
        guidance_scale=7.0,
        num_inference_steps=20,
        features=("glitch_visor", "holographic_ui", "identity_preservation"),
    ),
    PresetEntry(
        id="neo_tokyo_tattoos",
        label="Tech Tattoos",
        family=_FAMILY,
        prompt=(
            "Apply glowing cybernetic tattoo patterns across the skin, keeping the "
            "subject's identity, ethnicity, skin tone, and facial structure unchanged. "
            "Tattoos should blend naturally with the body, not override features. No "
            "stylization should transform the person's core appearance."
        ),
        negative_prompt=(
            "anime transformation, different face, facial alteration, whitewashing, new "
            "identity, changed ethnicity, artificial face, overly stylized skin"
        ),
        strength=0.4,
        guidance_scale=7.0,
        num_inference_steps=20,
        features=("tech_tattoos", "luminous_implants", "identity_preservation"),
    ),
    PresetEntry(
        id="neo_tokyo_scanlines",
        label="Scanline FX",
        family=_FAMILY,
        prompt=(
            "Apply a subtle VHS-style scanline texture and retro noise to the image while "
            "preserving the subject's original facial identity, ethnicity, and natural "
            "appearance. The effect should sit on top like a texture, not interfere with "
            "facial realism or skin tone."
        ),
        negative_prompt=(
            "new face, stylized identity, anime features, plastic skin, face filter, "
            "changed ethnicity, cartoon rendering, digital mask"
        ),
        strength=0.18,
        guidance_scale=7.0,
        num_inference_steps=20,
        features=("scanline_overlay", "vhs_noise", "identity_preservation"),
    ),
]
