# presets/region_editing.py

"""
Region-aware editing presets.

Each preset locks the subject (identity reference + ControlNet anchors)
and declares per-region denoise values. Downstream we cannot mask per
region yet, so the router collapses the regions into a single strength
(the maximum of the clamped region values).
"""

from __future__ import annotations

from typing import List

from .schema import ControlSpec, PresetEntry, PresetFamily, RegionLayer, SubjectLockSpec

_FAMILY = PresetFamily.REGION_AWARE_EDITING


REGION_EDITING_PRESETS: List[PresetEntry] = [
    PresetEntry(
        id="neo_glitch_crazy",
        label="Neo Glitch Crazy",
        family=_FAMILY,
        tag="Cyber",
        category="vibrant",
        description="Explosive neon glitch background with locked subject",
        prompt=(
            "create a neon cyberpunk glitch field behind the subject: intense RGB split, "
            "pixel sorting streaks, holographic HUD frames, VHS scanlines, chromatic "
            "aberration, datamosh blocks, refractive glass shards, volumetric glow, neon "
            "magenta/cyan/amber palette; keep the person fully photorealistic and "
            "unaltered; do not redraw or stylize the face or body; background only"
        ),
        strength=0.6,
        subject_lock=SubjectLockSpec(enabled=True, weight=0.82),
        controls=(
            ControlSpec(type="ip_face", weight=0.82),
            ControlSpec(type="lineart", weight=0.45),
            ControlSpec(type="depth", weight=0.35),
        ),
        regions=(
            RegionLayer(key="subject", denoise=0.18, blend="normal"),
            RegionLayer(key="background", denoise=0.72, blend="screen"),
        ),
    ),
    PresetEntry(
        id="ghibli_layered",
        label="Ghibli Layer (BG only)",
        family=_FAMILY,
        tag="Ghibli",
        category="cinematic",
        description="Ghibli background pass, photoreal subject",
        prompt=(
            "hand-painted studio ghibli style background with soft brushwork, warm light, "
            "painterly foliage and bokeh; keep the person entirely realistic and "
            "untouched; do not stylize the subject"
        ),
        strength=0.5,
        subject_lock=SubjectLockSpec(enabled=True, weight=0.80),
        controls=(
            ControlSpec(type="ip_face", weight=0.80),
            ControlSpec(type="depth", weight=0.40),
        ),
        regions=(
            RegionLayer(key="subject", denoise=0.15, blend="normal"),
            RegionLayer(key="background", denoise=0.62, blend="soft-light"),
        ),
    ),
    PresetEntry(
        id="emotion_mask_slight_smile",
        label="Emotion Mask - Slight Smile",
        family=_FAMILY,
        tag="Portrait",
        category="minimal",
        description="Micro-expression inpainting on mouth/cheeks only",
        prompt=(
            "subtle positive micro-expression: gentle mouth corner lift, relaxed eyes, "
            "soft cheek highlight; maintain the exact facial geometry and identity; "
            "apply only to mouth and cheeks"
        ),
        strength=0.3,
        subject_lock=SubjectLockSpec(enabled=True, weight=0.85),
        controls=(
            ControlSpec(type="ip_face", weight=0.85),
            ControlSpec(type="pose", weight=0.35),
        ),
        regions=(
            RegionLayer(key="mouth", denoise=0.24),
            RegionLayer(key="cheeks", denoise=0.22, blend="soft-light"),
            RegionLayer(key="eyes", denoise=0.18),
        ),
    ),
    PresetEntry(
        id="emotion_mask_serene",
        label="Emotion Mask - Serene",
        family=_FAMILY,
        tag="Portrait",
        category="minimal",
        description="Serene micro-expression inpainting",
        prompt=(
            "peaceful, serene expression: soft, relaxed features, gentle eye expression, "
            "calm mouth; maintain exact facial geometry and identity; apply only to eyes "
            "and mouth area"
        ),
        strength=0.28,
        subject_lock=SubjectLockSpec(enabled=True, weight=0.85),
        controls=(
            ControlSpec(type="ip_face", weight=0.85),
            ControlSpec(type="pose", weight=0.35),
        ),
        regions=(
            RegionLayer(key="eyes", denoise=0.20),
            RegionLayer(key="mouth", denoise=0.22),
            RegionLayer(key="cheeks", denoise=0.18, blend="soft-light"),
        ),
    ),
    PresetEntry(
        id="emotion_mask_fierce",
        label="Emotion Mask - Fierce",
        family=_FAMILY,
        tag="Portrait",
        category="minimal",
        description="Fierce micro-expression inpainting",
        prompt=(
            "determined, fierce expression: slightly narrowed eyes, set jaw, focused gaze; "
            "maintain exact facial geometry and identity; apply only to eyes and jaw area"
        ),
        strength=0.32,
        subject_lock=SubjectLockSpec(enabled=True, weight=0.85),
        controls=(
            ControlSpec(type="ip_face", weight=0.85),
            ControlSpec(type="pose", weight=0.40),
        ),
        regions=(
            RegionLayer(key="eyes", denoise=0.24),
            RegionLayer(key="mouth", denoise=0.26),
            RegionLayer(key="cheeks", denoise=0.20, blend="soft-light"),
        ),
    ),
    PresetEntry(
        id="neo_tokyo_advanced",
        label="Neo Tokyo Advanced",
        family=_FAMILY,
        tag="Cyber",
        category="vibrant",
        description="Advanced Neo Tokyo with subject preservation",
        prompt=(
            "cyberpunk neon aesthetic: add neon rim lighting around hair edges, subtle HUD "
            "elements in background, neon bokeh; keep face completely photorealistic; no "
            "lines over skin"
        ),
        strength=0.45,
        subject_lock=SubjectLockSpec(enabled=True, weight=0.80),
        controls=(
            ControlSpec(type="ip_face", weight=0.80),
            ControlSpec(type="depth", weight=0.35),
        ),
        regions=(
            RegionLayer(key="subject", denoise=0.16),
            RegionLayer(key="background", denoise=0.58, blend="screen"),
            RegionLayer(key="hair", denoise=0.24, blend="overlay"),
        ),
    ),
    # Single-pass retouch: no lock, routed like a professional edit
    PresetEntry(
        id="soft_relight",
        label="Soft Relight",
        family=_FAMILY,
        tag="Portrait",
        category="minimal",
        description="Gentle relight without region locking",
        prompt=(
            "soften and even out the key light on the face, lift shadows under the eyes, "
            "keep natural skin texture and the original background"
        ),
        strength=0.2,
        subject_lock=SubjectLockSpec(enabled=False),
    ),
]
