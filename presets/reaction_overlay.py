# presets/reaction_overlay.py

"""
Anime reaction overlays (tears, blush, sparkle, ...) painted on top of a
photoreal face.
"""

from __future__ import annotations

from typing import List

from .schema import PresetEntry, PresetFamily

_FAMILY = PresetFamily.REACTION_OVERLAY

_OVERLAY_RULES = (
    "Add the effect as a hand-drawn Ghibli-style overlay only. The face, skin, hair and "
    "background remain photorealistic and identical to the original."
)


REACTION_OVERLAY_PRESETS: List[PresetEntry] = [
    PresetEntry(
        id="ghibli_tears",
        label="Tears",
        family=_FAMILY,
        prompt=(
            "Large glistening anime tears welling up and rolling down both cheeks, soft "
            f"highlights in the eyes. {_OVERLAY_RULES}"
        ),
        strength=0.15,
        features=("reaction_overlay", "tears"),
    ),
    PresetEntry(
        id="ghibli_shock",
        label="Shock",
        family=_FAMILY,
        prompt=(
            "Classic anime shock reaction: tiny sweat drops near the temple, faint speed "
            f"lines around the head, pupils slightly shrunk. {_OVERLAY_RULES}"
        ),
        strength=0.18,
        features=("reaction_overlay", "shock"),
    ),
    PresetEntry(
        id="ghibli_sparkle",
        label="Sparkle",
        family=_FAMILY,
        prompt=(
            "Star-shaped sparkles in the eyes and a few floating glints around the face, "
            f"delighted anime energy. {_OVERLAY_RULES}"
        ),
        strength=0.14,
        features=("reaction_overlay", "sparkle"),
    ),
    PresetEntry(
        id="ghibli_blush",
        label="Blush",
        family=_FAMILY,
        prompt=(
            "Soft pink anime blush lines across both cheeks and the bridge of the nose, "
            f"shy and sweet. {_OVERLAY_RULES}"
        ),
        strength=0.12,
        features=("reaction_overlay", "blush"),
    ),
    PresetEntry(
        id="ghibli_dreamy",
        label="Dreamy",
        family=_FAMILY,
        prompt=(
            "Drifting petals, soft bloom and pastel light specks around the subject, "
            f"daydreaming mood. {_OVERLAY_RULES}"
        ),
        strength=0.22,
        features=("reaction_overlay", "dreamy"),
    ),
    PresetEntry(
        id="ghibli_magical",
        label="Magical",
        family=_FAMILY,
        prompt=(
            "Tiny glowing spirit lights and a faint shimmering aura around the subject, "
            f"gentle forest-magic feeling. {_OVERLAY_RULES}"
        ),
        strength=0.16,
        features=("reaction_overlay", "magical"),
    ),
]
