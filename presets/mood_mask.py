# presets/mood_mask.py

"""
Mood / emotion mask presets.

Paired emotions rendered as a micro-expression on the existing face.
These go to the edit model with a very narrow strength band, so the
prompts lean on explicit preservation language instead of denoise.
"""

from __future__ import annotations

from typing import List

from .schema import PresetEntry, PresetFamily

_FAMILY = PresetFamily.MOOD_MASK

_PRESERVE = (
    "Keep the exact same person: facial geometry, skin tone, hairstyle, clothing and "
    "background stay unchanged. Only the expression shifts."
)


MOOD_MASK_PRESETS: List[PresetEntry] = [
    PresetEntry(
        id="joy_sadness",
        label="Joy + Sadness",
        family=_FAMILY,
        prompt=(
            "Give the subject a bittersweet expression: a soft smile at the mouth while the "
            "eyes hold a faint glassy shine, as if remembering something happy that is "
            f"already gone. {_PRESERVE}"
        ),
        negative_prompt="crying face, exaggerated tears, cartoon, different person",
        strength=0.14,
        features=("micro_expression", "dual_emotion", "identity_preserved"),
    ),
    PresetEntry(
        id="strength_vulnerability",
        label="Strength + Vulnerability",
        family=_FAMILY,
        prompt=(
            "Give the subject a steady, determined gaze with a slightly set jaw, softened by "
            "a trace of vulnerability around the eyes and brows, like someone holding "
            f"together under pressure. {_PRESERVE}"
        ),
        negative_prompt="angry grimace, snarl, cartoon, different person",
        strength=0.13,
        features=("micro_expression", "dual_emotion", "identity_preserved"),
    ),
    PresetEntry(
        id="nostalgia_distance",
        label="Nostalgia + Distance",
        family=_FAMILY,
        prompt=(
            "Give the subject a wistful, far-away look: relaxed mouth, eyes focused just past "
            "the camera, a quiet longing for somewhere or someone far away. "
            f"{_PRESERVE}"
        ),
        negative_prompt="blank stare, closed eyes, cartoon, different person",
        strength=0.12,
        features=("micro_expression", "dual_emotion", "identity_preserved"),
    ),
    PresetEntry(
        id="peace_fear",
        label="Peace + Fear",
        family=_FAMILY,
        prompt=(
            "Give the subject a calm surface expression with a hint of unease underneath: "
            "still lips, softly widened eyes, brows barely lifted, serene but alert. "
            f"{_PRESERVE}"
        ),
        negative_prompt="screaming, horror face, cartoon, different person",
        strength=0.2,
        features=("micro_expression", "dual_emotion", "identity_preserved"),
    ),
    PresetEntry(
        id="emotion_happy",
        label="Happy",
        family=_FAMILY,
        prompt=f"Give the subject a natural, warm smile that reaches the eyes. {_PRESERVE}",
        strength=0.12,
        features=("micro_expression", "identity_preserved"),
    ),
    PresetEntry(
        id="emotion_sad",
        label="Sad",
        family=_FAMILY,
        prompt=(
            "Give the subject a quietly sad expression: lowered gaze, slightly downturned "
            f"mouth corners, heavy eyelids. {_PRESERVE}"
        ),
        strength=0.12,
        features=("micro_expression", "identity_preserved"),
    ),
    PresetEntry(
        id="emotion_angry",
        label="Angry",
        family=_FAMILY,
        prompt=(
            "Give the subject a controlled angry expression: furrowed brows, tight lips, "
            f"intense stare. {_PRESERVE}"
        ),
        strength=0.08,
        features=("micro_expression", "identity_preserved"),
    ),
    PresetEntry(
        id="emotion_surprised",
        label="Surprised",
        family=_FAMILY,
        prompt=(
            "Give the subject a surprised expression: raised brows, widened eyes, lips "
            f"slightly parted. {_PRESERVE}"
        ),
        strength=0.15,
        features=("micro_expression", "identity_preserved"),
    ),
    PresetEntry(
        id="emotion_love",
        label="Love",
        family=_FAMILY,
        prompt=(
            "Give the subject a tender, affectionate expression: soft eyes, gentle smile, "
            f"slight warmth in the cheeks. {_PRESERVE}"
        ),
        strength=0.12,
        features=("micro_expression", "identity_preserved"),
    ),
    PresetEntry(
        id="emotion_loneliness",
        label="Lonely",
        family=_FAMILY,
        prompt=(
            "Give the subject a lonely, inward expression: unfocused eyes, closed relaxed "
            f"mouth, faint tension in the brow. {_PRESERVE}"
        ),
        strength=0.12,
        features=("micro_expression", "identity_preserved"),
    ),
]
