import pytest

from presets.schema import PresetFamily, RegionLayer
from routing.safety import (
    REGION_BACKGROUND_RANGE,
    REGION_SUBJECT_RANGE,
    STRENGTH_RANGES,
    clamp,
    clamp_region_denoise,
    clamp_strength,
    diffusion_guidance,
    region_strength,
)


@pytest.mark.parametrize("x", [-1.0, 0.0, 0.05, 0.12, 0.5, 1.0, 7.0])
def test_clamp_is_idempotent_and_in_range(x):
    once = clamp(x, 0.1, 0.3)
    assert 0.1 <= once <= 0.3
    assert clamp(once, 0.1, 0.3) == once


def test_clamp_leaves_in_range_values_alone():
    assert clamp(0.2, 0.1, 0.3) == 0.2


@pytest.mark.parametrize(
    "family,expected",
    [
        (PresetFamily.MOOD_MASK, (0.10, 0.15)),
        (PresetFamily.REACTION_OVERLAY, (0.12, 0.18)),
        (PresetFamily.GLITCH_OVERLAY, (0.20, 0.30)),
        (PresetFamily.PROFESSIONAL, (0.08, 0.22)),
    ],
)
def test_family_ranges(family, expected):
    assert STRENGTH_RANGES[family] == expected
    lo, hi = expected
    assert clamp_strength(family, 0.0) == lo
    assert clamp_strength(family, 1.0) == hi


def test_every_family_has_a_range():
    assert set(STRENGTH_RANGES) == set(PresetFamily)


def test_region_layers_use_subject_or_background_band():
    assert clamp_region_denoise(RegionLayer(key="background", denoise=0.95)) == REGION_BACKGROUND_RANGE[1]
    assert clamp_region_denoise(RegionLayer(key="background", denoise=0.1)) == REGION_BACKGROUND_RANGE[0]
    assert clamp_region_denoise(RegionLayer(key="mouth", denoise=0.4)) == REGION_SUBJECT_RANGE[1]
    assert clamp_region_denoise(RegionLayer(key="subject", denoise=0.01)) == REGION_SUBJECT_RANGE[0]


def test_region_strength_is_max_of_clamped_values():
    layers = [
        RegionLayer(key="subject", denoise=0.18),
        RegionLayer(key="background", denoise=0.72),
    ]
    assert region_strength(layers) == pytest.approx(0.72)
    assert region_strength([]) is None


def test_guidance_stays_in_band():
    assert diffusion_guidance(4.0) == 4.0
    assert diffusion_guidance(7.5) == 4.5
    assert diffusion_guidance(1.0) == 4.0
