from datetime import date

import pytest
from pydantic import ValidationError

from presets.catalog import CatalogRegistry, PresetCatalog, default_registry
from presets.professional import (
    PRESERVE_IDENTITY,
    PROFESSIONAL_PRESETS,
    ROTATION_WEEKS,
    all_categories,
    current_week,
    current_week_presets,
    presets_by_category,
)
from presets.schema import PresetEntry, PresetFamily
from routing.errors import DuplicatePresetError


def _entry(preset_id, family=PresetFamily.PROFESSIONAL):
    return PresetEntry(id=preset_id, label=preset_id, family=family, prompt="p", strength=0.1)


def test_default_registry_loads_every_family():
    registry = default_registry()
    for family in PresetFamily:
        assert len(registry.catalog(family)) > 0
    assert len(registry) == len(list(registry.entries()))


def test_ids_are_globally_unique():
    ids = [entry.id for entry in default_registry().entries()]
    assert len(ids) == len(set(ids))


def test_duplicate_id_within_a_catalog():
    with pytest.raises(DuplicatePresetError):
        PresetCatalog(PresetFamily.PROFESSIONAL, [_entry("a"), _entry("a")])


def test_duplicate_id_across_catalogs():
    with pytest.raises(DuplicatePresetError):
        CatalogRegistry(
            [
                PresetCatalog(PresetFamily.PROFESSIONAL, [_entry("a")]),
                PresetCatalog(PresetFamily.MOOD_MASK, [_entry("a", PresetFamily.MOOD_MASK)]),
            ]
        )


def test_entry_family_must_match_catalog():
    with pytest.raises(ValueError):
        PresetCatalog(PresetFamily.MOOD_MASK, [_entry("a")])


def test_missing_families_get_empty_catalogs():
    registry = CatalogRegistry([PresetCatalog(PresetFamily.PROFESSIONAL, [_entry("a")])])
    assert len(registry.catalog(PresetFamily.GLITCH_OVERLAY)) == 0
    assert "a" in registry


def test_entries_are_frozen():
    entry = _entry("a")
    with pytest.raises(ValidationError):
        entry.strength = 0.9


def test_randomized_entry_needs_template_and_generator():
    with pytest.raises(ValidationError):
        PresetEntry(
            id="r",
            label="r",
            family=PresetFamily.PROFESSIONAL,
            prompt="p",
            strength=0.1,
            is_randomized=True,
        )


def test_strength_must_be_a_unit_value():
    with pytest.raises(ValidationError):
        PresetEntry(id="s", label="s", family=PresetFamily.PROFESSIONAL, prompt="p", strength=1.5)


def test_professional_looks_preserve_identity():
    for entry in PROFESSIONAL_PRESETS:
        assert PRESERVE_IDENTITY in entry.prompt
        assert entry.negative_prompt


def test_category_helpers():
    assert "cinematic" in all_categories()
    cinematic = presets_by_category("cinematic")
    assert cinematic
    assert all(p.category == "cinematic" for p in cinematic)
    assert {p.id for p in presets_by_category("creative")} >= {"reflection_pact", "paper_pop"}


@pytest.mark.parametrize(
    "today,week",
    [
        (date(2026, 1, 1), 1),
        (date(2026, 1, 7), 1),
        (date(2026, 1, 8), 2),
        (date(2026, 1, 29), 5),
        (date(2026, 2, 5), 1),
        (date(2024, 12, 31), 3),
    ],
)
def test_current_week_cycles_from_new_year(today, week):
    assert current_week(today) == week


def test_current_week_presets_for_fixed_date():
    featured = current_week_presets(date(2026, 1, 29))
    assert [p.id for p in featured] == [
        "cultural_glow",
        "soft_skin_portrait",
        "rainy_day_mood",
        "wildlife_focus",
        "street_story",
    ]


def test_every_rotation_week_has_five_looks():
    for week in range(1, ROTATION_WEEKS + 1):
        assert len([p for p in PROFESSIONAL_PRESETS if p.week == week]) == 5
    # Randomized presets and the quick-fix look stay out of the rotation
    unslotted = {p.id for p in PROFESSIONAL_PRESETS if p.week is None}
    assert "express_enhance" in unslotted
    assert "colorcore" in unslotted
