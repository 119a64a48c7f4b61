import random

import pytest

from fragments.generators import (
    AIRPORT_FASHION,
    BUTTERFLY_COLOR,
    COLORCORE,
    FRAGMENT_GENERATORS,
    PAPER_POP,
    FragmentAxis,
    FragmentGenerator,
    template_tokens,
)
from fragments.rotation import RotationRegistry
from fragments.vocabularies import (
    BUTTERFLY_COLORS,
    COLORCORE_POSES,
    COLORCORE_THEMES,
    PAPER_POP_THEMES,
    SMOKE_COLORS,
    Vocabulary,
)
from presets.catalog import CatalogRegistry, PresetCatalog, default_registry
from presets.schema import PresetEntry, PresetFamily
from routing.errors import TemplateConsistencyError
from routing.router import PayloadRouter
from routing.settings import EngineSettings


@pytest.fixture
def rotation():
    return RotationRegistry(rng=random.Random(99))


def test_template_tokens():
    assert template_tokens("a {ANIMAL} and {ANIMAL} at {TIME_OF_DAY_INJECTION_HERE}") == {
        "ANIMAL",
        "TIME_OF_DAY_INJECTION_HERE",
    }
    assert template_tokens("no placeholders, {lowercase} ignored") == frozenset()


def test_all_occurrences_are_replaced(rotation):
    gen = FragmentGenerator("smoke", (FragmentAxis(SMOKE_COLORS, {"SMOKE_COLOR": None}),))
    out = gen.render("{SMOKE_COLOR} smoke, more {SMOKE_COLOR} haze", rotation)
    assert "{" not in out
    color = out.split(" smoke")[0]
    assert color in SMOKE_COLORS.fragments
    assert out.count(color) == 2


def test_bundle_axis_keeps_fields_together(rotation):
    out = BUTTERFLY_COLOR.render("{PRIMARY_COLOR}|{SECONDARY_COLOR}|{BACKGROUND_GRADIENT}", rotation)
    primary, secondary, background = out.split("|")
    bundle = {
        "primary_color": primary,
        "secondary_color": secondary,
        "background_gradient": background,
    }
    assert bundle in list(BUTTERFLY_COLORS.fragments)


def test_airport_axes_draw_independently(rotation):
    out = AIRPORT_FASHION.render(
        "{FASHION_INJECTION_HERE}/{SCENE_INJECTION_HERE}/{TIME_OF_DAY_INJECTION_HERE}", rotation
    )
    assert len(out.split("/")) == 3
    assert "INJECTION_HERE" not in out


def test_paper_pop_fills_every_theme_token(rotation):
    template = " ".join("{%s}" % token for token in sorted(PAPER_POP.tokens))
    assert "{" not in PAPER_POP.render(template, rotation)


def test_generator_rejects_token_filled_twice():
    with pytest.raises(ValueError):
        FragmentGenerator(
            "dup",
            (
                FragmentAxis(SMOKE_COLORS, {"X": None}),
                FragmentAxis(Vocabulary("other", ("a",)), {"X": None}),
            ),
        )


def test_bundled_templates_are_consistent():
    # Building the router runs the startup check over every catalog
    PayloadRouter(registry=default_registry(), settings=EngineSettings())
    for entry in default_registry().entries():
        if entry.is_randomized:
            generator = FRAGMENT_GENERATORS[entry.generator]
            assert template_tokens(entry.base_prompt) <= generator.tokens
            assert template_tokens(entry.prompt) == frozenset()


def _registry_with(entry):
    return CatalogRegistry([PresetCatalog(PresetFamily.PROFESSIONAL, [entry])])


def test_unknown_placeholder_fails_at_startup():
    entry = PresetEntry(
        id="broken",
        label="Broken",
        family=PresetFamily.PROFESSIONAL,
        prompt="a red thing",
        base_prompt="a {SMOKE_COLOR} {MYSTERY} thing",
        generator="smoke_color",
        is_randomized=True,
        strength=0.15,
    )
    with pytest.raises(TemplateConsistencyError):
        PayloadRouter(registry=_registry_with(entry), settings=EngineSettings())


def test_unknown_generator_fails_at_startup():
    entry = PresetEntry(
        id="broken",
        label="Broken",
        family=PresetFamily.PROFESSIONAL,
        prompt="a thing",
        base_prompt="a {ANIMAL}",
        generator="does_not_exist",
        is_randomized=True,
        strength=0.15,
    )
    with pytest.raises(TemplateConsistencyError):
        PayloadRouter(registry=_registry_with(entry), settings=EngineSettings())


def test_placeholder_in_static_prompt_fails_at_startup():
    entry = PresetEntry(
        id="static",
        label="Static",
        family=PresetFamily.PROFESSIONAL,
        prompt="a {ANIMAL}",
        strength=0.15,
    )
    with pytest.raises(TemplateConsistencyError):
        PayloadRouter(registry=_registry_with(entry), settings=EngineSettings())


def test_bundle_missing_a_field_fails_at_startup():
    partial = Vocabulary("partial", ({"a": "one", "b": "two"}, {"a": "three"}))
    generator = FragmentGenerator("partial", (FragmentAxis(partial, {"A": "a", "B": "b"}),))
    entry = PresetEntry(
        id="partial_bundle",
        label="Partial",
        family=PresetFamily.PROFESSIONAL,
        prompt="one and two",
        base_prompt="{A} and {B}",
        generator="partial",
        is_randomized=True,
        strength=0.15,
    )
    with pytest.raises(TemplateConsistencyError):
        PayloadRouter(
            registry=_registry_with(entry),
            settings=EngineSettings(),
            generators={"partial": generator},
        )


def test_string_token_over_bundle_vocabulary_fails_at_startup():
    generator = FragmentGenerator("wrong_shape", (FragmentAxis(BUTTERFLY_COLORS, {"X": None}),))
    entry = PresetEntry(
        id="wrong_shape",
        label="Wrong",
        family=PresetFamily.PROFESSIONAL,
        prompt="x",
        base_prompt="{X}",
        generator="wrong_shape",
        is_randomized=True,
        strength=0.15,
    )
    with pytest.raises(TemplateConsistencyError):
        PayloadRouter(
            registry=_registry_with(entry),
            settings=EngineSettings(),
            generators={"wrong_shape": generator},
        )


def test_shipped_generators_have_no_mismatches():
    for generator in FRAGMENT_GENERATORS.values():
        assert generator.mismatches() == [], generator.name


def test_colorcore_draws_four_distinct_poses(rotation):
    for _ in range(30):
        poses = COLORCORE.render("{POSES}", rotation).split(", ")
        assert len(poses) == 4
        assert len(set(poses)) == 4
        assert set(poses) <= set(COLORCORE_POSES.fragments)


def test_colorcore_theme_fields_stay_together(rotation):
    out = COLORCORE.render(
        "{COLOR}|{COLOR_DESCRIPTION}|{FEMALE_STYLING}|{MALE_STYLING}", rotation
    )
    color, description, female, male = out.split("|")
    bundle = {
        "color": color,
        "color_description": description,
        "female_styling": female,
        "male_styling": male,
    }
    assert bundle in list(COLORCORE_THEMES.fragments)


def test_colorcore_fills_every_placeholder(rotation):
    template = " ".join("{%s}" % token for token in sorted(COLORCORE.tokens))
    assert "{" not in COLORCORE.render(template, rotation)


def test_multi_pick_stays_distinct_across_a_bag_reset(rotation):
    # Five fragments, four picks: the second render straddles an exhausted bag
    small = Vocabulary("small", ("a", "b", "c", "d", "e"))
    axis = FragmentAxis(small, {"PICKS": None}, picks=4, joiner="/")
    for _ in range(25):
        picks = axis.draw(rotation)["PICKS"].split("/")
        assert len(set(picks)) == 4


@pytest.mark.parametrize(
    "tokens,picks",
    [
        ({"PICKS": None}, 0),
        ({"PICKS": None}, 6),
        ({"A": None, "B": None}, 2),
        ({"A": "a"}, 2),
    ],
)
def test_invalid_multi_pick_axis_is_rejected(tokens, picks):
    with pytest.raises(ValueError):
        FragmentAxis(Vocabulary("small", ("a", "b", "c", "d", "e")), tokens, picks=picks)


def test_paper_pop_mood_line_matches_theme(rotation):
    out = PAPER_POP.render("{COLOR_NAME}|{EXTRA}|{HAIR_DETAIL}|{MOOD_LINE}", rotation)
    color_name, extra, hair_detail, mood_line = out.split("|")
    theme = next(t for t in PAPER_POP_THEMES.fragments if t["color_name"] == color_name)
    assert (theme["extra"], theme["hair_detail"], theme["mood_line"]) == (
        extra,
        hair_detail,
        mood_line,
    )


def test_paper_pop_template_uses_theme_extras():
    entry = default_registry().catalog(PresetFamily.PROFESSIONAL).get("paper_pop")
    assert {"EXTRA", "HAIR_DETAIL", "MOOD_LINE"} <= template_tokens(entry.base_prompt)
    assert "colorful barrettes" in entry.prompt
