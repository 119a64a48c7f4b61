# fragments/generators.py

"""
Fragment generators: fill `{TOKEN}` placeholders in a preset template.

A generator is a list of axes. Each axis draws once from one vocabulary
per render and fills one or more tokens:

  - a string vocabulary fills its single token with the drawn string,
  - a bundle vocabulary (dict fragments) maps each token to a field of
    the drawn bundle, so related tokens stay coherent.

A multi-pick axis draws several distinct strings from one vocabulary and
fills its token with them joined by the axis joiner.

Every occurrence of a token in the template is replaced.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Mapping, Optional, Tuple

from .rotation import RotationRegistry
from .vocabularies import (
    AIRPORT_FASHION_LOOKS,
    AIRPORT_SCENES,
    AIRPORT_TIME_OF_DAY,
    BUTTERFLY_COLORS,
    COLORCORE_POSES,
    COLORCORE_THEMES,
    CRYSTAL_COLORS,
    MOLTEN_GLOSS_ANIMALS,
    PAPER_POP_THEMES,
    REFLECTION_PACT_ANIMALS,
    SMOKE_COLORS,
    VENOM_ENVIRONMENTS,
    VENOM_FASHION_LOOKS,
    VENOM_LIGHTING,
    VENOM_POSES,
    VENOM_SYMBOLS,
    Vocabulary,
)

logger = logging.getLogger(__name__)

PLACEHOLDER_RE = re.compile(r"\{([A-Z][A-Z0-9_]*)\}")


def template_tokens(template: str) -> FrozenSet[str]:
    """Names of every `{TOKEN}` placeholder in `template`."""
    return frozenset(PLACEHOLDER_RE.findall(template))


@dataclass(frozen=True)
class FragmentAxis:
    """
    One vocabulary draw per render.

    `tokens` maps placeholder name -> bundle field. Use `None` as the
    field for string vocabularies. With `picks` > 1 the axis fills a
    single string token with that many distinct draws.
    """

    vocabulary: Vocabulary
    tokens: Mapping[str, Optional[str]]
    picks: int = 1
    joiner: str = ", "

    def __post_init__(self) -> None:
        if self.picks < 1:
            raise ValueError(f"{self.vocabulary.name}: picks must be at least 1")
        if self.picks > 1:
            if list(self.tokens.values()) != [None]:
                raise ValueError(
                    f"{self.vocabulary.name}: multi-pick axes fill exactly one string token"
                )
            distinct = {f for f in self.vocabulary.fragments if isinstance(f, str)}
            if self.picks > len(distinct):
                raise ValueError(
                    f"{self.vocabulary.name}: cannot pick {self.picks} distinct "
                    f"from {len(distinct)} strings"
                )

    def mismatches(self) -> List[str]:
        """Describe every fragment that cannot fill this axis's tokens."""
        problems: List[str] = []
        for index, fragment in enumerate(self.vocabulary.fragments):
            for token, field_name in self.tokens.items():
                if field_name is None:
                    if not isinstance(fragment, str):
                        problems.append(
                            f"{self.vocabulary.name}[{index}] is not a string for {token}"
                        )
                elif isinstance(fragment, str) or field_name not in fragment:
                    problems.append(
                        f"{self.vocabulary.name}[{index}] has no {field_name!r} for {token}"
                    )
        return problems

    def fill(self, fragment) -> Dict[str, str]:
        values: Dict[str, str] = {}
        for token, field_name in self.tokens.items():
            if field_name is None:
                if not isinstance(fragment, str):
                    raise TypeError(
                        f"{self.vocabulary.name}: token {token} expects a string fragment"
                    )
                values[token] = fragment
            else:
                values[token] = fragment[field_name]
        return values

    def draw(self, registry: RotationRegistry) -> Dict[str, str]:
        if self.picks == 1:
            return self.fill(registry.draw(self.vocabulary))

        chosen: List[str] = []
        while len(chosen) < self.picks:
            fragment = registry.draw(self.vocabulary)
            # A bag reset between draws can hand back an earlier pick
            if fragment not in chosen:
                chosen.append(fragment)
        return self.fill(self.joiner.join(chosen))


@dataclass(frozen=True)
class FragmentGenerator:
    name: str
    axes: Tuple[FragmentAxis, ...]
    tokens: FrozenSet[str] = field(init=False)

    def __post_init__(self) -> None:
        seen = set()
        for axis in self.axes:
            overlap = seen.intersection(axis.tokens)
            if overlap:
                raise ValueError(f"{self.name}: token(s) filled twice: {sorted(overlap)}")
            seen.update(axis.tokens)
        object.__setattr__(self, "tokens", frozenset(seen))

    def mismatches(self) -> List[str]:
        return [problem for axis in self.axes for problem in axis.mismatches()]

    def draw(self, registry: RotationRegistry) -> Dict[str, str]:
        """Draw from every axis and return the token values."""
        values: Dict[str, str] = {}
        for axis in self.axes:
            values.update(axis.draw(registry))
        return values

    def render(self, template: str, registry: RotationRegistry) -> str:
        values = self.draw(registry)

        def _sub(match: "re.Match[str]") -> str:
            token = match.group(1)
            # Unknown tokens are left in place; the router's startup check
            # guarantees catalog templates never have any.
            return values.get(token, match.group(0))

        rendered = PLACEHOLDER_RE.sub(_sub, template)
        logger.debug("[Fragments] %s filled %s", self.name, sorted(values))
        return rendered


def _single(vocabulary: Vocabulary, token: str) -> FragmentAxis:
    return FragmentAxis(vocabulary, {token: None})


SMOKE_COLOR = FragmentGenerator("smoke_color", (_single(SMOKE_COLORS, "SMOKE_COLOR"),))

CRYSTAL_COLOR = FragmentGenerator("crystal_color", (_single(CRYSTAL_COLORS, "CRYSTAL_COLOR"),))

BUTTERFLY_COLOR = FragmentGenerator(
    "butterfly_color",
    (
        FragmentAxis(
            BUTTERFLY_COLORS,
            {
                "PRIMARY_COLOR": "primary_color",
                "SECONDARY_COLOR": "secondary_color",
                "BACKGROUND_GRADIENT": "background_gradient",
            },
        ),
    ),
)

REFLECTION_PACT_ANIMAL = FragmentGenerator(
    "reflection_pact_animal", (_single(REFLECTION_PACT_ANIMALS, "ANIMAL"),)
)

MOLTEN_GLOSS_ANIMAL = FragmentGenerator(
    "molten_gloss_animal", (_single(MOLTEN_GLOSS_ANIMALS, "ANIMAL"),)
)

AIRPORT_FASHION = FragmentGenerator(
    "airport_fashion",
    (
        _single(AIRPORT_FASHION_LOOKS, "FASHION_INJECTION_HERE"),
        _single(AIRPORT_SCENES, "SCENE_INJECTION_HERE"),
        _single(AIRPORT_TIME_OF_DAY, "TIME_OF_DAY_INJECTION_HERE"),
    ),
)

PAPER_POP = FragmentGenerator(
    "paper_pop",
    (
        FragmentAxis(
            PAPER_POP_THEMES,
            {
                "COLOR_NAME": "color_name",
                "HEAD_POSE": "head_pose",
                "EXPRESSION": "expression",
                "BLUSH": "blush",
                "LIP": "lip",
                "LINER": "liner",
                "HAIR_STYLE": "hair_style",
                "HAIR_COLOR": "hair_color",
                "RIP_STYLE": "rip_style",
                "LIGHTING": "lighting",
                "EXTRA": "extra",
                "HAIR_DETAIL": "hair_detail",
                "MOOD_LINE": "mood_line",
            },
        ),
    ),
)

VENOM_CEREMONY = FragmentGenerator(
    "venom_ceremony",
    (
        _single(VENOM_FASHION_LOOKS, "FASHION_INJECTION_HERE"),
        _single(VENOM_SYMBOLS, "SYMBOL_INJECTION_HERE"),
        _single(VENOM_ENVIRONMENTS, "ENVIRONMENT_INJECTION_HERE"),
        _single(VENOM_LIGHTING, "LIGHTING_INJECTION_HERE"),
        _single(VENOM_POSES, "POSE_INJECTION_HERE"),
    ),
)

COLORCORE = FragmentGenerator(
    "colorcore",
    (
        FragmentAxis(
            COLORCORE_THEMES,
            {
                "COLOR": "color",
                "COLOR_DESCRIPTION": "color_description",
                "FEMALE_STYLING": "female_styling",
                "MALE_STYLING": "male_styling",
            },
        ),
        FragmentAxis(COLORCORE_POSES, {"POSES": None}, picks=4),
    ),
)


FRAGMENT_GENERATORS: Dict[str, FragmentGenerator] = {
    g.name: g
    for g in (
        SMOKE_COLOR,
        CRYSTAL_COLOR,
        BUTTERFLY_COLOR,
        REFLECTION_PACT_ANIMAL,
        MOLTEN_GLOSS_ANIMAL,
        AIRPORT_FASHION,
        PAPER_POP,
        VENOM_CEREMONY,
        COLORCORE,
    )
}
