# routing/classifier.py

"""
Preset id -> family.

Rules are evaluated in order and the first match wins. Anything the
rules do not claim is assumed to be a professional preset, and must be
present in that catalog.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence, Tuple

from presets.catalog import CatalogRegistry
from presets.schema import PresetFamily

from .errors import UnknownPresetError

logger = logging.getLogger(__name__)

Predicate = Callable[[str], bool]
Rule = Tuple[Predicate, PresetFamily]

# Checked in this order. Professional is the fallback, not a rule.
RULE_ORDER: Tuple[PresetFamily, ...] = (
    PresetFamily.REGION_AWARE_EDITING,
    PresetFamily.MOOD_MASK,
    PresetFamily.REACTION_OVERLAY,
    PresetFamily.GLITCH_OVERLAY,
)


def membership_rules(registry: CatalogRegistry) -> List[Rule]:
    """One catalog-membership predicate per non-professional family."""
    rules: List[Rule] = []
    for family in RULE_ORDER:
        catalog = registry.catalog(family)
        rules.append((catalog.__contains__, family))
    return rules


class FamilyClassifier:
    def __init__(
        self,
        registry: CatalogRegistry,
        rules: Optional[Sequence[Rule]] = None,
    ) -> None:
        self.registry = registry
        self.rules: Tuple[Rule, ...] = tuple(
            rules if rules is not None else membership_rules(registry)
        )

    def classify(self, preset_id: str) -> PresetFamily:
        for predicate, family in self.rules:
            if predicate(preset_id):
                return family

        if preset_id in self.registry.catalog(PresetFamily.PROFESSIONAL):
            return PresetFamily.PROFESSIONAL

        logger.warning("[Classifier] Unknown preset id %r", preset_id)
        raise UnknownPresetError(preset_id)
