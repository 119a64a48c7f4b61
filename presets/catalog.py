# presets/catalog.py

"""
Catalog containers and the combined registry.

A `PresetCatalog` is an immutable id -> entry table for one family.
`CatalogRegistry` holds one catalog per family and enforces that ids are
unique across all of them, which the family classifier relies on.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, Optional

from routing.errors import DuplicatePresetError

from .schema import PresetEntry, PresetFamily

logger = logging.getLogger(__name__)


class PresetCatalog:
    def __init__(self, family: PresetFamily, entries: Iterable[PresetEntry]) -> None:
        table: Dict[str, PresetEntry] = {}
        for entry in entries:
            if entry.family is not family:
                raise ValueError(
                    f"Preset {entry.id!r} is tagged {entry.family.value}, "
                    f"not {family.value}"
                )
            if entry.id in table:
                raise DuplicatePresetError(f"Preset id {entry.id!r} appears twice in {family.value}")
            table[entry.id] = entry

        self.family = family
        self._entries: Dict[str, PresetEntry] = table

    def __contains__(self, preset_id: object) -> bool:
        return preset_id in self._entries

    def __iter__(self) -> Iterator[PresetEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, preset_id: str) -> Optional[PresetEntry]:
        return self._entries.get(preset_id)

    def ids(self) -> Iterable[str]:
        return self._entries.keys()


class CatalogRegistry:
    """All catalogs, keyed by family, with global id uniqueness."""

    def __init__(self, catalogs: Iterable[PresetCatalog]) -> None:
        by_family: Dict[PresetFamily, PresetCatalog] = {}
        owner: Dict[str, PresetFamily] = {}

        for catalog in catalogs:
            if catalog.family in by_family:
                raise ValueError(f"Two catalogs registered for {catalog.family.value}")
            for preset_id in catalog.ids():
                if preset_id in owner:
                    raise DuplicatePresetError(
                        f"Preset id {preset_id!r} is registered in both "
                        f"{owner[preset_id].value} and {catalog.family.value}"
                    )
                owner[preset_id] = catalog.family
            by_family[catalog.family] = catalog

        missing = set(PresetFamily) - set(by_family)
        for family in missing:
            by_family[family] = PresetCatalog(family, [])

        self._catalogs: Dict[PresetFamily, PresetCatalog] = by_family
        logger.debug(
            "[Catalog] Loaded %d presets across %d families", len(owner), len(by_family)
        )

    def catalog(self, family: PresetFamily) -> PresetCatalog:
        return self._catalogs[family]

    def entries(self) -> Iterator[PresetEntry]:
        for family in PresetFamily:
            yield from self._catalogs[family]

    def __contains__(self, preset_id: object) -> bool:
        return any(preset_id in c for c in self._catalogs.values())

    def __len__(self) -> int:
        return sum(len(c) for c in self._catalogs.values())


def default_registry() -> CatalogRegistry:
    """Build the registry from the bundled catalog modules."""
    from . import glitch_overlay, mood_mask, professional, reaction_overlay, region_editing

    return CatalogRegistry(
        [
            PresetCatalog(PresetFamily.REGION_AWARE_EDITING, region_editing.REGION_EDITING_PRESETS),
            PresetCatalog(PresetFamily.MOOD_MASK, mood_mask.MOOD_MASK_PRESETS),
            PresetCatalog(PresetFamily.REACTION_OVERLAY, reaction_overlay.REACTION_OVERLAY_PRESETS),
            PresetCatalog(PresetFamily.GLITCH_OVERLAY, glitch_overlay.GLITCH_OVERLAY_PRESETS),
            PresetCatalog(PresetFamily.PROFESSIONAL, professional.PROFESSIONAL_PRESETS),
        ]
    )
