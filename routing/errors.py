# routing/errors.py

from __future__ import annotations


GENERIC_FAILURE_MESSAGE = "We couldn't start this generation. Please try again."


class PresetRoutingError(Exception):
    """Base class for routing engine errors."""


class UnknownPresetError(PresetRoutingError, KeyError):
    """Raised when a preset id is not registered in any catalog.

    `user_message` is safe to show to end users; it never mentions
    internal family or catalog names.
    """

    user_message = GENERIC_FAILURE_MESSAGE

    def __init__(self, preset_id: str) -> None:
        super().__init__(preset_id)
        self.preset_id = preset_id

    def __str__(self) -> str:
        return f"Unknown preset id: {self.preset_id!r}"


class DuplicatePresetError(PresetRoutingError):
    """Raised at load time when two catalog entries share an id."""


class TemplateConsistencyError(PresetRoutingError):
    """Raised when a randomized template references a placeholder no generator fills."""
