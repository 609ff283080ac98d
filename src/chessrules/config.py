"""Engine-wide settings and the globally active instance."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EngineSettings:
    """All user-configurable engine options."""

    # Re-run the legality filter inside apply_move and raise on failure
    check_preconditions: bool = False

    # How many earlier states a GameController keeps for undo (None = all)
    history_limit: int | None = None

    def __post_init__(self) -> None:
        if self.history_limit is not None and self.history_limit < 0:
            raise ValueError(f"history_limit must be >= 0, got {self.history_limit}")


DEFAULT_SETTINGS = EngineSettings()

_current: EngineSettings = DEFAULT_SETTINGS


def settings() -> EngineSettings:
    """Return the active engine settings."""
    return _current


def configure(new_settings: EngineSettings | None = None) -> None:
    """Switch the global settings. ``None`` restores the defaults."""
    global _current
    _current = new_settings if new_settings is not None else DEFAULT_SETTINGS
