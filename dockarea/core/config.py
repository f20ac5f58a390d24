"""Layout configuration: per-panel split permissions loaded from JSON."""

from __future__ import annotations

import json
import os
from collections.abc import Iterable
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Union

from dockarea.core.allowed_splits import AllowedSplits, effective_splits
from dockarea.core.split import Split
from dockarea.log import get_logger

log = get_logger(name="config")

def default_config_dir() -> Path:
    """$XDG_CONFIG_HOME/dockarea; an empty XDG_CONFIG_HOME counts as unset."""
    return Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config") / "dockarea"


DEFAULT_CONFIG_DIR = default_config_dir()
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "layout.json"

# A preset name ("left_right") or a list of names whose union is taken
SplitsSpec = Union[str, list[str]]

# Canonical names, in the order format_allowed_splits() prefers them
_PRESETS: dict[str, AllowedSplits] = {
    "all": AllowedSplits.ALL,
    "none": AllowedSplits.NONE,
    "left": AllowedSplits.LEFT,
    "right": AllowedSplits.RIGHT,
    "left_right": AllowedSplits.LEFT_RIGHT,
    "top": AllowedSplits.TOP,
    "bottom": AllowedSplits.BOTTOM,
    "top_bottom": AllowedSplits.TOP_BOTTOM,
}
_ALIASES: dict[str, AllowedSplits] = {
    "above": AllowedSplits.TOP,
    "below": AllowedSplits.BOTTOM,
    "horizontal": AllowedSplits.LEFT_RIGHT,
    "vertical": AllowedSplits.TOP_BOTTOM,
}
_SPLIT_NAMES: dict[Split, str] = {
    Split.LEFT: "left",
    Split.RIGHT: "right",
    Split.ABOVE: "top",
    Split.BELOW: "bottom",
}


def _preset(name: str) -> AllowedSplits:
    if not isinstance(name, str):
        raise TypeError(f"Allowed splits name must be a string, got {name!r}")
    key = name.strip().lower().replace("-", "_")
    splits = _PRESETS.get(key) or _ALIASES.get(key)
    if splits is None:
        raise ValueError(f"Unknown allowed splits name: {name!r}")
    return splits


def parse_allowed_splits(value: SplitsSpec) -> AllowedSplits:
    """Build AllowedSplits from a preset name or a list of names.

    Names are case-insensitive and '-' is treated as '_'. A list yields the
    union of its entries, so an empty list means no splits.
    """
    if isinstance(value, str):
        return _preset(value)
    if not isinstance(value, (list, tuple)):
        raise TypeError(
            f"Allowed splits must be a name or list of names, got {type(value).__name__}"
        )
    result = AllowedSplits.NONE
    for name in value:
        result |= _preset(name)
    return result


def format_allowed_splits(splits: AllowedSplits) -> SplitsSpec:
    """Inverse of parse_allowed_splits: a preset name when one matches exactly."""
    for name, preset in _PRESETS.items():
        if preset == splits:
            return name
    return [_SPLIT_NAMES[split] for split in splits.directions()]


@dataclass
class LayoutConfig:
    """Split permissions for the panels of a docking layout."""

    # Applied to panels without an entry of their own
    default_splits: SplitsSpec = "all"
    # Panel id -> allowed splits
    panels: dict[str, SplitsSpec] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self._path: Path = DEFAULT_CONFIG_FILE

    @classmethod
    def load(cls, path: Path | str | None = None) -> LayoutConfig:
        """Load config from JSON file, falling back to defaults for missing keys."""
        path = Path(path) if path else DEFAULT_CONFIG_FILE
        if not path.exists():
            log.debug("No layout config at %s, writing defaults", path)
            config = cls()
            config._path = path
            config.save(path)
            return config

        with open(path) as f:
            data: dict[str, Any] = json.load(f)
        if not isinstance(data, dict):
            log.warning("Ignoring %s: expected an object, got %r", path, data)
            data = {}

        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_fields}
        config = cls(**filtered)
        config._path = path
        config._validate()
        log.debug("Loaded layout config from %s (%d panels)", path, len(config.panels))
        return config

    def _validate(self) -> None:
        """Replace entries that do not parse (fallback to the defaults)."""
        try:
            parse_allowed_splits(self.default_splits)
        except (TypeError, ValueError) as e:
            log.warning("Invalid default_splits %r: %s", self.default_splits, e)
            self.default_splits = "all"

        if not isinstance(self.panels, dict):
            log.warning("Ignoring panels: expected an object, got %r", self.panels)
            self.panels = {}
            return

        for panel_id, value in list(self.panels.items()):
            try:
                parse_allowed_splits(value)
            except (TypeError, ValueError) as e:
                log.warning("Invalid splits for panel %s: %s", panel_id, e)
                default = self.default_splits
                # Copy so panels never alias the default list
                self.panels[panel_id] = (
                    list(default) if isinstance(default, list) else default
                )

    def save(self, path: Path | str | None = None) -> None:
        """Save config to JSON file."""
        path = Path(path) if path else self._path
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(asdict(self), f, indent=2)
            f.write("\n")
        log.debug("Saved layout config to %s", path)

    def splits_for(self, panel_id: str) -> AllowedSplits:
        """Configured splits for a panel, or the default."""
        return parse_allowed_splits(self.panels.get(panel_id, self.default_splits))

    def set_splits(self, panel_id: str, splits: AllowedSplits) -> None:
        self.panels[panel_id] = format_allowed_splits(splits)

    def effective_for(self, panel_id: str, ancestors: Iterable[str] = ()) -> AllowedSplits:
        """Panel splits narrowed by every ancestor panel's splits."""
        return effective_splits(
            self.splits_for(panel_id), *(self.splits_for(a) for a in ancestors)
        )
