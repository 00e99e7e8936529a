"""Configuration settings for the deck driver and shuffle analysis."""

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, get_args, get_type_hints

import yaml


@dataclass
class DeckConfig:
    """Deck construction configuration."""

    jokers: bool = True
    shuffle: bool = True
    seed: int | None = None


@dataclass
class DisplayConfig:
    """Terminal display configuration."""

    color: bool = False
    columns: int = 1


@dataclass
class AnalysisConfig:
    """Shuffle uniformity analysis configuration."""

    trials: int = 20000
    seed: int | None = None
    tolerance: float = 0.15  # max relative deviation per card/position cell
    show_progress: bool = True


@dataclass
class Config:
    """Complete configuration."""

    deck: DeckConfig = field(default_factory=DeckConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)


_SECTIONS = {
    "deck": DeckConfig,
    "display": DisplayConfig,
    "analysis": AnalysisConfig,
}


def _accepts(expected: Any, value: Any) -> bool:
    """Check a YAML value against a field annotation such as `int | None`."""
    for option in get_args(expected) or (expected,):
        if option is type(None):
            if value is None:
                return True
        elif option is bool or isinstance(value, bool):
            # bool is an int subclass; only a bool field takes true/false.
            if option is bool and isinstance(value, bool):
                return True
        elif option is float:
            if isinstance(value, (int, float)):
                return True
        elif isinstance(value, option):
            return True
    return False


def _type_name(expected: Any) -> str:
    return " or ".join(getattr(t, "__name__", str(t)) for t in get_args(expected) or (expected,))


def load_config(path: str | Path) -> Config:
    """Load configuration from YAML file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")

    config = Config()
    for section, values in data.items():
        if section not in _SECTIONS:
            raise ValueError(f"Unknown config section: {section}")
        if values is not None and not isinstance(values, dict):
            raise ValueError(f"Config section [{section}] must be a mapping")
        section_cls = _SECTIONS[section]
        allowed = {f.name for f in fields(section_cls)}
        unknown = set(values or {}) - allowed
        if unknown:
            raise ValueError(f"Unknown keys in [{section}]: {', '.join(sorted(unknown))}")
        hints = get_type_hints(section_cls)
        for key, value in (values or {}).items():
            if not _accepts(hints[key], value):
                raise ValueError(
                    f"Invalid value for {section}.{key}: {value!r} (expected {_type_name(hints[key])})"
                )
        setattr(config, section, section_cls(**(values or {})))

    return config


def save_config(config: Config, path: str | Path) -> None:
    """Save configuration to YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "deck": asdict(config.deck),
        "display": asdict(config.display),
        "analysis": asdict(config.analysis),
    }

    with open(path, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)

