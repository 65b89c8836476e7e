"""
Configuration management for the Toast simulator.

Run presets and versioned JSON config files.

Config file format:
{
    "version": "1.0",
    "simulation": {
        "n_games": 10000,
        "seed": 42,
        "copies_per_value": 4,
        "collect_records": true
    }
}
"""

from dataclasses import dataclass, asdict, replace
from typing import Any, Dict, Optional
import json
import logging

from .types import FACE_VALUES, STANDARD_COPIES_PER_VALUE

logger = logging.getLogger(__name__)


CONFIG_VERSION = "1.0"

DEFAULT_N_GAMES = 10000


@dataclass
class SimulationConfig:
    """
    Parameters for one simulation run.

    Attributes:
        n_games: Number of independent games to play
        seed: Random seed (None = fresh entropy each run)
        copies_per_value: Copies of each face value 1-6 per deck
        collect_records: Keep per-game arrays for diagnostics
    """
    n_games: int = DEFAULT_N_GAMES
    seed: Optional[int] = None
    copies_per_value: int = STANDARD_COPIES_PER_VALUE
    collect_records: bool = True

    def __post_init__(self) -> None:
        if self.n_games <= 0:
            raise ValueError(f"n_games must be positive, got {self.n_games}")
        if self.copies_per_value <= 0:
            raise ValueError(
                f"copies_per_value must be positive, got {self.copies_per_value}"
            )

    @property
    def deck_size(self) -> int:
        return len(FACE_VALUES) * self.copies_per_value

    def with_overrides(self, **overrides: Any) -> 'SimulationConfig':
        """Copy with any non-None overrides applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# =============================================================================
# Run Presets
# =============================================================================

RUN_PRESETS: Dict[str, SimulationConfig] = {
    'default': SimulationConfig(n_games=DEFAULT_N_GAMES),
    'quick': SimulationConfig(n_games=1000),
    # Large run for convergence checks; records off to keep memory flat
    'reference': SimulationConfig(n_games=1_000_000, collect_records=False),
}


def get_preset(name: str) -> SimulationConfig:
    if name not in RUN_PRESETS:
        raise ValueError(
            f"Unknown preset '{name}'. Available: {', '.join(RUN_PRESETS)}"
        )
    return RUN_PRESETS[name]


# =============================================================================
# JSON Loading Utilities
# =============================================================================

def _validate_version(config: Dict[str, Any]) -> None:
    version = config.get('version', CONFIG_VERSION)
    if version != CONFIG_VERSION:
        raise ValueError(
            f"Unsupported config version '{version}'. "
            f"Expected '{CONFIG_VERSION}'."
        )


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def config_from_dict(data: Dict[str, Any]) -> SimulationConfig:
    """Build a SimulationConfig from a parsed config document."""
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a JSON object, got {type(data).__name__}")
    _validate_version(data)
    sim = data.get('simulation', {})
    if not isinstance(sim, dict):
        raise ValueError(
            f"'simulation' must be an object, got {type(sim).__name__}"
        )

    unknown = set(sim) - set(SimulationConfig.__dataclass_fields__)
    if unknown:
        raise ValueError(f"Unknown simulation keys: {sorted(unknown)}")

    for key in ('n_games', 'copies_per_value'):
        if key in sim and not _is_int(sim[key]):
            raise ValueError(f"'{key}' must be an integer, got {sim[key]!r}")
    if sim.get('seed') is not None and not _is_int(sim['seed']):
        raise ValueError(f"'seed' must be an integer or null, got {sim['seed']!r}")
    if 'collect_records' in sim and not isinstance(sim['collect_records'], bool):
        raise ValueError(
            f"'collect_records' must be true or false, got {sim['collect_records']!r}"
        )

    return SimulationConfig(
        n_games=sim.get('n_games', DEFAULT_N_GAMES),
        seed=sim.get('seed'),
        copies_per_value=sim.get('copies_per_value', STANDARD_COPIES_PER_VALUE),
        collect_records=sim.get('collect_records', True),
    )


def load_config_from_json(path: str) -> SimulationConfig:
    """
    Load a run config from a JSON file.

    Raises:
        ValueError: If the version is unsupported or values are invalid
    """
    with open(path, 'r') as f:
        data = json.load(f)

    config = config_from_dict(data)
    logger.info(f"Loaded config from {path}: {config}")
    return config


def save_config_to_json(config: SimulationConfig, path: str) -> None:
    """Save a run config to a JSON file."""
    data = {
        'version': CONFIG_VERSION,
        'simulation': config.to_dict(),
    }
    with open(path, 'w') as f:
        json.dump(data, f, indent=2)
