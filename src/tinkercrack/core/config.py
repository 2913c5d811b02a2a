"""
Tuning knobs for key recovery.

Values can be overridden from the ``[tinkercrack]`` table of a TOML file:

    [tinkercrack]
    rejection_threshold = 2.5
    max_key_length = 12
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

from .errors import InvalidInput

CONFIG_TABLE = "tinkercrack"


@dataclass(frozen=True)
class CrackConfig:
    # Chi-squared on relative frequencies: English prose sits well below 1.0,
    # a flat letter distribution is about 5.8.
    rejection_threshold: float = 4.0

    # Upper bound on the periods the key length estimator tries.
    max_key_length: int = 20

    # A period is only tried when every column gets at least this many letters.
    min_column_letters: int = 3

    # Subtracted per unit of period from the average column IoC.
    length_penalty: float = 0.002

    def __post_init__(self) -> None:
        for name in ("max_key_length", "min_column_letters"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidInput(f"{name} must be an integer.", {"field": name, "value": value})
        for name in ("rejection_threshold", "length_penalty"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidInput(f"{name} must be a number.", {"field": name, "value": value})

        if not self.rejection_threshold > 0:
            raise InvalidInput("rejection_threshold must be > 0.", {"value": self.rejection_threshold})
        if self.max_key_length < 1:
            raise InvalidInput("max_key_length must be >= 1.", {"value": self.max_key_length})
        if self.min_column_letters < 1:
            raise InvalidInput("min_column_letters must be >= 1.", {"value": self.min_column_letters})
        if self.length_penalty < 0:
            raise InvalidInput("length_penalty must be >= 0.", {"value": self.length_penalty})

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


DEFAULT_CONFIG = CrackConfig()


def load_config(path: Optional[str | Path] = None) -> CrackConfig:
    """Build a CrackConfig from a TOML file; no path means defaults."""
    if path is None:
        return DEFAULT_CONFIG

    file_path = Path(path)
    try:
        with file_path.open("rb") as fh:
            data = tomllib.load(fh)
    except FileNotFoundError as e:
        raise InvalidInput(f"Config file not found: {file_path}", {"path": str(file_path)}) from e
    except tomllib.TOMLDecodeError as e:
        raise InvalidInput(f"Invalid TOML in {file_path}: {e}", {"path": str(file_path)}) from e

    table = data.get(CONFIG_TABLE, {})
    if not isinstance(table, dict):
        raise InvalidInput(f"[{CONFIG_TABLE}] must be a table.", {"path": str(file_path)})

    known = {f.name for f in fields(CrackConfig)}
    unknown = sorted(set(table) - known)
    if unknown:
        raise InvalidInput(
            f"Unknown config key(s): {', '.join(unknown)}. Available: {', '.join(sorted(known))}",
            {"unknown": unknown},
        )
    return CrackConfig(**table)
