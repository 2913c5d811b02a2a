from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

Key = Union[int, str]


@dataclass(frozen=True, order=True)
class Candidate:
    # sort_index comes first so dataclass ordering uses it automatically
    sort_index: tuple[float, Key] = field(init=False, repr=False)

    key: Key
    text: bytes

    # Lower is better (chi-squared distance to English)
    score: float

    def __post_init__(self) -> None:
        # Exact score ties go to the smaller key (numerically or lexicographically).
        object.__setattr__(self, "sort_index", (self.score, self.key))


@dataclass(frozen=True)
class TextFeatures:
    length: int
    letters: int
    alpha_ratio: float
    printable_ratio: float
    ioc: float  # index of coincidence for A-Z only (0 if not applicable)
    chi2: float  # distance to English letter frequencies (inf without letters)

    def to_dict(self) -> dict[str, Any]:
        return {
            "length": self.length,
            "letters": self.letters,
            "alpha_ratio": self.alpha_ratio,
            "printable_ratio": self.printable_ratio,
            "ioc": self.ioc,
            "chi2": self.chi2,
        }
