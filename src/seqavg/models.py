# models and the averaging core, kept free of i/o so every layer can reuse them

from dataclasses import dataclass
from typing import Iterable

@dataclass(frozen=True)
class AverageResult:
    # output value object used by the service layer and cli
    count: int
    average: float

def mean(values: Iterable[float]) -> float:
    # one pass in sequence order, no compensated summation
    total = 0
    count = 0
    for v in values:
        total += v
        count += 1
    if count == 0:
        # hack: 0 / 0 raises in python, so hand back the IEEE-754 result directly
        return float("nan")
    return total / count
