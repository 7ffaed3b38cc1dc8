# turns raw text into numbers and applies the empty-input policy on top of mean()

from __future__ import annotations
import logging
import re
from pathlib import Path
from typing import Iterable, List, Union
from .errors import EmptyInputError, InvalidInputError
from .models import AverageResult, mean
from .config import EMPTY_POLICIES

log = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[\s,]+")

def parse_values(tokens: Iterable[str]) -> List[float]:
    # each token may itself hold several numbers ("1,2 3"), empty pieces are ignored
    values: List[float] = []
    position = 0
    for token in tokens:
        for piece in _SEPARATORS.split(token):
            if not piece:
                continue
            position += 1
            try:
                values.append(float(piece))
            except ValueError as exc:
                raise InvalidInputError(f"Not a number at position {position}: {piece!r}") from exc
    log.debug("parsed %d values", len(values))
    return values

def read_values(path: Union[str, Path]) -> List[float]:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InvalidInputError(f"Cannot read {str(path)!r}: {exc}") from exc
    return parse_values(text.splitlines())

def summarize(values: Iterable[float], policy: str = "nan") -> AverageResult:
    if policy not in EMPTY_POLICIES:
        raise ValueError(f"unknown empty policy {policy!r}, expected one of {EMPTY_POLICIES}")

    # materialize once so generators can be counted and averaged
    items = list(values)
    if not items:
        if policy == "raise":
            raise EmptyInputError("Cannot average an empty sequence")
        log.debug("empty input, average is nan")

    return AverageResult(count=len(items), average=mean(items))
