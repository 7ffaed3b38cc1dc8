# public entry points, the cli lives in seqavg.cli

from .models import AverageResult, mean
from .service import summarize

__all__ = ["AverageResult", "mean", "summarize"]
