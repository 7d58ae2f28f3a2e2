"""
Tweet scoring.

A tweet's score is the sum of the lexicon weights of its whitespace-separated
tokens. Each token is lower-cased before lookup and unknown tokens count as
0.0. The sum is rounded to one decimal place with round-half-away-from-zero,
so 1.25 becomes 1.3 and -1.25 becomes -1.3.
"""

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Mapping, Protocol

from ..config.settings import SCORE_DECIMALS


def round_half_away_from_zero(value: float, decimals: int = SCORE_DECIMALS) -> float:
    """
    Round to ``decimals`` places, with ties going away from zero.

    The float's shortest decimal representation is rounded, so a sum that
    prints as 1.25 rounds up even though its binary value is slightly off.
    """
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-decimals)
    exact = Decimal(repr(value))
    with localcontext() as ctx:
        # Room for every integer digit plus the kept decimals
        ctx.prec = max(28, exact.adjusted() + decimals + 2)
        rounded = float(exact.quantize(quantum, rounding=ROUND_HALF_UP))
    # Avoid reporting -0.0 for sums that round to zero
    return rounded + 0.0


class Scorer(Protocol):
    """Anything that can turn a tweet and a lexicon into a score."""

    def score(self, record: str, lexicon: Mapping[str, float]) -> float:
        ...


class LexiconScorer:
    """Scores tweets by summing lexicon weights of their tokens."""

    def score(self, record: str, lexicon: Mapping[str, float]) -> float:
        total = sum(lexicon.get(token.lower(), 0.0) for token in record.split())
        return round_half_away_from_zero(total)
