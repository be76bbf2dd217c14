from typing import Sequence

from ..models import PriceStatistics


def mean_price(prices: Sequence[int]) -> float:
    if not prices:
        return 0.0
    return sum(prices) / len(prices)


def median_price(prices: Sequence[int]) -> float:
    """Middle value of a sorted copy; average of the two middle values for even counts."""
    if not prices:
        return 0.0
    ordered = sorted(prices)
    middle = len(ordered) // 2
    if len(ordered) % 2 == 0:
        return (ordered[middle - 1] + ordered[middle]) / 2
    return float(ordered[middle])


def compute_price_statistics(prices: Sequence[int]) -> PriceStatistics:
    return PriceStatistics(count=len(prices), mean=mean_price(prices), median=median_price(prices))
