"""Package affordability and tier selection."""

from collections.abc import Mapping, Sequence

from .models import Package


def affordable_packages(
    packages: Sequence[Package],
    adjusted_prices: Mapping[str, float],
    budget: float,
) -> list[Package]:
    """Packages whose adjusted price plus minimum ad spend fit the budget, in tier order."""
    return [
        pkg for pkg in packages
        if adjusted_prices[pkg.id] + pkg.min_ad_spend <= budget
    ]


def select_package(
    packages: Sequence[Package],
    adjusted_prices: Mapping[str, float],
    budget: float,
) -> Package | None:
    """
    Pick the highest affordable tier.

    Packages are ordered lowest tier first, so the last affordable one is the
    most valuable bundle the budget can sustain. None means the caller should
    build an individual service selection instead.
    """
    affordable = affordable_packages(packages, adjusted_prices, budget)
    if not affordable:
        return None
    return affordable[-1]
