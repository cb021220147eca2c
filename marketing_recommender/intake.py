"""Turn raw form answers into a validated ClientRequest."""

import math
from collections.abc import Iterable

from .models import (
    BUSINESS_TYPES,
    GOALS,
    INDUSTRIES,
    ONLINE_PRESENCE,
    TIMELINES,
    ClientRequest,
)

# The form offers 1-4 locations and "5+", which is priced as 5
LOCATION_CHOICES = (1, 2, 3, 4, 5)


def _parse_budget(budget: str | float | int) -> float:
    try:
        value = float(str(budget).replace("$", "").replace(",", "").strip())
    except ValueError:
        raise ValueError("Please enter a valid budget amount") from None
    if not math.isfinite(value) or value <= 0:
        raise ValueError("Please enter a valid budget amount")
    return value


def _parse_locations(locations: str | int) -> int:
    text = str(locations).strip().rstrip("+")
    try:
        value = int(text)
    except ValueError:
        raise ValueError(f"Invalid number of locations: {locations!r}") from None
    if value < 1:
        raise ValueError("Number of locations must be at least 1")
    return value


def _choice(value: str | None, allowed: tuple[str, ...], label: str) -> str:
    value = (value or "").strip()
    if value not in allowed:
        raise ValueError(f"Please select a {label} ({', '.join(allowed)})")
    return value


def _parse_goals(goals: Iterable[str] | str) -> tuple[str, ...]:
    if isinstance(goals, str):
        goals = goals.split(",")
    selected = {g.strip() for g in goals if g and g.strip()}
    unknown = selected - set(GOALS)
    if unknown:
        raise ValueError(f"Unknown goals: {', '.join(sorted(unknown))}")
    if not selected:
        raise ValueError("Please select at least one marketing goal")
    return tuple(g for g in GOALS if g in selected)


def parse_request(
    business_type: str,
    budget: str | float | int,
    goals: Iterable[str] | str,
    online_presence: str,
    timeline: str,
    locations: str | int = 1,
    industry: str = "",
) -> ClientRequest:
    """
    Validate form answers.

    Raises:
        ValueError: with a message suitable for showing to the client
    """
    industry = (industry or "").strip()
    if industry and industry not in INDUSTRIES:
        raise ValueError(f"Please select an industry ({', '.join(INDUSTRIES)})")

    return ClientRequest(
        business_type=_choice(business_type, BUSINESS_TYPES, "business type"),
        goals=_parse_goals(goals),
        budget=_parse_budget(budget),
        locations=_parse_locations(locations),
        online_presence=_choice(online_presence, ONLINE_PRESENCE, "current online presence"),
        timeline=_choice(timeline, TIMELINES, "timeline"),
        industry=industry,
    )
