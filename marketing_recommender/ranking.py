"""Priority ordering of candidate services.

Ranking is a sequence of "move these ids to the front" steps. Later steps win
for services named in several groups, so the applied order is:

    1. ads vs SEO preference (timeline / lead goal)
    2. business type
    3. goals

The package branch and the services-only branch use different rule sets: the
package branch only reacts to the leads and retention goals.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import TypeVar

from .catalog import Catalog
from .models import ClientRequest, Service

T = TypeVar("T", bound=Service)

ADS_FIRST = ("localServiceAds", "searchAds")
SEO_FIRST = ("seedlingSeo", "harvestSeo", "contentMarketing")


@dataclass(frozen=True)
class RankingRules:
    by_business_type: dict[str, tuple[str, ...]] = field(default_factory=dict)
    other_business_type: tuple[str, ...] = ()  # "both" or unset
    # First matching goal wins
    goal_chain: tuple[tuple[str, tuple[str, ...]], ...] = ()


PACKAGE_RULES = RankingRules(
    by_business_type={
        "local": ("reviewManagement", "appointmentSetting"),
        "online": ("webChat", "emailSms"),
    },
    goal_chain=(
        ("leads", ("webChat", "appointmentSetting")),
        ("retention", ("emailSms", "reviewManagement")),
    ),
)

SERVICES_RULES = RankingRules(
    by_business_type={
        "local": ("googleBusinessProfile", "localServiceAds", "reviewManagement"),
        "online": ("seedlingSeo", "searchAds", "webChat"),
    },
    other_business_type=("googleBusinessProfile", "seedlingSeo"),
    goal_chain=(
        ("awareness", ("googleBusinessProfile", "seedlingSeo")),
        ("leads", ("searchAds", "localServiceAds", "crmLeadTracking")),
        ("sales", ("searchAds", "emailSms")),
        ("retention", ("emailSms", "reviewManagement")),
    ),
)


def move_to_front(items: Sequence[T], ids: Iterable[str]) -> list[T]:
    """
    Move the items matching ids to the front, in the order of ids.

    Unmatched ids are ignored. Everything else keeps its relative order,
    e.g. [a, b, c] with ids ["c", "a"] becomes [c, a, b].
    """
    rest = list(items)
    front: list[T] = []
    for item_id in ids:
        for i, item in enumerate(rest):
            if item.id == item_id:
                front.append(rest.pop(i))
                break
    return front + rest


def candidate_services(
    catalog: Catalog,
    request: ClientRequest,
    exclude_ids: Iterable[str] = (),
) -> list[Service]:
    """Catalog services in base order, minus excluded ids and, without a website need, hosting."""
    excluded = set(exclude_ids)
    if not request.needs_website:
        excluded.update(catalog.hosting_services)
    return [s for sid, s in catalog.services.items() if sid not in excluded]


def rank(
    services: Sequence[T],
    request: ClientRequest,
    rules: RankingRules,
) -> list[T]:
    ranked = list(services)

    if request.prioritize_ads:
        ranked = move_to_front(ranked, ADS_FIRST)
    elif request.prioritize_seo:
        ranked = move_to_front(ranked, SEO_FIRST)

    if request.business_type in rules.by_business_type:
        ranked = move_to_front(ranked, rules.by_business_type[request.business_type])
    elif rules.other_business_type:
        ranked = move_to_front(ranked, rules.other_business_type)

    for goal, ids in rules.goal_chain:
        if goal in request.goals:
            ranked = move_to_front(ranked, ids)
            break

    return ranked
