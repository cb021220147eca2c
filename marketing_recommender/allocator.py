"""Greedy budget fill for the package and services-only branches.

Both branches walk a ranked candidate list once, accepting each service whose
prerequisites are already in place and whose price fits the remaining budget.
There is no backtracking: a service skipped early is never reconsidered in the
same pass.
"""

import math
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field

from .catalog import Catalog
from .models import ClientRequest, LineItem, Package, Service
from .ranking import PACKAGE_RULES, SERVICES_RULES, candidate_services, move_to_front, rank

# Below these remainders no further service is worth adding
SERVICE_FLOOR = 49
AD_SERVICE_FLOOR = 100


@dataclass
class Allocation:
    remaining: float
    items: list[LineItem] = field(default_factory=list)
    ad_spend: float = 0

    def includes(self, service_id: str) -> bool:
        return any(item.id == service_id for item in self.items)

    def accept(
        self,
        service: Service,
        price: float,
        ad_spend: float = 0,
        annotate: bool = False,
    ) -> None:
        self.items.append(
            LineItem(
                id=service.id,
                name=service.name,
                description=service.description,
                price=price,
                min_ad_spend=service.min_ad_spend if annotate else None,
            )
        )
        self.remaining -= price + ad_spend
        self.ad_spend += ad_spend

    def fold_remaining_into_ads(self) -> None:
        self.ad_spend += self.remaining
        self.remaining = 0


@dataclass
class PackageAllocation:
    package: Package
    package_price: float
    additional: list[LineItem]
    ad_spend: int
    remaining: float


@dataclass
class ServicesAllocation:
    services: list[LineItem]
    ad_spend: int
    remaining: float


def dependencies_met(
    service: Service,
    allocation: Allocation,
    satisfied: Iterable[str] = (),
) -> bool:
    """True when every required id is already satisfied or accepted."""
    satisfied = set(satisfied)
    return all(
        req in satisfied or allocation.includes(req)
        for req in service.requires
    )


def greedy_fill(
    candidates: Sequence[Service],
    prices: Mapping[str, float],
    allocation: Allocation,
    *,
    floor: float | None = None,
    satisfied: Iterable[str] = (),
    with_ad_spend: bool = False,
    annotate: bool = False,
    limit: int | None = None,
) -> list[Service]:
    """
    Accept affordable candidates in order, mutating allocation.

    Args:
        candidates: Ranked services; each is visited at most once
        prices: Location-adjusted price per service id
        allocation: Running budget and accepted items
        floor: Stop the walk once the remaining budget drops below this
        satisfied: Ids that count as present for dependency checks (package contents)
        with_ad_spend: Reserve each service's minimum ad spend alongside its price
        annotate: Copy the service's min_ad_spend onto the line item
        limit: Stop after this many acceptances

    Returns:
        The services accepted by this walk, in acceptance order
    """
    satisfied = set(satisfied)
    accepted: list[Service] = []

    for service in candidates:
        if allocation.includes(service.id):
            continue
        if service.requires and not dependencies_met(service, allocation, satisfied):
            continue

        price = prices[service.id]
        ad_spend = service.min_ad_spend if with_ad_spend and service.needs_ad_spend else 0

        if price + ad_spend <= allocation.remaining:
            allocation.accept(service, price, ad_spend, annotate=annotate)
            accepted.append(service)
            if limit is not None and len(accepted) >= limit:
                break

        if floor is not None and allocation.remaining < floor:
            break

    return accepted


def allocate_package(
    catalog: Catalog,
    request: ClientRequest,
    package: Package,
    package_price: float,
    prices: Mapping[str, float],
) -> PackageAllocation:
    """Fill the budget left after a package and its minimum ad spend."""
    allocation = Allocation(
        remaining=request.budget - (package_price + package.min_ad_spend),
        ad_spend=package.min_ad_spend,
    )

    candidates = candidate_services(catalog, request, exclude_ids=package.service_ids)
    ranked = rank(candidates, request, PACKAGE_RULES)

    greedy_fill(
        ranked,
        prices,
        allocation,
        floor=SERVICE_FLOOR,
        satisfied=package.service_ids,
    )

    if request.prioritize_ads:
        allocation.fold_remaining_into_ads()

    return PackageAllocation(
        package=package,
        package_price=package_price,
        additional=allocation.items,
        ad_spend=math.floor(allocation.ad_spend),
        remaining=allocation.remaining,
    )


def allocate_services(
    catalog: Catalog,
    request: ClientRequest,
    prices: Mapping[str, float],
) -> ServicesAllocation:
    """
    Build an individual service selection in three passes.

    1. Ad-driven services with their minimum ad spend (ads prioritised only)
    2. One SEO tier (SEO prioritised only); the lower tier pulls content
       marketing to the front of the queue
    3. Everything else that still fits
    """
    allocation = Allocation(remaining=request.budget)
    ranked = rank(candidate_services(catalog, request), request, SERVICES_RULES)

    if request.prioritize_ads:
        ad_services = [s for s in ranked if s.needs_ad_spend]
        greedy_fill(
            ad_services,
            prices,
            allocation,
            floor=AD_SERVICE_FLOOR,
            with_ad_spend=True,
            annotate=True,
        )

    if request.prioritize_seo:
        seo_services = [s for s in ranked if s.id in catalog.seo_tiers]
        accepted = greedy_fill(seo_services, prices, allocation, annotate=True, limit=1)
        if accepted and accepted[0].id == catalog.seo_tiers[0]:
            ranked = move_to_front(ranked, [catalog.seo_complement])

    remaining_candidates = [
        s for s in ranked
        if not (request.prioritize_ads and s.needs_ad_spend)
    ]
    greedy_fill(
        remaining_candidates,
        prices,
        allocation,
        floor=SERVICE_FLOOR,
        annotate=True,
    )

    if request.prioritize_ads:
        allocation.fold_remaining_into_ads()

    return ServicesAllocation(
        services=allocation.items,
        ad_spend=math.floor(allocation.ad_spend),
        remaining=allocation.remaining,
    )
