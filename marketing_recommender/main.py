"""Orchestration: request -> prices -> package or services -> recommendation."""

from .allocator import PackageAllocation, ServicesAllocation, allocate_package, allocate_services
from .catalog import DEFAULT_CATALOG, Catalog
from .models import (
    ChosenPackage,
    ClientRequest,
    IncludedService,
    PackageRecommendation,
    Recommendation,
    ServicesRecommendation,
)
from .pricing import adjusted_package_prices, adjusted_service_prices
from .selector import select_package


class Recommender:
    """
    Budget allocator bound to one immutable catalog.

    Instances hold no per-request state, so one recommender can serve any
    number of requests.
    """

    def __init__(self, catalog: Catalog = DEFAULT_CATALOG):
        self.catalog = catalog

    def recommend(self, request: ClientRequest) -> Recommendation:
        catalog = self.catalog
        service_prices = adjusted_service_prices(catalog, request.locations)
        package_prices = adjusted_package_prices(catalog, request.locations)

        package = select_package(catalog.packages, package_prices, request.budget)
        if package is not None:
            allocation = allocate_package(
                catalog, request, package, package_prices[package.id], service_prices
            )
            return self._package_result(allocation, request)

        allocation = allocate_services(catalog, request, service_prices)
        return self._services_result(allocation, request)

    def _package_result(
        self,
        allocation: PackageAllocation,
        request: ClientRequest,
    ) -> PackageRecommendation:
        package = allocation.package
        included = []
        for service_id in package.service_ids:
            service = self.catalog.service(service_id)
            included.append(
                IncludedService(id=service.id, name=service.name, description=service.description)
            )

        return PackageRecommendation(
            package=ChosenPackage(
                id=package.id,
                name=package.name,
                description=package.description,
                price=allocation.package_price,
                services=included,
            ),
            ad_spend=allocation.ad_spend,
            additional_services=allocation.additional,
            total_cost=request.budget - allocation.remaining,
            needs_website=request.needs_website,
            prioritize_ads=request.prioritize_ads,
            prioritize_seo=request.prioritize_seo,
        )

    def _services_result(
        self,
        allocation: ServicesAllocation,
        request: ClientRequest,
    ) -> ServicesRecommendation:
        return ServicesRecommendation(
            services=allocation.services,
            ad_spend=allocation.ad_spend,
            total_cost=request.budget - allocation.remaining,
            needs_website=request.needs_website,
            prioritize_ads=request.prioritize_ads,
            prioritize_seo=request.prioritize_seo,
        )


def recommend(request: ClientRequest, catalog: Catalog = DEFAULT_CATALOG) -> Recommendation:
    """Recommend a package or service selection for one validated request."""
    return Recommender(catalog).recommend(request)
