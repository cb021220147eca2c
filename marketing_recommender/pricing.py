"""Location-adjusted pricing.

Only the business-profile listing is billed per location. A standalone
listing costs price * locations; a package that bundles the listing already
covers one location, so each extra location is billed at the catalog rate:
package price + (locations - 1) * listing price.
"""

from .catalog import Catalog
from .models import Package


def adjust_price(
    service_id: str,
    base_price: float,
    locations: int,
    location_service_id: str,
) -> float:
    if service_id == location_service_id and locations > 1:
        return base_price * locations
    return base_price


def adjust_package_price(package: Package, locations: int, catalog: Catalog) -> float:
    price = package.price
    if catalog.location_service in package.service_ids and locations > 1:
        listing = catalog.service(catalog.location_service)
        price = price + (locations - 1) * listing.price
    return price


def adjusted_service_prices(catalog: Catalog, locations: int) -> dict[str, float]:
    """Effective monthly price of every catalog service, keyed by id."""
    return {
        service_id: adjust_price(
            service_id, service.price, locations, catalog.location_service
        )
        for service_id, service in catalog.services.items()
    }


def adjusted_package_prices(catalog: Catalog, locations: int) -> dict[str, float]:
    return {
        pkg.id: adjust_package_price(pkg, locations, catalog)
        for pkg in catalog.packages
    }
