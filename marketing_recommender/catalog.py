"""Static service and package tables.

The built-in catalog mirrors the agency's published price list. Packages are
listed in ascending tier order (Seed -> Grow -> Harvest); the package selector
relies on that order.

An alternate catalog can be loaded from JSON (RECOMMENDER_CATALOG) for
testing price changes without touching code.
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from dotenv import load_dotenv

from .models import Package, Service

load_dotenv()

LOCATION_SERVICE = "googleBusinessProfile"
HOSTING_SERVICES = ("basicHosting", "advancedHosting")
SEO_TIERS = ("seedlingSeo", "harvestSeo")  # lower tier first
SEO_COMPLEMENT = "contentMarketing"


@dataclass(frozen=True)
class Catalog:
    services: Mapping[str, Service]
    packages: tuple[Package, ...]
    location_service: str = LOCATION_SERVICE
    hosting_services: tuple[str, ...] = HOSTING_SERVICES
    seo_tiers: tuple[str, ...] = SEO_TIERS
    seo_complement: str = SEO_COMPLEMENT

    def service(self, service_id: str) -> Service:
        return self.services[service_id]

    def package(self, package_id: str) -> Package:
        for pkg in self.packages:
            if pkg.id == package_id:
                return pkg
        raise KeyError(package_id)

    @property
    def entry_package(self) -> Package | None:
        """Lowest tier package, or None for a catalog without packages."""
        return self.packages[0] if self.packages else None


def build_catalog(
    services: list[Service],
    packages: list[Package],
    **roles: Any,
) -> Catalog:
    """Validate and freeze a catalog. Service order is the base ranking order."""
    table: dict[str, Service] = {}
    for service in services:
        if service.id in table:
            raise ValueError(f"Duplicate service id: {service.id}")
        table[service.id] = service

    for service in services:
        if service.id in service.requires:
            raise ValueError(f"Service {service.id} cannot require itself")
        missing = [req for req in service.requires if req not in table]
        if missing:
            raise ValueError(
                f"Service {service.id} requires unknown services: {', '.join(missing)}"
            )

    for pkg in packages:
        if len(set(pkg.service_ids)) != len(pkg.service_ids):
            raise ValueError(f"Package {pkg.id} lists a service more than once")
        missing = [sid for sid in pkg.service_ids if sid not in table]
        if missing:
            raise ValueError(
                f"Package {pkg.id} includes unknown services: {', '.join(missing)}"
            )

    return Catalog(
        services=MappingProxyType(table),
        packages=tuple(packages),
        **roles,
    )


DEFAULT_SERVICES = [
    Service(
        id="crmLeadTracking",
        name="CRM + Lead Tracking",
        price=99,
        description="Track and manage leads and customer relationships",
    ),
    Service(
        id="analytics",
        name="Google Analytics (GA4) Tracking",
        price=99,
        description="Track website performance and user behavior",
    ),
    Service(
        id="googleBusinessProfile",
        name="Google Business Profile Optimization",
        price=199,
        description="Optimize your Google Business listing for better local visibility",
    ),
    Service(
        id="localServiceAds",
        name="Google Local Service Ads",
        price=149,
        min_ad_spend=500,
        description="Targeted local ads with Google's guaranteed badge",
    ),
    Service(
        id="searchAds",
        name="Google Search Ads",
        price=599,
        min_ad_spend=1000,
        description="Targeted ads on Google search results (1 campaign, 1 ad group)",
    ),
    Service(
        id="appointmentSetting",
        name="Appointment Setting",
        price=99,
        description="Tools to allow customers to book appointments directly",
    ),
    Service(
        id="webChat",
        name="Web Chat",
        price=99,
        description="Live chat functionality for your website",
    ),
    Service(
        id="aiChat",
        name="Conversational AI Chat",
        price=99,
        requires=("webChat",),
        description="AI-powered chat for your website. Requires Web Chat",
    ),
    Service(
        id="emailSms",
        name="Email & SMS Campaigns",
        price=99,
        description="Email and text message marketing campaigns",
    ),
    Service(
        id="reviewManagement",
        name="Review Management",
        price=99,
        description="Manage and respond to customer reviews",
    ),
    Service(
        id="seedlingSeo",
        name="Seedling SEO",
        price=599,
        description="Basic SEO for 4-5 key pages, 15-20 keywords",
    ),
    Service(
        id="harvestSeo",
        name="Harvest SEO",
        price=1799,
        description="Comprehensive SEO for 15-20 pages, 80+ keywords, content and link building",
    ),
    Service(
        id="contentMarketing",
        name="Content Marketing",
        price=99,
        description="1000-word article providing valuable content for your website and audience",
    ),
    Service(
        id="basicHosting",
        name="Basic WordPress Hosting and Maintenance",
        price=49,
        description="Essential hosting and maintenance for WordPress sites",
    ),
    Service(
        id="advancedHosting",
        name="Advanced WordPress Hosting and Maintenance",
        price=99,
        description="Premium hosting with malware protection and staging site",
    ),
]

DEFAULT_PACKAGES = [
    Package(
        id="seed",
        name="Seed Plan",
        price=559,
        min_ad_spend=500,
        service_ids=("googleBusinessProfile", "localServiceAds", "analytics", "crmLeadTracking"),
        description="Get started with essential local visibility and lead tracking.",
    ),
    Package(
        id="grow",
        name="Grow Plan",
        price=1099,
        min_ad_spend=1000,
        service_ids=(
            "googleBusinessProfile",
            "seedlingSeo",
            "localServiceAds",
            "analytics",
            "crmLeadTracking",
        ),
        description="Boost visibility with targeted SEO and local ads.",
    ),
    Package(
        id="harvest",
        name="Harvest Plan",
        price=2499,
        min_ad_spend=1500,
        service_ids=(
            "googleBusinessProfile",
            "harvestSeo",
            "localServiceAds",
            "searchAds",
            "analytics",
            "crmLeadTracking",
        ),
        description="Comprehensive marketing strategy for maximum growth.",
    ),
]

DEFAULT_CATALOG = build_catalog(DEFAULT_SERVICES, DEFAULT_PACKAGES)


def _service_from_json(item: dict[str, Any]) -> Service:
    return Service(
        id=item["id"],
        name=item.get("name", item["id"]),
        description=item.get("description", ""),
        price=item["price"],
        min_ad_spend=item.get("min_ad_spend"),
        requires=tuple(item.get("requires", [])),
    )


def _package_from_json(item: dict[str, Any]) -> Package:
    return Package(
        id=item["id"],
        name=item.get("name", item["id"]),
        description=item.get("description", ""),
        price=item["price"],
        min_ad_spend=item.get("min_ad_spend", 0),
        service_ids=tuple(item.get("services", [])),
    )


def catalog_from_dict(data: dict[str, Any]) -> Catalog:
    """
    Build a catalog from its JSON form.

    Packages must be listed lowest tier first. The role keys
    (location_service, hosting_services, seo_tiers, seo_complement) are
    optional and default to the built-in service ids.
    """
    roles: dict[str, Any] = {}
    if "location_service" in data:
        roles["location_service"] = data["location_service"]
    if "hosting_services" in data:
        roles["hosting_services"] = tuple(data["hosting_services"])
    if "seo_tiers" in data:
        roles["seo_tiers"] = tuple(data["seo_tiers"])
    if "seo_complement" in data:
        roles["seo_complement"] = data["seo_complement"]

    services = [_service_from_json(item) for item in data.get("services", [])]
    packages = [_package_from_json(item) for item in data.get("packages", [])]
    return build_catalog(services, packages, **roles)


def load_catalog(path: str | Path) -> Catalog:
    """Load a catalog JSON file. Missing files and bad JSON propagate."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    return catalog_from_dict(data)


def catalog_from_env() -> Catalog:
    """Return the catalog named by RECOMMENDER_CATALOG, or the built-in one."""
    path = os.getenv("RECOMMENDER_CATALOG")
    if path:
        return load_catalog(path)
    return DEFAULT_CATALOG
