"""Dataclasses for catalog entries, client requests and recommendations."""

from dataclasses import dataclass, field


BUSINESS_TYPES = ("local", "online", "both")

GOALS = ("awareness", "leads", "sales", "retention")

ONLINE_PRESENCE = ("none", "basic", "established")

TIMELINES = ("immediate", "medium", "long")

INDUSTRIES = (
    "retail",
    "homeServices",
    "professional",
    "food",
    "health",
    "auto",
    "pet",
    "other",
)


@dataclass(frozen=True)
class Service:
    id: str
    name: str
    description: str
    price: float
    min_ad_spend: float | None = None
    requires: tuple[str, ...] = ()

    @property
    def needs_ad_spend(self) -> bool:
        return bool(self.min_ad_spend) and self.min_ad_spend > 0


@dataclass(frozen=True)
class Package:
    id: str
    name: str
    description: str
    price: float
    min_ad_spend: float
    service_ids: tuple[str, ...] = ()


@dataclass(frozen=True)
class ClientRequest:
    business_type: str  # one of BUSINESS_TYPES, or "" when unset
    goals: tuple[str, ...]
    budget: float
    locations: int = 1
    online_presence: str = "basic"
    timeline: str = "medium"
    industry: str = ""  # informational only

    @property
    def needs_website(self) -> bool:
        return self.online_presence == "none"

    @property
    def prioritize_ads(self) -> bool:
        return self.timeline == "immediate" or "leads" in self.goals

    @property
    def prioritize_seo(self) -> bool:
        return self.timeline in ("long", "medium")


@dataclass
class LineItem:
    """A priced service inside a recommendation."""

    id: str
    name: str
    description: str
    price: float
    min_ad_spend: float | None = None

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
        }
        if self.min_ad_spend is not None:
            data["min_ad_spend"] = self.min_ad_spend
        return data


@dataclass
class IncludedService:
    id: str
    name: str
    description: str

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "description": self.description}


@dataclass
class ChosenPackage:
    id: str
    name: str
    description: str
    price: float  # location-adjusted
    services: list[IncludedService] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "services": [s.to_dict() for s in self.services],
        }


@dataclass
class PackageRecommendation:
    package: ChosenPackage
    ad_spend: int
    additional_services: list[LineItem]
    total_cost: float
    needs_website: bool
    prioritize_ads: bool
    prioritize_seo: bool

    type = "package"

    @property
    def service_cost(self) -> float:
        return sum(s.price for s in self.additional_services)

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "package": self.package.to_dict(),
            "ad_spend": self.ad_spend,
            "additional_services": [s.to_dict() for s in self.additional_services],
            "total_cost": self.total_cost,
            "needs_website": self.needs_website,
            "prioritize_ads": self.prioritize_ads,
            "prioritize_seo": self.prioritize_seo,
        }


@dataclass
class ServicesRecommendation:
    services: list[LineItem]
    ad_spend: int
    total_cost: float
    needs_website: bool
    prioritize_ads: bool
    prioritize_seo: bool

    type = "services"

    @property
    def service_cost(self) -> float:
        return sum(s.price for s in self.services)

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "services": [s.to_dict() for s in self.services],
            "ad_spend": self.ad_spend,
            "total_cost": self.total_cost,
            "needs_website": self.needs_website,
            "prioritize_ads": self.prioritize_ads,
            "prioritize_seo": self.prioritize_seo,
        }


Recommendation = PackageRecommendation | ServicesRecommendation
