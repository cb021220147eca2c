import json

import pytest

from marketing_recommender import catalog as catalog_module
from marketing_recommender.catalog import (
    DEFAULT_CATALOG,
    build_catalog,
    catalog_from_dict,
    catalog_from_env,
    load_catalog,
)
from marketing_recommender.main import recommend
from marketing_recommender.models import ClientRequest, Package, Service


def test_default_catalog_shape():
    assert len(DEFAULT_CATALOG.services) == 15
    assert [p.id for p in DEFAULT_CATALOG.packages] == ["seed", "grow", "harvest"]
    assert DEFAULT_CATALOG.service("aiChat").requires == ("webChat",)
    assert DEFAULT_CATALOG.entry_package.name == "Seed Plan"


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        DEFAULT_CATALOG.services["new"] = DEFAULT_CATALOG.service("webChat")


def test_self_dependency_rejected():
    with pytest.raises(ValueError, match="cannot require itself"):
        build_catalog([Service(id="a", name="A", description="", price=1, requires=("a",))], [])


def test_unknown_dependency_rejected():
    with pytest.raises(ValueError, match="unknown services"):
        build_catalog([Service(id="a", name="A", description="", price=1, requires=("b",))], [])


def test_package_with_unknown_or_duplicate_services_rejected():
    services = [Service(id="a", name="A", description="", price=1)]
    with pytest.raises(ValueError, match="unknown services"):
        build_catalog(services, [Package(id="p", name="P", description="", price=1,
                                         min_ad_spend=0, service_ids=("x",))])
    with pytest.raises(ValueError, match="more than once"):
        build_catalog(services, [Package(id="p", name="P", description="", price=1,
                                         min_ad_spend=0, service_ids=("a", "a"))])


CUSTOM = {
    "location_service": "listing",
    "hosting_services": ["hosting"],
    "seo_tiers": ["seo"],
    "seo_complement": "blog",
    "services": [
        {"id": "listing", "name": "Listing", "price": 100},
        {"id": "hosting", "name": "Hosting", "price": 50},
        {"id": "seo", "name": "SEO", "price": 300},
        {"id": "blog", "name": "Blog", "price": 60},
    ],
    "packages": [
        {"id": "starter", "name": "Starter", "price": 400, "min_ad_spend": 100,
         "services": ["listing", "seo"]},
    ],
}


def test_catalog_from_dict_roles():
    catalog = catalog_from_dict(CUSTOM)
    assert catalog.location_service == "listing"
    assert catalog.seo_tiers == ("seo",)
    assert catalog.package("starter").service_ids == ("listing", "seo")


def test_custom_catalog_drives_allocation():
    catalog = catalog_from_dict(CUSTOM)
    request = ClientRequest(
        business_type="online", goals=("sales",), budget=450, locations=2,
        online_presence="basic", timeline="long",
    )
    result = recommend(request, catalog)
    # Starter costs 400 + 100 (second listing) + 100 ad spend, so no package
    assert result.type == "services"
    assert [s.id for s in result.services] == ["seo", "blog"]
    assert result.total_cost == 360


def test_load_catalog_and_env(tmp_path, monkeypatch):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(CUSTOM))

    assert load_catalog(path).package("starter").price == 400

    monkeypatch.setenv("RECOMMENDER_CATALOG", str(path))
    assert catalog_from_env().location_service == "listing"

    monkeypatch.delenv("RECOMMENDER_CATALOG")
    assert catalog_from_env() is catalog_module.DEFAULT_CATALOG


def test_load_catalog_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_catalog(tmp_path / "nope.json")
