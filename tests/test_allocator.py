import pytest

from marketing_recommender.allocator import Allocation, dependencies_met, greedy_fill
from marketing_recommender.catalog import build_catalog
from marketing_recommender.main import recommend
from marketing_recommender.models import ClientRequest, Package, Service


def _ids(items):
    return [item.id for item in items]


def _service(id, price, **kwargs):
    return Service(id=id, name=id.title(), description="", price=price, **kwargs)


def _request(budget, **kwargs):
    fields = {
        "business_type": "",
        "goals": ("sales",),
        "budget": budget,
        "online_presence": "basic",
        "timeline": "medium",
    }
    fields.update(kwargs)
    return ClientRequest(**fields)


def test_greedy_fill_stops_below_floor():
    services = [_service("a", 60), _service("b", 30), _service("c", 10)]
    prices = {s.id: s.price for s in services}
    allocation = Allocation(remaining=100)
    accepted = greedy_fill(services, prices, allocation, floor=49)
    assert _ids(accepted) == ["a"]
    assert allocation.remaining == 40


def test_greedy_fill_skips_unaffordable_and_continues():
    services = [_service("big", 500), _service("small", 20)]
    prices = {s.id: s.price for s in services}
    allocation = Allocation(remaining=100)
    greedy_fill(services, prices, allocation, floor=49)
    assert _ids(allocation.items) == ["small"]


def test_greedy_fill_reserves_ad_spend():
    services = [_service("ads", 100, min_ad_spend=300), _service("plain", 50)]
    prices = {s.id: s.price for s in services}
    allocation = Allocation(remaining=450)
    greedy_fill(services, prices, allocation, with_ad_spend=True, annotate=True)
    assert allocation.ad_spend == 300
    assert allocation.remaining == 0
    assert allocation.items[0].min_ad_spend == 300
    assert _ids(allocation.items) == ["ads", "plain"]


def test_greedy_fill_limit():
    services = [_service("a", 10), _service("b", 10)]
    prices = {s.id: s.price for s in services}
    allocation = Allocation(remaining=100)
    assert _ids(greedy_fill(services, prices, allocation, limit=1)) == ["a"]


def test_dependencies_checked_against_package_and_accepted():
    addon = _service("addon", 10, requires=("base",))
    allocation = Allocation(remaining=100)
    assert not dependencies_met(addon, allocation)
    assert dependencies_met(addon, allocation, satisfied=("base",))
    allocation.accept(_service("base", 10), 10)
    assert dependencies_met(addon, allocation)


def test_dependent_ranked_before_prerequisite_is_skipped():
    catalog = build_catalog([_service("addon", 10, requires=("base",)), _service("base", 10)], [])
    result = recommend(_request(100), catalog)
    assert result.type == "services"
    assert _ids(result.services) == ["base"]
    assert result.total_cost == 10
    assert result.ad_spend == 0


def test_dependent_after_prerequisite_is_accepted():
    catalog = build_catalog([_service("base", 10), _service("addon", 10, requires=("base",))], [])
    result = recommend(_request(100), catalog)
    assert _ids(result.services) == ["base", "addon"]


def test_package_contents_satisfy_dependencies():
    catalog = build_catalog(
        [_service("base", 10), _service("addon", 10, requires=("base",))],
        [Package(id="p", name="P", description="", price=50, min_ad_spend=0, service_ids=("base",))],
    )
    result = recommend(_request(100), catalog)
    assert result.type == "package"
    assert _ids(result.additional_services) == ["addon"]
    assert result.total_cost == 60


def test_cyclic_dependencies_do_not_loop():
    catalog = build_catalog(
        [_service("a", 10, requires=("b",)), _service("b", 10, requires=("a",))], []
    )
    result = recommend(_request(100), catalog)
    assert result.services == []
    assert result.total_cost == 0


@pytest.mark.parametrize("budget", [100, 149.99, 1000])
def test_ad_spend_floored_to_whole_dollars(budget):
    catalog = build_catalog([_service("cheap", 10.5)], [])
    result = recommend(_request(budget, timeline="immediate"), catalog)
    assert isinstance(result.ad_spend, int)
    assert result.total_cost == budget


def test_ad_service_pass_stops_below_100():
    catalog = build_catalog(
        [_service("a", 10, min_ad_spend=100), _service("b", 10, min_ad_spend=40)], []
    )
    result = recommend(_request(190, timeline="immediate"), catalog)
    # 80 left after "a" is under the ad-service floor, so "b" is never tried
    assert _ids(result.services) == ["a"]
    assert result.ad_spend == 180


def test_only_one_seo_tier_accepted():
    catalog = build_catalog(
        [_service("low", 10), _service("high", 10), _service("blog", 10)],
        [],
        seo_tiers=("low", "high"),
        seo_complement="blog",
    )
    result = recommend(_request(100), catalog)
    # "high" only comes back in the last pass, after the promoted blog
    assert _ids(result.services) == ["low", "blog", "high"]


def test_package_extras_stop_below_49():
    catalog = build_catalog(
        [_service("base", 10), _service("x", 30), _service("y", 10)],
        [Package(id="p", name="P", description="", price=50, min_ad_spend=0, service_ids=("base",))],
    )
    result = recommend(_request(100), catalog)
    assert result.type == "package"
    assert _ids(result.additional_services) == ["x"]
    assert result.total_cost == 80


def test_ad_service_pass_checks_dependencies():
    catalog = build_catalog(
        [_service("addon", 10, min_ad_spend=50, requires=("base",)), _service("base", 10)], []
    )
    result = recommend(_request(200, timeline="immediate"), catalog)
    assert _ids(result.services) == ["base"]
    assert result.ad_spend == 190


def test_seo_pass_checks_dependencies():
    catalog = build_catalog(
        [_service("seo", 10, requires=("base",)), _service("base", 10)],
        [],
        seo_tiers=("seo",),
    )
    result = recommend(_request(100), catalog)
    assert _ids(result.services) == ["base"]
