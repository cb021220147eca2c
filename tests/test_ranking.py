from dataclasses import dataclass

from marketing_recommender.catalog import DEFAULT_CATALOG
from marketing_recommender.ranking import (
    PACKAGE_RULES,
    SERVICES_RULES,
    candidate_services,
    move_to_front,
    rank,
)


@dataclass
class Item:
    id: str


def _ids(items):
    return [item.id for item in items]


def test_move_to_front_is_stable():
    items = [Item("a"), Item("b"), Item("c"), Item("d")]
    assert _ids(move_to_front(items, ["c", "a"])) == ["c", "a", "b", "d"]


def test_move_to_front_ignores_unknown_ids():
    items = [Item("a"), Item("b")]
    assert _ids(move_to_front(items, ["zzz", "b"])) == ["b", "a"]
    assert _ids(items) == ["a", "b"]


def test_hosting_filtered_without_website_need(make_request):
    ids = _ids(candidate_services(DEFAULT_CATALOG, make_request(online_presence="basic")))
    assert "basicHosting" not in ids
    assert "advancedHosting" not in ids

    ids = _ids(candidate_services(DEFAULT_CATALOG, make_request(online_presence="none")))
    assert ids[-2:] == ["basicHosting", "advancedHosting"]


def test_services_ranking_local_leads_immediate(make_request):
    request = make_request()
    ranked = rank(candidate_services(DEFAULT_CATALOG, request), request, SERVICES_RULES)
    assert _ids(ranked)[:6] == [
        "searchAds",
        "localServiceAds",
        "crmLeadTracking",
        "googleBusinessProfile",
        "reviewManagement",
        "analytics",
    ]


def test_services_goal_chain_uses_first_matching_goal(make_request):
    request = make_request(
        business_type="both", goals=("awareness", "retention"), timeline="long"
    )
    ranked = rank(candidate_services(DEFAULT_CATALOG, request), request, SERVICES_RULES)
    # Retention is ignored because awareness matched first
    assert _ids(ranked)[:4] == [
        "googleBusinessProfile",
        "seedlingSeo",
        "harvestSeo",
        "contentMarketing",
    ]


def test_package_ranking_local_retention_medium(make_request):
    request = make_request(goals=("retention",), timeline="medium")
    seed = DEFAULT_CATALOG.package("seed")
    candidates = candidate_services(DEFAULT_CATALOG, request, exclude_ids=seed.service_ids)
    assert _ids(rank(candidates, request, PACKAGE_RULES)) == [
        "emailSms",
        "reviewManagement",
        "appointmentSetting",
        "seedlingSeo",
        "harvestSeo",
        "contentMarketing",
        "searchAds",
        "webChat",
        "aiChat",
    ]


def test_package_ranking_ignores_awareness_and_sales(make_request):
    request = make_request(
        business_type="both", goals=("awareness", "sales"), timeline="long"
    )
    seed = DEFAULT_CATALOG.package("seed")
    candidates = candidate_services(DEFAULT_CATALOG, request, exclude_ids=seed.service_ids)
    assert _ids(rank(candidates, request, PACKAGE_RULES))[:4] == [
        "seedlingSeo",
        "harvestSeo",
        "contentMarketing",
        "searchAds",
    ]


def test_ads_preference_beats_seo_preference(make_request):
    request = make_request(business_type="both", goals=("leads",), timeline="long")
    assert request.prioritize_ads and request.prioritize_seo
    seed = DEFAULT_CATALOG.package("seed")
    candidates = candidate_services(DEFAULT_CATALOG, request, exclude_ids=seed.service_ids)
    ranked = _ids(rank(candidates, request, PACKAGE_RULES))
    # leads goal moves web chat and appointments ahead of the ads group
    assert ranked[:3] == ["webChat", "appointmentSetting", "searchAds"]
    assert ranked.index("searchAds") < ranked.index("seedlingSeo")
