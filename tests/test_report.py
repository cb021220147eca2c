from marketing_recommender.main import recommend
from marketing_recommender.report import build_report_html


def test_package_report_html(make_request):
    request = make_request(budget=1500, goals=("retention",), timeline="medium")
    html = build_report_html(recommend(request), request, business_name="<Acme> Plumbing")

    assert "&lt;Acme&gt; Plumbing" in html
    assert "Seed Plan" in html
    assert "Recommended Additional Services" in html
    assert "Budget Breakdown" in html
    assert "$1,455/mo" in html
    assert "Local Business Strategy" in html


def test_services_report_shows_ad_spend_requirement(make_request):
    request = make_request()
    html = build_report_html(recommend(request), request)

    assert "Your Business" in html
    assert "Recommended Services" in html
    assert "Requires $500/month minimum ad spend" in html
    assert "$551/mo" in html
