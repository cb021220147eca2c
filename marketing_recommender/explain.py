"""Client-facing explanations for a recommendation.

Pure text helpers: nothing here changes what gets recommended.
"""

from .catalog import DEFAULT_CATALOG, Catalog
from .models import ClientRequest, PackageRecommendation, Recommendation
from .pricing import adjust_package_price


def format_money(amount: float) -> str:
    """Format a dollar amount: 1059 -> '$1,059', 99.5 -> '$99.50'."""
    if float(amount).is_integer():
        return f"${amount:,.0f}"
    return f"${amount:,.2f}"


def _goal_list(request: ClientRequest) -> str:
    return ", ".join(request.goals)


def _business_label(request: ClientRequest) -> str:
    return request.business_type or "growing"


def _package_addon_reason(service_id: str, request: ClientRequest) -> list[str]:
    goals = request.goals
    reasons = []

    if service_id == "reviewManagement":
        if "retention" in goals:
            reasons.append(
                "Managing reviews is crucial for customer retention and building trust "
                "with potential customers."
            )
        else:
            reasons.append(
                "Reviews significantly impact your local search visibility and customer trust."
            )
    elif service_id == "emailSms":
        if "retention" in goals:
            reasons.append(
                "Email and SMS campaigns are powerful tools for maintaining relationships "
                "with existing customers."
            )
        if "sales" in goals:
            reasons.append(
                "Direct communication with customers through email and SMS can significantly "
                "boost sales conversion rates."
            )
    elif service_id == "webChat":
        captured = "leads" if "leads" in goals else "customer inquiries"
        reasons.append(
            "Adding chat functionality to your website improves user experience and helps "
            f"capture {captured} before they leave your site."
        )
    elif service_id == "aiChat":
        reasons.append(
            "AI-powered chat provides 24/7 automated responses to common questions, "
            "improving customer service while saving time."
        )
    elif service_id == "appointmentSetting":
        reasons.append(
            "Online appointment setting streamlines the booking process, making it easier "
            "for customers to schedule services."
        )
    elif service_id == "advancedHosting":
        reasons.append(
            "Advanced hosting improves website speed and security, which positively impacts "
            "user experience and search rankings."
        )
    elif service_id == "basicHosting":
        reasons.append(
            "Reliable hosting ensures your website stays online and performs well for visitors."
        )

    return reasons


def _selection_reason(service_id: str, request: ClientRequest) -> list[str]:
    goals = request.goals
    timeline = request.timeline
    no_site = request.online_presence == "none"
    reasons = []

    if service_id == "googleBusinessProfile":
        if request.business_type != "online":
            reasons.append(
                "Google Business Profile optimization is essential for your local visibility "
                "and appears prominently in local searches."
            )
    elif service_id == "localServiceAds":
        suffix = " and lead generation goals" if "leads" in goals else ""
        reasons.append(
            "Local Service Ads provide immediate visibility with Google's guaranteed badge, "
            f"ideal for your {_business_label(request)} business{suffix}."
        )
    elif service_id == "searchAds":
        need = "need for quick results" if timeline == "immediate" else "marketing objectives"
        reasons.append(
            f"Google Search Ads deliver immediate traffic to your website, supporting your {need}."
        )
    elif service_id == "analytics":
        reasons.append(
            "Analytics tracking provides essential insights into how your marketing efforts "
            "are performing."
        )
    elif service_id == "crmLeadTracking":
        if "leads" in goals:
            reasons.append(
                "CRM and lead tracking tools are crucial for managing the leads you generate."
            )
        else:
            reasons.append(
                "CRM and lead tracking tools help organize customer information effectively."
            )
    elif service_id == "reviewManagement":
        effect = (
            "improves customer retention" if "retention" in goals
            else "builds trust with potential customers"
        )
        reasons.append(f"Review management {effect} and enhances your online reputation.")
    elif service_id == "seedlingSeo":
        focus = "awareness goals" if "awareness" in goals else "online visibility needs"
        reasons.append(
            "Seedling SEO provides foundational optimization for key pages, supporting "
            f"your {focus}."
        )
        if timeline == "long":
            reasons.append(
                "Seedling SEO provides a solid foundation for long-term organic growth, "
                "which aligns perfectly with your timeline goals."
            )
    elif service_id == "contentMarketing":
        if timeline in ("long", "medium"):
            tail = "This ongoing content creation is essential for long-term SEO success."
        else:
            tail = "Quality content helps engage visitors and improve conversion rates."
        reasons.append(
            "A 1000-word article each month helps establish your expertise and provides "
            f"fresh content for your website. {tail}"
        )
    elif service_id == "harvestSeo":
        fit = ", aligning perfectly with your timeline expectations" if timeline == "long" else ""
        reasons.append(
            f"Comprehensive SEO is ideal for your long-term growth goals{fit}. This service "
            "builds sustainable organic traffic without ongoing ad costs."
        )
    elif service_id == "basicHosting":
        why = (
            "you mentioned not having a website yet" if no_site
            else "your website needs reliable hosting to stay online and perform well"
        )
        reasons.append(f"Basic hosting is recommended because {why}.")
    elif service_id == "advancedHosting":
        why = (
            "you mentioned not having a website yet and will need secure, reliable hosting"
            if no_site
            else "your website would benefit from enhanced security and performance features"
        )
        reasons.append(f"Advanced hosting is recommended because {why}.")
    else:
        reasons.extend(_package_addon_reason(service_id, request))

    return reasons


def service_reason(service_id: str, request: ClientRequest, branch: str = "services") -> str:
    """
    "Why we recommend this" text for one recommended service.

    Package add-ons use the add-on wording and fall back to the individual
    selection wording for services the add-on copy does not cover.
    """
    if branch == "package":
        reasons = _package_addon_reason(service_id, request) or _selection_reason(
            service_id, request
        )
    else:
        reasons = _selection_reason(service_id, request)
    return " ".join(reasons)


def included_service_note(service_id: str, request: ClientRequest) -> str:
    """Note shown under a service bundled in the recommended package."""
    goals = request.goals
    if service_id == "googleBusinessProfile":
        if request.business_type == "local":
            return (
                "Perfect for your local business to increase visibility in local searches "
                "and Google Maps."
            )
        if request.business_type == "both":
            return (
                "Essential for your hybrid business model to capture local customers "
                "through Google searches."
            )
        return ""
    if service_id == "localServiceAds":
        what = "the leads you need" if "leads" in goals else "immediate business"
        return f"Ideal for generating {what} in your local area."
    if service_id == "searchAds":
        need = "need for quick results" if request.timeline == "immediate" else "marketing goals"
        return f"Provides immediate visibility for your business, supporting your {need}."
    if service_id == "analytics":
        return (
            "Allows you to track the performance of your marketing efforts and make "
            "data-driven decisions."
        )
    if service_id == "crmLeadTracking" and "leads" in goals:
        return "Essential for managing and nurturing the leads your marketing generates."
    if service_id == "seedlingSeo":
        return "Provides foundational SEO to improve organic visibility for key pages and services."
    if service_id == "harvestSeo":
        return (
            "Comprehensive SEO strategy to maximize organic traffic and visibility "
            "across your entire site."
        )
    return ""


_PACKAGE_PITCH = {
    "seed": (
        "The Seed Plan is perfect for your {business} business with a focus on {goals}. "
        "It provides essential local visibility through Google Business Profile and lead "
        "generation through Local Service Ads, while tracking performance through analytics "
        "and managing leads effectively."
    ),
    "grow": (
        "The Grow Plan adds SEO capabilities to boost your {business} business's online "
        "visibility. This is especially effective for your goals of {goals}, as it helps both "
        "with organic traffic and local presence, creating a solid foundation for sustainable "
        "growth."
    ),
    "harvest": (
        "The Harvest Plan provides a comprehensive marketing strategy for your {business} "
        "business, addressing all your goals of {goals}. With both comprehensive SEO and "
        "multiple advertising channels, this plan maximizes your visibility and lead "
        "generation potential across all fronts."
    ),
}


def package_reasons(recommendation: PackageRecommendation, request: ClientRequest) -> list[str]:
    """Paragraphs explaining why the chosen package fits."""
    package = recommendation.package
    included = {s.id for s in package.services}
    reasons = []

    pitch = _PACKAGE_PITCH.get(package.id)
    if pitch:
        reasons.append(
            pitch.format(business=_business_label(request), goals=_goal_list(request))
        )

    if request.business_type == "local" and "googleBusinessProfile" in included:
        reasons.append(
            "Google Business Profile optimization is crucial for your local business to "
            "appear in local searches and Google Maps."
        )

    if request.timeline == "immediate" and included & {"localServiceAds", "searchAds"}:
        reasons.append(
            "The advertising components will deliver the immediate results you're looking "
            "for, while the other services build long-term success."
        )

    return reasons


_TYPE_STRATEGY = {
    "local": (
        "Local Business Strategy",
        "Focus on enhancing your local visibility through Google Business Profile "
        "optimization and local service ads. Collect and manage customer reviews to build "
        "trust in your community.",
    ),
    "online": (
        "Online Business Strategy",
        "Invest in SEO and targeted search ads to drive quality traffic to your website. "
        "Enhance user experience with tools like web chat to engage visitors and convert "
        "them into customers.",
    ),
    "both": (
        "Hybrid Business Strategy",
        "Balance local visibility with broader online presence through a combination of "
        "local SEO, Google Business Profile optimization, and targeted advertising.",
    ),
}

_GOAL_STRATEGY = {
    "awareness": (
        "For Brand Awareness",
        "Maximize your online visibility through SEO and a strong Google Business presence.",
    ),
    "leads": (
        "For Lead Generation",
        "Utilize targeted ads and lead tracking tools to capture and nurture potential "
        "customers.",
    ),
    "sales": (
        "For Sales Growth",
        "Implement conversion-focused strategies like search ads and email campaigns to "
        "drive direct sales.",
    ),
    "retention": (
        "For Customer Retention",
        "Focus on email/SMS campaigns and review management to maintain engagement with "
        "existing customers.",
    ),
}


def strategy_notes(request: ClientRequest) -> list[tuple[str, str]]:
    """(heading, text) pairs for the business type and each selected goal."""
    notes = []
    if request.business_type in _TYPE_STRATEGY:
        notes.append(_TYPE_STRATEGY[request.business_type])
    for goal in request.goals:
        if goal in _GOAL_STRATEGY:
            notes.append(_GOAL_STRATEGY[goal])
    return notes


def package_threshold(request: ClientRequest, catalog: Catalog = DEFAULT_CATALOG) -> float | None:
    """Smallest budget that unlocks the entry package at this location count."""
    entry = catalog.entry_package
    if entry is None:
        return None
    return adjust_package_price(entry, request.locations, catalog) + entry.min_ad_spend


def summary(
    recommendation: Recommendation,
    request: ClientRequest,
    catalog: Catalog = DEFAULT_CATALOG,
) -> str:
    """Opening sentence of the recommendation."""
    budget = format_money(request.budget)

    if isinstance(recommendation, PackageRecommendation):
        count = len(recommendation.additional_services)
        extras = ""
        if count:
            extras = f" and {count} additional service{'s' if count > 1 else ''}"
        return (
            f"Based on your budget of {budget}/month and business needs, we recommend the "
            f"{recommendation.package.name} package with "
            f"{format_money(recommendation.ad_spend)}/month in ad spend{extras}."
        )

    ads = ""
    if recommendation.ad_spend > 0:
        ads = f" with {format_money(recommendation.ad_spend)}/month in ad spend"
    text = (
        f"Based on your budget of {budget}/month, we recommend a custom selection of "
        f"{len(recommendation.services)} services{ads}."
    )
    threshold = package_threshold(request, catalog)
    if threshold is not None:
        entry = catalog.entry_package
        text += (
            " To access our package deals, consider increasing your budget to at least "
            f"{format_money(threshold)}/month ({entry.name} + ad spend)."
        )
    return text
