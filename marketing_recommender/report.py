"""HTML template + WeasyPrint PDF generation for a recommendation."""

from html import escape
from pathlib import Path

from .catalog import DEFAULT_CATALOG, Catalog
from .explain import (
    format_money,
    included_service_note,
    package_reasons,
    service_reason,
    strategy_notes,
    summary,
)
from .models import ClientRequest, LineItem, PackageRecommendation, Recommendation


def _service_rows(items: list[LineItem], request: ClientRequest, branch: str) -> str:
    rows = ""
    for item in items:
        reason = service_reason(item.id, request, branch)
        ad_note = ""
        if item.min_ad_spend:
            ad_note = (
                f'<div class="ad-note">Requires {format_money(item.min_ad_spend)}/month '
                "minimum ad spend for optimal results</div>"
            )
        reason_html = f'<div class="svc-reason">{escape(reason)}</div>' if reason else ""
        rows += f"""
        <tr class="service-row">
            <td class="svc-name">
                <div class="svc-title">{escape(item.name)}</div>
                <div class="svc-desc">{escape(item.description)}</div>
                {reason_html}
                {ad_note}
            </td>
            <td class="svc-price"><span class="pill">{format_money(item.price)}/mo</span></td>
        </tr>
        """
    return rows


def _package_section(recommendation: PackageRecommendation, request: ClientRequest) -> str:
    package = recommendation.package
    reasons = "".join(f"<p>{escape(r)}</p>" for r in package_reasons(recommendation, request))

    included = ""
    for service in package.services:
        note = included_service_note(service.id, request)
        note_html = f'<div class="svc-reason">{escape(note)}</div>' if note else ""
        included += f"""
        <li>
            <div class="svc-title">{escape(service.name)}</div>
            <div class="svc-desc">{escape(service.description)}</div>
            {note_html}
        </li>
        """

    return f"""
    <div class="section">
        <div class="card-heading">{escape(package.name)}</div>
        <div class="card-subtitle">{escape(package.description)}</div>
        <div class="intro-block">{reasons}</div>
        <ul class="included">{included}</ul>
        <table class="totals">
            <tr><td>Package Price</td><td class="amount">{format_money(package.price)}/mo</td></tr>
            <tr><td>Ad Spend</td><td class="amount">{format_money(recommendation.ad_spend)}/mo</td></tr>
            <tr class="total-row"><td>Package Total</td>
                <td class="amount">{format_money(package.price + recommendation.ad_spend)}/mo</td></tr>
        </table>
    </div>
    """


def _breakdown(recommendation: Recommendation) -> str:
    rows = ""
    if isinstance(recommendation, PackageRecommendation):
        rows += (
            f"<tr><td>{escape(recommendation.package.name)}</td>"
            f'<td class="amount">{format_money(recommendation.package.price)}/mo</td></tr>'
        )
        if recommendation.additional_services:
            rows += (
                "<tr><td>Additional Services</td>"
                f'<td class="amount">{format_money(recommendation.service_cost)}/mo</td></tr>'
            )
    else:
        rows += (
            "<tr><td>Services</td>"
            f'<td class="amount">{format_money(recommendation.service_cost)}/mo</td></tr>'
        )
    if recommendation.ad_spend > 0:
        rows += (
            "<tr><td>Ad Spend</td>"
            f'<td class="amount">{format_money(recommendation.ad_spend)}/mo</td></tr>'
        )
    rows += (
        '<tr class="total-row"><td>Total Monthly Investment</td>'
        f'<td class="amount">{format_money(recommendation.total_cost)}/mo</td></tr>'
    )
    return f"""
    <div class="section">
        <div class="card-heading">Budget Breakdown</div>
        <table class="totals">{rows}</table>
    </div>
    """


def build_report_html(
    recommendation: Recommendation,
    request: ClientRequest,
    business_name: str = "",
    catalog: Catalog = DEFAULT_CATALOG,
) -> str:
    """Render the full recommendation report as a standalone HTML document."""
    if isinstance(recommendation, PackageRecommendation):
        body = _package_section(recommendation, request)
        if recommendation.additional_services:
            body += f"""
            <div class="section">
                <div class="card-heading">Recommended Additional Services</div>
                <table>{_service_rows(recommendation.additional_services, request, "package")}</table>
            </div>
            """
    else:
        body = f"""
        <div class="section">
            <div class="card-heading">Recommended Services</div>
            <table>{_service_rows(recommendation.services, request, "services")}</table>
        </div>
        """

    strategy = "".join(
        f'<div class="strategy"><div class="strategy-heading">{escape(heading)}:</div>'
        f"<p>{escape(text)}</p></div>"
        for heading, text in strategy_notes(request)
    )

    prepared_for = escape(business_name) if business_name else "Your Business"

    return f"""<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<style>
    @page {{
        size: A4;
        margin: 30px;
    }}

    * {{
        margin: 0;
        padding: 0;
        box-sizing: border-box;
    }}

    body {{
        font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, 'Helvetica Neue', Arial, sans-serif;
        background: #f0f2f5;
        color: #1a1a2e;
    }}

    .container {{
        max-width: 780px;
        margin: 0 auto;
    }}

    .top-bar {{
        height: 5px;
        background: linear-gradient(90deg, #4ecdc4, #3dbdb5);
        border-radius: 3px 3px 0 0;
    }}

    .header {{
        padding: 40px 40px 0 40px;
    }}

    .prepared-for {{
        font-size: 12px;
        font-weight: 700;
        letter-spacing: 0.1em;
        text-transform: uppercase;
        margin-bottom: 4px;
    }}

    .business-name {{
        font-size: 32px;
        font-weight: 700;
        margin-bottom: 4px;
    }}

    .report-subtitle {{
        font-size: 15px;
        color: #9ca3af;
        margin-bottom: 32px;
    }}

    .intro-block {{
        border-left: 4px solid #4ecdc4;
        padding: 20px 24px;
        margin-bottom: 24px;
        background: white;
    }}

    .intro-block p {{
        font-size: 15px;
        line-height: 1.7;
        color: #374151;
        margin-bottom: 12px;
    }}

    .intro-block p:last-child {{
        margin-bottom: 0;
    }}

    .section {{
        padding: 0 40px;
        margin-bottom: 32px;
    }}

    .card-heading {{
        font-size: 22px;
        font-weight: 700;
        margin-bottom: 6px;
    }}

    .card-subtitle {{
        font-size: 14px;
        color: #6b7280;
        margin-bottom: 20px;
    }}

    table {{
        width: 100%;
        border-collapse: collapse;
    }}

    .service-row td, .totals td {{
        padding: 14px 12px;
        border-bottom: 1px solid #e8eaed;
        vertical-align: top;
    }}

    .svc-title {{
        font-size: 15px;
        font-weight: 600;
    }}

    .svc-desc {{
        font-size: 13px;
        color: #6b7280;
        margin-top: 2px;
    }}

    .svc-reason {{
        font-size: 13px;
        color: #374151;
        margin-top: 6px;
    }}

    .ad-note {{
        font-size: 12px;
        color: #b45309;
        margin-top: 6px;
    }}

    .svc-price, .amount {{
        text-align: right;
        white-space: nowrap;
    }}

    .pill {{
        display: inline-block;
        background: #1a3a4a;
        color: white;
        font-size: 13px;
        font-weight: 500;
        padding: 4px 14px;
        border-radius: 20px;
    }}

    ul.included {{
        list-style: none;
        margin-bottom: 20px;
    }}

    ul.included li {{
        padding: 10px 0;
        border-bottom: 1px solid #e8eaed;
    }}

    .total-row td {{
        font-weight: 700;
        border-top: 2px solid #d1d5db;
    }}

    .strategy {{
        margin-bottom: 14px;
    }}

    .strategy-heading {{
        font-weight: 600;
        margin-bottom: 4px;
    }}

    .strategy p {{
        font-size: 14px;
        color: #374151;
        line-height: 1.6;
    }}

    .footer {{
        text-align: center;
        margin: 24px 40px 0 40px;
        padding-top: 16px;
        border-top: 1px solid #e8eaed;
        font-size: 12px;
        color: #9ca3af;
    }}
</style>
</head>
<body>
<div class="container">
    <div class="top-bar"></div>

    <div class="header">
        <div class="prepared-for">Prepared For</div>
        <div class="business-name">{prepared_for}</div>
        <div class="report-subtitle">Your Personalized Marketing Recommendations</div>
    </div>

    <div class="section">
        <div class="intro-block"><p>{escape(summary(recommendation, request, catalog))}</p></div>
    </div>

    {body}

    {_breakdown(recommendation)}

    <div class="section">
        <div class="card-heading">Your Marketing Strategy</div>
        <div class="card-subtitle">Based on your responses, we recommend the following approach:</div>
        {strategy}
    </div>

    <div class="footer">
        This tool provides personalized recommendations based on your specific business needs.
        For a detailed consultation, please contact us directly.
    </div>
</div>
</body>
</html>"""


def generate_report_pdf(
    recommendation: Recommendation,
    request: ClientRequest,
    output_path: Path,
    business_name: str = "",
    catalog: Catalog = DEFAULT_CATALOG,
) -> Path:
    """
    Generate a recommendation PDF report.

    Args:
        recommendation: Result of the allocator
        request: The request it was built for (drives the explanations)
        output_path: Where to save the PDF
        business_name: Optional name for the report header
        catalog: Catalog used to price the request

    Returns:
        Path to the generated PDF
    """
    from weasyprint import HTML

    html_content = build_report_html(recommendation, request, business_name, catalog)

    output_path = Path(output_path)
    HTML(string=html_content).write_pdf(str(output_path))

    return output_path
