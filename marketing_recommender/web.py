"""FastAPI web app for marketing budget recommendations."""

import asyncio
import os
import re
import uuid
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, Query
from fastapi.responses import FileResponse, HTMLResponse, JSONResponse

from .catalog import catalog_from_env
from .explain import (
    included_service_note,
    package_reasons,
    service_reason,
    strategy_notes,
    summary,
)
from .intake import LOCATION_CHOICES, parse_request
from .main import Recommender
from .models import ClientRequest, PackageRecommendation, Recommendation
from .report import generate_report_pdf

load_dotenv()

app = FastAPI(title="Marketing Recommendation Engine")

REPORTS_DIR = Path(os.getenv("REPORTS_DIR", "reports"))
REPORTS_DIR.mkdir(exist_ok=True)

CATALOG = catalog_from_env()
recommender = Recommender(CATALOG)


def _parse(
    business_type: str,
    budget: str,
    goals: list[str],
    online_presence: str,
    timeline: str,
    locations: str,
    industry: str,
) -> ClientRequest:
    return parse_request(
        business_type=business_type,
        budget=budget,
        goals=goals,
        online_presence=online_presence,
        timeline=timeline,
        locations=locations,
        industry=industry,
    )


def _explained(recommendation: Recommendation, request: ClientRequest) -> dict:
    """Recommendation dict with the client-facing copy attached."""
    data = recommendation.to_dict()
    data["summary"] = summary(recommendation, request, CATALOG)
    data["strategy"] = [
        {"heading": heading, "text": text} for heading, text in strategy_notes(request)
    ]

    if isinstance(recommendation, PackageRecommendation):
        data["package"]["reasons"] = package_reasons(recommendation, request)
        for service in data["package"]["services"]:
            service["note"] = included_service_note(service["id"], request)
        for service in data["additional_services"]:
            service["reason"] = service_reason(service["id"], request, "package")
    else:
        for service in data["services"]:
            service["reason"] = service_reason(service["id"], request, "services")

    return data


@app.get("/", response_class=HTMLResponse)
async def index():
    return INDEX_HTML


@app.get("/api/catalog")
async def catalog():
    return {
        "services": [
            {
                "id": s.id,
                "name": s.name,
                "description": s.description,
                "price": s.price,
                "min_ad_spend": s.min_ad_spend,
                "requires": list(s.requires),
            }
            for s in CATALOG.services.values()
        ],
        "packages": [
            {
                "id": p.id,
                "name": p.name,
                "description": p.description,
                "price": p.price,
                "min_ad_spend": p.min_ad_spend,
                "services": list(p.service_ids),
            }
            for p in CATALOG.packages
        ],
    }


@app.get("/api/recommend")
async def recommend(
    business_type: str = "",
    budget: str = "",
    goals: list[str] = Query(default=[]),
    online_presence: str = "",
    timeline: str = "",
    locations: str = "1",
    industry: str = "",
):
    """Validate the form answers and return a priced recommendation."""
    try:
        request = _parse(
            business_type, budget, goals, online_presence, timeline, locations, industry
        )
    except ValueError as e:
        return JSONResponse({"error": str(e)}, status_code=400)

    return _explained(recommender.recommend(request), request)


@app.get("/api/report")
async def report(
    business_type: str = "",
    budget: str = "",
    goals: list[str] = Query(default=[]),
    online_presence: str = "",
    timeline: str = "",
    locations: str = "1",
    industry: str = "",
    business_name: str = "",
):
    """Generate a PDF for the recommendation and return its download name."""
    try:
        request = _parse(
            business_type, budget, goals, online_presence, timeline, locations, industry
        )
    except ValueError as e:
        return JSONResponse({"error": str(e)}, status_code=400)

    recommendation = recommender.recommend(request)

    slug = re.sub(r"[^a-z0-9]+", "", business_name.lower()) or uuid.uuid4().hex[:8]
    filename = f"{slug}_recommendation.pdf"
    output_path = REPORTS_DIR / filename

    await asyncio.to_thread(
        generate_report_pdf,
        recommendation,
        request,
        output_path,
        business_name,
        CATALOG,
    )

    return {"filename": filename, "total_cost": recommendation.total_cost}


@app.get("/reports/{filename}")
async def download_report(filename: str):
    path = REPORTS_DIR / filename
    if Path(filename).name != filename or not path.exists():
        return HTMLResponse("Report not found.", status_code=404)
    return FileResponse(path, filename=filename, media_type="application/pdf")


# ---------------------------------------------------------------------------
# Inline HTML — single page app
# ---------------------------------------------------------------------------

_LOCATION_OPTIONS = "".join(
    f'<option value="{n}">{n}{"+" if n == LOCATION_CHOICES[-1] else ""} '
    f'location{"s" if n > 1 else ""}</option>'
    for n in LOCATION_CHOICES
)

INDEX_HTML = """\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>Digital Marketing Services Recommendation Tool</title>
<style>
  *, *::before, *::after { margin: 0; padding: 0; box-sizing: border-box; }

  body {
    font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, 'Helvetica Neue', Arial, sans-serif;
    background: #f0f2f5;
    color: #1a1a2e;
    min-height: 100vh;
    display: flex;
    flex-direction: column;
    align-items: center;
    padding: 20px;
  }

  .card {
    background: white;
    border-radius: 16px;
    box-shadow: 0 1px 3px rgba(0,0,0,0.08), 0 8px 24px rgba(0,0,0,0.06);
    padding: 48px;
    width: 100%;
    max-width: 720px;
  }

  h1 { font-size: 24px; font-weight: 700; margin-bottom: 6px; }
  h2 { font-size: 18px; margin: 24px 0 10px; }

  .subtitle { font-size: 14px; color: #6b7280; margin-bottom: 32px; }

  label {
    display: block;
    font-size: 13px;
    font-weight: 600;
    color: #4a5568;
    margin: 16px 0 6px;
  }

  .goal label { display: inline; font-weight: 400; margin-left: 6px; }

  input[type="number"], input[type="text"], select {
    width: 100%;
    padding: 12px 16px;
    border: 1px solid #d1d5db;
    border-radius: 10px;
    font-size: 15px;
  }

  button {
    margin-top: 24px;
    width: 100%;
    padding: 12px 24px;
    background: #1a1a2e;
    color: white;
    border: none;
    border-radius: 10px;
    font-size: 15px;
    font-weight: 600;
    cursor: pointer;
  }

  button:hover { background: #2a2a4e; }

  .item { border: 1px solid #e8eaed; border-radius: 10px; padding: 14px; margin-bottom: 10px; }
  .item .row { display: flex; justify-content: space-between; font-weight: 600; }
  .item p { font-size: 13px; color: #4a5568; margin-top: 6px; }

  .error-msg {
    margin-top: 16px;
    padding: 12px 16px;
    background: #fef2f2;
    border: 1px solid #fecaca;
    border-radius: 10px;
    color: #991b1b;
    font-size: 14px;
    display: none;
  }

  #result { display: none; margin-top: 24px; }
</style>
</head>
<body>
<div class="card">
  <h1>Digital Marketing Services Recommendation Tool</h1>
  <p class="subtitle">Tell us about your business to get a personalized plan.</p>

  <form id="form">
    <label for="business_type">What type of business do you have?</label>
    <select id="business_type" name="business_type" required>
      <option value="">Select business type</option>
      <option value="local">Local Business</option>
      <option value="online">Online Business</option>
      <option value="both">Both Local and Online</option>
    </select>

    <label for="industry">What industry are you in?</label>
    <select id="industry" name="industry" required>
      <option value="">Select industry</option>
      <option value="retail">Retail &amp; E-commerce</option>
      <option value="homeServices">Home Services</option>
      <option value="professional">Professional Services</option>
      <option value="food">Food &amp; Hospitality</option>
      <option value="health">Health &amp; Wellness</option>
      <option value="auto">Auto Services</option>
      <option value="pet">Pet Services</option>
      <option value="other">Other</option>
    </select>

    <label for="budget">What is your monthly marketing budget? ($)</label>
    <input type="number" id="budget" name="budget" min="0" step="1" required>

    <label for="locations">How many business locations do you have?</label>
    <select id="locations" name="locations">__LOCATION_OPTIONS__</select>

    <label>What are your primary marketing goals? (Select all that apply)</label>
    <div class="goal"><input type="checkbox" id="awareness" name="goals" value="awareness"><label for="awareness">Brand Awareness &amp; Visibility</label></div>
    <div class="goal"><input type="checkbox" id="leads" name="goals" value="leads"><label for="leads">Lead Generation</label></div>
    <div class="goal"><input type="checkbox" id="sales" name="goals" value="sales"><label for="sales">Direct Sales &amp; Revenue</label></div>
    <div class="goal"><input type="checkbox" id="retention" name="goals" value="retention"><label for="retention">Customer Retention &amp; Loyalty</label></div>

    <label for="online_presence">How would you describe your current online presence?</label>
    <select id="online_presence" name="online_presence" required>
      <option value="">Select option</option>
      <option value="none">No website or social media</option>
      <option value="basic">Basic website and/or social profiles</option>
      <option value="established">Established website and active on social media</option>
    </select>

    <label for="timeline">How quickly do you need to see results?</label>
    <select id="timeline" name="timeline" required>
      <option value="">Select option</option>
      <option value="immediate">Immediate (within 1 month)</option>
      <option value="medium">Medium-term (3-6 months)</option>
      <option value="long">Long-term (6+ months)</option>
    </select>

    <button type="submit" id="btn">Get Recommendations</button>
  </form>

  <div class="error-msg" id="error"></div>
  <div id="result"></div>
</div>

<script>
const form = document.getElementById('form');
const resultEl = document.getElementById('result');
const errorEl = document.getElementById('error');

function item(name, price, text) {
  return '<div class="item"><div class="row"><span>' + name + '</span><span>$' + price +
    '/month</span></div>' + (text ? '<p>' + text + '</p>' : '') + '</div>';
}

form.addEventListener('submit', async (e) => {
  e.preventDefault();
  errorEl.style.display = 'none';
  resultEl.style.display = 'none';

  const params = new URLSearchParams(new FormData(form));
  const resp = await fetch('/api/recommend?' + params.toString());
  const data = await resp.json();

  if (!resp.ok) {
    errorEl.textContent = data.error;
    errorEl.style.display = 'block';
    return;
  }

  let html = '<h2>Your Personalized Marketing Recommendations</h2><p>' + data.summary + '</p>';
  if (data.type === 'package') {
    html += '<h2>' + data.package.name + '</h2>';
    html += data.package.reasons.map(r => '<p>' + r + '</p>').join('');
    html += data.package.services.map(s => item(s.name, '-', s.note)).join('');
    if (data.additional_services.length) {
      html += '<h2>Recommended Additional Services</h2>';
      html += data.additional_services.map(s => item(s.name, s.price, s.reason)).join('');
    }
  } else {
    html += '<h2>Recommended Services</h2>';
    html += data.services.map(s => item(s.name, s.price, s.reason)).join('');
  }
  html += '<h2>Budget Breakdown</h2>';
  html += item('Ad Spend', data.ad_spend, '');
  html += item('Total Monthly Investment', data.total_cost, '');
  html += '<h2>Your Marketing Strategy</h2>';
  html += data.strategy.map(s => '<p><strong>' + s.heading + ':</strong> ' + s.text + '</p>').join('');
  html += '<p><a href="/api/report?' + params.toString() + '" id="pdf">Prepare PDF</a></p>';

  resultEl.innerHTML = html;
  resultEl.style.display = 'block';

  document.getElementById('pdf').addEventListener('click', async (ev) => {
    ev.preventDefault();
    const r = await fetch(ev.target.href);
    const d = await r.json();
    if (r.ok) window.location = '/reports/' + d.filename;
  });
});
</script>
</body>
</html>
""".replace("__LOCATION_OPTIONS__", _LOCATION_OPTIONS)
