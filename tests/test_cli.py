import json

import pytest

from marketing_recommender import cli

ARGS = [
    "--budget", "700",
    "--business-type", "local",
    "--goal", "leads",
    "--online-presence", "basic",
    "--timeline", "immediate",
]


def test_json_output(capsys):
    cli.main(ARGS + ["--json"])
    out = capsys.readouterr().out
    assert '"type": "services"' in out
    assert '"ad_spend": 551' in out


def test_table_output(capsys):
    cli.main(["--budget", "1500", "--business-type", "local", "--goal", "retention",
              "--online-presence", "basic", "--timeline", "medium"])
    out = capsys.readouterr().out
    assert "Seed Plan" in out
    assert "Budget Breakdown" in out
    assert "For Customer Retention" in out


def test_invalid_budget_exits(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["--budget", "abc"] + ARGS[2:])
    assert exc.value.code == 1
    assert "Please enter a valid budget amount" in capsys.readouterr().out


def test_catalog_option(tmp_path, capsys):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({
        "services": [{"id": "listing", "name": "Listing", "price": 100}],
        "packages": [],
    }))
    cli.main(ARGS + ["--json", "--catalog", str(path)])
    out = capsys.readouterr().out
    assert '"id": "listing"' in out


def test_pdf_option(tmp_path, monkeypatch, capsys):
    written = []

    def fake_pdf(recommendation, request, output_path, business_name, catalog):
        written.append(output_path)
        return output_path

    monkeypatch.setattr(cli, "generate_report_pdf", fake_pdf)
    cli.main(ARGS + ["--json", "--pdf", str(tmp_path / "out.pdf")])
    assert written == [tmp_path / "out.pdf"]
    assert "Report saved" in capsys.readouterr().out
