import csv

import batch_generate

HEADER = ["Client Name", "Business Type", "Industry", "Budget", "Goals",
          "Locations", "Online Presence", "Timeline"]


def test_batch_appends_recommendations(tmp_path, capsys):
    path = tmp_path / "clients.csv"
    with open(path, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(HEADER)
        writer.writerow(["Acme", "local", "homeServices", "700", "leads", "1", "basic", "immediate"])
        writer.writerow(["Bloom", "local", "retail", "1500", "retention", "1", "basic", "medium"])
        writer.writerow(["Broken", "local", "retail", "zero", "leads", "1", "basic", "medium"])

    success, failed = batch_generate.main(str(path))
    assert (success, failed) == (2, 1)

    with open(path, newline="") as f:
        rows = list(csv.DictReader(f))

    assert rows[0]["Recommendation"] == "Google Local Service Ads"
    assert rows[0]["Ad Spend"] == "551"
    assert rows[1]["Recommendation"].startswith("Seed Plan + Email & SMS Campaigns")
    assert rows[2]["Recommendation"] == ""
    assert "Success: 2, Failed: 1" in capsys.readouterr().out
