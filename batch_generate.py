"""Batch generate recommendations for a CSV of client intake answers."""

import csv
import sys

from dotenv import load_dotenv

from marketing_recommender.catalog import catalog_from_env
from marketing_recommender.intake import parse_request
from marketing_recommender.main import Recommender
from marketing_recommender.models import PackageRecommendation

CSV_PATH = "Client_Intake.csv"

RESULT_COLUMNS = ["Recommendation", "Ad Spend", "Total Cost"]


def describe(recommendation):
    """Short label for the CSV: package name or the selected service names."""
    if isinstance(recommendation, PackageRecommendation):
        extras = [s.name for s in recommendation.additional_services]
        if extras:
            return "{0} + {1}".format(recommendation.package.name, "; ".join(extras))
        return recommendation.package.name
    return "; ".join(s.name for s in recommendation.services)


def request_from_row(row):
    return parse_request(
        business_type=row["Business Type"],
        budget=row["Budget"],
        goals=row["Goals"].replace(";", ","),
        online_presence=row["Online Presence"],
        timeline=row["Timeline"],
        locations=row.get("Locations") or "1",
        industry=row.get("Industry", ""),
    )


def main(csv_path=CSV_PATH, output_path=None):
    load_dotenv()
    output_path = output_path or csv_path
    recommender = Recommender(catalog_from_env())

    # Read CSV
    with open(csv_path, newline="") as f:
        reader = csv.DictReader(f)
        rows = list(reader)
        fieldnames = list(reader.fieldnames)

    for column in RESULT_COLUMNS:
        if column not in fieldnames:
            fieldnames.append(column)

    total = len(rows)
    success = 0
    failed = 0

    for i, row in enumerate(rows):
        client = row.get("Client Name", "").strip() or "row {0}".format(i + 1)
        print("\n[{0}/{1}] {2}".format(i + 1, total, client), flush=True)

        try:
            request = request_from_row(row)
        except (KeyError, ValueError) as e:
            for column in RESULT_COLUMNS:
                row[column] = ""
            failed += 1
            print("    FAILED: " + str(e), flush=True)
        else:
            recommendation = recommender.recommend(request)
            row["Recommendation"] = describe(recommendation)
            row["Ad Spend"] = recommendation.ad_spend
            row["Total Cost"] = recommendation.total_cost
            success += 1
            print("    DONE -> " + row["Recommendation"], flush=True)

        # Write CSV after each row (in case of crash)
        with open(output_path, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            writer.writerows(rows)

    print("\n" + "=" * 60, flush=True)
    print("Done! Success: {0}, Failed: {1}".format(success, failed), flush=True)
    print("Updated CSV: " + output_path, flush=True)
    return success, failed


if __name__ == "__main__":
    main(*sys.argv[1:3])
