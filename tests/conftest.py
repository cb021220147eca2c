import os
import sys
import tempfile

import pytest


def _ensure_repo_on_path() -> None:
    root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
    if root not in sys.path:
        sys.path.append(root)


_ensure_repo_on_path()
os.environ.setdefault("REPORTS_DIR", tempfile.mkdtemp(prefix="reports_"))
os.environ.pop("RECOMMENDER_CATALOG", None)

from marketing_recommender.models import ClientRequest


@pytest.fixture
def make_request():
    def _make(**overrides):
        fields = {
            "business_type": "local",
            "goals": ("leads",),
            "budget": 700,
            "locations": 1,
            "online_presence": "basic",
            "timeline": "immediate",
        }
        fields.update(overrides)
        fields["goals"] = tuple(fields["goals"])
        return ClientRequest(**fields)

    return _make
