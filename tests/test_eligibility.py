import pandas as pd
import pytest

from reconcile.eligibility import eligible_mask, filter_eligible, is_eligible


@pytest.mark.parametrize(
    "value, expected",
    [
        ("Yes", True),
        ("Eligible, Exemption Request Approved", True),
        ("Eligible, Application Approved", True),
        ("Eligible, via IPEDS data", True),
        ("No", False),
        ("Not Eligible", False),
        ("Ineligible, but Receives FCS Waiver", False),
        ("Ineligible, Exemption Request Denied", False),
        ("yes", False),
        ("eligible", False),
        (" Yes", False),
        (None, False),
        (float("nan"), False),
        (1, False),
    ],
)
def test_is_eligible(value, expected):
    assert is_eligible(value) is expected


def test_filter_keeps_order_and_resets_index():
    df = pd.DataFrame({
        "Institution Name": ["A", "B", "C", "D"],
        "GENERAL ELIGIBILITY": ["Eligible, via IPEDS data", "No", "Yes", "Ineligible, but Receives FCS Waiver"],
    })
    assert eligible_mask(df).tolist() == [True, False, True, False]
    out = filter_eligible(df)
    assert out["Institution Name"].tolist() == ["A", "C"]
    assert out.index.tolist() == [0, 1]


def test_filter_empty_frame():
    df = pd.DataFrame(columns=["Institution Name", "GENERAL ELIGIBILITY"])
    assert len(filter_eligible(df)) == 0
