import pandas as pd

from data_prep.normalizer import fix_header_spelling, normalize_raw_sheet
from tests.conftest import make_grid


def test_banner_rows_dropped_and_header_promoted():
    grid = make_grid([
        [None, "Hispanic-Serving Institutions", None],
        [None, None, None],
        ["Institution Name", "UnitID", "GENERAL ELIGIBILITY"],
        ["InstA", 1, "Yes"],
        ["   ", None, None],
        ["InstB", 2, "No"],
    ])
    out = normalize_raw_sheet(grid)
    assert list(out.columns) == ["Institution Name", "UnitID", "GENERAL ELIGIBILITY"]
    assert out["Institution Name"].tolist() == ["InstA", "InstB"]
    assert out["UnitID"].tolist() == [1, 2]


def test_misspelled_header_renamed():
    grid = make_grid([
        ["Institution Name", "UnitID", "GENERAL ELIGIBLITY"],
        ["InstA", 1, "Yes"],
    ])
    out = normalize_raw_sheet(grid)
    assert "GENERAL ELIGIBLITY" not in out.columns
    assert out["GENERAL ELIGIBILITY"].tolist() == ["Yes"]
    assert list(out.columns) == ["Institution Name", "UnitID", "GENERAL ELIGIBILITY"]


def test_header_fix_is_idempotent():
    grid = make_grid([
        ["Institution Name", "UnitID", "GENERAL ELIGIBLITY"],
        ["InstA", 1, "Yes"],
        ["InstB", 2, "Not Eligible"],
    ])
    once = normalize_raw_sheet(grid)
    twice = fix_header_spelling(once)
    pd.testing.assert_frame_equal(once, twice)
    assert list(twice.columns).count("GENERAL ELIGIBILITY") == 1


def test_both_spellings_misspelled_values_win_and_fill_gaps():
    df = pd.DataFrame({
        "Institution Name": ["InstA", "InstB"],
        "GENERAL ELIGIBILITY": ["No", "Yes"],
        "GENERAL ELIGIBLITY": ["Eligible, via IPEDS data", None],
    })
    out = fix_header_spelling(df)
    assert list(out.columns) == ["Institution Name", "GENERAL ELIGIBILITY"]
    assert out["GENERAL ELIGIBILITY"].tolist() == ["Eligible, via IPEDS data", "Yes"]


def test_header_only_sheet_is_empty_not_error():
    grid = make_grid([
        [None, "Banner", None],
        ["Institution Name", "UnitID", "GENERAL ELIGIBILITY"],
    ])
    out = normalize_raw_sheet(grid)
    assert len(out) == 0
    assert list(out.columns) == ["Institution Name", "UnitID", "GENERAL ELIGIBILITY"]


def test_all_blank_sheet_yields_empty_table():
    out = normalize_raw_sheet(make_grid([[None, "Banner"], [None, None]]))
    assert out.empty
    assert normalize_raw_sheet(pd.DataFrame()).empty


def test_missing_header_cells_become_empty_labels():
    grid = make_grid([
        ["Institution Name", None, "UnitID"],
        ["InstA", "x", 1],
    ])
    out = normalize_raw_sheet(grid)
    assert list(out.columns) == ["Institution Name", "", "UnitID"]
