import pandas as pd

from data_prep.tagger import tag_table


def test_provenance_added_to_every_row():
    df = pd.DataFrame({"Institution Name": ["InstA", "InstB"], "UnitID": [1, 2]})
    out = tag_table(df, year=2023, datafile="2023eligibilitymatrix", sheet="HSI")
    assert list(out.columns) == ["Institution Name", "UnitID", "year", "datafile", "sheet"]
    assert out["year"].tolist() == [2023, 2023]
    assert set(out["datafile"]) == {"2023eligibilitymatrix"}
    assert set(out["sheet"]) == {"HSI"}
    # input untouched
    assert "year" not in df.columns


def test_tags_overwrite_existing_columns():
    df = pd.DataFrame({"Institution Name": ["InstA"], "year": [1999], "sheet": ["old"]})
    out = tag_table(df, year=2024, datafile="2024mseipeligibility", sheet="MSEIP")
    assert out["year"].tolist() == [2024]
    assert out["sheet"].tolist() == ["MSEIP"]
    assert list(out.columns).count("year") == 1


def test_empty_table_stays_empty():
    out = tag_table(pd.DataFrame(), year=2022, datafile="2022eligibilitymatrix", sheet="SIP")
    assert len(out) == 0
    assert {"year", "datafile", "sheet"} <= set(out.columns)
