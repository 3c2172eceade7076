import pandas as pd
import pytest

from fatality_explorer.merge import merge_sources


@pytest.fixture
def merged(sources):
    return merge_sources(sources)


def test_full_outer_join_keeps_every_row(merged):
    # 2 rows for case 10001, case 10002 doubled by two weather rows,
    # and the impairment row with no person behind it
    assert len(merged) == 5


def test_pedestrian_keeps_null_vehicle_attributes(merged):
    pedestrian = merged[(merged["ST_CASE"] == 10001) & (merged["VEH_NO"] == 0)].iloc[0]

    assert pd.isna(pedestrian["DRIMPAIRNAME"])
    assert pd.isna(pedestrian["MAKENAME"])
    assert pedestrian["WEATHERNAME"] == "Clear"
    assert pedestrian["INJ_SEV"] == 4


def test_unmatched_right_rows_are_kept(merged):
    orphan = merged[merged["ST_CASE"] == 10003].iloc[0]

    assert orphan["DRIMPAIRNAME"] == "Ill, Blackout"
    assert pd.isna(orphan["INJ_SEV"])
    assert pd.isna(orphan["WEATHERNAME"])


def test_case_level_join_repeats_vehicle_rows(merged):
    case = merged[merged["ST_CASE"] == 10002]

    assert sorted(case["WEATHERNAME"]) == ["Other", "Rain"]
    assert set(case["MAKENAME"]) == {"Toyota"}


def test_drugs_join_uses_person_number(merged):
    driver = merged[(merged["ST_CASE"] == 10001) & (merged["VEH_NO"] == 1)].iloc[0]

    assert driver["DRUGRESNAME"] == "Test Not Given"
    assert merged["DRUGRESNAME"].notna().sum() == 1


def test_missing_source_raises(sources):
    del sources["distract"]

    with pytest.raises(KeyError):
        merge_sources(sources)
