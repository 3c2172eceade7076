import pandas as pd
import pytest

from fatality_explorer import config
from fatality_explorer.pipeline import build_traffic


def make_sources():
    person = pd.DataFrame(
        {
            "STATE": [1, 1, 1],
            "STATENAME": ["Alabama", "Alabama", "Alabama"],
            "ST_CASE": [10001, 10001, 10002],
            "VEH_NO": [1, 0, 1],
            "PER_NO": [1, 2, 1],
            "HOURNAME": ["8:00pm-8:59pm", "8:00pm-8:59pm", "7:00am-7:59am"],
            "HARM_EVNAME": ["Pedestrian", "Pedestrian", "Rollover/Overturn"],
            "MAN_COLLNAME": ["Not a Collision with Motor Vehicle In-Transport"] * 3,
            "AGE": [34, 61, 19],
            "INJ_SEV": [0, 4, 4],
            "INJ_SEVNAME": ["No Apparent Injury (O)", "Fatal Injury (K)", "Fatal Injury (K)"],
        }
    )
    drimpair = pd.DataFrame(
        {
            "ST_CASE": [10001, 10002, 10003],
            "VEH_NO": [1, 1, 1],
            "DRIMPAIRNAME": ["None/Apparently Normal", "Not Reported", "Ill, Blackout"],
        }
    )
    distract = pd.DataFrame(
        {
            "ST_CASE": [10001, 10002],
            "VEH_NO": [1, 1],
            "DRDISTRACTNAME": ["Not Distracted", "Careless/Inattentive"],
        }
    )
    vehicle = pd.DataFrame(
        {
            "ST_CASE": [10001, 10002],
            "VEH_NO": [1, 1],
            "MONTHNAME": ["January", "March"],
            "MAKENAME": ["Ford", "Toyota"],
            "TRAV_SPNAME": ["35 MPH", "Not Reported"],
        }
    )
    drugs = pd.DataFrame(
        {
            "ST_CASE": [10001],
            "VEH_NO": [1],
            "PER_NO": [1],
            "DRUGRESNAME": ["Test Not Given"],
        }
    )
    weather = pd.DataFrame(
        {
            "ST_CASE": [10001, 10002, 10002],
            "WEATHERNAME": ["Clear", "Other", "Rain"],
        }
    )
    return {
        "person": person,
        "drimpair": drimpair,
        "distract": distract,
        "vehicle": vehicle,
        "drugs": drugs,
        "weather": weather,
    }


def write_sources(directory, sources):
    for name, frame in sources.items():
        frame.to_csv(directory / config.FILE_NAMES[name], index=False)


def weather_traffic(groups):
    """Traffic frame with only WEATHERNAME and FATAL.

    ``groups`` is a list of (weather, cases, fatal cases).
    """
    weather, fatal = [], []
    for value, cases, fatal_cases in groups:
        weather += [value] * cases
        fatal += [1] * fatal_cases + [0] * (cases - fatal_cases)
    return pd.DataFrame({"WEATHERNAME": weather, "FATAL": pd.array(fatal, dtype="Int64")})


@pytest.fixture
def sources():
    return make_sources()


@pytest.fixture
def data_dir(tmp_path, sources):
    write_sources(tmp_path, sources)
    return tmp_path


@pytest.fixture
def traffic(data_dir):
    build_traffic.cache_clear()
    yield build_traffic(data_dir)
    build_traffic.cache_clear()


@pytest.fixture
def scenario_traffic():
    return weather_traffic(
        [
            ("Clear", 150, 30),
            ("Rain", 120, 60),
            ("Snow", 99, 40),
            ("Fog", 20, 2),
        ]
    )
