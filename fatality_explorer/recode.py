import numpy as np
import pandas as pd

from .config import FATAL_CODE, PEDESTRIAN

# ---------------- PEDESTRIAN FILL ----------------
# Person rows with no vehicle record have nulls in these columns after the
# outer joins. Only these five columns are filled.
PEDESTRIAN_FILL_COLUMNS = [
    "DRIMPAIRNAME",
    "DRDISTRACTNAME",
    "MAKENAME",
    "TRAV_SPNAME",
    "MONTHNAME",
]

# ---------------- CATEGORY MERGES ----------------
# column -> canonical label -> raw labels collapsed into it
CATEGORY_MERGES = {
    "WEATHERNAME": {
        "Unknown": ["Not Reported", "Other", "Reported as Unknown"],
    },
    "DRUGRESNAME": {
        "Negative / Not Tested": [
            "Test Not Given",
            "Tested, No Drugs Found/Negative",
            "Not Reported",
            "Reported as Unknown if Tested",
        ],
    },
    "DRIMPAIRNAME": {
        "Physical Impairment": [
            "Physical Impairment - No Details",
            "Other Physical Impairment",
        ],
        "Unknown": ["Not Reported", "Reported as Unknown if Impaired"],
    },
    "DRDISTRACTNAME": {
        "Distracted: Unknown": [
            "Distraction/Inattention",
            "Distraction/Careless",
            "Careless/Inattentive",
            "Inattention (Inattentive), Details Unknown",
        ],
        "Unknown": ["Not Reported", "Reported as Unknown if Distracted"],
    },
    "TRAV_SPNAME": {
        "Unknown": ["Not Reported", "Reported as Unknown"],
    },
}

# ---------------- SPEED ----------------
SPEED_UNDEFINED = {
    "not reported",
    "pedestrian",
    "unknown",
    "stopped motor vehicle in- transport",
    "stopped motor vehicle in-transport",
    "stopped vehicle in transport",
}
SPEED_BIN_WIDTH = 10
SPEED_MAX = 100


def merge_categories(values, merges):
    replacements = {raw: canonical for canonical, raws in merges.items() for raw in raws}
    return values.replace(replacements)


def parse_speed(labels):
    """Turn travel speed labels such as "35 MPH" into numbers.

    Non-numeric labels (not reported, unknown, pedestrian, stopped vehicle)
    and negative values become NaN.
    """
    text = labels.astype(str).str.replace(r"\s*mph\s*$", "", regex=True, case=False).str.strip()
    text = text.mask(text.str.lower().isin(SPEED_UNDEFINED) | labels.isna())
    speed = pd.to_numeric(text, errors="coerce")
    return speed.where(speed >= 0)


def bucket_speed(speed, width=SPEED_BIN_WIDTH, upper=SPEED_MAX):
    """Label speeds with "<low>-<high>" bins of ``width`` over [0, upper].

    The last bin is closed so ``upper`` itself lands in it.
    """
    low = np.minimum(np.floor(speed / width) * width, upper - width)
    labels = low.map(lambda v: f"{v:.0f}-{v + width:.0f}", na_action="ignore")
    return labels.where(speed.between(0, upper))


def fatal_flag(severity, fatal_code=FATAL_CODE):
    flag = (severity == fatal_code).astype("Int64")
    return flag.where(severity.notna())


def recode(traffic):
    df = traffic.copy()

    for col in PEDESTRIAN_FILL_COLUMNS:
        df[col] = df[col].fillna(PEDESTRIAN)

    for col, merges in CATEGORY_MERGES.items():
        df[col] = merge_categories(df[col], merges)

    df["SPEED"] = parse_speed(df["TRAV_SPNAME"])
    df["SPEED_RANGE"] = bucket_speed(df["SPEED"])

    df["FATAL"] = fatal_flag(df["INJ_SEV"])
    return df
