from __future__ import annotations

import logging
from typing import Dict, List, Tuple

import pandas as pd

from .config import CASE_KEY, PERSON_KEY, VEHICLE_KEY

logger = logging.getLogger(__name__)

# Join order only affects column layout; every step is a full outer join so
# pedestrians (no vehicle record) and vehicle rows without a person survive.
JOIN_STEPS: List[Tuple[str, List[str]]] = [
    ("drimpair", VEHICLE_KEY),
    ("distract", VEHICLE_KEY),
    ("vehicle", VEHICLE_KEY),
    ("drugs", PERSON_KEY),
    ("weather", CASE_KEY),
]


def merge_sources(sources: Dict[str, pd.DataFrame]) -> pd.DataFrame:
    """Join the six sources into one wide table starting from ``person``."""
    traffic = sources["person"]
    for name, keys in JOIN_STEPS:
        traffic = traffic.merge(sources[name], how="outer", on=keys)
        logger.debug("After joining %s on %s: %s rows", name, keys, len(traffic))
    return traffic.reset_index(drop=True)
