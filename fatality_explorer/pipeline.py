from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

import pandas as pd

from . import config
from .loader import load_sources
from .merge import merge_sources
from .recode import recode

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def build_traffic(data_dir: Path = config.DATA_DIR, encoding: str = config.ENCODING) -> pd.DataFrame:
    """Load, merge and recode the sources once per process.

    The returned frame is shared by every callback and must not be mutated.
    """
    sources = load_sources(data_dir, encoding=encoding)

    merged = merge_sources(sources)
    logger.info("Merged table: %s rows, %s columns", f"{len(merged):,}", merged.shape[1])

    traffic = recode(merged)
    logger.info(
        "Recoded table: %s rows with severity, %s with a speed range",
        f"{int(traffic['FATAL'].notna().sum()):,}",
        f"{int(traffic['SPEED_RANGE'].notna().sum()):,}",
    )
    return traffic
