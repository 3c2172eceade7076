"""
Read the six FARS extracts into DataFrames.

Each source declares the columns it contributes to the merged table and
which of them must be integer-typed. Anything else in the file is ignored.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List

import pandas as pd

from . import config

logger = logging.getLogger(__name__)


class LoadError(Exception):
    """A source file could not be read."""


class ParseError(LoadError):
    """A source file is missing, malformed or does not match its declared columns."""


SOURCES: Dict[str, Dict[str, List[str]]] = {
    "person": {
        "integer": ["STATE", "ST_CASE", "VEH_NO", "PER_NO", "AGE", "INJ_SEV"],
        "text": ["STATENAME", "HOURNAME", "HARM_EVNAME", "MAN_COLLNAME", "INJ_SEVNAME"],
    },
    "drimpair": {
        "integer": ["ST_CASE", "VEH_NO"],
        "text": ["DRIMPAIRNAME"],
    },
    "distract": {
        "integer": ["ST_CASE", "VEH_NO"],
        "text": ["DRDISTRACTNAME"],
    },
    "vehicle": {
        "integer": ["ST_CASE", "VEH_NO"],
        "text": ["MONTHNAME", "MAKENAME", "TRAV_SPNAME"],
    },
    "drugs": {
        "integer": ["ST_CASE", "VEH_NO", "PER_NO"],
        "text": ["DRUGRESNAME"],
    },
    "weather": {
        "integer": ["ST_CASE"],
        "text": ["WEATHERNAME"],
    },
}


def source_columns(name: str) -> List[str]:
    schema = SOURCES[name]
    return schema["integer"] + schema["text"]


def read_source(name: str, path: Path, encoding: str = config.ENCODING) -> pd.DataFrame:
    """Parse one source file, keeping only its declared columns."""
    columns = source_columns(name)
    path = Path(path)
    if not path.is_file():
        raise ParseError(f"{name}: file not found: {path}")

    logger.info("Loading %s from %s", name, path)
    try:
        df = pd.read_csv(
            path,
            usecols=lambda c: c in columns,
            encoding=encoding,
            low_memory=False,
        )
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as exc:
        raise ParseError(f"{name}: cannot parse {path}: {exc}") from exc
    except OSError as exc:
        raise LoadError(f"{name}: cannot read {path}: {exc}") from exc

    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise ParseError(f"{name}: missing expected columns {missing} in {path}")

    bad_types = [
        c for c in SOURCES[name]["integer"]
        if not pd.api.types.is_integer_dtype(df[c])
    ]
    if bad_types:
        raise ParseError(f"{name}: expected integer columns {bad_types} in {path}")

    logger.info("Loaded %s: %s rows", name, f"{len(df):,}")
    return df[columns]


def load_sources(data_dir: Path = config.DATA_DIR, encoding: str = config.ENCODING) -> Dict[str, pd.DataFrame]:
    data_dir = Path(data_dir)
    return {
        name: read_source(name, data_dir / file_name, encoding=encoding)
        for name, file_name in config.FILE_NAMES.items()
    }
