"""
Sample Loader — turns data-entry input into engine-ready samples.

Form fields and CSV cells arrive as text. Everything here enforces the
engine's input contract before a sample reaches compute_indices():
all five metals present, numeric, finite and non-negative (mg/L).
"""

import logging

import pandas as pd

from config.constants import METALS
from pollution_engine import InvalidSampleError, validate_sample

logger = logging.getLogger(__name__)


def _parse_value(value):
    if value is None:
        return None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return float(text)
        except ValueError:
            return value  # left as text so validation reports it
    return value


def parse_sample(raw: dict) -> dict:
    """
    Parse one submitted sample (strings or numbers) into floats.

    Raises InvalidSampleError listing every missing, non-numeric or
    negative metal.
    """
    parsed = {m: _parse_value(raw.get(m)) for m in METALS}
    return validate_sample(parsed)


def load_samples_csv(path_or_buffer) -> pd.DataFrame:
    """
    Read a CSV of samples, one column per metal symbol (extra columns such
    as station or date are kept as-is).

    Returns a DataFrame with the metal columns as floats.
    """
    df = pd.read_csv(path_or_buffer)
    df.columns = [str(c).strip() for c in df.columns]

    missing = [m for m in METALS if m not in df.columns]
    if missing:
        logger.warning("CSV missing metal columns: %s", missing)
        raise InvalidSampleError(
            f"Missing metal columns: {', '.join(missing)}",
            {m: "missing" for m in missing},
        )

    parsed = []
    for idx, row in df.iterrows():
        try:
            parsed.append(parse_sample(row[list(METALS)].to_dict()))
        except InvalidSampleError as e:
            raise InvalidSampleError(f"Row {idx}: {e}", e.problems) from e

    for m in METALS:
        df[m] = [p[m] for p in parsed]

    logger.debug("Loaded %d samples", len(df))
    return df
