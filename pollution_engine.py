"""
Pollution Index Engine — full assessment for one heavy metal water sample.

compute_indices() is the single entry point used by the dashboard layer:
    sample (mg/L per metal) → HPI, HEI, PLI, ERI, risk level, exceedances.

Classification always runs on the raw index values. Rounding to 2 decimals
happens afterwards and only affects what is returned for display.

A sample with a missing, non-numeric, non-finite or negative concentration
breaks the engine's input contract. Upstream data entry is expected to reject
such samples (see data_fetch.sample_loader); the engine fails fast with
InvalidSampleError instead of producing a partial result.
"""

import logging
import math

import numpy as np
import pandas as pd

from config.constants import METALS, RISK_ORDER, BIS_STANDARDS, metal_label
from models.pollution_indices import compute_hpi, compute_hei, compute_pli, compute_eri
from models.risk_classifier import classify_risk
from analysis.exceedance import check_exceeds_standards

logger = logging.getLogger(__name__)

INDEX_KEYS = ("hpi", "hei", "pli", "eri")


class InvalidSampleError(ValueError):
    """Sample violates the engine's input contract."""

    def __init__(self, message: str, problems: dict | None = None):
        super().__init__(message)
        self.problems = problems or {}


def _check_value(value) -> str | None:
    if value is None:
        return "missing"
    if isinstance(value, (bool, str, bytes)):
        return "not a number"
    try:
        v = float(value)
    except (TypeError, ValueError):
        return "not a number"
    if not math.isfinite(v):
        return "missing" if math.isnan(v) else "not finite"
    if v < 0:
        return "negative"
    return None


def validate_sample(sample) -> dict:
    """
    Return the five concentrations as floats, keyed in canonical order.

    Raises InvalidSampleError listing every offending metal. Keys other
    than the five metal symbols are ignored.
    """
    problems = {}
    for m in METALS:
        problem = _check_value(sample.get(m))
        if problem:
            problems[m] = problem

    if problems:
        detail = ", ".join(f"{m}: {p}" for m, p in problems.items())
        logger.warning("Rejected sample (%s)", detail)
        raise InvalidSampleError(f"Invalid sample — {detail}", problems)

    return {m: float(sample[m]) for m in METALS}


def compute_indices(sample) -> dict:
    """
    Args:
        sample: mapping of metal symbol → concentration (mg/L).

    Returns:
        dict with hpi, hei, pli, eri (2 decimals), risk_level, exceeds_standards.
    """
    clean = validate_sample(sample)

    hpi = compute_hpi(clean)
    hei = compute_hei(clean)
    pli = compute_pli(clean)
    eri = compute_eri(clean)

    # Raw values only: a rounded 100.004 must still read as critical.
    risk_level = classify_risk(hpi, hei, pli, eri)
    exceeds = check_exceeds_standards(clean)

    logger.debug(
        "Indices hpi=%.4f hei=%.4f pli=%.4f eri=%.4f → %s",
        hpi, hei, pli, eri, risk_level,
    )

    return {
        "hpi": round(hpi, 2),
        "hei": round(hei, 2),
        "pli": round(pli, 2),
        "eri": round(eri, 2),
        "risk_level": risk_level,
        "exceeds_standards": exceeds,
    }


def compute_indices_frame(df: pd.DataFrame) -> pd.DataFrame:
    """
    Batch assessment: one row per sample, one column per metal symbol.

    Returns a copy of df with hpi, hei, pli, eri, risk_level and
    exceeds_standards columns added.
    """
    missing = [m for m in METALS if m not in df.columns]
    if missing:
        raise InvalidSampleError(
            f"Missing metal columns: {', '.join(missing)}",
            {m: "missing" for m in missing},
        )

    df = df.copy()
    results = []
    for idx, row in df.iterrows():
        try:
            results.append(compute_indices(row[list(METALS)].to_dict()))
        except InvalidSampleError as e:
            raise InvalidSampleError(f"Row {idx}: {e}", e.problems) from e

    for key in INDEX_KEYS:
        df[key] = [r[key] for r in results]
    df["risk_level"] = [r["risk_level"] for r in results]
    df["exceeds_standards"] = [r["exceeds_standards"] for r in results]

    logger.debug("Assessed %d samples", len(df))
    return df


def summarize_frame(df: pd.DataFrame) -> dict:
    """
    Counts per risk level (all levels present) and per-metal exceedance
    counts for a batch of samples.
    """
    if "risk_level" not in df.columns:
        df = compute_indices_frame(df)

    counts = df["risk_level"].value_counts()
    risk_counts = {level: int(counts.get(level, 0)) for level in RISK_ORDER}

    exceedance_counts = {
        metal_label(m): int(np.sum(df[m].astype(float).to_numpy() > BIS_STANDARDS[m]))
        for m in METALS
    }

    return {
        "n_samples": int(len(df)),
        "risk_counts": risk_counts,
        "exceedance_counts": exceedance_counts,
    }
