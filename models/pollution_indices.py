"""
Pollution Indices — the four heavy metal indices for one water sample.

Every index is built on the contamination factor CF = Ci / Si
(measured concentration over its BIS standard):

    HPI = Σ(Wi × CFi) / ΣWi         Wi = 1 / Si
    HEI = Σ CFi
    PLI = (Π CFi) ^ (1/n)
    ERI = Σ(Ti × CFi)               Ti = toxic response factor

Values are returned unrounded; rounding is a display step done by the engine.
"""

import numpy as np

from config.constants import METALS, BIS_STANDARDS, WEIGHT_FACTORS, TOXIC_FACTORS


def contamination_factors(sample) -> dict:
    """Return {symbol: Ci / Si} in canonical metal order."""
    return {m: sample[m] / BIS_STANDARDS[m] for m in METALS}


def compute_hpi(sample) -> float:
    """Heavy Metal Pollution Index — weighted average of CFs, Wi = 1/Si."""
    qi = contamination_factors(sample)
    numerator = sum(WEIGHT_FACTORS[m] * qi[m] for m in METALS)
    denominator = sum(WEIGHT_FACTORS[m] for m in METALS)
    return numerator / denominator


def compute_hei(sample) -> float:
    """Heavy Metal Evaluation Index — unweighted sum of CFs."""
    cf = contamination_factors(sample)
    return sum(cf[m] for m in METALS)


def compute_pli(sample) -> float:
    """
    Pollution Load Index — geometric mean of CFs.

    A single zero concentration collapses the product, so PLI is 0.0
    whenever any metal reads 0.
    """
    cf = contamination_factors(sample)
    product = np.prod([cf[m] for m in METALS])
    return float(product ** (1.0 / len(METALS)))


def compute_eri(sample) -> float:
    """Ecological Risk Index — toxicity-weighted sum of CFs (Cd dominates)."""
    cf = contamination_factors(sample)
    return sum(TOXIC_FACTORS[m] * cf[m] for m in METALS)
