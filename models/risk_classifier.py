"""
Risk Classifier — maps raw index values onto the four risk levels.

The composite cascade is evaluated most severe first; any one index crossing
its cut-off is enough to escalate the whole sample.
"""

from config.constants import INDEX_THRESHOLDS, RISK_ORDER

_HPI = INDEX_THRESHOLDS["hpi"]
_HEI = INDEX_THRESHOLDS["hei"]
_PLI = INDEX_THRESHOLDS["pli"]
_ERI = INDEX_THRESHOLDS["eri"]


def classify_risk(hpi: float, hei: float, pli: float, eri: float) -> str:
    """
    Composite risk level from the four unrounded indices.

    Returns one of 'safe', 'moderate', 'high', 'critical'.
    """
    if (hpi > _HPI["critical"] or hei > _HEI["critical"]
            or pli > _PLI["critical"] or eri > _ERI["critical"]):
        return "critical"
    if (hpi > _HPI["high"] or hei > _HEI["high"]
            or pli > _PLI["high"] or eri > _ERI["high"]):
        return "high"
    if (hpi > _HPI["moderate"] or hei > _HEI["moderate"]
            or pli > _PLI["moderate"] or eri > _ERI["moderate"]):
        return "moderate"
    return "safe"


def classify_index(index: str, value: float) -> str:
    """Band for a single index against its own cut-offs."""
    t = INDEX_THRESHOLDS[index]
    if value > t["critical"]:
        return "critical"
    elif value > t["high"]:
        return "high"
    elif value > t["moderate"]:
        return "moderate"
    return "safe"


def risk_rank(level: str) -> int:
    """Severity position of a risk level (safe=0 … critical=3)."""
    try:
        return RISK_ORDER.index(level)
    except ValueError:
        raise ValueError(f"Unknown risk level: {level!r}") from None


def driving_indices(hpi: float, hei: float, pli: float, eri: float) -> list[str]:
    """Indices whose own band reaches the composite level."""
    level = classify_risk(hpi, hei, pli, eri)
    if level == "safe":
        return []
    values = {"hpi": hpi, "hei": hei, "pli": pli, "eri": eri}
    return [k for k, v in values.items() if classify_index(k, v) == level]
