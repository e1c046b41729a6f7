"""
Global constants for MetalWatch.

BIS/WHO drinking-water standards, weights and toxic response factors for the
five regulated heavy metals, plus the risk bands used by every index.
"""

from types import MappingProxyType

# Canonical order, followed by every per-metal output
METALS = ("Pb", "Cd", "As", "Cr", "Se")

METAL_NAMES = MappingProxyType({
    "Pb": "Lead",
    "Cd": "Cadmium",
    "As": "Arsenic",
    "Cr": "Chromium",
    "Se": "Selenium",
})

# BIS/WHO standard values (mg/L)
BIS_STANDARDS = MappingProxyType({
    "Pb": 0.01,
    "Cd": 0.003,
    "As": 0.01,
    "Cr": 0.05,
    "Se": 0.01,
})

# Unit weights, inversely proportional to the standard
WEIGHT_FACTORS = MappingProxyType({m: 1 / BIS_STANDARDS[m] for m in METALS})

# Toxic response factors (Hakanson-style, domain assigned)
TOXIC_FACTORS = MappingProxyType({
    "Pb": 5,
    "Cd": 30,
    "As": 10,
    "Cr": 2,
    "Se": 5,
})

# ── Risk bands ──────────────────────────────────────────────────────────────
RISK_ORDER = ("safe", "moderate", "high", "critical")

RISK_LEVELS = MappingProxyType({
    "safe":     {"label": "Safe",     "color": "#2ecc71",
                 "description": "All indices within acceptable limits."},
    "moderate": {"label": "Moderate", "color": "#f1c40f",
                 "description": "Some heavy metal pollution detected."},
    "high":     {"label": "High",     "color": "#e67e22",
                 "description": "Significant heavy metal pollution detected."},
    "critical": {"label": "Critical", "color": "#e74c3c",
                 "description": "Severe heavy metal pollution; water unfit for use."},
})

# A value strictly above the cut-off reaches the band.
INDEX_THRESHOLDS = MappingProxyType({
    "hpi": {"moderate": 25, "high": 50, "critical": 100},
    "hei": {"moderate": 2, "high": 5, "critical": 10},
    "pli": {"moderate": 1, "high": 2, "critical": 3},
    "eri": {"moderate": 75, "high": 150, "critical": 300},
})

INDEX_INFO = MappingProxyType({
    "hpi": {"name": "Heavy Metal Pollution Index",
            "description": "Weighted average of metal concentrations"},
    "hei": {"name": "Heavy Metal Evaluation Index",
            "description": "Sum of concentration ratios"},
    "pli": {"name": "Pollution Load Index",
            "description": "Geometric mean of contamination factors"},
    "eri": {"name": "Ecological Risk Index",
            "description": "Toxicity-weighted risk assessment"},
})


def metal_label(symbol: str) -> str:
    """Return 'Lead (Pb)' style label for a metal symbol."""
    return f"{METAL_NAMES[symbol]} ({symbol})"


def _check_tables():
    domain = set(METALS)
    for name, table in (
        ("METAL_NAMES", METAL_NAMES),
        ("BIS_STANDARDS", BIS_STANDARDS),
        ("WEIGHT_FACTORS", WEIGHT_FACTORS),
        ("TOXIC_FACTORS", TOXIC_FACTORS),
    ):
        if set(table) != domain:
            raise RuntimeError(f"{name} must cover exactly {METALS}, got {sorted(table)}")
    bad = [m for m in METALS if not BIS_STANDARDS[m] > 0]
    if bad:
        raise RuntimeError(f"BIS_STANDARDS must be strictly positive: {bad}")
    if tuple(RISK_LEVELS) != RISK_ORDER:
        raise RuntimeError("RISK_LEVELS must follow RISK_ORDER")


_check_tables()
