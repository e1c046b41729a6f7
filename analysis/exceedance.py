"""
Exceedance — which metals are above their BIS standard.
"""

from config.constants import METALS, METAL_NAMES, BIS_STANDARDS, metal_label


def check_exceeds_standards(sample) -> list[str]:
    """
    Labels of metals strictly above their standard, in canonical order
    (Pb, Cd, As, Cr, Se). A reading equal to the standard does not exceed it.
    """
    return [metal_label(m) for m in METALS if sample[m] > BIS_STANDARDS[m]]


def exceedance_details(sample) -> list[dict]:
    """Per-metal comparison rows for display, canonical order."""
    rows = []
    for m in METALS:
        conc = sample[m]
        std = BIS_STANDARDS[m]
        rows.append({
            "symbol": m,
            "name": METAL_NAMES[m],
            "label": metal_label(m),
            "concentration": conc,
            "standard": std,
            "ratio": round(conc / std, 2),
            "exceeds": conc > std,
        })
    return rows
