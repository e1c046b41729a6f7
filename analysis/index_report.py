"""
Index Report — formats the four pollution indices for display.
"""

from config.constants import INDEX_INFO, INDEX_THRESHOLDS, RISK_LEVELS
from models.risk_classifier import classify_index


def _scale_text(index: str) -> str:
    t = INDEX_THRESHOLDS[index]
    return (
        f"Safe: <{t['moderate']} • "
        f"Moderate: {t['moderate']}-{t['high']} • "
        f"High: {t['high']}-{t['critical']} • "
        f"Critical: >{t['critical']}"
    )


def format_index_report(result: dict) -> list[dict]:
    """
    Return one dict per index (hpi, hei, pli, eri) with:
        key, name, description, value, band, band_label, scale_text.

    The band is taken from the displayed (rounded) value, matching what the
    reader sees next to it.
    """
    rows = []
    for key, info in INDEX_INFO.items():
        value = result[key]
        band = classify_index(key, value)
        rows.append({
            "key": key,
            "name": info["name"],
            "description": info["description"],
            "value": value,
            "band": band,
            "band_label": RISK_LEVELS[band]["label"],
            "scale_text": _scale_text(key),
        })
    return rows
