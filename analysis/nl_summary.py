"""
Natural Language Summary Generator — plain-English heavy metal report.

Generates a human-readable assessment from a compute_indices() result
without any external service. Uses template-based NLG with conditional logic.
"""

from datetime import date

from config.constants import RISK_LEVELS, BIS_STANDARDS
from analysis.index_report import format_index_report


def generate_nl_summary(
    result: dict,
    station_name: str | None = None,
    sample_date: date | str | None = None,
) -> str:
    """
    Generate a multi-paragraph markdown summary of one assessed sample.

    Args:
        result:       dict returned by pollution_engine.compute_indices().
        station_name: sampling point shown in the heading (optional).
        sample_date:  sampling date, a date or an ISO string (optional).
    """
    risk_level = result.get("risk_level", "safe")
    exceeds = result.get("exceeds_standards", [])
    level_label = RISK_LEVELS[risk_level]["label"]

    site = station_name or "the sample"
    if isinstance(sample_date, date):
        when = sample_date.strftime("%d %B %Y")
    else:
        when = sample_date

    paragraphs = []

    # ── Opening paragraph ───────────────────────────────────────────────
    severity_desc = {
        "safe": "within acceptable limits for all four pollution indices",
        "moderate": "moderately polluted; some heavy metal contamination is present",
        "high": "highly polluted; heavy metal contamination is significant",
        "critical": "critically polluted; heavy metal levels pose a severe risk",
    }
    heading = f"**Heavy Metal Assessment for {site}**"
    if when:
        heading += f" — sampled {when}"
    paragraphs.append(
        f"{heading}\n\n"
        f"Water from {site} is {severity_desc[risk_level]}. "
        f"The overall risk level is **{level_label}**."
    )

    # ── Indices paragraph ───────────────────────────────────────────────
    report = format_index_report(result)
    index_text = "; ".join(
        f"{r['name']} ({r['key'].upper()}) = {r['value']:.2f} ({r['band_label']})"
        for r in report
    )
    paragraphs.append(f"**Indices:** {index_text}.")

    drivers = [r["key"].upper() for r in report if r["band"] == risk_level]
    if risk_level != "safe" and drivers:
        paragraphs.append(
            f"**Key drivers:** The {level_label.lower()} rating is driven by "
            f"{', '.join(drivers)}."
        )

    # ── Exceedance paragraph ────────────────────────────────────────────
    if exceeds:
        paragraphs.append(
            "**Standards exceeded:** The following metals exceed BIS safety "
            f"standards: {', '.join(exceeds)}."
        )
    else:
        paragraphs.append(
            f"**Standards exceeded:** None — all {len(BIS_STANDARDS)} metals are at or "
            "below their BIS safety standards."
        )

    # ── Recommendations ─────────────────────────────────────────────────
    if risk_level == "critical":
        recs = [
            "Do not use this water for drinking or cooking",
            "Notify local environmental and public health authorities",
            "Resample to confirm and trace the contamination source",
        ]
    elif risk_level == "high":
        recs = [
            "Avoid drinking this water without treatment",
            "Schedule follow-up sampling for the exceeding metals",
        ]
    elif risk_level == "moderate":
        recs = [
            "Continue routine monitoring at this station",
            "Check for nearby industrial or agricultural discharge",
        ]
    else:
        recs = ["Water quality meets heavy metal standards"]

    rec_text = "\n".join(f"- {r}" for r in recs)
    paragraphs.append(f"**Recommendations:**\n{rec_text}")

    return "\n\n".join(paragraphs)
