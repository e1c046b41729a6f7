"""End-to-end assessment through pollution_engine.compute_indices()."""

import math

import pandas as pd
import pytest

import pollution_engine
from config.constants import METALS
from pollution_engine import (
    InvalidSampleError, validate_sample, compute_indices,
    compute_indices_frame, summarize_frame,
)

ZERO = {"Pb": 0.0, "Cd": 0.0, "As": 0.0, "Cr": 0.0, "Se": 0.0}
AT_STANDARD = {"Pb": 0.01, "Cd": 0.003, "As": 0.01, "Cr": 0.05, "Se": 0.01}
DOUBLE = {"Pb": 0.02, "Cd": 0.006, "As": 0.02, "Cr": 0.10, "Se": 0.02}

ALL_LABELS = [
    "Lead (Pb)", "Cadmium (Cd)", "Arsenic (As)", "Chromium (Cr)", "Selenium (Se)",
]


def test_zero_sample():
    assert compute_indices(ZERO) == {
        "hpi": 0.0, "hei": 0.0, "pli": 0.0, "eri": 0.0,
        "risk_level": "safe", "exceeds_standards": [],
    }


def test_at_standard_sample_is_moderate_without_exceedances():
    r = compute_indices(AT_STANDARD)
    assert (r["hpi"], r["hei"], r["pli"], r["eri"]) == (1.0, 5.0, 1.0, 52.0)
    assert r["risk_level"] == "moderate"
    assert r["exceeds_standards"] == []


def test_double_standard_sample_is_high():
    r = compute_indices(DOUBLE)
    assert (r["hpi"], r["hei"], r["pli"], r["eri"]) == (2.0, 10.0, 2.0, 104.0)
    assert r["risk_level"] == "high"
    assert r["exceeds_standards"] == ALL_LABELS


def test_values_rounded_to_two_decimals():
    r = compute_indices({"Pb": 0.0123, "Cd": 0.0017, "As": 0.0041, "Cr": 0.033, "Se": 0.0009})
    for key in ("hpi", "hei", "pli", "eri"):
        assert r[key] == round(r[key], 2)
    assert r["exceeds_standards"] == ["Lead (Pb)"]


def test_classification_uses_unrounded_hei():
    # raw HEI 5.004 is above 5 → high, even though it displays as 5.0
    r = compute_indices({**ZERO, "Pb": 0.05004})
    assert r["hei"] == 5.0
    assert r["risk_level"] == "high"


def _patch_indices(monkeypatch, hpi=0.0, hei=0.0, pli=0.0, eri=0.0):
    monkeypatch.setattr(pollution_engine, "compute_hpi", lambda s: hpi)
    monkeypatch.setattr(pollution_engine, "compute_hei", lambda s: hei)
    monkeypatch.setattr(pollution_engine, "compute_pli", lambda s: pli)
    monkeypatch.setattr(pollution_engine, "compute_eri", lambda s: eri)


def test_hpi_rounding_up_to_100_stays_high(monkeypatch):
    _patch_indices(monkeypatch, hpi=99.996)
    r = compute_indices(ZERO)
    assert r["hpi"] == 100.0
    assert r["risk_level"] == "high"


def test_hpi_rounding_down_to_100_stays_critical(monkeypatch):
    _patch_indices(monkeypatch, hpi=100.004)
    r = compute_indices(ZERO)
    assert r["hpi"] == 100.0
    assert r["risk_level"] == "critical"


def test_exceedance_order_ignores_input_order():
    reversed_sample = {m: DOUBLE[m] for m in reversed(METALS)}
    assert compute_indices(reversed_sample)["exceeds_standards"] == ALL_LABELS


def test_exceedances_are_subsequence_of_canonical_order():
    r = compute_indices({"Se": 0.02, "Cr": 0.01, "As": 0.02, "Cd": 0.001, "Pb": 0.02})
    assert r["exceeds_standards"] == ["Lead (Pb)", "Arsenic (As)", "Selenium (Se)"]


def test_idempotent():
    sample = {"Pb": 0.015, "Cd": 0.0042, "As": 0.008, "Cr": 0.07, "Se": 0.002}
    assert compute_indices(sample) == compute_indices(sample)


def test_does_not_mutate_input():
    sample = dict(AT_STANDARD)
    compute_indices(sample)
    assert sample == AT_STANDARD


def test_extra_keys_ignored():
    r = compute_indices({**AT_STANDARD, "station": "River Point A"})
    assert r["risk_level"] == "moderate"


@pytest.mark.parametrize("bad,problem", [
    ({k: v for k, v in AT_STANDARD.items() if k != "As"}, "missing"),
    ({**AT_STANDARD, "As": None}, "missing"),
    ({**AT_STANDARD, "As": math.nan}, "missing"),
    ({**AT_STANDARD, "As": math.inf}, "not finite"),
    ({**AT_STANDARD, "As": -0.01}, "negative"),
    ({**AT_STANDARD, "As": "0.01"}, "not a number"),
    ({**AT_STANDARD, "As": True}, "not a number"),
])
def test_invalid_sample_rejected(bad, problem):
    with pytest.raises(InvalidSampleError) as exc:
        compute_indices(bad)
    assert exc.value.problems == {"As": problem}
    assert isinstance(exc.value, ValueError)


def test_validate_reports_every_bad_metal():
    with pytest.raises(InvalidSampleError) as exc:
        validate_sample({"Pb": -1, "Cd": 0.001, "Cr": 0.01, "Se": 0.01})
    assert exc.value.problems == {"Pb": "negative", "As": "missing"}


def test_validate_returns_floats_in_canonical_order():
    clean = validate_sample({"Se": 0, "Cr": 1, "As": 0, "Cd": 0, "Pb": 0})
    assert tuple(clean) == METALS
    assert all(isinstance(v, float) for v in clean.values())


def _frame():
    return pd.DataFrame(
        [ZERO, AT_STANDARD, DOUBLE],
        index=["clean", "limit", "double"],
    ).assign(station=["A", "B", "C"])


def test_compute_indices_frame():
    df = _frame()
    out = compute_indices_frame(df)
    assert list(out["risk_level"]) == ["safe", "moderate", "high"]
    assert list(out["hei"]) == [0.0, 5.0, 10.0]
    assert out.loc["double", "exceeds_standards"] == ALL_LABELS
    assert list(out["station"]) == ["A", "B", "C"]
    assert "risk_level" not in df.columns


def test_compute_indices_frame_names_bad_row():
    df = _frame()
    df.loc["limit", "Cd"] = -0.5
    with pytest.raises(InvalidSampleError, match="Row limit"):
        compute_indices_frame(df)


def test_compute_indices_frame_missing_column():
    with pytest.raises(InvalidSampleError) as exc:
        compute_indices_frame(_frame().drop(columns=["Se"]))
    assert exc.value.problems == {"Se": "missing"}


def test_summarize_frame():
    summary = summarize_frame(_frame())
    assert summary["n_samples"] == 3
    assert summary["risk_counts"] == {"safe": 1, "moderate": 1, "high": 1, "critical": 0}
    assert summary["exceedance_counts"] == {label: 1 for label in ALL_LABELS}
