import math

import pytest

from spt_bearing.correction import (
    HAMMER_TYPES,
    borehole_correction_factor,
    calculate_n60,
    calculate_n160,
    correction_factors,
    effective_stress,
    n60_from_input,
    overburden_correction_cn,
    rod_length_correction_factor,
    sampler_correction_factor,
)
from spt_bearing.models import SptTestInput


def _make_spt(**overrides):
    data = dict(n_field=15, depth=3.0, hammer_type="safety", borehole_diameter=65,
                has_liner=True, rod_length=6.0)
    data.update(overrides)
    return SptTestInput(**data)


def test_hammer_types_efficiencies():
    assert HAMMER_TYPES["safety"].efficiency == 60
    assert HAMMER_TYPES["donut"].efficiency == 45
    assert HAMMER_TYPES["automatic"].efficiency == 80


@pytest.mark.parametrize(
    ("diameter", "expected"),
    [(65, 1.0), (115, 1.0), (116, 1.05), (150, 1.05), (151, 1.15), (200, 1.15)],
)
def test_borehole_correction_factor(diameter, expected):
    assert borehole_correction_factor(diameter) == expected


def test_sampler_correction_factor():
    assert sampler_correction_factor(True) == 1.0
    assert sampler_correction_factor(False) == 1.2


@pytest.mark.parametrize(
    ("rod_length", "expected"),
    [
        (15.0, 1.0),
        (10.01, 1.0),
        (10.0, 0.95),  # граница — верхний интервал
        (6.0, 0.95),
        (5.99, 0.85),
        (4.0, 0.85),
        (3.99, 0.75),
        (1.0, 0.75),
    ],
)
def test_rod_length_correction_factor(rod_length, expected):
    assert rod_length_correction_factor(rod_length) == expected


def test_n60_scenario_safety_hammer_short_rods():
    # 15·(60·1.0·1.0·0.95)/60 = 14.25
    assert calculate_n60(15, 60, 65, True, 6) == pytest.approx(14.25)


def test_n60_all_corrections_applied():
    # 20·(45·1.15·1.2·0.75)/60
    expected = 20 * 45 * 1.15 * 1.2 * 0.75 / 60
    assert calculate_n60(20, 45, 200, False, 3.0) == pytest.approx(expected)


def test_n60_from_input_uses_hammer_table():
    spt = _make_spt(hammer_type="automatic", rod_length=12.0)
    assert n60_from_input(spt) == pytest.approx(15 * 80 / 60)


def test_correction_factors_record():
    factors = correction_factors(_make_spt(borehole_diameter=150, has_liner=False))
    assert factors.eta_H == 60
    assert factors.eta_B == 1.05
    assert factors.eta_S == 1.2
    assert factors.eta_R == 0.95
    assert factors.product == pytest.approx(60 * 1.05 * 1.2 * 0.95)


def test_effective_stress_water_table_below():
    # σ'v = 18·3 = 54
    assert effective_stress(3.0, 18.0, 10.0) == pytest.approx(54.0)
    assert effective_stress(3.0, 18.0, 3.0) == pytest.approx(54.0)


def test_effective_stress_water_table_above():
    # 18·1 + (18 - 9.81)·2
    assert effective_stress(3.0, 18.0, 1.0) == pytest.approx(18.0 + 8.19 * 2.0)


def test_cn_scenario_unclamped():
    cn = overburden_correction_cn(54.0)
    assert cn == pytest.approx(math.sqrt(100.0 / 54.0))
    assert cn == pytest.approx(1.3603, abs=1e-4)


def test_cn_reference_pressure():
    assert overburden_correction_cn(100.0) == 1.0


@pytest.mark.parametrize("sigma_v", [100.5, 150.0, 400.0, 1e4])
def test_cn_below_one_above_reference(sigma_v):
    assert overburden_correction_cn(sigma_v) < 1.0


@pytest.mark.parametrize("sigma_v", [0.0, -5.0, 1e-9, 10.0, 25.0])
def test_cn_clamped_at_two(sigma_v):
    assert overburden_correction_cn(sigma_v) == 2.0


@pytest.mark.parametrize("sigma_v", [10.0, 54.0, 250.0])
def test_n160_non_decreasing_in_n60(sigma_v):
    cn = overburden_correction_cn(sigma_v)
    values = [calculate_n160(n60, cn) for n60 in (0.0, 2.5, 10.0, 14.25, 40.0)]
    assert values == sorted(values)
