import math

import pytest

from spt_bearing.helpers import effective_unit_weight
from spt_bearing.terzaghi import admissible_capacity, bearing_capacity, terzaghi_factors


def test_cohesive_square_footing_no_water():
    # φ=0: Nc=5.7, Nq=1.0, Nγ=0 → qu = 1.3·50·5.7 + 27·1.0 = 397.5
    res = bearing_capacity(
        phi=0.0, gamma=18.0, B=1.5, Df=1.5, cohesion=50.0,
        shape="square", water_table_depth=10.0, failure_type="general",
    )
    assert (res.Nc, res.Nq, res.Ng) == (5.7, 1.0, 0.0)
    assert res.q == pytest.approx(27.0)
    assert res.gamma_eff == 18.0
    assert res.qu == pytest.approx(397.5)


def test_granular_strip_footing_matches_formula():
    phi = 32.0
    res = bearing_capacity(phi=phi, gamma=18.0, B=1.2, Df=1.0, shape="strip")
    n_c, n_q, n_g = terzaghi_factors(phi)
    expected = 18.0 * 1.0 * n_q + 0.5 * 18.0 * 1.2 * n_g
    assert res.qu == pytest.approx(expected)
    assert (res.sc, res.sg) == (1.0, 0.5)
    assert res.c_used == 0.0


@pytest.mark.parametrize("shape", ["strip", "square", "circular"])
def test_shape_ordering_for_sand(shape):
    res = bearing_capacity(phi=34.0, gamma=18.0, B=2.0, Df=1.0, shape=shape)
    square = bearing_capacity(phi=34.0, gamma=18.0, B=2.0, Df=1.0, shape="square")
    if shape == "strip":
        assert res.qu > square.qu
    elif shape == "circular":
        assert res.qu < square.qu
    else:
        assert res.qu == square.qu


def test_unknown_shape_uses_square_factors():
    odd = bearing_capacity(phi=30.0, gamma=18.0, B=1.5, Df=1.5, cohesion=10.0, shape="oval")
    square = bearing_capacity(phi=30.0, gamma=18.0, B=1.5, Df=1.5, cohesion=10.0, shape="square")
    assert odd.qu == square.qu
    assert (odd.sc, odd.sg) == (1.3, 0.4)


@pytest.mark.parametrize(("cohesion", "phi"), [(30.0, 30.0), (50.0, 0.0), (0.0, 36.0)])
def test_local_failure_reduces_parameters(cohesion, phi):
    res = bearing_capacity(phi=phi, gamma=17.0, B=1.5, Df=1.0, cohesion=cohesion, failure_type="local")
    assert res.c_used <= cohesion
    assert res.phi_used <= phi
    if cohesion > 0:
        assert res.c_used < cohesion
    if phi > 0:
        assert res.phi_used < phi


def test_local_failure_lowers_capacity():
    general = bearing_capacity(phi=30.0, gamma=17.0, B=1.5, Df=1.0, cohesion=20.0)
    local = bearing_capacity(phi=30.0, gamma=17.0, B=1.5, Df=1.0, cohesion=20.0, failure_type="local")
    assert local.qu < general.qu
    assert local.phi_used == pytest.approx(
        math.degrees(math.atan((2.0 / 3.0) * math.tan(math.radians(30.0))))
    )


@pytest.mark.parametrize(
    ("water_table", "expected"),
    [
        (0.0, 18.0 - 9.81),
        (1.0, 18.0 - 9.81),  # на уровне подошвы
        (2.0, 18.0 - 9.81 * 0.5),  # середина зоны влияния
        (3.0, 18.0),  # Df + B
        (8.0, 18.0),
        (None, 18.0),
    ],
)
def test_effective_unit_weight_regimes(water_table, expected):
    assert effective_unit_weight(18.0, 2.0, 1.0, water_table) == pytest.approx(expected)


def test_water_table_passed_through_to_result():
    res = bearing_capacity(phi=30.0, gamma=18.0, B=2.0, Df=1.0, water_table_depth=2.0)
    assert res.gamma_eff == pytest.approx(18.0 - 9.81 * 0.5)
    # пригрузка не корректируется
    assert res.q == pytest.approx(18.0)


def test_admissible_capacity():
    assert admissible_capacity(900.0, 3.0) == pytest.approx(300.0)
    assert admissible_capacity(900.0) == pytest.approx(300.0)


def test_admissible_capacity_zero_fs_is_infinite():
    assert math.isinf(admissible_capacity(900.0, 0.0))


def test_bearing_capacity_is_repeatable():
    kwargs = dict(phi=31.3, gamma=17.5, B=1.7, Df=1.2, cohesion=5.0, shape="circular",
                  water_table_depth=2.0, failure_type="local")
    assert bearing_capacity(**kwargs) == bearing_capacity(**kwargs)
