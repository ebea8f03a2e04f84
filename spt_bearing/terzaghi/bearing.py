"""Несущая способность по Терцаги (1943).

Включает:
- Общий и местный сдвиг
- Учёт УГВ в зоне влияния под подошвой
- Коэффициенты формы (ленточная, квадратная, круглая)
"""

import numpy as np

from spt_bearing.helpers import effective_unit_weight
from spt_bearing.models import BearingCapacityResult
from spt_bearing.terzaghi.tables import local_shear_parameters, shape_factors, terzaghi_factors


def bearing_capacity(
    phi: float,
    gamma: float,
    B: float,
    Df: float,
    cohesion: float = 0.0,
    shape: str = "square",
    water_table_depth: float | None = None,
    failure_type: str = "general",
) -> BearingCapacityResult:
    """Предельная несущая способность qu, кПа.

    qu = sc·c·Nc + q·Nq + sγ·γ'·B·Nγ,  q = γ·Df

    Для местного сдвига c и φ заменяются на c' = ⅔c, φ' = arctan(⅔·tanφ).
    Входные значения не проверяются: отрицательные B, Df дают формально
    вычисленный, но физически бессмысленный результат.

    Args:
        phi: Угол внутреннего трения, °.
        gamma: Удельный вес грунта, кН/м³.
        B: Ширина (диаметр) подошвы, м.
        Df: Глубина заложения, м.
        cohesion: Удельное сцепление, кПа.
        shape: "strip", "square" или "circular".
        water_table_depth: Глубина УГВ, м (None — УГВ нет).
        failure_type: "general" или "local".

    Returns:
        BearingCapacityResult с коэффициентами и использованными параметрами.
    """
    if failure_type == "local":
        c_used, phi_used = local_shear_parameters(cohesion, phi)
    else:
        c_used, phi_used = cohesion, phi

    n_c, n_q, n_g = terzaghi_factors(phi_used)
    q = gamma * Df
    gamma_eff = effective_unit_weight(gamma, B, Df, water_table_depth)
    sc, sg = shape_factors(shape)

    qu = sc * c_used * n_c + q * n_q + sg * gamma_eff * B * n_g

    return BearingCapacityResult(
        qu=qu,
        Nc=n_c,
        Nq=n_q,
        Ng=n_g,
        q=q,
        gamma_eff=gamma_eff,
        phi_used=phi_used,
        c_used=c_used,
        sc=sc,
        sg=sg,
    )


def admissible_capacity(qu: float, FS: float = 3.0) -> float:
    """Допускаемое давление qadm = qu / FS, кПа.

    FS не проверяется: при FS = 0 результат бесконечен.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(qu, FS))
