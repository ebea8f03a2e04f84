"""Прямой метод Мейерхофа (1956) по N60.

Применим к несвязным грунтам при допускаемой осадке 25 мм. Тип грунта
здесь не проверяется — решение о выводе результата принимает вызывающий код.
"""

import numpy as np

from spt_bearing.models import MeyerhofResult

KD_MAX = 1.33
B_NARROW = 1.22  # м
B_TERM = 0.305  # м


def depth_factor_kd(B: float, Df: float) -> float:
    """Kd = 1 + 0.33·(Df/B) ≤ 1.33."""
    with np.errstate(divide="ignore", invalid="ignore"):
        ratio = float(np.divide(Df, B))
    return min(1.0 + 0.33 * ratio, KD_MAX)


def meyerhof_direct_method(n60: float, B: float, Df: float) -> MeyerhofResult:
    """Допускаемое давление qadm, кПа.

    B ≤ 1.22 м:  qadm = N60·Kd / 0.05
    B > 1.22 м:  qadm = N60·Kd·((B + 0.305)/B)² / 0.08
    """
    kd = depth_factor_kd(B, Df)

    if B <= B_NARROW:
        q_adm = n60 * kd / 0.05
    else:
        ratio = ((B + B_TERM) / B) ** 2
        q_adm = n60 * kd * ratio / 0.08

    return MeyerhofResult(q_adm=q_adm, Kd=kd)
