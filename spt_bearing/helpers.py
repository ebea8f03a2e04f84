"""Общие вспомогательные функции: напряжения и удельный вес с учётом УГВ.

Используются и при корректировке N (σ'v на глубине испытания),
и при расчёте по Терцаги (γ под подошвой).
"""

from spt_bearing.models import GAMMA_W


def effective_stress(depth: float, gamma: float, water_table_depth: float) -> float:
    """Эффективное вертикальное напряжение σ'v на глубине depth, кПа.

    УГВ ниже точки:  σ'v = γ·z
    УГВ выше точки:  σ'v = γ·zw + (γ - γw)·(z - zw)
    """
    if water_table_depth >= depth:
        return gamma * depth

    dry_part = gamma * water_table_depth
    submerged_part = (gamma - GAMMA_W) * (depth - water_table_depth)
    return dry_part + submerged_part


def effective_unit_weight(
    gamma: float, B: float, Df: float, water_table_depth: float | None
) -> float:
    """Удельный вес γ в зоне влияния под подошвой (Df .. Df+B).

    zw ≤ Df:          γ - γw
    Df < zw ≤ Df+B:   γ - γw·(1 - (zw - Df)/B)
    zw > Df+B:        γ
    """
    if water_table_depth is None:
        return gamma

    if water_table_depth <= Df:
        return gamma - GAMMA_W
    if water_table_depth <= Df + B:
        factor = (water_table_depth - Df) / B
        return gamma - GAMMA_W * (1.0 - factor)
    return gamma
