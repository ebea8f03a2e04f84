"""Корректировка числа ударов SPT: N → N60 → (N1)60.

Источники:
- Skempton (1986) — поправки на энергию молота и оборудование
- Liao & Whitman (1986) — поправка на бытовое давление CN
"""

from dataclasses import dataclass

import numpy as np

from spt_bearing.helpers import effective_stress
from spt_bearing.models import CorrectionFactors, SptTestInput

P_ATM = 100.0  # Опорное давление Pa, кПа
CN_MAX = 2.0


@dataclass(frozen=True)
class Hammer:
    label: str
    efficiency: float  # %


HAMMER_TYPES: dict[str, Hammer] = {
    "safety": Hammer("Martillo de seguridad (Safety)", 60.0),
    "donut": Hammer("Martillo tipo dona (Donut)", 45.0),
    "automatic": Hammer("Martillo automático", 80.0),
}


# --- Поправочные коэффициенты ηB, ηS, ηR ---


def borehole_correction_factor(diameter: float) -> float:
    """ηB по диаметру скважины, мм (65–115 / 150 / 200)."""
    if diameter <= 115:
        return 1.0
    if diameter <= 150:
        return 1.05
    return 1.15


def sampler_correction_factor(has_liner: bool) -> float:
    """ηS: с гильзой 1.0, без гильзы 1.2."""
    return 1.0 if has_liner else 1.2


def rod_length_correction_factor(rod_length: float) -> float:
    """ηR по длине штанг, м.

    > 10 м: 1.00;  6–10 м: 0.95;  4–6 м: 0.85;  < 4 м: 0.75
    Граничное значение относится к верхнему интервалу.
    """
    if rod_length > 10:
        return 1.0
    if rod_length >= 6:
        return 0.95
    if rod_length >= 4:
        return 0.85
    return 0.75


def correction_factors(spt: SptTestInput) -> CorrectionFactors:
    """Все четыре поправки для данных испытания."""
    return CorrectionFactors(
        eta_H=HAMMER_TYPES[spt.hammer_type].efficiency,
        eta_B=borehole_correction_factor(spt.borehole_diameter),
        eta_S=sampler_correction_factor(spt.has_liner),
        eta_R=rod_length_correction_factor(spt.rod_length),
    )


# --- N60 и (N1)60 ---


def calculate_n60(
    n_field: float,
    hammer_efficiency: float,
    borehole_diameter: float,
    has_liner: bool,
    rod_length: float,
) -> float:
    """N, приведённое к 60% энергии молота.

    N60 = N·(ηH·ηB·ηS·ηR) / 60, ηH — в процентах.
    """
    eta_B = borehole_correction_factor(borehole_diameter)
    eta_S = sampler_correction_factor(has_liner)
    eta_R = rod_length_correction_factor(rod_length)
    return (n_field * hammer_efficiency * eta_B * eta_S * eta_R) / 60.0


def n60_from_input(spt: SptTestInput) -> float:
    return calculate_n60(
        spt.n_field,
        HAMMER_TYPES[spt.hammer_type].efficiency,
        spt.borehole_diameter,
        spt.has_liner,
        spt.rod_length,
    )


def overburden_correction_cn(sigma_v: float) -> float:
    """CN = √(Pa/σ'v) ≤ 2.0 (Liao & Whitman, 1986).

    При σ'v ≤ 0 возвращается предельное значение 2.0.
    """
    if sigma_v <= 0:
        return CN_MAX
    return float(min(np.sqrt(P_ATM / sigma_v), CN_MAX))


def calculate_n160(n60: float, cn: float) -> float:
    """(N1)60 = CN·N60."""
    return cn * n60


__all__ = [
    "HAMMER_TYPES",
    "Hammer",
    "borehole_correction_factor",
    "sampler_correction_factor",
    "rod_length_correction_factor",
    "correction_factors",
    "calculate_n60",
    "n60_from_input",
    "effective_stress",
    "overburden_correction_cn",
    "calculate_n160",
]
