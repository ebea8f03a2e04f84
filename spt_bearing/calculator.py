"""Калькулятор несущей способности по данным SPT."""

import logging
import math

from spt_bearing import correction, soil
from spt_bearing.meyerhof import meyerhof_direct_method
from spt_bearing.models import CalculationResult, FoundationInput, SoilInput, SptTestInput
from spt_bearing.terzaghi import admissible_capacity, bearing_capacity

logger = logging.getLogger(__name__)


def calculate(
    spt: SptTestInput,
    soil_input: SoilInput,
    foundation: FoundationInput,
) -> CalculationResult:
    """Основной пайплайн расчёта.

    Args:
        spt: Данные испытания SPT.
        soil_input: Параметры грунта и УГВ.
        foundation: Параметры фундамента.

    Returns:
        CalculationResult со всеми промежуточными величинами.
    """
    # 1. Корректировка N
    factors = correction.correction_factors(spt)
    n60 = correction.n60_from_input(spt)

    gamma_estimated = soil_input.gamma is None
    gamma = soil.estimate_unit_weight(n60) if gamma_estimated else soil_input.gamma
    logger.debug("N60=%.2f, gamma=%.2f kN/m3 (%s)", n60, gamma,
                 "estimated" if gamma_estimated else "manual")

    water_table = soil_input.water_table_depth
    sigma_v = correction.effective_stress(
        spt.depth, gamma, water_table if water_table is not None else math.inf
    )
    cn = correction.overburden_correction_cn(sigma_v)
    n160 = correction.calculate_n160(n60, cn)

    # 2. Параметры грунта
    phi = soil.estimate_friction_angle(n160)
    classification = soil.classify_soil(n60)
    failure = soil.failure_type(n60)
    logger.debug("(N1)60=%.2f, phi=%.2f deg, %s shear failure", n160, phi, failure)

    # 3. Терцаги: для каждого типа грунта обнуляется неприменимый параметр
    granular = soil_input.soil_type == "granular"
    terzaghi = bearing_capacity(
        phi=phi if granular else 0.0,
        gamma=gamma,
        B=foundation.B,
        Df=foundation.Df,
        cohesion=0.0 if granular else soil_input.cohesion,
        shape=foundation.shape,
        water_table_depth=water_table,
        failure_type=failure,
    )
    q_adm = admissible_capacity(terzaghi.qu, foundation.FS)

    # 4. Мейерхоф — только для несвязных грунтов
    meyerhof = meyerhof_direct_method(n60, foundation.B, foundation.Df) if granular else None

    return CalculationResult(
        factors=factors,
        n60=n60,
        sigma_v=sigma_v,
        cn=cn,
        n160=n160,
        gamma=gamma,
        gamma_estimated=gamma_estimated,
        phi_estimated=phi,
        classification=classification,
        failure_type=failure,
        terzaghi=terzaghi,
        q_adm=q_adm,
        meyerhof=meyerhof,
    )
