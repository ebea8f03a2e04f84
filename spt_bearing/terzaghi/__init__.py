"""Несущая способность по Терцаги (1943) с табличными коэффициентами.

Использование:
    from spt_bearing.terzaghi import (
        terzaghi_factors,
        bearing_capacity,
        admissible_capacity,
    )
"""

from .bearing import admissible_capacity, bearing_capacity
from .tables import (
    SHAPE_FACTORS,
    TERZAGHI_FACTOR_TABLE,
    interpolate_rows,
    local_shear_parameters,
    shape_factors,
    terzaghi_factors,
)

__all__ = [
    # Таблицы
    "TERZAGHI_FACTOR_TABLE",
    "SHAPE_FACTORS",
    "interpolate_rows",
    "terzaghi_factors",
    "shape_factors",
    "local_shear_parameters",
    # Несущая способность
    "bearing_capacity",
    "admissible_capacity",
]
