"""Таблицы коэффициентов для метода Терцаги (1943).

Источники:
- Braja M. Das, Principios de Ingeniería de Cimentaciones (табл. Nc, Nq, Nγ)
"""

import logging
from functools import lru_cache

import numpy as np

logger = logging.getLogger(__name__)

PHI_MIN = 0.0
PHI_MAX = 50.0

# (φ, Nc, Nq, Nγ); шаг неравномерный — интерполяция только по соседним узлам
TERZAGHI_FACTOR_TABLE = (
    (0.0, 5.7, 1.0, 0.0),
    (5.0, 7.3, 1.6, 0.5),
    (10.0, 9.6, 2.7, 1.2),
    (15.0, 12.9, 4.4, 2.5),
    (20.0, 17.7, 7.4, 5.0),
    (25.0, 25.1, 12.7, 9.7),
    (26.0, 27.1, 14.2, 11.7),
    (28.0, 31.6, 17.8, 15.7),
    (30.0, 37.2, 22.5, 19.7),
    (32.0, 44.0, 28.5, 27.9),
    (34.0, 52.6, 36.5, 36.0),
    (36.0, 63.5, 47.2, 52.0),
    (38.0, 77.5, 61.5, 80.0),
    (40.0, 95.7, 81.3, 100.4),
    (42.0, 119.7, 108.8, 180.0),
    (44.0, 151.9, 147.7, 257.0),
    (45.0, 172.3, 173.3, 297.5),
    (46.0, 196.2, 204.2, 420.0),
    (48.0, 258.3, 287.8, 780.1),
    (50.0, 347.5, 415.1, 1153.2),
)

# Коэффициенты формы (sc, sγ)
SHAPE_FACTORS = {
    "strip": (1.0, 0.5),
    "square": (1.3, 0.4),
    "circular": (1.3, 0.3),
}


def interpolate_rows(table: tuple[tuple[float, ...], ...], x: float) -> tuple[float, ...]:
    """Кусочно-линейная интерполяция всех столбцов таблицы по первому.

    Таблица упорядочена по возрастанию x; x за пределами — последний узел.
    """
    for lower, upper in zip(table, table[1:]):
        x0, x1 = lower[0], upper[0]
        if x0 <= x <= x1:
            if x == x0:
                return tuple(float(y) for y in lower[1:])
            if x == x1:
                return tuple(float(y) for y in upper[1:])
            t = (x - x0) / (x1 - x0)
            return tuple(float(y0 + t * (y1 - y0)) for y0, y1 in zip(lower[1:], upper[1:]))

    return tuple(float(y) for y in table[-1][1:])


@lru_cache(maxsize=256)
def terzaghi_factors(phi_deg: float) -> tuple[float, float, float]:
    """Коэффициенты несущей способности Nc, Nq, Nγ по Терцаги.

    φ ограничивается диапазоном таблицы [0°, 50°].

    Args:
        phi_deg: Угол внутреннего трения, градусы.

    Returns:
        (Nc, Nq, Nγ)
    """
    phi = float(np.clip(phi_deg, PHI_MIN, PHI_MAX))
    n_c, n_q, n_g = interpolate_rows(TERZAGHI_FACTOR_TABLE, phi)
    return n_c, n_q, n_g


def shape_factors(shape: str) -> tuple[float, float]:
    """Коэффициенты формы Терцаги (sc, sγ).

    Неизвестная форма — как квадратная подошва.
    """
    try:
        return SHAPE_FACTORS[shape]
    except KeyError:
        logger.warning("Unknown footing shape %r, using square shape factors", shape)
        return SHAPE_FACTORS["square"]


def local_shear_parameters(c: float, phi_deg: float) -> tuple[float, float]:
    """Приведённые параметры для местного сдвига.

    c' = ⅔·c
    φ' = arctan(⅔·tanφ)
    """
    c_local = (2.0 / 3.0) * c
    phi_local = np.degrees(np.arctan((2.0 / 3.0) * np.tan(np.radians(phi_deg))))
    return float(c_local), float(phi_local)
