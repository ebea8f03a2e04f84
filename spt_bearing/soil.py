"""Корреляции SPT → параметры грунта."""

from spt_bearing.models import FailureType, SoilClassification

# Границы N60 и соответствующие значения (последний интервал — N60 > 50)
_N60_BREAKS = (4.0, 10.0, 30.0, 50.0)
_UNIT_WEIGHTS = (14.0, 16.0, 18.0, 20.0, 21.0)
_CLASSES = (
    ("Muy suelto", "Muy blanda"),
    ("Suelto", "Blanda"),
    ("Medio", "Media"),
    ("Denso", "Firme"),
    ("Muy denso", "Muy firme"),
)

LOCAL_FAILURE_N60 = 10.0


def _n60_bin(n60: float) -> int:
    for i, upper in enumerate(_N60_BREAKS):
        if n60 <= upper:
            return i
    return len(_N60_BREAKS)


def estimate_friction_angle(n160: float) -> float:
    """Угол внутреннего трения по Peck, Hanson & Thornburn (1974), °.

    φ = 27.1 + 0.3·(N1)60 - 0.00054·(N1)60², (N1)60 ограничено [0, 60].
    """
    n = max(0.0, min(n160, 60.0))
    return 27.1 + 0.3 * n - 0.00054 * n * n


def estimate_unit_weight(n60: float) -> float:
    """Удельный вес по N60, кН/м³."""
    return _UNIT_WEIGHTS[_n60_bin(n60)]


def classify_soil(n60: float) -> SoilClassification:
    """Плотность (пески) и консистенция (глины) по N60."""
    density, consistency = _CLASSES[_n60_bin(n60)]
    return SoilClassification(density=density, consistency=consistency)


def failure_type(n60: float) -> FailureType:
    """Местный сдвиг для рыхлых/мягких грунтов (N60 ≤ 10), иначе общий."""
    return "local" if n60 <= LOCAL_FAILURE_N60 else "general"
