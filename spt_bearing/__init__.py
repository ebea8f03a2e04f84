"""Ядро расчёта несущей способности по данным SPT (Braja M. Das).

Модули:
- models: Типы данных (SptTestInput, SoilInput, FoundationInput, ...)
- correction: Корректировка N → N60 → (N1)60
- soil: Корреляции SPT → параметры грунта
- terzaghi: Несущая способность по Терцаги (1943)
- meyerhof: Прямой метод Мейерхофа (1956)
- calculator: Организатор алгоритма расчёта
- helpers: Общие вспомогательные функции

Использование:
    from spt_bearing.models import SptTestInput, SoilInput, FoundationInput
    from spt_bearing.calculator import calculate
"""

from . import correction, helpers, meyerhof, soil, terzaghi
from .models import (
    BearingCapacityResult,
    CalculationResult,
    FoundationInput,
    MeyerhofResult,
    SoilInput,
    SptTestInput,
)

__all__ = [
    "correction",
    "soil",
    "terzaghi",
    "meyerhof",
    "helpers",
    "SptTestInput",
    "SoilInput",
    "FoundationInput",
    "BearingCapacityResult",
    "MeyerhofResult",
    "CalculationResult",
]
