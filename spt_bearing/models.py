"""Модели данных для расчёта несущей способности по SPT."""

from typing import Literal

from pydantic import BaseModel, Field, computed_field, model_validator

GAMMA_W = 9.81  # Удельный вес воды, кН/м³

HammerType = Literal["safety", "donut", "automatic"]
SoilType = Literal["granular", "cohesive"]
FootingShape = Literal["strip", "square", "circular"]
FailureType = Literal["local", "general"]


# --- Исходные данные ---


class SptTestInput(BaseModel):
    """Полевые данные испытания SPT."""

    n_field: float = Field(ge=0, description="Число ударов N (на 30 см)")
    depth: float = Field(gt=0, description="Глубина испытания z, м")
    hammer_type: HammerType = Field(default="safety", description="Тип молота")
    borehole_diameter: float = Field(default=65.0, gt=0, description="Диаметр скважины, мм")
    has_liner: bool = Field(default=True, description="Пробоотборник с гильзой")
    rod_length: float = Field(gt=0, description="Длина штанг, м")


class SoilInput(BaseModel):
    """Грунт под подошвой."""

    soil_type: SoilType = Field(default="granular", description="Тип грунта")
    cohesion: float = Field(ge=0, default=0.0, description="Удельное сцепление c, кПа")
    water_table_depth: float | None = Field(
        default=None, ge=0, description="Глубина УГВ от поверхности, м (None — УГВ нет)"
    )
    gamma: float | None = Field(
        default=None, gt=0, description="Удельный вес γ, кН/м³ (None — оценка по N60)"
    )

    @model_validator(mode="after")
    def drop_cohesion_for_granular(self):
        """Для несвязного грунта сцепление не учитывается."""
        if self.soil_type == "granular":
            self.cohesion = 0.0
        return self


class FoundationInput(BaseModel):
    """Фундамент (отдельная или ленточная подошва)."""

    shape: FootingShape = Field(default="square", description="Форма подошвы")
    B: float = Field(gt=0, description="Ширина (диаметр) подошвы, м")
    Df: float = Field(gt=0, description="Глубина заложения, м")
    FS: float = Field(default=3.0, gt=0, description="Коэффициент запаса")


# --- Промежуточные величины ---


class CorrectionFactors(BaseModel):
    """Поправочные коэффициенты к N (Skempton, 1986)."""

    eta_H: float = Field(description="КПД молота, %")
    eta_B: float = Field(description="Поправка на диаметр скважины")
    eta_S: float = Field(description="Поправка на пробоотборник")
    eta_R: float = Field(description="Поправка на длину штанг")

    @computed_field
    @property
    def product(self) -> float:
        """ηH·ηB·ηS·ηR."""
        return self.eta_H * self.eta_B * self.eta_S * self.eta_R


class SoilClassification(BaseModel):
    """Описательная классификация по N60."""

    density: str
    consistency: str


# --- Результаты ---


class BearingCapacityResult(BaseModel):
    """Несущая способность по Терцаги."""

    qu: float = Field(description="Предельная несущая способность, кПа")
    Nc: float
    Nq: float
    Ng: float
    q: float = Field(description="Пригрузка γ·Df, кПа")
    gamma_eff: float = Field(description="γ под подошвой с учётом УГВ, кН/м³")
    phi_used: float = Field(description="φ после учёта местного сдвига, °")
    c_used: float = Field(description="c после учёта местного сдвига, кПа")
    sc: float
    sg: float


class MeyerhofResult(BaseModel):
    """Допускаемое давление по прямому методу Мейерхофа."""

    q_adm: float = Field(description="Допускаемое давление, кПа")
    Kd: float = Field(description="Коэффициент глубины (≤ 1.33)")


class CalculationResult(BaseModel):
    """Результаты расчёта."""

    factors: CorrectionFactors
    n60: float
    sigma_v: float = Field(description="σ'v на глубине испытания, кПа")
    cn: float
    n160: float
    gamma: float = Field(description="Принятый удельный вес, кН/м³")
    gamma_estimated: bool
    phi_estimated: float = Field(description="φ по Peck-Hanson-Thornburn, °")
    classification: SoilClassification
    failure_type: FailureType
    terzaghi: BearingCapacityResult
    q_adm: float = Field(description="Допускаемое давление qu/FS, кПа")
    meyerhof: MeyerhofResult | None = Field(
        default=None, description="Проверка по Мейерхофу (только несвязные грунты)"
    )

    @computed_field
    @property
    def q_adm_t_m2(self) -> float:
        """Допускаемое давление в т/м²."""
        return self.q_adm / GAMMA_W
