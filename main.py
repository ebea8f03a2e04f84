import logging
import sys
import tomllib
from pathlib import Path

import tomli_w

from spt_bearing.calculator import calculate
from spt_bearing.correction import HAMMER_TYPES
from spt_bearing.models import CalculationResult, FoundationInput, SoilInput, SptTestInput

logger = logging.getLogger(__name__)

SHAPE_LABELS = {"strip": "Corrida", "square": "Cuadrada", "circular": "Circular"}


def load_input(path: str) -> tuple[SptTestInput, SoilInput, FoundationInput, dict]:
    """Загрузить входные данные из TOML."""
    with open(path, "rb") as f:
        data = tomllib.load(f)

    spt = SptTestInput(**data["spt"])
    soil_input = SoilInput(**data.get("soil", {}))
    foundation = FoundationInput(**data["foundation"])

    params = {
        "name": data.get("project", {}).get("name", ""),
    }

    return spt, soil_input, foundation, params


def export_toml(
    result: CalculationResult,
    spt: SptTestInput,
    soil_input: SoilInput,
    foundation: FoundationInput,
    name: str = "",
) -> str:
    """Экспортировать исходные данные и результаты в TOML-строку."""
    doc = {
        "project": {"name": name},
        "spt": spt.model_dump(),
        "soil": soil_input.model_dump(exclude_none=True),
        "foundation": foundation.model_dump(),
        "result": result.model_dump(exclude_none=True),
    }
    return tomli_w.dumps(doc)


def main(input_file: str = "input.toml") -> CalculationResult:
    """Загрузка → расчёт → вывод → файл результатов."""
    spt, soil_input, foundation, params = load_input(input_file)
    result = calculate(spt, soil_input, foundation)

    hammer = HAMMER_TYPES[spt.hammer_type]
    t = result.terzaghi
    print(f"Проект: {params['name']}")
    print(f"Молот: {hammer.label} (η={hammer.efficiency:g}%)")
    print(f"N60 = {result.n60:.2f}, σ'v = {result.sigma_v:.2f} кПа, "
          f"CN = {result.cn:.3f}, (N1)60 = {result.n160:.2f}")
    print(f"Грунт: {result.classification.density} / {result.classification.consistency}, "
          f"φ = {result.phi_estimated:.2f}°, γ = {result.gamma:.2f} кН/м³")
    print(f"Сдвиг: {result.failure_type}, φ' = {t.phi_used:.2f}°, c' = {t.c_used:.2f} кПа")
    print(f"Подошва: {SHAPE_LABELS[foundation.shape]}, B = {foundation.B} м, Df = {foundation.Df} м")
    print(f"Nc = {t.Nc:.2f}, Nq = {t.Nq:.2f}, Nγ = {t.Ng:.2f}")
    print(f"qu = {t.qu:.1f} кПа, qadm (FS={foundation.FS:g}) = {result.q_adm:.1f} кПа "
          f"({result.q_adm_t_m2:.2f} т/м²)")
    if result.meyerhof is not None:
        print(f"Мейерхоф: Kd = {result.meyerhof.Kd:.2f}, qadm = {result.meyerhof.q_adm:.1f} кПа")

    output = Path(input_file).with_suffix(".result.toml")
    output.write_text(
        export_toml(result, spt, soil_input, foundation, params["name"]), encoding="utf-8"
    )
    logger.info("Results written to %s", output)

    return result


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    input_file = sys.argv[1] if len(sys.argv) > 1 else "input.toml"
    main(input_file)
