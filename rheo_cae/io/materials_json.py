"""材料定義ファイル（Kratos 形式 JSON）の読み書き.

ファイル構造:
  {
    "properties": [
      {
        "model_part_name": "PfemFluidModelPart.Fluid",
        "properties_id": 1,
        "Material": {
          "constitutive_law": {"name": "HerschelBulkley2DLaw"},
          "Variables": {
            "DYNAMIC_VISCOSITY": 10.0,
            "YIELD_SHEAR": 5.0,
            "FLOW_INDEX": 1.0,
            "ADAPTIVE_EXPONENT": 1000.0,
            "BULK_MODULUS": 2.1e9,
            "DENSITY": 1000.0
          }
        }
      }
    ]
  }

読み込み時に構成則の check() を1回実行する。
構成則が使わない変数（DENSITY 等）は extra_variables に保持する。
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from rheo_cae.core.properties import PROPERTY_NAMES, FluidProperties
from rheo_cae.materials.fluid_base import FluidLaw2D
from rheo_cae.materials.registry import create_fluid_law


@dataclass
class FluidMaterial:
    """材料ファイル1エントリ.

    Attributes:
        model_part_name: 適用先モデルパート名
        properties_id: プロパティ ID
        law: 構成則インスタンス
        properties: 構成則が参照する材料定数
        extra_variables: 構成則が参照しない変数（密度など）
    """

    model_part_name: str
    properties_id: int
    law: FluidLaw2D
    properties: FluidProperties
    extra_variables: dict[str, Any] = field(default_factory=dict)


def _parse_entry(entry: dict[str, Any], index: int) -> FluidMaterial:
    try:
        material = entry["Material"]
        law_name = material["constitutive_law"]["name"]
    except (KeyError, TypeError):
        raise ValueError(
            f"properties[{index}]: Material.constitutive_law.name が未定義"
        ) from None

    variables = material.get("Variables", {})
    if not isinstance(variables, dict):
        raise ValueError(
            f"properties[{index}].Variables は辞書: {type(variables).__name__}"
        )

    known: dict[str, float] = {}
    extra: dict[str, Any] = {}
    for key, value in variables.items():
        if key not in PROPERTY_NAMES:
            extra[key] = value
            continue
        try:
            known[key] = float(value)
        except (TypeError, ValueError):
            raise ValueError(
                f"properties[{index}].Variables.{key} は数値: {value!r}"
            ) from None

    law = create_fluid_law(law_name)
    props = FluidProperties.from_mapping(known)
    law.check(props)

    return FluidMaterial(
        model_part_name=str(entry.get("model_part_name", "")),
        properties_id=int(entry.get("properties_id", index + 1)),
        law=law,
        properties=props,
        extra_variables=extra,
    )


def parse_materials(data: dict[str, Any]) -> list[FluidMaterial]:
    """読み込み済み辞書から FluidMaterial のリストを作る.

    Raises:
        ValueError: "properties" リストがない、構成則名が未定義/未登録、
            Variables が辞書でない、材料定数が数値でない場合
        MaterialPropertyError: 材料定数が負の場合
    """
    entries = data.get("properties") if isinstance(data, dict) else None
    if not isinstance(entries, list):
        raise ValueError("材料ファイルに 'properties' リストがない")
    return [_parse_entry(entry, i) for i, entry in enumerate(entries)]


def read_materials_json(filepath: str | Path) -> list[FluidMaterial]:
    """Kratos 形式の材料 JSON を読み込む."""
    with open(filepath, encoding="utf-8") as fh:
        data = json.load(fh)
    return parse_materials(data)


def write_materials_json(
    materials: list[FluidMaterial],
    filepath: str | Path,
    *,
    indent: int = 4,
) -> str:
    """FluidMaterial のリストを Kratos 形式の材料 JSON に書き出す.

    Returns:
        生成されたファイルパス
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)

    entries = []
    for mat in materials:
        variables: dict[str, Any] = mat.properties.to_dict()
        variables.update(mat.extra_variables)
        entries.append(
            {
                "model_part_name": mat.model_part_name,
                "properties_id": mat.properties_id,
                "Material": {
                    "constitutive_law": {"name": mat.law.name},
                    "Variables": variables,
                },
            }
        )

    with open(path, "w", encoding="utf-8") as fh:
        json.dump({"properties": entries}, fh, indent=indent, ensure_ascii=False)

    return str(path)
