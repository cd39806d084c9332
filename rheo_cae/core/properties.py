"""流体材料定数の保持.

FluidProperties は構成則から参照されるだけの読み取り専用データ。
構成則はこれを所有せず、評価ごとに借用する。
未指定の定数は 0.0（Kratos の Properties と同じく「未設定 = 0」）。
"""

from __future__ import annotations

import warnings
from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields
from typing import Any

# 外部キー名（材料ファイル・診断メッセージで使う大文字名）→ 属性名
PROPERTY_NAMES: dict[str, str] = {
    "DYNAMIC_VISCOSITY": "dynamic_viscosity",
    "YIELD_SHEAR": "yield_shear",
    "FLOW_INDEX": "flow_index",
    "ADAPTIVE_EXPONENT": "adaptive_exponent",
    "BULK_MODULUS": "bulk_modulus",
}


class MaterialPropertyError(ValueError):
    """材料定数が許容範囲外.

    Attributes:
        parameter: 定数名（例: "YIELD_SHEAR"）
        value: 不正な値
    """

    def __init__(self, parameter: str, value: float, law: str = "") -> None:
        self.parameter = parameter
        self.value = value
        self.law = law
        where = f" ({law})" if law else ""
        super().__init__(f"{parameter} は非負値{where}: {value}")


@dataclass(frozen=True)
class FluidProperties:
    """流体材料定数.

    Attributes:
        dynamic_viscosity: 粘性係数 / 稠度係数 K [Pa s^n]
        yield_shear: 降伏せん断応力 tau_y [Pa]
        flow_index: べき指数 n [-]
        adaptive_exponent: 正則化指数 m [s]（Papanastasiou）
        bulk_modulus: 体積弾性率 [Pa]（圧力側の構成則で使用）
    """

    dynamic_viscosity: float = 0.0
    yield_shear: float = 0.0
    flow_index: float = 0.0
    adaptive_exponent: float = 0.0
    bulk_modulus: float = 0.0

    def __getitem__(self, key: str) -> float:
        """大文字キーでの参照: props["YIELD_SHEAR"]."""
        try:
            return getattr(self, PROPERTY_NAMES[key])
        except KeyError:
            raise KeyError(f"未知の材料定数: {key}") from None

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> FluidProperties:
        """辞書から生成する.

        キーは大文字名（"DYNAMIC_VISCOSITY"）と属性名（"dynamic_viscosity"）
        のどちらでもよい。未知のキーは無視して UserWarning を出す。
        """
        attrs = {f.name for f in fields(cls)}
        kwargs: dict[str, float] = {}
        for key, value in values.items():
            attr = PROPERTY_NAMES.get(key, key)
            if attr not in attrs:
                warnings.warn(f"未知の材料定数 '{key}' を無視", UserWarning, stacklevel=2)
                continue
            kwargs[attr] = float(value)
        return cls(**kwargs)

    def to_dict(self) -> dict[str, float]:
        """大文字キーの辞書を返す（材料ファイル出力用）."""
        values = asdict(self)
        return {key: values[attr] for key, attr in PROPERTY_NAMES.items()}
