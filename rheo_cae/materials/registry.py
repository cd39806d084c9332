"""流体構成則の名前登録.

材料ファイルの "constitutive_law": {"name": ...} から構成則を選ぶ。
型による分岐はせず、登録名 → クラスで引く。
"""

from __future__ import annotations

from typing import TypeVar

from rheo_cae.materials.fluid_base import FluidLaw2D

_LawT = TypeVar("_LawT", bound=type[FluidLaw2D])

_REGISTRY: dict[str, type[FluidLaw2D]] = {}


def register_fluid_law(cls: _LawT) -> _LawT:
    """クラスデコレータ: cls.name で構成則を登録する."""
    if cls.name in _REGISTRY and _REGISTRY[cls.name] is not cls:
        raise ValueError(f"構成則名 '{cls.name}' は登録済み: {_REGISTRY[cls.name]!r}")
    _REGISTRY[cls.name] = cls
    return cls


def create_fluid_law(name: str) -> FluidLaw2D:
    """登録名から構成則インスタンスを生成する.

    Raises:
        ValueError: 未登録の名前
    """
    try:
        cls = _REGISTRY[name]
    except KeyError:
        known = ", ".join(sorted(_REGISTRY))
        raise ValueError(f"未登録の構成則 '{name}'（登録済み: {known}）") from None
    return cls()


def registered_fluid_laws() -> list[str]:
    """登録済みの構成則名（ソート済み）."""
    return sorted(_REGISTRY)
