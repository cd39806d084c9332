"""流体構成則（レオロジーモデル）の抽象インタフェース定義.

Protocol 定義:
  FluidConstitutiveProtocol — ひずみ速度 → 偏差 Cauchy 応力（+ 接線演算子）。

流体構成則は状態変数を持たない。evaluate() は入力（ひずみ速度・材料定数）
のみの純関数であり、積分点ごと・時間ステップごとに独立に呼ばれる。
材料定数の妥当性検査 check() はセットアップ時に一度だけ呼ぶ。

適合クラス例:
  - Newtonian2DLaw
  - Bingham2DLaw
  - HerschelBulkley2DLaw
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

import numpy as np

if TYPE_CHECKING:
    from rheo_cae.core.properties import FluidProperties
    from rheo_cae.core.results import FluidResponse


@runtime_checkable
class FluidConstitutiveProtocol(Protocol):
    """流体構成則の共通インタフェース.

    平面問題（2D）の場合:
      strain_rate: (3,) [e_xx, e_yy, e_xy]（せん断は工学ひずみ速度）
      stress:      (3,) [s_xx, s_yy, s_xy]（偏差成分のみ、圧力項を含まない）
      tangent:     (3, 3)
    """

    name: str

    def evaluate(
        self,
        strain_rate: np.ndarray,
        props: FluidProperties,
        *,
        compute_tangent: bool = False,
    ) -> FluidResponse:
        """偏差応力と（要求時のみ）接線演算子を計算する.

        Args:
            strain_rate: ひずみ速度ベクトル (Voigt)
            props: 材料定数（読み取り専用、呼び出し側が所有）
            compute_tangent: True の場合のみ tangent を構築する

        Returns:
            FluidResponse(stress, tangent, effective_viscosity)
        """
        ...

    def check(self, props: FluidProperties) -> None:
        """材料定数の許容性を検査する.

        Raises:
            MaterialPropertyError: 負の材料定数がある場合
        """
        ...

    def working_space_dimension(self) -> int:
        """物理空間の次元."""
        ...

    def strain_size(self) -> int:
        """ひずみ（速度）ベクトルの成分数."""
        ...
