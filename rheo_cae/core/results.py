"""メソッド戻り値の型定義.

構成則・積分点ループが返すデータ構造を NamedTuple で定義する。
"""

from __future__ import annotations

from typing import NamedTuple

import numpy as np


class FluidResponse(NamedTuple):
    """1積分点での流体構成則の評価結果.

    Attributes:
        stress: (3,) 偏差 Cauchy 応力 [s_xx, s_yy, s_xy]
        tangent: (3, 3) 接線演算子。要求しなかった場合は None。
        effective_viscosity: 有効粘性 mu_eff
    """

    stress: np.ndarray
    tangent: np.ndarray | None
    effective_viscosity: float


class FluidPointsResult(NamedTuple):
    """複数積分点の一括評価結果.

    Attributes:
        stress: (n, 3) 偏差応力
        tangent: (n, 3, 3) 接線演算子。要求しなかった場合は None。
        effective_viscosity: (n,) 有効粘性
    """

    stress: np.ndarray
    tangent: np.ndarray | None
    effective_viscosity: np.ndarray
