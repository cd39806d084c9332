"""平面（2D）流体構成則の共通部.

ひずみ速度 Voigt ベクトル e = [e_xx, e_yy, e_xy] から:
  1. 等価ひずみ速度   g = sqrt(2 e_xx^2 + 2 e_yy^2 + 4 e_xy^2)
  2. 有効粘性         mu_eff(g)            ← 各レオロジーモデルが定義
  3. 偏差応力         s = 2 mu_eff (e - m tr(e)/3),  m = [1, 1, 0]
  4. 接線演算子       D = mu_eff [[4/3, -2/3, 0], [-2/3, 4/3, 0], [0, 0, 2]]

偏差射影は 3D の d' = d - I tr(d)/3 を平面に射影したもの（tr/2 ではない）。
D @ e は 3. の応力と一致する。
"""

from __future__ import annotations

import warnings
from abc import ABC, abstractmethod

import numpy as np

from rheo_cae.core.properties import FluidProperties, MaterialPropertyError
from rheo_cae.core.results import FluidResponse

# g がこれ未満のとき各モデルの極限値を使う（1/g の特異性回避）
STRAIN_RATE_TOLERANCE = 1e-8

# 平面粘性演算子の形状（mu_eff = 1）
_D_VISC_UNIT = np.array(
    [
        [4.0 / 3.0, -2.0 / 3.0, 0.0],
        [-2.0 / 3.0, 4.0 / 3.0, 0.0],
        [0.0, 0.0, 2.0],
    ],
    dtype=float,
)


def equivalent_strain_rate(strain_rate: np.ndarray) -> float:
    """等価（一般化）ひずみ速度 g を返す.

    Args:
        strain_rate: (3,) [e_xx, e_yy, e_xy]

    Returns:
        g = sqrt(2 e_xx^2 + 2 e_yy^2 + 4 e_xy^2)
    """
    e = strain_rate
    return float(np.sqrt(2.0 * e[0] * e[0] + 2.0 * e[1] * e[1] + 4.0 * e[2] * e[2]))


def deviatoric_stress_2d(mu_eff: float, strain_rate: np.ndarray) -> np.ndarray:
    """偏差応力 s = 2 mu_eff (e - m tr(e)/3) を返す（せん断成分は補正なし）."""
    e = strain_rate
    trace = e[0] + e[1]
    return np.array(
        [
            2.0 * mu_eff * (e[0] - trace / 3.0),
            2.0 * mu_eff * (e[1] - trace / 3.0),
            2.0 * mu_eff * e[2],
        ],
        dtype=float,
    )


def constitutive_viscous_2d(mu_eff: float) -> np.ndarray:
    """平面等方粘性の接線演算子 D (3,3) を返す.

    Args:
        mu_eff: 有効粘性

    Returns:
        D: (3, 3)。D @ e は deviatoric_stress_2d(mu_eff, e) に一致する。
    """
    return mu_eff * _D_VISC_UNIT


class FluidLaw2D(ABC):
    """平面流体構成則の基底クラス（FluidConstitutiveProtocol 適合）.

    サブクラスは name, checked_properties, _viscosity() を定義する。
    インスタンスは状態を持たないので、複数積分点・複数スレッドから共有してよい。
    """

    name = "FluidLaw2D"
    # check() で非負を確認する定数（検査順）
    checked_properties: tuple[str, ...] = ("DYNAMIC_VISCOSITY", "BULK_MODULUS")
    # 降伏応力を指数関数で正則化するモデルか
    regularized = False

    @abstractmethod
    def _viscosity(self, gamma_eq: float, props: FluidProperties) -> float:
        """等価ひずみ速度 g での有効粘性 mu_eff."""

    def effective_viscosity(self, strain_rate: np.ndarray, props: FluidProperties) -> float:
        """有効粘性 mu_eff のみを返す."""
        e = np.asarray(strain_rate, dtype=float)
        return self._viscosity(equivalent_strain_rate(e), props)

    def evaluate(
        self,
        strain_rate: np.ndarray,
        props: FluidProperties,
        *,
        compute_tangent: bool = False,
    ) -> FluidResponse:
        """偏差 Cauchy 応力を計算する.

        Args:
            strain_rate: (3,) [e_xx, e_yy, e_xy]
            props: 材料定数（check() 済みであること）
            compute_tangent: True の場合のみ接線演算子を構築

        Returns:
            FluidResponse(stress, tangent, effective_viscosity)
        """
        e = np.asarray(strain_rate, dtype=float)
        mu_eff = self._viscosity(equivalent_strain_rate(e), props)
        stress = deviatoric_stress_2d(mu_eff, e)
        tangent = constitutive_viscous_2d(mu_eff) if compute_tangent else None
        return FluidResponse(stress=stress, tangent=tangent, effective_viscosity=mu_eff)

    def check(self, props: FluidProperties) -> None:
        """材料定数が非負であることを確認する（セットアップ時に1回）.

        Raises:
            MaterialPropertyError: 最初に見つかった負（または NaN）の定数
        """
        for key in self.checked_properties:
            value = props[key]
            if not value >= 0.0:
                raise MaterialPropertyError(key, value, self.name)

        if self.regularized and props.yield_shear > 0.0 and props.adaptive_exponent == 0.0:
            warnings.warn(
                f"{self.name}: ADAPTIVE_EXPONENT=0 のため YIELD_SHEAR={props.yield_shear} "
                "は応力に寄与しない",
                UserWarning,
                stacklevel=2,
            )

    def working_space_dimension(self) -> int:
        return 2

    def strain_size(self) -> int:
        return 3

    def info(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{self.name}()"
