"""正則化 Herschel-Bulkley 流体（平面 2D）.

有効粘性（Papanastasiou 型正則化）:
  mu_eff = K g^(n-1) + (1 - exp(-m g)) tau_y / g      (g >= tol)
  mu_eff = tau_y m                                    (g <  tol)

  K: DYNAMIC_VISCOSITY（稠度係数）, n: FLOW_INDEX, tau_y: YIELD_SHEAR,
  m: ADAPTIVE_EXPONENT, g: 等価ひずみ速度

g → 0 で正則化項 (1 - exp(-m g)) tau_y / g → tau_y m。
べき乗項は n > 1 のときのみ 0 に収束する（n = 1 では K が残る）が、
g < tol ではべき乗項を落として正則化項の極限値のみを使う。

参考文献:
  - Papanastasiou (1987) J. Rheol. 31, 385-404.
  - Mitsoulis (2007) Rheology Reviews, 135-178.
"""

from __future__ import annotations

import numpy as np

from rheo_cae.core.properties import FluidProperties
from rheo_cae.materials.fluid_base import STRAIN_RATE_TOLERANCE, FluidLaw2D
from rheo_cae.materials.registry import register_fluid_law


@register_fluid_law
class HerschelBulkley2DLaw(FluidLaw2D):
    """平面正則化 Herschel-Bulkley 構成則.

    入力: e = [e_xx, e_yy, e_xy] (3成分)
    出力: 偏差応力 s (3,), 接線演算子 D (3x3, 要求時のみ)

    Example:
        law = HerschelBulkley2DLaw()
        props = FluidProperties(dynamic_viscosity=10.0, yield_shear=5.0,
                                flow_index=1.0, adaptive_exponent=1000.0)
        law.check(props)
        result = law.evaluate(np.array([1.0, -1.0, 0.5]), props)
    """

    name = "HerschelBulkley2DLaw"
    checked_properties = (
        "DYNAMIC_VISCOSITY",
        "YIELD_SHEAR",
        "FLOW_INDEX",
        "ADAPTIVE_EXPONENT",
        "BULK_MODULUS",
    )
    regularized = True

    def _viscosity(self, gamma_eq: float, props: FluidProperties) -> float:
        tau_y = props.yield_shear
        m = props.adaptive_exponent
        if gamma_eq < STRAIN_RATE_TOLERANCE:
            return tau_y * m

        regularization = 1.0 - np.exp(-m * gamma_eq)
        power_term = props.dynamic_viscosity * np.power(gamma_eq, props.flow_index - 1.0)
        return float(power_term + regularization * tau_y / gamma_eq)
