"""レオメータ計測データ → Herschel-Bulkley 材料定数のフィッティング.

単純せん断の流動曲線 (gamma_dot_i, tau_i) に
  tau = tau_y + K gamma_dot^n
を非負制約付き最小二乗で当てはめる。

正則化指数 m (ADAPTIVE_EXPONENT) は流動曲線から決まらないので、
to_properties() で別途与える。目安は m >> 1 / (対象とする最小ひずみ速度)。
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from rheo_cae.core.properties import FluidProperties


@dataclass(frozen=True)
class FlowCurveFit:
    """流動曲線フィッティング結果.

    Attributes:
        yield_shear: tau_y
        dynamic_viscosity: 稠度係数 K
        flow_index: べき指数 n
        residual_norm: 残差の 2 ノルム
    """

    yield_shear: float
    dynamic_viscosity: float
    flow_index: float
    residual_norm: float

    def predict(self, shear_rates: np.ndarray) -> np.ndarray:
        """フィットした流動曲線 tau(gamma_dot)."""
        g = np.asarray(shear_rates, dtype=float)
        return self.yield_shear + self.dynamic_viscosity * np.power(g, self.flow_index)

    def to_properties(
        self,
        adaptive_exponent: float,
        bulk_modulus: float = 0.0,
    ) -> FluidProperties:
        """HerschelBulkley2DLaw 用の FluidProperties を返す."""
        return FluidProperties(
            dynamic_viscosity=self.dynamic_viscosity,
            yield_shear=self.yield_shear,
            flow_index=self.flow_index,
            adaptive_exponent=adaptive_exponent,
            bulk_modulus=bulk_modulus,
        )


def fit_herschel_bulkley(
    shear_rates: np.ndarray,
    shear_stresses: np.ndarray,
) -> FlowCurveFit:
    """流動曲線データから (tau_y, K, n) を求める.

    Args:
        shear_rates: (N,) せん断速度。0 以下の点は除外する。
        shear_stresses: (N,) せん断応力

    Returns:
        FlowCurveFit

    Raises:
        ValueError: 配列形状の不一致、または正のせん断速度の点が3点未満
    """
    from scipy.optimize import least_squares

    g_all = np.asarray(shear_rates, dtype=float)
    tau_all = np.asarray(shear_stresses, dtype=float)
    if g_all.ndim != 1 or g_all.shape != tau_all.shape:
        raise ValueError(
            f"shear_rates と shear_stresses は同じ長さの1次元配列: "
            f"{g_all.shape} vs {tau_all.shape}"
        )

    mask = g_all > 0.0
    g = g_all[mask]
    tau = tau_all[mask]
    if g.size < 3:
        raise ValueError(f"正のせん断速度の点が3点以上必要: {g.size} 点")

    # 初期推定: 最小速度点の応力の半分を降伏応力、n=1 の直線
    order = np.argsort(g)
    tau_y_init = max(0.5 * float(tau[order[0]]), 0.0)
    K_init = max((float(tau[order[-1]]) - tau_y_init) / float(g[order[-1]]), 1e-12)

    def _residuals(params: np.ndarray) -> np.ndarray:
        tau_y, K, n = params
        return tau_y + K * np.power(g, n) - tau

    result = least_squares(
        _residuals,
        x0=[tau_y_init, K_init, 1.0],
        bounds=([0.0, 0.0, 0.0], [np.inf, np.inf, np.inf]),
        method="trf",
        x_scale="jac",
        ftol=1e-12,
        xtol=1e-12,
        gtol=1e-12,
    )

    tau_y_fit, K_fit, n_fit = result.x
    return FlowCurveFit(
        yield_shear=float(tau_y_fit),
        dynamic_viscosity=float(K_fit),
        flow_index=float(n_fit),
        residual_norm=float(np.linalg.norm(result.fun)),
    )
