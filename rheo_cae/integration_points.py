"""複数積分点での流体構成則の一括評価.

要素ループ側が集めた積分点ごとのひずみ速度 (n, 3) に対して
構成則を1点ずつ評価し、応力・接線・有効粘性を積み上げて返す。
"""

from __future__ import annotations

import numpy as np

from rheo_cae.core.constitutive import FluidConstitutiveProtocol
from rheo_cae.core.properties import FluidProperties
from rheo_cae.core.results import FluidPointsResult


def evaluate_integration_points(
    law: FluidConstitutiveProtocol,
    strain_rates: np.ndarray,
    props: FluidProperties,
    *,
    compute_tangent: bool = False,
) -> FluidPointsResult:
    """積分点ごとに law.evaluate() を呼ぶ.

    Args:
        law: 流体構成則
        strain_rates: (n, strain_size) ひずみ速度
        props: 材料定数（全積分点で共有）
        compute_tangent: 接線演算子を計算するか

    Returns:
        FluidPointsResult(stress (n,3), tangent (n,3,3) | None, effective_viscosity (n,))

    Raises:
        ValueError: strain_rates の形状が (n, strain_size) でない場合
    """
    ns = law.strain_size()
    rates = np.asarray(strain_rates, dtype=float)
    if rates.ndim != 2 or rates.shape[1] != ns:
        raise ValueError(f"strain_rates は (n, {ns}) 配列: shape={rates.shape}")

    n_points = rates.shape[0]
    stress = np.zeros((n_points, ns), dtype=float)
    mu_eff = np.zeros(n_points, dtype=float)
    tangent = np.zeros((n_points, ns, ns), dtype=float) if compute_tangent else None

    for ip in range(n_points):
        result = law.evaluate(rates[ip], props, compute_tangent=compute_tangent)
        stress[ip] = result.stress
        mu_eff[ip] = result.effective_viscosity
        if tangent is not None:
            tangent[ip] = result.tangent

    return FluidPointsResult(stress=stress, tangent=tangent, effective_viscosity=mu_eff)
