#!/usr/bin/env python3
"""平面流体構成則の見かけの流動曲線を表示するスクリプト.

単純せん断 e = [0, 0, g/2] をひずみ速度 g について掃引し、
各構成則のせん断応力 s_xy と有効粘性 mu_eff を出力する。

Usage:
    python examples/run_flow_curves.py                        # 全構成則
    python examples/run_flow_curves.py HerschelBulkley2DLaw   # 指定構成則のみ
"""

from __future__ import annotations

import sys
from pathlib import Path

import numpy as np

# プロジェクトルートを PYTHONPATH に追加
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))

from rheo_cae.core.properties import FluidProperties
from rheo_cae.integration_points import evaluate_integration_points
from rheo_cae.materials import create_fluid_law, registered_fluid_laws

# 泥流相当の材料定数
PROPS = FluidProperties(
    dynamic_viscosity=10.0,
    yield_shear=5.0,
    flow_index=0.6,
    adaptive_exponent=1000.0,
    bulk_modulus=2.1e9,
)


def run_flow_curve(law_name: str) -> None:
    """1構成則の流動曲線を表示する."""
    print("=" * 60)
    print(law_name)
    print("=" * 60)

    law = create_fluid_law(law_name)
    law.check(PROPS)

    shear_rates = np.concatenate([[0.0], np.logspace(-4, 2, 7)])
    strain_rates = np.zeros((shear_rates.size, 3))
    strain_rates[:, 2] = 0.5 * shear_rates

    result = evaluate_integration_points(law, strain_rates, PROPS)

    print(f"  {'g [1/s]':>12s}  {'s_xy [Pa]':>12s}  {'mu_eff [Pa s]':>14s}")
    for g, s, mu in zip(shear_rates, result.stress[:, 2], result.effective_viscosity):
        print(f"  {g:12.4e}  {s:12.4e}  {mu:14.4e}")
    print()


def main(argv: list[str]) -> None:
    names = argv if argv else registered_fluid_laws()
    for name in names:
        run_flow_curve(name)


if __name__ == "__main__":
    main(sys.argv[1:])
