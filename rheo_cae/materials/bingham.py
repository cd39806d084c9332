"""正則化 Bingham 流体（平面 2D）.

  mu_eff = mu + (1 - exp(-m g)) tau_y / g     (g >= tol)
  mu_eff = mu + tau_y m                       (g <  tol)
"""

from __future__ import annotations

import numpy as np

from rheo_cae.core.properties import FluidProperties
from rheo_cae.materials.fluid_base import STRAIN_RATE_TOLERANCE, FluidLaw2D
from rheo_cae.materials.registry import register_fluid_law


@register_fluid_law
class Bingham2DLaw(FluidLaw2D):
    """平面正則化 Bingham 構成則（Herschel-Bulkley の n = 1）."""

    name = "Bingham2DLaw"
    checked_properties = (
        "DYNAMIC_VISCOSITY",
        "YIELD_SHEAR",
        "ADAPTIVE_EXPONENT",
        "BULK_MODULUS",
    )
    regularized = True

    def _viscosity(self, gamma_eq: float, props: FluidProperties) -> float:
        mu = props.dynamic_viscosity
        tau_y = props.yield_shear
        m = props.adaptive_exponent
        if gamma_eq < STRAIN_RATE_TOLERANCE:
            return mu + tau_y * m

        regularization = 1.0 - np.exp(-m * gamma_eq)
        return float(mu + regularization * tau_y / gamma_eq)
