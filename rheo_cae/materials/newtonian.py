from __future__ import annotations

from rheo_cae.core.properties import FluidProperties
from rheo_cae.materials.fluid_base import FluidLaw2D
from rheo_cae.materials.registry import register_fluid_law


@register_fluid_law
class Newtonian2DLaw(FluidLaw2D):
    """平面ニュートン流体: mu_eff = DYNAMIC_VISCOSITY（ひずみ速度に依存しない）."""

    name = "Newtonian2DLaw"
    checked_properties = ("DYNAMIC_VISCOSITY", "BULK_MODULUS")

    def _viscosity(self, gamma_eq: float, props: FluidProperties) -> float:
        return props.dynamic_viscosity
