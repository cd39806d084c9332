"""rheo_cae.materials - 平面流体構成則.

登録名:
  Newtonian2DLaw        ニュートン流体
  Bingham2DLaw          正則化 Bingham
  HerschelBulkley2DLaw  正則化 Herschel-Bulkley
"""

from rheo_cae.materials.bingham import Bingham2DLaw
from rheo_cae.materials.fluid_base import (
    STRAIN_RATE_TOLERANCE,
    FluidLaw2D,
    constitutive_viscous_2d,
    deviatoric_stress_2d,
    equivalent_strain_rate,
)
from rheo_cae.materials.herschel_bulkley import HerschelBulkley2DLaw
from rheo_cae.materials.newtonian import Newtonian2DLaw
from rheo_cae.materials.registry import (
    create_fluid_law,
    register_fluid_law,
    registered_fluid_laws,
)

__all__ = [
    "STRAIN_RATE_TOLERANCE",
    "FluidLaw2D",
    "Newtonian2DLaw",
    "Bingham2DLaw",
    "HerschelBulkley2DLaw",
    "constitutive_viscous_2d",
    "deviatoric_stress_2d",
    "equivalent_strain_rate",
    "create_fluid_law",
    "register_fluid_law",
    "registered_fluid_laws",
]
