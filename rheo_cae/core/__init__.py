"""rheo_cae.core - 流体構成則の抽象インタフェース定義・材料定数・戻り値型.

Protocol:
  FluidConstitutiveProtocol — evaluate / check / working_space_dimension / strain_size
"""

from rheo_cae.core.constitutive import FluidConstitutiveProtocol
from rheo_cae.core.properties import PROPERTY_NAMES, FluidProperties, MaterialPropertyError
from rheo_cae.core.results import FluidPointsResult, FluidResponse

__all__ = [
    "FluidConstitutiveProtocol",
    "FluidProperties",
    "MaterialPropertyError",
    "PROPERTY_NAMES",
    "FluidResponse",
    "FluidPointsResult",
]
