"""rheo-cae: 有限要素時間積分ループ用の平面粘塑性流体構成則."""

from rheo_cae.core import (
    FluidConstitutiveProtocol,
    FluidPointsResult,
    FluidProperties,
    FluidResponse,
    MaterialPropertyError,
)
from rheo_cae.integration_points import evaluate_integration_points
from rheo_cae.materials import (
    Bingham2DLaw,
    HerschelBulkley2DLaw,
    Newtonian2DLaw,
    create_fluid_law,
    registered_fluid_laws,
)

__version__ = "0.1.0"

__all__ = [
    "FluidConstitutiveProtocol",
    "FluidProperties",
    "FluidResponse",
    "FluidPointsResult",
    "MaterialPropertyError",
    "Newtonian2DLaw",
    "Bingham2DLaw",
    "HerschelBulkley2DLaw",
    "create_fluid_law",
    "registered_fluid_laws",
    "evaluate_integration_points",
]
