"""rheo_cae.io - 材料定義ファイル I/O・流動曲線フィッティング."""

from rheo_cae.io.flow_curve import FlowCurveFit, fit_herschel_bulkley
from rheo_cae.io.materials_json import (
    FluidMaterial,
    parse_materials,
    read_materials_json,
    write_materials_json,
)

__all__ = [
    "FlowCurveFit",
    "FluidMaterial",
    "fit_herschel_bulkley",
    "parse_materials",
    "read_materials_json",
    "write_materials_json",
]
