"""材料定義ファイル（Kratos 形式 JSON）I/O のテスト."""

from __future__ import annotations

import json

import numpy as np
import pytest

from rheo_cae.core.properties import FluidProperties, MaterialPropertyError
from rheo_cae.io.materials_json import (
    FluidMaterial,
    parse_materials,
    read_materials_json,
    write_materials_json,
)
from rheo_cae.materials import Bingham2DLaw, HerschelBulkley2DLaw, Newtonian2DLaw


def _materials_dict(**variables_override) -> dict:
    variables = {
        "DENSITY": 1500.0,
        "DYNAMIC_VISCOSITY": 10.0,
        "YIELD_SHEAR": 5.0,
        "FLOW_INDEX": 1.0,
        "ADAPTIVE_EXPONENT": 1000.0,
        "BULK_MODULUS": 2.1e9,
    }
    variables.update(variables_override)
    return {
        "properties": [
            {
                "model_part_name": "PfemFluidModelPart.Fluid",
                "properties_id": 1,
                "Material": {
                    "constitutive_law": {"name": "HerschelBulkley2DLaw"},
                    "Variables": variables,
                },
            },
            {
                "model_part_name": "PfemFluidModelPart.Water",
                "properties_id": 2,
                "Material": {
                    "constitutive_law": {"name": "Newtonian2DLaw"},
                    "Variables": {
                        "DENSITY": 1000.0,
                        "DYNAMIC_VISCOSITY": 1e-3,
                        "BULK_MODULUS": 2.1e9,
                    },
                },
            },
        ]
    }


class TestReadMaterials:
    def test_read(self, tmp_path):
        path = tmp_path / "FluidMaterials.json"
        path.write_text(json.dumps(_materials_dict()), encoding="utf-8")

        materials = read_materials_json(path)
        assert len(materials) == 2

        hb = materials[0]
        assert isinstance(hb, FluidMaterial)
        assert isinstance(hb.law, HerschelBulkley2DLaw)
        assert hb.model_part_name == "PfemFluidModelPart.Fluid"
        assert hb.properties_id == 1
        assert hb.properties == FluidProperties(
            dynamic_viscosity=10.0,
            yield_shear=5.0,
            flow_index=1.0,
            adaptive_exponent=1000.0,
            bulk_modulus=2.1e9,
        )
        assert hb.extra_variables == {"DENSITY": 1500.0}

        water = materials[1]
        assert isinstance(water.law, Newtonian2DLaw)
        assert water.properties.yield_shear == 0.0

    def test_evaluate_loaded_material(self):
        """読み込んだ材料でそのまま評価できる."""
        mat = parse_materials(_materials_dict())[0]
        result = mat.law.evaluate(np.array([1.0, -1.0, 0.5]), mat.properties)
        np.testing.assert_allclose(result.effective_viscosity, 10.0 + np.sqrt(5.0))

    def test_negative_value_rejected(self):
        with pytest.raises(MaterialPropertyError, match="FLOW_INDEX"):
            parse_materials(_materials_dict(FLOW_INDEX=-0.3))

    def test_unknown_law(self):
        data = _materials_dict()
        data["properties"][0]["Material"]["constitutive_law"]["name"] = "Carreau2DLaw"
        with pytest.raises(ValueError, match="Carreau2DLaw"):
            parse_materials(data)

    def test_missing_law_name(self):
        data = _materials_dict()
        del data["properties"][1]["Material"]["constitutive_law"]
        with pytest.raises(ValueError, match=r"properties\[1\]"):
            parse_materials(data)

    @pytest.mark.parametrize("variables", [None, [1.0, 2.0], "YIELD_SHEAR"])
    def test_variables_not_dict(self, variables):
        data = _materials_dict()
        data["properties"][0]["Material"]["Variables"] = variables
        with pytest.raises(ValueError, match=r"properties\[0\]\.Variables"):
            parse_materials(data)

    @pytest.mark.parametrize("value", [None, "soft", [5.0], {"value": 5.0}])
    def test_non_numeric_variable(self, value):
        with pytest.raises(ValueError, match=r"properties\[0\]\.Variables\.YIELD_SHEAR"):
            parse_materials(_materials_dict(YIELD_SHEAR=value))

    def test_numeric_string_variable(self):
        """数値文字列は数値として受け付ける."""
        mat = parse_materials(_materials_dict(YIELD_SHEAR="5.0"))[0]
        assert mat.properties.yield_shear == 5.0

    def test_nan_variable_rejected(self, tmp_path):
        """JSON の NaN リテラルは check() で拒否される."""
        path = tmp_path / "FluidMaterials.json"
        path.write_text(json.dumps(_materials_dict(FLOW_INDEX=float("nan"))), encoding="utf-8")
        with pytest.raises(MaterialPropertyError, match="FLOW_INDEX"):
            read_materials_json(path)

    def test_missing_properties_list(self):
        with pytest.raises(ValueError, match="properties"):
            parse_materials({"materials": []})

    def test_default_properties_id(self):
        data = _materials_dict()
        del data["properties"][1]["properties_id"]
        assert parse_materials(data)[1].properties_id == 2


class TestWriteMaterials:
    def test_write_then_read(self, tmp_path):
        materials = [
            FluidMaterial(
                model_part_name="Mud",
                properties_id=3,
                law=Bingham2DLaw(),
                properties=FluidProperties(
                    dynamic_viscosity=0.5, yield_shear=12.0, adaptive_exponent=200.0
                ),
                extra_variables={"DENSITY": 1800.0},
            )
        ]
        path = write_materials_json(materials, tmp_path / "out" / "materials.json")

        data = json.loads((tmp_path / "out" / "materials.json").read_text(encoding="utf-8"))
        entry = data["properties"][0]
        assert entry["Material"]["constitutive_law"]["name"] == "Bingham2DLaw"
        assert entry["Material"]["Variables"]["YIELD_SHEAR"] == 12.0
        assert entry["Material"]["Variables"]["DENSITY"] == 1800.0

        loaded = read_materials_json(path)[0]
        assert isinstance(loaded.law, Bingham2DLaw)
        assert loaded.properties == materials[0].properties
        assert loaded.properties_id == 3
        assert loaded.extra_variables == {"DENSITY": 1800.0}
