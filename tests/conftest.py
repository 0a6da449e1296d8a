"""Fake OGR handles following the osgeo.ogr method names."""

from typing import Any

import pytest
from pyproj import CRS

from ogr_schema import Defn, FieldSubType, FieldType


class FakeSpatialRef:
    def __init__(self, epsg: int):
        self._wkt = CRS.from_epsg(epsg).to_wkt()

    def ExportToWkt(self) -> str:
        return self._wkt


class FakeFieldDefn:
    def __init__(
        self,
        name: str | bytes | None,
        field_type: int = FieldType.STRING,
        subtype: int = FieldSubType.NONE,
        width: int = 0,
        precision: int = 0,
        nullable: bool = True,
        unique: bool = False,
        default: str | None = None,
        alias: str | None = None,
    ):
        self.name = name
        self.field_type = field_type
        self.subtype = subtype
        self.width = width
        self.precision = precision
        self.nullable = nullable
        self.unique = unique
        self.default = default
        self.alias = alias

    def GetNameRef(self):
        return self.name

    def GetAlternativeNameRef(self):
        return self.alias

    def GetType(self) -> int:
        return int(self.field_type)

    def GetSubType(self) -> int:
        return int(self.subtype)

    def GetWidth(self) -> int:
        return self.width

    def GetPrecision(self) -> int:
        return self.precision

    def IsNullable(self) -> int:
        return int(self.nullable)

    def IsUnique(self) -> int:
        return int(self.unique)

    def GetDefault(self):
        return self.default


class FakeGeomFieldDefn:
    def __init__(
        self,
        name: str = "geom",
        geom_type: int = 1,
        srs: FakeSpatialRef | None = None,
        nullable: bool = True,
    ):
        self.name = name
        self.geom_type = geom_type
        self.srs = srs
        self.nullable = nullable

    def GetNameRef(self) -> str:
        return self.name

    def GetType(self) -> int:
        return self.geom_type

    def GetSpatialRef(self):
        return self.srs

    def IsNullable(self) -> int:
        return int(self.nullable)


class FakeFeatureDefn:
    def __init__(
        self,
        name: str = "layer",
        fields: list[FakeFieldDefn] | None = None,
        geom_fields: list[FakeGeomFieldDefn] | None = None,
    ):
        self.name = name
        self.fields = fields or []
        self.geom_fields = geom_fields or []
        self.field_defn_calls = 0

    def GetName(self) -> str:
        return self.name

    def GetFieldCount(self) -> int:
        return len(self.fields)

    def GetFieldDefn(self, i: int) -> FakeFieldDefn:
        self.field_defn_calls += 1
        return self.fields[i]

    def GetFieldIndex(self, name: str) -> int:
        for i, f in enumerate(self.fields):
            if isinstance(f.name, str) and f.name.lower() == name.lower():
                return i
        return -1

    def GetGeomFieldCount(self) -> int:
        return len(self.geom_fields)

    def GetGeomFieldDefn(self, i: int) -> FakeGeomFieldDefn:
        return self.geom_fields[i]

    def GetGeomFieldIndex(self, name: str) -> int:
        for i, g in enumerate(self.geom_fields):
            if g.name.lower() == name.lower():
                return i
        return -1

    def GetGeomType(self) -> int:
        if not self.geom_fields:
            return 100
        return self.geom_fields[0].geom_type


class FakeLayer:
    def __init__(self, defn: FakeFeatureDefn):
        self.defn = defn

    def GetName(self) -> str:
        return self.defn.name

    def GetLayerDefn(self) -> FakeFeatureDefn:
        return self.defn


def roads_handle() -> FakeFeatureDefn:
    """A small layer: three attribute fields and one point geometry field"""
    return FakeFeatureDefn(
        name="roads",
        fields=[
            FakeFieldDefn(
                "NAME", FieldType.STRING, width=80, nullable=False, alias="Road name"
            ),
            FakeFieldDefn(
                "lanes", FieldType.INTEGER, width=4, unique=False, default="2"
            ),
            FakeFieldDefn("length_km", FieldType.REAL, width=24, precision=15),
            FakeFieldDefn("osm_id", FieldType.INTEGER64, unique=True),
            FakeFieldDefn("Name", FieldType.STRING),
        ],
        geom_fields=[FakeGeomFieldDefn("geom", 2, FakeSpatialRef(4326))],
    )


@pytest.fixture
def roads() -> FakeFeatureDefn:
    return roads_handle()


@pytest.fixture
def roads_defn(roads: FakeFeatureDefn) -> Defn:
    return Defn.from_layer(FakeLayer(roads))


class FakeVectorDataset:
    """Stands in for VectorDataset in CLI tests"""

    def __init__(self, path: Any):
        from pathlib import Path

        self.path = Path(path)
        self.layers = {"roads": roads_handle()}
        self.closed = False

    @property
    def layer_names(self) -> list[str]:
        return list(self.layers)

    def layer_defn(self, layer: str | int = 0) -> Defn:
        if isinstance(layer, int):
            handles = list(self.layers.values())
            if not 0 <= layer < len(handles):
                raise ValueError(f"Layer not found: {layer}")
            return Defn.from_handle(handles[layer], owner=self)
        for name, handle in self.layers.items():
            if name.lower() == layer.lower():
                return Defn.from_handle(handle, owner=self)
        raise ValueError(f"Layer not found: {layer}")

    def layer_defns(self):
        for name, handle in self.layers.items():
            yield name, Defn.from_handle(handle, owner=self)

    def close(self):
        self.closed = True


@pytest.fixture
def fake_dataset(monkeypatch: pytest.MonkeyPatch) -> type[FakeVectorDataset]:
    monkeypatch.setattr("ogr_schema.cli.VectorDataset", FakeVectorDataset)
    return FakeVectorDataset
