"""Tests for layer schema snapshots."""

import json

from conftest import FakeFeatureDefn, FakeFieldDefn, FakeGeomFieldDefn
from ogr_schema import Defn, FieldInfo, FieldType, GeomFieldInfo, describe


class TestDescribe:
    def test_layer(self, roads_defn: Defn):
        schema = describe(roads_defn)
        assert schema.name == "roads"
        assert schema.geometry_type == 2
        assert schema.has_geometry
        assert schema.field_names == ["NAME", "lanes", "length_km", "osm_id", "Name"]

    def test_fields(self, roads_defn: Defn):
        schema = roads_defn.describe()
        name = schema.fields[0]
        assert name == FieldInfo(
            name="NAME",
            field_type=FieldType.STRING,
            alternative_name="Road name",
            width=80,
            nullable=False,
        )
        assert name.type_name == "String"
        assert schema.fields[1].default == "2"
        assert schema.fields[3].unique

    def test_geom_fields(self, roads_defn: Defn):
        geom = roads_defn.describe().geom_fields[0]
        assert geom.name == "geom"
        assert geom.type_name == "Line String"
        assert geom.epsg == 4326
        assert geom.srs_wkt is not None

    def test_geom_field_without_srs(self):
        defn = Defn.from_handle(FakeFeatureDefn(geom_fields=[FakeGeomFieldDefn()]))
        geom = describe(defn).geom_fields[0]
        assert geom == GeomFieldInfo(name="geom", geometry_type=1)

    def test_no_geometry(self):
        defn = Defn.from_handle(FakeFeatureDefn(fields=[FakeFieldDefn("a")]))
        schema = describe(defn)
        assert not schema.has_geometry
        assert schema.geom_fields == []


class TestToDict:
    def test_json_serializable(self, roads_defn: Defn):
        data = roads_defn.describe().to_dict()
        text = json.dumps(data)
        assert json.loads(text)["name"] == "roads"

    def test_type_names(self, roads_defn: Defn):
        data = roads_defn.describe().to_dict()
        assert data["geometry_type_name"] == "Line String"
        assert data["fields"][3]["type_name"] == "Integer64"
        assert data["geom_fields"][0]["type_name"] == "Line String"
