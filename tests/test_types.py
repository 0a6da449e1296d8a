"""Tests for field and geometry type helpers."""

from ogr_schema import (
    FieldSubType,
    FieldType,
    GeometryType,
    field_subtype_name,
    field_type_name,
    flatten,
    geometry_type_name,
    has_m,
    has_z,
)
from ogr_schema.types import WKB_25D_BIT, to_field_subtype, to_field_type


class TestFieldType:
    def test_codes(self):
        assert FieldType.INTEGER == 0
        assert FieldType.STRING == 4
        assert FieldType.INTEGER64 == 12
        assert FieldType.INTEGER64_LIST == 13

    def test_to_field_type(self):
        assert to_field_type(2) is FieldType.REAL

    def test_unknown_field_type_defaults_to_string(self):
        assert to_field_type(1234) is FieldType.STRING

    def test_unknown_subtype_defaults_to_none(self):
        assert to_field_subtype(-1) is FieldSubType.NONE

    def test_names(self):
        assert field_type_name(FieldType.INTEGER64) == "Integer64"
        assert field_type_name(FieldType.DATETIME) == "DateTime"
        assert field_subtype_name(FieldSubType.BOOLEAN) == "Boolean"


class TestGeometryType:
    def test_flatten_iso(self):
        assert flatten(1001) is GeometryType.POINT
        assert flatten(2002) is GeometryType.LINESTRING
        assert flatten(3006) is GeometryType.MULTIPOLYGON

    def test_flatten_25d(self):
        assert flatten(WKB_25D_BIT | 3) is GeometryType.POLYGON

    def test_flatten_special_codes(self):
        assert flatten(100) is GeometryType.NONE
        assert flatten(101) is GeometryType.LINEARRING

    def test_flatten_unknown(self):
        assert flatten(55) is GeometryType.UNKNOWN

    def test_dimensions(self):
        assert not has_z(1)
        assert has_z(1001)
        assert has_z(WKB_25D_BIT | 1)
        assert has_z(3001)
        assert not has_m(1001)
        assert has_m(2001)
        assert has_m(3001)

    def test_names(self):
        assert geometry_type_name(0) == "Unknown (any)"
        assert geometry_type_name(1) == "Point"
        assert geometry_type_name(1002) == "3D Line String"
        assert geometry_type_name(2003) == "Measured Polygon"
        assert geometry_type_name(3006) == "3D Measured Multi Polygon"
        assert geometry_type_name(100) == "None"


class TestSignedGeometryCodes:
    """GDAL's Python bindings report 2.5D codes as negative signed ints."""

    def test_flatten(self):
        assert flatten(-2147483647) is GeometryType.POINT  # ogr.wkbPoint25D
        assert flatten(-2147483645) is GeometryType.POLYGON  # ogr.wkbPolygon25D
        assert flatten(-2147483642) is GeometryType.MULTIPOLYGON

    def test_dimensions(self):
        assert has_z(-2147483647)
        assert not has_m(-2147483647)

    def test_names(self):
        assert geometry_type_name(-2147483647) == "3D Point"
        assert geometry_type_name(-2147483645) == "3D Polygon"
