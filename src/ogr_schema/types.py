"""
Enumerations for OGR field and geometry types.

These mirror the integer codes GDAL reports for field definitions
(OGRFieldType, OGRFieldSubType) and geometry fields (OGRwkbGeometryType),
together with the naming GDAL uses for them.
"""

import logging
from enum import IntEnum

logger = logging.getLogger(__name__)

# Legacy 2.5D flag set on the high bit of a geometry type code
WKB_25D_BIT = 0x80000000

# GDAL's Python bindings report geometry types as signed 32-bit ints
_UINT32_MASK = 0xFFFFFFFF


class FieldType(IntEnum):
    """OGR attribute field types (OGRFieldType)"""

    INTEGER = 0
    INTEGER_LIST = 1
    REAL = 2
    REAL_LIST = 3
    STRING = 4
    STRING_LIST = 5
    WIDE_STRING = 6  # deprecated in GDAL
    WIDE_STRING_LIST = 7  # deprecated in GDAL
    BINARY = 8
    DATE = 9
    TIME = 10
    DATETIME = 11
    INTEGER64 = 12
    INTEGER64_LIST = 13


class FieldSubType(IntEnum):
    """OGR attribute field sub-types (OGRFieldSubType)"""

    NONE = 0
    BOOLEAN = 1
    INT16 = 2
    FLOAT32 = 3
    JSON = 4
    UUID = 5


class GeometryType(IntEnum):
    """Base OGR geometry type codes, without Z/M modifiers"""

    UNKNOWN = 0
    POINT = 1
    LINESTRING = 2
    POLYGON = 3
    MULTIPOINT = 4
    MULTILINESTRING = 5
    MULTIPOLYGON = 6
    GEOMETRYCOLLECTION = 7
    CIRCULARSTRING = 8
    COMPOUNDCURVE = 9
    CURVEPOLYGON = 10
    MULTICURVE = 11
    MULTISURFACE = 12
    CURVE = 13
    SURFACE = 14
    POLYHEDRALSURFACE = 15
    TIN = 16
    TRIANGLE = 17
    NONE = 100
    LINEARRING = 101


_FIELD_TYPE_NAMES: dict[FieldType, str] = {
    FieldType.INTEGER: "Integer",
    FieldType.INTEGER_LIST: "IntegerList",
    FieldType.REAL: "Real",
    FieldType.REAL_LIST: "RealList",
    FieldType.STRING: "String",
    FieldType.STRING_LIST: "StringList",
    FieldType.WIDE_STRING: "(unknown)",
    FieldType.WIDE_STRING_LIST: "(unknown)",
    FieldType.BINARY: "Binary",
    FieldType.DATE: "Date",
    FieldType.TIME: "Time",
    FieldType.DATETIME: "DateTime",
    FieldType.INTEGER64: "Integer64",
    FieldType.INTEGER64_LIST: "Integer64List",
}

_FIELD_SUBTYPE_NAMES: dict[FieldSubType, str] = {
    FieldSubType.NONE: "None",
    FieldSubType.BOOLEAN: "Boolean",
    FieldSubType.INT16: "Int16",
    FieldSubType.FLOAT32: "Float32",
    FieldSubType.JSON: "JSON",
    FieldSubType.UUID: "UUID",
}

_GEOMETRY_TYPE_NAMES: dict[GeometryType, str] = {
    GeometryType.UNKNOWN: "Unknown (any)",
    GeometryType.POINT: "Point",
    GeometryType.LINESTRING: "Line String",
    GeometryType.POLYGON: "Polygon",
    GeometryType.MULTIPOINT: "Multi Point",
    GeometryType.MULTILINESTRING: "Multi Line String",
    GeometryType.MULTIPOLYGON: "Multi Polygon",
    GeometryType.GEOMETRYCOLLECTION: "Geometry Collection",
    GeometryType.CIRCULARSTRING: "Circular String",
    GeometryType.COMPOUNDCURVE: "Compound Curve",
    GeometryType.CURVEPOLYGON: "Curve Polygon",
    GeometryType.MULTICURVE: "Multi Curve",
    GeometryType.MULTISURFACE: "Multi Surface",
    GeometryType.CURVE: "Curve",
    GeometryType.SURFACE: "Surface",
    GeometryType.POLYHEDRALSURFACE: "Polyhedral Surface",
    GeometryType.TIN: "TIN",
    GeometryType.TRIANGLE: "Triangle",
    GeometryType.NONE: "None",
    GeometryType.LINEARRING: "Linear Ring",
}


def to_field_type(code: int) -> FieldType:
    """
    Convert a native field type code to FieldType.

    Codes GDAL should never report fall back to FieldType.STRING.
    """
    try:
        return FieldType(code)
    except ValueError:
        logger.warning("Unknown OGR field type code %r, treating as String", code)
        return FieldType.STRING


def to_field_subtype(code: int) -> FieldSubType:
    """Convert a native field sub-type code, falling back to FieldSubType.NONE"""
    try:
        return FieldSubType(code)
    except ValueError:
        logger.warning("Unknown OGR field subtype code %r, treating as None", code)
        return FieldSubType.NONE


def flatten(code: int) -> GeometryType:
    """
    Strip Z/M modifiers from a geometry type code.

    Args:
        code: Native geometry type code (ISO or legacy 2.5D form)

    Returns:
        The base GeometryType, or GeometryType.UNKNOWN for unrecognised codes

    Example:
        >>> flatten(1001)
        <GeometryType.POINT: 1>
        >>> flatten(0x80000003)
        <GeometryType.POLYGON: 3>
        >>> flatten(-2147483645)  # ogr.wkbPolygon25D
        <GeometryType.POLYGON: 3>
    """
    base = code & _UINT32_MASK & ~WKB_25D_BIT
    if base not in (GeometryType.NONE, GeometryType.LINEARRING):
        base %= 1000
    try:
        return GeometryType(base)
    except ValueError:
        return GeometryType.UNKNOWN


def has_z(code: int) -> bool:
    """Whether a geometry type code carries a Z dimension"""
    code &= _UINT32_MASK
    if code & WKB_25D_BIT:
        return True
    return 1000 <= code < 2000 or 3000 <= code < 4000


def has_m(code: int) -> bool:
    """Whether a geometry type code carries an M dimension"""
    code &= _UINT32_MASK & ~WKB_25D_BIT
    return 2000 <= code < 4000


def geometry_type_name(code: int) -> str:
    """
    Human readable name of a geometry type code, as GDAL names it.

    Example:
        >>> geometry_type_name(1)
        'Point'
        >>> geometry_type_name(3002)
        '3D Measured Line String'
    """
    name = _GEOMETRY_TYPE_NAMES[flatten(code)]
    z, m = has_z(code), has_m(code)
    if z and m:
        return f"3D Measured {name}"
    if z:
        return f"3D {name}"
    if m:
        return f"Measured {name}"
    return name


def field_type_name(field_type: int) -> str:
    """Name of a field type as GDAL reports it (e.g. 'Integer64')"""
    return _FIELD_TYPE_NAMES[to_field_type(field_type)]


def field_subtype_name(subtype: int) -> str:
    """Name of a field sub-type as GDAL reports it (e.g. 'Boolean')"""
    return _FIELD_SUBTYPE_NAMES[to_field_subtype(subtype)]
