"""
Schema export.

This module converts layer definitions to other representations:
- fiona schema mappings
- empty layers in any fiona-writable format (GeoPackage by default)
- JSON
"""

import json
import logging
import shutil
from pathlib import Path
from typing import Any

import fiona

from .defn import Defn, Field
from .types import FieldSubType, FieldType, GeometryType, flatten, has_z

logger = logging.getLogger(__name__)

# OGR field type -> fiona property type name
_FIONA_FIELD_TYPES: dict[FieldType, str] = {
    FieldType.INTEGER: "int32",
    FieldType.INTEGER64: "int64",
    FieldType.REAL: "float",
    FieldType.STRING: "str",
    FieldType.DATE: "date",
    FieldType.TIME: "time",
    FieldType.DATETIME: "datetime",
    FieldType.BINARY: "bytes",
    FieldType.STRING_LIST: "List[str]",
}

# Sub-types fiona names on their own
_FIONA_SUBTYPES: dict[FieldSubType, str] = {
    FieldSubType.BOOLEAN: "bool",
    FieldSubType.INT16: "int16",
    FieldSubType.JSON: "json",
}

_FIONA_GEOMETRY_TYPES: dict[GeometryType, str] = {
    GeometryType.UNKNOWN: "Unknown",
    GeometryType.POINT: "Point",
    GeometryType.LINESTRING: "LineString",
    GeometryType.POLYGON: "Polygon",
    GeometryType.MULTIPOINT: "MultiPoint",
    GeometryType.MULTILINESTRING: "MultiLineString",
    GeometryType.MULTIPOLYGON: "MultiPolygon",
    GeometryType.GEOMETRYCOLLECTION: "GeometryCollection",
    GeometryType.NONE: "None",
}


def fiona_geometry_type(code: int) -> str:
    """
    Map an OGR geometry type code to a fiona schema geometry name.

    Example:
        >>> fiona_geometry_type(1)
        'Point'
        >>> fiona_geometry_type(1003)
        '3D Polygon'
    """
    base = _FIONA_GEOMETRY_TYPES.get(flatten(code), "Unknown")
    if has_z(code) and base not in ("Unknown", "None"):
        return f"3D {base}"
    return base


def fiona_property_type(field: Field) -> str | None:
    """
    Build the fiona property type string for a field.

    Width and precision are appended the way fiona writes them, e.g.
    ``str:80`` or ``float:24.15``.

    Args:
        field: Field view

    Returns:
        Property type string, or None if fiona has no equivalent type
    """
    field_type = field.field_type
    subtype_name = _FIONA_SUBTYPES.get(field.subtype)
    if subtype_name is not None and field_type in (
        FieldType.INTEGER,
        FieldType.STRING,
    ):
        return subtype_name

    name = _FIONA_FIELD_TYPES.get(field_type)
    if name is None:
        return None

    width = field.width
    if field_type == FieldType.REAL and width:
        return f"{name}:{width}.{field.precision}"
    sized = (FieldType.STRING, FieldType.INTEGER, FieldType.INTEGER64)
    if field_type in sized and width:
        return f"{name}:{width}"
    return name


def to_fiona_schema(defn: Defn) -> dict[str, Any]:
    """
    Convert a layer definition to a fiona schema.

    Only the first geometry field is used, since fiona collections carry a
    single geometry column. Fields fiona cannot represent are skipped.

    Args:
        defn: Layer definition

    Returns:
        Schema dictionary with ``geometry`` and ``properties`` keys

    Example:
        >>> to_fiona_schema(defn)
        {'geometry': 'Point', 'properties': {'name': 'str:80', 'pop': 'int64'}}
    """
    properties: dict[str, str] = {}
    for field in defn.fields():
        prop_type = fiona_property_type(field)
        if prop_type is None:
            logger.warning(
                "Skipping field %r: no fiona type for %s",
                field.name,
                field.field_type.name,
            )
            continue
        properties[field.name] = prop_type

    geometry = "None"
    if defn.geom_field_count > 0:
        geometry = fiona_geometry_type(defn.geometry_type())
        if defn.geom_field_count > 1:
            logger.warning(
                "Layer %r has %d geometry fields, only the first is kept",
                defn.name,
                defn.geom_field_count,
            )

    return {"geometry": geometry, "properties": properties}


def write_empty_layer(
    defn: Defn,
    output_path: str | Path,
    driver: str = "GPKG",
    layer: str | None = None,
) -> int:
    """
    Create an empty layer with the same schema as a layer definition.

    Uses fiona/GDAL to write the layer, carrying over the spatial reference
    of the first geometry field when it has one. An existing file or
    directory at output_path is replaced.

    Args:
        defn: Layer definition to copy
        output_path: Path of the dataset to create
        driver: OGR driver short name (default: GPKG)
        layer: Output layer name (default: the definition's name)

    Returns:
        Number of attribute fields written

    Example:
        >>> write_empty_layer(defn, "empty.gpkg")
        3
    """
    schema = to_fiona_schema(defn)

    crs_wkt = None
    first_geom_field = next(defn.geom_fields(), None)
    crs = first_geom_field.crs if first_geom_field is not None else None
    if crs is not None:
        crs_wkt = crs.to_wkt()

    layer_name = layer or defn.name or Path(output_path).stem
    layer_name = layer_name.replace(" ", "_").replace("-", "_")

    output_file = Path(output_path)
    if output_file.is_dir():
        # Multi-file drivers (e.g. ESRI Shapefile) write into a directory
        shutil.rmtree(output_file)
    elif output_file.exists():
        fiona.remove(str(output_file), driver=driver)

    with fiona.open(  # pyright: ignore[reportUnknownMemberType]
        str(output_path),
        "w",
        driver=driver,
        crs_wkt=crs_wkt,
        schema=schema,
        layer=layer_name,
    ):
        pass

    logger.info(
        "Wrote empty layer %r with %d fields to %s",
        layer_name,
        len(schema["properties"]),
        output_path,
    )
    return len(schema["properties"])


def schema_to_json(defn: Defn, indent: int | None = 2) -> str:
    """Serialize a layer definition snapshot to JSON"""
    return json.dumps(defn.describe().to_dict(), indent=indent)
