"""
OGR Schema Library

Safe, read-only access to the layer definitions of GDAL vector datasets.

This library wraps GDAL's feature definition handles in lazily-evaluated
views: iterate attribute and geometry fields, look up field indexes by name
(case-insensitively), and read field metadata as plain Python values.

Example:
    >>> from ogr_schema import VectorDataset
    >>>
    >>> with VectorDataset("roads.gpkg") as ds:
    ...     defn = ds.layer_defn("roads")
    ...     for field in defn.fields():
    ...         print(field.name, field.field_type, field.width)
    ...     print(defn.field_index("NAME"))

CLI Example:
    $ ogr-schema info roads.gpkg
    $ ogr-schema fields roads.gpkg --layer roads
"""

__version__ = "0.1.0"

from .types import (
    FieldType,
    FieldSubType,
    GeometryType,
    flatten,
    has_z,
    has_m,
    geometry_type_name,
    field_type_name,
    field_subtype_name,
)

from .errors import (
    OgrSchemaError,
    InvalidFieldNameError,
    NullPointerError,
    InteriorNulError,
)

from .defn import (
    Defn,
    Field,
    FieldIterator,
    GeomField,
    GeomFieldIterator,
)

from .models import (
    FieldInfo,
    GeomFieldInfo,
    LayerSchema,
    describe,
)

from .dataset import VectorDataset

from .converters import (
    fiona_geometry_type,
    fiona_property_type,
    to_fiona_schema,
    write_empty_layer,
    schema_to_json,
)

__all__ = [
    # Version
    "__version__",
    # Types
    "FieldType",
    "FieldSubType",
    "GeometryType",
    "flatten",
    "has_z",
    "has_m",
    "geometry_type_name",
    "field_type_name",
    "field_subtype_name",
    # Errors
    "OgrSchemaError",
    "InvalidFieldNameError",
    "NullPointerError",
    "InteriorNulError",
    # Layer definitions
    "Defn",
    "Field",
    "FieldIterator",
    "GeomField",
    "GeomFieldIterator",
    # Snapshots
    "FieldInfo",
    "GeomFieldInfo",
    "LayerSchema",
    "describe",
    # Dataset
    "VectorDataset",
    # Converters
    "fiona_geometry_type",
    "fiona_property_type",
    "to_fiona_schema",
    "write_empty_layer",
    "schema_to_json",
]
