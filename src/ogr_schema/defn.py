"""
Layer definition views.

A Defn wraps a GDAL feature definition handle (``osgeo.ogr.FeatureDefn``)
and exposes its attribute and geometry fields as lazily-built views. Views
keep a reference to the Defn they came from, and the Defn keeps a reference
to the layer (or dataset) that owns the native handle, so a view is never
left pointing at a released schema.
"""

import logging
from collections.abc import Iterator
from typing import Any

from pyproj import CRS

from .errors import InteriorNulError, InvalidFieldNameError, last_null_pointer_err
from .types import FieldSubType, FieldType, to_field_subtype, to_field_type

logger = logging.getLogger(__name__)


def _string(value: str | bytes | None) -> str | None:
    """Convert a native string to str, or None if it is missing or not UTF-8"""
    if value is None:
        return None
    if isinstance(value, bytes):
        try:
            return value.decode("utf-8")
        except UnicodeDecodeError:
            return None
    return value


def _native_name(name: str) -> str:
    if "\x00" in name:
        raise InteriorNulError(name)
    return name


class Defn:
    """
    Layer definition: the fields available for features in a layer.

    Example:
        >>> defn = Defn.from_layer(layer)
        >>> for field in defn.fields():
        ...     print(field.name, field.field_type, field.width)
        ...
        >>> defn.field_index("NAME")
        0

    Attributes:
        handle: The wrapped native feature definition handle
    """

    def __init__(self, handle: Any, owner: Any = None):
        self._handle = handle
        # Native handles are only valid while their layer/dataset is alive
        self._owner = owner

    @classmethod
    def from_handle(cls, handle: Any, owner: Any = None) -> "Defn":
        """
        Wrap a native feature definition handle.

        Args:
            handle: An ``osgeo.ogr.FeatureDefn`` or equivalent
            owner: Object the handle borrows from, kept alive with the Defn
        """
        return cls(handle, owner)

    @classmethod
    def from_layer(cls, layer: Any) -> "Defn":
        """Get the definition of a layer (``OGR_L_GetLayerDefn``)"""
        return cls(layer.GetLayerDefn(), owner=layer)

    @property
    def handle(self) -> Any:
        return self._handle

    @property
    def name(self) -> str:
        """Name of the layer definition"""
        return _string(self._handle.GetName()) or ""

    @property
    def field_count(self) -> int:
        return self._handle.GetFieldCount()

    @property
    def geom_field_count(self) -> int:
        return self._handle.GetGeomFieldCount()

    def fields(self) -> "FieldIterator":
        """Iterate over the field schema of this layer."""
        return FieldIterator(self)

    def geom_fields(self) -> "GeomFieldIterator":
        """Iterate over the geometry field schema of this layer."""
        return GeomFieldIterator(self)

    def geometry_type(self) -> int:
        """Get the geometry type code of the first geometry field"""
        return self._handle.GetGeomType()

    def field_index(self, field_name: str) -> int:
        """
        Get the index of a field.

        The comparison is done case-insensitively, and if multiple fields
        match the requested name, the first one is returned.

        Raises:
            InvalidFieldNameError: If no field has this name
        """
        idx = self._handle.GetFieldIndex(_native_name(field_name))
        if idx < 0:
            logger.debug("Field %r not found in %r", field_name, self.name)
            raise InvalidFieldNameError(field_name, "OGR_FD_GetFieldIndex")
        return idx

    def geometry_field_index(self, field_name: str) -> int:
        """
        Get the index of a geometry field.

        The comparison is done case-insensitively, and if multiple fields
        match the requested name, the first one is returned.

        Raises:
            InvalidFieldNameError: If no geometry field has this name
        """
        idx = self._handle.GetGeomFieldIndex(_native_name(field_name))
        if idx < 0:
            logger.debug("Geometry field %r not found in %r", field_name, self.name)
            raise InvalidFieldNameError(field_name, "OGR_FD_GetGeomFieldIndex")
        return idx

    def field(self, field_name: str) -> "Field":
        """Get a field by name (case-insensitive)"""
        idx = self.field_index(field_name)
        return Field(self, self._handle.GetFieldDefn(idx))

    def geom_field(self, field_name: str) -> "GeomField":
        """Get a geometry field by name (case-insensitive)"""
        idx = self.geometry_field_index(field_name)
        return GeomField(self, self._handle.GetGeomFieldDefn(idx))

    def describe(self):
        """Snapshot this definition into a LayerSchema"""
        from .models import describe

        return describe(self)

    def __repr__(self) -> str:
        return (
            f"Defn(name={self.name!r}, fields={self.field_count}, "
            f"geom_fields={self.geom_field_count})"
        )


class FieldIterator:
    """Iterator over the attribute fields of a Defn"""

    def __init__(self, defn: Defn):
        self._defn = defn
        self._next_id = 0
        self._total = defn.handle.GetFieldCount()

    def __iter__(self) -> Iterator["Field"]:
        return self

    def __next__(self) -> "Field":
        if self._next_id >= self._total:
            raise StopIteration
        field = Field(self._defn, self._defn.handle.GetFieldDefn(self._next_id))
        self._next_id += 1
        return field


class Field:
    """A view over one attribute field definition"""

    def __init__(self, defn: Defn, handle: Any):
        self._defn = defn
        self._handle = handle

    @property
    def name(self) -> str:
        """Get the name of this field."""
        return _string(self._handle.GetNameRef()) or ""

    @property
    def alternative_name(self) -> str:
        """Get the alternative name (alias) of this field."""
        return _string(self._handle.GetAlternativeNameRef()) or ""

    @property
    def field_type(self) -> FieldType:
        """Get the data type of this field."""
        return to_field_type(self._handle.GetType())

    @property
    def subtype(self) -> FieldSubType:
        return to_field_subtype(self._handle.GetSubType())

    @property
    def width(self) -> int:
        """
        Get the formatting width for this field.

        Zero means no specified width.
        """
        return self._handle.GetWidth()

    @property
    def precision(self) -> int:
        """
        Get the formatting precision for this field.

        This should normally be zero for fields of types other than Real.
        """
        return self._handle.GetPrecision()

    @property
    def is_nullable(self) -> bool:
        """Return whether this field can receive null values."""
        return bool(self._handle.IsNullable())

    @property
    def is_unique(self) -> bool:
        """Return whether this field has a unique constraint."""
        return bool(self._handle.IsUnique())

    @property
    def default_value(self) -> str | None:
        """Get default field value."""
        return _string(self._handle.GetDefault())

    def __repr__(self) -> str:
        return f"Field(name={self.name!r}, type={self.field_type.name})"


class GeomFieldIterator:
    """Iterator over the geometry fields of a Defn"""

    def __init__(self, defn: Defn):
        self._defn = defn
        self._next_id = 0
        self._total = defn.handle.GetGeomFieldCount()

    def __iter__(self) -> Iterator["GeomField"]:
        return self

    def __next__(self) -> "GeomField":
        if self._next_id >= self._total:
            raise StopIteration
        field = GeomField(
            self._defn, self._defn.handle.GetGeomFieldDefn(self._next_id)
        )
        self._next_id += 1
        return field


class GeomField:
    """A view over one geometry field definition"""

    def __init__(self, defn: Defn, handle: Any):
        self._defn = defn
        self._handle = handle

    @property
    def name(self) -> str:
        """Get the name of this field."""
        return _string(self._handle.GetNameRef()) or ""

    @property
    def field_type(self) -> int:
        """Geometry type code of this field"""
        return self._handle.GetType()

    @property
    def is_nullable(self) -> bool:
        return bool(self._handle.IsNullable())

    def spatial_ref(self) -> CRS:
        """
        Get the spatial reference of this field as a pyproj CRS.

        Raises:
            NullPointerError: If the field has no spatial reference
        """
        crs = self.crs
        if crs is None:
            raise last_null_pointer_err("OGR_GFld_GetSpatialRef")
        return crs

    @property
    def crs(self) -> CRS | None:
        """Spatial reference of this field, or None if it has none"""
        srs = self._handle.GetSpatialRef()
        if srs is None:
            return None
        return CRS.from_wkt(srs.ExportToWkt())

    def __repr__(self) -> str:
        return f"GeomField(name={self.name!r}, type={self.field_type})"
