"""
Plain snapshots of a layer definition.

Views in :mod:`ogr_schema.defn` read through to the native handle on every
access. The dataclasses here copy the values out once, so they can be kept
after the dataset is closed, compared, or serialized to JSON.
"""

from dataclasses import asdict, dataclass, field
from typing import Any

from .defn import Defn
from .types import field_type_name, geometry_type_name


@dataclass
class FieldInfo:
    """
    Metadata of one attribute field.

    Attributes:
        name: Field name
        alternative_name: Field alias, empty if not set
        field_type: FieldType code
        subtype: FieldSubType code
        width: Formatting width (0 means unspecified)
        precision: Formatting precision
        nullable: Whether the field accepts null values
        unique: Whether the field has a unique constraint
        default: Default value expression, if any
    """

    name: str
    field_type: int
    alternative_name: str = ""
    subtype: int = 0
    width: int = 0
    precision: int = 0
    nullable: bool = True
    unique: bool = False
    default: str | None = None

    @property
    def type_name(self) -> str:
        return field_type_name(self.field_type)


@dataclass
class GeomFieldInfo:
    """
    Metadata of one geometry field.

    Attributes:
        name: Geometry field name (often empty for single-geometry formats)
        geometry_type: Geometry type code
        nullable: Whether the field accepts null geometries
        srs_wkt: WKT of the spatial reference, None if not set
        epsg: EPSG code of the spatial reference, if one can be identified
    """

    name: str
    geometry_type: int
    nullable: bool = True
    srs_wkt: str | None = None
    epsg: int | None = None

    @property
    def type_name(self) -> str:
        return geometry_type_name(self.geometry_type)


@dataclass
class LayerSchema:
    """Snapshot of a complete layer definition"""

    name: str
    geometry_type: int
    fields: list[FieldInfo] = field(default_factory=lambda: [])
    geom_fields: list[GeomFieldInfo] = field(default_factory=lambda: [])

    @property
    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]

    @property
    def has_geometry(self) -> bool:
        """Check if this layer has at least one geometry field"""
        return len(self.geom_fields) > 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary"""
        data = asdict(self)
        data["geometry_type_name"] = geometry_type_name(self.geometry_type)
        for info, out in zip(self.fields, data["fields"], strict=True):
            out["type_name"] = info.type_name
        for ginfo, gout in zip(self.geom_fields, data["geom_fields"], strict=True):
            gout["type_name"] = ginfo.type_name
        return data


def describe(defn: Defn) -> LayerSchema:
    """
    Copy a layer definition into a LayerSchema.

    Args:
        defn: Layer definition to read

    Returns:
        LayerSchema with one entry per attribute and geometry field
    """
    fields = [
        FieldInfo(
            name=f.name,
            field_type=int(f.field_type),
            alternative_name=f.alternative_name,
            subtype=int(f.subtype),
            width=f.width,
            precision=f.precision,
            nullable=f.is_nullable,
            unique=f.is_unique,
            default=f.default_value,
        )
        for f in defn.fields()
    ]

    geom_fields: list[GeomFieldInfo] = []
    for gf in defn.geom_fields():
        info = GeomFieldInfo(
            name=gf.name, geometry_type=gf.field_type, nullable=gf.is_nullable
        )
        crs = gf.crs
        if crs is not None:
            info.srs_wkt = crs.to_wkt()
            info.epsg = crs.to_epsg()
        geom_fields.append(info)

    return LayerSchema(
        name=defn.name,
        geometry_type=defn.geometry_type(),
        fields=fields,
        geom_fields=geom_fields,
    )
