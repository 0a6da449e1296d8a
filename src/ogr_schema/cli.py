"""
Command-line interface for ogr-schema.

Usage:
    ogr-schema info <dataset>
    ogr-schema fields <dataset> [--layer LAYER] [--json]
    ogr-schema geom-fields <dataset> [--layer LAYER] [--json]
    ogr-schema field-index <dataset> <name> [--layer LAYER] [--geometry]
    ogr-schema clone-schema <dataset> <output> [--layer LAYER] [--driver DRIVER]
"""

import json
import sys

import click
from pyproj.exceptions import CRSError

from .config import SchemaSettings
from .converters import write_empty_layer
from .dataset import VectorDataset
from .defn import Defn
from .errors import OgrSchemaError
from .logging_config import configure_logging
from .types import field_subtype_name, field_type_name, geometry_type_name


def _open(path: str) -> VectorDataset:
    try:
        return VectorDataset(path)
    except Exception as e:
        click.echo(f"Error opening dataset: {e}", err=True)
        sys.exit(1)


def _layer_key(ds: VectorDataset, layer: str | None) -> str | int:
    if layer is None:
        return 0
    # A layer named like a number wins over the index
    names = {n.lower() for n in ds.layer_names}
    if layer.isdigit() and layer.lower() not in names:
        return int(layer)
    return layer


def _get_defn(ds: VectorDataset, layer: str | None) -> Defn:
    try:
        return ds.layer_defn(_layer_key(ds, layer))
    except ValueError as e:
        click.echo(str(e), err=True)
        click.echo(f"Available layers: {', '.join(ds.layer_names)}", err=True)
        sys.exit(1)


@click.group()
@click.version_option(package_name="ogr-schema")
@click.option("--verbose", "-v", is_flag=True, help="Debug logging")
@click.option("--log-json", is_flag=True, help="Log as JSON lines")
@click.pass_context
def main(ctx: click.Context, verbose: bool, log_json: bool):
    """
    Inspect the layer definitions of GDAL vector datasets.

    Lists attribute fields (type, width, precision, nullability, uniqueness,
    default) and geometry fields (type, spatial reference) of any format
    GDAL can read.
    """
    settings = SchemaSettings.from_cli(verbose=verbose, log_json=log_json)
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)
    ctx.obj = settings


@main.command()
@click.argument("dataset", type=click.Path(exists=True))
@click.option("--json", "output_json", is_flag=True, help="Output JSON")
@click.pass_obj
def info(settings: SchemaSettings, dataset: str, output_json: bool):
    """
    Display the layers of a dataset.

    Shows each layer's geometry type and field counts.
    """
    ds = _open(dataset)

    try:
        layers = [(name, defn.describe()) for name, defn in ds.layer_defns()]
    except CRSError as e:
        click.echo(f"Error reading spatial reference: {e}", err=True)
        sys.exit(1)

    if output_json or settings.output_json:
        data = {
            "path": str(ds.path),
            "layers": [schema.to_dict() for _, schema in layers],
        }
        click.echo(json.dumps(data, indent=2))
    else:
        click.echo(f"Dataset: {ds.path.name}")
        click.echo(f"Path: {ds.path}")
        click.echo()

        if not layers:
            click.echo("No layers found.")

        for name, schema in layers:
            click.echo(f"  {name}")
            click.echo(f"    Geometry: {geometry_type_name(schema.geometry_type)}")
            click.echo(f"    Fields: {len(schema.fields)}")
            click.echo(f"    Geometry fields: {len(schema.geom_fields)}")
            click.echo()

    ds.close()


@main.command()
@click.argument("dataset", type=click.Path(exists=True))
@click.option("--layer", "-l", help="Layer name or index (default: first layer)")
@click.option("--json", "output_json", is_flag=True, help="Output JSON")
@click.pass_obj
def fields(
    settings: SchemaSettings,
    dataset: str,
    layer: str | None,
    output_json: bool,
):
    """
    List the attribute fields of a layer.

    Example:
        ogr-schema fields roads.gpkg -l roads
    """
    ds = _open(dataset)
    defn = _get_defn(ds, layer)

    if output_json or settings.output_json:
        click.echo(json.dumps(defn.describe().to_dict()["fields"], indent=2))
    else:
        for field in defn.fields():
            line = f"{field.name}\t{field_type_name(field.field_type)}"
            if field.subtype:
                line += f"({field_subtype_name(field.subtype)})"
            line += f"\t{field.width}\t{field.precision}"
            flags = []
            if not field.is_nullable:
                flags.append("NOT NULL")
            if field.is_unique:
                flags.append("UNIQUE")
            if field.default_value is not None:
                flags.append(f"DEFAULT {field.default_value}")
            if field.alternative_name:
                flags.append(f"ALIAS {field.alternative_name}")
            click.echo("\t".join([line, *flags]) if flags else line)

    ds.close()


@main.command("geom-fields")
@click.argument("dataset", type=click.Path(exists=True))
@click.option("--layer", "-l", help="Layer name or index (default: first layer)")
@click.option("--json", "output_json", is_flag=True, help="Output JSON")
@click.pass_obj
def geom_fields(
    settings: SchemaSettings,
    dataset: str,
    layer: str | None,
    output_json: bool,
):
    """
    List the geometry fields of a layer with their spatial reference.
    """
    ds = _open(dataset)
    defn = _get_defn(ds, layer)

    if output_json or settings.output_json:
        try:
            data = defn.describe().to_dict()["geom_fields"]
        except CRSError as e:
            click.echo(f"Error reading spatial reference: {e}", err=True)
            sys.exit(1)
        click.echo(json.dumps(data, indent=2))
    else:
        for geom_field in defn.geom_fields():
            try:
                crs = geom_field.crs
            except CRSError as e:
                click.echo(f"Error reading spatial reference: {e}", err=True)
                sys.exit(1)
            if crs is None:
                srs = "-"
            else:
                epsg = crs.to_epsg()
                srs = f"EPSG:{epsg}" if epsg else crs.name
            click.echo(
                f"{geom_field.name or '(unnamed)'}\t"
                f"{geometry_type_name(geom_field.field_type)}\t{srs}"
            )

    ds.close()


@main.command("field-index")
@click.argument("dataset", type=click.Path(exists=True))
@click.argument("name")
@click.option("--layer", "-l", help="Layer name or index (default: first layer)")
@click.option("--geometry", "-g", is_flag=True, help="Look up a geometry field")
def field_index(dataset: str, name: str, layer: str | None, geometry: bool):
    """
    Print the index of a field (case-insensitive lookup).

    Exits with status 1 if the field doesn't exist.
    """
    ds = _open(dataset)
    defn = _get_defn(ds, layer)

    try:
        if geometry:
            idx = defn.geometry_field_index(name)
        else:
            idx = defn.field_index(name)
    except OgrSchemaError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(idx)
    ds.close()


@main.command("clone-schema")
@click.argument("dataset", type=click.Path(exists=True))
@click.argument("output", type=click.Path())
@click.option("--layer", "-l", help="Layer name or index (default: first layer)")
@click.option("--driver", "-d", help="Output OGR driver (default: GPKG)")
@click.option("--name", "-n", "layer_name", help="Output layer name")
@click.pass_obj
def clone_schema(
    settings: SchemaSettings,
    dataset: str,
    output: str,
    layer: str | None,
    driver: str | None,
    layer_name: str | None,
):
    """
    Create an empty layer with the schema of an existing one.

    Examples:
        ogr-schema clone-schema roads.shp empty.gpkg
        ogr-schema clone-schema data.gpkg out.shp -l rivers -d "ESRI Shapefile"
    """
    ds = _open(dataset)
    defn = _get_defn(ds, layer)

    try:
        count = write_empty_layer(
            defn, output, driver=driver or settings.default_driver, layer=layer_name
        )
    except Exception as e:
        click.echo(f"Error writing schema: {e}", err=True)
        sys.exit(1)

    click.echo(f"Wrote {count:,} fields to {output}")
    ds.close()


if __name__ == "__main__":
    main()
