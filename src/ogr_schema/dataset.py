"""
VectorDataset: open a GDAL vector dataset and hand out layer definitions.

GDAL's Python bindings are imported when a dataset is opened, so the rest of
the package can be used with any handle that follows the OGR method names.
"""

import logging
from collections.abc import Iterator
from pathlib import Path
from types import TracebackType
from typing import Any

from .defn import Defn

logger = logging.getLogger(__name__)


class VectorDataset:
    """
    Reader for the layer definitions of a GDAL vector dataset.

    Example:
        >>> with VectorDataset("roads.gpkg") as ds:
        ...     for name, defn in ds.layer_defns():
        ...         print(name, [f.name for f in defn.fields()])

    Attributes:
        path: Path to the dataset
    """

    def __init__(self, path: str | Path):
        """
        Open a vector dataset.

        Args:
            path: Path to a file or directory GDAL can open as vector data

        Raises:
            FileNotFoundError: If the path doesn't exist
            ValueError: If GDAL cannot open it as a vector dataset
        """
        self.path = Path(path)
        if not self.path.exists():
            raise FileNotFoundError(f"Dataset not found: {self.path}")

        self._ds: Any = self._open()

    def _open(self) -> Any:
        from osgeo import gdal

        gdal.UseExceptions()
        try:
            ds = gdal.OpenEx(str(self.path), gdal.OF_VECTOR)
        except RuntimeError as e:
            raise ValueError(f"Invalid vector dataset: {e}") from e
        if ds is None:
            raise ValueError(f"Invalid vector dataset: {self.path}")
        logger.debug("Opened %s with driver %s", self.path, ds.GetDriver().ShortName)
        return ds

    def _dataset(self) -> Any:
        if self._ds is None:
            raise ValueError(f"Dataset is closed: {self.path}")
        return self._ds

    def close(self):
        """Release the dataset. Defns already handed out stay usable."""
        self._ds = None

    def __enter__(self) -> "VectorDataset":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    @property
    def layer_count(self) -> int:
        return self._dataset().GetLayerCount()

    @property
    def layer_names(self) -> list[str]:
        """Names of all layers in the dataset"""
        ds = self._dataset()
        return [ds.GetLayer(i).GetName() for i in range(ds.GetLayerCount())]

    def layer_defn(self, layer: str | int = 0) -> Defn:
        """
        Get the definition of one layer.

        Args:
            layer: Layer name (case-insensitive) or index

        Returns:
            Defn that keeps the layer and dataset alive

        Raises:
            ValueError: If the layer doesn't exist
        """
        ds = self._dataset()
        if isinstance(layer, int):
            lyr = ds.GetLayer(layer) if 0 <= layer < ds.GetLayerCount() else None
        else:
            lyr = ds.GetLayerByName(layer)
        if lyr is None:
            raise ValueError(f"Layer not found: {layer}")
        return Defn.from_handle(lyr.GetLayerDefn(), owner=(ds, lyr))

    def layer_defns(self) -> Iterator[tuple[str, Defn]]:
        """
        Iterate over all layers.

        Yields:
            (layer name, Defn) tuples
        """
        ds = self._dataset()
        for i in range(ds.GetLayerCount()):
            lyr = ds.GetLayer(i)
            yield lyr.GetName(), Defn.from_handle(lyr.GetLayerDefn(), owner=(ds, lyr))
