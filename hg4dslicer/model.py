"""Mesh representation and the error types raised while slicing."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

BoundingBox = tuple[float, float, float, float, float, float]


class MeshUnits(Enum):
    """Length unit that mesh coordinates are expressed in."""

    MILLIMETERS = "mm"
    CENTIMETERS = "cm"
    METERS = "m"
    INCHES = "in"


_UNIT_SCALES: dict[tuple[MeshUnits, MeshUnits], float] = {
    (MeshUnits.MILLIMETERS, MeshUnits.CENTIMETERS): 0.1,
    (MeshUnits.MILLIMETERS, MeshUnits.METERS): 0.001,
    (MeshUnits.MILLIMETERS, MeshUnits.INCHES): 0.0393701,
    (MeshUnits.CENTIMETERS, MeshUnits.MILLIMETERS): 10.0,
    (MeshUnits.METERS, MeshUnits.MILLIMETERS): 1000.0,
    (MeshUnits.INCHES, MeshUnits.MILLIMETERS): 25.4,
}


class SlicerError(Exception):
    """Base class for errors raised by the slicer."""

    prefix = "Slicer error"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"{self.prefix}: {self.detail}"


class ModelLoadError(SlicerError):
    prefix = "Model loading error"


class InvalidGeometryError(SlicerError):
    prefix = "Invalid geometry"


class LayerGenerationError(SlicerError):
    prefix = "Layer generation failed"


class ValveMappingError(SlicerError):
    prefix = "Valve mapping failed"


class RoutingOptimizationError(SlicerError):
    prefix = "Routing optimization failed"


class PressureSimulationError(SlicerError):
    prefix = "Pressure simulation failed"


class GCodeGenerationError(SlicerError):
    prefix = "G-code generation failed"


class OutputWriteError(SlicerError):
    prefix = "Output writing failed"


class ConfigurationError(SlicerError):
    prefix = "Configuration error"


class BuildVolumeExceededError(SlicerError):
    prefix = "Model exceeds build volume"


class MaterialIncompatibilityError(SlicerError):
    prefix = "Material incompatibility"


@dataclass
class Mesh:
    """Triangle mesh stored as flat vertex coordinates and index triples."""

    vertices: list[float] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    normals: list[float] | None = None
    units: MeshUnits = MeshUnits.MILLIMETERS

    def iter_vertices(self) -> Iterator[tuple[float, float, float]]:
        """Yield vertices as (x, y, z) triples."""
        it = iter(self.vertices)
        return zip(it, it, it)

    def bounding_box(self) -> BoundingBox:
        """Return the axis-aligned bounds (min_x, min_y, min_z, max_x, max_y, max_z)."""
        min_x = min_y = min_z = float("inf")
        max_x = max_y = max_z = float("-inf")
        for x, y, z in self.iter_vertices():
            min_x, min_y, min_z = min(min_x, x), min(min_y, y), min(min_z, z)
            max_x, max_y, max_z = max(max_x, x), max(max_y, y), max(max_z, z)
        return (min_x, min_y, min_z, max_x, max_y, max_z)

    def convert_units(self, target: MeshUnits) -> None:
        """Rescale the vertices in place to the target unit."""
        if self.units == target:
            return
        scale = _UNIT_SCALES.get((self.units, target), 1.0)
        self.vertices = [v * scale for v in self.vertices]
        self.units = target

    def validate(self) -> None:
        """Check the mesh for structural integrity, raising InvalidGeometryError."""
        if not self.vertices:
            raise InvalidGeometryError("Mesh has no vertices")
        if len(self.vertices) % 3:
            raise InvalidGeometryError("Vertex data length not multiple of 3")
        if not self.indices:
            raise InvalidGeometryError("Mesh has no triangles")
        if len(self.indices) % 3:
            raise InvalidGeometryError("Index data length not multiple of 3")
        vertex_count = len(self.vertices) // 3
        for idx in self.indices:
            if idx < 0 or idx >= vertex_count:
                raise InvalidGeometryError(
                    f"Triangle references out-of-bounds vertex {idx}"
                )