"""Mesh loading options, statistics and in-place mesh processing helpers."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from hg4dslicer.model import Mesh, MeshUnits, SlicerError

logger = logging.getLogger(__name__)

MAX_IN_MEMORY_SIZE = 100 * 1024 * 1024
"""Largest file size loaded fully into memory (100 MB)."""

STL_BINARY_HEADER_SIZE = 84
"""Binary STL header: 80 bytes of text plus a 4-byte triangle count."""

STL_BINARY_TRIANGLE_SIZE = 50
"""Size of one triangle record in a binary STL file."""

_DEGENERATE_AREA = 1e-6

Vertex = Sequence[float]


class MeshLoadError(SlicerError):
    """Raised when a mesh cannot be loaded or fails validation."""

    prefix = "Mesh loading error"


@dataclass
class LoadOptions:
    """Options controlling validation and processing of a loaded mesh."""

    validate_topology: bool = True
    auto_fix: bool = True
    target_units: MeshUnits | None = MeshUnits.MILLIMETERS
    center_on_origin: bool = False
    scale_factor: float = 1.0
    merge_threshold: float | None = 0.001


@dataclass
class MeshStats:
    """Statistics describing a mesh."""

    vertex_count: int
    triangle_count: int
    degenerate_count: int
    is_manifold: bool
    component_count: int
    surface_area: float
    volume: float | None

    @staticmethod
    def empty() -> MeshStats:
        """Statistics for a mesh with nothing in it."""
        return MeshStats(
            vertex_count=0,
            triangle_count=0,
            degenerate_count=0,
            is_manifold=False,
            component_count=0,
            surface_area=0.0,
            volume=None,
        )

    def is_healthy(self) -> bool:
        """True when the mesh has geometry, no degenerate faces and is manifold."""
        return (
            self.vertex_count > 0
            and self.triangle_count > 0
            and self.degenerate_count == 0
            and self.is_manifold
        )


class MeshFormat(Enum):
    """File formats a mesh can be stored in."""

    STL_ASCII = "stl_ascii"
    STL_BINARY = "stl_binary"
    OBJ = "obj"
    THREE_MF = "3mf"
    UNKNOWN = "unknown"

    def extensions(self) -> tuple[str, ...]:
        """Typical file extensions for this format."""
        return _FORMAT_EXTENSIONS[self]

    def display_name(self) -> str:
        """Human-readable name of the format."""
        return _FORMAT_NAMES[self]


_FORMAT_EXTENSIONS: dict[MeshFormat, tuple[str, ...]] = {
    MeshFormat.STL_ASCII: ("stl",),
    MeshFormat.STL_BINARY: ("stl",),
    MeshFormat.OBJ: ("obj",),
    MeshFormat.THREE_MF: ("3mf",),
    MeshFormat.UNKNOWN: (),
}

_FORMAT_NAMES: dict[MeshFormat, str] = {
    MeshFormat.STL_ASCII: "STL (ASCII)",
    MeshFormat.STL_BINARY: "STL (Binary)",
    MeshFormat.OBJ: "Wavefront OBJ",
    MeshFormat.THREE_MF: "3D Manufacturing Format (3MF)",
    MeshFormat.UNKNOWN: "Unknown",
}


def _vertex(mesh: Mesh, index: int) -> tuple[float, float, float]:
    start = index * 3
    x, y, z = mesh.vertices[start : start + 3]
    return x, y, z


def _triangles(mesh: Mesh):
    it = iter(mesh.indices)
    return zip(it, it, it)


def triangle_area(v0: Vertex, v1: Vertex, v2: Vertex) -> float:
    """Area of a triangle computed from the cross product of two edges."""
    e1 = [b - a for a, b in zip(v0, v1)]
    e2 = [b - a for a, b in zip(v0, v2)]
    cross = (
        e1[1] * e2[2] - e1[2] * e2[1],
        e1[2] * e2[0] - e1[0] * e2[2],
        e1[0] * e2[1] - e1[1] * e2[0],
    )
    return math.sqrt(sum(c * c for c in cross)) / 2.0


def _check_manifold(mesh: Mesh) -> bool:
    # Simplified check: a mesh with a repeated triangle is not manifold.
    seen: set[tuple[int, ...]] = set()
    for tri in _triangles(mesh):
        key = tuple(sorted(tri))
        if key in seen:
            return False
        seen.add(key)
    return True


def _calculate_volume(mesh: Mesh) -> float:
    volume = 0.0
    for a, b, c in _triangles(mesh):
        v0, v1, v2 = _vertex(mesh, a), _vertex(mesh, b), _vertex(mesh, c)
        volume += (
            v0[0] * (v1[1] * v2[2] - v1[2] * v2[1])
            + v0[1] * (v1[2] * v2[0] - v1[0] * v2[2])
            + v0[2] * (v1[0] * v2[1] - v1[1] * v2[0])
        )
    return abs(volume / 6.0)


def compute_mesh_stats(mesh: Mesh) -> MeshStats:
    """Compute statistics used for validation and reporting."""
    degenerate = 0
    surface_area = 0.0
    for a, b, c in _triangles(mesh):
        area = triangle_area(_vertex(mesh, a), _vertex(mesh, b), _vertex(mesh, c))
        if area < _DEGENERATE_AREA:
            degenerate += 1
        else:
            surface_area += area

    manifold = _check_manifold(mesh)
    return MeshStats(
        vertex_count=len(mesh.vertices) // 3,
        triangle_count=len(mesh.indices) // 3,
        degenerate_count=degenerate,
        is_manifold=manifold,
        component_count=1,
        surface_area=surface_area,
        volume=_calculate_volume(mesh) if manifold else None,
    )


def validate_mesh_topology(mesh: Mesh) -> MeshStats:
    """Check that a mesh is printable; raise MeshLoadError if it is empty.

    Degenerate triangles and non-manifold geometry are logged as warnings.
    Returns the computed statistics.
    """
    stats = compute_mesh_stats(mesh)
    if stats.vertex_count == 0:
        raise MeshLoadError("Mesh has no vertices")
    if stats.triangle_count == 0:
        raise MeshLoadError("Mesh has no triangles")
    if stats.degenerate_count > 0:
        logger.warning("Mesh contains %d degenerate triangles", stats.degenerate_count)
    if not stats.is_manifold:
        logger.warning("Mesh is not manifold (has non-manifold edges)")
    return stats


def center_mesh(mesh: Mesh) -> None:
    """Center the mesh on the origin in X and Y and rest it on Z = 0."""
    min_x, min_y, min_z, max_x, max_y, _ = mesh.bounding_box()
    offset = ((min_x + max_x) / 2.0, (min_y + max_y) / 2.0, min_z)
    mesh.vertices = [
        coord - offset[axis]
        for vertex in mesh.iter_vertices()
        for axis, coord in enumerate(vertex)
    ]


def scale_mesh(mesh: Mesh, scale: float) -> None:
    """Multiply every vertex coordinate by scale."""
    mesh.vertices = [v * scale for v in mesh.vertices]


def merge_vertices(mesh: Mesh, threshold: float) -> int:
    """Merge vertices closer than threshold; return how many were removed.

    Each vertex maps onto the first earlier kept vertex within the threshold.
    """
    threshold_sq = threshold * threshold
    unique: list[tuple[float, float, float]] = []
    remap: list[int] = []

    for vertex in mesh.iter_vertices():
        match = next(
            (
                j
                for j, kept in enumerate(unique)
                if sum((a - b) ** 2 for a, b in zip(vertex, kept)) < threshold_sq
            ),
            None,
        )
        if match is None:
            remap.append(len(unique))
            unique.append(vertex)
        else:
            remap.append(match)

    mesh.indices = [remap[idx] for idx in mesh.indices]
    mesh.vertices = [coord for vertex in unique for coord in vertex]
    return len(remap) - len(unique)