# hg4dslicer

Building blocks for a slicer that turns 3D models into layers for
valve-grid, parallel-deposition printers. The package holds a triangle
mesh model with its error types, mesh statistics and clean-up tools,
small geometry helpers, and a validation report type.

## Installation

```
pip install hg4dslicer
```

To run the tests:

```
pip install "hg4dslicer[test]"
pytest
```

## What is inside

- `hg4dslicer.model`
  - `Mesh` stores flat vertex coordinates (x, y, z triples) in
    `vertices`, triangle index triples in `indices`, optional `normals`,
    and its `units` (a `MeshUnits` member: `MILLIMETERS`, `CENTIMETERS`,
    `METERS` or `INCHES`).
  - `iter_vertices()` yields `(x, y, z)` tuples.
  - `bounding_box()` returns `(min_x, min_y, min_z, max_x, max_y, max_z)`.
  - `convert_units(target)` rescales the vertices in place. It knows the
    factors from millimetres to centimetres, metres and inches, and from
    each of those back to millimetres. Any other pair only relabels the
    units and leaves the coordinates as they are.
  - `validate()` raises `InvalidGeometryError` in these cases: the mesh
    is empty, a data length is not a multiple of 3, or an index is out
    of range.
  - All errors derive from `SlicerError`. Its subclasses are
    `ModelLoadError`, `InvalidGeometryError`, `LayerGenerationError`,
    `ValveMappingError`, `RoutingOptimizationError`,
    `PressureSimulationError`, `GCodeGenerationError`,
    `OutputWriteError`, `ConfigurationError`,
    `BuildVolumeExceededError` and `MaterialIncompatibilityError`.
    `str()` of an error gives a category prefix followed by the detail,
    for example `Invalid geometry: Mesh has no vertices`.
- `hg4dslicer.meshtools`
  - `compute_mesh_stats(mesh)` returns a `MeshStats` with these values:
    - vertex and triangle counts;
    - degenerate triangles, meaning those with an area below 1e-6;
    - surface area of the non-degenerate triangles;
    - a simplified manifold flag, which is false when a triangle is
      repeated;
    - the enclosed volume when the manifold flag is set.
  - `MeshStats.empty()` gives the statistics of an empty mesh.
    `is_healthy()` tells whether the mesh has geometry, no degenerate
    faces and is manifold.
  - `validate_mesh_topology(mesh)` raises `MeshLoadError` for a mesh
    without vertices or triangles. It logs warnings for degenerate or
    non-manifold geometry and returns the statistics.
  - `center_mesh(mesh)` centres X and Y on the origin and moves the
    lowest Z to 0.
  - `scale_mesh(mesh, scale)` multiplies every coordinate by `scale`.
  - `merge_vertices(mesh, threshold)` merges vertices closer than
    `threshold`, rewrites the indices, and returns how many vertices
    were removed.
  - `triangle_area(v0, v1, v2)` returns the area of one triangle.
  - `LoadOptions` holds the loading options with their defaults:
    millimetres, a merge threshold of 0.001 and a scale factor of 1.0.
  - `MeshFormat` names file formats. Its `extensions()` and
    `display_name()` give the extensions and a readable name.
  - The module also holds the constants `MAX_IN_MEMORY_SIZE`,
    `STL_BINARY_HEADER_SIZE` and `STL_BINARY_TRIANGLE_SIZE`.
- `hg4dslicer.geometry`
  - `Point2D` has `distance_to()`.
  - `Point3D` is a point in space.
  - `interpolate(a, b, t)`, `clamp(value, minimum, maximum)` and
    `map_range(value, in_min, in_max, out_min, out_max)` are numeric
    helpers.
  - `manhattan_distance(start, end)` gives the distance between two
    `(x, y)` grid positions.
- `hg4dslicer.report`
  - `ValidationReport` collects messages with `add_error()`,
    `add_warning()` and `add_info()`.
  - An error marks the report as no longer `valid`.

## Example

```python
from hg4dslicer.model import Mesh, MeshUnits
from hg4dslicer.meshtools import center_mesh, compute_mesh_stats, merge_vertices

mesh = Mesh(
    vertices=[0.0, 0.0, 0.0, 10.0, 0.0, 0.0, 10.0, 10.0, 0.0, 0.0, 10.0, 5.0],
    indices=[0, 1, 2, 0, 2, 3],
    units=MeshUnits.MILLIMETERS,
)
mesh.validate()
print(mesh.bounding_box())         # (0.0, 0.0, 0.0, 10.0, 10.0, 5.0)

stats = compute_mesh_stats(mesh)
print(stats.triangle_count, stats.is_healthy())

center_mesh(mesh)                  # X/Y centred on the origin, Z starts at 0
print(merge_vertices(mesh, 0.001)) # 0: no vertices were close together
```

## What this package does not do

This package does not do any of the following:

- It does not read or write model files. There is no STL, OBJ or 3MF
  parser, and `MeshFormat` and the STL size constants only describe
  those formats.
- It does not cut a mesh into layers.
- It does not map geometry to a valve grid or route material.
- It does not simulate pressure.
- It does not produce G-code or output files.
- It provides no command-line tool.

It is a library of the data model and mesh utilities on which such steps
would build.