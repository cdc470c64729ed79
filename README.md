# terrain_trees

Building blocks for tools that index and analyse Triangulated Irregular
Networks (TINs): planar points, vertices carrying an elevation and extra
scalar fields, boxes, triangle soups and incidence records, together with
helpers for sorted-container set operations, an LRU cache, a timer, file-name
handling and the parsing and checking of the tools' command-line parameters.

The package depends on the standard library only.

## Modules

| Module | Contents |
| --- | --- |
| `terrain_trees.primitives` | `Point`, `Vertex` |
| `terrain_trees.incidence` | `VertexTrianglePair`, `EdgeTriangleTuple` |
| `terrain_trees.box` | `Box`: intersection, containment, resizing, distance |
| `terrain_trees.soup` | `ExplicitTriangle`, `Soup` |
| `terrain_trees.paths` | `strip_path`, `get_path`, `get_file_name`, `get_file_extension`, `get_path_without_file_extension`, `tokenize`, `go_to_line` |
| `terrain_trees.containers` | set operations on sorted and nested containers |
| `terrain_trees.lru_cache` | `LRUCache` |
| `terrain_trees.timer` | `Timer` |
| `terrain_trees.cli` | `read_arguments`, `set_parameters`, `check_parameters`, `print_help` and related types |

## Conventions

* The first field of a `Vertex` is its elevation (`z`). Equality and ordering
  of points and vertices use the planar coordinates only.
* `Vertex.coordinate(2)` returns the elevation; positions 0 and 1 are x and y.
* `Box.contains` treats the faces through the minimum corner as closed and the
  faces through the maximum corner as open, unless they lie on the border of
  the domain; `Box.contains_closed` treats every face as closed.
* Triangles of a `Soup` are addressed from index **1**; `Soup.triangle`
  raises `IndexError` outside `1..len(soup)`.
* `EdgeTriangleTuple.create` sorts the two vertex indices; two tuples compare
  equal when they describe the same edge, and ordering breaks ties on the
  triangle index.

## Examples

Geometry:

```python
from terrain_trees.primitives import Point, Vertex
from terrain_trees.box import Box

domain = Box(Point(0.0, 0.0), Point(10.0, 10.0))
domain.contains_closed(Point(3.0, 4.0))   # True
domain.min_distance(Point(13.0, 14.0))    # 5.0
domain.resize(Point(12.0, -1.0))          # domain now spans (0, -1)..(12, 10)

v = Vertex(1.0, 2.0, 30.0)                # x, y, elevation
v.add_field(0.5)                          # an extra scalar field
```

Path helpers:

```python
from terrain_trees.paths import get_file_extension, get_path_without_file_extension, tokenize

get_file_extension("data/terrain.off")               # "off"
get_path_without_file_extension("data/terrain.off")  # "data/terrain"
tokenize("terrain_quad_pr_v_20_.tree", "_")          # ["terrain", "quad", "pr", "v", "20", ".tree"]
```

Sorted containers and the cache:

```python
from terrain_trees.containers import intersect_sorted, union_sorted
from terrain_trees.lru_cache import LRUCache

intersect_sorted([1, 2, 4], [2, 3, 4])   # [2, 4]
union_sorted([1, 3], [2, 3])             # [1, 2, 3]

cache = LRUCache(2)
cache.insert("a", 1)
cache.insert("b", 2)
cache.find("a")                          # 1, and "a" becomes most recent
cache.insert("c", 3)                     # evicts "b"
```

Timing:

```python
from terrain_trees.timer import Timer

with Timer() as timer:
    ...
timer.print_elapsed_time("[TIME] work ")  # written to standard error
```

Reading the tools' parameters:

```python
from terrain_trees.cli import read_arguments, set_parameters, check_parameters

params = read_arguments(["terrain_trees", "-v", "20", "-c", "pr", "-d", "quad", "-i", "mesh.off"])
check_parameters(params)

params = read_arguments(["terrain_trees", "-f", "mesh_quad_pr_v_20_.tree", "-i", "mesh.off"])
set_parameters(params)   # criterion, subdivision and limits taken from the file name
```

Missing option values, non-positive per-leaf limits and incomplete index
settings raise `terrain_trees.cli.ArgumentError`. `print_help` prints the
detailed usage text, wrapped to the terminal width reported by `tput cols`
(80 columns when that is unavailable).

## What the package does not do

It does not build or query spatial indexes, hold indexed triangle meshes,
read or write mesh, soup or tree files, or compute curvature, slopes or
critical points. It installs no command: `terrain_trees.cli` parses and
checks parameters and prints help text, but nothing acts on them.

## Running the tests

Install the `test` extra and run pytest from the project root.