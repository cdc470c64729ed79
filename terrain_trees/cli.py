"""Command-line parameters of the terrain tree tools: parsing, validation and help text."""

from __future__ import annotations

import re
import subprocess
import sys
from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto

from terrain_trees.paths import strip_path, tokenize

DEFAULT_X_PER_LEAF = -1
DEFAULT = "null"
CACHESIZE = 200
DEFAULT_COLUMNS = 80

BOLD = "\033[1m\033[33m"
RESET = "\033[0m"

_INT_PATTERN = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PATTERN = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")


class OpType(Enum):
    """How verbose an analysis is and whether it saves its results."""

    TIME_VERBOSE = auto()
    OUTPUT = auto()
    NOTHING = auto()


class QueryType(Enum):
    """The query or application to run on the index."""

    POINT = auto()
    BOX = auto()
    WINDVT = auto()
    WINDTT = auto()
    BATCH = auto()
    CONCENTRATED_CURVATURE = auto()
    MEAN_CCURVATURE = auto()
    GAUSS_CCURVATURE = auto()
    MORSE_ANALYSIS = auto()
    LOCAL_MORSE_SIMPLIFICATION = auto()
    GLOBAL_MORSE_SIMPLIFICATION = auto()
    MULTIVARIATE_MORSE_ANALYSIS = auto()
    FILTER = auto()
    SLOPES = auto()
    CRITICAL_POINTS = auto()
    NULL_QUERY = auto()


class SpatialDecType(IntEnum):
    """The spatial subdivision of the index; the value is the number of children."""

    KD = 2
    QUAD = 4
    UNSET = -1


class ArgumentError(ValueError):
    """Raised when the command-line parameters are wrong or incomplete."""


_SINGLE_QUERIES = {
    "batch": QueryType.BATCH,
    "concurv": QueryType.CONCENTRATED_CURVATURE,
    "mccurv": QueryType.MEAN_CCURVATURE,
    "gccurv": QueryType.GAUSS_CCURVATURE,
    "morse": QueryType.MORSE_ANALYSIS,
    "simpl": QueryType.LOCAL_MORSE_SIMPLIFICATION,
    "gsimpl": QueryType.GLOBAL_MORSE_SIMPLIFICATION,
    "multiv": QueryType.MULTIVARIATE_MORSE_ANALYSIS,
    "filter": QueryType.FILTER,
    "crit": QueryType.CRITICAL_POINTS,
    "slopes": QueryType.SLOPES,
}

_QUERIES_WITH_ARGUMENT = {
    "wvt": QueryType.WINDVT,
    "wtt": QueryType.WINDTT,
    "point": QueryType.POINT,
    "box": QueryType.BOX,
    "simpl": QueryType.LOCAL_MORSE_SIMPLIFICATION,
    "gsimpl": QueryType.GLOBAL_MORSE_SIMPLIFICATION,
}

_QUERIES_WITH_FILE = frozenset(
    {QueryType.WINDVT, QueryType.WINDTT, QueryType.POINT, QueryType.BOX}
)

_DIVISIONS = {"quad": SpatialDecType.QUAD, "kd": SpatialDecType.KD}

_CRITERIA = frozenset({"pm", "pr", "pmr"})


@dataclass
class CliParameters:
    """Everything the command line configures."""

    mesh_path: str = ""
    query_path: str = ""
    exe_name: str = ""
    tree_path: str = ""
    division_type: SpatialDecType = SpatialDecType.UNSET
    crit_type: str = DEFAULT
    is_index: bool = False
    is_get_input: bool = False
    is_tree_file: bool = False
    reindex: bool = True
    is_multifield: bool = False
    v_per_leaf: int = DEFAULT_X_PER_LEAF
    t_per_leaf: int = DEFAULT_X_PER_LEAF
    num_input_entries: int = 0
    ratio: float = 0.0
    query_type: QueryType = QueryType.NULL_QUERY
    input_gen_type: str = DEFAULT
    original_vertex_indices: list[int] = field(default_factory=list)
    original_triangle_indices: list[int] = field(default_factory=list)
    original_vertex_fields: list[float] = field(default_factory=list)
    revert_to_original: bool = False
    app_debug: OpType = OpType.NOTHING
    cache_size: int = CACHESIZE
    persistence: float = 0.65


def _to_int(text: str) -> int:
    """Leading integer of ``text``, or 0 when it does not start with one."""
    match = _INT_PATTERN.match(text)
    return int(match.group(1)) if match else 0


def _to_float(text: str) -> float:
    """Leading decimal number of ``text``, or 0.0 when it does not start with one."""
    match = _FLOAT_PATTERN.match(text)
    return float(match.group(1)) if match else 0.0


def spatial_dec_type_to_string(sdt: SpatialDecType) -> str:
    """Name of a subdivision type as used in tree file names."""
    if sdt == SpatialDecType.KD:
        return "kd"
    if sdt == SpatialDecType.QUAD:
        return "quad"
    return DEFAULT


def _parse_query(value: str, params: CliParameters) -> None:
    tokens = tokenize(value, "-")
    if len(tokens) == 1:
        query = _SINGLE_QUERIES.get(tokens[0])
        if query is not None:
            params.query_type = query
    elif len(tokens) < 2:
        print("[ERROR] [-q argument] when reading arguments", file=sys.stderr)
    else:
        query = _QUERIES_WITH_ARGUMENT.get(tokens[0])
        if query is not None:
            params.query_type = query
        if params.query_type in _QUERIES_WITH_FILE:
            params.query_path = tokens[1]
        else:
            params.persistence = _to_float(tokens[1])


def _parse_generation(value: str, params: CliParameters) -> None:
    tokens = tokenize(value, "-")
    if len(tokens) < 4:
        print("[ERROR] [-g argument] when reading arguments", file=sys.stderr)
        return
    if tokens[0] == "point":
        params.query_type = QueryType.POINT
    elif tokens[0] == "box":
        params.query_type = QueryType.BOX
    params.ratio = _to_float(tokens[1])
    params.num_input_entries = _to_int(tokens[2])
    params.input_gen_type = tokens[3]
    params.is_get_input = True


def read_arguments(argv: list[str]) -> CliParameters:
    """Parse a command line whose first item is the program name.

    Unknown options are ignored. Raises :class:`ArgumentError` when an option lacks
    its value or a per-leaf limit is not positive.
    """
    params = CliParameters()
    if not argv:
        return params
    params.exe_name = strip_path(argv[0])
    args = iter(argv[1:])

    def value_of(tag: str) -> str:
        value = next(args, None)
        if value is None:
            raise ArgumentError(f"[ERROR] missing value for the {tag} argument")
        return value

    for tag in args:
        if tag == "-i":
            params.mesh_path = value_of(tag)
        elif tag == "-f":
            params.tree_path = value_of(tag)
            params.is_tree_file = True
        elif tag == "-d":
            division = _DIVISIONS.get(value_of(tag))
            if division is not None:
                params.division_type = division
        elif tag == "-c":
            params.crit_type = value_of(tag)
        elif tag == "-v":
            params.v_per_leaf = _to_int(value_of(tag))
            if params.v_per_leaf < 1:
                raise ArgumentError(
                    "[ERROR] the limit of vertices per leaf must be greater than 0"
                )
        elif tag == "-t":
            params.t_per_leaf = _to_int(value_of(tag))
            if params.t_per_leaf < 1:
                raise ArgumentError(
                    "[ERROR] the limit of triangles per leaf must be greater than 0"
                )
        elif tag == "-s":
            params.is_index = True
        elif tag == "-noR":
            params.reindex = False
        elif tag == "-q":
            _parse_query(value_of(tag), params)
        elif tag == "-g":
            _parse_generation(value_of(tag), params)
        elif tag == "-output":
            params.app_debug = OpType.OUTPUT
        elif tag == "-vtime":
            params.app_debug = OpType.TIME_VERBOSE
    return params


def set_parameters(params: CliParameters) -> None:
    """Recover criterion, subdivision and per-leaf limits from the tree file name."""
    tokens = tokenize(params.tree_path, "_")
    for pos, token in enumerate(tokens):
        if token in _CRITERIA:
            params.crit_type = token
        if token in _DIVISIONS:
            params.division_type = _DIVISIONS[token]
        if token in ("v", "t"):
            if pos + 1 >= len(tokens):
                raise ArgumentError(
                    f"[ERROR] tree file name ends without a value after '{token}'"
                )
            if token == "v":
                params.v_per_leaf = _to_int(tokens[pos + 1])
            else:
                params.t_per_leaf = _to_int(tokens[pos + 1])


def check_parameters(params: CliParameters) -> None:
    """Raise :class:`ArgumentError` unless the parameters define a complete index."""
    if params.crit_type == DEFAULT or params.division_type == SpatialDecType.UNSET:
        raise ArgumentError(
            "[ERROR] initializing criterion or division type. Execution Stopped."
        )
    if params.crit_type == "pm" and (
        params.v_per_leaf == DEFAULT_X_PER_LEAF or params.t_per_leaf == DEFAULT_X_PER_LEAF
    ):
        raise ArgumentError(
            "[ERROR] initializing vertices_per_leaf or triangles_per_leaf. Execution Stopped."
        )
    if params.crit_type == "pr" and params.v_per_leaf == DEFAULT_X_PER_LEAF:
        raise ArgumentError("[ERROR] initializing vertices_per_leaf. Execution Stopped.")
    if params.crit_type == "pmr" and params.t_per_leaf == DEFAULT_X_PER_LEAF:
        raise ArgumentError("[ERROR] initializing triangles_per_leaf. Execution Stopped.")


def print_usage() -> None:
    """Write the short wrong-usage notice to standard error."""
    print(
        "[ERROR] Wrong Usage. Run ./terrain_trees for detailed instructions.",
        file=sys.stderr,
    )


def terminal_columns() -> int:
    """Width of the terminal as reported by ``tput cols``, or 80 when unknown."""
    try:
        result = subprocess.run(
            ["tput", "cols"], capture_output=True, text=True, check=False
        )
    except OSError:
        return DEFAULT_COLUMNS
    cols = _to_int(result.stdout or "")
    return cols if cols > 0 else DEFAULT_COLUMNS


def print_paragraph(text: str, cols: int) -> None:
    """Print ``text`` indented and wrapped into lines of ``cols - 20`` characters."""
    width = cols - 20
    if width <= 0:
        raise ValueError(f"at least 21 columns are needed, got {cols}")
    if len(text) < width:
        print(f"          {text}\n")
        return
    for start in range(0, len(text), width):
        indent = " " * 9 if text[start] == " " else " " * 10
        print(f"{indent}{text[start:start + width]}")
    print()


def _bold(text: str) -> None:
    print(f"{BOLD}{text}{RESET}")


def print_help(cols: int | None = None) -> None:
    """Print the detailed usage instructions, wrapped to ``cols`` columns."""
    if cols is None:
        cols = terminal_columns()

    def para(text: str) -> None:
        print_paragraph(text, cols)

    _bold("\n  NAME:\n")
    print(f"\tTerrain Trees library\n{RESET}")

    _bold("  USAGE: \n")
    _bold("    ./terrain_trees {<-v [kv] -t [kt] -c [crit] -d [div] | -f [tree_file]>")
    _bold("                       -q [op-file | app] -s -noR} | {-g [query-ratio-quantity-type]}")
    _bold("                       -i [mesh_file]")

    _bold("    -v [kv]")
    para("kv is the vertices threshold per leaf. This parameter is needed by PR-T and PM-T trees.")
    _bold("    -t [kt]")
    para("kt is the triangles threshold per leaf. This parameter is needed by PMR-T and PM-T trees.")
    _bold("    -c [crit]")
    para(
        "crit is the criterion type of the index. This can be PR-T tree (pr), "
        "PMR-T tree (pmr) and  PM-T tree (pm)."
    )
    _bold("    -d [div]")
    para("div is the division type of the index. This can be quadtree (quad) or kD-tree (kd).")
    para(
        "NOTA: these arguments must be used in conjunction in order to create an index. "
        "This operation generate as output a file containing the triangles index."
    )

    _bold("    -f [tree_file]")
    para("reads an spatial index from an input file")
    para(
        "tree_file contains a terrain tree. This file has a fixed syntax of the name "
        "that allows to recover the informations needed to initialize the index "
        "(i.e., kv, kt, division and criterion types)"
    )
    para("NOTA: you can use -f argument [OR] {-v / -t / -c / -d} accordingly to the chosen criterion.")

    _bold("    -q [op-file | app]")
    para("executes a spatialquery 'op'', reading from 'file' the point/box inputs")
    para(
        "'op' can be: point - box - wvt - wtt "
        "'point' stands for point location, 'box' for box query, "
        "'wvt' for windowed VT query and 'wtt' for windowed TT query."
        "'file' represent the path of the file that contains the inputs for the queries."
    )
    para(
        "'app' can be: batch - concurv - mccurv - gccurv - slopes - crit - filter "
        "'batch' extracts VT and TT relations on the whole mesh, "
        "'concurv' extracts the Concentrated Curvature, "
        "'mccurv' extracts the Mean CCurvature, "
        "'gccurv' extracts the Gaussian CCurvature, "
        "'slopes' extracts the slope values for the triangles and edges of the terrain, "
        "'crit' extracts the critical points of the terrain, "
        "'filter' reads a points cloud generates a PR tree, extracts the multifield of "
        "each 2D point and finally outputs both"
        " the multifield file and a points cloud file compatible with SpatialHadoop."
    )

    _bold("    -g [query-ratio-quantity-type]")
    para("generates a given number of input data for a specific query")
    para(
        "query can be: point - box. "
        "'ratio' is a number between 0 and 1, and and represents the percentage of the "
        "maximum side of the domain to pick. "
        "'quantity' is a positive number that indicate the number of inputs to generate. "
        "type can be: near - rand. 'near' stands for a randomly generated point that is "
        "near the mesh, "
        "while 'rand' stands for a randomly generated point that is inside the domain."
    )
    para(
        "If 'query' is equal to point 'ratio' must be equal to 0, otherwise 'ratio' "
        "must be greater than 0."
    )

    _bold("    -s")
    para("computes the statistics of a tree.")
    _bold("    -noR")
    para(
        "disable the procedures that exploits the spatial coherence of the index and the mesh. "
        "Notice that only spatial queries can be executed on this type of index."
    )
    _bold("    - i [mesh_file]")
    para(
        "reads the mesh_file containing the triangle mesh. The mesh can be in .tri, .off "
        "or .soup formats. "
        "The .soup format contains a triangulated terrain in which the vertices "
        "coordinates are represented within each triangle in their star."
    )

    _bold("    -output")
    para("if the application has this feature, save to file the executed analysis.")
    _bold("    -vtime")
    para("if the application has this feature, outputs detailed execution timing.")

    _bold("  EXAMPLE[1]: ")
    print("          ./terrain_trees -v 20 -c pr -d quad -s -i mesh.off")
    para(
        "First it reads the mesh [mesh.off]. Then, builds a PR-T tree with kv=20 and "
        "quadtree subdivision, "
        "on which it is exploited the spatial coherence of the mesh and index. "
        "Finally, it computes the index statistics (-s)."
    )

    _bold("  EXAMPLE[2]: ")
    print("          ./terrain_trees -f tree_file -q wvt-boxfile -i mesh.tri")
    para(
        "First it reads the mesh [mesh.tri]. Then, it reads the spatial index from .tree "
        "file (gathering the tree "
        "parameters direcly from the file name) and exploits the spatial coherence of the "
        "mesh and index. "
        "Finally, it executes the windowed VT queries, using the boxes into 'boxfile'."
    )

    _bold("  EXAMPLE[3]: ")
    print("          ./terrain_trees -v 20 -c pr -d quad -q crit -i mesh.soup -output")
    para(
        "First it reads the soup [mesh.soup].  Then, it builds a PR-T tree index with "
        "kv=20 and with quadtree subdivision. "
        "As last generation step, it exploits the spatial coherence of the mesh and index. "
        "Then, it extracts the indexed mesh representation of the soup and it saves that "
        "in a .off file. "
        "Finally, it computes the critical points, outputting them in .vtk files for "
        "visualization purposes (-output parameter)."
    )

    _bold("  DESCRIPTION: ")
    para(
        "Terrain trees are a new in-core family of spatial indexes for the representation "
        "and analysis of Triangulated Irregular Networks (TINs). "
        "Terrain trees combine a minimal encoding of the connectivity of the underlying "
        "triangle mesh with a hierarchical spatial index, implicitly "
        "representing the topological relations among vertices, edges and triangles. "
        "Topological relations are extracted locally within each leaf "
        "block of the hierarchal index at runtime, based on specific application needs."
    )