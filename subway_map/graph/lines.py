"""Line classification of a route.

Each hop of a path is assigned to the line whose membership set
contains the (unordered) pair of node names, and a transfer is flagged
whenever the line changes from one hop to the next.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Mapping, Optional, Sequence, Tuple, Union

from ..domain.errors import ConfigurationError
from ..domain.models import ClassifiedRoute, LineDefinition, LineTable, Segment


def classify(path: Sequence[str], table: LineTable) -> Tuple[Segment, ...]:
    """Tag every consecutive pair of ``path`` with its line.

    Parameters
    ----------
    path:
        Node names along the route.
    table:
        Line membership table.

    Returns
    -------
    tuple[Segment, ...]
        ``len(path) - 1`` segments, the last hop included.
    """
    segments: List[Segment] = []
    current_line: Optional[str] = None

    for a, b in zip(path, path[1:]):
        line = table.line_for(a, b)
        name = line.name if line is not None else table.default_line
        color = line.color if line is not None else table.default_color

        is_transfer = current_line is not None and name != current_line
        current_line = name

        segments.append(
            Segment(
                from_node=a,
                to_node=b,
                line=name,
                color=color,
                is_transfer=is_transfer,
            )
        )

    return tuple(segments)


def load_line_table(path: Union[str, Path]) -> LineTable:
    """Read a line table from JSON.

    Expected layout::

        {
          "default": {"name": "Walkway", "color": "gray"},
          "lines": {
            "Blue": {"color": "#1f77b4", "connections": ["Lane-Summit"]}
          }
        }

    A line may also be given directly as a list of connections.

    Raises:
        ConfigurationError: If the file is missing or malformed.
    """
    file_path = Path(path)
    try:
        with file_path.open(encoding="utf-8") as f:
            document = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(
            f"Cannot read line table {file_path}",
            setting_name="graph.lines_file",
            cause=e,
        )
    return line_table_from_document(document)


def line_table_from_document(document: Any) -> LineTable:
    if not isinstance(document, Mapping) or not isinstance(
        document.get("lines", {}), Mapping
    ):
        raise ConfigurationError(
            "Line table must be an object with a 'lines' mapping",
            setting_name="lines",
            expected_type="object",
        )

    default = document.get("default") or {}
    if not isinstance(default, Mapping):
        raise ConfigurationError(
            "Default line must be an object with 'name' and 'color'",
            setting_name="default",
            expected_type="object",
        )

    lines: List[LineDefinition] = []

    for name, spec in document.get("lines", {}).items():
        if isinstance(spec, Mapping):
            color = spec.get("color", str(name).lower())
            connections = spec.get("connections", [])
        else:
            color = str(name).lower()
            connections = spec

        if not isinstance(connections, list):
            raise ConfigurationError(
                f"Connections of line {name!r} must be a list",
                setting_name=f"lines.{name}",
                expected_type="list",
            )

        table = LineTable.from_mapping({name: connections}, colors={name: color})
        lines.extend(table.lines)

    return LineTable(
        lines=tuple(lines),
        default_line=default.get("name", "Default"),
        default_color=default.get("color", "gray"),
    )


def describe_route(route: ClassifiedRoute) -> List[str]:
    """Turn-by-turn description of a classified route."""
    if route.is_empty:
        return ["No route found"]

    names = route.route.names or route.path
    if not route.segments:
        return [f"Start: {names[0]}", f"End: {names[-1]}"]

    first = route.segments[0]
    steps = [f"Start: {first.from_node} ({first.line} line)"]
    for segment in route.segments:
        if segment.is_transfer:
            steps.append(f"Transfer at {segment.from_node} to {segment.line} line")
    steps.append(f"End: {route.segments[-1].to_node}")
    return steps


def format_route(route: ClassifiedRoute) -> str:
    """One-line summary: ``Route: A -> B -> C``."""
    if route.is_empty:
        return "No route found"
    names = route.route.names or route.path
    return f"Route: {' -> '.join(names)}"
