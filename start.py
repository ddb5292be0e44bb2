"""Terminal launcher for the campus subway map.

Lists the campus locations, asks for a start and an end (by id or by
name), prints the route and optionally saves a map of it.
"""

from __future__ import annotations

import sys

from subway_map.container import get_container
from subway_map.domain.errors import SubwayMapError
from subway_map.logging_config import configure_logging
from subway_map.ports.graph import GraphRepositoryPort
from subway_map.services import RoutePlannerService


def _resolve(repository: GraphRepositoryPort, answer: str) -> str:
    node = repository.get_node(answer) or repository.find_node_by_name(answer)
    return node.id if node is not None else answer


def main() -> None:
    configure_logging()
    container = get_container()
    repository = container.resolve(GraphRepositoryPort)

    try:
        planner = container.resolve(RoutePlannerService)
        nodes = repository.list_nodes()
    except SubwayMapError as e:
        print(f"Could not load the campus map: {e}")
        sys.exit(1)

    print("=== Campus subway map ===")
    for node in nodes:
        print(f"{node.id:>4}  {node.name}")

    start = _resolve(repository, input("From: ").strip())
    end = _resolve(repository, input("To: ").strip())

    route = planner.plan(start, end)
    print(planner.format_result(route))
    if route.is_empty:
        return

    choice = input("Save a map? (y/N) ").strip().lower()
    if choice in {"y", "yes"}:
        suffix = ".svg" if container.config.rendering.renderer == "schematic" else ".html"
        output_path = container.config.output_dir / f"route{suffix}"
        try:
            saved = planner.render(route, output_path)
        except SubwayMapError as e:
            print(f"Map generation failed: {e}")
            return
        if saved is not None:
            print(f"Map saved to: {saved}")


if __name__ == "__main__":
    main()
