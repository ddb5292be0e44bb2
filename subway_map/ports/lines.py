"""Line classification port."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence, Tuple

if TYPE_CHECKING:
    from ..domain.models import LineTable, Node, Segment


class LineClassifierPort(Protocol):
    """Port for tagging route hops with lines.

    Implementation: adapters/lines/table_classifier.py
    """

    @property
    def table(self) -> LineTable:
        """The line membership table in use."""
        ...

    def annotate(self, nodes: Sequence[Node]) -> Tuple[Segment, ...]:
        """Classify the hops between consecutive nodes.

        Args:
            nodes: Nodes along the route, start to end.

        Returns:
            One segment per consecutive pair.
        """
        ...
