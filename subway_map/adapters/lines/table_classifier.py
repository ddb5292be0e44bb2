"""Table Line Classifier adapter.

Classifies route hops with an injected line membership table, which is
either built in code or read from the configured JSON line file.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence, Tuple

from ...config import GraphConfig
from ...domain.models import LineTable, Node, Segment
from ...graph.lines import classify, load_line_table


@dataclass
class TableLineClassifier:
    """Line classifier backed by a static membership table.

    This adapter implements LineClassifierPort. Lookups are done on
    node display names, in either traversal direction.

    Attributes:
        table: Line membership table (empty table = everything on the
            default line)
    """

    table: LineTable = field(default_factory=LineTable)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @classmethod
    def from_config(cls, config: GraphConfig) -> TableLineClassifier:
        """Build a classifier from the configured line file.

        Raises:
            ConfigurationError: If the line file is missing or malformed.
        """
        path = config.lines_path
        if path is None:
            return cls()
        return cls(table=load_line_table(path))

    def annotate(self, nodes: Sequence[Node]) -> Tuple[Segment, ...]:
        """Classify the hops between consecutive nodes."""
        segments = classify([node.name for node in nodes], self.table)
        self._logger.debug(
            "Route classified",
            extra={
                "segments": len(segments),
                "transfers": sum(1 for s in segments if s.is_transfer),
            },
        )
        return segments
