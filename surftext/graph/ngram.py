"""Character n-gram graphs built from encoded surface texts.

Every n-gram of a given rank is a node. Each n-gram is linked to the
n-grams of the same rank that start up to ``window`` positions before it;
edge weights count how often a pair co-occurs. Similarity scoring over
these graphs happens downstream.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path

from surftext.models.metadata import SurfaceMetadata

logger = logging.getLogger(__name__)

Edge = tuple[str, str]


class NGramGraph:
    def __init__(self, min_rank: int = 3, max_rank: int = 3, window: int = 3) -> None:
        if min_rank < 1 or max_rank < min_rank:
            raise ValueError(f"Invalid n-gram ranks [{min_rank}, {max_rank}]")
        if window < 1:
            raise ValueError(f"Window must be positive, got {window}")
        self.min_rank = min_rank
        self.max_rank = max_rank
        self.window = window
        self.data = ""
        self._edges: dict[int, dict[Edge, float]] = {}
        self._reset()

    def _reset(self) -> None:
        self._edges = {rank: defaultdict(float) for rank in self.ranks}

    @property
    def ranks(self) -> range:
        return range(self.min_rank, self.max_rank + 1)

    def set_data_string(self, data: str) -> None:
        """Rebuild the graph from ``data``."""
        self.data = data
        self._reset()
        for rank in self.ranks:
            grams = [data[i : i + rank] for i in range(len(data) - rank + 1)]
            edges = self._edges[rank]
            for i, gram in enumerate(grams):
                for prev in grams[max(0, i - self.window) : i]:
                    edges[(gram, prev)] += 1.0

    def load_data_string_from_file(self, path: str | Path, encoding: str = "utf-8") -> None:
        """Read an encoded text; the metadata header and line breaks are dropped."""
        lines = Path(path).read_text(encoding=encoding).splitlines()
        if lines and SurfaceMetadata.is_metadata_line(lines[0]):
            lines = lines[1:]
        self.set_data_string("".join(line.strip() for line in lines))

    def edges(self, rank: int | None = None) -> dict[Edge, float]:
        return dict(self._edges[rank if rank is not None else self.min_rank])

    def nodes(self, rank: int | None = None) -> set[str]:
        out: set[str] = set()
        for a, b in self._edges[rank if rank is not None else self.min_rank]:
            out.add(a)
            out.add(b)
        return out

    def edge_weight(self, source: str, target: str) -> float:
        return self._edges.get(len(source), {}).get((source, target), 0.0)

    @property
    def edge_count(self) -> int:
        return sum(len(e) for e in self._edges.values())

    def is_empty(self) -> bool:
        return self.edge_count == 0


@dataclass
class GraphLoadResult:
    """Outcome of building a graph from a file; ``error`` is set on failure."""

    graph: NGramGraph
    path: Path
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def load_graph(
    path: str | Path,
    min_rank: int = 3,
    max_rank: int = 3,
    window: int = 3,
    encoding: str = "utf-8",
) -> GraphLoadResult:
    """Build an n-gram graph from a text file without raising on I/O failure."""
    path = Path(path)
    graph = NGramGraph(min_rank=min_rank, max_rank=max_rank, window=window)
    try:
        graph.load_data_string_from_file(path, encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Failed to load text %s for n-gram graph: %s", path, e)
        return GraphLoadResult(graph=graph, path=path, error=e)

    logger.debug("Graph from %s: %d edges", path.name, graph.edge_count)
    return GraphLoadResult(graph=graph, path=path)
