"""Encoder — turns a surface into a sequence of zone symbols.

An encoder is bound to one surface copy and one zone count. The boundary
table and classifier are fixed at construction; ``classify()`` fills the
text, one TextPoint per sample in scan order.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import TextIO

from surftext.engine.classifier import ZonedClassifier
from surftext.engine.config import EncoderConfig
from surftext.engine.records import BoundaryTable, TextPoint
from surftext.engine.registry import get_registry
from surftext.engine.strategies.base import PartitionStrategy
from surftext.errors import EncodingError, NotClassifiedError
from surftext.graph.ngram import GraphLoadResult, load_graph
from surftext.surface.grid import Surface
from surftext.surface.serializer import serialize_document, serialize_symbols

logger = logging.getLogger(__name__)


class Encoder:
    def __init__(
        self,
        surface: Surface,
        zones: int,
        strategy: PartitionStrategy | str,
        config: EncoderConfig | None = None,
    ) -> None:
        self.config = config or EncoderConfig()
        if isinstance(strategy, str):
            strategy = get_registry().create(strategy, self.config)
        self.strategy = strategy
        self.zones = zones

        self._surface = surface.copy()
        self.table: BoundaryTable = strategy.partition(self._surface, zones)
        self.classifier = ZonedClassifier.build(self.table, self.config.out_of_domain)
        self._text: list[TextPoint] = []

    @property
    def surface(self) -> Surface:
        return self._surface

    @property
    def text(self) -> tuple[TextPoint, ...]:
        return tuple(self._text)

    @property
    def symbols(self) -> str:
        return "".join(tp.symbol for tp in self._text)

    @property
    def is_classified(self) -> bool:
        return bool(self._text)

    def rebind(self, surface: Surface) -> None:
        """Bind a copy of ``surface`` and drop the current text. The table is kept."""
        self._surface = surface.copy()
        self._text.clear()

    def rescale(self, exponent: int) -> None:
        """Rescale heights so the rms reference becomes ``rms * 10**exponent``."""
        self._surface = self._surface.rescaled(self._surface.rms * 10.0**exponent)
        self._text.clear()

    def classify(self) -> list[TextPoint]:
        """Append one TextPoint per sample. Repeated calls append again."""
        if self._text:
            logger.warning(
                "classify() called on an already classified encoder; text will hold %d entries",
                len(self._text) + self._surface.total_count,
            )

        start = time.perf_counter()
        values = self.strategy.measure(self._surface)
        clamped = int(self.classifier.out_of_domain_mask(values).sum())
        symbols = self.classifier.classify_many(values)
        if clamped:
            logger.warning(
                "%d of %d samples outside [%g, %g] clamped to the outer zones",
                clamped,
                len(symbols),
                self.table.low,
                self.table.high,
            )

        self._text.extend(
            TextPoint(index=int(i), symbol=s) for i, s in zip(self._surface.indices, symbols)
        )
        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "Classified %d samples into %d zones (%s) in %.1fms",
            len(symbols),
            self.zones,
            self.strategy.name,
            elapsed,
        )
        return list(self._text)

    def _require_text(self) -> None:
        if not self._text:
            raise NotClassifiedError("Nothing to render: call classify() first")
        if len(self._text) != self._surface.total_count:
            raise EncodingError(
                f"Text holds {len(self._text)} symbols for {self._surface.total_count} samples;"
                " rebind() before classifying again"
            )

    def render(self) -> str:
        """Symbol grid, one row per N samples, followed by a blank line."""
        self._require_text()
        return serialize_symbols((tp.symbol for tp in self._text), self._surface.side)

    def _document(self) -> str:
        self._require_text()
        return serialize_document((tp.symbol for tp in self._text), self._surface.metadata)

    def render_to(self, sink: str | Path | TextIO) -> None:
        """Write metadata line and grid to ``sink``; the sink is closed on every exit."""
        if isinstance(sink, (str, Path)):
            document = self._document()
            with open(sink, "w", encoding=self.config.text_encoding) as handle:
                handle.write(document)
            logger.info("Wrote encoded text to %s", sink)
            return

        try:
            sink.write(self._document())
        finally:
            sink.close()

    def to_graph(
        self,
        path: str | Path,
        min_rank: int = 3,
        max_rank: int = 3,
        window: int = 3,
    ) -> GraphLoadResult:
        """Build an n-gram graph from a rendered text file. Failures are returned, not raised."""
        return load_graph(
            path,
            min_rank=min_rank,
            max_rank=max_rank,
            window=window,
            encoding=self.config.text_encoding,
        )
