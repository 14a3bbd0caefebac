"""Batched ingestion of decoded input lines."""

import logging
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Protocol

from norikra_client.error import DecodeError
from norikra_client.formats import Record

logger = logging.getLogger(__name__)


class EventSink(Protocol):
    def send(self, target: str, events: Sequence[Record]) -> None: ...


class IngestionBatcher:
    """Decodes lines and sends them to a target in fixed-size batches.

    Every decoded record is sent exactly once, in input order. All batches
    hold ``batch_size`` records except possibly the last one. A decode error
    or a failed send aborts the run; batches already sent stay sent.
    """

    def __init__(
        self,
        sink: EventSink,
        batch_size: int,
        decode: Callable[[str], Record],
    ) -> None:
        if batch_size < 1:
            raise ValueError(f"batch_size must be positive, got {batch_size}")
        self._sink = sink
        self._batch_size = batch_size
        self._decode = decode

    def run(self, lines: Iterable[str | bytes], target: str) -> int:
        """Send all records read from ``lines`` to ``target``.

        ``lines`` may yield text or raw bytes; bytes are decoded as UTF-8.

        Returns:
            Total number of records sent.

        Raises:
            DecodeError: If a line is malformed or not valid UTF-8
                (with its 1-based line number).
        """
        buffer: list[Record] = []
        sent = 0

        for line_number, line in enumerate(_numbered_lines(lines), 1):
            try:
                if isinstance(line, bytes):
                    line = line.decode("utf-8")
                buffer.append(self._decode(line))
            except UnicodeDecodeError as e:
                raise DecodeError(f"invalid UTF-8: {e.reason}", line_number=line_number) from e
            except DecodeError as e:
                raise DecodeError(e.message, line_number=line_number) from e

            if len(buffer) >= self._batch_size:
                sent += self._flush(target, buffer)
                buffer = []

        if buffer:
            sent += self._flush(target, buffer)

        logger.info("Sent %d events to target %s", sent, target)
        return sent

    def _flush(self, target: str, batch: list[Record]) -> int:
        self._sink.send(target, batch)
        logger.debug("Flushed batch of %d events to %s", len(batch), target)
        return len(batch)


def _numbered_lines(lines: Iterable[str | bytes]) -> Iterator[str | bytes]:
    """Iterate ``lines``, turning a decode failure of a text stream into DecodeError."""
    iterator = iter(lines)
    line_number = 0
    while True:
        line_number += 1
        try:
            line = next(iterator)
        except StopIteration:
            return
        except UnicodeDecodeError as e:
            raise DecodeError(f"invalid UTF-8: {e.reason}", line_number=line_number) from e
        yield line
