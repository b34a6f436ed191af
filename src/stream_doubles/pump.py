import contextlib
import sys
from dataclasses import dataclass
from typing import BinaryIO

import typer

from stream_doubles.repeat import RepeatReader

DEFAULT_CHUNK_SIZE = 64 * 1024


@dataclass
class PumpResult:
  bytes_copied: int
  chunks: int


@contextlib.contextmanager
def _progress(length: int, show_progress: bool):
  if not show_progress:
    yield None
    return
  with typer.progressbar(length=length, label="Pumping", file=sys.stderr) as bar:
    yield bar


def pump(
  *,
  reader: RepeatReader,
  writer: BinaryIO,
  chunk_size: int = DEFAULT_CHUNK_SIZE,
  show_progress: bool = False,
) -> PumpResult:
  """
  Copies `reader` into `writer` until the reader is exhausted, one chunk at a time.

  A single buffer of `chunk_size` bytes is reused for every chunk, so the writer must
  not hold on to the slices it is handed.
  """
  if chunk_size < 1:
    raise ValueError(f"Chunk size must be at least 1, got {chunk_size}.")

  buffer = bytearray(chunk_size)
  view = memoryview(buffer)
  bytes_copied = 0
  chunks = 0

  with _progress(reader.remaining(), show_progress) as bar:
    while True:
      length = reader.readinto(buffer)
      if not length:
        break

      written = 0
      while written < length:
        written += writer.write(view[written:length])

      bytes_copied += length
      chunks += 1
      if bar is not None:
        bar.update(length)

  return PumpResult(bytes_copied=bytes_copied, chunks=chunks)
