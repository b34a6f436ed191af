import io
import os
from typing import BinaryIO


class RepeatReader(io.RawIOBase):
  """
  A file-like object that produces exactly `size` bytes by repeating `contents`.

  The contents are treated as an endless tape: whenever the wrapped source runs dry,
  it is rewound to offset 0 and reading carries on. Reading stops for good once
  `size` bytes have been handed out, until `reset()` is called.

  This class implements the io.RawIOBase interface, so `read()`, `readall()`,
  iteration and io.BufferedReader all work on top of `readinto()`. It is readable,
  but neither writable nor seekable.

  The reader owns `contents`: nothing else may read, seek or close it while the
  reader is alive. Closing the reader closes the source.
  """

  def __init__(self, size: int, contents: BinaryIO):
    """
    Args:
        size: The total number of bytes this stream should produce.
        contents: A readable and seekable binary source. Reading starts at its
                  current position. Must not be empty unless `size` is 0.
    """
    if size < 0:
      raise ValueError("Size must be a non-negative integer.")
    start = contents.tell()

    # fast fail instead of spinning forever on rewind-and-read-nothing
    if size > 0:
      end = contents.seek(0, os.SEEK_END)
      contents.seek(start)
      if end == 0:
        raise ValueError(f"Cannot repeat empty contents to produce {size} bytes.")

    self._size = size
    self._contents = contents
    self._read = 0
    self._offset: int | None = start

  @classmethod
  def from_bytes(cls, size: int, data: bytes | bytearray | memoryview):
    return cls(size, io.BytesIO(bytes(data)))

  @classmethod
  def from_str(cls, size: int, text: str, encoding: str = "utf-8"):
    return cls.from_bytes(size, text.encode(encoding))

  @classmethod
  def zeros(cls, size: int):
    """A stream of `size` null bytes."""
    return cls.from_bytes(size, b"\x00")

  @property
  def size(self) -> int:
    return self._size

  def remaining(self) -> int:
    """Returns the number of bytes left to be read."""
    return self._size - self._read

  def readable(self) -> bool:
    return True

  def tell(self) -> int:
    """Returns the number of bytes produced so far."""
    return self._read

  def readinto(self, buffer) -> int:
    """
    Fill up to `len(buffer)` bytes of `buffer`, wrapping around the contents as often
    as needed.

    Returns:
        The number of bytes written into `buffer`, 0 once the stream is exhausted.

    Any error raised by the source propagates unchanged. In that case the produced
    byte count is not advanced, although `buffer` may already hold some data.
    """
    if self.closed:
      raise ValueError("I/O operation on closed file.")

    view = memoryview(buffer).cast("B")
    n = min(len(view), self.remaining())
    if n == 0:
      return 0

    position = self._owned_position()

    collected = 0
    rewound = False
    try:
      while collected < n:
        data = self._contents.read(n - collected)
        if data:
          view[collected : collected + len(data)] = data
          collected += len(data)
          position += len(data)
          rewound = False
          continue

        if rewound:
          raise ValueError(
            f"Contents are empty, cannot produce the remaining {n - collected} bytes."
          )
        self._contents.seek(0)
        position = 0
        rewound = True
    except Exception:
      # the source position is unknown after a failed read or seek
      self._offset = None
      raise

    self._offset = position
    self._read += n
    return n

  def read(self, size: int | None = -1) -> bytes:
    """
    Read and return up to `size` bytes.

    If the argument is omitted, None, or negative, everything that is left is
    returned. The request is capped at `remaining()` before any buffer is allocated.
    """
    remaining_bytes = self.remaining()

    if size is None or size < 0 or size > remaining_bytes:
      bytes_to_read = remaining_bytes
    else:
      bytes_to_read = size

    buffer = bytearray(bytes_to_read)
    length = self.readinto(buffer)
    del buffer[length:]
    return bytes(buffer)

  def reset(self):
    """Seeks the contents back to 0 and starts producing from scratch."""
    self._contents.seek(0)
    self._offset = 0
    self._read = 0

  def close(self):
    # a rejected constructor leaves no contents to close
    contents = getattr(self, "_contents", None)
    if not self.closed and contents is not None:
      contents.close()
    super().close()

  def _owned_position(self) -> int:
    position = self._contents.tell()
    if self._offset is not None and position != self._offset:
      raise RuntimeError(
        f"Contents were moved from {self._offset} to {position} outside of the reader."
      )
    return position

  def __repr__(self) -> str:
    return f"{type(self).__name__}(size={self._size}, remaining={self.remaining()})"
