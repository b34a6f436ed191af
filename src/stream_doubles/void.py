import io

import humanize


class VoidWriter(io.RawIOBase):
  """
  Writes everything successfully to nowhere, counting written bytes and calls to
  `write`.
  """

  def __init__(self):
    self._wrote = 0
    self._calls = 0

  def writable(self) -> bool:
    return True

  def write(self, b) -> int:
    length = memoryview(b).nbytes
    self._wrote += length
    self._calls += 1
    return length

  def flush(self):
    pass

  def wrote(self) -> int:
    return self._wrote

  def calls(self) -> int:
    return self._calls

  def humanized(self) -> str:
    human_wrote = humanize.naturalsize(self._wrote, binary=True)
    return f"Wrote {human_wrote} in {self._calls:,} calls"

  def __str__(self) -> str:
    return f"Wrote {self._wrote} bytes in {self._calls} calls"
