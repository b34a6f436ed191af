import sys
from typing_extensions import Annotated

import humanize
import typer

from stream_doubles.pump import DEFAULT_CHUNK_SIZE, pump
from stream_doubles.repeat import RepeatReader
from stream_doubles.void import VoidWriter

app = typer.Typer()


@app.command()
def repeat_cli(
  size: Annotated[
    int,
    typer.Option(help="Total number of bytes to produce"),
  ],
  content: Annotated[
    str,
    typer.Option(help="Content to repeat until SIZE bytes are produced"),
  ] = "\0",
  chunk_size: Annotated[
    int,
    typer.Option(help="Number of bytes read and written per chunk"),
  ] = DEFAULT_CHUNK_SIZE,
  discard: Annotated[
    bool,
    typer.Option(
      "--discard",
      "-d",
      help="If set, bytes are discarded and only counted instead of written to stdout",
    ),
  ] = False,
  show_progress: Annotated[
    bool,
    typer.Option(
      "--show-progress",
      "-p",
      help="If set, shows a progress bar on stderr",
    ),
  ] = False,
):
  try:
    reader = RepeatReader.from_str(size, content)
  except ValueError as e:
    print(f"❌ {e}", file=sys.stderr)
    raise typer.Exit(code=1) from e

  with reader:
    if discard:
      writer = VoidWriter()
    else:
      writer = typer.get_binary_stream("stdout")

    try:
      result = pump(
        reader=reader,
        writer=writer,
        chunk_size=chunk_size,
        show_progress=show_progress,
      )
    except ValueError as e:
      print(f"❌ {e}", file=sys.stderr)
      raise typer.Exit(code=1) from e
    writer.flush()

  if discard:
    print(f"✅ {writer.humanized()}")
  else:
    human_copied = humanize.naturalsize(result.bytes_copied, binary=True)
    print(f"✅ Wrote {human_copied} in {result.chunks:,} chunks", file=sys.stderr)


if __name__ == "__main__":
  app()
