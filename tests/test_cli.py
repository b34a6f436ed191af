from typer.testing import CliRunner

from stream_doubles.__main__ import app

runner = CliRunner()


def test_cli_writes_to_stdout() -> None:
  result = runner.invoke(app, ["--size", "13", "--content", "hello world"])
  assert result.exit_code == 0
  assert result.stdout_bytes.startswith(b"hello worldhe")
  assert "Wrote 13 Bytes in 1 chunks" in result.output


def test_cli_default_content_is_null_bytes() -> None:
  result = runner.invoke(app, ["--size", "4", "--chunk-size", "3"])
  assert result.exit_code == 0
  assert result.stdout_bytes.startswith(b"\x00\x00\x00\x00")
  assert "in 2 chunks" in result.output


def test_cli_discard() -> None:
  result = runner.invoke(
    app, ["--size", "3145728", "--content", "hello world", "--discard", "--chunk-size", "1048576"]
  )
  assert result.exit_code == 0
  assert "✅ Wrote 3.0 MiB in 3 calls" in result.stdout


def test_cli_discard_with_progress() -> None:
  result = runner.invoke(app, ["--size", "100", "-d", "-p"])
  assert result.exit_code == 0
  assert "Wrote 100 Bytes in 1 calls" in result.output


def test_cli_empty_content() -> None:
  result = runner.invoke(app, ["--size", "10", "--content", "", "--discard"])
  assert result.exit_code == 1
  assert "❌" in result.output
  assert "empty" in result.output


def test_cli_negative_size() -> None:
  result = runner.invoke(app, ["--size", "-1", "--discard"])
  assert result.exit_code == 1
  assert "non-negative" in result.output


def test_cli_bad_chunk_size() -> None:
  result = runner.invoke(app, ["--size", "10", "--discard", "--chunk-size", "0"])
  assert result.exit_code == 1
  assert "Chunk size" in result.output


def test_cli_flags_without_typer_warnings(recwarn) -> None:
  result = runner.invoke(app, ["--size", "10", "--discard", "--show-progress"])
  assert result.exit_code == 0
  assert not [w for w in recwarn if "is_flag" in str(w.message)]
