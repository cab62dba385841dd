"""
CLI commands for mnemonicode.
"""

import sys

import click
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from mnemonicode.config import CodecSettings
from mnemonicode.errors import DecodeError
from mnemonicode.services import MnemonicCodec


def _settings(**overrides) -> CodecSettings:
    """Environment settings with explicitly given CLI options applied on top."""
    try:
        settings = CodecSettings.from_env()
    except ValidationError as e:
        raise click.UsageError(f"Invalid MNEMONICODE_* setting: {e}")
    given = {k: v for k, v in overrides.items() if v is not None}
    return settings.model_copy(update=given)


@click.command()
@click.option('--input', '-i', 'source', type=click.File('rb'), default='-',
              help='File with raw bytes to encode (default: stdin)')
@click.option('--output', '-o', 'dest', type=click.File('w'), default='-',
              help='Where to write the words (default: stdout)')
@click.option('--format', '-f', 'format_template', default=None,
              help='Format template, letters mark word slots (default: "x-x-x--")')
@click.option('--abbreviate', '-a', is_flag=True,
              help='Write each word as its shortest unique prefix')
@click.option('--measure', '-m', is_flag=True, help='Display size metrics on stderr')
def encode(source, dest, format_template, abbreviate, measure):
    """
    Encode binary data as words.

    Example:
        head -c 8 /dev/urandom | mnemonicode encode
    """
    settings = _settings(format_template=format_template, abbreviate=True if abbreviate else None)
    codec = MnemonicCodec(settings)

    data = source.read()
    try:
        text, stats = codec.encode_with_stats(data, verbose=measure)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    dest.write(text)
    if text and not text.endswith("\n"):
        dest.write("\n")

    if measure:
        click.echo("\n=== Encoding Results ===", err=True)
        click.echo(f"Bytes: {stats.byte_count}", err=True)
        click.echo(f"Words: {stats.word_count} in {stats.group_count} groups", err=True)
        click.echo(f"Characters per byte: {stats.expansion_ratio:.2f}", err=True)


@click.command()
@click.option('--input', '-i', 'source', type=click.File('rb'), default='-',
              help='File with encoded words (default: stdin)')
@click.option('--output', '-o', 'dest', type=click.File('wb'), default='-',
              help='Where to write the decoded bytes (default: stdout)')
@click.option('--lenient', '-l', is_flag=True,
              help='Accept any separators and ignore group boundaries')
def decode(source, dest, lenient):
    """
    Decode words back into binary data.

    Example:
        echo digital-apollo-aroma--rival-artist-rebel | mnemonicode decode | xxd
    """
    settings = _settings(strict=False if lenient else None)
    codec = MnemonicCodec(settings)

    try:
        data = codec.decode(source.read().decode("utf-8"))
    except UnicodeDecodeError as e:
        click.echo(f"Error: input is not UTF-8 text: {e}", err=True)
        sys.exit(1)
    except DecodeError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    dest.write(data)


@click.command()
@click.option('--input', '-i', 'source', type=click.File('rb'), default='-',
              help='File with raw bytes (default: stdin)')
def explain(source):
    """
    Show how each chunk of the input maps to words.

    Example:
        printf 'hello' | mnemonicode explain
    """
    codec = MnemonicCodec(_settings())
    groups = codec.explain(source.read())

    table = Table(title=f"{sum(g.chunk.length for g in groups)} bytes, {len(groups)} groups")
    table.add_column("Offset", justify="right")
    table.add_column("Bytes")
    table.add_column("Value", justify="right")
    table.add_column("Indices", justify="right")
    table.add_column("Words", style="bold")
    for group in groups:
        table.add_row(
            str(group.chunk.offset),
            group.chunk.data.hex(' '),
            str(group.chunk.value),
            " ".join(str(i) for i in group.indices),
            " ".join(group.words),
        )
    Console().print(table)
