"""MPF Filter - Decode an MPF sample file to text on standard output."""
from __future__ import annotations

import codecs
from pathlib import Path

import click

from mpf_core.errors import MpfError
from mpf_core.protocol import DEFAULT_TEXT_ENCODING, MAX_DIMENSIONALITY

from .frame import label_counts, records_to_frame
from .reader import MpfReader
from .render import header_lines, record_line


def _check_encoding(ctx: click.Context, param: click.Parameter, value: str) -> str:
    try:
        codecs.lookup(value)
    except LookupError:
        raise click.BadParameter(f"unknown text encoding {value!r}")
    return value


def filter_mpf_file(
    path: Path,
    dimensionality: int | None = None,
    trust_declared: bool = False,
    encoding: str = DEFAULT_TEXT_ENCODING,
    summary: bool = False,
) -> dict:
    """Print the header and every record of an MPF file. Returns scan stats."""
    with MpfReader(path, dimensionality=dimensionality, trust_declared=trust_declared) as reader:
        for line in header_lines(reader.header, encoding):
            click.echo(line)

        if summary:
            df = records_to_frame(reader.records(), reader.dimensionality)
            counts = label_counts(df)
            for _, row in counts.iterrows():
                click.echo(f"{row['label']} {int(row['samples'])}")
        else:
            for rec in reader.records():
                click.echo(record_line(rec))

        return reader.get_stats()


@click.command()
@click.argument("path", type=click.Path(path_type=Path))
@click.option(
    "--dimensionality",
    type=click.IntRange(min=1, max=MAX_DIMENSIONALITY),
    default=None,
    help="Vector width to decode with (default 512)",
)
@click.option(
    "--trust-declared",
    is_flag=True,
    help="Decode with the dimensionality declared in the header",
)
@click.option(
    "--encoding",
    default=DEFAULT_TEXT_ENCODING,
    show_default=True,
    callback=_check_encoding,
    help="Text encoding of header string fields",
)
@click.option("--summary", is_flag=True, help="Print samples per label instead of records")
def main(
    path: Path,
    dimensionality: int | None,
    trust_declared: bool,
    encoding: str,
    summary: bool,
) -> None:
    """Decode an MPF sample file to text."""
    if dimensionality is not None and trust_declared:
        raise click.UsageError("--dimensionality and --trust-declared are mutually exclusive")
    try:
        filter_mpf_file(
            path,
            dimensionality=dimensionality,
            trust_declared=trust_declared,
            encoding=encoding,
            summary=summary,
        )
    except MpfError as e:
        # Fail closed, with a single-line reason.
        print(f"FATAL: [{e.code}] {e}")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
