from __future__ import annotations

from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from wordperms.core.combine.generate import estimate_count, generate, truncate
from wordperms.core.config import ConfigError, load_and_merge
from wordperms.core.errors import InputLoadError, OptionError, OutputWriteError, WordpermsError
from wordperms.core.io.load_words import load_words, read_words_stream
from wordperms.core.io.write_results import write_results
from wordperms.core.model import CAP_STYLE_CHOICES, RunConfig, parse_capitalization
from wordperms.core.variants.expand_variants import expand_variants

app = typer.Typer(add_completion=False, no_args_is_help=True)

_CAP_HELP = f"Capitalization style: {'|'.join(CAP_STYLE_CHOICES)} (default: all)"


@app.callback()
def _callback() -> None:
    """wordperms: generate word permutations."""
    return


@app.command("generate")
def generate_cmd(
    input: str = typer.Option(..., "--input", "-i", help="Input file, one word per line ('-' for stdin)"),
    max_len: int | None = typer.Option(
        None, "--max-len", "-m", help="Max number of words per combination (default: 4)"
    ),
    cap_style: str | None = typer.Option(None, "--cap-style", "-c", help=_CAP_HELP),
    limit: int | None = typer.Option(None, "--limit", "-l", help="Limit number of generated results"),
    output: str | None = typer.Option(None, "--output", "-o", help="Output file (default: stdout)"),
    workers: int | None = typer.Option(None, "--workers", "-w", help="Worker threads (default: 4)"),
    sort: bool | None = typer.Option(
        None, "--sort/--no-sort", help="Sort results before limiting and writing (default: off)"
    ),
    config: str | None = typer.Option(None, "--config", help="Optional YAML file with run settings"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Report progress on stderr"),
    stats: bool = typer.Option(False, "--stats", help="Print a summary table on stderr"),
) -> None:
    """Generate every permutation of word combinations up to --max-len words."""
    cfg = _load_config(
        config,
        max_len=max_len,
        cap_style=cap_style,
        limit=limit,
        workers=workers,
        sort=sort,
    )
    words = _read_words(input)
    _log(verbose, f"read {len(words)} words from {input}")

    bound = estimate_count(len(words), cfg.max_len, cfg.cap_style)
    _log(
        verbose,
        f"generating: max_len={cfg.max_len} cap_style={cfg.cap_style.value} "
        f"workers={cfg.workers} upper_bound={bound}",
    )

    results = generate(words, cfg.max_len, cfg.cap_style, workers=cfg.workers)
    distinct = len(results)
    _log(verbose, f"generated {distinct} distinct results")

    lines = truncate(results, cfg.limit, sort=cfg.sort)
    if cfg.limit is not None:
        _log(verbose, f"limited to {len(lines)} results")

    if output is None:
        for line in lines:
            typer.echo(line)
        written = len(lines)
    else:
        try:
            written = write_results(output, lines)
        except OutputWriteError as e:
            _print_errors([e])
            raise typer.Exit(code=e.exit_code)
        _log(verbose, f"wrote {written} lines to {output}")

    if stats:
        _print_stats(
            {
                "words": len(words),
                "max_len": cfg.max_len,
                "cap_style": cfg.cap_style.value,
                "upper_bound": bound,
                "distinct": distinct,
                "written": written,
            }
        )


@app.command("variants")
def variants_cmd(
    word: str = typer.Argument(..., help="Word to expand"),
    cap_style: str = typer.Option("all", "--cap-style", "-c", help=_CAP_HELP),
) -> None:
    """Print the capitalization variants of a single word."""
    try:
        policy = parse_capitalization(cap_style)
    except ValueError as e:
        _print_errors([OptionError(code="E_VARIANTS_INVALID_OPTION", message=str(e), path="cap_style")])
        raise typer.Exit(code=OptionError.exit_code)

    for v in expand_variants(word, policy):
        typer.echo(v)


@app.command("estimate")
def estimate_cmd(
    input: str = typer.Option(..., "--input", "-i", help="Input file, one word per line ('-' for stdin)"),
    max_len: int | None = typer.Option(None, "--max-len", "-m", help="Max number of words per combination"),
    cap_style: str | None = typer.Option(None, "--cap-style", "-c", help=_CAP_HELP),
    config: str | None = typer.Option(None, "--config", help="Optional YAML file with run settings"),
) -> None:
    """Print the worst-case candidate count (before deduplication) without generating."""
    cfg = _load_config(config, max_len=max_len, cap_style=cap_style)
    words = _read_words(input)
    typer.echo(str(estimate_count(len(words), cfg.max_len, cfg.cap_style)))


def _load_config(config_file: str | None, **overrides: Any) -> RunConfig:
    try:
        return load_and_merge(config_file, **overrides)
    except FileNotFoundError:
        err: WordpermsError = InputLoadError(
            code="E_CONFIG_FILE_NOT_FOUND",
            message=f"config file not found: {config_file}",
            file=None,
            path="config",
        )
    except (OSError, UnicodeDecodeError) as e:
        err = InputLoadError(
            code="E_CONFIG_READ",
            message=str(e),
            file=config_file,
            path="config",
        )
    except ConfigError as e:
        err = OptionError(
            code="E_CONFIG_INVALID",
            message=str(e),
            file=config_file,
            path="config",
        )
    _print_errors([err])
    raise typer.Exit(code=err.exit_code)


def _read_words(path: str) -> list[str]:
    try:
        if path == "-":
            return read_words_stream(typer.get_binary_stream("stdin"))
        return load_words(path)
    except InputLoadError as e:
        _print_errors([e])
        raise typer.Exit(code=e.exit_code)


def _log(verbose: bool, message: str) -> None:
    if verbose:
        typer.echo(message, err=True)


def _print_stats(summary: dict[str, Any]) -> None:
    table = Table(title="wordperms run")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    for k, v in summary.items():
        table.add_row(k, str(v))
    Console(stderr=True).print(table)


def _print_errors(errors: list[WordpermsError]) -> None:
    errors_sorted = sorted(errors, key=lambda e: (e.file or "", e.path or "", e.code))
    for e in errors_sorted:
        typer.echo(str(e), err=True)


def main() -> None:
    app(prog_name="wordperms")


if __name__ == "__main__":
    main()
