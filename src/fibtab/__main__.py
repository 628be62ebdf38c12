"""CLI entry-point for fibtab.

Usage:
    python -m fibtab indent <path>... [--lines A-B ...] [--dry-run] [--no-backup] [--json]
    python -m fibtab outdent <path>... [--lines A-B ...] [--dry-run] [--no-backup] [--json]
    python -m fibtab normalize <path>... [--dry-run] [--no-backup] [--json]
    python -m fibtab check <path>... [--json]
    python -m fibtab ladder [--depth N] [--multiplier M] [--json]
    python -m fibtab width <old_width> (--indent | --outdent) [--multiplier M] [--json]
    python -m fibtab depth <width> [--multiplier M] [--json]

A path of ``-`` reads the document from stdin and writes the result to stdout.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from fibtab import __version__
from fibtab.api import build_report, check_paths, reindent_paths
from fibtab.core.config import ConfigError, ReindentConfig, load_config
from fibtab.ladder import Ladder
from fibtab.model import Direction
from fibtab.model.edit import ReindentResult, Selection
from fibtab.transform import reindent_text
from fibtab.utils.exit_codes import ExitCode
from fibtab.utils.json_norm import stable_json_dump

_STDIN = "-"

_DEFAULT_LADDER_DEPTH = 10


# ── argument types ──────────────────────────────────────────────────


def _non_negative_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from None
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {n}")
    return n


def _positive_int(value: str) -> int:
    n = _non_negative_int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {n}")
    return n


def _line_range(value: str) -> Selection:
    """Parse a 1-based inclusive ``A-B`` (or single ``A``) into a Selection."""
    start_s, sep, end_s = value.partition("-")
    try:
        start = int(start_s)
        end = int(end_s) if sep else start
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"expected a line or range like 5 or 3-7, got {value!r}"
        ) from None
    if start < 1 or end < start:
        raise argparse.ArgumentTypeError(
            f"line range must satisfy 1 <= start <= end, got {value!r}"
        )
    return Selection(start_line=start - 1, end_line=end - 1)


# ── logging ─────────────────────────────────────────────────────────


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


# ── parser ──────────────────────────────────────────────────────────


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="fibtab",
        description="Indent and outdent lines along a Fibonacci indentation ladder.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress (-v) or every planned edit (-vv) to stderr.",
    )
    sub = p.add_subparsers(dest="command")

    # Shared by every command that reads documents.
    files_parent = argparse.ArgumentParser(add_help=False)
    files_parent.add_argument(
        "paths",
        nargs="+",
        help="Files or directories to process, or '-' for stdin.",
    )
    files_parent.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML config file (default: discover .fibtab.yaml under the first path).",
    )
    files_parent.add_argument(
        "--multiplier",
        type=_positive_int,
        default=None,
        help="Spaces per Fibonacci unit (default: 2).",
    )
    files_parent.add_argument(
        "--json",
        dest="json_out",
        action="store_true",
        default=False,
        help="Print a JSON report to stdout.",
    )

    # Shared by the rewriting commands.
    rewrite_parent = argparse.ArgumentParser(add_help=False)
    rewrite_parent.add_argument(
        "--lines",
        dest="selections",
        type=_line_range,
        action="append",
        default=None,
        metavar="A-B",
        help="1-based inclusive line range to affect; repeatable (default: all lines).",
    )
    rewrite_parent.add_argument(
        "--dry-run",
        action="store_true",
        default=False,
        help="Plan edits without writing files.",
    )
    rewrite_parent.add_argument(
        "--no-backup",
        dest="create_backups",
        action="store_false",
        default=None,
        help="Do not write a .bak copy before rewriting.",
    )
    rewrite_parent.add_argument(
        "--skip-blank-lines",
        action="store_true",
        default=None,
        help="Leave whitespace-only lines untouched.",
    )

    for direction, help_text in (
        (Direction.INDENT, "Move selected lines one rung deeper."),
        (Direction.OUTDENT, "Move selected lines one rung shallower (never below 0)."),
        (Direction.NORMALIZE, "Snap selected lines down to the nearest rung."),
    ):
        cmd = sub.add_parser(
            direction.value,
            parents=[files_parent, rewrite_parent],
            help=help_text,
        )
        cmd.set_defaults(direction=direction)

    sub.add_parser(
        "check",
        parents=[files_parent],
        help="Report lines whose indentation is off the ladder (exit 1 if any).",
    )

    ladder_p = sub.add_parser("ladder", help="Print the depth -> width ladder.")
    ladder_p.add_argument(
        "--depth",
        type=_non_negative_int,
        default=_DEFAULT_LADDER_DEPTH,
        help=f"Deepest rung to print (default: {_DEFAULT_LADDER_DEPTH}).",
    )
    ladder_p.add_argument("--multiplier", type=_positive_int, default=None)
    ladder_p.add_argument("--json", dest="json_out", action="store_true", default=False)

    width_p = sub.add_parser(
        "width",
        help="Compute the new width for an existing indentation width.",
    )
    width_p.add_argument("old_width", type=_non_negative_int)
    direction_group = width_p.add_mutually_exclusive_group(required=True)
    direction_group.add_argument(
        "--indent",
        dest="direction",
        action="store_const",
        const=Direction.INDENT,
    )
    direction_group.add_argument(
        "--outdent",
        dest="direction",
        action="store_const",
        const=Direction.OUTDENT,
    )
    width_p.add_argument("--multiplier", type=_positive_int, default=None)
    width_p.add_argument("--json", dest="json_out", action="store_true", default=False)

    depth_p = sub.add_parser(
        "depth",
        help="Floor-match an indentation width to its logical depth.",
    )
    depth_p.add_argument("width", type=_non_negative_int)
    depth_p.add_argument("--multiplier", type=_positive_int, default=None)
    depth_p.add_argument("--json", dest="json_out", action="store_true", default=False)

    return p


# ── helpers ─────────────────────────────────────────────────────────


def _ladder_for(args: argparse.Namespace) -> Ladder:
    return Ladder(multiplier=args.multiplier) if args.multiplier else Ladder()


def _resolve_config(args: argparse.Namespace, root: Path) -> ReindentConfig:
    cfg = load_config(root, config_path=args.config)
    return cfg.replace(
        multiplier=args.multiplier,
        create_backups=getattr(args, "create_backups", None),
        skip_blank_lines=getattr(args, "skip_blank_lines", None),
    )


def _print_results(results: list[ReindentResult], *, dry_run: bool) -> None:
    """Human-readable per-file summary on stderr."""
    verb = "would reindent" if dry_run else "reindented"
    changed = 0
    for r in results:
        for err in r.errors:
            print(f"error: {r.path}: {err}", file=sys.stderr)
        if r.changed:
            changed += 1
            print(f"{verb} {r.path} ({len(r.edits)} line(s))", file=sys.stderr)
    unchanged = len(results) - changed
    print(
        f"{changed} file(s) {verb}, {unchanged} file(s) left unchanged.",
        file=sys.stderr,
    )


def _print_violations(results: list[ReindentResult]) -> None:
    total = sum(len(r.edits) for r in results)
    for r in results:
        for err in r.errors:
            print(f"error: {r.path}: {err}", file=sys.stderr)
        for e in r.edits:
            print(
                f"    {r.path}:{e.index + 1}  width {e.old_width} is off the ladder"
                f" (expected {e.new_width})",
                file=sys.stderr,
            )
    if total:
        print(f"\n  {total} line(s) off the ladder.\n", file=sys.stderr)
    else:
        print("All lines are on the ladder.", file=sys.stderr)


# ── handlers ────────────────────────────────────────────────────────


def _handle_stdin(args: argparse.Namespace, direction: Direction) -> int:
    """Process a document read from stdin; rewritten text goes to stdout."""
    if args.json_out:
        print("error: --json cannot be combined with stdin input.", file=sys.stderr)
        return ExitCode.ERROR
    try:
        cfg = _resolve_config(args, Path.cwd())
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.ERROR

    text = sys.stdin.read()
    new_text, edits = reindent_text(
        text,
        direction,
        getattr(args, "selections", None),
        ladder=cfg.ladder,
        skip_blank_lines=cfg.skip_blank_lines,
    )

    if args.command == "check":
        _print_violations([ReindentResult(path=Path(_STDIN), direction=direction, edits=edits)])
        return ExitCode.VIOLATION if edits else ExitCode.SUCCESS

    sys.stdout.write(new_text)
    return ExitCode.SUCCESS


def _handle_files(args: argparse.Namespace) -> int:
    """Dispatch ``fibtab indent|outdent|normalize|check <path>...``."""
    is_check = args.command == "check"
    direction = Direction.NORMALIZE if is_check else args.direction

    if _STDIN in args.paths:
        if len(args.paths) > 1:
            print("error: '-' (stdin) cannot be mixed with other paths.", file=sys.stderr)
            return ExitCode.ERROR
        return _handle_stdin(args, direction)

    targets = [Path(p) for p in args.paths]
    missing = [t for t in targets if not t.exists()]
    if missing:
        print(f"error: path does not exist: {missing[0]}", file=sys.stderr)
        return ExitCode.ERROR

    try:
        cfg = _resolve_config(args, targets[0])
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.ERROR

    dry_run = is_check or args.dry_run
    if is_check:
        results = check_paths(targets, config=cfg)
    else:
        results = reindent_paths(
            targets,
            direction,
            selections=args.selections,
            config=cfg,
            dry_run=dry_run,
        )

    if args.json_out:
        report = build_report(
            results,
            command=args.command,
            dry_run=dry_run,
            multiplier=cfg.multiplier,
        )
        stable_json_dump(report, sys.stdout)
    elif is_check:
        _print_violations(results)
    else:
        _print_results(results, dry_run=dry_run)

    if any(not r.success for r in results):
        return ExitCode.ERROR
    if is_check and any(r.changed for r in results):
        return ExitCode.VIOLATION
    return ExitCode.SUCCESS


def _handle_ladder(args: argparse.Namespace) -> int:
    """Dispatch ``fibtab ladder``."""
    ladder = _ladder_for(args)
    rungs = list(ladder.rungs(args.depth))

    if args.json_out:
        stable_json_dump(
            {
                "multiplier": ladder.multiplier,
                "rungs": [{"depth": d, "width": w} for d, w in rungs],
            },
            sys.stdout,
        )
        return ExitCode.SUCCESS

    from rich.console import Console
    from rich.table import Table

    table = Table(title=f"Fibonacci ladder (x{ladder.multiplier})")
    table.add_column("Depth", justify="right")
    table.add_column("Width", justify="right")
    table.add_column("Step", justify="right")
    prev = 0
    for depth, width in rungs:
        table.add_row(str(depth), str(width), f"+{width - prev}" if depth else "")
        prev = width
    Console().print(table)
    return ExitCode.SUCCESS


def _handle_width(args: argparse.Namespace) -> int:
    """Dispatch ``fibtab width <old_width> --indent|--outdent``."""
    ladder = _ladder_for(args)
    direction: Direction = args.direction
    old_depth = ladder.depth(args.old_width)
    new_width = ladder.next_width(args.old_width, direction)

    if args.json_out:
        stable_json_dump(
            {
                "direction": direction,
                "old_width": args.old_width,
                "old_depth": old_depth,
                "new_depth": ladder.depth(new_width),
                "new_width": new_width,
            },
            sys.stdout,
        )
    else:
        print(new_width)
    return ExitCode.SUCCESS


def _handle_depth(args: argparse.Namespace) -> int:
    """Dispatch ``fibtab depth <width>``."""
    ladder = _ladder_for(args)
    depth = ladder.depth(args.width)

    if args.json_out:
        stable_json_dump(
            {
                "width": args.width,
                "depth": depth,
                "rung_width": ladder.width(depth),
                "on_ladder": ladder.is_rung(args.width),
            },
            sys.stdout,
        )
    else:
        print(depth)
    return ExitCode.SUCCESS


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an ``ExitCode``."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.command in ("indent", "outdent", "normalize", "check"):
        return _handle_files(args)
    if args.command == "ladder":
        return _handle_ladder(args)
    if args.command == "width":
        return _handle_width(args)
    if args.command == "depth":
        return _handle_depth(args)

    parser.print_help(sys.stderr)
    return ExitCode.ERROR


if __name__ == "__main__":
    raise SystemExit(main())
