from __future__ import annotations

import argparse
import logging
import os
import stat
import sys
from typing import Sequence

from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .config import DiffOptions, load_options
from .differ import TreeDiffer
from .errors import ConfigError, DircompError, PreconditionError, UsageError
from .hasher import ContentHasher
from .report import Reporter

PROG = "dircomp"

logger = logging.getLogger(__name__)

console_stdout = Console()
console_stderr = Console(stderr=True)


def _description() -> str:
    return (
        "Compare source directory tree to destination, listing differences\n"
        "in destination, based on a content hash comparison.\n"
        "\n"
        "Output indicators:\n"
        "\n"
        "+ file is added in destination\n"
        "- file is removed in destination\n"
        "C file is changed in destination\n"
        "  file is identical (only with --all)\n"
    )


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    p = _Parser(
        prog=PROG,
        usage="%(prog)s [flags] sourceDirectory destinationDirectory",
        description=_description(),
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )
    p.add_argument("source", metavar="sourceDirectory", nargs="?", help="Source directory tree")
    p.add_argument("dest", metavar="destinationDirectory", nargs="?", help="Destination directory tree")
    p.add_argument("--all", "-a", action="store_true", help="show all files, not just changes")
    p.add_argument("--debug", "-d", action="store_true", help="print debugging information")
    p.add_argument("--help", "-h", action="store_true", help="print this help message")
    p.add_argument("--algorithm", "-A", help="hashlib algorithm for content digests (default: md5)")
    p.add_argument("--config", "-c", help="Path to config TOML (overrides DIRCOMP_CONFIG & defaults)")
    p.add_argument("--no-color", action="store_true", help="never style report lines")
    p.add_argument("--version", "-V", action="version", version=f"%(prog)s {__version__}")
    return p


def _configure_logging(debug: bool) -> None:
    if console_stderr.is_terminal:
        handler: logging.Handler = RichHandler(console=console_stderr, show_time=False, show_path=False)
        fmt = "%(message)s"
    else:
        handler = logging.StreamHandler(sys.stderr)
        fmt = "%(levelname)s: %(message)s"
    handler.set_name(PROG)
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format=fmt,
        handlers=[handler],
        force=True,
    )


def check_root(path: str, side: str) -> None:
    """Reject a root that exists but is not a directory; a missing root passes."""
    try:
        st = os.stat(path)
    except OSError:
        return
    if not stat.S_ISDIR(st.st_mode):
        raise PreconditionError(f"{side} {path} is not a directory")


def _resolve_options(args: argparse.Namespace) -> DiffOptions:
    base = load_options(args.config)
    return base.merged(
        show_all=True if args.all else None,
        debug=True if args.debug else None,
        algorithm=args.algorithm,
        color=False if args.no_color else None,
    )


def run(args: argparse.Namespace) -> int:
    try:
        opts = _resolve_options(args)
        try:
            hasher = ContentHasher(opts.algorithm)
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc
        _configure_logging(opts.debug)

        check_root(args.source, "source")
        check_root(args.dest, "destination")

        reporter = Reporter(console_stdout, console_stderr, prog=PROG, color=opts.color)
        items = TreeDiffer(opts, hasher).compare(args.source, args.dest)
        for item in items:
            reporter.emit(item)
        logger.debug(
            "done: %s; %d problem(s)",
            ", ".join(f"{n} {c.value}" for c, n in reporter.counts.items()),
            reporter.problems,
        )
    except DircompError as e:
        console_stderr.out(f"{PROG}: {e}", highlight=False)
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        if not args.help and (args.source is None or args.dest is None):
            raise UsageError("a source and a destination directory are required")
    except UsageError as e:
        parser.print_help(sys.stderr)
        console_stderr.out(f"{PROG}: {e}", highlight=False)
        return 1
    if args.help:
        parser.print_help(sys.stderr)
        return 1
    return run(args)


if __name__ == "__main__":
    raise SystemExit(main())
