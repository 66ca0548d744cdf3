"""Entry point — reads candidates from stdin, runs the picker, prints the choice."""
from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import IO, Optional

from textual.app import App
from textual.css.stylesheet import Stylesheet, StylesheetError

from . import log
from .app import SiftApp
from .matcher import MIN_SIMILARITY, score
from .store import EntryStore

logger = logging.getLogger(__name__)


# ── Input boundary ────────────────────────────────────────────────────────────

def read_lines(stream: IO[str]) -> list[str]:
    """One candidate per line, without its line terminator. Empty lines are kept."""
    lines = []
    for line in stream:
        line = line[:-1] if line.endswith("\n") else line
        line = line[:-1] if line.endswith("\r") else line
        lines.append(line)
    return lines


def attach_tty() -> None:
    """Point fd 0 back at the controlling terminal once piped input is consumed."""
    if sys.stdin.isatty():
        return
    fd = os.open("/dev/tty", os.O_RDWR)
    try:
        os.dup2(fd, 0)
    finally:
        os.close(fd)


# ── Stylesheet override ───────────────────────────────────────────────────────

def resolve_css(value: Optional[str]) -> Optional[Path]:
    """Return the stylesheet path if it reads and parses, else warn and return None."""
    if not value:
        return None
    path = Path(value).expanduser().resolve()
    stylesheet = Stylesheet(variables=App().get_css_variables())
    try:
        stylesheet.read(path)
        stylesheet.parse()
    except StylesheetError as exc:
        print(f"Failed to load CSS: {exc}", file=sys.stderr)
        return None
    return path


# ── Arguments ─────────────────────────────────────────────────────────────────

def _similarity(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}") from None
    if not 0.0 <= number <= 1.0:
        raise argparse.ArgumentTypeError(f"must be between 0 and 1, got {value}")
    return number


def _level(value: str) -> int:
    try:
        return log.parse_level(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def build_parser() -> argparse.ArgumentParser:
    env = os.environ
    parser = argparse.ArgumentParser(
        prog="sift",
        description="sift — pick one line from stdin with a live fuzzy filter",
        epilog=(
            "Keys: type to filter, <down> moves off the top match, "
            "<enter> prints the highlighted line, <esc> quits without output.\n"
            "Example:\n"
            "  cd \"$(find . -type d | sift)\""
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--css", metavar="PATH", default=env.get("SIFT_CSS"),
        help="Textual stylesheet applied on top of the built-in style (env: SIFT_CSS)",
    )
    parser.add_argument(
        "-p", "--prompt", default=env.get("SIFT_PROMPT", ">"),
        help="Label shown before the query (default: %(default)s)",
    )
    parser.add_argument(
        "-m", "--min-similarity", type=_similarity, metavar="FLOAT",
        default=env.get("SIFT_MIN_SIMILARITY", str(MIN_SIMILARITY)),
        help="Similarity under which a line scores 0 and is hidden (default: %(default)s)",
    )
    parser.add_argument(
        "--log-file", metavar="PATH", default=env.get("SIFT_LOG_FILE"),
        help="Write a debug log to PATH (env: SIFT_LOG_FILE)",
    )
    parser.add_argument(
        "--log-level", type=_level, metavar="LEVEL",
        default=env.get("SIFT_LOG_LEVEL", "info"),
        help="debug, info, warn or error (default: %(default)s)",
    )
    return parser


# ── main ──────────────────────────────────────────────────────────────────────

def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    log.configure(args.log_file, args.log_level)

    try:
        lines = read_lines(sys.stdin)
    except UnicodeDecodeError as exc:
        print(f"❌  Input is not valid text: {exc}", file=sys.stderr)
        return 1
    logger.info("read %d candidates", len(lines))

    try:
        attach_tty()
    except OSError as exc:
        print(f"❌  No terminal available for the picker: {exc}", file=sys.stderr)
        return 1

    cutoff = args.min_similarity

    def scorer(query: str, candidate: str) -> float:
        return score(query, candidate, cutoff)

    store = EntryStore.load(lines, scorer=scorer)
    app = SiftApp(store, prompt=args.prompt, css_path=resolve_css(args.css))
    outcome = app.run()

    if app.return_code:
        logger.error("picker exited with status %d", app.return_code)
        return app.return_code

    if outcome is None or not outcome.committed:
        logger.info("cancelled")
        return 0

    logger.info("committed %r", outcome.text)
    sys.stdout.write(outcome.text + "\n")
    sys.stdout.flush()
    return 0


def run() -> None:
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    run()
