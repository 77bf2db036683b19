"""Command-line interface for wordchain.

WHY: Users need a simple way to point the generator at a text file and
get sentences back, and to look inside the model when the sentences
look wrong. The CLI wires file opening, model building, synthesis, and
dumping behind one command.

HOW: argparse with two subcommands. ``sentence`` builds the model and
prints one or more sentences of the requested length. ``model`` builds
the model and prints it with a registered dumper. Status messages and
errors go to stderr; results go to stdout.

RULES:
- ``sentence FILE LENGTH [--count N] [--seed S]``
- ``model FILE [--format plain_text|json]``
- FILE may be "-" to read standard input
- Exit 0 on success, 1 on errors (unreadable file, empty input, bad
  arguments), 2 when no sentence of the requested length exists
- --seed overrides WORDCHAIN_SEED; neither → non-deterministic output
- -v/--verbose switches logging to DEBUG
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from wordchain import __version__
from wordchain.config import DEFAULT_DUMP_FORMAT, MAX_TOKEN_LENGTH, make_rng, resolve_log_level
from wordchain.core.builder import build_model
from wordchain.core.model import Model
from wordchain.core.synthesizer import generate_sentence
from wordchain.formatters import FORMATTERS, dump_model

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NO_SENTENCE = 2


def _status(msg: str) -> None:
    """Print a status message to stderr.

    WHY: Status output must not pollute stdout so the CLI can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


def _positive_int(value: str) -> int:
    """argparse type for integers >= 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError("'{}' is not an integer".format(value)) from None
    if number < 1:
        raise argparse.ArgumentTypeError("must be >= 1, got {}".format(number))
    return number


def _load_model(path: str, encoding: str, max_length: int) -> Model:
    """Open the source text and build the model from it.

    RULES:
    - "-" reads from sys.stdin
    - The file is closed before returning
    """
    if path == "-":
        return build_model(sys.stdin, max_length=max_length)
    with open(path, "r", encoding=encoding) as text:
        return build_model(text, max_length=max_length)


def _run_sentence(args: argparse.Namespace) -> int:
    model = _load_model(args.file, args.encoding, args.max_token_length)
    _status("Model: {} words, {} sentence starters, {} sentence enders".format(
        len(model), len(model.starters), len(model.enders()),
    ))
    rng = make_rng(args.seed)

    for _ in range(args.count):
        sentence = generate_sentence(model, args.length, rng)
        if sentence is None:
            _status("No sentences of selected length possible from this model.")
            return EXIT_NO_SENTENCE
        print('Random sentence of {} words: "{}"'.format(args.length, sentence))
    return EXIT_OK


def _run_model(args: argparse.Namespace) -> int:
    model = _load_model(args.file, args.encoding, args.max_token_length)
    sys.stdout.write(dump_model(model, args.format))
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable: tests can inspect the parser without reading files.
    """
    parser = argparse.ArgumentParser(
        prog="wordchain",
        description="Generate random sentences from the word-pair statistics of a text.",
    )
    parser.add_argument("--version", action="version", version="%(prog)s " + __version__)
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging on stderr.",
    )

    # Options shared by both subcommands
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("file", help="Source text file, or '-' for standard input.")
    common.add_argument(
        "--encoding",
        default="utf-8",
        help="Text encoding of the source file (default: %(default)s).",
    )
    common.add_argument(
        "--max-token-length",
        type=_positive_int,
        default=MAX_TOKEN_LENGTH,
        help="Longest token kept; longer runs are truncated (default: %(default)s).",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    sentence = sub.add_parser(
        "sentence",
        parents=[common],
        help="Print random sentences of an exact word length.",
    )
    sentence.add_argument("length", type=_positive_int, help="Number of words in each sentence.")
    sentence.add_argument(
        "--count",
        type=_positive_int,
        default=1,
        help="How many sentences to print (default: %(default)s).",
    )
    sentence.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible output (default: WORDCHAIN_SEED or random).",
    )
    sentence.set_defaults(handler=_run_sentence)

    model = sub.add_parser(
        "model",
        parents=[common],
        help="Print the word-transition model built from the source.",
    )
    model.add_argument(
        "--format",
        choices=sorted(FORMATTERS.keys()),
        default=DEFAULT_DUMP_FORMAT,
        help="Dump format (default: %(default)s).",
    )
    model.set_defaults(handler=_run_model)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    - Returns the process exit status
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else resolve_log_level(),
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )
        return args.handler(args)
    except (OSError, ValueError) as e:
        # ValueError covers EmptyInputError, UnicodeDecodeError and bad WORDCHAIN_* values
        print("Error: {}".format(e), file=sys.stderr)
        return EXIT_ERROR
    except KeyboardInterrupt:
        _status("\nCancelled by user.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
