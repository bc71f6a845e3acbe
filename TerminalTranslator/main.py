"""Command line entry point.

Wires the language catalog, configuration and translation provider together,
and is the only place that turns errors into messages and exit codes.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, List, Optional, TextIO

from TerminalTranslator import __version__
from TerminalTranslator.core.config import AppConfig, load_config
from TerminalTranslator.core.errors import EmptyInputError, NetworkError, ParseError, ValidationError
from TerminalTranslator.core.registry import TRANSLATION_REGISTRY
from TerminalTranslator.services.languages.catalog import LanguageCatalog
from TerminalTranslator.services.translate import format_result
from TerminalTranslator.services.translate.google_translate import AUTO

logger = logging.getLogger(__name__)

EMPTY_INPUT_MESSAGE = 'Cannot translate an empty text'
FAILURE_MESSAGE = 'Cannot translate now, an error occurred'
UNREADABLE_INPUT_MESSAGE = 'Cannot read input, it is not valid UTF-8 text'

EXAMPLES = """\
Examples:
  $ translate 'I want to translate this text'
  $ translate -s es -t en 'Quiero traducir este texto'
  $ translate -s en -t es I want to translate this text
  $ translate -a 'Au revoir' -d
  $ pbpaste | translate
"""


def _language_type(catalog: LanguageCatalog):
    def parse(value: str) -> str:
        try:
            return catalog.normalize(value)
        except ValidationError as e:
            raise argparse.ArgumentTypeError(f"{e} (see --list)") from e
    return parse


def _positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: '{value}'")
    if number <= 0:
        raise argparse.ArgumentTypeError('timeout must be positive')
    return number


def build_parser(catalog: LanguageCatalog, cfg: AppConfig) -> argparse.ArgumentParser:
    language = _language_type(catalog)
    tr = cfg.translation
    parser = argparse.ArgumentParser(
        prog='translate',
        usage='%(prog)s [options] <text ...>',
        description='Translate text from the terminal with Google Translate.',
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('text', nargs='*', help='Text to translate (read from stdin when omitted)')
    parser.add_argument('-a', '--auto', action='store_true', help='Auto-detect source language')
    parser.add_argument('-d', '--details', action='store_true', help='View details')
    parser.add_argument('-l', '--list', action='store_true', help='List all available languages')
    parser.add_argument('-s', '--source', type=language, metavar='LANG',
                        help=f'Source language [{tr.default_source}]')
    parser.add_argument('-t', '--target', type=language, metavar='LANG',
                        help=f'Target language [{tr.default_target}]')
    parser.add_argument('--timeout', type=_positive_float, default=tr.timeout, metavar='SECONDS',
                        help=f'Request timeout in seconds [{tr.timeout:g}]')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log debug information to stderr')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def _configure_logging(verbose: bool, stream: TextIO) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
        stream=stream,
        force=True,
    )


def _read_source_text(args: argparse.Namespace, stdin: TextIO) -> Optional[str]:
    """Joined positional words, or all of stdin when it is piped.

    Returns None when there is nothing to read (interactive terminal).
    """
    if args.text:
        return ' '.join(args.text)
    if stdin.isatty():
        return None
    return stdin.read()


def run(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None,
        client: Any = None, catalog: Optional[LanguageCatalog] = None) -> int:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    cfg = load_config()
    if catalog is None:
        catalog = LanguageCatalog.load_default()
    parser = build_parser(catalog, cfg)
    args = parser.parse_args(argv)
    _configure_logging(args.verbose, stderr)

    if args.list:
        for code, name in catalog.listing():
            print(f'{code}\t\t{name}', file=stdout)
        return 0

    # env defaults are only checked once a translation will actually run
    try:
        source = AUTO if args.auto else (args.source or catalog.normalize(cfg.translation.default_source))
        target = args.target or catalog.normalize(cfg.translation.default_target)
    except ValidationError as e:
        print(f'{e} in environment default (see --list)', file=stderr)
        return 2

    try:
        text = _read_source_text(args, stdin)
    except UnicodeDecodeError as e:
        logger.debug('Could not decode standard input', exc_info=e)
        print(UNREADABLE_INPUT_MESSAGE, file=stderr)
        return 1
    if text is None:
        print(EMPTY_INPUT_MESSAGE, file=stderr)
        parser.print_help(file=stderr)
        return 1

    cfg.translation.timeout = args.timeout
    if client is None:
        client = TRANSLATION_REGISTRY.create(cfg.translation.provider, catalog=catalog, config=cfg.translation)

    try:
        result = client.translate(source, target, text.strip())
    except EmptyInputError:
        print(EMPTY_INPUT_MESSAGE, file=stderr)
        return 1
    except ValidationError as e:
        print(e, file=stderr)
        return 2
    except (NetworkError, ParseError) as e:
        logger.debug('Translation failed', exc_info=e)
        print(FAILURE_MESSAGE, file=stderr)
        return 1

    print(format_result(result, details=args.details), file=stdout)
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
