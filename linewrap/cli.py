"""Command line interface.

Usage:
    linewrap 'Some long text ...' --max-length 40
    linewrap --file notes.txt -w 72
    cat notes.txt | linewrap
    linewrap --demo
"""

import argparse
import sys
from pathlib import Path

from linewrap.core.configs import app_config
from linewrap.core.deps import logger
from linewrap.core.services.wrap import WrapRequest, get_line_wrap_service

DEMO_TEXT = 'This long line is really not that long, but it is not short either.'
DEMO_MAX_LENGTH = 13


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog='linewrap',
        description='Insert line breaks so no line exceeds a maximum length.',
    )
    ap.add_argument('text', nargs='?', help='Text to wrap (default: read stdin)')
    ap.add_argument('-f', '--file', type=Path, help='Read the text from a file instead')
    ap.add_argument(
        '-w',
        '--max-length',
        type=int,
        default=app_config.WRAP_MAX_LINE_LENGTH,
        help='Maximum line length; values below 1 disable wrapping (default: %(default)s)',
    )
    ap.add_argument('--encoding', default='utf-8', help='Encoding of --file (default: %(default)s)')
    ap.add_argument('--demo', action='store_true', help='Wrap a sample sentence at length 13 and exit')
    return ap


def _read_input(ap: argparse.ArgumentParser, args: argparse.Namespace) -> str:
    if args.text is not None and args.file is not None:
        ap.error('pass either TEXT or --file, not both')
    if args.file is not None:
        try:
            # newline='' keeps CR characters for the wrapper to normalize
            with open(args.file, encoding=args.encoding, newline='') as f:
                return f.read()
        except OSError as e:
            ap.error(f'cannot read {args.file}: {e}')
    if args.text is not None:
        return args.text
    return sys.stdin.read()


def main(argv: list[str] | None = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    if args.demo:
        text, max_length = DEMO_TEXT, DEMO_MAX_LENGTH
    else:
        text, max_length = _read_input(ap, args), args.max_length

    result = get_line_wrap_service().wrap(WrapRequest(text=text, max_length=max_length))
    logger.debug('cli_wrapped', line_count=len(result.lines), wrapped=result.wrapped)

    sys.stdout.write(result.text)
    return 0


if __name__ == '__main__':
    sys.exit(main())
