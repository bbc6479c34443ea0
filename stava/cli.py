"""
Command line interface for stava.

Learns words from text files, then prints the correction of a single word.

Usage:
    stava speling words.txt              # prints "spelling"
    stava speling a.txt b.txt --default  # learn the default dictionary too
    stava --exit-code speling            # exit status 1 if corrected
    stava --exit-code-only speling       # same, nothing printed

With no files, the dictionary named by STAVA_WORDS_PATH is learned.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from tqdm import tqdm

from . import __version__
from .config import Settings, load_settings
from .corrector import Corrector

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='stava',
        description='Correct the spelling of a word using word frequencies learned from text files',
    )
    parser.add_argument('word', metavar='WORD', help='Word to correct')
    parser.add_argument('files', metavar='FILES', nargs='*',
                        help='Files to learn words from (default: STAVA_WORDS_PATH)')
    parser.add_argument('--default', action='store_true',
                        help='Also learn the default dictionary when FILES are given')

    exit_group = parser.add_mutually_exclusive_group()
    exit_group.add_argument('--exit-code', action='store_true',
                            help='Exit with status 1 if the word was corrected')
    exit_group.add_argument('--exit-code-only', action='store_true',
                            help='Like --exit-code, but print nothing')

    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def resolve_paths(parser: argparse.ArgumentParser, args: argparse.Namespace,
                  settings: Settings) -> List[str]:
    """
    Decide which files to learn from, in order.

    The default dictionary comes first when it is used alongside FILES.
    Every path must exist; otherwise the parser exits with a usage error.
    """
    paths = list(args.files)
    if not paths or args.default:
        if not settings.words_path:
            parser.error("No default dictionary configured; pass FILES or set STAVA_WORDS_PATH")
        paths.insert(0, settings.words_path)

    for path in paths:
        if not os.path.exists(path):
            parser.error(f"File not found [{path}]")
    return paths


def learn_files(corrector: Corrector, paths: List[str], encoding: str) -> None:
    """Read each file and learn its words into the corrector."""
    for path in tqdm(paths, desc="Learning", unit="file", disable=len(paths) < 2 or None):
        with open(path, 'r', encoding=encoding, errors='replace') as f:
            corrector.learn(f.read())
        logger.debug("Learned %s (%d unique words so far)", path, len(corrector.model))


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point; returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except ValueError as e:
        parser.error(str(e))

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format='%(levelname)s: %(message)s',
    )

    paths = resolve_paths(parser, args, settings)

    corrector = Corrector()
    try:
        learn_files(corrector, paths, settings.encoding)
    except OSError as e:
        parser.error(f"Could not read file: {e}")

    result = corrector.correct(args.word)

    if not args.exit_code_only:
        print(result.word)

    if (args.exit_code or args.exit_code_only) and result.corrected:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
