"""
Demo: redraw a grid of random digits in place.

    python -m screen_printer --width 40 --height 10 -x middle -y middle
"""

import argparse
import logging
import random
import sys
import time
from typing import List, Optional

from blessed import Terminal

from . import __version__
from .errors import PrintingError
from .grid import Grid
from .printer import Printer
from .printing_position import PrintingPosition, XPrintingPosition, YPrintingPosition

logger = logging.getLogger('screen_printer.cli')


def configure_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='screen_printer',
        description='Redraw a grid of random digits, rewriting only changed cells.',
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--width', type=int, default=40, help='grid width (default: 40)')
    parser.add_argument('--height', type=int, default=10, help='grid height (default: 10)')
    parser.add_argument('--frames', type=int, default=200,
                        help='number of frames to print (default: 200)')
    parser.add_argument('--delay', type=float, default=0.05,
                        help='seconds between frames (default: 0.05)')
    parser.add_argument('-x', '--x-position', type=XPrintingPosition.parse,
                        default=XPrintingPosition.left(),
                        help='left, middle, right or a column (default: left)')
    parser.add_argument('-y', '--y-position', type=YPrintingPosition.parse,
                        default=YPrintingPosition.bottom(),
                        help='top, middle, bottom or a row (default: bottom)')
    parser.add_argument('--log-file', help='write debug logs to this file')
    return parser


def random_frame(width: int, height: int, rng: random.Random) -> Grid:
    digits = [rng.randrange(10) for _ in range(width * height)]
    return Grid.from_characters(digits, width, height)


def run(argv: Optional[List[str]] = None, term: Optional[Terminal] = None) -> int:
    options = configure_parser().parse_args(argv)
    if options.log_file:
        logging.basicConfig(filename=options.log_file, level=logging.DEBUG)

    term = term or Terminal()
    printer = Printer(
        PrintingPosition(options.x_position, options.y_position), term=term
    )
    rng = random.Random()

    try:
        with term.fullscreen(), term.hidden_cursor():
            for _ in range(options.frames):
                printer.dynamic_print(random_frame(options.width, options.height, rng))
                time.sleep(options.delay)
    except PrintingError as error:
        logger.debug("printing failed", exc_info=True)
        print(f'Error: {error}', file=sys.stderr)
        return 1
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == '__main__':
    main()
