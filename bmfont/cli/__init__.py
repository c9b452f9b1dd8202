"""BMFont CLI

Usage:
    bmfont chars <font-file> [--debug]
    bmfont -h | --help
    bmfont --version

Options:
    -h --help    Show this screen
    --version    Show version
    --debug      Log debug messages
"""

import logging
import sys

import docopt

import bmfont
from bmfont.exception import FontFileError
from bmfont.fontdata import load_characters


logger = logging.getLogger()


def init_logger(debug):
    if debug:
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.WARNING)

    formatter = logging.Formatter('%(asctime)s :: %(levelname)s '
                                  ':: %(message)s')
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    stream_handler.setLevel(logging.DEBUG)
    logger.addHandler(stream_handler)
    return stream_handler


def format_character(character):
    """Render a CharacterRecord as `key=value` pairs, absent fields omitted"""
    return ' '.join('%s=%d' % (k, v)
                    for k, v in character._asdict().items() if v is not None)


def chars(font_file):
    try:
        characters = load_characters(font_file)
    except FontFileError as e:
        print(e, file=sys.stderr)
        return 1

    for c in characters:
        print(format_character(c))

    return 0


def main(argv=None):
    args = docopt.docopt(__doc__, argv=argv, version=bmfont.__version__)
    level = logger.level
    handler = init_logger(args['--debug'])

    try:
        if args['chars']:
            return chars(args['<font-file>'])
    finally:
        logger.removeHandler(handler)
        logger.setLevel(level)

    return 0

if __name__ == '__main__':
    sys.exit(main())
