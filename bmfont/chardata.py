'''Character lines of the BMFont text format

A BMFont text file describes one glyph per `char` line:

    char id=65 x=10 y=0 width=20 height=21 xoffset=-1 yoffset=5 xadvance=19 page=0 chnl=15

Only these lines are read, every other block (info, common, page,
kerning...) is skipped. Font files come from many tools with uneven
conformance, so parsing never fails on a bad line: unknown keys, tokens
without `=` and values that are not integers are ignored and the field
stays `None`.
See http://www.angelcode.com/products/bmfont/doc/file_format.html
'''
from collections import namedtuple
import logging
import re


logger = logging.getLogger()

LINE_TAG = 'char'

CharacterRecord = namedtuple('CharacterRecord', [
    'id', 'x', 'y', 'width', 'height', 'xoffset', 'yoffset', 'xadvance',
    'page', 'channel'])
CharacterRecord.__new__.__defaults__ = (None,) * len(CharacterRecord._fields)
CharacterRecord.__doc__ = '''Metadata of one glyph

Each field is an `int` or `None` when the line did not provide it.
'''

# Key in the file -> field of CharacterRecord
FIELDS = {
    'id': 'id',
    'x': 'x',
    'y': 'y',
    'width': 'width',
    'height': 'height',
    'xoffset': 'xoffset',
    'yoffset': 'yoffset',
    'xadvance': 'xadvance',
    'page': 'page',
    'chnl': 'channel',
    'channel': 'channel'
}

INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1

_CHAR_LINE = re.compile(r'char\s+id(?:=|\s|$)')
_INTEGER = re.compile(r'[+-]?[0-9]+')


def is_character_line(line):
    """Check if the line defines a character

    Args:
        line (str): Line of the font file

    Returns:
        True if the line starts with the `char id` tag
    """
    return _CHAR_LINE.match(line.strip()) is not None


def tokenize(line):
    """Split a character line into `(key, value)` pairs

    The leading `char` tag is dropped. Tokens without `=` are skipped,
    the others are split at the first `=` only.

    Args:
        line (str): Character line

    Returns:
        Generator of (key, value_text) tuples, in line order
    """
    tokens = line.split()
    if tokens and tokens[0] == LINE_TAG:
        tokens = tokens[1:]

    for token in tokens:
        if '=' not in token:
            logger.debug("Invalid token in character line: %s", token)
            continue
        key, _, value = token.partition('=')
        yield key, value


def parse_integer(value):
    """Convert a value text to int, None if it is not a 32 bits integer"""
    if _INTEGER.fullmatch(value) is None:
        return None

    result = int(value)
    if result < INT_MIN or result > INT_MAX:
        return None

    return result


def parse_field(key, value):
    """Convert one `key=value` pair to a record field

    Args:
        key (str): Key as written in the file
        value (str): Raw value text

    Returns:
        tuple(field_name, int) or None if the key is unknown or the value
        is not a valid integer
    """
    field = FIELDS.get(key)
    if field is None:
        return None

    number = parse_integer(value)
    if number is None:
        return None

    return field, number


def parse_character_line(line):
    """Create the CharacterRecord of one character line

    When a key is repeated, the last valid value wins.

    Args:
        line (str): Character line

    Returns:
        CharacterRecord
    """
    values = {}
    for key, value in tokenize(line):
        field = parse_field(key, value)
        if field:
            values[field[0]] = field[1]

    return CharacterRecord(**values)


def iter_characters(lines):
    '''Lazily parse the character lines of `lines`

    *Parameters:*

    - `lines`: Iterable of `str` (a list, an open text file...)
    '''
    return (parse_character_line(line)
            for line in lines if is_character_line(line))


def parse_lines(lines):
    """Parse all character lines

    Args:
        lines (iterable): Lines of the font file

    Returns:
        list of CharacterRecord, in the order of the lines
    """
    return list(iter_characters(lines))
