import codecs
import logging

from path import Path

from bmfont.chardata import parse_lines
from bmfont.exception import FontFileError


logger = logging.getLogger()

UNICODE_MAX = 0x10FFFF


def _decode_lines(f, filepath, encoding):
    # 0x0A is not a line break in every encoding, split the decoded text
    decoder = codecs.getincrementaldecoder(encoding)()
    pending = ''
    number = 0
    try:
        for raw in f:
            *lines, pending = (pending + decoder.decode(raw)).split('\n')
            for line in lines:
                number += 1
                yield line
        pending += decoder.decode(b'', final=True)
    except UnicodeDecodeError as e:
        msg = "Unable to read line number %d of %s: %s" % (
            number + 1, filepath, e)
        logger.critical(msg)
        raise FontFileError(msg) from e

    if pending:
        yield pending


def load_characters(filepath, encoding='utf-8-sig'):
    """Read the character lines of a BMFont text file

    Args:
        filepath (str): BMFont file
        encoding (str): Text encoding of the file

    Returns:
        list of CharacterRecord

    Raises:
        FontFileError: The file can't be opened or read
    """
    filepath = Path(filepath)

    try:
        f = filepath.open('rb')
    except OSError as e:
        msg = "Unable to open file %s: %s" % (filepath, e)
        logger.critical(msg)
        raise FontFileError(msg) from e

    with f:
        try:
            characters = parse_lines(_decode_lines(f, filepath, encoding))
        except OSError as e:
            msg = "Unable to read file %s: %s" % (filepath, e)
            logger.critical(msg)
            raise FontFileError(msg) from e

    logger.debug("%d characters loaded from %s", len(characters), filepath)
    return characters


class FontData():
    """Load the characters of a BMFont text file

    Characters are indexed by their string value, so `get_region('A')`
    gives the bitmap area of the glyph with `id=65`.
    See http://www.angelcode.com/products/bmfont/doc/file_format.html
    """
    def __init__(self, filepath, encoding='utf-8-sig'):
        self.filepath = Path(filepath)
        self.characters = load_characters(self.filepath, encoding)
        self.index = self._init_index()
        self.regions = self._init_regions()
        self.sizes = self._init_sizes()
        self.pages = self._init_pages()

    def _init_index(self):
        """Index records by character

        Records without a valid id are not indexed, the last record
        wins when an id is repeated.

        Returns:
            Char indexed dict
        """
        res = {}
        for c in self.characters:
            if c.id is None or not 0 <= c.id <= UNICODE_MAX:
                continue
            res[chr(c.id)] = c

        return res

    def _init_regions(self):
        """Bitmap area of each char

        Returns:
            Char indexed dict of (x, y, width, height)
        """
        return {k: (c.x, c.y, c.width, c.height)
                for k, c in self.index.items()}

    def _init_sizes(self):
        """Create dimensions for each char

        Returns:
            Char indexed dict
        """
        return {k: (c.width, c.height) for k, c in self.index.items()}

    def _init_pages(self):
        return sorted({c.page for c in self.characters
                       if c.page is not None})

    def __len__(self):
        return len(self.index)

    def __contains__(self, char):
        return char in self.index

    def get_character(self, char):
        """Get the CharacterRecord of char

        Args:
            char (str): One character to find
        """
        return self.index[char]

    def get_region(self, char):
        """Get bitmap area of char in this FontData

        Args:
            char (str): One character to find
        """
        return self.regions[char]

    def get_sizes(self, char):
        """Get size of char in this FontData

        Args:
            char (str): One character to find
        """
        return self.sizes[char]
