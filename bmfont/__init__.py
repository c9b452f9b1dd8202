"""BMFont character parser

Read the glyph metadata of Angel Code (BMFont) text font files.
"""
# flake8: noqa

from os import path as p


__version__ = "0.1.0"

PATH_BMFONT = p.dirname(p.abspath(__file__))
PATH_BMFONT_ASSET = p.join(PATH_BMFONT, 'asset')
PATH_BMFONT_FONT = p.join(PATH_BMFONT_ASSET, 'font')
