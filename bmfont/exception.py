class BMFontError(Exception):
    '''Base class of all bmfont errors'''
    pass


class FontFileError(BMFontError):
    '''The font file could not be opened or read'''
    pass
