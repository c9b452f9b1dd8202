import os

import pytest

from bmfont import PATH_BMFONT_FONT
from bmfont.chardata import CharacterRecord
from bmfont.exception import BMFontError, FontFileError
from bmfont.fontdata import FontData, load_characters


SAMPLE = os.path.join(PATH_BMFONT_FONT, 'sample.fnt')


def write_font(tmp_path, content, name='font.fnt'):
    filepath = tmp_path / name
    filepath.write_bytes(content)
    return str(filepath)


def test_load_sample():
    characters = load_characters(SAMPLE)
    assert [c.id for c in characters] == [32, 65, 66, 97]
    assert characters[1] == CharacterRecord(
        id=65, x=10, y=0, width=20, height=21, xoffset=-1, yoffset=5,
        xadvance=19, page=0, channel=15)


def test_load_lenient_file(tmp_path):
    filepath = write_font(tmp_path, (
        b"info face=\"Test\" size=12\n"
        b"char id=1 x=0 y=0 width=0 height=0 xoffset=0 yoffset=0 "
        b"xadvance=0 page=0 chnl=0 extra=4\n"
        b"  char id=32 x=0 y=0 width=0 height=0 xoffset=0 yoffset=y "
        b"xadvance page=0 chnl=0\n"
        b"char  idd=3\n"
        b"\n"
        b"char id=3 wdth=3\n"))
    characters = load_characters(filepath)

    assert len(characters) == 3
    second = characters[1]
    assert second.id == 32
    assert second.xoffset == 0
    assert second.yoffset is None
    assert second.xadvance is None
    assert second.channel == 0
    assert characters[2] == CharacterRecord(id=3)


def test_load_empty_file(tmp_path):
    assert load_characters(write_font(tmp_path, b"")) == []


def test_load_encoding(tmp_path):
    filepath = write_font(tmp_path, 'info face="Ärial"\nchar id=196\n'
                          .encode('latin-1'))
    characters = load_characters(filepath, encoding='latin-1')
    assert characters == [CharacterRecord(id=196)]


def test_missing_file(tmp_path):
    filepath = str(tmp_path / 'missing.fnt')
    with pytest.raises(FontFileError) as excinfo:
        load_characters(filepath)

    assert 'missing.fnt' in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, OSError)


def test_directory(tmp_path):
    with pytest.raises(BMFontError):
        load_characters(str(tmp_path))


def test_undecodable_line(tmp_path):
    filepath = write_font(tmp_path, b"char id=1\nchar id=\xff\n")
    with pytest.raises(FontFileError) as excinfo:
        load_characters(filepath)

    assert 'line number 2' in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


def test_fontdata_sample():
    font = FontData(SAMPLE)
    assert len(font) == 4
    assert 'A' in font
    assert 'Z' not in font
    assert font.get_character('a').xadvance == 16
    assert font.get_region('A') == (10, 0, 20, 21)
    assert font.get_sizes('B') == (16, 21)
    assert font.get_sizes(' ') == (0, 0)
    assert font.pages == [0]


def test_fontdata_unknown_char():
    font = FontData(SAMPLE)
    with pytest.raises(KeyError):
        font.get_region('Z')


def test_fontdata_index(tmp_path):
    filepath = write_font(tmp_path, (
        b"char id=65 width=1 page=1\n"
        b"char width=2\n"
        b"char id width=3\n"
        b"char id=-1 width=4 page=0\n"
        b"char id=65 width=5 page=1\n"))
    font = FontData(filepath)

    assert len(font.characters) == 4
    assert len(font) == 1
    assert font.get_sizes('A') == (5, None)
    assert font.get_region('A') == (None, None, 5, None)
    assert font.pages == [0, 1]


def test_fontdata_missing_file(tmp_path):
    with pytest.raises(FontFileError):
        FontData(str(tmp_path / 'missing.fnt'))


def test_load_utf16(tmp_path):
    content = 'info face="Ärial"\nchar id=65 x=1\nchar id=196 x=2'
    for encoding in ('utf-16', 'utf-16-be', 'utf-32'):
        filepath = write_font(tmp_path, content.encode(encoding))
        characters = load_characters(filepath, encoding=encoding)
        assert characters == [CharacterRecord(id=65, x=1),
                              CharacterRecord(id=196, x=2)]


def test_load_utf8_bom(tmp_path):
    filepath = write_font(tmp_path, b'\xef\xbb\xbfchar id=65 x=1\n')
    assert load_characters(filepath) == [CharacterRecord(id=65, x=1)]
    assert 'A' in FontData(filepath)


def test_undecodable_utf16_line(tmp_path):
    content = 'char id=1\nchar id=2\n'.encode('utf-16-le') + b'\x00\xd8'
    filepath = write_font(tmp_path, content)
    with pytest.raises(FontFileError) as excinfo:
        load_characters(filepath, encoding='utf-16-le')

    assert 'line number 3' in str(excinfo.value)
