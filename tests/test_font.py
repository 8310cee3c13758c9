"""Tests for FIGlet parsing and the builtin font"""

import pytest

from conftest import MINI_GLYPHS, build_flf
from neon_errors import FontFormatError
from neon_font import GLYPH_COUNT, Font, Glyph, parse_font, parse_header, printable_chars
from neon_glyphs import BUILTIN_FONT


class TestParseFont:
    def test_header_fields(self, mini_font):
        assert mini_font.height == 3
        assert mini_font.hardblank == '$'
        assert mini_font.baseline == 3
        assert mini_font.name == "mini"
        assert mini_font.comments == "mini test font\ntwo lines"

    def test_every_printable_glyph_present(self, mini_font):
        assert all(char in mini_font for char in printable_chars())
        assert len(list(printable_chars())) == GLYPH_COUNT == 95

    def test_glyph_rows_strip_end_marks(self, mini_font):
        assert mini_font.glyph('A').rows == (" # ", "###", "# #")
        assert mini_font.glyph('B').width == 3

    def test_hardblank_becomes_space(self, mini_font):
        assert mini_font.glyph(' ').rows == (" ", " ", " ")

    def test_bytes_input(self, mini_font_text):
        font = parse_font(mini_font_text.encode('utf-8'))
        assert font.glyph('A').rows == (" # ", "###", "# #")

    def test_latin1_fallback(self):
        text = build_flf(comments=("caf\xe9",))
        font = parse_font(text.encode('latin-1'))
        assert font.comments == "caf\xe9"

    def test_trailing_data_ignored(self, mini_font_text):
        font = parse_font(mini_font_text + "196\nextra@\nextra@\nextra@@\n")
        assert font.glyph('~').rows == ("o", "o", "o")

    def test_missing_glyph_names_character(self, mini_font_text):
        lines = mini_font_text.splitlines()
        truncated = "\n".join(lines[:-3])
        with pytest.raises(FontFormatError, match="'~'"):
            parse_font(truncated)

    def test_block_shorter_than_height(self):
        # Declared height 4, data blocks of 3 rows
        text = build_flf().replace("flf2a$ 3 3", "flf2a$ 4 3", 1)
        with pytest.raises(FontFormatError, match="ends after 3 rows"):
            parse_font(text)

    def test_block_longer_than_height(self):
        text = build_flf().replace("flf2a$ 3 3", "flf2a$ 2 3", 1)
        with pytest.raises(FontFormatError, match="not closed"):
            parse_font(text)

    def test_empty_data(self):
        with pytest.raises(FontFormatError):
            parse_font("")

    def test_truncated_comment_block(self):
        with pytest.raises(FontFormatError, match="comment block"):
            parse_font("flf2a$ 3 3 8 0 5\none comment\n")

    def test_unsupported_character_raises_key_error(self, mini_font):
        with pytest.raises(KeyError):
            mini_font.glyph('\xe9')


class TestParseHeader:
    def test_optional_fields_accepted(self):
        header = parse_header("flf2a$ 6 5 16 15 11 0 24463 229")
        assert (header.height, header.baseline, header.comment_lines) == (6, 5, 11)

    @pytest.mark.parametrize("line, message", [
        ("tlf2a$ 3 3 8 0 0", "signature"),
        ("flf2a 3 3 8 0 0", "hardblank"),
        ("flf2a$ 3 3 8", "found 3 fields"),
        ("flf2a$ 3 x 8 0 0", "Non-integer"),
        ("flf2a$ 0 0 8 0 0", "at least 1"),
        ("flf2a$ 3 3 8 0 -1", "must not be negative"),
    ])
    def test_invalid_header(self, line, message):
        with pytest.raises(FontFormatError, match=message) as excinfo:
            parse_header(line)
        assert excinfo.value.line_number == 1


class TestFontModel:
    def test_missing_glyph_rejected(self):
        glyphs = {char: Glyph.from_rows(char, ["x"]) for char in "ABC"}
        with pytest.raises(FontFormatError, match="missing glyph"):
            Font(height=1, glyphs=glyphs)

    def test_wrong_row_count_rejected(self):
        glyphs = {char: Glyph.from_rows(char, ["x"]) for char in printable_chars()}
        glyphs['Q'] = Glyph.from_rows('Q', ["x", "x"])
        with pytest.raises(FontFormatError, match="'Q' has 2 rows"):
            Font(height=1, glyphs=glyphs)

    def test_glyph_rows_padded_to_width(self):
        glyph = Glyph.from_rows('x', ["#", "###"])
        assert glyph.rows == ("#  ", "###")
        assert glyph.width == 3

    def test_text_width_counts_kerning_between_glyphs(self, mini_font):
        assert mini_font.text_width("AB", kerning=1) == 7
        assert mini_font.text_width("AB", kerning=0) == 6
        assert mini_font.text_width("", kerning=3) == 0


class TestBuiltinFont:
    def test_satisfies_font_invariants(self):
        assert BUILTIN_FONT.validate()
        assert BUILTIN_FONT.height == 5
        assert all(BUILTIN_FONT.glyph(char).height == 5 for char in printable_chars())

    def test_lowercase_reuses_uppercase(self):
        assert BUILTIN_FONT.glyph('a').rows == BUILTIN_FONT.glyph('A').rows

    def test_strokes_cast_shade_side(self):
        assert BUILTIN_FONT.glyph('I').rows == ("███░", " █░ ", " █░ ", " █░ ", "███░")
        assert BUILTIN_FONT.glyph(' ').rows == ("    ",) * 5

    def test_mini_font_definitions_used(self):
        assert set(MINI_GLYPHS) <= set(printable_chars())
