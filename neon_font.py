#!/usr/bin/env python3
"""
🐧 PNGN Neon Banner - Font Module
=================================
Copyright (c) 2025 PNGN-Tec LLC

FIGlet Font Model and Parser
============================
Parses FIGlet (flf2a) font definitions into immutable Glyph records for the
95 printable ASCII codes (32..126).

Font Format
===========
- Header: ``flf2a<hardblank> height baseline max_length old_layout
  comment_lines [print_direction full_layout codetag_count]``
- comment_lines lines of free text follow the header
- One block of exactly ``height`` lines per character, in code order
- Each line ends in an end mark (its own last character); one end mark
  closes a row, two close the glyph
- The hardblank character is stored as a plain space

Only fixed-column placement is supported: the format's smushing and
kerning layout rules are deliberately not applied, so glyph widths and
text alignment follow directly from the glyph rows.

Module Interface
================
- parse_font(): str or bytes -> Font, raising FontFormatError
- Font: immutable code -> Glyph mapping, validated on construction
- Glyph: one character's rows
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Mapping, Sequence, Tuple, Union

from neon_errors import FontFormatError

# Configure logging
logger = logging.getLogger('neon_font')

# Printable ASCII range every font must cover
FIRST_CODE = 32
LAST_CODE = 126
GLYPH_COUNT = LAST_CODE - FIRST_CODE + 1

FONT_SIGNATURE = 'flf2a'


def printable_chars() -> Iterator[str]:
    """Characters 32..126 in font order"""
    return (chr(code) for code in range(FIRST_CODE, LAST_CODE + 1))


# ============================================================================
# FONT MODEL
# ============================================================================

@dataclass(frozen=True)
class Glyph:
    """One character's rows, all padded to the glyph width"""
    char: str
    rows: Tuple[str, ...]

    @property
    def width(self) -> int:
        return max((len(row) for row in self.rows), default=0)

    @property
    def height(self) -> int:
        return len(self.rows)

    @classmethod
    def from_rows(cls, char: str, rows: Sequence[str]) -> 'Glyph':
        width = max((len(row) for row in rows), default=0)
        return cls(char, tuple(row.ljust(width) for row in rows))


@dataclass(frozen=True)
class Font:
    """
    Complete printable-ASCII font.

    Attributes:
        height: Rows per glyph, shared by every glyph
        glyphs: Character -> Glyph for every code 32..126
        hardblank: Hardblank marker from the header
        baseline: Baseline row from the header (informational)
        name: Display name
        comments: Header comment block (ignored by rendering)
    """
    height: int
    glyphs: Mapping[str, Glyph] = field(repr=False, compare=False)
    hardblank: str = '$'
    baseline: int = 0
    name: str = ''
    comments: str = field(default='', repr=False, compare=False)

    def __post_init__(self):
        self.validate()

    def validate(self) -> bool:
        """
        Check the font invariants.

        Raises:
            FontFormatError: height below one, a missing glyph, or a glyph
                whose row count differs from the font height
        """
        if self.height < 1:
            raise FontFormatError(f"Font height must be at least 1, got {self.height}")
        for char in printable_chars():
            glyph = self.glyphs.get(char)
            if glyph is None:
                raise FontFormatError(f"Font is missing glyph {char!r} (code {ord(char)})")
            if glyph.height != self.height:
                raise FontFormatError(
                    f"Glyph {char!r} has {glyph.height} rows, font height is {self.height}")
        return True

    def glyph(self, char: str) -> Glyph:
        """
        Look up the glyph for one printable ASCII character.

        Raises:
            KeyError: for characters outside 32..126
        """
        return self.glyphs[char]

    def __contains__(self, char: object) -> bool:
        return char in self.glyphs

    def text_width(self, text: str, kerning: int = 0) -> int:
        """Columns taken by one line of text (no newline handling)"""
        if not text:
            return 0
        widths = [self.glyph(char).width for char in text]
        return sum(widths) + kerning * (len(widths) - 1)


# ============================================================================
# PARSER
# ============================================================================

@dataclass(frozen=True)
class FontHeader:
    """Fields read from the flf2a header line"""
    hardblank: str
    height: int
    baseline: int
    max_length: int
    old_layout: int
    comment_lines: int


def parse_header(line: str) -> FontHeader:
    """
    Parse the flf2a header line.

    Raises:
        FontFormatError: on a missing signature, missing hardblank, missing
            or non-integer fields, height < 1 or a negative comment count
    """
    parts = line.split()
    if not parts or not parts[0].startswith(FONT_SIGNATURE):
        raise FontFormatError("Missing flf2a signature in font header", 1)
    signature = parts[0]
    if len(signature) < len(FONT_SIGNATURE) + 1:
        raise FontFormatError("Font header has no hardblank character", 1)
    hardblank = signature[len(FONT_SIGNATURE)]

    fields = parts[1:6]
    if len(fields) < 5:
        raise FontFormatError(
            f"Font header needs height, baseline, max_length, old_layout and "
            f"comment_lines; found {len(fields)} fields", 1)
    try:
        height, baseline, max_length, old_layout, comment_lines = (int(value) for value in fields)
    except ValueError:
        raise FontFormatError(f"Non-integer field in font header: {' '.join(fields)}", 1)

    if height < 1:
        raise FontFormatError(f"Font height must be at least 1, got {height}", 1)
    if comment_lines < 0:
        raise FontFormatError(f"Comment line count must not be negative, got {comment_lines}", 1)

    return FontHeader(hardblank, height, baseline, max_length, old_layout, comment_lines)


def _decode(data: Union[str, bytes]) -> str:
    if isinstance(data, str):
        return data
    try:
        return data.decode('utf-8')
    except UnicodeDecodeError:
        return data.decode('latin-1')


def _parse_glyph_block(block: Sequence[str], char: str, first_line: int,
                       hardblank: str) -> Glyph:
    """
    Strip end marks from one glyph block and check its length.

    A row closed by a doubled end mark before the last row means the block
    is too short; a last row closed by a single end mark means it is too
    long. Either way the font height does not match the data.
    """
    rows: List[str] = []
    last = len(block) - 1
    for offset, raw in enumerate(block):
        line_number = first_line + offset
        line = raw.rstrip()
        if not line:
            raise FontFormatError(f"Glyph {char!r} row {offset} has no end mark", line_number)
        endmark = line[-1]
        content = line.rstrip(endmark)
        marks = len(line) - len(content)
        if offset < last and marks >= 2 and len(block) > 1:
            raise FontFormatError(
                f"Glyph {char!r} ends after {offset + 1} rows, expected {len(block)}",
                line_number)
        if offset == last and marks < 2:
            raise FontFormatError(
                f"Glyph {char!r} is not closed after {len(block)} rows", line_number)
        rows.append(content.replace(hardblank, ' '))
    return Glyph.from_rows(char, rows)


def parse_font(data: Union[str, bytes], name: str = '') -> Font:
    """
    Parse a FIGlet flf2a font definition.

    Args:
        data: Font text (bytes are decoded as UTF-8, falling back to latin-1)
        name: Display name stored on the Font

    Returns:
        Font covering codes 32..126

    Raises:
        FontFormatError: malformed header, truncated comment block, a glyph
            block with the wrong number of lines, or data ending before all
            95 glyphs were read
    """
    lines = _decode(data).splitlines()
    if not lines:
        raise FontFormatError("Font data is empty")

    header = parse_header(lines[0])
    cursor = 1
    comments = lines[cursor:cursor + header.comment_lines]
    if len(comments) < header.comment_lines:
        raise FontFormatError(
            f"Font ended inside the comment block ({len(comments)} of "
            f"{header.comment_lines} lines)", len(lines))
    cursor += header.comment_lines

    glyphs: Dict[str, Glyph] = {}
    for char in printable_chars():
        block = lines[cursor:cursor + header.height]
        if len(block) < header.height:
            raise FontFormatError(
                f"Font ended before glyph {char!r} (code {ord(char)}); "
                f"{len(glyphs)} of {GLYPH_COUNT} glyphs read", len(lines))
        glyphs[char] = _parse_glyph_block(block, char, cursor + 1, header.hardblank)
        cursor += header.height

    font = Font(
        height=header.height,
        glyphs=glyphs,
        hardblank=header.hardblank,
        baseline=header.baseline,
        name=name,
        comments='\n'.join(comments),
    )
    logger.debug(f"Parsed font {name or '<unnamed>'}: height={font.height}, "
                 f"{len(glyphs)} glyphs, {len(lines) - cursor} trailing lines ignored")
    return font
