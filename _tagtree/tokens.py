# Copyright (C) 2018-'25  Frank Sachsenheim
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""
Every line of the input format is exactly one token: an opening tag ``<name>``, a
closing tag ``</name>`` or a line of literal text. There's no further lexing.
"""

from __future__ import annotations

import re
from enum import auto, IntEnum
from typing import TYPE_CHECKING, Final, NamedTuple

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


# constants


TAG_NAME_PATTERN: Final = r"[A-Za-z][A-Za-z0-9]*"
CLOSING_TAG: Final = re.compile(rf"</({TAG_NAME_PATTERN})>")
OPENING_TAG: Final = re.compile(rf"<({TAG_NAME_PATTERN})>")


# tokens


class TokenType(IntEnum):
    OpeningTag = auto()
    ClosingTag = auto()
    Text = auto()


class Token(NamedTuple):
    type: TokenType
    data: str
    """The tag name for tags, the verbatim line for text."""


def classify_line(line: str) -> Token:
    """Determines the token type of a single line."""
    if (match := OPENING_TAG.fullmatch(line)) is not None:
        return Token(TokenType.OpeningTag, match.group(1))
    if (match := CLOSING_TAG.fullmatch(line)) is not None:
        return Token(TokenType.ClosingTag, match.group(1))
    return Token(TokenType.Text, line)


def tokenize(lines: Iterable[str]) -> Iterator[Token]:
    for line in lines:
        yield classify_line(line)


def strip_tag_delimiters(name: str) -> str:
    """
    Returns the bare tag name from a name that is possibly given in its bracketed form.
    Anything that isn't an opening or closing tag is returned unchanged.

    >>> strip_tag_delimiters("<em>")
    'em'
    >>> strip_tag_delimiters("em")
    'em'
    >>> strip_tag_delimiters("<3>")
    '<3>'
    """
    token = classify_line(name)
    return name if token.type is TokenType.Text else token.data


__all__ = (
    classify_line.__name__,
    strip_tag_delimiters.__name__,
    Token.__name__,
    tokenize.__name__,
    TokenType.__name__,
)
