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
The ``core_loaders`` module provides a set of loaders to retrieve the lines of
documents from various data sources.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from contextlib import suppress
from io import IOBase, UnsupportedOperation
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

from _tagtree.plugins import plugin_manager

if TYPE_CHECKING:
    from types import SimpleNamespace

    from _tagtree.typing import LoaderResult


LINE_BREAKS: Final = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> tuple[str, ...]:
    """
    Splits a text into lines without their terminators. A terminator at the end of the
    text doesn't yield an empty line.
    """
    if not text:
        return ()
    lines = LINE_BREAKS.split(text)
    if lines[-1] == "":
        lines.pop()
    return tuple(lines)


@plugin_manager.register_loader()
def path_loader(data: Any, config: SimpleNamespace) -> LoaderResult:
    """
    This loader loads from a file that is pointed at with a :class:`pathlib.Path`
    instance. The file's URI will be bound to ``source_url`` on the document's
    :attr:`tagtree.Document.config` attribute.
    """
    if isinstance(data, Path):
        if not hasattr(config, "source_url"):
            config.source_url = (Path.cwd() / data).as_uri()
        with data.open("rb") as file:
            return buffer_loader(file, config)
    return "The input value is not a pathlib.Path instance."


@plugin_manager.register_loader(after=path_loader)
def buffer_loader(data: Any, config: SimpleNamespace) -> LoaderResult:
    """
    This loader loads a document from a :term:`file-like object` that reads either
    binary or text data. Binary data is decoded with the encoding that is set in the
    parser options.
    """
    if isinstance(data, IOBase):
        if (
            not hasattr(config, "source_url")
            and isinstance(name := getattr(data, "name", None), (bytes, str))
            and (
                path := Path.cwd()
                / Path(name if isinstance(name, str) else name.decode())
            ).is_file()
        ):
            config.source_url = path.as_uri()
        with suppress(UnsupportedOperation):
            data.seek(0)
        return text_loader(data.read(), config)
    return "The input value is no buffer object."


@plugin_manager.register_loader()
def text_loader(data: Any, config: SimpleNamespace) -> LoaderResult:
    """
    Splits a string containing a full document into lines. Byte sequences are decoded
    with the encoding that is set in the parser options.
    """
    if isinstance(data, bytes):
        data = data.decode(config.parser_options.encoding)
    if isinstance(data, str):
        return split_lines(data)
    return "The input value is not a byte sequence or a string."


@plugin_manager.register_loader()
def lines_loader(data: Any, config: SimpleNamespace) -> LoaderResult:
    """
    Takes the lines from any other :term:`iterable` of strings, e.g. a :class:`list` or
    a generator. Trailing line terminators are removed.
    """
    if isinstance(data, Iterable) and not isinstance(data, (bytes, str)):
        lines = tuple(data)
        if not all(isinstance(x, str) for x in lines):
            return "The input value contains other objects than strings."
        return tuple(x.rstrip("\r\n") for x in lines)
    return "The input value is not an iterable of strings."


__all__ = (
    buffer_loader.__name__,
    lines_loader.__name__,
    path_loader.__name__,
    split_lines.__name__,
    text_loader.__name__,
)
