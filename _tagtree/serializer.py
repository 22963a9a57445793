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

from __future__ import annotations

from abc import ABC
from io import StringIO, TextIOWrapper
from typing import TYPE_CHECKING, ClassVar, Final, Optional, TextIO

if TYPE_CHECKING:
    from collections.abc import Iterator

    from _tagtree.nodes import Node


# configuration


class DefaultStringOptions:
    """
    This object's class variables are used to configure the serialization parameters
    that are applied when nodes or documents are coerced to :class:`str` objects. Hence
    it also applies when they are fed to the :func:`print` function.

    .. attention::

        Use this once to define behaviour on *application level*. Think thrice whether
        you want to use this facility in a library.
    """

    newline: ClassVar[None | str] = None
    """
    See :class:`io.StringIO` for a detailed explanation of the parameter with the same
    name.
    """

    @classmethod
    def _get_serializer(cls) -> Serializer:
        return Serializer(_StringWriter(newline=cls.newline))

    @classmethod
    def reset_defaults(cls):
        """Restores the factory settings."""
        cls.newline = None


# serializer


class Serializer:
    """
    Writes a tree in the line-oriented format, one tag or line of text per line. The
    output of a tree that was built from conforming input is identical to that input.
    """

    __slots__ = ("writer",)

    def __init__(self, writer: _SerializationWriter):
        self.writer = writer

    def serialize(self, root: Optional[Node]):
        for line in iterate_lines(root):
            self.writer(line + "\n")


def iterate_lines(root: Optional[Node]) -> Iterator[str]:
    """
    Yields the lines that represent the tree with the given root, including the root's
    following siblings.
    """
    if root is None:
        return

    pending: list[Node | str] = [root]
    while pending:
        item = pending.pop()

        if isinstance(item, str):
            yield item
            continue

        if item.next_sibling is not None:
            pending.append(item.next_sibling)

        if item.first_child is None:
            yield item.label
        else:
            yield f"<{item.label}>"
            pending.append(f"</{item.label}>")
            pending.append(item.first_child)


def render(root: Optional[Node], newline: Optional[str] = None) -> str:
    """
    Returns the serialization of the tree with the given root. An empty tree renders
    as empty string.
    """
    serializer = Serializer(_StringWriter(newline=newline))
    serializer.serialize(root)
    return serializer.writer.result


# writers


class _SerializationWriter(ABC):
    __slots__ = ("buffer",)

    def __init__(self, buffer: TextIO):
        self.buffer: Final = buffer

    def __call__(self, data: str):
        self.buffer.write(data)

    @property
    def result(self):
        if isinstance(self.buffer, StringIO):
            return self.buffer.getvalue()
        raise TypeError(  # pragma: no cover
            "Underlying buffer must be an instance of `io.StringIO`"
        )


class _StringWriter(_SerializationWriter):
    def __init__(self, newline: Optional[str] = None):
        super().__init__(StringIO(newline=newline))


class _TextBufferWriter(_SerializationWriter):
    def __init__(
        self,
        buffer: TextIOWrapper,
        encoding: str = "utf-8",
        newline: Optional[str] = None,
    ):
        buffer.reconfigure(encoding=encoding, newline=newline)
        super().__init__(buffer)


__all__ = (
    DefaultStringOptions.__name__,
    iterate_lines.__name__,
    render.__name__,
    Serializer.__name__,
)
