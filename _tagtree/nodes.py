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

from typing import TYPE_CHECKING, Optional

from _tagtree.serializer import DefaultStringOptions, render

if TYPE_CHECKING:
    from collections.abc import Iterator


class Node:
    """
    The instances of this class are the only building blocks of a tree. A node
    references its first child and its next sibling, there are no references to a
    parent or a preceding sibling. Hence a node is owned either by its parent or by its
    preceding sibling, the root node is owned by whatever holds the tree.

    There's no explicit discrimination of element and text nodes. A node with a first
    child represents an element with its ``label`` as tag name, a node without
    represents a line of text with the ``label`` as content.

    :param label: The tag name or the text content.
    :param first_child: The head of the node's child list.
    :param next_sibling: The next node on the same level.

    >>> root = Node("p", Node("Hello"))
    >>> root.is_element, root.first_child.is_text
    (True, True)
    >>> print(root, end="")
    <p>
    Hello
    </p>

    A node's string representation is the serialization of a tree with that node as
    root, which includes its following siblings.
    """

    __slots__ = ("__label", "first_child", "next_sibling")

    def __init__(
        self,
        label: str,
        first_child: Optional[Node] = None,
        next_sibling: Optional[Node] = None,
    ):
        self.label = label
        self.first_child: Optional[Node] = first_child
        self.next_sibling: Optional[Node] = next_sibling

    def __repr__(self) -> str:
        kind = "element" if self.is_element else "text"
        return f'<{self.__class__.__name__}("{self.label}", {kind}) [{hex(id(self))}]>'

    def __str__(self) -> str:
        return self.serialize(newline=DefaultStringOptions.newline)

    @property
    def is_element(self) -> bool:
        """Whether the node represents an element, that is it has child nodes."""
        return self.first_child is not None

    @property
    def is_text(self) -> bool:
        """Whether the node represents a line of text."""
        return self.first_child is None

    def iterate_children(self) -> Iterator[Node]:
        """Yields the node's child nodes from left to right."""
        node = self.first_child
        while node is not None:
            yield node
            node = node.next_sibling

    def iterate_following_siblings(self) -> Iterator[Node]:
        """Yields the nodes that follow this one on the same level."""
        node = self.next_sibling
        while node is not None:
            yield node
            node = node.next_sibling

    @property
    def label(self) -> str:
        """The tag name of an element or the content of a text node."""
        return self.__label

    @label.setter
    def label(self, value: str):
        if not isinstance(value, str):
            raise TypeError("A label must be a string.")
        if "\n" in value or "\r" in value:
            raise ValueError("A label must not contain line breaks.")
        self.__label = value

    @property
    def last_sibling(self) -> Node:
        """The last node in the sibling chain that this node is part of."""
        node = self
        while node.next_sibling is not None:
            node = node.next_sibling
        return node

    def serialize(self, newline: Optional[str] = None) -> str:
        """
        Returns the line-oriented representation of the tree that has this node as
        root.

        :param newline: See :class:`io.StringIO` for a detailed explanation of the
                        parameter with the same name.
        """
        return render(self, newline=newline)


__all__ = (Node.__name__,)
