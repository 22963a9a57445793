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

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from _tagtree.nodes import Node


def first(iterable: Iterable) -> Optional[Any]:
    """
    Returns the first item of the given :term:`iterable` or :obj:`None` if it's empty.
    Note that the first item is consumed when the iterable is an :term:`iterator`.
    """
    for item in iterable:
        return item
    return None


def last(iterable: Iterable) -> Optional[Any]:
    """
    Returns the last item of the given :term:`iterable` or :obj:`None` if it's empty.
    Note that the whole :term:`iterator` is consumed when such is given.
    """
    result = None
    for result in iterable:
        pass
    return result


# tree traversers


def traverse(root: Optional[Node]) -> Iterator[Node]:
    """
    Yields all nodes of the tree with the given root in document order, that is a
    node before its descendants before its following siblings. The root's siblings are
    part of the tree.
    """
    if root is None:
        return

    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        if node.next_sibling is not None:
            stack.append(node.next_sibling)
        if node.first_child is not None:
            stack.append(node.first_child)


__all__: tuple[str, ...] = (
    first.__name__,
    last.__name__,
    traverse.__name__,
)
