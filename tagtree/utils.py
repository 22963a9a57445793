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

import enum
from typing import Optional

from _tagtree.exceptions import InvalidCodePath
from _tagtree.nodes import Node
from _tagtree.utils import *  # noqa
from _tagtree.utils import __all__


class TreeDifferenceKind(enum.Enum):
    None_ = enum.auto()
    Label = enum.auto()
    Missing = enum.auto()
    NodeKind = enum.auto()


class TreesComparisonResult:
    """
    Instances of this class describe one or no difference between two trees.
    Casting an instance to :class:`bool` will yield :obj:`True` when it describes no
    difference, thus the compared trees were equal.
    Casted to strings they're intended to support debugging.
    """

    def __init__(
        self,
        difference_kind: TreeDifferenceKind,
        lhn: Optional[Node],
        rhn: Optional[Node],
    ):
        self.difference_kind = difference_kind
        self.lhn: Optional[Node] = lhn
        self.rhn: Optional[Node] = rhn

    def __bool__(self):
        return self.difference_kind is TreeDifferenceKind.None_

    def __str__(self):
        match self.difference_kind:
            case TreeDifferenceKind.None_:
                return "Trees are equal."
            case TreeDifferenceKind.Label:
                return f"Nodes' labels differ:\n{self.lhn!r}\n{self.rhn!r}"
            case TreeDifferenceKind.Missing:
                return (
                    "A node is missing in one of the trees:\n"
                    f"{self.lhn!r}\n{self.rhn!r}"
                )
            case TreeDifferenceKind.NodeKind:
                return (
                    "One node is an element, the other one is text:\n"
                    f"{self.lhn!r}\n{self.rhn!r}"
                )

        raise InvalidCodePath()


def compare_trees(lhr: Optional[Node], rhr: Optional[Node]) -> TreesComparisonResult:
    """
    Compares two trees for equality. Upon the first detection of a difference of
    nodes that are located at the same position within the compared trees a mismatch
    is reported. The trees' roots' siblings are considered as part of the trees.

    :param lhr: The node that is considered as root of the left hand operand.
    :param rhr: The node that is considered as root of the right hand operand.
    :return: An object that contains information about the first or no difference.
    """
    pairs: list[tuple[Optional[Node], Optional[Node]]] = [(lhr, rhr)]

    while pairs:
        lhn, rhn = pairs.pop()

        if lhn is None and rhn is None:
            continue
        if lhn is None or rhn is None:
            return TreesComparisonResult(TreeDifferenceKind.Missing, lhn, rhn)
        if lhn.is_element is not rhn.is_element:
            return TreesComparisonResult(TreeDifferenceKind.NodeKind, lhn, rhn)
        if lhn.label != rhn.label:
            return TreesComparisonResult(TreeDifferenceKind.Label, lhn, rhn)

        pairs.append((lhn.next_sibling, rhn.next_sibling))
        pairs.append((lhn.first_child, rhn.first_child))

    return TreesComparisonResult(TreeDifferenceKind.None_, None, None)


__all__ = __all__ + (  # type: ignore
    compare_trees.__name__,
    TreeDifferenceKind.__name__,
    TreesComparisonResult.__name__,
)
