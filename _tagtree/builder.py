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

import logging
from typing import TYPE_CHECKING, Final, NamedTuple, Optional

from _tagtree.nodes import Node
from _tagtree.tokens import tokenize, TokenType

if TYPE_CHECKING:
    from collections.abc import Iterable


logger: Final = logging.getLogger(__name__)


class ParserOptions(NamedTuple):
    """
    The configuration options that define how a document is read.

    :param encoding: The encoding that is used to decode sources that are provided as
                     bytes. It doesn't affect data that is passed as :class:`str`.
    """

    encoding: str = "utf-8"


class TreeBuilder:
    """
    Builds a tree from lines of which each one is a single token. The input is trusted
    to be well-nested, a closing tag ends the current scan regardless of its name.

    The building is defined as one recursive procedure with two roles: filling the
    first child slot of a node or filling its next sibling slot. A closing tag returns
    from the current call. After the children of a node were scanned, the scan for its
    siblings follows. As documents can be long, that recursion is unrolled here with
    the tokens' iterator as shared cursor and a stack of nodes whose sibling scan is
    pending.
    """

    __slots__ = ("pending", "tokens")

    def __init__(self, lines: Iterable[str]):
        self.pending: Final[list[Node]] = []
        self.tokens: Final = tokenize(lines)

    def build(self) -> Optional[Node]:
        """
        Consumes the tokens and returns the root node or :obj:`None` if there's nothing
        to build a tree from.
        """
        token = next(self.tokens, None)

        if token is None:
            logger.debug("The token stream is empty.")
            return None
        if token.type is TokenType.ClosingTag:
            logger.debug("The token stream starts with a closing tag: %s", token.data)
            return None

        root = Node(token.data)
        self.process(root, token.type is TokenType.OpeningTag)
        return root

    def process(self, node: Node, may_have_children: bool):
        """
        Scans the tokens for the first child of ``node`` if ``may_have_children`` is
        :obj:`True` or its next sibling otherwise.
        """
        pending = self.pending

        while (token := next(self.tokens, None)) is not None:
            if token.type is TokenType.ClosingTag:
                if not pending:
                    self._log_unread_tokens()
                    return
                node, may_have_children = pending.pop(), False
                continue

            new_node = Node(token.data)
            if may_have_children:
                node.first_child = new_node
                pending.append(node)
            else:
                node.next_sibling = new_node
            node, may_have_children = new_node, token.type is TokenType.OpeningTag

    def _log_unread_tokens(self):
        if logger.isEnabledFor(logging.DEBUG):
            if count := sum(1 for _ in self.tokens):
                logger.debug("Ignoring %i tokens after the root's scope.", count)


def parse_tree(lines: Iterable[str]) -> Optional[Node]:
    """
    Parses the provided lines to a tree and returns its root node. :obj:`None` is
    returned for an empty input.
    """
    return TreeBuilder(lines).build()


__all__ = (parse_tree.__name__, ParserOptions.__name__, TreeBuilder.__name__)
