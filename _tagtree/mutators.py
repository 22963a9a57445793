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
The structural edits that can be applied to a tree. Each one is a
:class:`_tagtree.transform.Transformation` that alters the tree in place and returns
its possibly new root node. An edit that isn't applicable to a tree leaves it
untouched without further notice.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any, Final, NamedTuple, Optional

from _tagtree.nodes import Node
from _tagtree.tokens import strip_tag_delimiters
from _tagtree.transform import Transformation
from _tagtree.utils import traverse

if TYPE_CHECKING:
    from re import Pattern


logger: Final = logging.getLogger(__name__)


# constants


PUNCTUATION: Final = ",:;?!."


# slots


class _Slot(NamedTuple):
    """
    A reference that owns a node, that is the ``first_child`` or ``next_sibling``
    attribute of a node, or the ``root`` attribute of a transformation.
    """

    owner: Any
    name: str

    def get(self) -> Optional[Node]:
        return getattr(self.owner, self.name)

    def set(self, node: Optional[Node]):
        setattr(self.owner, self.name, node)


# renaming


class TagRenamerOptions(NamedTuple):
    """
    :param old_name: The label that shall be replaced.
    :param new_name: The replacement.
    """

    old_name: str
    new_name: str


class TagRenamer(Transformation):
    """
    Relabels all nodes that are labeled with a given name. Mind that this includes text
    nodes whose content equals that name.
    """

    options_class = TagRenamerOptions

    def transform(self):
        if self.root is None:
            logger.debug("Not renaming tags in an empty tree.")
            return

        old_name = strip_tag_delimiters(self.options.old_name)
        new_name = strip_tag_delimiters(self.options.new_name)

        for node in traverse(self.root):
            if node.label == old_name:
                node.label = new_name


# removing


class TagRemoverOptions(NamedTuple):
    """
    :param tag_name: The name of the tags to remove, either bare or in brackets.
    :param list_containers: Names of tags whose immediate list item children are turned
                            into paragraphs when such tag is removed.
    :param list_item: The name of list item tags.
    :param paragraph: The name that list items are renamed to.
    """

    tag_name: str
    list_containers: tuple[str, ...] = ("ol", "ul")
    list_item: str = "li"
    paragraph: str = "p"


class TagRemover(Transformation):
    """
    Removes all nodes with a given label from the tree while their child nodes take
    their place. The siblings of a removed node follow the last of its children.

    When list containers are removed, their immediate list item children become
    paragraphs.
    """

    options_class = TagRemoverOptions

    def transform(self):
        if self.root is None:
            logger.debug("Not removing tags from an empty tree.")
            return

        options = self.options
        tag_name = strip_tag_delimiters(options.tag_name)
        is_list_container = tag_name in options.list_containers

        # siblings are popped before children
        slots = [_Slot(self, "root")]
        while slots:
            slot = slots.pop()
            node = slot.get()
            if node is None:
                continue

            if node.label == tag_name:
                if is_list_container:
                    self._convert_list_items(node)
                self._splice(slot, node)
                # the first promoted node is now owned by the same slot
                slots.append(slot)
            else:
                slots.append(_Slot(node, "first_child"))
                slots.append(_Slot(node, "next_sibling"))

    def _convert_list_items(self, node: Node):
        list_item, paragraph = self.options.list_item, self.options.paragraph
        for child_node in node.iterate_children():
            if child_node.label == list_item:
                child_node.label = paragraph

    @staticmethod
    def _splice(slot: _Slot, node: Node):
        children, following = node.first_child, node.next_sibling
        node.first_child = node.next_sibling = None

        if children is None:
            slot.set(following)
            return

        slot.set(children)
        if following is not None:
            children.last_sibling.next_sibling = following


# wrapping words


class WordWrapperOptions(NamedTuple):
    """
    :param word: The word to wrap, it's matched case-insensitively.
    :param tag_name: The name of the wrapping tags, either bare or in brackets.
    :param punctuation: Characters of which one may follow a word as part of the match.
    """

    word: str
    tag_name: str
    punctuation: str = PUNCTUATION


def compile_word_pattern(word: str, punctuation: str = PUNCTUATION) -> Pattern:
    """
    Returns a pattern that matches the given word as whole token, delimited by
    whitespace or the text's boundaries, optionally followed by one of the given
    punctuation characters.

    >>> [m.group() for m in compile_word_pattern("cat").finditer("Cat cats cat.")]
    ['Cat', 'cat.']
    """
    marks = f"[{re.escape(punctuation)}]?" if punctuation else ""
    return re.compile(rf"(?<!\S){re.escape(word)}{marks}(?!\S)", re.IGNORECASE)


class WordWrapper(Transformation):
    """
    Wraps all occurrences of a word in text nodes into a new tag. A text node that
    contains the word is split into a sequence of sibling nodes, text nodes for the
    runs between occurrences and tag nodes with the occurrence as only child.
    """

    options_class = WordWrapperOptions

    def __init__(self, options: Optional[WordWrapperOptions] = None):
        super().__init__(options)
        self.tag_name = strip_tag_delimiters(self.options.tag_name)
        self.pattern: Optional[Pattern] = (
            compile_word_pattern(self.options.word, self.options.punctuation)
            if self.options.word.strip()
            else None
        )

    def transform(self):
        if self.root is None or self.pattern is None:
            logger.debug("Not wrapping words in an empty tree or with an empty word.")
            return

        nodes = [self.root]
        while nodes:
            node = nodes.pop()

            if node.first_child is None and (segments := self.split(node.label)):
                following = self._wrap(node, segments)
                # the new nodes are not to be scanned again
                if following is not None:
                    nodes.append(following)
                continue

            if node.next_sibling is not None:
                nodes.append(node.next_sibling)
            if node.first_child is not None:
                nodes.append(node.first_child)

    def split(self, text: str) -> list[tuple[bool, str]]:
        """
        Splits a text into the word's occurrences and the text between them. Each
        segment is a tuple with a flag whether it is an occurrence and the text. An
        empty list is returned when the text doesn't contain the word.
        """
        if self.pattern is None:
            return []
        result: list[tuple[bool, str]] = []
        position = 0

        for match in self.pattern.finditer(text):
            start, end = match.span()
            if start > position:
                result.append((False, text[position:start]))
            result.append((True, match.group()))
            position = end

        if result and position < len(text):
            result.append((False, text[position:]))

        return result

    def _wrap(self, node: Node, segments: list[tuple[bool, str]]) -> Optional[Node]:
        following = node.next_sibling

        is_occurrence, text = segments[0]
        if is_occurrence:
            node.label = self.tag_name
            node.first_child = Node(text)
        else:
            node.label = text

        cursor = node
        for is_occurrence, text in segments[1:]:
            if is_occurrence:
                cursor.next_sibling = Node(self.tag_name, Node(text))
            else:
                cursor.next_sibling = Node(text)
            cursor = cursor.next_sibling

        cursor.next_sibling = following
        return following


# bolding table rows


class RowBolderOptions(NamedTuple):
    """
    :param row_number: The number of the row to embolden, counting from 1.
    :param table: The name of table tags.
    :param bold: The name of the inserted tags.
    """

    row_number: int
    table: str = "table"
    bold: str = "b"


def find_table(node: Optional[Node], label: str = "table") -> Optional[Node]:
    """
    Locates a table node. The search moves along a node's siblings first and only
    descends into the first child of a node that has no next sibling. Hence the last
    node on each level is the only one whose descendants are considered.
    """
    while node is not None:
        if node.label == label:
            return node
        node = node.first_child if node.next_sibling is None else node.next_sibling
    return None


class RowBolder(Transformation):
    """
    Inserts a bold tag between each cell of a table's row and the cell's contents.
    """

    options_class = RowBolderOptions

    def transform(self):
        row_number = self.options.row_number

        if self.root is None or row_number < 1:
            logger.debug("Not bolding row %i of an empty tree.", row_number)
            return

        table = find_table(self.root, self.options.table)
        if table is None:
            logger.debug("There's no table to bold a row in.")
            return

        row = table.first_child
        for _ in range(row_number - 1):
            if row is None:
                break
            row = row.next_sibling
        if row is None:
            logger.debug("The table has less than %i rows.", row_number)
            return

        for cell in row.iterate_children():
            if cell.first_child is not None:
                cell.first_child = Node(self.options.bold, cell.first_child)


__all__ = (
    compile_word_pattern.__name__,
    find_table.__name__,
    RowBolder.__name__,
    RowBolderOptions.__name__,
    TagRemover.__name__,
    TagRemoverOptions.__name__,
    TagRenamer.__name__,
    TagRenamerOptions.__name__,
    WordWrapper.__name__,
    WordWrapperOptions.__name__,
)
