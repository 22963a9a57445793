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
from io import TextIOWrapper
from types import SimpleNamespace
from typing import TYPE_CHECKING, Any, BinaryIO, Final, Optional

from _tagtree.builder import parse_tree, ParserOptions, TreeBuilder
from _tagtree.exceptions import FailedDocumentLoading
from _tagtree.mutators import (
    RowBolder,
    RowBolderOptions,
    TagRemover,
    TagRemoverOptions,
    TagRenamer,
    TagRenamerOptions,
    WordWrapper,
    WordWrapperOptions,
)
from _tagtree.nodes import Node
from _tagtree.plugins import (  # noqa: F401
    core_loaders,
    plugin_manager as _plugin_manager,
)
from _tagtree.serializer import (
    DefaultStringOptions,
    Serializer,
    _TextBufferWriter,
    render,
)
from _tagtree.utils import traverse

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from _tagtree.transform import TransformationBase
    from _tagtree.typing import Loader


logger: Final = logging.getLogger(__name__)


# plugin loading


_plugin_manager.load_plugins()


# api


class Document:
    """
    This class is the entrypoint to obtain a representation of a document in the
    line-oriented tag format, to edit and to serialize it.

    :param source: Anything that the configured loaders can make sense of to return the
                   document's lines.
    :param parser_options: A :class:`tagtree.ParserOptions` instance to configure how
                           the source is read.
    :param source_url: An optional source URL for situations where a loader can't
                       determine one.

    For instantiation any object can be passed. A suitable loader must be available for
    the given source. The core loaders accept :class:`pathlib.Path` instances,
    :term:`file-like objects <file-like object>`, strings and byte sequences that
    contain a document and other iterables of strings that are taken as lines. URLs
    with an ``http`` or ``https`` scheme are loaded if ``httpx`` is available.

    >>> document = Document(["<p>", "Hello world!", "</p>"])
    >>> document.wrap_word("hello", "em")
    >>> print(document, end="")
    <p>
    <em>
    Hello
    </em>
     world!
    </p>

    All edits are applied in place. An edit that isn't applicable to the document,
    e.g. emboldening a row of a missing table, is silently ignored.
    """

    __slots__ = ("config", "__root", "source_url")

    def __init__(
        self,
        source: Any,
        /,
        parser_options: Optional[ParserOptions] = None,
        source_url: Optional[str] = None,
    ):
        config = SimpleNamespace()
        if source_url is not None:
            config.source_url = source_url
        config.parser_options = parser_options or ParserOptions()

        lines = self.__load_source(source, config)

        self.config: SimpleNamespace = config
        """
        Beside the ``parser_options``, this property contains the data that loaders
        may have stored.
        """
        self.source_url: Optional[str] = vars(config).pop("source_url", None)
        """
        The source URL where a loader obtained the document's contents or
        :obj:`None`.
        """
        self.__root: Optional[Node] = TreeBuilder(lines).build()

    @staticmethod
    def __load_source(source: Any, config: SimpleNamespace) -> Sequence[str]:
        loader_excuses: dict[Loader, str | Exception] = {}

        for loader in _plugin_manager.loaders:
            try:
                loader_result = loader(source, config)
            except Exception as e:
                loader_excuses[loader] = e
            else:
                if isinstance(loader_result, str):
                    loader_excuses[loader] = loader_result
                else:
                    break
        else:
            vars(config).pop("source_url", None)
            raise FailedDocumentLoading(source, loader_excuses)

        logger.debug("Loaded %i lines with %s.", len(loader_result), loader.__name__)
        return loader_result

    def __contains__(self, node: Node) -> bool:
        return any(n is node for n in traverse(self.__root))

    def __str__(self) -> str:
        return render(self.__root, newline=DefaultStringOptions.newline)

    def bold_row(self, row_number: int):
        """
        Emboldens the contents of each cell in the given row of the document's table.

        :param row_number: The row's number, the first row is numbered 1.

        The table is the first node labeled ``table`` that is found by moving along the
        siblings on each level and only then descending into the first child of the
        last sibling.

        Cells that are lines of text rather than elements have no content to wrap and
        are left as they are.
        """
        self.transform(RowBolder(RowBolderOptions(row_number=row_number)))

    def remove_tag(self, tag_name: str):
        """
        Removes all tags with the given name, their child nodes take their places.
        Immediate ``li`` children of removed ``ol`` and ``ul`` tags become ``p`` tags.

        :param tag_name: The tag name, either bare or in brackets.
        """
        self.transform(TagRemover(TagRemoverOptions(tag_name=tag_name)))

    def rename_tag(self, old_name: str, new_name: str):
        """
        Renames all tags with the given name. Lines of text that are equal to the old
        name are replaced as well.

        :param old_name: The name to replace.
        :param new_name: The replacement.
        """
        self.transform(TagRenamer(TagRenamerOptions(old_name, new_name)))

    def render(self, newline: Optional[str] = None) -> str:
        """
        Returns the document's serialization.

        :param newline: See :class:`io.StringIO` for a detailed explanation of the
                        parameter with the same name.
        """
        return render(self.__root, newline=newline)

    @property
    def root(self) -> Optional[Node]:
        """The root node of the document or :obj:`None` if it's empty."""
        return self.__root

    @root.setter
    def root(self, node: Optional[Node]):
        if not (node is None or isinstance(node, Node)):
            raise TypeError("The document root must be a Node instance or None.")
        self.__root = node

    def save(
        self,
        path: Path,
        *,
        encoding: str = "utf-8",
        newline: None | str = None,
    ):
        """
        Saves the serialized document contents to a file.

        :param path: The filesystem path to the target file.
        :param encoding: The desired text encoding.
        :param newline: See :class:`io.TextIOWrapper` for a detailed explanation of the
                        parameter with the same name.
        """
        with path.open("bw") as file:
            self.write(buffer=file, encoding=encoding, newline=newline)

    def transform(self, transformation: TransformationBase):
        """
        Applies a :class:`tagtree.transform.Transformation` or a
        :class:`tagtree.transform.TransformationSequence` to the document's tree.
        """
        self.__root = transformation(self.__root, origin_document=self)

    def wrap_word(self, word: str, tag_name: str):
        """
        Wraps all occurrences of a word in the document's text into tags.

        :param word: The word, it's matched case-insensitively as a whole token that may
                     be followed by one of the punctuation characters ``,:;?!.``.
        :param tag_name: The name of the wrapping tags, either bare or in brackets.
        """
        self.transform(WordWrapper(WordWrapperOptions(word=word, tag_name=tag_name)))

    def write(
        self,
        buffer: BinaryIO,
        *,
        encoding: str = "utf-8",
        newline: None | str = None,
    ):
        """
        Writes the serialized document contents to a :term:`file-like object`.

        :param buffer: A :term:`file-like object` that the document is written to.
        :param encoding: The desired text encoding.
        :param newline: See :class:`io.TextIOWrapper` for a detailed explanation of the
                        parameter with the same name.
        """
        text_buffer = TextIOWrapper(buffer)
        try:
            serializer = Serializer(
                _TextBufferWriter(text_buffer, encoding=encoding, newline=newline)
            )
            serializer.serialize(self.__root)
            text_buffer.flush()
        finally:
            text_buffer.detach()


__all__ = (
    DefaultStringOptions.__name__,
    Document.__name__,
    Node.__name__,
    ParserOptions.__name__,
    parse_tree.__name__,
    render.__name__,
)
