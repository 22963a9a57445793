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
This module offers a canonical interface with the aim to make re-use of transforming
algorithms easier. The edits that this package provides are implemented with it, see
:mod:`_tagtree.mutators`.

A transformation is defined as subclass of :class:`Transformation`::

   from tagtree.transform import Transformation
   from tagtree.utils import traverse


   class DropEmptyLines(Transformation):
       def transform(self):
           for node in traverse(self.root):
               ...

As the tree has no references from nodes to their parents, a transformation that
replaces the root node must assign the new one to its ``root`` attribute. Instances are
called with a root node and return the possibly altered root node::

   drop_empty_lines = DropEmptyLines()
   root = drop_empty_lines(root)

:class:`typing.NamedTuple` are used to define options for transformations::

   class UppercaseOptions(NamedTuple):
       tags_only: bool = True


   class Uppercase(Transformation):
       options_class = UppercaseOptions

       def transform(self):
           for node in traverse(self.root):
               if node.is_element or not self.options.tags_only:
                   node.label = node.label.upper()

A transformation class that defines an ``options_class`` property can then either be
used with its defaults or with alternate options::

   root = Uppercase()(root)
   root = Uppercase(UppercaseOptions(tags_only=False))(root)

Finally, concrete transformations can be chained, both as classes or instances. The
interface allows also to chain multiple chains::

   from tagtree.transform import TransformationSequence

   tidy_up = TransformationSequence(DropEmptyLines, Uppercase(UppercaseOptions(False)))
   root = tidy_up(root)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, NamedTuple, Optional

if TYPE_CHECKING:
    from _tagtree.nodes import Node
    from tagtree import Document


class TransformationBase(ABC):
    """This base class defines the calling interface of transformations."""

    @abstractmethod
    def __call__(
        self, root: Optional[Node], origin_document: Optional[Document] = None
    ) -> Optional[Node]:
        pass


class Transformation(TransformationBase):
    """This is a base class for any transformation algorithm."""

    options_class: Optional[type] = None

    def __init__(self, options: Optional[NamedTuple] = None):
        self.root: Optional[Node] = None
        self.origin_document: Optional[Document] = None
        if options is None and self.options_class is not None:
            options = self.options_class()
        self.options = options

    def __call__(
        self, root: Optional[Node], origin_document: Optional[Document] = None
    ) -> Optional[Node]:
        self.root = root
        self.origin_document = origin_document
        self.transform()
        result = self.root
        self.root = self.origin_document = None
        return result

    @abstractmethod
    def transform(self):
        """
        This method needs to implement the transformation logic. When it is called,
        the instance has two attributes assigned from its call:

        ``root`` is the node that the transformation was called to transform with, it
        is :obj:`None` for an empty tree.
        ``origin_document`` is the document that was possibly passed as second argument.
        """
        pass


class TransformationSequence(TransformationBase):
    """
    A transformation sequence can be used to combine any number of both
    :class:`Transformation` (provided as class or instantiated with options) and other
    :class:`TransformationSequence` instances or classes.
    """

    def __init__(
        self,
        *transformations: TransformationBase | type[TransformationBase],
    ):
        _transformations = []
        for transformation in transformations:
            if isinstance(transformation, type) and issubclass(
                transformation, TransformationBase
            ):
                _transformations.append(transformation())
            elif isinstance(transformation, TransformationBase):
                _transformations.append(transformation)
            else:
                raise TypeError(
                    "Only subclasses of TransformationBase or instances of such are "
                    "allowed."
                )
        self.transformations = tuple(_transformations)

    def __call__(
        self, root: Optional[Node], origin_document: Optional[Document] = None
    ) -> Optional[Node]:
        for transformation in self.transformations:
            root = transformation(root, origin_document=origin_document)
        return root


__all__ = (
    Transformation.__name__,
    TransformationBase.__name__,
    TransformationSequence.__name__,
)
