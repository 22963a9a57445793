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

from collections.abc import Callable, Iterable
from types import SimpleNamespace
from typing import Any, TypeAlias, Union


# loaders


LoaderResult: TypeAlias = Union[tuple[str, ...], str]
"""
A loader returns the lines of a document as tuple or a string that explains why it
didn't attempt to load the given source.
"""
Loader: TypeAlias = Callable[[Any, SimpleNamespace], LoaderResult]
LoaderConstraint: TypeAlias = Union[Loader, Iterable[Loader], None]
SecondOrderDecorator: TypeAlias = Callable[[Loader], Loader]


__all__ = (
    "Loader",
    "LoaderConstraint",
    "LoaderResult",
    "SecondOrderDecorator",
)
