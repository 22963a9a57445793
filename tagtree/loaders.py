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
The ``loaders`` module provides loaders to retrieve the lines of documents from common
kinds of sources and the means to register custom loaders.
"""

from _tagtree.plugins import plugin_manager
from _tagtree.plugins.core_loaders import (
    buffer_loader,
    lines_loader,
    path_loader,
    split_lines,
    text_loader,
)


__all__ = (
    buffer_loader.__name__,
    lines_loader.__name__,
    path_loader.__name__,
    "plugin_manager",
    split_lines.__name__,
    text_loader.__name__,
)
