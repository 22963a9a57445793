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

from collections.abc import Iterable
from importlib.metadata import entry_points
from importlib.util import find_spec
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from _tagtree.typing import Loader, LoaderConstraint, SecondOrderDecorator


class PluginManager:
    __slots__ = ("loaders",)

    def __init__(self):
        self.loaders: list[Loader] = []

    @staticmethod
    def load_plugins():
        """
        Loads all modules that are registered as entrypoint in the ``tagtree`` group and
        imports contributed extensions whose dependencies are available.
        """
        if find_spec("httpx"):
            import _tagtree.plugins.web_loader  # noqa: F401

        for entrypoint in entry_points().select(group="tagtree"):
            entrypoint.load()

    def register_loader(
        self, before: LoaderConstraint = None, after: LoaderConstraint = None
    ) -> SecondOrderDecorator:
        """
        Registers a document loader. A loader is called with the object that a
        :class:`tagtree.Document` is initialized with and the document's configuration.
        It returns the document's lines as tuple, or a string that explains why it
        didn't attempt to load the source.

        A module that is specified as ``tagtree`` plugin for a loader that fetches
        documents from a database might look like this:

        .. testcode::

            from types import SimpleNamespace
            from typing import Any

            from _tagtree.plugins import plugin_manager
            from _tagtree.plugins.core_loaders import text_loader
            from _tagtree.typing import LoaderResult

            from archive import fetch_page


            @plugin_manager.register_loader()
            def archive_loader(source: Any, config: SimpleNamespace) -> LoaderResult:
                if isinstance(source, str) and source.startswith("archive:"):
                    config.source_url = source
                    return text_loader(fetch_page(source[8:]), config)

                # return an indication why this loader didn't attempt to load in order
                # to support debugging
                return "The input value is not an archive reference."

        Loaders that retrieve a document from an URL should add the origin as string to
        the ``config`` object as ``source_url``.

        You might want to specify a loader to be considered before or after another
        one:

        .. testcode::

            from _tagtree.plugins import plugin_manager
            from _tagtree.plugins.core_loaders import text_loader


            @plugin_manager.register_loader(before=text_loader)
            def markdown_loader(source, config) -> LoaderResult:
                # loading logic here
                pass
        """

        if before is not None and after is not None:
            raise NotImplementedError(
                "Loaders may only define one constraint atm. Please open an issue with "
                "a use-case description if you need to define both."
            )

        registered_loaders = self.loaders

        if before is not None:
            if not isinstance(before, Iterable):
                before = (before,)
            index = min(registered_loaders.index(x) for x in before)

        elif after is not None:
            if not isinstance(after, Iterable):
                after = (after,)
            index = max(registered_loaders.index(x) for x in after) + 1

        else:
            index = len(registered_loaders)

        def registrar(loader: Loader) -> Loader:
            assert callable(loader)
            registered_loaders.insert(index, loader)
            return loader

        return registrar


plugin_manager = PluginManager()


__all__ = ("plugin_manager",)
