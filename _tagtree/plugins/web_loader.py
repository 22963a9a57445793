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
If ``tagtree`` is installed with ``web-loader`` as extra, the required dependencies for
this loader are installed as well.
"""


from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

import httpx

from _tagtree.plugins import plugin_manager
from _tagtree.plugins.core_loaders import text_loader

if TYPE_CHECKING:
    from types import SimpleNamespace

    from _tagtree.typing import LoaderResult


DEFAULT_CLIENT: Final = httpx.Client(follow_redirects=True)


@plugin_manager.register_loader(before=text_loader)
def web_loader(
    data: Any, config: SimpleNamespace, client: httpx.Client = DEFAULT_CLIENT
) -> LoaderResult:
    """
    This loader loads a document from a URL with the ``http`` and ``https`` scheme.
    The default httpx_-client follows redirects and can partially be configured with
    `environment variables`_. The URL will be bound to the name ``source_url`` on
    the document's :attr:`tagtree.Document.config` attribute.

    Loaders with specifically configured httpx-clients can build on this loader
    like so:

    .. testcode::

        import httpx
        from _tagtree.plugins import plugin_manager
        from _tagtree.plugins.web_loader import web_loader


        client = httpx.Client(follow_redirects=False, trust_env=False)

        @plugin_manager.register_loader(before=web_loader)
        def custom_web_loader(data, config):
            return web_loader(data, config, client=client)

    .. _environment variables: https://www.python-httpx.org/environment_variables/
    .. _httpx: https://www.python-httpx.org/
    """

    if isinstance(data, str) and data.lower().startswith(("http://", "https://")):
        response = client.get(data)
        response.raise_for_status()
        config.source_url = data
        return text_loader(response.content, config)
    return "The input value is not an URL with the http or https scheme."


__all__ = (web_loader.__name__,)
