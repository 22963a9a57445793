from __future__ import annotations

from itertools import chain
from types import SimpleNamespace
from typing import Any, NamedTuple

from _tagtree.plugins import plugin_manager
from _tagtree.plugins.core_loaders import lines_loader


class Paragraphs(NamedTuple):
    texts: tuple[str, ...]


@plugin_manager.register_loader(before=lines_loader)
def paragraphs_loader(data: Any, config: SimpleNamespace):
    if isinstance(data, Paragraphs):
        config.playground = SimpleNamespace(paragraphs=len(data.texts))
        return (
            "<body>",
            *chain.from_iterable(("<p>", x, "</p>") for x in data.texts),
            "</body>",
        )
    return "The input value is not a Paragraphs instance."
