import os
import sys

from tagtree.utils import compare_trees, traverse


if sys.version_info < (3, 11):  # DROPWITH Python 3.10
    from contextlib import contextmanager
    from pathlib import Path

    @contextmanager
    def chdir(path: Path):
        state = Path.cwd()
        os.chdir(path)
        yield
        os.chdir(state)

else:
    from contextlib import chdir  # noqa: F401


def assert_equal_trees(a, b):
    result = compare_trees(a, b)
    if not result:
        raise AssertionError(str(result))


def labels(root) -> list[str]:
    return [node.label for node in traverse(root)]


def text(*lines: str) -> str:
    return "".join(f"{line}\n" for line in lines)
