import gc
from itertools import chain
from pathlib import Path

import pytest


FILES_PATH = Path(__file__).parent.parent / "tests/files"
SAMPLE_FILE = FILES_PATH / "sample.html"
SIZES = (100, 1_000, 10_000)


def generate_lines(sections: int) -> tuple[str, ...]:
    return (
        "<html>",
        "<body>",
        *chain.from_iterable(
            (
                "<p>",
                f"Paragraph {i} is about a cat that sat, cats ran.",
                "<em>",
                "emphasized",
                "</em>",
                "</p>",
                "<ul>",
                "<li>",
                "item",
                "</li>",
                "</ul>",
            )
            for i in range(sections)
        ),
        "<table>",
        "<tr>",
        "<td>",
        "cell",
        "</td>",
        "</tr>",
        "</table>",
        "</body>",
        "</html>",
    )


@pytest.fixture(autouse=True)
def _collect_garbage():
    gc.collect()
    gc.collect()
