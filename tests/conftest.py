from pathlib import Path

import pytest

# keep this before imports from tagtree!
from tests import plugins  # noqa: F401

from tagtree import DefaultStringOptions, Document


FILES_PATH = Path(__file__).parent / "files"
SAMPLE_FILE = FILES_PATH / "sample.html"


@pytest.fixture(autouse=True)
def _reset_serializer():
    DefaultStringOptions.reset_defaults()


@pytest.fixture
def files_path():
    return FILES_PATH


@pytest.fixture
def sample_document():
    return Document(SAMPLE_FILE)


@pytest.fixture
def sample_text():
    return SAMPLE_FILE.read_text()


@pytest.fixture
def table_document():
    return Document(
        [
            "<table>",
            "<tr>",
            "<td>",
            "a1",
            "</td>",
            "<td>",
            "b1",
            "</td>",
            "</tr>",
            "<tr>",
            "<td>",
            "a2",
            "</td>",
            "<td>",
            "b2",
            "</td>",
            "</tr>",
            "</table>",
        ]
    )
