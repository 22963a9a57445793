from io import BytesIO, StringIO
from pathlib import Path

import pytest

from tagtree import Document, ParserOptions
from tagtree.exceptions import FailedDocumentLoading
from tagtree.loaders import lines_loader, split_lines, text_loader

from tests.plugins import Paragraphs
from tests.utils import chdir, text

TEST_FILE = Path(__file__).resolve().parent / "files" / "sample.html"
TEST_CONTENTS = TEST_FILE.read_text()
TEST_FILE_URI = f"file://{TEST_FILE}"


def test_buffer_loader():
    with TEST_FILE.open("rb") as f:
        document = Document(f)
    assert document.source_url == TEST_FILE_URI
    assert str(document) == TEST_CONTENTS

    with chdir(TEST_FILE.parent), Path(TEST_FILE.name).open("rb") as f:
        document = Document(f)
    assert document.source_url == TEST_FILE_URI


def test_buffer_loader_with_text_buffers():
    document = Document(StringIO("<p>\nx\n</p>\n"))
    assert document.source_url is None
    assert str(document) == text("<p>", "x", "</p>")


def test_buffer_loader_reads_from_start():
    buffer = BytesIO(b"<p>\nx\n</p>\n")
    buffer.read()
    assert str(Document(buffer)) == text("<p>", "x", "</p>")


@pytest.mark.parametrize("s", ("", "s"))
def test_web_loader(httpx_mock, s):
    httpx_mock.add_response(content=TEST_CONTENTS.encode())
    url = f"http{s}://stress.less/advice.html"
    document = Document(url)
    assert document.root.label == "html"
    assert document.source_url == url
    assert str(document) == TEST_CONTENTS


def test_path_loader():
    document = Document(TEST_FILE)
    assert document.source_url == TEST_FILE_URI
    assert document.root.label == "html"

    with chdir(TEST_FILE.parent):
        document = Document(Path(TEST_FILE.name))
    assert document.source_url == TEST_FILE_URI


def test_explicit_source_url():
    document = Document(TEST_FILE, source_url="https://stress.less/advice.html")
    assert document.source_url == "https://stress.less/advice.html"


def test_text_loader():
    document = Document(TEST_CONTENTS)
    assert document.source_url is None
    assert str(document) == TEST_CONTENTS


@pytest.mark.parametrize(
    "contents", ("<p>\r\nx\r\n</p>\r\n", "<p>\rx\r</p>", "<p>\nx\n</p>")
)
def test_line_terminators(contents):
    assert str(Document(contents)) == text("<p>", "x", "</p>")


def test_encoded_text():
    data = text("<p>", "Grüße", "</p>").encode("latin-1")
    document = Document(data, parser_options=ParserOptions(encoding="latin-1"))
    assert document.root.first_child.label == "Grüße"
    assert document.config.parser_options.encoding == "latin-1"

    with pytest.raises(FailedDocumentLoading):
        Document(data)


def test_lines_loader():
    document = Document(x for x in ("<p>\n", "x\r\n", "</p>"))
    assert str(document) == text("<p>", "x", "</p>")


def test_plugin_loader():
    document = Document(Paragraphs(("one", "two")))
    assert document.config.playground.paragraphs == 2
    assert str(document) == text(
        "<body>", "<p>", "one", "</p>", "<p>", "two", "</p>", "</body>"
    )


def test_loader_order():
    from _tagtree.plugins import plugin_manager
    from _tagtree.plugins.web_loader import web_loader
    from tests.plugins import paragraphs_loader

    loaders = plugin_manager.loaders
    assert loaders.index(web_loader) < loaders.index(text_loader)
    assert loaders.index(paragraphs_loader) == loaders.index(lines_loader) - 1


@pytest.mark.parametrize("source", (None, 1, ["<p>", 1]))
def test_failed_loading(source):
    with pytest.raises(FailedDocumentLoading) as excinfo:
        Document(source)
    assert "Couldn't load" in str(excinfo.value)
    assert excinfo.value.source is source


def test_empty_sources():
    for source in ("", b"", [], iter(()), StringIO()):
        document = Document(source)
        assert document.root is None
        assert str(document) == ""

    assert Document("\n").root.label == ""


def test_split_lines():
    assert split_lines("") == ()
    assert split_lines("a") == ("a",)
    assert split_lines("a\n") == ("a",)
    assert split_lines("a\n\n") == ("a", "")
    assert split_lines("a\r\nb\rc\nd") == ("a", "b", "c", "d")
