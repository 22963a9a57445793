import pytest

from tagtree import DefaultStringOptions, Document, Node, parse_tree, render
from _tagtree.serializer import iterate_lines

from tests.utils import text


def test_empty_tree():
    assert render(None) == ""
    assert list(iterate_lines(None)) == []
    assert str(Document([])) == ""


def test_conforming_input_is_reproduced(sample_text):
    assert str(Document(sample_text)) == sample_text


def test_element_lines_and_text_lines():
    root = Node("html", Node("body", Node("p", Node("Hello"), Node("p", Node("bye")))))
    assert list(iterate_lines(root)) == [
        "<html>",
        "<body>",
        "<p>",
        "Hello",
        "</p>",
        "<p>",
        "bye",
        "</p>",
        "</body>",
        "</html>",
    ]


def test_childless_nodes_are_written_as_text():
    # an empty element can't be represented
    assert render(parse_tree(["<p>", "<br>", "</br>", "x", "</p>"])) == text(
        "<p>", "br", "</p>", "x"
    )


def test_roots_siblings_are_included():
    assert render(parse_tree(["a", "b", "c"])) == text("a", "b", "c")


@pytest.mark.parametrize("newline", ("\n", "\r\n", "\r"))
def test_newline_argument(newline):
    root = parse_tree(["<p>", "x", "</p>"])
    assert render(root, newline=newline) == f"<p>{newline}x{newline}</p>{newline}"
    assert root.serialize(newline=newline) == render(root, newline=newline)


def test_default_string_options():
    document = Document(["<p>", "x", "</p>"])

    DefaultStringOptions.newline = "\r\n"
    assert str(document) == "<p>\r\nx\r\n</p>\r\n"
    assert str(document.root) == str(document)

    DefaultStringOptions.reset_defaults()
    assert str(document) == text("<p>", "x", "</p>")


def test_deep_tree():
    depth = 5000
    root = leaf = Node("core")
    for i in reversed(range(depth)):
        root = Node(f"d{i}", root)
    assert leaf.is_text

    lines = list(iterate_lines(root))
    assert len(lines) == 2 * depth + 1
    assert lines[depth] == "core"
    assert lines[0] == "<d0>"
    assert lines[-1] == "</d0>"


def test_write(tmp_path, sample_document, sample_text):
    path = tmp_path / "result.html"

    sample_document.save(path)
    assert path.read_text() == sample_text

    sample_document.save(path, encoding="utf-16-le", newline="\r\n")
    assert path.read_bytes() == sample_text.replace("\n", "\r\n").encode("utf-16-le")


def test_write_to_buffer(tmp_path):
    document = Document(["<p>", "Grüße", "</p>"])
    path = tmp_path / "result.html"

    with path.open("wb") as file:
        document.write(file, encoding="latin-1")
        assert not file.closed

    assert path.read_bytes() == text("<p>", "Grüße", "</p>").encode("latin-1")
