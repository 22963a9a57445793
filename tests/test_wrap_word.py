import pytest

from tagtree import Document
from tagtree.transform import (
    compile_word_pattern,
    WordWrapper,
    WordWrapperOptions,
)

from tests.utils import labels, text


def test_whole_words_only():
    document = Document(["<p>", "the cat sat, cats ran", "</p>"])
    document.wrap_word("cat", "b")
    assert str(document) == text(
        "<p>", "the ", "<b>", "cat", "</b>", " sat, cats ran", "</p>"
    )


@pytest.mark.parametrize("tag_name", ("em", "<em>"))
def test_all_occurrences_with_punctuation(tag_name):
    document = Document(["<p>", "Cat, cat. CAT! a cat", "</p>"])
    document.wrap_word("cat", tag_name)
    assert str(document) == text(
        "<p>",
        "<em>",
        "Cat,",
        "</em>",
        " ",
        "<em>",
        "cat.",
        "</em>",
        " ",
        "<em>",
        "CAT!",
        "</em>",
        " a ",
        "<em>",
        "cat",
        "</em>",
        "</p>",
    )


@pytest.mark.parametrize(
    "line",
    (
        "cats",
        "bobcat",
        "cat?!",
        "cat-like",
        "(cat)",
        "concatenate",
    ),
)
def test_no_match(line):
    document = Document(["<p>", line, "</p>"])
    document.wrap_word("cat", "b")
    assert str(document) == text("<p>", line, "</p>")


def test_whitespace_delimiters():
    document = Document(["<p>", "\tcat  dog", "</p>"])
    document.wrap_word("CAT", "b")
    assert labels(document.root) == ["p", "\t", "b", "cat", "  dog"]


def test_element_labels_are_not_considered():
    document = Document(["<cat>", "<p>", "dog", "</p>", "</cat>"])
    document.wrap_word("cat", "b")
    assert str(document) == text("<cat>", "<p>", "dog", "</p>", "</cat>")


def test_following_nodes_are_processed():
    document = Document(["<p>", "cat", "cat", "<i>", "a cat", "</i>", "</p>"])
    document.wrap_word("cat", "b")
    assert str(document) == text(
        "<p>",
        "<b>",
        "cat",
        "</b>",
        "<b>",
        "cat",
        "</b>",
        "<i>",
        "a ",
        "<b>",
        "cat",
        "</b>",
        "</i>",
        "</p>",
    )


def test_wrapped_words_are_not_wrapped_again():
    document = Document(["<p>", "b b", "</p>"])
    document.wrap_word("b", "b")
    assert str(document) == text(
        "<p>", "<b>", "b", "</b>", " ", "<b>", "b", "</b>", "</p>"
    )


def test_text_root():
    document = Document(["cat"])
    root = document.root
    document.wrap_word("cat", "b")
    assert document.root is root
    assert str(document) == text("<b>", "cat", "</b>")


def test_sample(sample_document):
    sample_document.wrap_word("stress", "em")
    assert labels(sample_document.root).count("em") == 5
    assert "Coping With \n<em>\nStress\n</em>\n" in str(sample_document)
    assert (
        text("<em>", "Stress", "</em>", " is a normal part of life.")
        in str(sample_document)
    )
    assert (
        text("Sleep well: ", "<em>", "stress", "</em>", " fades.")
        in str(sample_document)
    )


def test_regex_characters_are_literal():
    document = Document(["<p>", "cat c.t", "</p>"])
    document.wrap_word("c.t", "code")
    assert str(document) == text("<p>", "cat ", "<code>", "c.t", "</code>", "</p>")


@pytest.mark.parametrize("word", ("", " "))
def test_empty_word(word, sample_document, sample_text):
    sample_document.wrap_word(word, "b")
    assert str(sample_document) == sample_text


def test_empty_tree():
    document = Document([])
    document.wrap_word("cat", "b")
    assert document.root is None


def test_custom_punctuation():
    transformation = WordWrapper(
        WordWrapperOptions(word="cat", tag_name="b", punctuation="-")
    )
    assert transformation.split("cat- cat, cat") == [
        (True, "cat-"),
        (False, " cat, "),
        (True, "cat"),
    ]


def test_split():
    transformation = WordWrapper(WordWrapperOptions("cat", "b"))
    assert transformation.split("dog") == []
    assert transformation.split("cat") == [(True, "cat")]
    assert transformation.split(" cat ") == [(False, " "), (True, "cat"), (False, " ")]
    assert transformation.split("cat cat") == [
        (True, "cat"),
        (False, " "),
        (True, "cat"),
    ]


def test_compile_word_pattern():
    pattern = compile_word_pattern("cat", punctuation="")
    assert pattern.fullmatch("CaT")
    assert not pattern.search("cat.")


def test_split_with_empty_word():
    assert WordWrapper(WordWrapperOptions("", "b")).split("x") == []
