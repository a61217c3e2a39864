import io

import pytest

from dsakit.trie import Trie, main


def test_insert_and_search():
    t = Trie()
    for w in ["apple", "app", "bat"]:
        t.insert(w)
    assert t.search("apple")
    assert t.search("app")
    assert "bat" in t
    assert not t.search("ap")
    assert not t.search("batman")
    assert "cat" not in t


def test_remove_keeps_other_words():
    t = Trie()
    t.insert("app")
    t.insert("apple")
    t.remove("app")
    assert not t.search("app")
    assert t.search("apple")


def test_remove_absent_word_is_harmless():
    t = Trie()
    t.insert("dog")
    t.remove("cat")
    t.remove("do")
    assert t.search("dog")


def test_empty_word():
    t = Trie()
    assert not t.search("")
    t.insert("")
    assert t.search("")


def test_invalid_characters_rejected():
    with pytest.raises(ValueError):
        Trie().insert("Hello")


def test_non_string_not_contained():
    t = Trie()
    t.insert("a")
    assert (1 in t) is False


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\nhello\nworld\n3\nhello\nhell\nworld\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "ENTER NUMBER OF WORDS",
        "ENTER NUMBER OF QUERY",
        "FOUND",
        "NOT FOUND",
        "FOUND",
    ]