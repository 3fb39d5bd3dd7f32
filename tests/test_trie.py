import pytest
from honeycomb.errors import InvalidCharacterError
from honeycomb.trie import Trie, build_from_lines, load_trie


def test_insert_and_lookup():
    trie = Trie()
    trie.insert("CAT")
    trie.insert("CATS")
    assert "CAT" in trie
    assert "CATS" in trie
    assert "CA" not in trie
    assert trie.has_prefix("CA")
    assert trie.has_prefix("")
    assert not trie.has_prefix("DO")


def test_duplicate_insert_counts_once():
    trie = Trie()
    trie.insert("DOG")
    trie.insert("DOG")
    assert len(trie) == 1


def test_child_lookup():
    trie = Trie()
    trie.insert("AB")
    a = Trie.child(trie.root, "A")
    assert a is not None and not a.is_word
    assert Trie.child(a, "B").is_word
    assert Trie.child(a, "C") is None


def test_invalid_character_rejected_without_side_effects():
    trie = Trie()
    with pytest.raises(InvalidCharacterError) as exc:
        trie.insert("CA7")
    assert exc.value.char == "7"
    assert not trie.has_prefix("C")
    assert len(trie) == 0


def test_lowercase_is_not_normalised():
    trie = Trie()
    with pytest.raises(InvalidCharacterError):
        trie.insert("cat")


def test_build_from_lines_strips_terminators_and_blanks():
    trie = build_from_lines(["CAT\n", "\n", "DOG\r\n", "EEL"])
    assert len(trie) == 3
    assert "DOG" in trie
    assert "EEL" in trie


def test_build_from_lines_strict_reports_line_number():
    with pytest.raises(InvalidCharacterError) as exc:
        build_from_lines(["CAT\n", "DON'T\n"])
    assert exc.value.line_no == 2
    assert "line 2" in str(exc.value)


def test_build_from_lines_permissive_skips_invalid():
    trie = build_from_lines(["CAT\n", "dog\n", "EMU\n"], strict=False)
    assert len(trie) == 2
    assert "EMU" in trie


def test_build_from_lines_min_length():
    trie = build_from_lines(["A", "AT", "ANT"], min_length=2)
    assert "A" not in trie
    assert "AT" in trie
    assert "ANT" in trie


def test_load_trie(tmp_path):
    dict_file = tmp_path / "dictionary.txt"
    dict_file.write_text("CAT\nCATS\nDOG\n")
    trie = load_trie(str(dict_file))
    assert len(trie) == 3
    assert "CATS" in trie
