import logging

import pytest
from honeycomb.cli import main

CATS_GRID = "2\nT\nG D O S C A\n"


def _write_inputs(tmp_path, honeycomb: str, words: list[str]):
    hc = tmp_path / "honeycomb.txt"
    hc.write_text(honeycomb)
    dictionary = tmp_path / "dictionary.txt"
    dictionary.write_text("".join(w + "\n" for w in words))
    return str(hc), str(dictionary)


def test_prints_sorted_words(tmp_path, capsys):
    hc, dictionary = _write_inputs(tmp_path, CATS_GRID, ["DOG", "CATS", "CAT"])
    assert main([hc, dictionary]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == ["CAT", "CATS"]


def test_no_words_found(tmp_path, capsys):
    hc, dictionary = _write_inputs(tmp_path, CATS_GRID, ["DOG"])
    assert main([hc, dictionary]) == 0
    assert capsys.readouterr().out == "No words found.\n"


def test_missing_honeycomb_file(tmp_path, capsys):
    _, dictionary = _write_inputs(tmp_path, CATS_GRID, ["CAT"])
    assert main([str(tmp_path / "missing.txt"), dictionary]) == 1
    assert "honeycomb file missing" in capsys.readouterr().err


def test_missing_dictionary_file(tmp_path, capsys):
    hc, _ = _write_inputs(tmp_path, CATS_GRID, ["CAT"])
    assert main([hc, str(tmp_path / "missing.txt")]) == 1
    assert "dictionary file missing" in capsys.readouterr().err


def test_malformed_honeycomb(tmp_path, capsys):
    hc, dictionary = _write_inputs(tmp_path, "2\nA B C\n", ["CAT"])
    assert main([hc, dictionary]) == 1
    assert "needs 7 letters" in capsys.readouterr().err


def test_invalid_dictionary_word(tmp_path, capsys):
    hc, dictionary = _write_inputs(tmp_path, CATS_GRID, ["CAT", "cat"])
    assert main([hc, dictionary]) == 1
    assert "line 2" in capsys.readouterr().err


@pytest.mark.parametrize("argv", [[], ["only-one.txt"], ["a.txt", "b.txt", "c.txt"]])
def test_wrong_argument_count(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code != 0


def test_show_grid(tmp_path, capsys):
    hc, dictionary = _write_inputs(tmp_path, CATS_GRID, ["CAT"])
    assert main([hc, dictionary, "--show-grid"]) == 0
    captured = capsys.readouterr()
    assert "S T G" in captured.err
    assert captured.out == "CAT\n"


def test_verbose_logs_stage_timings(tmp_path, capsys, caplog):
    hc, dictionary = _write_inputs(tmp_path, CATS_GRID, ["CAT"])
    with caplog.at_level(logging.INFO, logger="honeycomb"):
        assert main([hc, dictionary, "-v"]) == 0
    assert "stage=search" in caplog.text
    assert "Found 1 words" in caplog.text
    assert capsys.readouterr().out == "CAT\n"


def test_quiet_without_verbose(tmp_path, capsys, caplog):
    hc, dictionary = _write_inputs(tmp_path, CATS_GRID, ["CAT"])
    assert main([hc, dictionary]) == 0
    assert "stage=search" not in caplog.text
