import pytest

from stava.cli import main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("STAVA_WORDS_PATH", raising=False)
    monkeypatch.delenv("STAVA_LOG_LEVEL", raising=False)
    monkeypatch.delenv("STAVA_ENCODING", raising=False)


@pytest.fixture
def write_file(tmp_path):
    def _write(name, text):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def default_words(write_file, monkeypatch):
    path = write_file("words.txt", "spelling inconvenient bicycle corrected arranged poetry word")
    monkeypatch.setenv("STAVA_WORDS_PATH", path)
    return path


def test_output_ends_with_newline(default_words, capsys):
    assert main(["speling"]) == 0
    assert capsys.readouterr().out == "spelling\n"


def test_match_in_file(write_file, capsys):
    path = write_file("a.txt", "spelling, and some other words")

    assert main(["speling", path]) == 0
    assert capsys.readouterr().out == "spelling\n"


def test_match_in_any_of_files(write_file, capsys):
    first = write_file("a.txt", "no match in this file")
    second = write_file("b.txt", "but a match in this file - spelling")

    assert main(["speling", first, second]) == 0
    assert "spelling" in capsys.readouterr().out


def test_input_word_when_no_match(write_file, capsys):
    path = write_file("a.txt", "no match in this file")

    assert main(["inputword", path]) == 0
    assert capsys.readouterr().out == "inputword\n"


def test_uppercase_word_in_file(write_file, capsys):
    path = write_file("a.txt", "SPELLING")

    assert main(["speling", path]) == 0
    assert capsys.readouterr().out == "spelling\n"


def test_non_existing_file(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["speling", "some_non_existing_file"])

    assert exc_info.value.code == 2
    assert "File not found [some_non_existing_file]" in capsys.readouterr().err


def test_missing_word_argument(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main([])

    assert exc_info.value.code == 2
    assert "WORD" in capsys.readouterr().err


def test_no_files_and_no_default_dictionary(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["speling"])

    assert exc_info.value.code == 2
    assert "STAVA_WORDS_PATH" in capsys.readouterr().err


def test_default_flag_learns_default_dictionary_too(default_words, write_file, capsys):
    path = write_file("a.txt", "no match in this file")

    assert main(["--default", "speling", path]) == 0
    assert capsys.readouterr().out == "spelling\n"


def test_default_flag_still_learns_files(default_words, write_file, capsys):
    path = write_file("a.txt", "quintessential is not included in default words")

    main(["--default", "ruintessential", path])
    assert capsys.readouterr().out == "quintessential\n"


def test_files_replace_default_dictionary(default_words, write_file, capsys):
    path = write_file("a.txt", "no match in this file")

    main(["speling", path])
    assert capsys.readouterr().out == "speling\n"


def test_exit_code_when_corrected(default_words, capsys):
    assert main(["--exit-code", "speling"]) == 1
    assert capsys.readouterr().out == "spelling\n"


def test_exit_code_when_not_corrected(default_words, capsys):
    assert main(["--exit-code", "spelling"]) == 0
    assert capsys.readouterr().out == "spelling\n"


def test_exit_code_only_when_corrected(default_words, capsys):
    assert main(["--exit-code-only", "speling"]) == 1
    assert capsys.readouterr().out == ""


def test_exit_code_only_when_not_corrected(default_words, capsys):
    assert main(["--exit-code-only", "spelling"]) == 0
    assert capsys.readouterr().out == ""


def test_exit_code_flags_are_exclusive(default_words):
    with pytest.raises(SystemExit) as exc_info:
        main(["--exit-code", "--exit-code-only", "speling"])
    assert exc_info.value.code == 2


def test_invalid_log_level(default_words, monkeypatch, capsys):
    monkeypatch.setenv("STAVA_LOG_LEVEL", "chatty")

    with pytest.raises(SystemExit) as exc_info:
        main(["speling"])

    assert exc_info.value.code == 2
    assert "Unknown log level" in capsys.readouterr().err


def test_undecodable_bytes_do_not_fail(tmp_path, capsys):
    path = tmp_path / "latin1.txt"
    path.write_bytes("spelling caf\xe9".encode("latin-1"))

    assert main(["speling", str(path)]) == 0
    assert capsys.readouterr().out == "spelling\n"


def test_verbose_keeps_stdout_clean(default_words, capsys):
    assert main(["--verbose", "speling"]) == 0
    assert capsys.readouterr().out == "spelling\n"


def test_invalid_encoding(write_file, monkeypatch, capsys):
    path = write_file("a.txt", "spelling")
    monkeypatch.setenv("STAVA_ENCODING", "no-such-codec")

    with pytest.raises(SystemExit) as exc_info:
        main(["speling", path])

    assert exc_info.value.code == 2
    assert "Unknown encoding" in capsys.readouterr().err
