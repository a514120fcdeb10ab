import io

import pytest

from turf.file_editor import file_editor, read_file


@pytest.fixture
def state_file(tmp_path):
    path = tmp_path / "save_state.txt"
    path.write_bytes(b"Hello World!")
    return path


def test_read_file(state_file):
    assert read_file(state_file) == "Hello World!"


def test_read_file_keeps_line_endings(tmp_path):
    path = tmp_path / "crlf.txt"
    path.write_bytes(b"a\r\nb")
    assert read_file(path) == "a\r\nb"


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "missing.txt")


def test_answer_no_leaves_file(state_file):
    out = io.StringIO()
    result = file_editor(state_file, io.StringIO("N\n"), out)
    assert result == "Hello World!"
    assert state_file.read_text() == "Hello World!"
    assert out.getvalue().startswith("The file contains :\nHello World!\nEdit file? (Y/N)\n")
    assert out.getvalue().endswith("Goodbye!\n")


def test_answer_yes_replaces_contents(state_file):
    out = io.StringIO()
    result = file_editor(state_file, io.StringIO("y\nnew text\n"), out)
    assert result == "new text\n"
    assert read_file(state_file) == "new text\n"
    assert f"Saving Contents to {state_file} \nnew text\n" in out.getvalue()
    assert "Enter new file contents below\n" in out.getvalue()


def test_other_answers_are_echoed_upper_case(state_file):
    out = io.StringIO()
    file_editor(state_file, io.StringIO("maybe\nn\n"), out)
    assert "You entered: MAYBE\n\n" in out.getvalue()
    assert state_file.read_text() == "Hello World!"


def test_end_of_input_raises(state_file):
    with pytest.raises(EOFError):
        file_editor(state_file, io.StringIO("what\n"), io.StringIO())


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        file_editor(tmp_path / "nope.txt", io.StringIO("N\n"), io.StringIO())