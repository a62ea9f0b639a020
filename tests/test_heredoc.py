import io
import os

from pipex.heredoc import read_heredoc, write_heredoc


def test_read_stops_at_limiter():
    stream = io.StringIO("alpha\nbeta\nEOF\ngamma\n")
    assert read_heredoc("EOF", stream) == "alpha\nbeta\n"


def test_read_leaves_rest_of_stream():
    stream = io.StringIO("alpha\nEOF\ngamma\n")
    read_heredoc("EOF", stream)
    assert stream.read() == "gamma\n"


def test_limiter_must_match_whole_line():
    stream = io.StringIO("EOFX\n EOF\nEOF\n")
    assert read_heredoc("EOF", stream) == "EOFX\n EOF\n"


def test_end_of_stream_without_limiter_returns_everything():
    stream = io.StringIO("one\ntwo")
    assert read_heredoc("EOF", stream) == "one\ntwo\n"


def test_immediate_limiter_gives_empty_text():
    assert read_heredoc("stop", io.StringIO("stop\nmore\n")) == ""


def test_write_creates_file(tmp_path):
    target = tmp_path / "here_doc"
    result = write_heredoc("END", io.StringIO("line\nEND\n"), target)
    assert result == target
    assert target.read_text() == "line\n"


def test_write_appends_to_existing_file(tmp_path):
    target = tmp_path / "here_doc"
    target.write_text("old\n")
    write_heredoc("END", io.StringIO("new\nEND\n"), os.fspath(target))
    assert target.read_text() == "old\nnew\n"