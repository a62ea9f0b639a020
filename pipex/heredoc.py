"""Collect here-document input up to a limiter line."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TextIO

_HEREDOC_MODE = 0o644


def read_heredoc(limiter: str, stream: TextIO) -> str:
    """Read lines from ``stream`` until one equals ``limiter``.

    The limiter line is consumed but not included. Every line kept ends with
    a newline. If the stream ends before the limiter, everything read so far
    is returned.
    """
    collected = []
    for line in iter(stream.readline, ""):
        text = line[:-1] if line.endswith("\n") else line
        if text == limiter:
            break
        collected.append(text + "\n")
    return "".join(collected)


def write_heredoc(limiter: str, stream: TextIO, path: str | os.PathLike[str]) -> Path:
    """Append the here-document read from ``stream`` to the file at ``path``.

    The file is created with mode 0644 if it does not exist yet.
    """
    content = read_heredoc(limiter, stream)
    fd = os.open(path, os.O_CREAT | os.O_WRONLY | os.O_APPEND, _HEREDOC_MODE)
    with open(fd, "a", encoding="utf-8") as target:
        target.write(content)
    return Path(path)