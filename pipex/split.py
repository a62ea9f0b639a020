"""Split a command string into words the way the pipeline expects.

Words are separated by plain spaces only. A word that starts with a single
or double quote with a matching quote later on is taken as the text between
the two quotes, spaces included; an unmatched quote is an ordinary character.
"""

from __future__ import annotations

from collections.abc import Iterator

_QUOTES = ("'", '"')
_SEPARATOR = " "


def _closing_quote(text: str, pos: int) -> int:
    """Index of the quote closing the one at ``pos``, or -1 if there is none."""
    quote = text[pos]
    if quote not in _QUOTES:
        return -1
    return text.find(quote, pos + 1)


def _words(text: str) -> Iterator[str]:
    pos = 0
    length = len(text)
    while pos < length:
        closing = _closing_quote(text, pos)
        if closing != -1:
            yield text[pos + 1 : closing]
            pos = closing + 1
        elif text[pos] == _SEPARATOR:
            pos += 1
        else:
            end = text.find(_SEPARATOR, pos)
            if end == -1:
                end = length
            yield text[pos:end]
            pos = end


def split_shell(text: str) -> list[str]:
    """Split ``text`` into words, honouring matched single and double quotes."""
    return list(_words(text))


def count_words(text: str) -> int:
    """Count space-separated words in ``text``.

    When a word starts with a quote character, the run of identical quote
    characters that opens it is skipped together with the character that
    follows it.
    """
    count = 0
    in_word = False
    pos = 0
    length = len(text)
    while pos < length:
        char = text[pos]
        if char != _SEPARATOR:
            if not in_word:
                count += 1
                if char in _QUOTES:
                    run = 1
                    while pos + run < length and text[pos + run] == char:
                        run += 1
                    pos += run
            in_word = True
        else:
            in_word = False
        pos += 1
    return count