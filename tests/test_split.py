import pytest

from pipex.split import count_words, split_shell


def test_plain_words():
    assert split_shell("ls -l") == ["ls", "-l"]


def test_single_quoted_argument_keeps_spaces():
    assert split_shell("grep 'hello world'") == ["grep", "hello world"]


def test_double_quoted_argument_keeps_spaces():
    assert split_shell('awk "{print $1}"') == ["awk", "{print $1}"]


def test_unmatched_quote_is_ordinary_character():
    assert split_shell("echo 'abc") == ["echo", "'abc"]


def test_quote_after_word_start_is_kept_literally():
    assert split_shell("a'b c'") == ["a'b", "c'"]


def test_text_after_closing_quote_starts_new_word():
    assert split_shell("'ab'cd") == ["ab", "cd"]


def test_empty_quotes_give_empty_word():
    assert split_shell("''") == [""]


def test_other_quote_kind_inside_quotes():
    assert split_shell("""sed "s/'/x/" """) == ["sed", "s/'/x/"]


def test_empty_and_blank_input():
    assert split_shell("") == []
    assert split_shell("     ") == []


def test_only_space_separates():
    assert split_shell("a\tb") == ["a\tb"]


@pytest.mark.parametrize(
    "text",
    ["ls -l", "  cat   -e  ", "wc -l -c -w", "tr a-z A-Z", "x"],
)
def test_unquoted_input_matches_space_split(text):
    expected = [part for part in text.split(" ") if part]
    assert split_shell(text) == expected


@pytest.mark.parametrize(
    "text",
    ["ls -l", "  cat   -e  ", "wc -l -c -w", "tr a-z A-Z", "x", "", "   "],
)
def test_count_matches_split_without_quotes(text):
    assert count_words(text) == len(split_shell(text))


def test_count_of_blank_text_is_zero():
    assert count_words("    ") == 0
    assert count_words("") == 0


def test_repeated_spaces_do_not_change_result():
    assert split_shell("cat    -e") == split_shell("cat -e")
    assert count_words("cat    -e") == count_words("cat -e")