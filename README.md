# pipex

`pipex` runs a sequence of commands joined by pipes, the way a shell would
run `< infile cmd1 | cmd2 | ... | cmdN > outfile`.

## Installation

```
pip install .
```

## Usage

Read from a file, write to a file (truncating it):

```
pipex infile "grep hello" "wc -l" outfile
```

This behaves like `< infile grep hello | wc -l > outfile`. Any number of
commands (at least two) may be given between the input and output files. The
output file is created with mode 0644 if it does not exist.

Read from a here-document and append to the output file:

```
pipex here_doc LIMITER "cat" "tr a-z A-Z" outfile
```

Lines are read from standard input until a line equal to `LIMITER` (or the end
of input). They are appended to a file named `here_doc` in the current
directory, which is then read by the first command and removed when the
pipeline is done. The last command's output is appended to `outfile`, like
`cmd1 << LIMITER | cmd2 >> outfile`.

### Command words

Each command is split on plain spaces. A word that starts with a single or
double quote and has a matching closing quote later on is taken as the text
between the quotes, spaces included, so `"awk '{print $1}'"` gives the words
`awk` and `{print $1}`. An unmatched quote is an ordinary character.

A command name that is itself an executable path is run as given; otherwise it
is looked up, in order, in the directories listed in `PATH`.

### Errors and exit status

The exit status is that of the last command.

- Fewer arguments than required gives 127, without running anything.
- A command that cannot be found is reported on standard error as
  `command not found: NAME`; if it is the last command, the status is 127.
- An input file that cannot be opened is reported as `pipex: input: ...`; the
  first command is not started and the next command reads empty input.
- An output file that cannot be opened is reported the same way, and the
  status is 1.

## Library use

```python
import os
from pipex.pipeline import Command, parse_args, run
from pipex.split import split_shell, count_words
from pipex.resolve import resolve_command, search_path
from pipex.heredoc import read_heredoc, write_heredoc

split_shell("grep 'a b' file")          # ['grep', 'a b', 'file']
search_path({"PATH": "/bin:/usr/bin"})   # ['/bin', '/usr/bin']
resolve_command("ls", os.environ)        # e.g. '/bin/ls', or None

Command.from_text("wc -l", os.environ)  # Command(argv=('wc', '-l'), path=...)

invocation = parse_args(["infile", "cat", "wc -l", "outfile"])
status = run(invocation, os.environ)
```

`parse_args` raises `pipex.pipeline.UsageError` when the arguments do not
describe a pipeline. `run` takes an optional text stream to read a
here-document from; it defaults to standard input. `main(argv=None)` is the
command-line entry point and returns the exit status.

## What it does not do

Command strings are only split into words; there is no other shell syntax.
Redirections, variable expansion, globbing, backslash escapes and `|` inside a
command string are passed through to the command as plain text.

## Running the tests

```
pip install ".[test]"
pytest
```