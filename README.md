# pipechain

`pipechain` feeds a file through a chain of commands. Each command's
output becomes the next one's input, and the last command writes to an
output file. It does the same as the shell line

    < infile cmd1 | cmd2 | ... | cmdN > outfile

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Command line

    pipechain INFILE "CMD1 ARGS" "CMD2 ARGS" [... "CMDN ARGS"] OUTFILE

- You need at least two commands. With fewer arguments the command prints
  `Error : Number of args is invalid` to standard error and exits with 1.
- Each command string is split on spaces. Empty words are dropped. The
  first word is looked up in the directories listed in `PATH`.
- If the name is not found in any `PATH` directory, it is run as a file
  relative to the working directory. Such a command usually fails to
  start and prints an `execve: ...` message.
- The input file must be readable. The output file is created or
  truncated with mode `0644`. It is opened only after all commands except
  the last have been started.
- If a file cannot be opened, the command prints `<file>: <reason>` to
  standard error and exits with 1. An empty command string also ends the
  command with status 1.
- When the pipeline has run, the command prints to standard output, for
  each command, a blank line, the command name and the resolved path. It
  then exits with 0, whatever the commands themselves returned.

Example:

    pipechain input.txt "grep error" "wc -l" count.txt

## Library

### The pipeline

```python
import os
from pipechain.commands import create_commands
from pipechain.pipeline import run_pipeline

commands = create_commands(["sort", "uniq -c"], os.environ)
status = run_pipeline("words.txt", commands, "counts.txt", os.environ)
```

- `pipechain.paths.find_path(env, cmd)` resolves a command name against
  the `PATH` of `env`. `env` is either a mapping or a sequence of
  `"NAME=value"` strings. The result depends on what it finds:
  - `None` if `env` has no `PATH`;
  - the first executable `<dir>/<cmd>`;
  - `cmd` unchanged if no directory holds an executable of that name.

  `split_path(paths, cmd)` does the directory search on its own.
- `pipechain.commands.Command` is a dataclass. Its fields are `argv`,
  `path` and `pid`, and its `name` property is `argv[0]`.
  - `parse_command(spec, env)` builds one `Command` from a string. It
    raises `ValueError` if the string holds no words.
  - `create_commands(specs, env)` builds one `Command` for each string,
    in order.
  - `format_commands(commands)` returns the listing that the command line
    prints. A missing path shows as `(null)`.
- `pipechain.pipeline.run_pipeline(infile, commands, outfile, env=None)`
  runs the chain and waits for every process. If `env` is omitted, the
  current environment is used. It returns a status for the last command:
  - that command's exit status;
  - `127` if it could not be started;
  - `0` if it was ended by a signal.

  A command with no resolved path is not started.
- `pipechain.pipeline.PipexError` is raised when the pipeline cannot be
  set up: fewer than two commands, an unreadable input file, or an
  unwritable output file. Its `status` attribute holds the exit status
  to report, which is 1.
- `pipechain.pipeline.main(argv=None)` is the command-line entry point.
  It returns the exit status.

### Helpers

- `pipechain.chars` classifies and converts ASCII characters. Each
  function takes an int or a one-character string: `is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`,
  `to_lower`.
- `pipechain.strings` offers C-style string functions:
  - `strchr`, `strrchr` and `strnstr` return an index, or `None` when
    nothing is found.
  - `strncmp` returns a code-point difference.
  - `strlcpy(src, size)` and `strlcat(dst, src, size)` return the
    resulting text and the length a large enough destination would have
    needed.
  - `atoi(text)` parses a decimal integer.
  - `itoa(n)` formats a 32-bit signed integer and raises `OverflowError`
    outside that range.
- `pipechain.transform` builds new strings: `substr`, `strjoin`,
  `strtrim`, `split` (which drops empty words), `strmapi`. `striteri`
  calls a function on each item of a mutable sequence and replaces the
  item when the function returns a value other than `None`.
- `pipechain.memory` works on byte buffers: `memset`, `bzero`, `memcpy`,
  `memmove` (copies within one buffer by offsets), `memchr`, `memcmp`,
  `calloc`.
- `pipechain.output` writes to a file descriptor: `put_char`, `put_str`,
  `put_endl`, `put_nbr`.
- `pipechain.linked.LinkedList` is a singly linked list. It has
  `push_front`, `push_back`, `last`, `clear(delete=None)`, `for_each` and
  `map(func, delete=None)`, and supports `len()` and iteration.
- `pipechain.printf` formats text:
  - `sformat(fmt, *args)` returns the formatted text. It supports
    `%c %s %d %i %u %x %X %p %%`. Integers are reduced to 32 bits, and
    to 64 bits for `%p`. An unknown conversion prints nothing.
  - `printf(fmt, *args)` writes the text to standard output and returns
    its length.
- `pipechain.lines` reads lines:
  - `LineReader(fd, buffer_size=42)` reads lines from a file descriptor,
    newline included, through `read_line()` or iteration.
  - `get_next_line(fd)` returns one line per call. Every call shares one
    buffer of unread data, whichever descriptor it is made with.

## What it does not do

Command strings are split on spaces only. There is no quoting, escaping,
globbing, variable expansion or redirection inside a command. There is
no here-document input or appending to the output file. Commands are not
searched through `PATH` a second time when they are started.