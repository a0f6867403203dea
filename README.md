# pipechain

`pipechain` feeds a file through a chain of commands and writes what the last
command prints to another file. It does the same as this shell line:

```
< infile cmd1 | cmd2 | ... | cmdN > outfile
```

## Installation

```
pip install .
```

## Command line

```
pipechain infile "cmd1 args" "cmd2 args" [...] outfile
```

The same entry point can also be run as `python -m pipechain.pipeline`.

You must give at least two commands, so at least four arguments in all. With
fewer, the program prints `Error: You don't have enough arguments` and exits
with status 1.

Each command is split on spaces. Empty words are dropped, and quotes and
backslashes have no special meaning. The first word is looked up in the
directories listed in `PATH`, and the first `<directory>/<name>` that exists is
run. The output file is created if it does not exist and truncated if it does.
It is opened with mode `0644`, which the umask then reduces.

When a command cannot be found, `command not found : <name>` is written to
standard error. An empty command is reported as `""`. The rest of the chain
still runs, and the next command reads empty input. A command that is found but
cannot be started is reported as `execve error.: <reason>`.

The run stops with exit status 1 and one of these messages:

- `Error: No path found` when the environment has no `PATH`.
- `Error: infile isn't open` when the input file cannot be opened.
- `Error: outfile isn't open` when the output file cannot be opened.

In every other case the exit status is 0, even when a command fails or is not
found.

Example:

```
pipechain input.txt "grep error" "wc -l" count.txt
```

## Library

```python
from pipechain.pipeline import run_pipeline, PipexError
from pipechain.resolve import path_directories, find_command

dirs = path_directories({"PATH": "/usr/bin:/bin"})
print(find_command("ls", dirs))  # e.g. "/usr/bin/ls", or None

statuses = run_pipeline(
    "input.txt", ["sort", "uniq -c"], "out.txt", {"PATH": "/usr/bin:/bin"}
)
```

- `run_pipeline(infile, commands, outfile, environ=None)` returns the exit
  status of each stage. A stage whose command could not be found or started
  counts as status 1. When `environ` is omitted, the process environment is
  used both for looking up commands and for running them. The function raises
  `PipexError`, which has `message` and `status` attributes, when there are no
  commands, when `PATH` is missing, or when either file cannot be opened.
- `path_directories(environ)` returns the non-empty entries of `PATH`. It
  raises `PathNotFoundError` when `PATH` is absent.
- `find_command(name, directories)` returns the first existing
  `<directory>/<name>`, or `None`.

The package also provides some small helpers:

- `pipechain.strings`: `atoi`, `itoa`, `split`, `strjoin`, `substr`,
  `strtrim`, `strncmp`, `strnstr`, `strchr`, `strrchr`, `strlcpy`, `strlcat`,
  `strmapi` and `striteri`. The search functions return an index or `None`.
  `strlcpy` and `strlcat` return the resulting text together with the length
  they tried to create.
- `pipechain.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_lower` and `to_upper` for ASCII. They accept a
  one-character string or an integer code.
- `pipechain.memory`: `memset`, `bzero`, `calloc`, `memcpy`, `memmove`,
  `memchr` and `memcmp`, which work on `bytearray` and `bytes`.
- `pipechain.linkedlist`: `Node` and `LinkedList`. `LinkedList` provides
  `push_front`, `push_back`, `last`, `clear`, `for_each` and `map`, and
  supports `len()` and iteration.
- `pipechain.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`. They
  write to a text stream, which is standard output by default.

## What it does not do

`pipechain` is not a shell. It has no quoting, variable expansion,
globbing, here-documents or append mode. Commands are found only through
`PATH`, so names that contain a slash are not treated as paths.

## Tests

```
pip install ".[test]"
pytest
```