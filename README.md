# winix

winix is a Python library of familiar Unix commands — `cat`, `grep`, `head`,
`echo`, `chmod`, `chown`, `kill`, `df`, `free` and a `git` wrapper — together
with a small ANSI escape-sequence tokenizer and a line editor with history.

## Installation

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Detaching a program

The package installs one command:

```
disown <command> [args...]
```

It starts the command with its standard input, output and error sent to the
null device (through `nohup` on Unix, as a detached process on Windows) and
prints `Process disowned (...)`. With no arguments it prints a usage line and
exits with status 1.

## Text tools

```python
from winix.cat import cat
from winix.grep import grep_sync
from winix.head import head_sync

print(cat(["notes.txt"]))                 # CRLF line endings become "\n"
print(grep_sync("hello", ["notes.txt"]))  # "notes.txt:1: hello world"
print(head_sync(["notes.txt"], 3))        # first three lines across the files
```

- `winix.cat`: `cat(files)`, `cat_async(files)`, `cat_async_to_string(files)`
  and `benchmark_cat_sync_vs_async(files)`, which returns the two timings in
  seconds.
- `winix.grep`: `grep_sync(pattern, files)`, `grep_async(pattern, files)` and
  `grep_async_to_string(pattern, files)`. Each match is written as
  `path:line_number: line`. An invalid regular expression raises `ValueError`.
- `winix.head`: `head_sync(files, lines)`, `head_async(files, lines)` and
  `head_async_to_string(files, lines)`.
- `winix.textops`: `grep_async_from_string(pattern, content)` keeps the lines
  that contain `pattern` literally, and `head_async_from_string(content, lines)`
  keeps the first `lines` lines of a string.

`cat_async`, `grep_async` and `head_async` are async generators that yield
UTF-8 `bytes` line by line, and read only the first file they are given. The
`*_async_to_string` variants gather that output into a string;
`cat_async_to_string` reads every file.

## ANSI parsing

`winix.ansi.parse(data)` turns a byte string into a list of events:
`PrintText(text)`, `SetColor("Red")`, `SetColor("Green")`, `ResetColor()` and
`ClearLine()`. Other escape sequences are dropped, and input that is not valid
UTF-8 gives an empty list.

```python
from winix.ansi import parse
parse(b"\x1b[31mRed\x1b[0m")  # [SetColor('Red'), PrintText('Red'), ResetColor()]
```

## Commands as functions

Each command takes its arguments as a list of strings and prints its result.

| Function | What it does |
|---|---|
| `winix.echo.run(args)` | print the words joined by spaces, without a newline |
| `winix.df.execute()` | total, available and used space of each mounted disk |
| `winix.free.execute()` | used and total memory and swap |
| `winix.chmod.execute(args)` | `MODE FILE...`, octal (`755`) or symbolic (`u+x,g-w`, `a=r`) |
| `winix.chown.execute(args)` | `[OWNER][:[GROUP]] FILE...` (needs a system with user and group databases) |
| `winix.kill.execute(args)` | stop processes by PID or name |
| `winix.git.execute(args)` | run the system `git`; with no arguments, show help |

Sizes are rendered by `winix.formatting.format_memory`, e.g. `"1.50 KB"`,
`"2.00 GB"` or `"512 bytes"`.

`winix.chmod` also offers `apply_mode(filename, mode)`,
`symbolic_to_octal(filename, mode)` and the `FilePermissions` dataclass; errors
raise `ChmodError`. `winix.chown` offers `parse_spec(mode)` and
`change_owner(filename, mode)`; errors raise `ChownError`.

### kill

```python
from winix.kill import execute

execute(["1234"])                      # force terminate process 1234
execute(["-TERM", "1234"])             # graceful terminate
execute(["-a", "notepad"])             # every process named notepad
execute(["-p", "notepad"])             # print the PID without killing
execute(["--timeout", "5000", "KILL", "-TERM", "1234"])
```

Supported signals are `INT` (2), `QUIT` (3), `KILL` (9, the default) and
`TERM` (15). PIDs 0, 4 and 8 and the current process are refused. Bad
arguments and failed kills raise `winix.killopts.KillError`. Argument parsing
alone is available as `winix.killopts.parse_arguments(args)` and
`validate_options(options)`.

### git

`winix.git` also has `interactive_mode()`, which reads git subcommands from
standard input until `exit` or `quit`, and the helpers `is_git_available()`,
`is_git_repo()`, `get_current_branch()` and `get_repo_status()` (`"clean"` or
`"dirty"`).

## Line input

`winix.input.LineEditor(history_path=".history.txt")` reads lines at a `>> `
prompt with `read_line()`. `add_history_entry(line)` stores a line, skipping
empty lines and immediate repeats, keeps the last 100 entries and saves them to
the history file.

## What is not included

There is no interactive shell program: nothing reads a command line and
dispatches it to the functions above, and there are no `cd`, `pwd`, `ls` or
`rm` commands. The package is used from Python, apart from the `disown`
command.