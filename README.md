# pipex

`pipex` does the work of the shell construct

```sh
< file1 cmd1 | cmd2 > file2
```

It feeds `file1` to the standard input of `cmd1`. It passes the output
of `cmd1` to `cmd2` and writes the output of `cmd2` to `file2`. The
output file is created with mode `0644` if it does not exist. If it does
exist, it is truncated.

The two stages run one after the other. `cmd1` runs to completion first.
Its output is held in memory and then handed to `cmd2` as input.

## Installation

```sh
pip install .
```

## Usage

```sh
pipex file1 cmd1 cmd2 file2
```

Each command is split on spaces into a program name and its arguments.
Quoting is not interpreted.

- A name holding a `/` is used as a path as it stands.
- Any other name is looked up in the directories listed in `PATH`. The
  search starts from the first `/` in the variable's value.

Examples:

```sh
pipex input.txt "grep hello" "wc -l" output.txt
pipex input.txt "cat" "/usr/bin/sort -r" sorted.txt
```

If it is called with any number of arguments other than four, `pipex`
prints `./pipex file1 cmd1 cmd2 file2` to standard error and exits with
status 1.

### Errors and exit status

All messages go to standard error.

If the first stage fails, the failure is reported and `cmd2` still runs,
reading empty input. The first stage fails when the input file cannot be
opened or when `cmd1` cannot be found or started. The messages are:

- `no such file or directory: file1`
- `Permission Denied: file1`

If the second stage fails, `pipex` stops with an error status:

| Situation | Message | Exit status |
| --- | --- | --- |
| The output file cannot be opened | `permission denied: file2` or `no such file or directory: file2` | 1 |
| A command given by path does not exist | `no such file or directory: <path>` | 127 |
| A command given by path is not executable | `permission denied: <path>` | 126 |
| A command is not found in `PATH` | `command not found: <name>` | 127 |

A match in `PATH` may exist but not be executable. Such a match is
reported as `permission denied: <dir>/<name>`, and the search goes on to
the next directory.

Otherwise the exit status of `pipex` is the exit status of `cmd2`. If
`cmd2` is killed by a signal, the status is 128 plus the signal number.

## Library use

The same steps are available from Python:

```python
import os
from pipex.cli import run_pipeline
from pipex.command import prepare_command, resolve_executable

status = run_pipeline("input.txt", "grep hello", "wc -l", "output.txt", dict(os.environ))
path, argv = prepare_command("ls -l", dict(os.environ))
ls_path = resolve_executable("ls", dict(os.environ))
```

- `pipex.cli` provides the pipeline itself:
  - `run_pipeline` returns the exit status of the second command.
  - `main` is the command-line entry point.
  - `open_input` and `open_output` open the pipeline's files. They raise
    `PipelineError` when a file cannot be opened.
- `pipex.command` prepares commands:
  - `parse_command` splits a command line into words.
  - `search_paths` lists the `PATH` directories.
  - `resolve_executable` searches those directories.
  - `prepare_command` returns the executable path together with the
    argument list.
  - Failures raise `CommandNotFoundError` or `CommandPermissionError`.
    Both are subclasses of `CommandError`, which carries an
    `exit_status`.
- `pipex.text` holds small string helpers. Among them are `split`,
  `trim`, `substr`, `atoi`, `itoa` and ASCII character tests such as
  `is_alpha` and `to_upper`.

## Tests

```sh
pip install ".[test]"
pytest
```