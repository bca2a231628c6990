# chainup

Building blocks for a toolchain manager: persistent settings with
per-directory overrides, a typed error hierarchy, user-facing
notifications, environment helpers for child processes, a terminal
wrapper that stays quiet when output is not a TTY, and disk IO executors
for unpacking many files quickly.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Overview

- `chainup.settings`: `Settings` holds the metadata version (`"2"` and
  `"12"` are accepted, `"12"` is the default), the default host triple,
  the default toolchain and the directory overrides. `Settings.parse` and
  `Settings.stringify` read and write the TOML form; `from_toml` and
  `to_toml` work on tables. `add_override`, `remove_override` and
  `dir_override` key overrides by the resolved path when it exists.
  `SettingsFile` caches one settings file on disk and creates it with
  defaults if it is missing; `read()` returns a copy of the current
  settings and `edit()` is a context manager that writes them back when
  the block finishes without an exception.
- `chainup.errors`: `ToolchainError` and its subclasses, one for each
  failure, such as `ToolchainNotInstalledError`,
  `UnknownMetadataVersionError` or `BinaryNotFoundError`. `install_msg`
  gives the hint that tells the user how to install a missing binary.
- `chainup.notifications`: `Notification` pairs a `NotificationKind` with
  its values; `str()` gives the message and `level()` its
  `NotificationLevel`.
- `chainup.tools`: `TOOLS` and `DUP_TOOLS` list the proxied binaries, and
  `component_for_bin` maps a binary name to the component that provides it.
- `chainup.env_var`: `prepend_path`, `append_path` and `inc` set variables
  in an environment mapping meant for a child process, starting from the
  current process environment.
- `chainup.command`: `Command` describes a program, its arguments and
  extra environment variables. `run_command_for_dir` appends arguments and
  runs it: on POSIX it replaces the current process, on Windows it waits
  and returns the exit code. Failure to start raises `RunningCommandError`.
- `chainup.terminal`: `stdout()` and `stderr()` return an
  `AutomationFriendlyTerminal`, which emits `Color` and `Attr` sequences
  only to a TTY and ignores capabilities the terminal (from `TERM`) lacks.
- `chainup.diskio`: `core.Item` describes a directory to make or a file to
  write; after it runs, `error` holds any `OSError` and `ok` tells whether
  it succeeded. `immediate.ImmediateUnpacker` performs items at once;
  `threaded.Threaded` uses a pool of worker threads and can report
  `ProgressEvent`s while joining. `factory.get_executor` picks one from
  the `RUSTUP_IO_THREADS` environment variable: `disabled` for the
  immediate executor, a number for the pool size, otherwise the default
  pool.

## Example

```python
from pathlib import Path
from chainup.settings import SettingsFile

settings_file = SettingsFile(Path("settings.toml"))
with settings_file.edit() as settings:
    settings.default_toolchain = "stable"
print(settings_file.read().default_toolchain)
```

```python
from pathlib import Path
from chainup.diskio.core import Item
from chainup.diskio.factory import get_executor

executor = get_executor(None)
for done in executor.execute(Item.write_file(Path("out.txt"), b"hello", 0o644)):
    print(done.full_path, done.ok)
for done in executor.join():
    print(done.full_path, done.ok)
if hasattr(executor, "close"):
    executor.close()
```

## What it does not do

The package has no command-line program. It does not download,
install, update or remove toolchains or components, does not read
channel manifests, and does not resolve which toolchain applies to a
directory beyond looking up the stored overrides.