# binwrapper

Helpers for shipping command line tools as local dependencies of a Python
project. You describe where a tool can be downloaded for each operating
system and architecture; `binwrapper` tells you which of those downloads fits
the running machine, and unpacks a downloaded `.zip`, `.tar.gz` or `.tgz`
archive safely into a destination directory.

## Installation

```
pip install binwrapper
```

## Choosing a source: `binwrapper.selection`

```python
from binwrapper.selection import Source, select_source

base = "https://downloads.example.com/releases/tool/"

sources = [
    Source(url=base + "tool-mac.tar.gz", os="darwin"),
    Source(url=base + "tool-linux-x86.tar.gz", os="linux", arch="x86"),
    Source(url=base + "tool-linux-x64.tar.gz", os="linux", arch="x64"),
    Source(url=base + "tool-windows-x64.zip", os="win32", arch="x64",
           exec_path="tool.exe"),
]

chosen = select_source(sources)
if chosen is None:
    raise SystemExit("no download for this system")
print(chosen.url)
```

- `Source` is a dataclass with the fields `url`, `os`, `arch` and
  `exec_path`, all strings that default to empty.
- `Source.matches(platforms, arches)` is true when the source's `os` is one of
  `platforms` and its `arch` one of `arches`. An empty `os` or `arch` matches
  anything, so a source with both empty matches every system.
- `current_platforms(system=None, machine=None)` returns the names a source's
  `os` may use for this system. `system` defaults to `platform.system()` and is
  lower-cased; `win32` and `cygwin` count as `windows`, and on Windows `win32`
  is accepted as well. `machine` is accepted but does not change the result.
- `current_arches(machine=None)` returns the names a source's `arch` may use.
  `machine` defaults to `platform.machine()`; common machine names are
  normalised to `amd64`, `386`, `arm64` or `arm`, and the aliases `x64` (for
  `amd64`) and `x86` (for `386`) are added.
- `select_source(sources, platforms=None, arches=None)` returns the first
  matching source in the given order, or `None`. Without `platforms` and
  `arches` it uses the two functions above.

## Unpacking: `binwrapper.archive`

```python
from binwrapper.archive import extract_archive, strip_dirs

extract_archive("bin/tool/tool-linux-x64.tar.gz", "bin/tool")
strip_dirs("bin/tool", 2)
```

- `extract_archive(file, dest)` picks the format by the file name: `.zip` goes
  to `unzip`, `.tar.gz` and `.tgz` to `untar`; any other name raises
  `ArchiveError("unsupported archive format: ...")`. The archive file is
  removed afterwards, whether extraction succeeded or not.
- `unzip(src, dest)` extracts every entry, creating directories as needed and
  applying the permission bits stored in the archive.
- `untar(src, dest)` reads plain or compressed tar files and extracts
  directories and regular files, with their permission bits; other entry types
  (links, devices) are skipped.
- A file that cannot be read as the expected archive raises `ArchiveError`.
  An entry whose path would land outside `dest` raises `UnsafePathError`, a
  subclass of `ArchiveError`.
- `strip_dirs(dest, count)` descends `count` times into the first
  subdirectory (in name order) starting from `dest`, moves everything found at
  that depth up into `dest`, and removes the directories passed through below
  the first level. With `count` of 1 the emptied top-level directory is left
  in place.

## What this package does not do

It does not download files and does not start, time or kill executables:
fetching the chosen `Source.url` and running the unpacked tool are left to the
calling code (for example `urllib.request` and `subprocess`).

## Running the tests

```
pip install -e ".[test]"
pytest
```