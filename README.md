# os_info

Find out which operating system is running. The package reports the type,
version, edition, codename, bitness and processor architecture. It has no
dependencies outside the standard library.

## Installation

```
pip install .
```

## Command line

The `os_info` command prints what it finds:

```
os_info            # print all information
os_info --all      # the same
os_info -t         # OS type only (--type)
os_info -v         # OS version only (--os-version)
os_info -b         # OS bitness only (--bitness)
os_info -A         # OS architecture only (--Arch)
os_info -V         # program version (--version)
```

You can combine `-t`, `-v`, `-b` and `-A`. Each selected field is printed on a
line of its own, such as `OS type: Ubuntu`. With no flags, or with `--all`, the
command prints a block that starts with `OS information:`. If `--all` is given
together with other flags, `--all` is used and a warning is logged. When the
architecture cannot be found, the command prints `unknown` in its place.

## Library

```python
from os_info.detect import get

info = get()
print(f"OS information: {info}")
print("Type:", info.os_type)
print("Version:", info.version)
print("Edition:", info.edition)
print("Codename:", info.codename)
print("Bitness:", info.bitness)
print("Architecture:", info.architecture)
```

`str(info)` gives a one-line summary such as `Ubuntu 18.10.0 [64-bit]`. The
version is left out when it is unknown. The edition and codename are added in
parentheses when they are known.

### Building blocks

- `os_info.info.Info`: a dataclass with the fields `os_type`, `version`,
  `edition`, `codename`, `bitness` and `architecture`. It also provides
  `Info.unknown()` and `Info.with_type(Type.Linux)`.
- `os_info.os_type.Type`: the known operating system types. `str()` gives the
  display name, for example `Mac OS` for `Type.Macos`.
- `os_info.version.Version`: one of four kinds, unknown, semantic, rolling or
  custom.
  - `Version.from_string("1.2.3")` gives a semantic version, an empty string
    gives an unknown version, and any other text gives a custom version.
  - `Version.rolling(date)` represents a rolling release.
  - `os_info.version.parse_version` parses `major[.minor[.patch]]` into a tuple.
- `os_info.bitness.Bitness`: `32-bit`, `64-bit` or `unknown bitness`.
  `os_info.bitness.get()` detects it using `getconf`, `sysctl`, `isainfo` or
  `prtconf`, depending on the platform.
- `os_info.matcher`: helpers that pull values out of release files and command
  output: `all_trimmed`, `prefixed_word`, `prefixed_version` and `key_value`.
- `os_info.system`: `uname(arg)` and `architecture()`, which runs `uname -m`.

### How detection works

`os_info.detect.get()` chooses a detector from `sys.platform`.

- **Linux** (`os_info.linux`): the distribution comes from `lsb_release -a`
  if that command can run (see `os_info.lsb_release`). Otherwise it comes from
  `/etc/os-release` and older distribution-specific release files (see
  `os_info.file_release`). `os_info.file_release.retrieve(root)` reads the
  release files below any root directory.
- **macOS** (`os_info.macos`): the version comes from `sw_vers`.
- **Windows** (`os_info.windows`):
  - The version comes from `sys.getwindowsversion()`.
  - The edition comes from the registry, or from the version information if
    the registry cannot be read.
  - The architecture comes from the `PROCESSOR_ARCHITECTURE` environment
    variables.
- **AIX, FreeBSD, MidnightBSD, HardenedBSD, DragonFly BSD, NetBSD, OpenBSD,
  illumos, Android, Emscripten and Redox** (`os_info.unix`): the information
  comes from `uname` and related commands.

Any other platform gives `Info.unknown()`.

## Limitations

- On Windows the package has no way to query the Server 2003 R2 system metric.
  Version 5.2 systems are therefore never reported as R2.
- On Android, Emscripten and Redox the result carries no bitness.
- Architecture is only reported on Linux, macOS, NetBSD, OpenBSD and Windows.

## Tests

```
pip install .[test]
pytest
```