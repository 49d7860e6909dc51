# rokit

Building blocks of a toolchain manager for Roblox projects. The package works
out which release artifact suits the machine you are on, unpacks the tool's
binary from it, marks link executables with a small version trailer, and keeps
provider tokens in an `auth.toml` file.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

- `rokit.targets`: the `OS`, `Arch` and `Toolchain` enums. `detect()` finds a
  platform in a name such as `lune-0.8.6-macos-aarch64.zip` and returns `None`
  when it finds none. `current_system()` describes the host. Also provides
  `is_word_separator` and `split_words`.
- `rokit.executable`: `parse_executable` reads ELF, Mach-O and PE headers and
  returns an `(OS, Arch)` pair, or `None`. `detect_os_from_executable` and
  `detect_arch_from_executable` return one half of that pair.
- `rokit.descriptor`: `Descriptor` joins an OS, an optional architecture and an
  optional toolchain. `Descriptor.detect` returns `None` when no OS is found.
  `Descriptor.parse` raises `DescriptionParseError` instead. `is_compatible_with`
  accepts an exact match. It also lets 64-bit Windows and Linux run x86, and lets
  Apple Silicon macOS run x64. `sort_by_preferred_compat` is a three-way
  comparison that ranks candidates.
- `rokit.formats`: `ArtifactFormat` covers `tar.gz`, `tar`, `zip` and `gz`,
  listed in order of preference. It has `from_extensions`, `from_path_or_url`
  and `parse`. `split_filename_and_extensions` splits off at most two known
  archive extensions.
- `rokit.providers`: `ArtifactProvider`, which currently holds only `GITHUB`.
- `rokit.decompression`: `decompress_gzip`.
- `rokit.extraction`: `extract_zip_file` and `extract_tar_file` pick the best
  matching entry for a binary name, using `find_best_candidate` and `Candidate`.
  They return its bytes, or `None` when no entry matches. On Windows, `.exe` is
  added to the name first.
- `rokit.artifact`: `Artifact` and `Release`.
  - `Artifact.sort_by_system_compatibility` keeps the artifacts that can run here
    and puts the best first.
  - `Artifact.find_partially_compatible_fallback` accepts any artifact for the
    same OS.
  - `Artifact.extract_contents` unpacks the tool's binary. It raises an error if
    the binary was built for another OS.
- `rokit.sorting`: the tie-break comparisons used when ranking artifacts:
  `count_non_tool_mentions`, `sort_preferred_artifact` and
  `sort_preferred_formats`.
- `rokit.metadata`: `LinkMetadata`, a versioned trailer.
  `LinkMetadata.append_to` adds it to the end of executable contents, and
  `LinkMetadata.parse_from` reads it back.
- `rokit.auth_manifest`: `AuthManifest`, an `auth.toml` of provider tokens. It
  keeps comments and layout when edited. It has `load`, `load_or_create`, `save`,
  `has_token`, `get_token`, `get_all_tokens`, `set_token` and `unset_token`.
- `rokit.errors`: `RokitError` and its subclasses.
  - `HomeNotFoundError` and `MissingFileError`.
  - The extraction errors: `ExtractError`, `UnknownFormatError`,
    `FileMissingError`, `OSMismatchError` and `GenericExtractError`.

## Example

```python
from rokit.descriptor import Descriptor
from rokit.targets import OS, Arch

desc = Descriptor.detect("lune-0.8.6-macos-aarch64.zip")
assert desc.os is OS.MACOS
assert desc.arch is Arch.ARM64

from rokit.auth_manifest import AuthManifest
from rokit.providers import ArtifactProvider

manifest = AuthManifest.default()
manifest.set_token(ArtifactProvider.GITHUB, "token")
print(manifest.get_token(ArtifactProvider.GITHUB))
```

## What it does not do

This is a library only. It has no command-line program, and it makes no network
requests. It cannot fetch releases or download artifacts: you build the
`Artifact` and `Release` objects yourself and pass in the downloaded bytes. It
does not read project tool manifests. It does not manage a home directory of
installed tools, trusted tools or link executables. The only file it reads and
writes is `auth.toml`.