# ulvm

`ulvm` is a small command-line version manager. It installs and switches
between Node.js releases, and wraps `rustup` to manage Rust toolchains. Everything
it owns lives under `~/.ulvm`.

## Installation

```sh
pip install .
```

This provides the `ulvm` command.

## Usage

```sh
ulvm --version       # prints "ULVM 0.1.0"
ulvm --help
```

Every command accepts `-v` / `--verbose` to print extra details while it runs.
When a command fails, the error is printed to standard error and `ulvm` exits
with status 1.

### Node.js

```sh
ulvm node list            # latest Current release and the latest release of each LTS line
ulvm node list --all      # every release in the index
ulvm node install v22.14.0
ulvm node use v22.14.0    # installs the version first if it is missing
ulvm node uninstall v22.14.0
ulvm node uninstall v22.14.0 --hard   # also delete the downloaded archive
```

Versions are written as they appear in the release index, with the leading `v`.
The listing shows version, release date, a status (`LTS`, `Current`, `EOF` or
`Inactive`) and the LTS codename; installed versions are highlighted.

`ulvm node install` downloads the release archive into `~/.ulvm/node/downloads`
(reusing it if already there) and unpacks it into
`~/.ulvm/node/versions/<version>`.

`ulvm node use` records the chosen version in `~/.ulvm/ulvm.toml` and points the
symlink `~/.ulvm/node/bin` at that version's `bin` directory. Add that directory
to your `PATH`:

```sh
export PATH="$HOME/.ulvm/node/bin:$PATH"
```

Uninstalling the version currently in use clears it from the configuration and
removes the symlink.

### Rust

```sh
ulvm rust install           # install rustup itself into ~/.ulvm/rust
ulvm rust install stable    # install a toolchain with rustup
ulvm rust list              # release tags of Rust, installed versions highlighted
ulvm rust use 1.86.0        # make a toolchain the default
ulvm rust uninstall 1.86.0
```

Installing rustup writes `~/.ulvm/rust/rust.env`, which sources cargo's `env`
file and sets `RUSTUP_HOME` and `CARGO_HOME` to the directories under
`~/.ulvm/rust`. Source it from your shell profile:

```sh
. "$HOME/.ulvm/rust/rust.env"
```

Installing rustup needs `sh` and `curl`; the other Rust commands need `rustup`
on your `PATH`.

## Layout

```
~/.ulvm/
├── ulvm.toml            # current selection, e.g. [node] version = "v22.14.0"
├── node/
│   ├── bin -> versions/<version>/bin
│   ├── downloads/       # release archives
│   └── versions/<version>/
└── rust/
    ├── rust.env
    ├── rustup/
    └── cargo/
```

## Limitations

- Only `.tar.gz` and `.zip` archives are unpacked. On Windows the Node.js
  archive name ends in `.7z`, which `ulvm node install` cannot unpack, so
  Node.js installation works on Linux and macOS only.
- `ulvm` does not install shims or switch versions per directory. `UlvmConfig.load`
  can read a `ulvm.toml` from the current directory, but no command uses it;
  the active Node.js version is the one set with `ulvm node use`.

## Development

```sh
pip install -e ".[test]"
pytest
```