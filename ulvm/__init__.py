"""Version manager for Node.js releases and Rust toolchains."""

__version__ = "0.1.0"