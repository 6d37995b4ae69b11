"""Rust toolchain management through rustup."""