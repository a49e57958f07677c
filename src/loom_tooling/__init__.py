"""LoomSDK build tooling: target/toolchain flag resolution, preflight checks, filesystem helpers."""

__version__ = "0.1.0"
