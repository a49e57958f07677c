"""Command-line entry points for loom-tooling."""
