"""Filesystem and environment lookups: target dir, build output, linker."""
