"""Argument parsing: response files, control flags, build-script directives."""
