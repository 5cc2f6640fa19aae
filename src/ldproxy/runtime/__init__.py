"""Pipeline wiring and linker execution."""
