"""Generic helpers for working with filesystems."""
