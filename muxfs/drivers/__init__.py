"""Filesystem drivers: the multiplexer and the backends it can mount."""
