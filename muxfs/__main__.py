"""Entry point for running muxfs as a module (python -m muxfs)."""

from __future__ import annotations


def main() -> None:
    """Main entry point for module execution."""
    from muxfs.cli import main as cli_main

    cli_main()


if __name__ == "__main__":
    main()
