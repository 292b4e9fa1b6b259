#!/usr/bin/env python3
"""Entry point for muxfs CLI when run as python -m muxfs.cli."""

if __name__ == "__main__":
    from muxfs.cli.main import main

    main()
