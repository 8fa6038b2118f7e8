"""Allows ``python -m liveapp_init init``."""

from liveapp_init.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
