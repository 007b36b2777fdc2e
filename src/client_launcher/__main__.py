"""Module entry point for `python -m client_launcher`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
