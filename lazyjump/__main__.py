"""Module entrypoint for ``python -m lazyjump``."""

from .cli import main


if __name__ == "__main__":
    main()
