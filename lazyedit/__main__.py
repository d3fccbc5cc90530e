"""Module entrypoint for ``python -m lazyedit``.

All argument parsing and runtime setup happen in ``lazyedit.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
