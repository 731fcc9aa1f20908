"""Module entrypoint for ``python -m lz``.

All argument parsing happens in ``lz.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
