"""Module entrypoint for ``python -m dirtree``.

This keeps module-mode execution behavior identical to the CLI script.
All argument parsing and traversal setup happen in ``dirtree.cli``.
"""

from .cli import main


if __name__ == "__main__":
    raise SystemExit(main())
