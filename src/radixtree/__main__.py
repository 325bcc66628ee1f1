"""Run the radix tree CLI with ``python -m radixtree``."""

from .cli import main

if __name__ == "__main__":
    main()
