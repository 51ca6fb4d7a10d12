"""Allow running as ``python -m todolist``."""

from todolist.cli.app import main

if __name__ == "__main__":
    main()
