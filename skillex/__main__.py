"""Entry point for `python -m skillex`."""
from skillex.cli import main

if __name__ == "__main__":
    main()
