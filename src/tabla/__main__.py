"""Allow ``python -m tabla``."""

from .cli.commands import main

if __name__ == "__main__":
    main()
