"""Allow ``python -m mdreader``."""

from mdreader.cli.main import main

if __name__ == "__main__":
    main()
