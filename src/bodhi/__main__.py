"""Allow ``python -m bodhi``."""

from bodhi.cli import main

if __name__ == "__main__":
    main()
