"""Entry point for ``python -m cloudctl``."""

from cloudctl.cli import main

if __name__ == "__main__":
    main()
