"""Allow ``python -m layered_scaffold``."""

from layered_scaffold.cli import main

main()
