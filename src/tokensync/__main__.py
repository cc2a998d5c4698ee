"""Allow ``python -m tokensync``."""

from tokensync.cli import main

main()
