"""Allow ``python -m todotxt``."""

from todotxt.cli import main

main()
