"""Allow ``python -m tokenline``."""

from tokenline.cli import main

main()
