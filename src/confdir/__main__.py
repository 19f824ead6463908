"""Allow ``python -m confdir``."""

from confdir.main import main

main()
