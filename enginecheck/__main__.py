"""Allow ``python -m enginecheck``."""

from enginecheck.main import main

main()
