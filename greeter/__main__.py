"""Allow ``python -m greeter <name>``."""

from .main import main

main()
