"""Package entry point for ``python -m swear_killer``.

HOW: Delegates to the CLI's main() function.
"""

from swear_killer.cli import main

if __name__ == "__main__":
    main()
