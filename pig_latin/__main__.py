"""Package entry point for ``python -m pig_latin``.

Delegates to the CLI's main() function.
"""

from pig_latin.cli import main

if __name__ == "__main__":
    main()
