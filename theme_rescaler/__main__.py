"""Package entry point for ``python -m theme_rescaler``.

Delegates to the CLI's main() function.
"""

from theme_rescaler.cli import main

if __name__ == "__main__":
    main()
