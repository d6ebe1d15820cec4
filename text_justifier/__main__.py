"""Package entry point for ``python -m text_justifier``.

Delegates to the CLI's main().
"""

from text_justifier.cli import main

if __name__ == "__main__":
    main()
