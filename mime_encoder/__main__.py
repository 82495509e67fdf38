"""Package entry point for ``python -m mime_encoder``.

Delegates to the CLI's main() function.
"""

from mime_encoder.cli import main

if __name__ == "__main__":
    main()
