"""Entry point module for executing questbot as a Python module.

This module enables running questbot via `python -m questbot`, which
delegates to the CLI main function.
"""

from questbot.cli import main

if __name__ == "__main__":
    main()
