"""Entry point for 'python -m dynadocs' command."""

from dynadocs.cli import main

if __name__ == "__main__":
    main()
