"""Allow running as `python -m whichx`."""

from whichx.cli import main

if __name__ == "__main__":
    main()
