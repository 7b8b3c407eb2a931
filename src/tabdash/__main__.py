"""Entry point: python -m tabdash"""

from tabdash.cli.main import main

if __name__ == "__main__":
    main()
