"""Command-line interface."""
from algopatterns.main import main

if __name__ == "__main__":
    raise SystemExit(main())
