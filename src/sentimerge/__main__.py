"""Allow ``python -m sentimerge``."""

from sentimerge.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
