"""Allow ``python -m waextractor``."""

from waextractor.cli.main import app

if __name__ == "__main__":
    app()
