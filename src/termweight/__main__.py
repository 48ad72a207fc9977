"""Allow running termweight as ``python -m termweight``."""

from termweight.cli import app

if __name__ == "__main__":
    app()
