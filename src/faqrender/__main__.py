"""Entry point for `python -m faqrender` and `faqrender` CLI."""

from faqrender.cli.app import app


def main() -> None:
    app()


if __name__ == "__main__":
    main()
