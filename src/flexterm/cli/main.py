"""CLI entry point for flexterm."""


def main() -> None:
    """Main CLI entry point."""
    from flexterm.cli.app import create_app
    app = create_app()
    app()


if __name__ == "__main__":
    main()
