"""Dev server launcher."""


def main() -> None:
    """Run the assessment service with reload enabled for local env."""
    from learning_patterns.main import run

    run()


if __name__ == "__main__":
    main()
