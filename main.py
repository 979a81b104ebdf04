from cli.app import cli
from lambstock.config import PROG_NAME


def main():
    """Entry point for the lambstock CLI. Delegates to cli.app:cli."""
    cli(prog_name=PROG_NAME)


if __name__ == "__main__":
    main()
