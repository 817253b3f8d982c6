"""Allow ``python -m randclass``."""

from randclass.cli import cli

if __name__ == "__main__":
    cli(prog_name="randclass")
