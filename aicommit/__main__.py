"""Allow `python -m aicommit`."""

from aicommit.cli.main import run

if __name__ == "__main__":
    run()
