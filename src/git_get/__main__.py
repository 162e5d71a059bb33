"""Allow `python -m git_get`."""

from git_get.cli.app import run

if __name__ == "__main__":
    run()
