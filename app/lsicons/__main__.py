"""Allow ``python -m lsicons`` invocation."""

from lsicons.cli.main import app

if __name__ == "__main__":
    app(prog_name="lsicons")
