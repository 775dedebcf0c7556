"""Main CLI application entry point.

Defines the Typer application: ``lsicons [PATH]``.
"""

from typing import Annotated

import typer

from lsicons.listing.renderer import render
from lsicons.listing.scanner import DirectoryOpenError, DirectoryScanner
from lsicons.utils.formatting import print_error

app = typer.Typer(
    name="lsicons",
    help="List a directory with an icon for each entry type.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.command(
    context_settings={
        "help_option_names": ["-h", "--help"],
        # Arguments after PATH are ignored
        "allow_extra_args": True,
    },
)
def main(
    path: Annotated[
        str,
        typer.Argument(help="Directory to list."),
    ] = ".",
) -> None:
    """List the entries of PATH, directories first, then everything else.

    Symbolic links are shown with their target. Entries that cannot be
    read are still listed, with a question-mark icon.

    Put -- before a PATH that starts with a dash.
    """
    scanner = DirectoryScanner(path)

    # Collect everything before printing so an open failure leaves stdout empty
    try:
        entries = list(scanner.scan())
    except DirectoryOpenError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    render(entries)


if __name__ == "__main__":
    app()
