"""Main CLI application using Cyclopts.

The CLI opens the durable store directly; there is no server process.
"""

import cyclopts

from blogstore.cli.commands import db, show
from blogstore.config import Config, configure_logging

app = cyclopts.App(
    name="blogstore",
    help="blogstore - durable post store",
)

app.command(db.app, name="db")
app.command(show.app, name="show")


def main() -> None:
    configure_logging(Config().logging)  # type: ignore[call-arg]
    app()


if __name__ == "__main__":
    main()
