"""
scicalc CLI Package.

- expr.py: expression commands (eval, tokens, parse, functions)
- utils.py: version banner, logging and configuration helpers
"""

import typer

from scicalc.cli.expr import eval_command, functions_command, parse_command, tokens_command
from scicalc.cli.utils import version_callback

app = typer.Typer(
    help="""scicalc – scientific expression evaluator

Examples:
  scicalc eval "2 + 3 * 4"
  scicalc eval "sin(30)" --degrees
  scicalc tokens "pow(2, 10)"
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """scicalc CLI main callback for global options."""
    pass


app.command(name="eval")(eval_command)
app.command(name="tokens")(tokens_command)
app.command(name="parse")(parse_command)
app.command(name="functions")(functions_command)


def main() -> None:
    app(standalone_mode=True)


__all__ = ["app", "main"]
