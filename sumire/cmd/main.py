import typer

from sumire.config import load_config
from sumire.exceptions import EvaluationError, SumireError
from sumire.helper import Reporter
from sumire.interpreter import evaluate
from sumire.logging_utils import setup_logging
from sumire.node import to_string
from sumire.parse import parse
from sumire.tokenize import tokenize

app = typer.Typer(help="Inspect how a single expression is scanned, parsed and evaluated.")


@app.callback()
def configure():
    setup_logging(load_config().log_level)


def echo_diagnostics(reporter: Reporter) -> None:
    for diagnostic in reporter.diagnostics:
        typer.echo(str(diagnostic), err=True)


@app.command()
def tokens(expression: str):
    """Print one token per line."""
    reporter = Reporter()
    for token in tokenize(expression, reporter):
        typer.echo(str(token))
    echo_diagnostics(reporter)
    if reporter.had_error:
        raise typer.Exit(code=SumireError.exit_code)


@app.command()
def ast(expression: str):
    """Print the fully parenthesized expression tree."""
    reporter = Reporter()
    try:
        node = parse(tokenize(expression, reporter), reporter)
    except SumireError as error:
        echo_diagnostics(reporter)
        raise typer.Exit(code=error.exit_code)
    echo_diagnostics(reporter)
    typer.echo(to_string(node))
    if reporter.had_error:
        raise typer.Exit(code=SumireError.exit_code)


@app.command(name="eval")
def eval_command(expression: str):
    """Print the value of the expression."""
    reporter = Reporter()
    try:
        value = evaluate(parse(tokenize(expression, reporter), reporter))
    except SumireError as error:
        echo_diagnostics(reporter)
        if isinstance(error, EvaluationError):
            typer.echo(str(error), err=True)
        raise typer.Exit(code=error.exit_code)
    echo_diagnostics(reporter)
    typer.echo(str(value))
    if reporter.had_error:
        raise typer.Exit(code=SumireError.exit_code)


if __name__ == "__main__":
    app()
