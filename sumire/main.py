from typing import Optional

import click

from sumire.config import RunConfig
from sumire.exceptions import EvaluationError, SumireError
from sumire.helper import Reporter
from sumire.logging_utils import setup_logging
from sumire.run import run


def run_source(source: str, config: RunConfig) -> int:
    reporter = Reporter()
    try:
        value = run(source, config, reporter)
    except SumireError as error:
        for diagnostic in reporter.diagnostics:
            click.echo(str(diagnostic), err=True)
        if isinstance(error, EvaluationError):
            click.echo(str(error), err=True)
        return error.exit_code
    for diagnostic in reporter.diagnostics:
        click.echo(str(diagnostic), err=True)
    click.echo(str(value))
    return SumireError.exit_code if reporter.had_error else 0


def run_prompt(config: RunConfig) -> None:
    while True:
        try:
            line = click.prompt("", prompt_suffix="> ", default="", show_default=False)
        except click.Abort:
            click.echo()
            return
        if line.strip():
            run_source(line, config)


@click.command()
@click.argument("filename", type=click.Path(exists=True, dir_okay=False), required=False)
@click.option(
    "--fail-fast/--no-fail-fast",
    default=False,
    envvar="SUMIRE_FAIL_FAST",
    help="Do not parse when scanning reported errors.",
)
@click.option(
    "--log-level",
    default="WARNING",
    envvar="SUMIRE_LOG_LEVEL",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
)
@click.pass_context
def main(ctx: click.Context, filename: Optional[str], fail_fast: bool, log_level: str):
    config = RunConfig(fail_fast=fail_fast, log_level=log_level.upper())
    setup_logging(config.log_level)
    if filename is None:
        run_prompt(config)
        return
    try:
        with open(filename, "r", encoding="utf-8") as fp:
            source = fp.read()
    except UnicodeDecodeError:
        raise click.FileError(filename, hint="not valid UTF-8 text") from None
    ctx.exit(run_source(source, config))


if __name__ == "__main__":
    main()
