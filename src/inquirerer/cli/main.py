import typer

from inquirerer.cli.ask import ask as ask_command
from inquirerer.cli.validate import validate as validate_command

app = typer.Typer(name="inquirerer", help="Interactive question/answer engine")
app.command(name="ask")(ask_command)
app.command(name="validate")(validate_command)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


if __name__ == "__main__":
    app()
