import click


echo = click.echo
secho = click.secho


def bold(msg: str) -> str:
    return click.style(msg, bold=True, reset=True)


def error(msg: str) -> None:
    click.secho("ERROR: " + msg, fg="red", err=True)


def warning(msg: str) -> None:
    click.secho("WARNING: " + msg, fg="yellow", err=True)
