import logging
import click
from classroll.flows import load_settings, run_demo


@click.group()
def cli():
    pass


@click.command()
@click.option("--config_path", default=None, help="YAML settings file; defaults to the built-in demo")
@click.option("--pace", type=float, default=None, help="wall-clock seconds per timeline tick")
@click.option("--seed", type=int, default=None, help="seed for the random grade source")
def demo(config_path, pace, seed):
    settings = load_settings(config_path)
    if pace is not None:
        settings.pace = pace
    if seed is not None:
        settings.seed = seed
    logging.basicConfig(level=settings.log_level)

    roster = run_demo(settings)

    click.echo(roster.summary_table())
    outstanding = roster.outstanding()
    if len(outstanding) > 0:
        click.echo("Outstanding: " + ", ".join(s.full_name for s in outstanding))


cli.add_command(demo)


if __name__ == "__main__":
    cli()
