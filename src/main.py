"""Main entry point for the task tracker CLI.

All tokens after the program name go to the handler untouched; the first
one selects the command.
"""
import click

from cli import Handler
from config import load_settings
from logging_setup import setup_logging
from storage import JSONStore


@click.command(
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
    add_help_option=False,
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def main(args):
    settings = load_settings()
    setup_logging(settings.log_level)
    store = JSONStore(settings.tasks_file)
    Handler(store).run(list(args))


if __name__ == "__main__":
    main()
