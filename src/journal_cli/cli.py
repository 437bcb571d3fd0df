"""Journal CLI - append a timestamped line to today's journal."""

import logging
import sys
from importlib.metadata import version as package_version

import click

from .config import load_config
from .core.entry import collect_entry_text
from .errors import JournalError
from .workflows import add_entry, get_journal

LEADING_FLAGS = {"--debug": "debug", "--version": "version"}


class EntryCommand(click.Command):
    """
    Command that passes its arguments through as entry text.

    Flags are only honoured while they lead the argument list; from the
    first other word on, everything (``--``, ``--help``, ``-x``...) is text.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        words = list(args)
        ctx.params.update({name: False for name in LEADING_FLAGS.values()})

        while words and (words[0] in LEADING_FLAGS or words[0] == "--help"):
            flag = words.pop(0)
            if flag == "--help":
                click.echo(ctx.get_help(), color=ctx.color)
                ctx.exit()
            ctx.params[LEADING_FLAGS[flag]] = True

        ctx.params["words"] = tuple(words)
        return []


@click.command(cls=EntryCommand)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--version", is_flag=True, help="Show the version and exit.")
@click.argument("words", nargs=-1)
def main(debug: bool, version: bool, words: tuple[str, ...]):
    """Append WORDS to today's file in $JOURNAL_HOME.

    The file name comes from $JOURNAL_FORMAT (YYYY, MM, DD, YY tokens)
    plus ".md", and the file must already exist.
    """
    if version:
        click.echo(f"journal, version {package_version('journal-cli')}")
        return

    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )

    try:
        config = load_config()
        journal = get_journal(config)
        entry_text = collect_entry_text(words)
        path = add_entry(journal, config.journal_format, entry_text)
    except JournalError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"✓ Entry added to {path}")


if __name__ == "__main__":
    main()
