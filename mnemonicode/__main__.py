"""
Entry point for python -m mnemonicode
"""

import click
from mnemonicode import __version__
from mnemonicode.cli import decode, encode, explain
from mnemonicode.logging_config import configure_logging

@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging on stderr')
def cli(verbose):
    """mnemonicode - encode binary data as speakable words"""
    configure_logging("DEBUG" if verbose else None)

cli.add_command(encode)
cli.add_command(decode)
cli.add_command(explain)

if __name__ == '__main__':
    cli()
