"""CLI commands implemented with click.

`cli` takes the mapping declarations and top-level metadata, then hands every
argument after `--` to the command group synthesized from them.
"""
from __future__ import annotations
import logging
import click
from config.settings import CONTEXT_SETTINGS, LOG_FORMAT, LOG_LEVEL, TRAILING_SEPARATOR
from cmdbundle.lib.mapping import MAPPING
from cmdbundle.lib.dispatch import run

class TrailingCommand(click.Command):
	"""Command that passes everything after the first `--` through as `trailing`."""

	def parse_args(self, ctx, args):
		args, trailing = list(args), []
		if TRAILING_SEPARATOR in args:
			i = args.index(TRAILING_SEPARATOR)
			args, trailing = args[:i], args[i + 1:]
		rest = super().parse_args(ctx, args)
		ctx.params['trailing'] = tuple(trailing)
		return rest

	def collect_usage_pieces(self, ctx):
		return super().collect_usage_pieces(ctx) + [f'[{TRAILING_SEPARATOR} ARGS]...']

@click.command(cls=TrailingCommand, context_settings=CONTEXT_SETTINGS)
@click.option('-c', '--command', 'commands', multiple=True, type=MAPPING, metavar='NAME:PATH[:DESCRIPTION]',
	help="Define command mappings in format 'name:path[:description]'. Can be specified multiple times.")
@click.option('-n', '--name', required=True, help='The name of the main command.')
@click.option('-d', '--description', help='Description for the main command.')
@click.option('-a', '--author', help='Author information for the main command.')
@click.option('-b', '--about', help='About information for the main command (similar to description).')
@click.version_option(package_name='cmdbundle')
def cli(commands, name, description, author, about, trailing):
	"""A small CLI tool to bundle executables as subcommands.

	Arguments after -- are matched against the synthesized command NAME; the
	chosen subcommand replaces this process with its executable.
	"""
	logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
	run(commands, name, description=description, author=author, about=about, trailing=trailing)
