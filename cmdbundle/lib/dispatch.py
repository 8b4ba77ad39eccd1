"""Interface synthesis and dispatch.

A `click.Group` is assembled at runtime from the mapping table, the trailing
arguments are matched against it, and a matched subcommand replaces the
current process with its bound executable (`os.execvp`). Nothing is spawned
and waited on: stdio, process group, signals and the exit status all belong
to the target once exec succeeds.
"""
from __future__ import annotations
import logging, os, sys
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple
import click
from config.settings import CONTEXT_SETTINGS, DISPATCH_FAILURE_EXIT_CODE
from .mapping import CommandMapping, duplicate_names, find_mapping

log = logging.getLogger(__name__)

class PassthroughCommand(click.Command):
	"""Subcommand whose tokens all belong to the target program.

	Only an exact help flag as the first token is handled here; everything
	else, `--` and bundled short flags included, is forwarded as `args`.
	"""

	def parse_args(self, ctx, args):
		args = list(args)
		if args and args[0] in ctx.help_option_names:
			return super().parse_args(ctx, args[:1])
		ctx.params['args'] = tuple(args)
		return []

	def collect_usage_pieces(self, ctx):
		return super().collect_usage_pieces(ctx) + ['[ARGS]...']

class DispatchError(click.ClickException):
	"""The bound executable could not be exec'd. Exit code is the OS errno."""

	def __init__(self, mapping: CommandMapping, error: OSError):
		super().__init__(f"cannot run '{mapping.name}' ({mapping.path}): {error.strerror or error}")
		self.mapping = mapping
		self.error = error
		self.exit_code = error.errno or DISPATCH_FAILURE_EXIT_CODE

@dataclass(frozen=True)
class TopLevelSpec:
	name: str
	description: Optional[str] = None
	author: Optional[str] = None
	about: Optional[str] = None
	subcommands: Tuple[Tuple[str, Optional[str]], ...] = ()

	@classmethod
	def from_mappings(cls, name: str, mappings: Iterable[CommandMapping], description: Optional[str] = None,
			author: Optional[str] = None, about: Optional[str] = None) -> 'TopLevelSpec':
		pairs = tuple((m.name, m.description) for m in mappings)
		return cls(name=name, description=description, author=author, about=about, subcommands=pairs)

	@property
	def help(self) -> Optional[str]:
		paragraphs = [p for p in (self.about, self.description) if p is not None]
		return '\n\n'.join(paragraphs) if paragraphs else None

	@property
	def epilog(self) -> Optional[str]:
		return f'Author: {self.author}' if self.author is not None else None

def dispatch(mapping: CommandMapping, args: Sequence[str] = ()) -> None:
	"""Replace the current process with `mapping.path`. Returns only if exec is stubbed out."""
	argv = [mapping.path, *args]
	log.debug('exec %s argv=%r', mapping.path, argv)
	sys.stdout.flush(); sys.stderr.flush()
	try:
		os.execvp(mapping.path, argv)
	except OSError as e:
		raise DispatchError(mapping, e) from e

def _subcommand_callback(mappings: List[CommandMapping], name: str):
	def callback(args):
		mapping = find_mapping(mappings, name)
		if mapping is not None:
			dispatch(mapping, args)
	return callback

def build_group(spec: TopLevelSpec, mappings: Iterable[CommandMapping]) -> click.Group:
	"""Synthesize the command group for `spec`; subcommands resolve against `mappings`."""
	mappings = list(mappings)
	group = click.Group(
		name=spec.name,
		help=spec.help,
		short_help=spec.about,
		epilog=spec.epilog,
		invoke_without_command=True,
		context_settings=CONTEXT_SETTINGS,
	)
	for name, description in spec.subcommands:
		if name in group.commands:
			continue  # first declaration wins
		group.add_command(PassthroughCommand(
			name=name,
			help=description,
			context_settings=CONTEXT_SETTINGS,
			callback=_subcommand_callback(mappings, name),
		))
	log.debug('synthesized %s with subcommands %s', spec.name, list(group.commands))
	return group

def run(mappings: Iterable[CommandMapping], name: str, description: Optional[str] = None, author: Optional[str] = None,
		about: Optional[str] = None, trailing: Sequence[str] = ()) -> None:
	"""Build the group, match `trailing` against it and dispatch.

	Never returns: click exits with 0 (no subcommand, help), 2 (usage error) or
	the errno of a failed exec, and a successful exec replaces the process.
	"""
	mappings = list(mappings)
	log.debug('%d command mapping(s) for %s', len(mappings), name)
	for dup in duplicate_names(mappings):
		log.warning("command '%s' is declared more than once; using the first declaration", dup)
	spec = TopLevelSpec.from_mappings(name, mappings, description=description, author=author, about=about)
	group = build_group(spec, mappings)
	group.main(args=list(trailing), prog_name=spec.name)
