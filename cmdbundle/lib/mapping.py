"""Command mappings: `name:path[:description]` declarations.

Each `--command` value becomes one immutable `CommandMapping`. The table is
kept in declaration order and never deduplicated; lookups take the first hit.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional
import click
from config.settings import MAPPING_SEPARATOR, MAPPING_MAX_PARTS

log = logging.getLogger(__name__)

class MappingError(ValueError): ...

@dataclass(frozen=True)
class CommandMapping:
	name: str
	path: str
	description: Optional[str] = None

def parse_mapping(raw: str) -> CommandMapping:
	"""Parse one `name:path[:description]` string.

	Splitting stops after the second separator, so only the description may
	contain `:`.
	"""
	parts = raw.split(MAPPING_SEPARATOR, MAPPING_MAX_PARTS - 1)
	if len(parts) < 2:
		raise MappingError('Mapping must be at least name:path')
	description = parts[2] if len(parts) == 3 else None
	return CommandMapping(name=parts[0], path=parts[1], description=description)

def parse_mappings(values: Iterable[str]) -> List[CommandMapping]:
	return [parse_mapping(v) for v in values]

def duplicate_names(mappings: Iterable[CommandMapping]) -> List[str]:
	"""Names declared more than once, in first-declaration order."""
	seen, dups = set(), []
	for m in mappings:
		if m.name in seen and m.name not in dups:
			dups.append(m.name)
		seen.add(m.name)
	return dups

def find_mapping(mappings: Iterable[CommandMapping], name: str) -> Optional[CommandMapping]:
	"""First mapping in table order whose name matches."""
	return next((m for m in mappings if m.name == name), None)

class MappingParamType(click.ParamType):
	name = 'mapping'

	def convert(self, value, param, ctx):
		if isinstance(value, CommandMapping):
			return value
		try:
			return parse_mapping(value)
		except MappingError as e:
			self.fail(f'{e} (got {value!r})', param, ctx)

MAPPING = MappingParamType()
