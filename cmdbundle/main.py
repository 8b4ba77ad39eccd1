"""Program entry point (CLI dispatcher).

Grammar synthesis and exec live in `cmdbundle.lib.dispatch`; main remains a
thin wrapper.
"""
from __future__ import annotations
from cmdbundle.cli.commands import cli

def main():  # pragma: no cover - thin wrapper
	cli(prog_name='cmdbundle')

if __name__ == '__main__':  # pragma: no cover
	main()
