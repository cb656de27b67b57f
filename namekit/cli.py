#!/usr/bin/env python3
"""
NameKit CLI
===========
Command-line interface for name generation and favorites.

Usage:
    namekit generate -n 10 --type place -s 2
    namekit generate -t person --gender feminine -w 2 -s 2 3
    namekit demonym Narnia Chile
    namekit list
"""

import argparse
import json
import logging
import re
import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from namekit import __version__
from namekit.settings import get_setting, clamp

# =============================================================================
# Constants
# =============================================================================

CATEGORIES = ['place', 'person', 'creature', 'all']

GENDERS = ['any', 'masculine', 'feminine', 'neutral']

# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet
        self.console = Console(highlight=False)
        self.err_console = Console(stderr=True, highlight=False)

    def print(self, *args, **kwargs):
        if not self.quiet:
            self.console.print(*args, **kwargs)

    def error(self, msg: str):
        self.err_console.print(f"[red]Error:[/red] {escape(msg)}")

    def success(self, msg: str):
        if not self.quiet:
            self.console.print(f"[green]OK:[/green] {escape(msg)}")

    def table(self, headers: list, rows: list, title: str = None):
        """Print a formatted table."""
        if self.quiet:
            return

        table = Table(title=title, show_lines=False)
        for header in headers:
            table.add_column(str(header))
        for row in rows:
            table.add_row(*(escape(str(c)) for c in row))
        self.console.print(table)


def validate_name(name: str) -> tuple[bool, str]:
    """Validate a name before saving it."""
    if not name or not name.strip():
        return False, "Name cannot be empty"

    name = name.strip()

    if len(name) > 80:
        return False, "Name must be at most 80 characters"

    if not re.match(r'^[A-Za-z][A-Za-z \-]*$', name):
        return False, "Name must start with a letter and contain only letters, spaces or hyphens"

    return True, name


def build_options(args) -> dict:
    """Collect generation options from parsed arguments."""
    return {
        'include_natural': not args.no_natural,
        'include_artificial': not args.no_artificial,
        'include_generic': not args.no_generic,
        'include_continent': args.continent,
        'include_prepositions': args.prepositions,
        'gender': args.gender,
    }


# =============================================================================
# Commands
# =============================================================================

def cmd_generate(args, out: Output):
    """Generate names."""
    from namekit import NameKit

    count = clamp(args.count, 'count')
    words = clamp(args.words, 'words')
    syllables = [clamp(s, 'syllables') for s in args.syllables]

    kit = NameKit(seed=args.seed)

    names = kit.generate(
        count=count,
        category=args.type,
        syllables=syllables,
        words=words,
        hyphenated=args.hyphenate,
        demonym=args.demonym,
        **build_options(args),
    )

    if args.json:
        print(json.dumps(names, indent=2, ensure_ascii=False))
    elif args.quiet:
        for name in names:
            print(name)
    else:
        rows = [(i, name) for i, name in enumerate(names, 1)]
        out.table(['#', 'Name'], rows, title=f"{len(names)} {args.type} names")

    if args.save:
        saved = sum(1 for name in names if kit.save(name, category=args.type) is not None)
        out.success(f"Saved {saved} new name(s) to favorites")

    return 0


def cmd_demonym(args, out: Output):
    """Convert place names to demonyms."""
    from namekit import to_demonym

    rows = [(name, to_demonym(name)) for name in args.names]
    if args.quiet:
        for _, demonym in rows:
            print(demonym)
    else:
        out.table(['Place', 'Demonym'], rows)
    return 0


def cmd_syllables(args, out: Output):
    """Show estimated syllable counts."""
    from namekit import count_syllables

    rows = [(word, count_syllables(word)) for word in args.words]
    if args.quiet:
        for word, n in rows:
            print(f"{word}\t{n}")
    else:
        out.table(['Word', 'Syllables'], rows)
    return 0


def cmd_fragments(args, out: Output):
    """Show fragment pool sizes."""
    from namekit import load_fragment_tables

    tables = load_fragment_tables()
    stats = tables.stats()

    if args.json:
        print(json.dumps(stats, indent=2))
        return 0

    rows = []
    for category, s in stats.items():
        groups = ', '.join(f"{g}={n}" for g, n in s['groups'].items())
        rows.append((category, s['prefixes'], s['middles'], s['suffixes'], groups))
    out.table(['Category', 'Prefixes', 'Middles', 'Suffixes', 'Suffix groups'], rows)
    out.print(f"Prepositions: {', '.join(tables.prepositions)}")
    return 0


def cmd_save(args, out: Output):
    """Save a name to favorites."""
    from namekit import get_favorites_db

    valid, result = validate_name(args.name)
    if not valid:
        out.error(result)
        return 1
    name = result

    if get_favorites_db().add(name, category=args.type, note=args.note) is None:
        out.error(f"'{name}' is already in favorites")
        return 1

    out.success(f"Saved '{name}'")
    return 0


def cmd_list(args, out: Output):
    """List favorites."""
    from namekit import get_favorites_db

    favorites = get_favorites_db().list(category=args.type, limit=args.limit)

    if args.json:
        print(json.dumps([f.to_dict() for f in favorites], indent=2, ensure_ascii=False))
        return 0

    if not favorites:
        out.print("No favorites saved.")
        return 0

    rows = [(f.name, f.category or '-', f.note or '', (f.created_at or '')[:10]) for f in favorites]
    out.table(['Name', 'Category', 'Note', 'Saved'], rows)
    return 0


def cmd_remove(args, out: Output):
    """Remove a name from favorites."""
    from namekit import get_favorites_db

    if not get_favorites_db().remove(args.name):
        out.error(f"'{args.name}' is not in favorites")
        return 1

    out.success(f"Removed '{args.name}'")
    return 0


def cmd_export(args, out: Output):
    """Export favorites to JSON."""
    from namekit import get_favorites_db

    json_str = get_favorites_db().export_json(args.output)

    if args.output:
        out.success(f"Exported to {args.output}")
    else:
        print(json_str)

    return 0


# =============================================================================
# Main
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='namekit',
        description='NameKit - Procedural Name Generator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s generate -n 10 --type place -s 3
  %(prog)s generate -t place -w 2 -s 2 3 --prepositions --hyphenate
  %(prog)s generate -t person --gender feminine -w 2
  %(prog)s generate -t place --demonym --continent --no-natural
  %(prog)s demonym Narnia Chile
  %(prog)s syllables haven gate
  %(prog)s save "Belarwood" -t place
  %(prog)s list
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Plain output, one result per line')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # --- generate ---
    p = subparsers.add_parser('generate', aliases=['gen', 'g'], help='Generate names')
    p.add_argument('-n', '--count', type=int,
                   default=get_setting('generation.defaults.count', 10),
                   help='Number of names (default: %(default)s)')
    p.add_argument('--type', '-t', choices=CATEGORIES,
                   default=get_setting('generation.defaults.category', 'place'),
                   help='Name category (default: %(default)s)')
    p.add_argument('--syllables', '-s', type=int, nargs='+',
                   default=[get_setting('generation.defaults.syllables', 2)],
                   help='Syllables per word; the last value repeats (default: %(default)s)')
    p.add_argument('--words', '-w', type=int,
                   default=get_setting('generation.defaults.words', 1),
                   help='Words per name (default: %(default)s)')
    p.add_argument('--hyphenate', action='store_true', help='Join words with hyphens')
    p.add_argument('--demonym', '-d', action='store_true', help='Output inhabitant names (place/all)')
    p.add_argument('--no-natural', action='store_true', help='Exclude natural place suffixes')
    p.add_argument('--no-artificial', action='store_true', help='Exclude artificial place suffixes')
    p.add_argument('--no-generic', action='store_true', help='Exclude generic place suffixes')
    p.add_argument('--continent', action='store_true', help='Include continent place suffixes')
    p.add_argument('--prepositions', '-p', action='store_true',
                   help='Inject a preposition into multi-word place names')
    p.add_argument('--gender', '-g', choices=GENDERS, default='any',
                   help='Person name suffixes (default: any)')
    p.add_argument('--seed', type=int, help='Seed for reproducible output')
    p.add_argument('--save', action='store_true', help='Save generated names to favorites')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    # --- demonym ---
    p = subparsers.add_parser('demonym', aliases=['dem'], help='Convert place names to demonyms')
    p.add_argument('names', nargs='+', help='Place names')

    # --- syllables ---
    p = subparsers.add_parser('syllables', aliases=['syl'], help='Estimate syllable counts')
    p.add_argument('words', nargs='+', help='Words or fragments')

    # --- fragments ---
    p = subparsers.add_parser('fragments', help='Show fragment pool sizes')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    # --- save ---
    p = subparsers.add_parser('save', help='Save a name to favorites')
    p.add_argument('name', help='Name to save')
    p.add_argument('--type', '-t', choices=CATEGORIES, help='Category of the name')
    p.add_argument('--note', help='Free-form note')

    # --- list ---
    p = subparsers.add_parser('list', aliases=['ls', 'l'], help='List favorites')
    p.add_argument('--type', '-t', choices=CATEGORIES, help='Only this category')
    p.add_argument('--limit', type=int, help='Max results')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    # --- remove ---
    p = subparsers.add_parser('remove', aliases=['rm'], help='Remove a name from favorites')
    p.add_argument('name', help='Name to remove')

    # --- export ---
    p = subparsers.add_parser('export', help='Export favorites to JSON')
    p.add_argument('--output', '-o', help='Output file path')

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s')

    if not args.command:
        parser.print_help()
        return 0

    # Handle aliases
    cmd_map = {
        'gen': 'generate', 'g': 'generate',
        'dem': 'demonym',
        'syl': 'syllables',
        'ls': 'list', 'l': 'list',
        'rm': 'remove',
    }
    command = cmd_map.get(args.command, args.command)

    out = Output(quiet=args.quiet)

    commands = {
        'generate': cmd_generate,
        'demonym': cmd_demonym,
        'syllables': cmd_syllables,
        'fragments': cmd_fragments,
        'save': cmd_save,
        'list': cmd_list,
        'remove': cmd_remove,
        'export': cmd_export,
    }

    handler = commands.get(command)
    if handler:
        try:
            return handler(args, out)
        except KeyboardInterrupt:
            out.print("\nCancelled.")
            return 130
        except Exception as e:
            out.error(str(e))
            if args.debug:
                import traceback
                traceback.print_exc()
            return 1

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
