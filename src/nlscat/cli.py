"""
CLI entry point for nlscat.

Usage:
    nlscat paths <name>                  Show the files tried for a catalog
    nlscat get <name> <set> <msg>        Print one message
    nlscat dump <name>                   Print every message in a catalog
    nlscat decode <text>                 Decode catalog escape sequences
"""

import argparse
import logging
import sys
from pathlib import Path

from nlscat import __version__


def _catalogs(args):
    from .catalogs import MessageCatalogs
    from .config import get_config

    return MessageCatalogs(get_config(args.config))


def _flags(args) -> int:
    from .resolver import NL_CAT_DEFAULT, NL_CAT_LOCALE

    return NL_CAT_LOCALE if args.locale_category else NL_CAT_DEFAULT


def _write_bytes(data: bytes) -> None:
    sys.stdout.flush()
    sys.stdout.buffer.write(data + b"\n")
    sys.stdout.buffer.flush()


def cmd_paths(args):
    """Show candidate paths for a catalog name."""
    from .config import get_config
    from .resolver import candidate_paths

    for path in candidate_paths(args.name, _flags(args), get_config(args.config)):
        marker = "*" if Path(path).is_file() else " "
        print(f"{marker} {path}")
    return 0


def cmd_get(args):
    """Print a single message."""
    from .errors import CatalogError

    catalogs = _catalogs(args)
    try:
        catd = catalogs.open(args.name, _flags(args))
    except CatalogError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    result = catalogs.lookup(catd, args.set_id, args.msg_id, args.default)
    catalogs.close(catd)

    if result.found:
        _write_bytes(result.text)
        return 0
    if result.text is not None:
        print(result.text)
    else:
        print(f"Message {args.set_id}:{args.msg_id} not found", file=sys.stderr)
    return 2


def cmd_dump(args):
    """Print every message of a catalog, escaped for display."""
    from .config import get_config
    from .errors import CatalogNotFoundError
    from .parser import encode_escapes, load_catalog
    from .resolver import candidate_paths

    tried = []
    for path in candidate_paths(args.name, _flags(args), get_config(args.config)):
        tried.append(path)
        try:
            catalog = load_catalog(path)
        except CatalogNotFoundError:
            continue
        print(f"# {path}: {len(catalog)} messages")
        for message in catalog:
            print(f"{message.set_id} {message.msg_id} {encode_escapes(message.text)}")
        return 0

    print(f"Error: {CatalogNotFoundError(args.name, tried)}", file=sys.stderr)
    return 1


def cmd_decode(args):
    """Decode escape sequences in a string."""
    from .parser import decode_escapes

    _write_bytes(decode_escapes(args.text.encode("utf-8", "surrogateescape")))
    return 0


def _add_catalog_args(p):
    p.add_argument('name', help='Catalog name or path')
    p.add_argument('-l', '--locale-category', action='store_true',
                   help='Use LC_ALL/LC_MESSAGES before LANG (NL_CAT_LOCALE)')


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="NLS message catalog tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    nlscat paths myprog
    LANG=de_DE.UTF-8 nlscat get myprog 1 3 --default "File not found"
    nlscat dump ./po/myprog.msg
    nlscat decode 'tab\\there'
"""
    )
    parser.add_argument('--version', action='version', version=f'nlscat {__version__}')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    parser.add_argument('--config', type=Path, help='YAML config file')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # paths
    paths_p = subparsers.add_parser('paths', help='Show candidate catalog paths')
    _add_catalog_args(paths_p)
    paths_p.set_defaults(func=cmd_paths)

    # get
    get_p = subparsers.add_parser('get', help='Print one message')
    _add_catalog_args(get_p)
    get_p.add_argument('set_id', type=int, help='Set number')
    get_p.add_argument('msg_id', type=int, help='Message number')
    get_p.add_argument('-d', '--default', help='Text printed if the message is missing')
    get_p.set_defaults(func=cmd_get)

    # dump
    dump_p = subparsers.add_parser('dump', help='Print all messages')
    _add_catalog_args(dump_p)
    dump_p.set_defaults(func=cmd_dump)

    # decode
    decode_p = subparsers.add_parser('decode', help='Decode an escaped string')
    decode_p.add_argument('text', help='Escaped text')
    decode_p.set_defaults(func=cmd_decode)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
