"""Command-line interface for oddments.

One subcommand per catalog operation, plus `menu` for an interactive loop.
Every operation runs through `guard`, so only safe messages are printed:
- application errors go to stderr and exit with 1 (the menu keeps going)
- anything escaping the outer dispatch is logged and exits with 2
"""

from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Sequence

from .config import get_settings
from .errors import CatalogError, ValidationError
from .export import export_json
from .log import configure_logging
from .records import Record
from .service import MAX_CATEGORY, MAX_DESCRIPTION, MAX_ID, MAX_NAME, MAX_TOKEN, CatalogService
from .sanitize import sanitize_line
from .shield import guard
from .store import RecordStore


logger = logging.getLogger(__name__)

MENU = """
=== Oddments Catalog ===
1) Add/Update item
2) Delete item
3) List items
4) Search items
5) Show categories tree
6) Export catalog to JSON
0) Exit"""


def _format_record(r: Record) -> str:
    return f"- {r.id} | {r.name} | {r.category} | {r.description}"


def _print_records(records: Sequence[Record], header: str, empty: str) -> None:
    if not records:
        print(empty)
        return
    print(header)
    for r in records:
        print(_format_record(r))


def _report(ex: CatalogError) -> None:
    if isinstance(ex, ValidationError):
        sys.stderr.write(f"Validation error: {ex}\n")
    else:
        sys.stderr.write(f"{ex}\n")


# --- operations shared by subcommands and the menu --------------------------

def do_add(service: CatalogService, rec_id: str, name: str, category: str, description: str) -> None:
    rec = guard(lambda: service.upsert_item(rec_id, name, category, description),
                "Could not save item. Please try again.")
    print("Saved.")
    logger.info("Upserted item id=%s", rec.id)


def do_delete(service: CatalogService, rec_id: str) -> None:
    removed = guard(lambda: service.delete_item(rec_id), "Could not delete item. Please try again.")
    print(f"Deleted item with id={removed}")
    logger.info("Deleted item id=%s", removed)


def do_show(service: CatalogService, rec_id: str) -> bool:
    rec = guard(lambda: service.find_by_id(rec_id), "Could not load item.")
    if rec is None:
        print("(not found)")
        return False
    print(_format_record(rec))
    return True


def do_list(service: CatalogService) -> None:
    records = guard(service.find_all, "Could not list items.")
    _print_records(records, "Items:", "(no items)")


def do_search(service: CatalogService, token: str) -> None:
    found = guard(lambda: service.search(token), "Could not search items.")
    _print_records(found, "Matches:", "(no matches)")


def do_tree(service: CatalogService) -> None:
    tree = guard(service.category_tree, "Could not load items.")
    if not tree:
        print("(no items)")
        return
    print("Category: Catalog")
    for category, records in tree.items():
        print(f"  Category: {category}")
        for r in records:
            print("    " + _format_record(r))


def do_export(service: CatalogService, out: Path) -> None:
    count = guard(lambda: export_json(service, out), "Could not export JSON.")
    print(f"Exported {count} items to {out}")


# --- interactive menu --------------------------------------------------------

def _ask(prompt: str) -> str:
    return input(prompt)


def _ask_field(label: str, max_len: int) -> str:
    """Prompt for one field and validate it before asking for the next."""
    return sanitize_line(_ask(f"{label} (max {max_len}): "), max_len)


def run_menu(service: CatalogService, export_file: Path) -> int:
    """Loop until "0" or end of input. Application errors never stop the loop."""
    actions: dict[str, Callable[[], object]] = {
        "1": lambda: do_add(
            service,
            _ask_field("Id", MAX_ID),
            _ask_field("Name", MAX_NAME),
            _ask_field("Category", MAX_CATEGORY),
            _ask_field("Description", MAX_DESCRIPTION),
        ),
        "2": lambda: do_delete(service, _ask(f"Enter ID to delete (max {MAX_ID}): ")),
        "3": lambda: do_list(service),
        "4": lambda: do_search(service, _ask(f"Search token (max {MAX_TOKEN}): ")),
        "5": lambda: do_tree(service),
        "6": lambda: do_export(service, export_file),
    }
    while True:
        print(MENU)
        try:
            choice = _ask("> ").strip()
        except EOFError:
            break
        if choice == "0":
            break
        action = actions.get(choice)
        if action is None:
            print("Unknown option. Please try again.")
            continue
        try:
            action()
        except CatalogError as ex:
            _report(ex)
        except EOFError:
            break
    print("Bye!")
    return 0


# --- entry point ---------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="oddments", description="Manage a small CSV-backed catalog.")
    p.add_argument("--data", default=None, help="Catalog file (default: $ODDMENTS_DATA_FILE or data/items.csv)")
    sub = p.add_subparsers(dest="command", required=True)

    add = sub.add_parser("add", help="Add or update an item")
    add.add_argument("id")
    add.add_argument("name")
    add.add_argument("category")
    add.add_argument("description")

    show = sub.add_parser("show", help="Show one item")
    show.add_argument("id")

    delete = sub.add_parser("delete", help="Delete an item")
    delete.add_argument("id")

    sub.add_parser("list", help="List all items")

    search = sub.add_parser("search", help="Search name and category")
    search.add_argument("token")

    sub.add_parser("tree", help="Show items grouped by category")

    export = sub.add_parser("export", help="Export the catalog to JSON")
    export.add_argument("--out", default=None, help="Output file (default: $ODDMENTS_EXPORT_FILE or data/items.json)")

    sub.add_parser("menu", help="Interactive menu")
    return p


def _dispatch(args: argparse.Namespace) -> int:
    settings = get_settings()
    data_file = Path(args.data) if args.data else settings.data_file
    service = CatalogService(RecordStore(data_file))

    if args.command == "menu":
        return run_menu(service, settings.export_file)

    try:
        if args.command == "add":
            do_add(service, args.id, args.name, args.category, args.description)
        elif args.command == "show":
            return 0 if do_show(service, args.id) else 1
        elif args.command == "delete":
            do_delete(service, args.id)
        elif args.command == "list":
            do_list(service)
        elif args.command == "search":
            do_search(service, args.token)
        elif args.command == "tree":
            do_tree(service)
        elif args.command == "export":
            do_export(service, Path(args.out) if args.out else settings.export_file)
    except CatalogError as ex:
        _report(ex)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(get_settings())
    logger.debug("oddments started: %s", args.command)

    try:
        return _dispatch(args)
    except Exception:
        logger.exception("Fatal error in command dispatch")
        sys.stderr.write("Unexpected error. Please check logs.\n")
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
