"""Command line tools for the CRM entity catalog."""

import argparse
import asyncio
import json
import pathlib
import sys
from typing import Optional, Sequence

from .core.config import settings
from .core.exceptions import CRMError
from .core.logging_config import configure_logging


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="crm-entities", description="Inspect and generate CRM entities.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List every entity with its table and URL slug.")

    describe_parser = subparsers.add_parser("describe", help="Show the metadata of one entity as JSON.")
    describe_parser.add_argument("entity", help="Entity name, e.g. Deal")

    generate_parser = subparsers.add_parser("generate", help="Regenerate entity classes from the catalog.")
    generate_parser.add_argument(
        "--catalog",
        type=pathlib.Path,
        default=settings.catalog_path,
        help=f"Catalog YAML file (default: {settings.catalog_path})",
    )
    generate_parser.add_argument(
        "--output",
        type=pathlib.Path,
        default=settings.models_dir,
        help=f"Models package directory (default: {settings.models_dir})",
    )
    generate_parser.add_argument(
        "--entity",
        action="append",
        dest="entities",
        metavar="NAME",
        help="Only generate this entity; repeat for several.",
    )
    generate_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Report what would change without writing files.",
    )

    subparsers.add_parser("init-db", help="Create database tables for every entity.")

    return parser.parse_args(argv)


def cmd_list(args: argparse.Namespace) -> int:
    from .models.registry import iter_entities, slug_for

    for model in iter_entities():
        print(f"{model.__entity_name__:<28} {model.__tablename__:<28} {slug_for(model)}")
    return 0


def cmd_describe(args: argparse.Namespace) -> int:
    from .models.registry import describe, get_entity_class

    print(json.dumps(describe(get_entity_class(args.entity)), indent=2))
    return 0


def cmd_generate(args: argparse.Namespace) -> int:
    from .generator import GeneratorOrchestrator, load_catalog

    catalog = load_catalog(args.catalog)
    report = GeneratorOrchestrator(models_dir=args.output).generate(
        catalog,
        only=args.entities,
        dry_run=args.dry_run,
    )

    for generated in report.files:
        print(f"{generated.status.value:<8} {generated.path}")

    stats = report.statistics
    prefix = "[dry run] " if args.dry_run else ""
    print(
        f"{prefix}{len(report.entities)} entities: "
        f"{stats['created']} created, {stats['written']} written, {stats['skipped']} unchanged"
    )
    return 0


def cmd_init_db(args: argparse.Namespace) -> int:
    from .core.database import close_db, init_db

    async def run() -> None:
        try:
            await init_db()
        finally:
            await close_db()

    asyncio.run(run())
    print(f"Database ready: {settings.database_url}")
    return 0


COMMANDS = {
    "list": cmd_list,
    "describe": cmd_describe,
    "generate": cmd_generate,
    "init-db": cmd_init_db,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(settings.log_level)

    try:
        return COMMANDS[args.command](args)
    except CRMError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
