#!/usr/bin/env python3

import asyncio

from cli.presentation import CATEGORY_TYPE_STYLES
from models.category import CategoryType
from logger import get_logger

logger = get_logger()


def cmd_list(args, services):
    """List categories, optionally only one type."""
    if args.type:
        categories = asyncio.run(
            services.categories.find_by_type(CategoryType(args.type))
        )
    else:
        categories = asyncio.run(services.categories.find_all())

    if not categories:
        logger.info("No categories found.")
        return

    logger.info("\nCategories:")
    logger.info("=" * 80)
    for category in categories:
        style = CATEGORY_TYPE_STYLES[category.type]
        logger.info(f"ID: {category.id}")
        logger.info(f"Name: {category.name}")
        logger.info(f"Type: {style.label}")
        logger.info(f"Icon: {category.icon}  Color: {category.color}")
        logger.info("-" * 80)

    logger.info(f"\nTotal categories: {len(categories)}")


def setup_parser(subparsers):
    """Setup categories subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "categories",
        help="Show categories",
        description="List income and expense categories",
    )

    categories_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available category commands",
        dest="subcommand",
        required=True,
    )

    # categories list
    list_parser = categories_subparsers.add_parser("list", help="List categories")
    list_parser.add_argument(
        "--type",
        choices=[category_type.value for category_type in CategoryType],
        help="Only list categories of this type",
    )
    list_parser.set_defaults(func=cmd_list)
