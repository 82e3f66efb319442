#!/usr/bin/env python3
"""
Rich Text Link Converter

Resolves internal links (ezcontent://, ezlocation://) in a DocBook rich
text document into absolute URLs, using a YAML repository fixture for
content and location lookups.

Usage:
    # Convert to stdout
    python3 link_converter.py article.xml --repository repository.yaml

    # Render for another siteaccess and write to a file
    python3 link_converter.py article.xml -o article.html.xml --siteaccess site-fr

License: MIT
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from lxml import etree

from richtext.config import AppConfig, SettingsConfigResolver, load_config
from richtext.converter import Aggregate, LinkConverter
from richtext.repository import InMemoryRepository
from richtext.routing import UrlAliasRouter
from richtext.services import RichTextError
from richtext.siteaccess import StaticSiteAccessService
from richtext.utils import setup_logger


def build_pipeline(
    config: AppConfig,
    repository: InMemoryRepository,
    logger: Optional[logging.Logger] = None
) -> Aggregate:
    """
    Wire the services and build the converter pipeline.

    Args:
        config: Application configuration
        repository: Content and location lookups
        logger: Logger for link diagnostics

    Returns:
        Aggregate converter running the link converter
    """
    router = UrlAliasRouter(
        base_url=config.router.base_url,
        siteaccess_hosts=config.router.siteaccess_hosts,
        prefix_siteaccess=config.router.prefix_siteaccess
    )

    link_converter = LinkConverter(
        location_service=repository,
        content_service=repository,
        router=router,
        siteaccess_service=StaticSiteAccessService(config.siteaccess),
        config_resolver=SettingsConfigResolver(config),
        logger=logger
    )

    return Aggregate([link_converter])


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the link converter."""
    parser = argparse.ArgumentParser(
        description="Resolve internal links in DocBook rich text documents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s article.xml --repository repository.yaml
  %(prog)s article.xml -o out.xml --config config.yaml --siteaccess site-fr
        """
    )

    parser.add_argument(
        "input",
        type=Path,
        help="DocBook XML document to convert"
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        help="Output file (default: stdout)"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("config.yaml"),
        help="Path to configuration file (default: config.yaml)"
    )
    parser.add_argument(
        "--repository",
        type=Path,
        default=Path("repository.yaml"),
        help="YAML file with contents and locations (default: repository.yaml)"
    )
    parser.add_argument(
        "--siteaccess",
        help="Override the current siteaccess from config"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "NOTICE", "WARNING", "ERROR"],
        help="Override log level from config"
    )

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except (RichTextError, OSError) as e:
        print(f"ERROR: Failed to load configuration: {e}", file=sys.stderr)
        return 1

    if args.siteaccess:
        config.siteaccess = args.siteaccess
    if args.log_level:
        config.log_level = args.log_level

    # NOTICE is registered when richtext.utils is imported
    log_level = logging.getLevelName(config.log_level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO
    log_file = Path(config.log_file) if config.log_file else None
    logger = setup_logger("richtext", log_file=log_file, level=log_level)

    try:
        repository = InMemoryRepository.load(args.repository)
    except (RichTextError, OSError) as e:
        logger.error(f"Failed to load repository {args.repository}: {e}")
        return 1

    try:
        document = etree.parse(str(args.input))
    except (etree.XMLSyntaxError, OSError) as e:
        logger.error(f"Failed to parse {args.input}: {e}")
        return 1

    try:
        pipeline = build_pipeline(config, repository, logger)
        result = pipeline.convert(document)
    except RichTextError as e:
        logger.error(f"Conversion of {args.input} failed: {e}")
        return 1

    xml_bytes = etree.tostring(
        result,
        encoding="UTF-8",
        xml_declaration=True,
        pretty_print=True
    )

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_bytes(xml_bytes)
        logger.info(f"Converted document written to: {args.output}")
    else:
        sys.stdout.write(xml_bytes.decode("utf-8"))

    return 0


if __name__ == "__main__":
    sys.exit(main())
