"""
Run the job field extractor from the command line.

Extracts title, company, location and tech stacks from a job posting URL or
a saved HTML file and prints the result as JSON.
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from jdfilter.config import settings
from jdfilter.fetch import build_fetcher
from jdfilter.lexicon import JsonFileLexiconStore, TechLexicon, build_lexicon_store
from jdfilter.service import JobExtractionService

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger("RunExtractor")


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description='Extract structured fields from a job posting page.'
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('--url', type=str, help='Job posting URL to fetch')
    source.add_argument('--file', type=str, help='Saved HTML file to read')
    parser.add_argument(
        '--source-url',
        type=str,
        default='',
        help='URL to report for --file input (default: file URI)'
    )
    parser.add_argument(
        '--lexicon',
        type=str,
        default=None,
        help='JSON lexicon file to use instead of the configured store'
    )
    return parser.parse_args(argv)


def build_service(args) -> JobExtractionService:
    store = JsonFileLexiconStore(args.lexicon) if args.lexicon else build_lexicon_store(settings)
    lexicon = TechLexicon(store)
    lexicon.load()
    return JobExtractionService(build_fetcher(settings), lexicon)


def main(argv=None):
    """Main entry point for running the extractor."""
    args = parse_args(argv)

    try:
        service = build_service(args)

        if args.url:
            logger.info(f"Extracting from URL: {args.url}")
            descriptor = asyncio.run(service.extract_url(args.url))
        else:
            path = Path(args.file)
            logger.info(f"Extracting from file: {path}")
            html = path.read_text(encoding='utf-8')
            descriptor = service.extract_html(html, args.source_url or path.resolve().as_uri())

        print(json.dumps(descriptor.to_payload(), indent=2, ensure_ascii=False))
        return 0

    except Exception as e:
        logger.error(f"Extraction failed: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
