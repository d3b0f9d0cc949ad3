from __future__ import annotations
import argparse
import dataclasses
import logging

from dotenv import load_dotenv
load_dotenv()

from pageqa.config import get_settings
from pageqa.pipeline import Err, build_pipeline
from pageqa.schemas import ProcessRequest

logger = logging.getLogger(__name__)

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Scrape a page into the vector store and optionally ask about it.")
    parser.add_argument("--url", required=True)
    parser.add_argument("--query", default=None, help="question to answer once the page is stored")
    parser.add_argument("--max-chunk-size", type=int, default=None)
    parser.add_argument("--overlap-size", type=int, default=None)
    args = parser.parse_args(argv)

    settings = get_settings()
    overrides = {}
    if args.max_chunk_size is not None:
        overrides["max_chunk_chars"] = args.max_chunk_size
    if args.overlap_size is not None:
        overrides["chunk_overlap_chars"] = args.overlap_size
    settings = dataclasses.replace(settings, **overrides)

    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    pipeline = build_pipeline(settings)

    if args.query:
        outcome = pipeline.run(ProcessRequest(url=args.url, query=args.query))
        if isinstance(outcome, Err):
            logger.error("Failed at %s: %s", outcome.stage, outcome.error)
            return 1
        print(f"Stored {outcome.value.chunk_count} chunks from {args.url}")
        print(outcome.value.answer)
        return 0

    stored = pipeline.index(args.url)
    if isinstance(stored, Err):
        logger.error("Failed at %s: %s", stored.stage, stored.error)
        return 1

    print(f"OK: stored {stored.value} chunks from {args.url}")
    print(f"Chroma: {settings.chroma_dir} ({settings.chroma_collection})")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
