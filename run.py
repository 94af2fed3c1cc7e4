"""Entry point: segment a Hebrew text file (or stdin) and print the chunks as JSON."""

import json
import logging
import sys

from ivrit.config import load_config
from ivrit.ingestion.reader import TextReader
from ivrit.segmentation.pipeline import TextSegmenter


def main() -> None:
    """Load configuration, segment the input text and write JSON to stdout."""
    config = load_config()
    logging.basicConfig(level=config.logging.level, format=config.logging.format)

    if len(sys.argv) > 1:
        text = TextReader().read(sys.argv[1])
    else:
        text = sys.stdin.read()

    chunks = TextSegmenter(config).segment(text)
    json.dump(
        [chunk.model_dump(mode="json") for chunk in chunks],
        sys.stdout,
        ensure_ascii=False,
        indent=2,
    )
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
