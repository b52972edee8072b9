import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from wordgen import GeneratorConfig, WordGenError, generate_from_config, load_words

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="word-generator",
        description="Generate words that sound like the ones in a word list.",
    )
    parser.add_argument("wordlist", help="Text file with one word per line.")
    parser.add_argument("-a", "--accuracy", type=int, default=3,
                        help="Number of preceding letters used to pick the next one.")
    parser.add_argument("-n", "--count", type=int, default=15, help="Number of words to generate.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible output.")
    parser.add_argument("--backend", choices=["python", "torch"], default="python")
    parser.add_argument("--max-length", type=int, default=None,
                        help="Abort if a word grows longer than this.")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = GeneratorConfig(
            context_length=args.accuracy,
            word_count=args.count,
            seed=args.seed,
            backend=args.backend,
            max_length=args.max_length,
        )
    except ValidationError as e:
        print(f"Invalid configuration:\n{e}", file=sys.stderr)
        return 2

    try:
        words = load_words(args.wordlist)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Cannot read word list %s: %s", args.wordlist, e)
        return 1
    logger.info("Loaded %d words from %s", len(words), args.wordlist)

    try:
        generated = generate_from_config(words, config)
    except WordGenError as e:
        logger.error("%s", e)
        return 2

    for word in generated:
        print(word)
    return 0


if __name__ == "__main__":
    sys.exit(main())
