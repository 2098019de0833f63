# cli.py
"""
Command line front end.

    dna-match -bf   <dna_sequence_file> <pattern_file>
    dna-match -kr   <dna_sequence_file> <pattern_file>
    dna-match -lcss <dna_sequence_file> <second_dna_sequence_file>
"""
import argparse
import logging
import sys
from typing import List, Optional

from algorithms.brute_force import brute_force_count
from algorithms.errors import SequenceMatchError, UndefinedDistanceError
from algorithms.lcs import distance_from_length, lcs_length
from algorithms.rabin_karp import rabin_karp_count
from utils import config
from utils.text_io import read_sequence_file

logger = logging.getLogger(__name__)

COUNTERS = {"bf": brute_force_count, "kr": rabin_karp_count}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dna-match",
        description="Match a pattern against a dna sequence, or compare two dna sequences.",
    )
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument("-bf", "--brute-force", dest="algorithm", action="store_const", const="bf",
                      help="count occurrences with a brute-force scan")
    mode.add_argument("-kr", "--rabin-karp", dest="algorithm", action="store_const", const="kr",
                      help="count occurrences with Karp-Rabin hashing")
    mode.add_argument("-lcss", "--lcs", dest="algorithm", action="store_const", const="lcss",
                      help="longest common subsequence length and distance")
    parser.add_argument("sequence_file", help="dna sequence file")
    parser.add_argument("pattern_file", help="pattern file, or the second dna sequence for -lcss")
    return parser


def run(algorithm: str, sequence: str, pattern: str) -> int:
    if algorithm in COUNTERS:
        if len(sequence) < len(pattern):
            logger.error("the dna sequence must contain more characters than the pattern sequence")
            return 1
        occurrences = COUNTERS[algorithm](sequence, pattern)
        print(f"The pattern was found: {occurrences} times")
        return 0

    length = lcs_length(sequence, pattern, config.max_lcs_cells())
    print(f"The length of the largest common subsequence is: {length}")
    try:
        distance = distance_from_length(length, len(sequence), len(pattern))
    except UndefinedDistanceError as e:
        logger.error("%s", e)
        return 1
    print(f"The distance between the two DNA sequences is: {distance:.2f}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config.configure_logging()
    try:
        sequence = read_sequence_file(args.sequence_file)
        pattern = read_sequence_file(args.pattern_file)
        logger.debug("mode=%s sequence=%d pattern=%d", args.algorithm, len(sequence), len(pattern))
        return run(args.algorithm, sequence, pattern)
    except SequenceMatchError as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
