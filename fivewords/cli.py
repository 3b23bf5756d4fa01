import argparse
import logging
import sys
from pathlib import Path

import requests

from fivewords import results, search, words
from fivewords.graph import Graph


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find sets of five words that use 25 different letters.",
    )

    parser.add_argument(
        "--words",
        type=Path,
        default=None,
        help="Read the word list from this file instead of downloading it.",
    )
    parser.add_argument(
        "--url",
        type=str,
        default=words.DEFAULT_WORDS_URL,
        help="Where to download the word list from.",
    )
    parser.add_argument(
        "--first",
        action="store_true",
        help="Stop at the first set of words found.",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Number of processes to search with (default: one per CPU).",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the results to this delimited text file.",
    )
    parser.add_argument(
        "--delimiter",
        type=str,
        default=None,
        help="Field delimiter for --output (default: tab for .tsv, comma otherwise).",
    )
    parser.add_argument(
        "--letter-frequencies",
        action="store_true",
        help="Print how many words contain each letter.",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable progress bars.",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debugging information.",
    )

    return parser


def configured_search(
    words_file: Path | None = None,
    *,
    url: str = words.DEFAULT_WORDS_URL,
    first_only: bool = False,
    workers: int | None = None,
    output: Path | None = None,
    delimiter: str | None = None,
    show_letter_frequencies: bool = False,
    progress: bool = True,
    color: bool = True,
) -> set[search.Clique]:
    if words_file is None:
        print("Fetching the word list...")
    else:
        print(f"Reading {words_file}...")
    word_list = words.load_words(words_file, url=url)
    print(f"Found {len(word_list)} words with five different letters.")

    if show_letter_frequencies:
        for letter, count in words.letter_frequencies(word_list).items():
            print(f"{letter} = {count}")

    print("Building the graph...")
    graph = Graph.from_words(word_list, progress=progress)
    print(f"The graph has {graph.edge_count()} edges.")

    if first_only:
        clique = search.find_clique(graph)
        cliques = {clique} if clique is not None else set()
    else:
        cliques = search.find_cliques(graph, workers=workers, progress=progress)

    for clique in sorted(cliques):
        print(results.format_clique(clique, color=color))

    count = len(cliques)
    print(f"Found {count} set{'' if count == 1 else 's'} of five words.")

    if output is not None:
        previous = results.read_results(output, delimiter=delimiter)
        if previous:
            new = len(cliques - previous)
            print(f"{new} of these were not in {output} before.")

        results.write_results(output, cliques, delimiter=delimiter)
        print(f"Wrote results to {output}.")

    return cliques


def search_from_namespace(ns: argparse.Namespace) -> set[search.Clique]:
    return configured_search(
        ns.words,
        url=ns.url,
        first_only=ns.first,
        workers=ns.workers,
        output=ns.output,
        delimiter=ns.delimiter,
        show_letter_frequencies=ns.letter_frequencies,
        progress=not ns.no_progress,
        color=not ns.no_color,
    )


def main(argv: list[str] | None = None) -> int:
    ns = build_parser().parse_args(argv)

    if ns.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        )

    try:
        search_from_namespace(ns)
    except (OSError, ValueError, requests.RequestException) as e:
        message = f"Error: {e}"
        print(results.red(message) if not ns.no_color else message, file=sys.stderr)
        return 1

    return 0
