import csv
from pathlib import Path
from typing import Iterable

import colorama as clr

from fivewords.search import CLIQUE_SIZE, Clique
from fivewords.words import ALPHABET

clr.init()


def green(x: str) -> str:
    return f"{clr.Fore.GREEN}{x}{clr.Fore.RESET}"


def red(x: str) -> str:
    return f"{clr.Fore.RED}{x}{clr.Fore.RESET}"


def gray(x: str) -> str:
    return f"{clr.Style.DIM}{x}{clr.Style.RESET_ALL}"


def _delimiter_for(path: Path, delimiter: str | None) -> str:
    if delimiter is not None:
        return delimiter

    return "\t" if path.suffix == ".tsv" else ","


def write_results(
    path: str | Path,
    cliques: Iterable[Clique],
    *,
    delimiter: str | None = None,
) -> None:
    path = Path(path)
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f, delimiter=_delimiter_for(path, delimiter))
        writer.writerows(sorted(tuple(sorted(clique)) for clique in cliques))


def read_results(path: str | Path, *, delimiter: str | None = None) -> set[Clique]:
    path = Path(path)
    try:
        with path.open(newline="", encoding="utf-8") as f:
            rows = list(csv.reader(f, delimiter=_delimiter_for(path, delimiter)))
    except FileNotFoundError:
        return set()

    cliques = set()
    for line_number, row in enumerate(rows, 1):
        if not row:
            continue

        if len(row) != CLIQUE_SIZE:
            msg = f"{path}:{line_number} has {len(row)} words, expected {CLIQUE_SIZE}."
            raise ValueError(msg)

        cliques.add(tuple(sorted(row)))

    return cliques  # type: ignore[return-value]


def format_clique(clique: Clique, *, color: bool = True) -> str:
    letters = "".join(sorted("".join(clique)))
    missing = "".join(sorted(ALPHABET - set(letters)))

    if color:
        words = " ".join(green(word) for word in clique)
        return f"{words} {gray(f'[{letters}, missing {missing}]')}"

    return f"{' '.join(clique)} [{letters}, missing {missing}]"
