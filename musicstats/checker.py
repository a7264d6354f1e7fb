"""Compare query output files with expected ones and report the results."""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass, field
from itertools import zip_longest
from pathlib import Path
from typing import Iterable, Optional, Sequence

QUERY_TYPES = range(1, 7)
OUTPUT_NAME = "command{}_output.txt"
DEFAULT_RESULTS_DIR = "resultados"

_MISSING = object()


def _clean(line: str) -> str:
    """Cut a line at its first carriage return or newline."""
    for index, char in enumerate(line):
        if char in "\r\n":
            return line[:index]
    return line


def compare_lines(result_lines: Iterable[str], expected_lines: Iterable[str]) -> int:
    """Return 0 if the lines match, else the 1-based number of the first difference.

    Line endings are ignored. When one side runs out first, the number of the
    first line that only the other side has is returned.
    """
    pairs = zip_longest(result_lines, expected_lines, fillvalue=_MISSING)
    for number, (result, expected) in enumerate(pairs, start=1):
        if result is _MISSING or expected is _MISSING:
            return number
        if _clean(result) != _clean(expected):
            return number
    return 0


def compare_files(result_path: str | Path, expected_path: str | Path) -> int:
    """Compare two text files line by line; see :func:`compare_lines`."""
    with open(result_path, encoding="utf-8", newline="") as result, open(
        expected_path, encoding="utf-8", newline=""
    ) as expected:
        return compare_lines(result, expected)


@dataclass(frozen=True)
class QueryOutcome:
    """The check of one query's output.

    ``line_diff`` is 0 when the output matches, the first differing line
    otherwise, and None when an output file is missing.
    """

    number: int
    query_type: int
    line_diff: Optional[int]

    @property
    def ok(self) -> bool:
        return self.line_diff == 0


@dataclass
class CheckReport:
    """Outcomes of every checked query, in the order of the queries file."""

    outcomes: list[QueryOutcome] = field(default_factory=list)

    def total(self, query_type: int) -> int:
        return sum(1 for o in self.outcomes if o.query_type == query_type)

    def correct(self, query_type: int) -> int:
        return sum(1 for o in self.outcomes if o.query_type == query_type and o.ok)

    def failures(self, query_type: int) -> list[QueryOutcome]:
        return [o for o in self.outcomes if o.query_type == query_type and not o.ok]


def _query_type(line: str) -> Optional[int]:
    if line[:1].isdigit() and int(line[0]) in QUERY_TYPES:
        return int(line[0])
    return None


def check_results(
    queries_file: str | Path, results_dir: str | Path, expected_dir: str | Path
) -> CheckReport:
    """Check the output of every query listed in *queries_file*.

    The n-th line's output is ``command<n>_output.txt`` in both directories.
    Lines that do not start with a known query number are skipped but still
    counted for numbering.
    """
    results_dir, expected_dir = Path(results_dir), Path(expected_dir)
    report = CheckReport()
    with open(queries_file, encoding="utf-8") as queries:
        for number, line in enumerate(queries, start=1):
            query_type = _query_type(line)
            if query_type is None:
                continue
            name = OUTPUT_NAME.format(number)
            try:
                diff: Optional[int] = compare_files(
                    results_dir / name, expected_dir / name
                )
            except OSError:
                diff = None
            report.outcomes.append(QueryOutcome(number, query_type, diff))
    return report


def format_report(report: CheckReport) -> str:
    """Render the report as text, one section per query type."""
    lines = ["======================== Resultados ========================"]
    for query_type in QUERY_TYPES:
        lines.append(
            f"Q{query_type}: {report.correct(query_type)} de "
            f"{report.total(query_type)} testes ok!"
        )
        for outcome in report.failures(query_type):
            if outcome.line_diff is None:
                lines.append(f"Query {outcome.number}: Arquivo não encontrado")
            else:
                lines.append(
                    f"Query {outcome.number}: {outcome.line_diff} linhas diferentes"
                )
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Check query outputs against expected files and print a report."""
    parser = argparse.ArgumentParser(
        description="Compare query outputs with expected outputs."
    )
    parser.add_argument("queries_file")
    parser.add_argument("expected_dir")
    parser.add_argument("--results-dir", default=DEFAULT_RESULTS_DIR)
    args = parser.parse_args(argv)

    start = time.perf_counter()
    try:
        report = check_results(args.queries_file, args.results_dir, args.expected_dir)
    except OSError:
        print(
            f"Erro ao abrir o arquivo de queries: {args.queries_file}", file=sys.stderr
        )
        return 1
    print(format_report(report))
    elapsed = time.perf_counter() - start
    print("===================== Relatório =====================")
    print(f"Tempo total do programa: {elapsed:.4f} segundos")
    return 0