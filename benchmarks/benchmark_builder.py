"""Benchmark fragment accumulation and case conversion.

Compares Text.append_line() against repeated string concatenation, and
measures the case converters on mixed-convention identifiers.

Run with:
    pytest benchmarks/benchmark_builder.py -v --benchmark-only
"""

import pytest

from quill import make
from quill.cases import kebab_case, pascal_case


@pytest.mark.benchmark(group="accumulate")
def test_benchmark_append_lines(benchmark, lines):
    """Benchmark building a document line by line."""

    def build():
        text = make()
        for line in lines:
            text.append_line(line)
        return text.to_string()

    result = benchmark(build)
    assert result.count("\n") == len(lines) - 1


@pytest.mark.benchmark(group="accumulate")
def test_benchmark_string_concat(benchmark, lines):
    """Baseline: naive string concatenation."""

    def build():
        out = ""
        for line in lines:
            out = f"{out}\n{line}" if out else line
        return out

    benchmark(build)


@pytest.mark.benchmark(group="cases")
def test_benchmark_kebab_case(benchmark, identifiers):
    benchmark(lambda: [kebab_case(name) for name in identifiers])


@pytest.mark.benchmark(group="cases")
def test_benchmark_pascal_case(benchmark, identifiers):
    benchmark(lambda: [pascal_case(name) for name in identifiers])
