"""Benchmark lexing a long argument vector.

Run with:
    pytest benchmarks/benchmark_lexer.py -v --benchmark-only
"""

try:
    import pytest

    from argvlex import Lexer, TokenType

    def drain(lexer: Lexer) -> int:
        count = 0
        for token in lexer.tokenize():
            if token.type is not TokenType.VALUE and token.value in ("o", "j", "output"):
                lexer.get_value()
            count += 1
        return count

    @pytest.mark.benchmark(group="lexer")
    def test_benchmark_str_argv(benchmark, large_argv):
        """Benchmark a str vector, claiming values as a command layer would."""
        benchmark(lambda: drain(Lexer(large_argv)))

    @pytest.mark.benchmark(group="lexer")
    def test_benchmark_bytes_argv(benchmark, large_argv_bytes):
        """Benchmark the same vector as bytes."""
        benchmark(lambda: drain(Lexer(large_argv_bytes)))

except ImportError:
    pass  # pytest not available
