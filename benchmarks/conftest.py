"""pytest-benchmark configuration for tgaminer benchmarks."""

from pathlib import Path

import pytest


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest-benchmark with custom settings."""
    # Set benchmark defaults
    config.option.benchmark_min_rounds = 5
    config.option.benchmark_warmup = True
    config.option.benchmark_warmup_iterations = 3

    # Create benchmarks directory for JSON exports
    benchmark_dir = Path(__file__).parent.parent / ".benchmarks"
    benchmark_dir.mkdir(exist_ok=True)
