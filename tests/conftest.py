import os

os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from collbench.benchmarks.config import BenchmarkConfig, default_plans
from collbench.timer import Timer


@pytest.fixture
def small_config():
    return BenchmarkConfig(record_volume=4, sample_count=3)


@pytest.fixture
def plans():
    return default_plans()


@pytest.fixture
def output_lines():
    return []


@pytest.fixture
def timer(output_lines):
    return Timer(output_lines.append)
