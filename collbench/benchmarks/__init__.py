"""
Benchmark drivers for the collection facades.

This package holds the static menu plans, the per-family drivers that seed a
facade and time one operation per backing, and the helpers that export the
collected timings as CSV files and charts.
"""

from .config import BenchmarkConfig, Menu, default_plans
from .drivers import create_driver

__all__ = ["BenchmarkConfig", "Menu", "create_driver", "default_plans"]
