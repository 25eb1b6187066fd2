from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Callable, Iterable, Optional, TextIO

from .benchmarks.charts import render_timing_charts
from .benchmarks.collector import BenchmarkResultCollector
from .benchmarks.config import (
    DEFAULT_RECORD_VOLUME,
    DEFAULT_SAMPLE_COUNT,
    BenchmarkConfig,
    Menu,
    MenuPlan,
    default_plans,
)
from .benchmarks.drivers import BenchmarkDriver, create_driver
from .containers import CollectionError

LOGGER = logging.getLogger("collbench.main")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Collection performance demo")
    parser.add_argument(
        "--menu",
        choices=[menu.value for menu in Menu],
        default=os.environ.get("COLLBENCH_MENU", Menu.LIST.value),
        help="Container family to benchmark",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=os.environ.get("COLLBENCH_COUNT", str(DEFAULT_RECORD_VOLUME)),
        help="Record volume; containers are seeded with three times this many records",
    )
    parser.add_argument(
        "--sample-count",
        type=int,
        default=os.environ.get("COLLBENCH_SAMPLE_COUNT", str(DEFAULT_SAMPLE_COUNT)),
        help="Number of keys shown by the collection order tests (one extra is printed)",
    )
    parser.add_argument(
        "--output-dir",
        default=os.environ.get("COLLBENCH_OUTPUT_DIR"),
        help="Directory for the timings CSV and charts written when input ends",
    )
    parser.add_argument(
        "--plan",
        action="store_true",
        help="Only print the selector table for the menu without reading input",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get("COLLBENCH_LOG_LEVEL", "WARNING"),
        help="Logging level",
    )
    args = parser.parse_args(argv)
    if args.menu not in {menu.value for menu in Menu}:
        parser.error(f"invalid menu {args.menu!r}")
    try:
        args.config = BenchmarkConfig(record_volume=args.count, sample_count=args.sample_count)
    except ValueError as exc:
        parser.error(str(exc))
    return args


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def parse_selector(line: str) -> Optional[int]:
    try:
        return int(line.strip())
    except ValueError:
        return None


def run_loop(
    plan: MenuPlan,
    driver: BenchmarkDriver,
    collector: BenchmarkResultCollector,
    lines: Iterable[str],
    output: Callable[[str], None],
) -> None:
    """Prompt, read a selector per line and dispatch until the input runs out."""
    output(plan.prompt)
    for line in lines:
        command = plan.lookup(parse_selector(line))
        if command is not None:
            try:
                results = driver.run(command)
            except CollectionError:
                LOGGER.exception("%s test %s failed", plan.menu.value, command.name)
            else:
                for result in results:
                    collector.record(
                        plan.menu.value,
                        command.name.lower(),
                        driver.config.seeded_records,
                        result,
                    )
        output(plan.prompt)


def export_results(collector: BenchmarkResultCollector, menu: str, output_dir: Path) -> None:
    if not len(collector):
        LOGGER.info("No timings collected; nothing to export")
        return
    collector.write_csv(output_dir / f"{menu}_timings.csv")
    render_timing_charts(collector.build_dataframe(), menu, output_dir)


def run(
    argv: list[str] | None = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)

    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    def output(line: str) -> None:
        print(line, file=stdout, flush=True)

    plan = default_plans()[Menu(args.menu)]
    if args.plan:
        _print_plan(plan, output)
        return 0

    LOGGER.info(
        "Menu %s, record volume %d (%d seeded), sample count %d",
        plan.menu.value,
        args.config.record_volume,
        args.config.seeded_records,
        args.config.sample_count,
    )

    driver = create_driver(plan, args.config, output=output)
    collector = BenchmarkResultCollector()
    run_loop(plan, driver, collector, stdin, output)

    LOGGER.info("Timings collected per test: %s", collector.summaries() or "<none>")
    if args.output_dir:
        export_results(collector, plan.menu.value, Path(args.output_dir))
    return 0


def _print_plan(plan: MenuPlan, output: Callable[[str], None]) -> None:
    output(f"Menu: {plan.menu.value}")
    for command in plan:
        output(f"  {command.value} - {command.name.lower()}")
        for backing in plan.backings_for(command):
            traits = [f"order={backing.ordering}"]
            if backing.thread_safe:
                traits.append("thread-safe")
            if not backing.allows_null:
                traits.append("no-null-keys")
            output(f"      {backing.name} ({', '.join(traits)}): {backing.description}")


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
