import pytest

from collbench.benchmarks.config import BenchmarkConfig, ListCommand, MapCommand, Menu, SetCommand
from collbench.benchmarks.drivers import (
    MapDriver,
    SequenceDriver,
    SetDriver,
    create_driver,
)
from collbench.containers import MAP_BACKINGS, SEQUENCE_BACKINGS, SET_BACKINGS
from collbench.timer import END_MARKER


def make_driver(plans, menu, config, timer, output_lines):
    return create_driver(plans[menu], config, timer=timer, output=output_lines.append)


def section(lines, backing):
    start = lines.index(f"Start ({backing}):")
    end = lines.index(END_MARKER, start)
    return lines[start + 1 : end]


class TestCreateDriver:
    @pytest.mark.parametrize(
        "menu,driver_type",
        [(Menu.LIST, SequenceDriver), (Menu.MAP, MapDriver), (Menu.SET, SetDriver)],
    )
    def test_driver_per_menu(self, plans, small_config, menu, driver_type):
        assert isinstance(create_driver(plans[menu], small_config), driver_type)


class TestSequenceDriver:
    @pytest.mark.parametrize("command", list(ListCommand))
    def test_every_command_times_each_backing(self, plans, small_config, timer, output_lines, command):
        driver = make_driver(plans, Menu.LIST, small_config, timer, output_lines)
        results = driver.run(command)
        assert [r.label for r in results] == list(SEQUENCE_BACKINGS)
        assert all(r.elapsed_ms >= 0 for r in results)

    def test_seed_size(self, plans, small_config, timer, output_lines):
        driver = make_driver(plans, Menu.LIST, small_config, timer, output_lines)
        collection = driver.seed(SEQUENCE_BACKINGS["LinkedList"])
        assert len(collection) == 12

    def test_get_prints_middle_person(self, plans, small_config, timer, output_lines):
        driver = make_driver(plans, Menu.LIST, small_config, timer, output_lines)
        driver.run(ListCommand.GET)
        assert output_lines.count("Person: Name 3") == 3

    def test_add_middle_inserts_new_person(self, plans, small_config, timer, output_lines):
        driver = make_driver(plans, Menu.LIST, small_config, timer, output_lines)
        backing = SEQUENCE_BACKINGS["ArrayList"]
        driver.add_middle_item(backing)
        driver.remove_end_item(backing)
        assert output_lines.count(END_MARKER) == 2


class TestMapDriver:
    @pytest.mark.parametrize("command", [MapCommand.FILL, MapCommand.GET, MapCommand.REMOVE])
    def test_timed_commands(self, plans, small_config, timer, output_lines, command):
        driver = make_driver(plans, Menu.MAP, small_config, timer, output_lines)
        results = driver.run(command)
        assert [r.label for r in results] == list(MAP_BACKINGS)

    def test_seed_keys(self, plans, small_config, timer, output_lines):
        driver = make_driver(plans, Menu.MAP, small_config, timer, output_lines)
        collection = driver.seed(MAP_BACKINGS["HashMap"])
        assert len(collection) == 11
        assert collection.get("11").name == "Name - 11"
        assert collection.get("12") is None

    def test_show_order_samples_keys(self, plans, small_config, timer, output_lines):
        driver = make_driver(plans, Menu.MAP, small_config, timer, output_lines)
        assert driver.run(MapCommand.SHOW_ORDER) == []

        assert section(output_lines, "LinkedHashMap") == ["key: 1", "key: 2", "key: 3", "key: 4"]
        assert section(output_lines, "TreeMap") == ["key: 1", "key: 10", "key: 11", "key: 2"]
        assert len(section(output_lines, "HashMap")) == small_config.sample_count + 1


class TestSetDriver:
    @pytest.mark.parametrize("command", [SetCommand.FILL, SetCommand.REMOVE])
    def test_timed_commands(self, plans, small_config, timer, output_lines, command):
        driver = make_driver(plans, Menu.SET, small_config, timer, output_lines)
        results = driver.run(command)
        assert [r.label for r in results] == list(SET_BACKINGS)

    def test_seed_keeps_all_ids(self, plans, small_config, timer, output_lines):
        driver = make_driver(plans, Menu.SET, small_config, timer, output_lines)
        collection = driver.seed(SET_BACKINGS["TreeSet"])
        assert len(collection) == 33

    def test_show_order_samples_names(self, plans, small_config, timer, output_lines):
        driver = make_driver(plans, Menu.SET, small_config, timer, output_lines)
        driver.run(SetCommand.SHOW_ORDER)

        assert section(output_lines, "LinkedHashSet") == [
            "name: Name - 1",
            "name: Name - 1",
            "name: Name - 1",
            "name: Name - 2",
        ]
        assert section(output_lines, "TreeSet") == [
            "name: Name - 1",
            "name: Name - 1",
            "name: Name - 1",
            "name: Name - 10",
        ]

    def test_sample_count_zero_prints_one(self, plans, timer, output_lines):
        driver = make_driver(
            plans, Menu.SET, BenchmarkConfig(record_volume=2, sample_count=0), timer, output_lines
        )
        driver.show_order(SET_BACKINGS["HashSet"])
        assert len(section(output_lines, "HashSet")) == 1
