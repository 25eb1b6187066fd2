import pytest

from collbench.benchmarks.config import (
    BenchmarkConfig,
    ListCommand,
    MapCommand,
    Menu,
    SetCommand,
)


class TestBenchmarkConfig:
    def test_defaults(self):
        config = BenchmarkConfig()
        assert config.record_volume == 1_000_000
        assert config.sample_count == 20
        assert config.seeded_records == 3_000_000
        assert config.middle_index == 500_000

    @pytest.mark.parametrize("volume", [0, -5])
    def test_rejects_non_positive_volume(self, volume):
        with pytest.raises(ValueError):
            BenchmarkConfig(record_volume=volume)

    def test_rejects_negative_sample_count(self):
        with pytest.raises(ValueError):
            BenchmarkConfig(sample_count=-1)


class TestMenuPlans:
    def test_menus_present(self, plans):
        assert set(plans) == {Menu.LIST, Menu.MAP, Menu.SET}

    def test_list_selectors(self, plans):
        plan = plans[Menu.LIST]
        assert [plan.lookup(i) for i in range(1, 6)] == list(ListCommand)
        assert plan.lookup(2) is ListCommand.GET

    def test_map_and_set_selectors(self, plans):
        assert plans[Menu.MAP].lookup(2) is MapCommand.SHOW_ORDER
        assert plans[Menu.SET].lookup(3) is SetCommand.REMOVE

    @pytest.mark.parametrize("selector", [None, 0, -1, 6, 42])
    def test_unknown_selectors(self, plans, selector):
        assert plans[Menu.LIST].lookup(selector) is None

    def test_out_of_menu_selector(self, plans):
        assert plans[Menu.SET].lookup(4) is None
        assert plans[Menu.MAP].lookup(5) is None

    def test_backings_per_command(self, plans):
        names = [b.name for b in plans[Menu.MAP].backings_for(MapCommand.GET)]
        assert names == ["HashMap", "LinkedHashMap", "TreeMap", "ConcurrentHashMap"]

    def test_prompts(self, plans):
        assert plans[Menu.LIST].prompt.startswith("Enter collection test (fill - 1, get - 2")
        assert "remove - 3" in plans[Menu.SET].prompt
