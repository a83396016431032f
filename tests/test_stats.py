from smartcity.citygen.stats.city_stats import CityStats


def test_small_layout_stats(small_layout):
    stats = CityStats.from_layout(small_layout)
    assert stats.total_buildings == 5
    assert stats.residential == 3
    assert stats.commercial == 1
    assert stats.vertical_gardens == 2
    assert stats.estimated_population == 3 * 20 + 1 * 10
    assert stats.buildings_by_zone == {
        'residential': 3, 'commercial': 1, 'industrial': 1, 'civic': 0, 'green': 0,
    }
    assert sum(stats.sensors_by_type.values()) == 0


def test_generated_layout_stats(layout):
    stats = CityStats.from_layout(layout)
    assert stats.total_buildings == len(layout.buildings)
    assert sum(stats.buildings_by_zone.values()) == len(layout.buildings)
    assert sum(stats.sensors_by_type.values()) == 50
    assert stats.vertical_gardens >= 1
    assert stats.to_dict()['estimated_population'] == stats.residential * 20 + stats.commercial * 10
