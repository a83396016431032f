from smartcity.citygen.dataclass import Bounds, ZoneType
from smartcity.utils.quadtree import QuadTree
from tests.helpers import make_building


def _tree(count=60):
    tree = QuadTree(Bounds(0, 0, 1000, 1000), max_objects=4, max_levels=5)
    buildings = []
    for i in range(count):
        b = make_building(f'building-{i}', ZoneType.GREEN, x=(i * 97) % 1000, z=(i * 53) % 1000)
        tree.insert(b.bounds, b)
        buildings.append(b)
    return tree, buildings


def test_split_happens():
    tree, _ = _tree()
    assert any(tree.nodes)
    assert len(tree) == 60


def test_retrieve_exact_matches_brute_force():
    tree, buildings = _tree()
    query = Bounds(200, 300, 250, 150)
    found = tree.retrieve_exact(query)
    expected = [b for b in buildings if query.intersects(b.bounds)]
    assert sorted(b.id for b in found) == sorted(b.id for b in expected)
    assert len(found) == len({b.id for b in found})


def test_straddling_item_is_found_once():
    tree = QuadTree(Bounds(0, 0, 100, 100), max_objects=1, max_levels=3)
    big = make_building('big', ZoneType.GREEN, x=50, z=50, width=40, depth=40)
    small = make_building('small', ZoneType.GREEN, x=10, z=10, width=2, depth=2)
    tree.insert(big.bounds, big)
    tree.insert(small.bounds, small)
    assert tree.retrieve_exact(Bounds(0, 0, 100, 100)).count(big) == 1


def test_clear():
    tree, _ = _tree()
    tree.clear()
    assert len(tree) == 0
    assert tree.retrieve(Bounds(0, 0, 1000, 1000)) == []
