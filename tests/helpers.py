from smartcity.citygen.building.building_meta import building_meta
from smartcity.citygen.dataclass import Building, Position


def make_building(building_id, zone, x=100.0, z=100.0, height=4, width=20.0, depth=20.0, garden=False):
    return Building(
        id=building_id,
        type='low-rise',
        position=Position(x, 0, z),
        rotation=0.0,
        width=width,
        depth=depth,
        height=height,
        zone=zone,
        has_vertical_garden=garden,
        meta=building_meta(zone, height),
    )
