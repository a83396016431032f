import pytest

from smartcity.citygen.city.city_generator import CityGenerator
from smartcity.citygen.city.city_layout import CityLayout
from smartcity.citygen.dataclass import Bounds, CityConfig, Zone, ZoneType
from smartcity.config import Config
from smartcity.utils.logger import Logger
from tests.helpers import make_building


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    Logger.configure()


@pytest.fixture
def quiet_config():
    return Config.from_dict({'logging': {'console': False}})


@pytest.fixture
def city_config():
    return CityConfig(seed=12345, width=2000, height=2000, population=10000)


@pytest.fixture
def generator(city_config, quiet_config):
    gen = CityGenerator(city_config, quiet_config)
    gen.generate()
    return gen


@pytest.fixture
def layout(generator):
    return generator.layout


@pytest.fixture
def small_layout():
    """Hand-built layout with known building counts."""
    config = CityConfig(seed=1, width=800, height=800)
    zones = (
        Zone(ZoneType.RESIDENTIAL, Bounds(0, 0, 400, 400), 0.5),
        Zone(ZoneType.COMMERCIAL, Bounds(0, 400, 400, 400), 0.5),
    )
    buildings = (
        make_building('building-0', ZoneType.RESIDENTIAL, 50, 50, garden=True),
        make_building('building-1', ZoneType.RESIDENTIAL, 150, 50),
        make_building('building-2', ZoneType.RESIDENTIAL, 250, 50, garden=True),
        make_building('building-3', ZoneType.COMMERCIAL, 50, 450, height=8),
        make_building('building-4', ZoneType.INDUSTRIAL, 450, 450),
    )
    return CityLayout(config=config, zones=zones, roads=(), buildings=buildings, sensors=())
