"""Dataclass module for the city generation."""
from smartcity.citygen.dataclass.dataclass import (Bounds, Building,
                                                   BuildingMeta, CityConfig,
                                                   CivicMeta, CommercialMeta,
                                                   FacilityMeta, GeneralMeta,
                                                   Point, Position,
                                                   ResidentialMeta, Road,
                                                   RoadType, Sensor,
                                                   SensorType, Zone, ZoneType)

__all__ = [
    'Bounds', 'Building', 'BuildingMeta', 'CityConfig', 'CivicMeta', 'CommercialMeta',
    'FacilityMeta', 'GeneralMeta', 'Point', 'Position', 'ResidentialMeta', 'Road',
    'RoadType', 'Sensor', 'SensorType', 'Zone', 'ZoneType',
]
