"""City generation package: roads, zones, buildings and sensors from one seed."""
