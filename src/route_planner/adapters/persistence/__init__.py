from .csv_attraction_mapper import CsvAttractionMapper
from .csv_road_network_repository import CsvRoadNetworkRepository

__all__ = [
    "CsvAttractionMapper",
    "CsvRoadNetworkRepository",
]
