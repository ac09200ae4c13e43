from .attraction_mapper import IAttractionMapper
from .road_network_repository import IRoadNetworkRepository

__all__ = [
    "IAttractionMapper",
    "IRoadNetworkRepository",
]
