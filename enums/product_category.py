from enum import Enum


class ProductCategory(str, Enum):
    LIVING_ROOM = "Living Room"
    BEDROOM = "Bedroom"
    DINING = "Dining"
    OFFICE = "Office"
    OUTDOOR = "Outdoor"
