"""
Constants and shared data for homestead services.
"""
from typing import Dict, List

# Births within this many days (inclusive) mark the mother as lactating
LACTATION_WINDOW_DAYS = 60

INVENTORY_CATEGORIES: List[str] = [
    "Feed",
    "Tools",
    "Seeds",
    "Fertilizer",
    "Medications",
    "Equipment Parts",
    "Cleaning Supplies",
    "Building Materials",
    "Other",
]

INVENTORY_UNITS: List[str] = [
    "lbs",
    "kg",
    "bags",
    "gallons",
    "liters",
    "pieces",
    "boxes",
    "bales",
    "units",
]

# Sort key prefixes for each record type stored in the user's partition
RECORD_PREFIXES: Dict[str, str] = {
    "property": "PROPERTY",
    "animal": "ANIMAL",
    "breeding_event": "BREEDING",
    "inventory_item": "INVENTORY",
    "financial_category": "FIN_CATEGORY",
    "transaction": "TRANSACTION",
    "infrastructure_project": "INFRA",
    "task": "TASK",
}

# Calendar months (1-12) mapped to northern-hemisphere seasons
SEASONS_BY_MONTH: Dict[int, str] = {
    3: "Spring", 4: "Spring", 5: "Spring",
    6: "Summer", 7: "Summer", 8: "Summer",
    9: "Fall", 10: "Fall", 11: "Fall",
    12: "Winter", 1: "Winter", 2: "Winter",
}
