"""Default configuration constants for the Parking Allocation Platform."""

# Vehicle categories and the number of contiguous spots each one needs
VEHICLE_CATEGORIES = {
    "Bike": 1,
    "Car": 1,
    "Truck": 2,
}

# Lot dimensions used when nothing else is supplied (dashboard start-up)
DEFAULT_FLOOR_COUNT = 3
DEFAULT_SPOTS_PER_FLOOR = 10

# Floor saturation alert threshold
FLOOR_SATURATION_THRESHOLD = 0.90

# Layout file schema
LAYOUT_FLOOR_COLUMN = "Floor Number"
LAYOUT_SPOTS_COLUMN = "Total Spots"
LAYOUT_REQUIRED_COLUMNS = [LAYOUT_FLOOR_COLUMN, LAYOUT_SPOTS_COLUMN]

# Command interface
COMMAND_USAGE = {
    "park_vehicle": "park_vehicle <license_plate> <vehicle_type>",
    "remove_vehicle": "remove_vehicle <license_plate>",
    "available_spots": "available_spots",
    "is_full": "is_full",
    "find_vehicle": "find_vehicle <license_plate>",
    "help": "help",
    "exit": "exit",
}
DEFAULT_LOG_LEVEL = "WARNING"

# Audit actions
AUDIT_ACTIONS = ["park", "release"]
AUDIT_LOG_LIMIT = 10_000  # entries kept per lot; None keeps everything
