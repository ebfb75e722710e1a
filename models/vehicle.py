from dataclasses import dataclass
from config.defaults import VEHICLE_CATEGORIES


class InvalidRequest(ValueError):
    """Malformed request: empty occupant id or unknown vehicle category."""


def required_units_for(category: str) -> int:
    """Number of contiguous spots a vehicle category occupies."""
    try:
        return VEHICLE_CATEGORIES[category]
    except KeyError:
        raise InvalidRequest(
            f"Unknown vehicle type '{category}'. "
            f"Expected one of: {', '.join(VEHICLE_CATEGORIES)}"
        ) from None


@dataclass(frozen=True)
class Vehicle:
    occupant_id: str    # license plate, unique per parked vehicle
    category: str       # "Bike", "Car", "Truck"

    def __post_init__(self):
        if not self.occupant_id or not self.occupant_id.strip():
            raise InvalidRequest("Vehicle id cannot be empty.")
        required_units_for(self.category)

    @property
    def required_units(self) -> int:
        return required_units_for(self.category)
