"""Tests for vehicle requests."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from models.vehicle import Vehicle, InvalidRequest, required_units_for


class TestVehicle:
    def test_single_unit_categories(self):
        assert Vehicle("B-1", "Bike").required_units == 1
        assert Vehicle("C-1", "Car").required_units == 1

    def test_truck_needs_two(self):
        assert Vehicle("T-1", "Truck").required_units == 2

    def test_unknown_category(self):
        with pytest.raises(InvalidRequest):
            Vehicle("X-1", "Bus")

    def test_category_is_case_sensitive(self):
        with pytest.raises(InvalidRequest):
            required_units_for("car")

    def test_empty_id(self):
        with pytest.raises(InvalidRequest):
            Vehicle("", "Car")
        with pytest.raises(InvalidRequest):
            Vehicle("   ", "Car")

    def test_invalid_request_is_value_error(self):
        with pytest.raises(ValueError):
            Vehicle("X-1", "Spaceship")

    def test_is_immutable(self):
        v = Vehicle("C-1", "Car")
        with pytest.raises(AttributeError):
            v.category = "Truck"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
