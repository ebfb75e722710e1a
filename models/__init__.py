from models.spot import Spot
from models.floor import Floor
from models.vehicle import Vehicle, InvalidRequest, required_units_for
from models.allocation import (
    AllocationStatus, InternalConsistencyError, Location,
    ParkResult, ReleaseResult, LocateResult,
)
from models.audit import AuditEntry
