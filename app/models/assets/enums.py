"""Asset domain enumerations."""

from enum import StrEnum


class Category(StrEnum):
    """Asset categories."""

    IT_EQUIPMENT = "IT_EQUIPMENT"
    NETWORK_HARDWARE = "NETWORK_HARDWARE"
    OFFICE_FURNITURE = "OFFICE_FURNITURE"
    VEHICLE = "VEHICLE"
    POWER_ASSET = "POWER_ASSET"
    TOOLS = "TOOLS"
    HEAVY_MACHINERY = "HEAVY_MACHINERY"
    LAB_EQUIPMENT = "LAB_EQUIPMENT"
    SAFETY_EQUIPMENT = "SAFETY_EQUIPMENT"
    AV_EQUIPMENT = "AV_EQUIPMENT"
    SOFTWARE_LICENSE = "SOFTWARE_LICENSE"
    CONSUMABLE = "CONSUMABLE"
    BUILDING_INFRA = "BUILDING_INFRA"


class AvailableStatus(StrEnum):
    """Asset availability status."""

    AVAILABLE = "AVAILABLE"
    RESERVED = "RESERVED"
    IN_USE = "IN_USE"
    AWAITING_DEPLOY = "AWAITING_DEPLOY"
    MAINTENANCE = "MAINTENANCE"
    REPAIR_REQUIRED = "REPAIR_REQUIRED"
    OUT_FOR_SERVICE = "OUT_FOR_SERVICE"
    AWAITING_RETURN = "AWAITING_RETURN"
    RETIRED = "RETIRED"
    DISPOSED = "DISPOSED"


class Condition(StrEnum):
    """Physical condition of an asset."""

    NEW = "NEW"
    LIKE_NEW = "LIKE_NEW"
    GOOD = "GOOD"
    FAIR = "FAIR"
    POOR = "POOR"
    DAMAGED = "DAMAGED"
    SCRAP = "SCRAP"


class EventType(StrEnum):
    """Asset audit trail event types."""

    CREATED = "CREATED"
    STATUS_CHANGED = "STATUS_CHANGED"
    CONDITION_CHANGED = "CONDITION_CHANGED"
    ASSIGNED = "ASSIGNED"
    RETURNED = "RETURNED"
    LOCATION_CHANGED = "LOCATION_CHANGED"
    RETIRED = "RETIRED"
    DISPOSED = "DISPOSED"


# Corrective issue type (as opposed to preventive maintenance events)
BREAKDOWN = "BREAKDOWN"
