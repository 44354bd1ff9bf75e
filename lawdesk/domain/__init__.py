"""Domain layer: enums, exceptions, value objects, permission catalogue."""
