"""Domain value objects."""

from lawdesk.domain.value_objects.core import FirmScope

__all__ = ["FirmScope"]
