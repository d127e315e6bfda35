"""Domain value objects."""

from zipbatch.domain.value_objects.batch_limits import BatchLimits
from zipbatch.domain.value_objects.batch_name import name_for

__all__ = [
    "BatchLimits",
    "name_for",
]
