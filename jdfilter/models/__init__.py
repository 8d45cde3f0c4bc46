from jdfilter.models.job import JobDescriptor
from jdfilter.models.location import LocationResult

__all__ = ["JobDescriptor", "LocationResult"]
