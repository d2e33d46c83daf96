"""Exceptions raised by the containers in this package."""


class StructureError(Exception):
    """Base class for errors raised by the containers."""


class EmptyStructureError(StructureError, IndexError):
    """An operation needs an element but the container is empty."""


class CapacityError(StructureError):
    """A bounded container has no room left."""


class NotFoundError(StructureError, LookupError):
    """The requested value is not held by the container."""