"""
Status descriptors carried by API results.

A StatusDescriptor is a plain value: a numeric code plus a human-readable label.
The `Status` class holds the fixed set of statuses the service knows about; code
that needs a one-off status can still build its own descriptor.
"""

from pydantic import BaseModel, ConfigDict


class StatusDescriptor(BaseModel):
    """Immutable (code, label) pair. Equal descriptors compare and hash equal."""

    model_config = ConfigDict(frozen=True)

    code: int
    label: str

    def __str__(self) -> str:
        return f"{self.code} {self.label}"


class Status:
    """
    Known statuses.

    - 0 is success
    - 1xxx are warnings (the operation went through, with caveats)
    - 4xxx are client-side failures
    - 5xxx are server-side failures
    """

    OK = StatusDescriptor(code=0, label="Operation succeeded")

    WARN_PARTIAL_SUCCESS = StatusDescriptor(code=1001, label="Partially succeeded")
    WARN_PERFORMANCE_ISSUE = StatusDescriptor(code=1002, label="Performance issue detected")

    FAIL_INVALID_PARAM = StatusDescriptor(code=4000, label="Request parameters do not match")
    FAIL_INVALID_TOKEN = StatusDescriptor(code=4001, label="Token invalid or expired")
    FAIL_NO_PERMISSION = StatusDescriptor(code=4003, label="No permission to perform this operation")
    FAIL_NOT_FOUND = StatusDescriptor(code=4004, label="Requested resource not found")
    FAIL_VALIDATION = StatusDescriptor(code=4005, label="Data validation failed")
    FAIL_OPERATION = StatusDescriptor(code=4006, label="Operation failed")
    FAIL_REQUEST_TIMEOUT = StatusDescriptor(code=4008, label="Request timed out")

    FAIL_EXCEPTION = StatusDescriptor(code=5000, label="System error")
    FAIL_SERVICE_UNAVAILABLE = StatusDescriptor(code=5003, label="Service unavailable")

    @classmethod
    def members(cls) -> list[StatusDescriptor]:
        """All known descriptors, in declaration order."""
        return [v for v in vars(cls).values() if isinstance(v, StatusDescriptor)]

    @classmethod
    def by_code(cls, code: int) -> StatusDescriptor | None:
        for member in cls.members():
            if member.code == code:
                return member
        return None


__all__ = ["StatusDescriptor", "Status"]
