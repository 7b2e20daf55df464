import kopf


class ContractViolationError(kopf.PermanentError):
    """A resolver precondition was not met by the caller.

    This is a programming error in the calling handler, never a condition of
    the cluster, so it is raised as a permanent error and is not retried.
    """


def require_present(value, what: str):
    """Return value, raising ContractViolationError if it is None."""
    if value is None:
        raise ContractViolationError(f"{what} is required but was not supplied")
    return value
