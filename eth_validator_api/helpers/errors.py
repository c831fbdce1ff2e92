"""Error taxonomy shared by the beacon/RPC clients, services and HTTP layer."""


class ValidatorAPIError(Exception):
    """Base error. Carries the HTTP status the boundary layer responds with."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ValidatorAPIError):
    """Invalid caller input, e.g. a negative or non-numeric slot."""

    status_code = 400


class TransportError(ValidatorAPIError):
    """Upstream unreachable, timed out or answered with a failure."""


class UpstreamStatusError(TransportError):
    """Upstream answered with a non-success HTTP status."""

    def __init__(self, message: str, upstream_status: int) -> None:
        super().__init__(message)
        self.upstream_status = upstream_status


class NotFoundError(UpstreamStatusError):
    """Requested resource (block, slot) does not exist upstream."""

    def __init__(self, message: str, upstream_status: int = 404) -> None:
        super().__init__(message, upstream_status)


class ParseError(ValidatorAPIError):
    """Malformed JSON payload or hex-encoded numeric field."""


class CalculationError(ValidatorAPIError):
    """Reward arithmetic cannot be carried out on the fetched inputs."""


class RewardPipelineError(ValidatorAPIError):
    """A block reward step failed. ``step`` names the failing stage."""

    def __init__(self, step: str, message: str) -> None:
        super().__init__(message)
        self.step = step


class SyncDutiesError(ValidatorAPIError):
    """Sync duties lookup failed with a mapped or proxied status."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        super().__init__(message)
        self.status_code = status_code


__all__ = [
    "CalculationError",
    "NotFoundError",
    "ParseError",
    "RewardPipelineError",
    "SyncDutiesError",
    "TransportError",
    "UpstreamStatusError",
    "ValidationError",
    "ValidatorAPIError",
]
