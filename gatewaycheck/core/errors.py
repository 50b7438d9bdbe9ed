"""Exception types raised by the gateway checker."""


class GatewayCheckError(Exception):
    """Base class for checker errors."""


class DecodeError(GatewayCheckError):
    """A response body could not be parsed under its declared content type."""


class SuiteError(GatewayCheckError):
    """A suite definition is malformed. Aborts the whole run."""
