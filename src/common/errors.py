class ExportError(Exception):
    """Base class for failures of one hourly export run."""


class ConfigError(ExportError):
    pass


class TriggerError(ExportError):
    pass


class FetchError(ExportError):
    """Building the Awair request, the transport, or decoding its response failed."""


class EncodeError(ExportError):
    pass


class PublishError(ExportError):
    """The S3 upload failed."""
