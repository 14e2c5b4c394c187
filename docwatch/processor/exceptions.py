class IngestionError(Exception):
    """Base exception for errors that abort a whole run."""


class ConfigurationError(IngestionError):
    """Raised when a required property is missing."""


class OutputLocationError(IngestionError):
    """Raised when the output folder or the Extraction Log cannot be found or created."""
