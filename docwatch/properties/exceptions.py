class PropertyStoreError(Exception):
    """Raised when the durable property store cannot be read or written."""
