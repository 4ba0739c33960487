"""
Exception types raised by the storage and asset layers
"""


class TiendAppError(Exception):
    """Base exception for TiendApp errors"""
    pass


class StorageError(TiendAppError):
    """The embedded store failed to complete an operation"""
    pass


class SchemaVersionError(StorageError):
    """On-disk schema version does not match the configured one"""

    def __init__(self, found: int, expected: int):
        super().__init__(
            f"Database schema version {found} does not match expected version {expected}"
        )
        self.found = found
        self.expected = expected


class AssetError(TiendAppError):
    """A bundled asset is missing or malformed"""
    pass
