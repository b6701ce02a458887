"""Custom exceptions for chest atlas conversion"""


class ChestConverterError(Exception):
    """Base exception for conversion errors"""
    pass


class AtlasDecodeError(ChestConverterError):
    """Source atlas missing, unreadable or not a valid image"""

    def __init__(self, path, reason: str = ""):
        self.path = path
        message = f"Could not read atlas: {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class AtlasEncodeError(ChestConverterError):
    """Destination atlas could not be written"""

    def __init__(self, path, reason: str = ""):
        self.path = path
        message = f"Could not write atlas: {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class AtlasGeometryError(ChestConverterError):
    """A copy rectangle falls outside the bounds of its image"""
    pass
