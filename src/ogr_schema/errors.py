"""
Exceptions raised when reading layer definitions.
"""


class OgrSchemaError(Exception):
    """Base class for errors raised by ogr_schema"""


class InvalidFieldNameError(OgrSchemaError):
    """
    A field name lookup found no match.

    Attributes:
        field_name: The name that was looked up
        method_name: The GDAL function consulted for the lookup
    """

    def __init__(self, field_name: str, method_name: str):
        self.field_name = field_name
        self.method_name = method_name
        super().__init__(
            f"Invalid field name '{field_name}' (returned by {method_name})"
        )


class NullPointerError(OgrSchemaError):
    """
    A GDAL function returned a null object.

    Attributes:
        method_name: The GDAL function that returned null
        msg: Last error message reported by GDAL, possibly empty
    """

    def __init__(self, method_name: str, msg: str = ""):
        self.method_name = method_name
        self.msg = msg
        super().__init__(
            f"GDAL method '{method_name}' returned a NULL pointer. Error msg: '{msg}'"
        )


class InteriorNulError(OgrSchemaError, ValueError):
    """A string passed to GDAL contains a NUL byte and cannot be converted"""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"String contains an interior NUL byte: {value!r}")


def last_error_message() -> str:
    """Return the last error message recorded by GDAL"""
    from osgeo import gdal

    return gdal.GetLastErrorMsg()


def last_null_pointer_err(method_name: str) -> NullPointerError:
    """
    Build a NullPointerError for method_name carrying GDAL's last error message.

    Args:
        method_name: Name of the GDAL function that returned null

    Returns:
        The error, ready to raise
    """
    return NullPointerError(method_name, last_error_message())
