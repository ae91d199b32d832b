"""Protocol layer: blob geometry and encoding constants."""

from blob_codec.protocol.constants import (
    BLS_MODULUS,
    BYTES_PER_BLOB,
    BYTES_PER_FIELD_ELEMENT,
    ENCODING_VERSION,
    FIELD_ELEMENTS_PER_BLOB,
    MAX_BLOB_DATA_SIZE,
    ROUNDS,
)

__all__ = [
    "BLS_MODULUS",
    "BYTES_PER_BLOB",
    "BYTES_PER_FIELD_ELEMENT",
    "ENCODING_VERSION",
    "FIELD_ELEMENTS_PER_BLOB",
    "MAX_BLOB_DATA_SIZE",
    "ROUNDS",
]
