"""Exceptions raised while encoding blobs and building sidecars."""

from __future__ import annotations

from blob_codec.protocol.constants import MAX_BLOB_DATA_SIZE


class BlobError(Exception):
    """Base class for blob encoding errors."""


class InputTooLarge(BlobError):
    """Too much data to encode in one blob."""

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(
            f"too much data to encode in one blob: len={length} (max {MAX_BLOB_DATA_SIZE})"
        )


class DataDidNotFit(BlobError):
    """Packing finished all rounds with input left over."""

    def __init__(self, read_offset: int, data_len: int) -> None:
        self.read_offset = read_offset
        self.data_len = data_len
        super().__init__(
            f"data did not fit in blob: read_offset={read_offset}, data_len={data_len}"
        )


class CommitmentError(BlobError):
    """The commitment engine failed to build a sidecar."""

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(f"KZG error: {cause}")


class ThreadPanicked(BlobError):
    """An offloaded job terminated abnormally on a worker thread."""

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(f"thread panicked: {type(cause).__name__}: {cause}")


class InvalidBlobSize(BlobError):
    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"invalid blob size: len={length}")


class InvalidFieldElement(BlobError):
    """A field element's first byte has one of its top two bits set."""

    def __init__(self, index: int, value: int) -> None:
        self.index = index
        self.value = value
        super().__init__(f"invalid field element {index}: first byte {value:#04x}")


class UnsupportedVersion(BlobError):
    def __init__(self, version: int) -> None:
        self.version = version
        super().__init__(f"unsupported blob encoding version: {version}")


class InvalidLength(BlobError):
    """The length prefix declares more data than one blob can carry."""

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"invalid length prefix: {length} > {MAX_BLOB_DATA_SIZE}")
