"""Blob layout constants for EIP-4844 blob transactions."""

# Field element and blob geometry
BYTES_PER_FIELD_ELEMENT = 32
FIELD_ELEMENTS_PER_BLOB = 4096
BYTES_PER_BLOB = BYTES_PER_FIELD_ELEMENT * FIELD_ELEMENTS_PER_BLOB  # 131072

# BLS12-381 scalar field modulus; every field element must stay below it
BLS_MODULUS = 0x73EDA753299D7D483339D80809A1D80553BDA402FFFE5BFEFFFFFFFF00000001

# Encoding layout
ENCODING_VERSION = 0
CARRIER_SIZE = BYTES_PER_FIELD_ELEMENT - 1  # 31 bytes after each header byte
HEADER_SIZE = 4  # version byte + 3-byte big-endian length
ROUNDS = FIELD_ELEMENTS_PER_BLOB // 4  # 4 field elements per round

# 4 carriers of 31 bytes plus 3 smuggled header bytes per round, less the header
MAX_BLOB_DATA_SIZE = (4 * CARRIER_SIZE + 3) * ROUNDS - HEADER_SIZE  # 130044
MAX_LENGTH_PREFIX = (1 << 24) - 1

# Bit masks for the field element header byte
LOW_SIX_BITS = 0b0011_1111
HIGH_TWO_BITS = 0b1100_0000
LOW_NIBBLE = 0b0000_1111
HIGH_NIBBLE = 0b1111_0000

# KZG sidecar sizes
BYTES_PER_COMMITMENT = 48
BYTES_PER_PROOF = 48
VERSIONED_HASH_VERSION_KZG = 0x01
