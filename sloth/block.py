"""
Block codec for SLOTH.

A block is a fixed-length byte string. It is read as a base-256 integer
with the least significant byte first (byte 0 is the lowest-order byte),
so independent implementations agree bit-for-bit.
"""

import secrets

from .params import BLOCK_BYTE_SIZE, BYTE_ORDER


def encode_block(block: bytes) -> int:
    """
    Interpret a block as a non-negative integer.

    Args:
        block: Block bytes, least significant byte first

    Returns:
        Integer value of the block
    """
    return int.from_bytes(block, BYTE_ORDER)


def decode_block(value: int, size: int = BLOCK_BYTE_SIZE) -> bytes:
    """
    Write an integer into a zero-padded block.

    Args:
        value: Non-negative integer below 2^(8 * size)
        size: Block size in bytes

    Returns:
        Block of exactly `size` bytes, least significant byte first

    Raises:
        ValueError: If value is negative or does not fit into `size` bytes
    """
    if value < 0:
        raise ValueError(f"Cannot encode negative value {value} as a block")
    if value.bit_length() > size * 8:
        raise ValueError(
            f"Value needs {value.bit_length()} bits, block holds {size * 8}"
        )
    return value.to_bytes(size, BYTE_ORDER)


def random_block(size: int = BLOCK_BYTE_SIZE) -> bytes:
    """Generate a uniformly random block of `size` bytes."""
    return secrets.token_bytes(size)


# Aliases
from_block = encode_block
to_block = decode_block
