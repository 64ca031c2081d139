"""
Parameters for the SLOTH square-root permutation.

Key parameters:
- block_size: Size of a data block in bytes (default 32, i.e. 256 bits)
- prime_size: Size of the prime modulus in bytes (default 32)
- prime_check_rounds: Miller-Rabin rounds per primality test (default 25)

Tradeoffs:
- Encode cost grows with prime_size (one exponentiation by (p+1)/4)
- Decode is a single modular squaring, so the encode/decode gap widens
  with the bit length of the prime
- prime_check_rounds bounds the false-positive rate of prime generation
  at 4^{-rounds}
"""

from dataclasses import dataclass

BLOCK_BYTE_SIZE = 32  # 256-bit blocks
PRIME_BYTE_SIZE = 32  # 256-bit prime
PRIME_CHECK_ROUNDS = 25  # same round count as pysloth
BYTE_ORDER = "little"  # least significant byte first


@dataclass(frozen=True)
class Params:
    """Parameters for the SLOTH permutation."""

    block_size: int = BLOCK_BYTE_SIZE  # Bytes per block
    prime_size: int = PRIME_BYTE_SIZE  # Bytes the prime must fit into
    prime_check_rounds: int = PRIME_CHECK_ROUNDS  # Miller-Rabin rounds

    def __post_init__(self):
        # Validate parameters
        if self.block_size < 1:
            raise ValueError("block_size must be at least 1")
        if self.prime_size < 1:
            raise ValueError("prime_size must be at least 1")
        if self.prime_check_rounds < 1:
            raise ValueError("prime_check_rounds must be at least 1")

        # Every permutation value is < prime, so it must fit back into a block
        if self.prime_size > self.block_size:
            raise ValueError("prime_size must not exceed block_size")

    @property
    def block_bits(self) -> int:
        """Number of bits in a block."""
        return self.block_size * 8

    @property
    def prime_bits(self) -> int:
        """Maximum number of bits in the prime."""
        return self.prime_size * 8

    @property
    def bound(self) -> int:
        """Largest value the prime may take: 2^(8 * prime_size) - 1."""
        return (1 << self.prime_bits) - 1

    def __repr__(self) -> str:
        return (
            f"Params(block_size={self.block_size}, block_bits={self.block_bits}, "
            f"prime_size={self.prime_size}, prime_bits={self.prime_bits}, "
            f"bound=2^{self.prime_bits}-1, "
            f"prime_check_rounds={self.prime_check_rounds})"
        )
