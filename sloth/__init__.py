"""
SLOTH: Slow-timed hash permutation based on modular square roots.

A Python implementation of the square-root permutation at the core of
the SLOTH proof-of-sequential-work construction:
"A random zoo: sloth, unicorn, and trx" by Arjen K. Lenstra and
Benjamin Wesolowski (2015)

Reference: https://eprint.iacr.org/2015/366

Modules:
- params: Configuration (block size, prime size, primality rounds)
- block: Block <-> integer codec (least significant byte first)
- primes: Probabilistic primality test and prime generation
- permutation: Forward (encode) and inverse (decode) square-root permutation
- pipeline: End-to-end round trip on a random block
"""

from .params import Params, BLOCK_BYTE_SIZE, PRIME_BYTE_SIZE, PRIME_CHECK_ROUNDS
from .block import encode_block, decode_block, from_block, to_block, random_block
from .primes import (
    is_probable_prime,
    next_prime,
    prev_prime,
    gen_largest_prime,
    derive_exponent,
)
from .permutation import legendre, sqrt_permutation, inverse_sqrt, SqrtPermutation
from .pipeline import RoundTrip, run

__version__ = "0.1.0"
__all__ = [
    "Params",
    "BLOCK_BYTE_SIZE",
    "PRIME_BYTE_SIZE",
    "PRIME_CHECK_ROUNDS",
    "encode_block",
    "decode_block",
    "from_block",
    "to_block",
    "random_block",
    "is_probable_prime",
    "next_prime",
    "prev_prime",
    "gen_largest_prime",
    "derive_exponent",
    "legendre",
    "sqrt_permutation",
    "inverse_sqrt",
    "SqrtPermutation",
    "RoundTrip",
    "run",
]
