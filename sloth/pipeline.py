"""
End-to-end run of the SLOTH block pipeline.

1. Create the largest prime ≡ 3 (mod 4) fitting into prime_size bytes
2. Derive the exponent e = (prime + 1) / 4
3. Sample a random block ("plaintext")
4. Encode it with the square-root permutation ("ciphertext")
5. Decode it back with the inverse
6. Verify that the block survived unchanged
"""

import logging
import secrets
from dataclasses import dataclass
from typing import Optional

from .block import decode_block, encode_block
from .params import Params
from .permutation import inverse_sqrt, sqrt_permutation
from .primes import derive_exponent, gen_largest_prime

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoundTrip:
    """Values observed during one encode/decode round trip."""
    prime: int
    exponent: int
    block_in: bytes
    value: int  # encode_block(block_in)
    perm: int  # sqrt_permutation(value)
    inv: int  # inverse_sqrt(perm)
    block_out: bytes


def sample_block(params: Params, prime: int) -> bytes:
    """
    Sample a uniformly random block whose integer value lies in [0, prime).

    Block values in [prime, 2^(8 * block_size)) cannot be permuted, so the
    value is drawn below the prime and then written into a block.
    """
    return decode_block(secrets.randbelow(prime), params.block_size)


def run(params: Optional[Params] = None, prime: Optional[int] = None) -> RoundTrip:
    """
    Run one encode/decode round trip on a random block.

    Args:
        params: SLOTH parameters (default: 256-bit blocks and prime)
        prime: Prime to use; generated from params if not given

    Returns:
        RoundTrip with all intermediate values

    Raises:
        RuntimeError: If the decoded block differs from the input block
    """
    if params is None:
        params = Params()
    if prime is None:
        prime = gen_largest_prime(params.prime_size, params.prime_check_rounds)

    exponent = derive_exponent(prime)

    block_in = sample_block(params, prime)
    value = encode_block(block_in)
    perm = sqrt_permutation(value, exponent, prime)
    inv = inverse_sqrt(perm, prime)
    block_out = decode_block(inv, params.block_size)

    if block_in != block_out:
        raise RuntimeError(
            f"Round trip mismatch: {block_in.hex()} decoded to {block_out.hex()}"
        )

    logger.debug("Round trip ok: %s -> %#x", block_in.hex(), perm)
    return RoundTrip(
        prime=prime,
        exponent=exponent,
        block_in=block_in,
        value=value,
        perm=perm,
        inv=inv,
        block_out=block_out,
    )
