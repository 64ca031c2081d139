"""
SLOTH modular square-root permutation.

Based on the SLOTH construction (Lenstra & Wesolowski) as used in pysloth.

For a prime p ≡ 3 (mod 4) and e = (p+1)/4:

procedure Encode(x):                 // x ∈ [0, p)
    if (x | p) = 1:                  // x is a quadratic residue
        t = x^e mod p                // a square root of x
        return t if t even else p - t
    else:                            // -x is a quadratic residue
        t = (p - x)^e mod p          // a square root of -x
        return t if t odd else p - t

procedure Decode(y):                 // y ∈ [0, p)
    s = y^2 mod p
    return s if y even else p - s

The parity of the output records which branch produced it, so Decode
recovers x exactly. Encode costs one exponentiation with a (log p)-bit
exponent while Decode costs one squaring.
"""

from .block import decode_block, encode_block
from .params import BLOCK_BYTE_SIZE, Params
from .primes import derive_exponent, gen_largest_prime, is_probable_prime


def neg_mod(a: int, p: int) -> int:
    """(-a) mod p.  Assumes 0 <= a < p."""
    return 0 if a == 0 else p - a


def legendre(a: int, p: int) -> int:
    """
    Legendre symbol (a | p) via Euler's criterion.

    Returns:
        1 if a is a nonzero quadratic residue mod p, -1 if a non-residue,
        0 if a ≡ 0 (mod p)
    """
    ls = pow(a, (p - 1) // 2, p)
    if ls == p - 1:
        return -1
    return ls


def _check_prime(prime: int) -> None:
    if prime < 3 or prime % 4 != 3:
        raise ValueError(f"Modulus must be an odd prime ≡ 3 mod 4, got {prime}")


def _check_input(value: int, prime: int) -> None:
    if not 0 <= value < prime:
        raise ValueError(f"Input {value} out of range [0, {prime})")


def sqrt_permutation(value: int, exp: int, prime: int) -> int:
    """
    Forward square-root permutation, the "encode" stage.

    Args:
        value: Value in [0, prime)
        exp: Exponent (prime + 1) / 4
        prime: Prime modulus ≡ 3 (mod 4)

    Returns:
        Permuted value in [0, prime)
    """
    _check_prime(prime)
    if 4 * exp != prime + 1:
        raise ValueError(f"Exponent must be (prime + 1) / 4, got {exp}")
    _check_input(value, prime)

    if legendre(value, prime) == 1:
        # Quadratic residue: tmp is a square root of value
        tmp = pow(value, exp, prime)
        if tmp % 2 == 0:
            result = tmp
        else:
            result = neg_mod(tmp, prime)
    else:
        # Non-residue (or zero): tmp is a square root of -value
        tmp = pow(prime - value, exp, prime)
        if tmp % 2 == 1:
            result = tmp
        else:
            result = neg_mod(tmp, prime)

    return result


def inverse_sqrt(value: int, prime: int) -> int:
    """
    Inverse of sqrt_permutation, the "decode" stage.

    Args:
        value: Permuted value in [0, prime)
        prime: Prime modulus ≡ 3 (mod 4)

    Returns:
        Original value in [0, prime)
    """
    _check_prime(prime)
    _check_input(value, prime)

    square = value * value % prime

    # Parity of value, not of the square, selects the branch
    if value % 2 == 0:
        result = square
    else:
        result = neg_mod(square, prime)

    return result


class SqrtPermutation:
    """
    Square-root permutation on [0, p) for a fixed prime p ≡ 3 (mod 4).

    Properties:
    - Bijective: forward is a permutation of [0, p)
    - Asymmetric cost: forward needs a full exponentiation, inverse one squaring
    - Keyless: the permutation is fully determined by p
    """

    def __init__(self, prime: int, block_size: int = BLOCK_BYTE_SIZE):
        """
        Initialize the permutation.

        Args:
            prime: Prime modulus ≡ 3 (mod 4)
            block_size: Block size in bytes for encode/decode
        """
        _check_prime(prime)
        if not is_probable_prime(prime):
            raise ValueError(f"Modulus {prime} is not prime")
        if prime.bit_length() > block_size * 8:
            raise ValueError(
                f"Prime of {prime.bit_length()} bits does not fit a {block_size}-byte block"
            )

        self._prime = prime
        self._exponent = derive_exponent(prime)
        self._block_size = block_size

    @classmethod
    def from_params(cls, params: Params) -> "SqrtPermutation":
        """Generate the largest suitable prime for params and build the permutation."""
        prime = gen_largest_prime(params.prime_size, params.prime_check_rounds)
        return cls(prime, block_size=params.block_size)

    @property
    def prime(self) -> int:
        """Prime modulus p."""
        return self._prime

    @property
    def exponent(self) -> int:
        """Square-root exponent (p + 1) / 4."""
        return self._exponent

    @property
    def domain_size(self) -> int:
        """Size of the domain [0, p)."""
        return self._prime

    @property
    def block_size(self) -> int:
        """Block size in bytes."""
        return self._block_size

    def forward(self, x: int) -> int:
        """
        Forward permutation.

        Args:
            x: Input in [0, p)

        Returns:
            Output in [0, p)
        """
        return sqrt_permutation(x, self._exponent, self._prime)

    def inverse(self, y: int) -> int:
        """
        Inverse permutation.

        Args:
            y: Input in [0, p)

        Returns:
            Output in [0, p) such that forward(output) = y
        """
        return inverse_sqrt(y, self._prime)

    def encode(self, block: bytes) -> bytes:
        """Encode a block: decode_block(forward(encode_block(block)))."""
        if len(block) != self._block_size:
            raise ValueError(f"Block must be {self._block_size} bytes, got {len(block)}")
        return decode_block(self.forward(encode_block(block)), self._block_size)

    def decode(self, block: bytes) -> bytes:
        """Decode a block produced by encode()."""
        if len(block) != self._block_size:
            raise ValueError(f"Block must be {self._block_size} bytes, got {len(block)}")
        return decode_block(self.inverse(encode_block(block)), self._block_size)

    def __repr__(self) -> str:
        return f"SqrtPermutation(prime_bits={self._prime.bit_length()}, block_size={self._block_size})"
