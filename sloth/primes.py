"""
Prime generation for SLOTH.

The permutation needs a prime p with p ≡ 3 (mod 4): for such primes a
square root of a quadratic residue a is simply a^((p+1)/4) mod p.

gen_largest_prime() walks down from 2^(8 * size) - 1 over odd candidates
until it finds a probable prime that is also ≡ 3 (mod 4).
"""

import logging
import secrets

from .params import PRIME_CHECK_ROUNDS

logger = logging.getLogger(__name__)

# Trial division before Miller-Rabin rejects most candidates cheaply
_SMALL_PRIMES = (
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47,
    53, 59, 61, 67, 71, 73, 79, 83, 89, 97,
)


def _is_mr_witness(a: int, n: int, d: int, s: int) -> bool:
    """Return True if a proves n composite (n - 1 = d * 2^s, d odd)."""
    x = pow(a, d, n)
    if x == 1 or x == n - 1:
        return False
    for _ in range(s - 1):
        x = x * x % n
        if x == n - 1:
            return False
    return True


def is_probable_prime(n: int, rounds: int = PRIME_CHECK_ROUNDS) -> bool:
    """
    Miller-Rabin probabilistic primality test.

    A False result is always correct. A True result is wrong with
    probability at most 4^{-rounds}.

    Args:
        n: Number to test
        rounds: Number of random bases to try

    Returns:
        True if n is probably prime
    """
    if n < 2:
        return False
    for p in _SMALL_PRIMES:
        if n % p == 0:
            return n == p
    if n < _SMALL_PRIMES[-1] ** 2:
        return True

    d = n - 1
    s = 0
    while d % 2 == 0:
        d //= 2
        s += 1

    for _ in range(rounds):
        a = 2 + secrets.randbelow(n - 3)  # a in [2, n-2]
        if _is_mr_witness(a, n, d, s):
            return False
    return True


def next_prime(p: int, rounds: int = PRIME_CHECK_ROUNDS) -> int:
    """
    Find the smallest probable prime strictly greater than p.

    Steps to the next odd candidate (p+1 if p is even, p+2 if odd),
    then adds 2 until a candidate passes the primality test.
    """
    if p < 2:
        return 2

    candidate = p + 1 if p % 2 == 0 else p + 2
    while not is_probable_prime(candidate, rounds):
        candidate += 2
    return candidate


def prev_prime(p: int, rounds: int = PRIME_CHECK_ROUNDS) -> int:
    """
    Find the largest probable prime strictly less than p.

    Steps to the previous odd candidate (p-1 if p is even, p-2 if odd),
    then subtracts 2 until a candidate passes the primality test.

    Raises:
        ValueError: If p <= 2 (there is no prime below it)
    """
    if p <= 2:
        raise ValueError(f"No prime below {p}")
    if p == 3:
        return 2

    candidate = p - 1 if p % 2 == 0 else p - 2
    while not is_probable_prime(candidate, rounds):
        candidate -= 2
    return candidate


def gen_largest_prime(max_size_bytes: int, rounds: int = PRIME_CHECK_ROUNDS) -> int:
    """
    Generate the largest prime fitting into max_size_bytes that is ≡ 3 (mod 4).

    Args:
        max_size_bytes: Number of bytes the prime must fit into (>= 1)
        rounds: Miller-Rabin rounds per candidate

    Returns:
        Largest probable prime p <= 2^(8 * max_size_bytes) - 1 with p % 4 == 3
    """
    if max_size_bytes < 1:
        raise ValueError("max_size_bytes must be at least 1")

    bound = (1 << (max_size_bytes * 8)) - 1
    prime = prev_prime(bound, rounds)
    skipped = 0
    # Square roots by exponentiation need p ≡ 3 (mod 4)
    while prime % 4 != 3:
        skipped += 1
        prime = prev_prime(prime, rounds)

    logger.debug(
        "Largest %d-bit prime ≡ 3 mod 4 is 2^%d - %d (skipped %d primes ≡ 1 mod 4)",
        max_size_bytes * 8, max_size_bytes * 8, bound + 1 - prime, skipped,
    )
    return prime


def derive_exponent(prime: int) -> int:
    """
    Derive the square-root exponent e = (p + 1) / 4.

    Raises:
        ValueError: If prime is not ≡ 3 (mod 4), so the division is inexact
    """
    if prime % 4 != 3:
        raise ValueError(f"Prime must be congruent to 3 mod 4, got {prime} % 4 = {prime % 4}")
    return (prime + 1) // 4


# Aliases
next_prime_above = next_prime
prev_prime_below = prev_prime
largest_congruent_prime = gen_largest_prime
