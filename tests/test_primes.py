"""Tests for prime generation."""

import pytest
from sloth.params import PRIME_CHECK_ROUNDS
from sloth.primes import (
    derive_exponent,
    gen_largest_prime,
    is_probable_prime,
    next_prime,
    prev_prime,
)

# 2^256 - 189: largest prime that fits into 256 bits and is ≡ 3 mod 4
LARGEST_PRIME_256 = (
    115792089237316195423570985008687907853269984665640564039457584007913129639747
)


def _is_prime_trial(n: int) -> bool:
    if n < 2:
        return False
    i = 2
    while i * i <= n:
        if n % i == 0:
            return False
        i += 1
    return True


class TestPrimalityTest:
    """Tests for is_probable_prime."""

    def test_matches_trial_division(self):
        """Agrees with trial division on small numbers."""
        for n in range(-5, 20000):
            assert is_probable_prime(n) == _is_prime_trial(n), n

    def test_known_primes(self):
        """Known large primes pass."""
        assert is_probable_prime(2**127 - 1)
        assert is_probable_prime(2**255 - 19)
        assert is_probable_prime(LARGEST_PRIME_256)

    def test_known_composites(self):
        """Known large composites fail."""
        assert not is_probable_prime(2**128 + 1)
        assert not is_probable_prime((2**127 - 1) * (2**61 - 1))
        # Carmichael numbers fool the Fermat test but not Miller-Rabin
        for n in [561, 1105, 1729, 2465, 2821, 6601, 8911, 41041, 825265]:
            assert not is_probable_prime(n)

    def test_strong_pseudoprime_base_2(self):
        """Strong pseudoprime to base 2 is still rejected."""
        assert not is_probable_prime(3215031751)


class TestNextPrevPrime:
    """Tests for next_prime and prev_prime."""

    def test_next_prime_small(self):
        assert next_prime(0) == 2
        assert next_prime(2) == 3
        assert next_prime(3) == 5
        assert next_prime(14) == 17
        assert next_prime(251) == 257

    def test_prev_prime_small(self):
        assert prev_prime(3) == 2
        assert prev_prime(4) == 3
        assert prev_prime(255) == 251
        assert prev_prime(257) == 251
        assert prev_prime(2**16) == 65521

    def test_strictly_beyond(self):
        """Results are strictly beyond the argument, even when it is prime."""
        p = 2**61 - 1
        assert next_prime(p) > p
        assert prev_prime(p) < p
        assert next_prime(prev_prime(p)) == p
        assert prev_prime(next_prime(p)) == p

    def test_prev_prime_no_prime_below(self):
        """There is no prime below 2."""
        with pytest.raises(ValueError):
            prev_prime(2)
        with pytest.raises(ValueError):
            prev_prime(0)


class TestLargestPrime:
    """Tests for gen_largest_prime."""

    @pytest.mark.parametrize("size", range(1, 129))
    def test_prime_generation(self, size):
        """Verify prime generation for each byte size configuration."""
        prime = gen_largest_prime(size)
        assert is_probable_prime(prime, PRIME_CHECK_ROUNDS)
        assert prime % 4 == 3

        # Next prime is above 2^(size * 8) - 1 OR is not ≡ 3 mod 4
        largest_value = (1 << (size * 8)) - 1
        following = next_prime(prime)
        assert following > largest_value or following % 4 != 3

    def test_maximal_small_sizes(self):
        """Exhaustive maximality check for sizes small enough to scan."""
        for size in [1, 2]:
            prime = gen_largest_prime(size)
            bound = (1 << (size * 8)) - 1
            for candidate in range(prime + 1, bound + 1):
                assert not (_is_prime_trial(candidate) and candidate % 4 == 3)

    def test_largest_prime_one_byte(self):
        assert gen_largest_prime(1) == 251

    def test_largest_prime_256_bits(self):
        """The prime generated for 256 bits is 2^256 - 189."""
        prime = gen_largest_prime(32)
        assert prime == LARGEST_PRIME_256
        assert prime == 2**256 - 189

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            gen_largest_prime(0)


class TestDeriveExponent:
    """Tests for derive_exponent."""

    def test_exponent_exact(self):
        """4 * e == p + 1 for every generated prime."""
        for size in [1, 2, 4, 8, 16, 32]:
            prime = gen_largest_prime(size)
            assert (prime + 1) % 4 == 0
            assert 4 * derive_exponent(prime) == prime + 1

    def test_rejects_prime_1_mod_4(self):
        with pytest.raises(ValueError):
            derive_exponent(13)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
