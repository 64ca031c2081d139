"""End-to-end tests for the SLOTH pipeline."""

import pytest
from sloth.block import encode_block
from sloth.params import Params
from sloth.pipeline import RoundTrip, run, sample_block
from sloth.primes import gen_largest_prime

PRIME_256 = 2**256 - 189


@pytest.fixture(scope="module")
def prime_256():
    return gen_largest_prime(32)


class TestParams:
    """Tests for Params."""

    def test_defaults(self):
        params = Params()
        assert params.block_size == 32
        assert params.prime_size == 32
        assert params.prime_check_rounds == 25
        assert params.block_bits == 256
        assert params.bound == 2**256 - 1

    def test_repr_shows_derived_fields(self):
        text = repr(Params(block_size=32, prime_size=16))
        assert "block_bits=256" in text
        assert "prime_bits=128" in text
        assert "bound=2^128-1" in text
        assert "prime_check_rounds=25" in text

    def test_invalid(self):
        with pytest.raises(ValueError):
            Params(block_size=0)
        with pytest.raises(ValueError):
            Params(prime_size=0)
        with pytest.raises(ValueError):
            Params(prime_check_rounds=0)
        with pytest.raises(ValueError):
            Params(block_size=16, prime_size=32)


class TestPipeline:
    """Tests for run()."""

    def test_single_run(self):
        """Default run generates the 256-bit prime and round trips."""
        result = run()
        assert isinstance(result, RoundTrip)
        assert result.prime == PRIME_256
        assert 4 * result.exponent == result.prime + 1
        assert result.block_in == result.block_out
        assert result.inv == result.value
        assert 0 <= result.perm < result.prime

    def test_end_to_end(self, prime_256):
        """1000 random 256-bit blocks survive encode then decode."""
        params = Params()
        for _ in range(1000):
            result = run(params, prime=prime_256)
            assert result.block_in == result.block_out
            assert 0 <= result.perm < prime_256

    def test_small_blocks(self):
        """Pipeline works with 1-byte blocks (prime 251)."""
        params = Params(block_size=1, prime_size=1)
        for _ in range(200):
            result = run(params)
            assert result.prime == 251
            assert len(result.block_out) == 1
            assert result.block_in == result.block_out

    def test_prime_smaller_than_block(self):
        """A prime narrower than the block still round trips."""
        params = Params(block_size=32, prime_size=16)
        result = run(params)
        assert result.prime < 2**128
        assert result.block_in == result.block_out

    def test_sample_block_below_prime(self):
        """Sampled blocks always encode to a value below the prime."""
        params = Params(block_size=1, prime_size=1)
        for _ in range(500):
            assert encode_block(sample_block(params, 251)) < 251


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
