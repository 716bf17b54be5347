import unittest
from fair_dice.analysis.uniformity import uniformity_report
from fair_dice.core.entropy import EntropySource, SeededEntropySource, default_entropy_source
from fair_dice.core.errors import EntropySourceError, InvalidRangeError
from fair_dice.core.sampler import SecureRandomSampler


class ScriptedSource(EntropySource):
    """Returns pre-set byte strings in order and counts reads."""
    def __init__(self, chunks):
        self.chunks = list(chunks)
        self.reads = 0

    def read(self, n):
        self.reads += 1
        return self.chunks.pop(0)


class ConstantSource(EntropySource):
    def __init__(self, byte):
        self.byte = byte

    def read(self, n):
        return bytes([self.byte]) * n


class TestSecureRandomSampler(unittest.TestCase):
    """
    Tests for `SecureRandomSampler.sample`:
      - samples stay in [0, range) and look uniform (chi-square) for several ranges;
      - out-of-range candidates are rejected and redrawn rather than reduced modulo range;
      - invalid ranges and misbehaving entropy sources fail fast.
    """

    def test_samples_in_range_and_uniform(self):
        sampler = SecureRandomSampler()
        for r in (2, 6, 257):
            values = [sampler.sample(r) for _ in range(100_000)]
            self.assertTrue(all(0 <= v < r for v in values))
            report = uniformity_report(values, r, alpha=0.0001)
            self.assertTrue(report["passed"], f"range {r}: {report}")

    def test_sample_one_is_always_zero(self):
        source = ScriptedSource([])
        sampler = SecureRandomSampler(source)
        for _ in range(100):
            self.assertEqual(sampler.sample(1), 0)
        # no entropy is consumed for a single-value range
        self.assertEqual(source.reads, 0)

    def test_rejects_instead_of_reducing(self):
        # range 5 needs 3 bits: 0x07 -> 7 is rejected, 0x04 -> 4 is accepted
        source = ScriptedSource([b"\x07", b"\x04"])
        sampler = SecureRandomSampler(source)
        self.assertEqual(sampler.sample(5), 4)
        self.assertEqual(source.reads, 2)

    def test_high_bits_are_masked(self):
        # 0xF2 masked to 3 bits is 2
        sampler = SecureRandomSampler(ScriptedSource([b"\xf2"]))
        self.assertEqual(sampler.sample(5), 2)

    def test_multi_byte_big_endian(self):
        # range 300 needs 9 bits over 2 bytes: 0x01 0x0A -> 266
        sampler = SecureRandomSampler(ScriptedSource([b"\x01\x0a"]))
        self.assertEqual(sampler.sample(300), 266)

    def test_invalid_ranges(self):
        sampler = SecureRandomSampler()
        for bad in (0, -1, -100):
            with self.assertRaises(InvalidRangeError):
                sampler.sample(bad)
        for bad in (2.5, "6", True, None):
            with self.assertRaises(InvalidRangeError):
                sampler.sample(bad)

    def test_invalid_range_is_value_error(self):
        with self.assertRaises(ValueError):
            SecureRandomSampler().sample(0)

    def test_exhausted_attempts_raise(self):
        # 0xFF masked to 2 bits is 3, never below range 3
        sampler = SecureRandomSampler(ConstantSource(0xFF), max_attempts=10)
        with self.assertRaises(EntropySourceError):
            sampler.sample(3)

    def test_short_read_raises(self):
        sampler = SecureRandomSampler(ScriptedSource([b""]))
        with self.assertRaises(EntropySourceError):
            sampler.sample(6)

    def test_seeded_source_is_reproducible(self):
        a = SecureRandomSampler(SeededEntropySource(7))
        b = SecureRandomSampler(SeededEntropySource(7))
        self.assertEqual([a.sample(1000) for _ in range(50)], [b.sample(1000) for _ in range(50)])

    def test_default_source_is_shared(self):
        self.assertIs(default_entropy_source(), default_entropy_source())
        self.assertIs(SecureRandomSampler().source, default_entropy_source())

    def test_max_attempts_must_be_positive(self):
        with self.assertRaises(ValueError):
            SecureRandomSampler(max_attempts=0)


if __name__ == '__main__':
    unittest.main()
