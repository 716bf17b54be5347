import unittest
from fair_dice.core.commitment import CommitmentScheme
from fair_dice.core.entropy import SeededEntropySource
from fair_dice.core.errors import InvalidCommitmentInputError


class TestCommitmentScheme(unittest.TestCase):
    """
    Tests for `CommitmentScheme`: key generation, deterministic commitments,
    no collisions across many distinct inputs, verification and malformed-input rejection.
    """

    def setUp(self):
        self.scheme = CommitmentScheme()

    def test_keys_are_256_bit_and_fresh(self):
        k1 = self.scheme.generate_key()
        k2 = self.scheme.generate_key()
        self.assertEqual(len(k1), 32)
        self.assertNotEqual(k1, k2)

    def test_commit_is_deterministic_hex(self):
        key = self.scheme.generate_key()
        c1 = self.scheme.commit(key, 1)
        c2 = self.scheme.commit(key, 1)
        self.assertEqual(c1, c2)
        # SHA3-256 digest as lowercase hex
        self.assertEqual(len(c1), 64)
        self.assertEqual(c1, c1.lower())
        int(c1, 16)

    def test_hex_key_matches_raw_key(self):
        key = self.scheme.generate_key()
        self.assertEqual(self.scheme.commit(key, 5), self.scheme.commit(key.hex(), 5))

    def test_no_collisions_across_distinct_inputs(self):
        seen = set()
        for i in range(10_000):
            key = self.scheme.generate_key()
            seen.add(self.scheme.commit(key, i % 7))
        self.assertEqual(len(seen), 10_000)

    def test_value_change_changes_commitment(self):
        key = self.scheme.generate_key()
        digests = {self.scheme.commit(key, v) for v in range(1000)}
        self.assertEqual(len(digests), 1000)

    def test_verify(self):
        key = self.scheme.generate_key()
        c = self.scheme.commit(key, 3)
        self.assertTrue(self.scheme.verify(key, 3, c))
        self.assertTrue(self.scheme.verify(key.hex(), 3, c.upper()))
        self.assertFalse(self.scheme.verify(key, 4, c))
        self.assertFalse(self.scheme.verify(self.scheme.generate_key(), 3, c))
        # malformed published digests never match
        for bad in ("", "ab", c[:-1], c + "0", "\u00e9" * 64, "z" * 64):
            self.assertFalse(self.scheme.verify(key, 3, bad))
        for bad in (None, b"ab", c.encode(), 123):
            with self.assertRaises(InvalidCommitmentInputError):
                self.scheme.verify(key, 3, bad)

    def test_reveal_returns_key(self):
        key = self.scheme.generate_key()
        self.assertIs(self.scheme.reveal(key), key)

    def test_malformed_inputs(self):
        key = self.scheme.generate_key()
        with self.assertRaises(InvalidCommitmentInputError):
            self.scheme.commit(b"", 1)
        with self.assertRaises(InvalidCommitmentInputError):
            self.scheme.commit("", 1)
        with self.assertRaises(InvalidCommitmentInputError):
            self.scheme.commit("not hex", 1)
        with self.assertRaises(InvalidCommitmentInputError):
            self.scheme.commit(12345, 1)
        for bad in ("1", 1.0, None, True):
            with self.assertRaises(InvalidCommitmentInputError):
                self.scheme.commit(key, bad)

    def test_injected_source_drives_keys(self):
        a = CommitmentScheme(SeededEntropySource(3))
        b = CommitmentScheme(SeededEntropySource(3))
        self.assertEqual(a.generate_key(), b.generate_key())

    def test_short_keys_refused(self):
        with self.assertRaises(ValueError):
            CommitmentScheme(key_size=16)


if __name__ == '__main__':
    unittest.main()
