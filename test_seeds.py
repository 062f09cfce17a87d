from __future__ import annotations

import unittest
from unittest import mock

from seedkit.crack import recover_clock_seed
from seedkit.entropy import EntropySource
from seedkit.errors import EntropyUnavailableError
from seedkit.prng import DeterministicGenerator
from seedkit.seeds import clock_seed, entropy_seed, passphrase_seed


class SeedTests(unittest.TestCase):
    def test_clock_seed_is_low_entropy_and_coarse(self):
        a = clock_seed(1_700_000_000.2)
        b = clock_seed(1_700_000_000.9)
        self.assertEqual(a, b)
        self.assertTrue(a.low_entropy)
        self.assertEqual("clock", a.origin)
        self.assertEqual(1_700_000_000, int.from_bytes(a.material, "big"))

    def test_clock_seed_resolution(self):
        self.assertEqual(clock_seed(1000, resolution=60), clock_seed(1019, resolution=60))
        with self.assertRaises(ValueError):
            clock_seed(1000, resolution=0)

    def test_clock_seed_defaults_to_now(self):
        with mock.patch("seedkit.seeds.time.time", return_value=1234.5):
            self.assertEqual(clock_seed(1234), clock_seed())

    def test_entropy_seed(self):
        s = entropy_seed()
        self.assertEqual(32, len(s.material))
        self.assertFalse(s.low_entropy)
        self.assertEqual("entropy", s.origin)
        self.assertNotEqual(s, entropy_seed())
        self.assertEqual(16, len(entropy_seed(size=16).material))

    def test_entropy_seed_unavailable(self):
        source = mock.Mock(spec=EntropySource)
        source.name = "mock"
        source.read.side_effect = EntropyUnavailableError("no entropy")
        with self.assertRaises(EntropyUnavailableError):
            entropy_seed(source)

    def test_entropy_seed_feeds_quiet_generator(self):
        with self.assertNoLogs("seedkit.prng", level="WARNING"):
            g = DeterministicGenerator(entropy_seed())
        self.assertFalse(g.low_entropy)

    def test_passphrase_seed(self):
        salt = b"0123456789abcdef"
        a = passphrase_seed("correct horse", salt)
        b = passphrase_seed("correct horse", salt)
        c = passphrase_seed("correct horse", b"fedcba9876543210")
        self.assertEqual(a, b)
        self.assertNotEqual(a.material, c.material)
        self.assertEqual(32, len(a.material))
        self.assertTrue(a.low_entropy)
        self.assertEqual("passphrase", a.origin)

    def test_passphrase_seed_short_salt(self):
        with self.assertRaises(ValueError):
            passphrase_seed("pw", b"short")


class ClockRecoveryTests(unittest.TestCase):
    def test_recovers_clock_seed(self):
        seeded_at = 1_700_000_123
        with self.assertLogs("seedkit.prng", level="WARNING"):
            victim = DeterministicGenerator(clock_seed(seeded_at))
        observed = victim.next()
        found = recover_clock_seed(observed, seeded_at - 300, seeded_at + 300)
        self.assertIsNotNone(found)
        self.assertEqual(clock_seed(seeded_at), found)

    def test_recovered_seed_predicts_future_output(self):
        seeded_at = 1_650_000_000
        victim = DeterministicGenerator(clock_seed(seeded_at).material)
        observed = victim.next()
        found = recover_clock_seed(observed, seeded_at - 10, seeded_at + 10)
        clone = DeterministicGenerator(found.material)
        clone.next()
        self.assertEqual([victim.next_in_range(0, 100) for _ in range(10)], [clone.next_in_range(0, 100) for _ in range(10)])

    def test_outside_window(self):
        observed = DeterministicGenerator(clock_seed(5000).material).next()
        self.assertIsNone(recover_clock_seed(observed, 100, 200))

    def test_invalid_resolution(self):
        for resolution in (0, -5):
            with self.assertRaises(ValueError):
                recover_clock_seed(b"\x00" * 32, 100, 200, resolution=resolution)

    def test_coarse_resolution(self):
        observed = DeterministicGenerator(clock_seed(6000, resolution=60).material).next()
        self.assertEqual(clock_seed(6000, resolution=60), recover_clock_seed(observed, 5000, 7000, resolution=60))

    def test_inverted_window(self):
        with self.assertRaises(ValueError):
            recover_clock_seed(b"\x00" * 32, 200, 100)


if __name__ == "__main__":
    unittest.main()
