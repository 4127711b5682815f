"""Owning-track resolution."""

from __future__ import annotations

import unittest

from system.track_path import owning_track_path


class OwningTrackPathTests(unittest.TestCase):

    def test_track_like_ancestors(self) -> None:
        cases = {
            "live_set tracks 2 devices 0": "live_set tracks 2",
            "live_set tracks 0 devices 1 chains 0 devices 3": "live_set tracks 0",
            "live_set return_tracks 1 devices 0": "live_set return_tracks 1",
            "live_set master_track devices 0": "live_set master_track",
            '"live_set" tracks 3  devices 0': "live_set tracks 3",
        }
        for device_path, expected in cases.items():
            self.assertEqual(owning_track_path(device_path), expected, device_path)

    def test_no_track_ancestor(self) -> None:
        for device_path in ("live_set devices 0", "live_set tracks", "live_set tracks x devices 0", "", None):
            self.assertIsNone(owning_track_path(device_path), device_path)


if __name__ == "__main__":  # pragma: no cover
    unittest.main(exit=False)
