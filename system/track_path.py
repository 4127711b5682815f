# /build/system/track_path.py
# Owning-track resolution for host object paths.
#
# Path contract: space-separated tokens rooted at "live_set", quotes ignored.
#   live_set tracks 2 devices 0                      -> live_set tracks 2
#   live_set tracks 0 devices 1 chains 0 devices 3   -> live_set tracks 0
#   live_set return_tracks 1 devices 0               -> live_set return_tracks 1
#   live_set master_track devices 0                  -> live_set master_track
# Anything without a track-like ancestor resolves to None.

from typing import Optional

INDEXED_TRACK_TOKENS = ("tracks", "return_tracks")
MASTER_TRACK_TOKEN = "master_track"


def owning_track_path(device_path: str) -> Optional[str]:
    """Path of the track, return track or master track that encloses device_path."""
    tokens = str(device_path or "").replace('"', "").split()
    for i, token in enumerate(tokens):
        if token in INDEXED_TRACK_TOKENS:
            if i + 1 < len(tokens) and tokens[i + 1].isdigit():
                return " ".join(tokens[:i + 2])
            return None
        if token == MASTER_TRACK_TOKEN:
            return " ".join(tokens[:i + 1])
    return None
