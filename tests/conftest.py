"""Test configuration and fixtures."""

import pytest

from splice_builders import (
    BACKBEAT,
    FOUR_ON_FLOOR,
    LOW_CONGA_STEPS,
    MARACAS_STEPS,
    build_splice,
    build_track,
)


@pytest.fixture
def two_track_content():
    """Return track bytes for a Low Conga and a Maracas track."""
    return build_track(255, b"Low Conga", LOW_CONGA_STEPS) + build_track(
        99, b"Maracas", MARACAS_STEPS
    )


@pytest.fixture
def splice_data():
    """Return a complete, exactly sized .splice file."""
    return build_splice(
        [
            build_track(0, b"kick", FOUR_ON_FLOOR),
            build_track(1, b"snare", BACKBEAT),
        ]
    )


@pytest.fixture
def splice_file(tmp_path, splice_data):
    """Return path to a valid .splice file."""
    path = tmp_path / "pattern_1.splice"
    path.write_bytes(splice_data)
    return path


@pytest.fixture
def truncated_file(tmp_path, splice_data):
    """Return path to a .splice file whose last track is cut short."""
    path = tmp_path / "truncated.splice"
    path.write_bytes(splice_data[:-3])
    return path


@pytest.fixture
def overshoot_file(tmp_path):
    """Return path to a file whose header declares fewer bytes than its tracks use."""
    tracks = [build_track(0, b"kick", FOUR_ON_FLOOR), build_track(1, b"snare", BACKBEAT)]
    exact = 40 + sum(len(t) for t in tracks)
    path = tmp_path / "overshoot.splice"
    path.write_bytes(build_splice(tracks, content_length=exact - 4))
    return path
