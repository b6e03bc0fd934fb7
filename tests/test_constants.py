"""Tests for landmark index tables."""

from eyewear_face_analyzer.config import (
    FACE_SHAPE_LANDMARKS,
    get_face_contour_indices,
    get_measurement_landmarks,
)


def test_indices_within_canonical_mesh():
    assert all(0 <= index < 468 for index in FACE_SHAPE_LANDMARKS.values())
    assert all(0 <= index < 468 for index in get_face_contour_indices())


def test_contour_is_closed_loop():
    contour = get_face_contour_indices()
    assert len(contour) == 37
    assert contour[0] == contour[-1] == 10
    assert FACE_SHAPE_LANDMARKS['chin_bottom'] in contour


def test_measurement_landmarks():
    pairs = get_measurement_landmarks()
    assert pairs['faceLength'] == [10, 152]
    assert pairs['cheekboneWidth'] == [234, 454]
    assert pairs['eyes'] == [33, 263]
    assert len(pairs) == 7
