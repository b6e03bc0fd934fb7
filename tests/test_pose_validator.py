"""Tests for pose quality validation."""

from eyewear_face_analyzer.processing.pose_validator import (
    DEPTH_ASYMMETRY_WARNING,
    ROTATION_WARNING,
    SLIGHT_ROTATION_WARNING,
    TILT_WARNING,
    TOO_CLOSE_WARNING,
    TOO_FAR_WARNING,
    PoseValidator,
    validate_face_pose,
)

# 정면 픽스처의 기준값
EYE_SPAN = 0.30
FACE_LENGTH = 0.80
NOSE_Y = 0.10 + FACE_LENGTH * 0.55


class TestFrontalPose:
    def test_perfect_pose(self, frontal_landmarks):
        result = validate_face_pose(frontal_landmarks)
        assert result.score == 100
        assert result.warnings == []

    def test_validator_instance(self, frontal_landmarks):
        assert PoseValidator().validate(frontal_landmarks).score == 100


class TestHorizontalRotation:
    def test_strong_rotation(self, face_builder):
        landmarks = face_builder({'nose_tip': (0.5 + 0.2 * EYE_SPAN, NOSE_Y)})
        result = validate_face_pose(landmarks)
        assert result.score <= 70
        assert result.score == 70
        assert result.warnings == [ROTATION_WARNING]

    def test_slight_rotation(self, face_builder):
        landmarks = face_builder({'nose_tip': (0.5 - 0.1 * EYE_SPAN, NOSE_Y)})
        result = validate_face_pose(landmarks)
        assert result.score == 85
        assert result.warnings == [SLIGHT_ROTATION_WARNING]


class TestVerticalTilt:
    def test_strong_tilt(self, face_builder):
        landmarks = face_builder({'nose_tip': (0.5, NOSE_Y + 0.15 * FACE_LENGTH)})
        result = validate_face_pose(landmarks)
        assert result.score == 75
        assert result.warnings == [TILT_WARNING]

    def test_slight_tilt_is_silent(self, face_builder):
        landmarks = face_builder({'nose_tip': (0.5, NOSE_Y - 0.08 * FACE_LENGTH)})
        result = validate_face_pose(landmarks)
        assert result.score == 90
        assert result.warnings == []


class TestDistance:
    def test_too_far(self, face_builder):
        landmarks = face_builder({
            'left_eye_outer': (0.45, 0.40),
            'right_eye_outer': (0.55, 0.40),
        })
        result = validate_face_pose(landmarks)
        assert result.score == 80
        assert result.warnings == [TOO_FAR_WARNING]

    def test_too_close(self, face_builder):
        landmarks = face_builder({
            'left_eye_outer': (0.10, 0.40),
            'right_eye_outer': (0.90, 0.40),
        })
        result = validate_face_pose(landmarks)
        assert result.score == 85
        assert result.warnings == [TOO_CLOSE_WARNING]


class TestDepthAsymmetry:
    def test_depth_asymmetry(self, face_builder):
        landmarks = face_builder(z_overrides={'left_cheekbone': 0.08, 'left_temple': 0.06})
        result = validate_face_pose(landmarks)
        assert result.score == 80
        assert result.warnings == [DEPTH_ASYMMETRY_WARNING]

    def test_symmetric_depth_is_fine(self, face_builder):
        landmarks = face_builder(z_overrides={
            'left_cheekbone': 0.1, 'left_temple': 0.1,
            'right_cheekbone': 0.1, 'right_temple': 0.1,
        })
        assert validate_face_pose(landmarks).score == 100


class TestCompoundPenalties:
    def test_penalties_compound_in_check_order(self, face_builder):
        landmarks = face_builder(
            {
                'left_eye_outer': (0.45, 0.40),
                'right_eye_outer': (0.55, 0.40),
                'nose_tip': (0.53, NOSE_Y + 0.2 * FACE_LENGTH),
            },
            z_overrides={'right_cheekbone': 0.2, 'right_temple': 0.2},
        )
        result = validate_face_pose(landmarks)
        assert result.score == 100 - 30 - 25 - 20 - 20
        assert result.warnings == [
            ROTATION_WARNING,
            TILT_WARNING,
            TOO_FAR_WARNING,
            DEPTH_ASYMMETRY_WARNING,
        ]

    def test_zero_eye_span_does_not_raise(self, face_builder):
        landmarks = face_builder({
            'left_eye_outer': (0.5, 0.40),
            'right_eye_outer': (0.5, 0.40),
        })
        result = validate_face_pose(landmarks)
        assert result.warnings == [TOO_FAR_WARNING]
        assert result.score == 80
