"""Tests for ratio-based face shape classification."""

import pytest

from eyewear_face_analyzer.models.landmark_models import FaceRatios, FaceShape
from eyewear_face_analyzer.processing.face_shape_classifier import (
    MAX_CONFIDENCE,
    MIN_CONFIDENCE,
    SHAPE_RULES,
    FaceShapeClassifier,
    classify_face_shape,
)
from eyewear_face_analyzer.processing.measurement_extractor import extract_measurements


def make_ratios(**kwargs) -> FaceRatios:
    values = dict(
        length_to_width=1.4,
        forehead_to_jaw=1.1,
        cheek_to_jaw=1.2,
        forehead_to_cheek=0.9,
        jaw_angle_sharpness=138.0,
    )
    values.update(kwargs)
    return FaceRatios(**values)


class TestRuleTable:
    def test_every_shape_has_rules(self):
        assert set(SHAPE_RULES) == set(FaceShape)
        for rules in SHAPE_RULES.values():
            assert 4 <= len(rules) <= 6

    def test_heart_forehead_to_jaw_rule(self):
        heart_rule = SHAPE_RULES[FaceShape.HEART][0]
        assert heart_rule.ratio == 'forehead_to_jaw'
        assert heart_rule.evaluate(make_ratios(forehead_to_jaw=1.35)) == 4

    def test_first_matching_tier_wins(self):
        square_jaw = SHAPE_RULES[FaceShape.SQUARE][4]
        assert square_jaw.evaluate(make_ratios(jaw_angle_sharpness=110)) == 4
        assert square_jaw.evaluate(make_ratios(jaw_angle_sharpness=125)) == 2
        assert square_jaw.evaluate(make_ratios(jaw_angle_sharpness=132)) == 0
        assert square_jaw.evaluate(make_ratios(jaw_angle_sharpness=140)) == -2

    def test_round_penalizes_out_of_range_length(self):
        round_length = SHAPE_RULES[FaceShape.ROUND][0]
        assert round_length.evaluate(make_ratios(length_to_width=1.1)) == 4
        assert round_length.evaluate(make_ratios(length_to_width=1.25)) == 2
        assert round_length.evaluate(make_ratios(length_to_width=1.6)) == -1


class TestScores:
    def test_frontal_fixture_scores(self, frontal_landmarks):
        _, ratios = extract_measurements(frontal_landmarks)
        scores = FaceShapeClassifier().score_shapes(ratios)
        assert scores == {
            FaceShape.OVAL: 13,
            FaceShape.ROUND: 3,
            FaceShape.SQUARE: 0,
            FaceShape.HEART: 4,
            FaceShape.DIAMOND: 6,
            FaceShape.OBLONG: 3,
            FaceShape.TRIANGLE: 2,
        }

    def test_frontal_fixture_is_oval(self, frontal_landmarks):
        _, ratios = extract_measurements(frontal_landmarks)
        result = classify_face_shape(ratios)
        assert result.shape is FaceShape.OVAL
        # base 52 + margin 30 + clarity 6.67
        assert result.confidence == 89


class TestClassification:
    def test_heart(self):
        ratios = make_ratios(
            length_to_width=1.4,
            forehead_to_jaw=1.35,
            forehead_to_cheek=0.97,
            cheek_to_jaw=1.35 / 0.97,
            jaw_angle_sharpness=128.0,
        )
        result = classify_face_shape(ratios)
        assert result.shape is FaceShape.HEART
        assert result.scores[FaceShape.HEART] >= 4

    def test_square(self):
        ratios = make_ratios(
            length_to_width=1.1,
            forehead_to_jaw=1.0,
            cheek_to_jaw=1.02,
            forehead_to_cheek=0.98,
            jaw_angle_sharpness=112.0,
        )
        assert classify_face_shape(ratios).shape is FaceShape.SQUARE

    def test_oblong(self):
        ratios = make_ratios(
            length_to_width=1.75,
            forehead_to_jaw=1.0,
            cheek_to_jaw=1.05,
            forehead_to_cheek=0.95,
            jaw_angle_sharpness=132.0,
        )
        assert classify_face_shape(ratios).shape is FaceShape.OBLONG

    def test_triangle(self):
        ratios = make_ratios(
            length_to_width=1.3,
            forehead_to_jaw=0.75,
            cheek_to_jaw=1.0,
            forehead_to_cheek=0.75,
            jaw_angle_sharpness=132.0,
        )
        assert classify_face_shape(ratios).shape is FaceShape.TRIANGLE

    def test_diamond(self):
        ratios = make_ratios(
            length_to_width=1.4,
            forehead_to_jaw=1.1,
            cheek_to_jaw=1.35,
            forehead_to_cheek=0.8,
            jaw_angle_sharpness=128.0,
        )
        assert classify_face_shape(ratios).shape is FaceShape.DIAMOND

    @pytest.mark.parametrize("ratios", [
        make_ratios(),
        make_ratios(length_to_width=0.0, forehead_to_jaw=0.0, cheek_to_jaw=0.0,
                    forehead_to_cheek=0.0, jaw_angle_sharpness=0.0),
        make_ratios(length_to_width=5.0, forehead_to_jaw=5.0, cheek_to_jaw=5.0,
                    forehead_to_cheek=5.0, jaw_angle_sharpness=180.0),
    ])
    def test_always_valid_result(self, ratios):
        result = classify_face_shape(ratios)
        assert isinstance(result.shape, FaceShape)
        assert MIN_CONFIDENCE <= result.confidence <= MAX_CONFIDENCE


class TestConfidence:
    def test_all_zero_scores_hit_floor(self):
        assert FaceShapeClassifier.compute_confidence([0, 0, 0]) == 35

    def test_capped_at_98(self):
        assert FaceShapeClassifier.compute_confidence([20, 5, 0]) == 98

    def test_formula(self):
        # base 40 + margin 18 + clarity 10 = 68
        assert FaceShapeClassifier.compute_confidence([10, 7, 4]) == 68

    def test_tie_broken_by_enumeration_order(self):
        result = FaceShapeClassifier(rules={}).classify(make_ratios())
        assert result.shape is FaceShape.OVAL
        assert result.confidence == 35

    def test_tie_prefers_earlier_shape(self):
        rules = {
            FaceShape.TRIANGLE: SHAPE_RULES[FaceShape.TRIANGLE],
            FaceShape.DIAMOND: SHAPE_RULES[FaceShape.TRIANGLE],
        }
        result = FaceShapeClassifier(rules=rules).classify(make_ratios(forehead_to_jaw=0.7))
        assert result.scores[FaceShape.DIAMOND] == result.scores[FaceShape.TRIANGLE]
        assert result.shape is FaceShape.DIAMOND
