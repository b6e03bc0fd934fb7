"""Tests for the eyewear-analyze command line tool."""

import json

import pytest

from eyewear_face_analyzer.cli import build_parser, load_landmarks, main


@pytest.fixture
def landmarks_file(tmp_path, frontal_landmarks):
    path = tmp_path / "landmarks.json"
    path.write_text(
        json.dumps({'landmarks': [lm.to_dict() for lm in frontal_landmarks], 'imageWidth': 640}),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def prescription_file(tmp_path):
    path = tmp_path / "prescription.json"
    path.write_text(
        json.dumps({'rightEye': {'spherical': -7.0}, 'leftEye': {'spherical': '-6.5'}}),
        encoding="utf-8",
    )
    return path


def test_parser_defaults():
    args = build_parser().parse_args(['face.json'])
    assert args.prescription is None
    assert args.image_width == 0
    assert args.output is None


def test_prints_result(landmarks_file, capsys):
    assert main([str(landmarks_file)]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data['faceShape'] == 'Oval'
    assert data['confidence'] == 89
    assert 'faceImage' not in data
    assert 'bridgeFit' not in data['frameSuggestion'][0]


def test_plain_list_input(tmp_path, frontal_landmarks, capsys):
    path = tmp_path / "list.json"
    path.write_text(json.dumps([lm.to_dict() for lm in frontal_landmarks]), encoding="utf-8")
    assert main([str(path)]) == 0
    assert json.loads(capsys.readouterr().out)['faceShape'] == 'Oval'


def test_prescription_applies_recommendations(landmarks_file, prescription_file, capsys):
    assert main([str(landmarks_file), '--prescription', str(prescription_file), '--age', '40']) == 0

    suggestions = json.loads(capsys.readouterr().out)['frameSuggestion']
    assert all(s['bridgeFit'] == 'standard' for s in suggestions)
    assert 'prescriptionNote' in suggestions[0]


def test_output_file(landmarks_file, tmp_path):
    output = tmp_path / "out" / "result.json"
    assert main([str(landmarks_file), '-o', str(output)]) == 0

    with open(output, encoding='utf-8') as f:
        assert json.load(f)['frameSize'] == "Medium (50mm lens / 118mm total)"


def test_too_few_landmarks(tmp_path, capsys):
    path = tmp_path / "short.json"
    path.write_text(json.dumps([{'x': 0.5, 'y': 0.5, 'z': 0.0}] * 10), encoding="utf-8")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == ''


def test_missing_file(tmp_path):
    assert main([str(tmp_path / "absent.json")]) == 1


def test_invalid_axis(landmarks_file, tmp_path):
    path = tmp_path / "bad_rx.json"
    path.write_text(json.dumps({'rightEye': {'axis': 200}}), encoding="utf-8")
    assert main([str(landmarks_file), '--prescription', str(path)]) == 1


def test_load_landmarks_reads_width(landmarks_file):
    landmarks, image_width = load_landmarks(landmarks_file, default_width=320)
    assert len(landmarks) == 468
    assert image_width == 640


def test_load_landmarks_list_uses_default_width(tmp_path):
    path = tmp_path / "plain.json"
    path.write_text(json.dumps([{'x': 0.1, 'y': 0.2, 'z': 0.0}]), encoding="utf-8")
    landmarks, image_width = load_landmarks(path, default_width=320)
    assert image_width == 320
    assert landmarks[0].y == 0.2
