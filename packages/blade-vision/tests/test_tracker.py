"""Tests for the MediaPipe adapter's result handling."""
from __future__ import annotations

from types import SimpleNamespace

import pytest

pytest.importorskip("mediapipe")

from blade_gesture import HandLandmarks, LatestValue  # noqa: E402
from blade_vision.tracker import HandTracker, ensure_model  # noqa: E402


def _result(hands):
    return SimpleNamespace(hand_landmarks=hands)


class TestHandTracker:
    def test_first_hand_published(self, tmp_path) -> None:
        cell: LatestValue[HandLandmarks] = LatestValue()
        tracker = HandTracker(tmp_path / "model.task", hands=cell)
        points = [SimpleNamespace(x=i / 40, y=0.5, z=0.0) for i in range(21)]
        tracker._on_result(_result([points]), None, 33)
        seq, hand = cell.read()
        assert seq == 1
        assert hand.index_tip == (0.2, 0.5)

    def test_no_hand_published_as_none(self, tmp_path) -> None:
        cell: LatestValue[HandLandmarks] = LatestValue()
        tracker = HandTracker(tmp_path / "model.task", hands=cell)
        tracker._on_result(_result([]), None, 33)
        assert cell.read() == (1, None)

    def test_close_without_open(self, tmp_path) -> None:
        HandTracker(tmp_path / "model.task").close()


def test_existing_model_not_downloaded(tmp_path) -> None:
    model = tmp_path / "hand_landmarker.task"
    model.write_bytes(b"model")
    assert ensure_model(model, url="http://invalid.invalid/model") == model
