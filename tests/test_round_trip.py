"""Serialize-then-parse behaviour shared by every format."""

import pytest

from bbox_engine.formats import CocoFormat, PascalVocFormat, TesseractBoxFormat, YoloFormat
from bbox_engine.precision import decimal_places_for_image
from bbox_engine.types import Box

PIXEL_FORMATS = [CocoFormat(), PascalVocFormat(), TesseractBoxFormat()]

BOXES = [
    Box(x_min=12.345678, y_min=7.5, width=100.123456, height=33.3, label="cat"),
    Box(x_min=0, y_min=0, width=1919.99, height=1079.5, label="Second Box"),
    Box(x_min=640.25, y_min=360.75, width=0, height=12.125),
]


def _assert_close(parsed, expected, tolerance):
    assert len(parsed) == len(expected)
    for got, want in zip(parsed, expected):
        assert got.x_min == pytest.approx(want.x_min, abs=tolerance)
        assert got.y_min == pytest.approx(want.y_min, abs=tolerance)
        assert got.width == pytest.approx(want.width, abs=2 * tolerance)
        assert got.height == pytest.approx(want.height, abs=2 * tolerance)


@pytest.mark.parametrize("fmt", PIXEL_FORMATS, ids=lambda f: f.id)
@pytest.mark.parametrize("size", [(1920, 1080), (100, 50), (0, 0)])
def test_pixel_formats_round_trip(fmt, size):
    decimals = decimal_places_for_image(*size)
    parsed = fmt.parse(fmt.serialize(BOXES, *size), *size)
    _assert_close(parsed, BOXES, 0.5 * 10 ** -decimals)
    assert [b.label for b in parsed] == [b.label for b in BOXES]


@pytest.mark.parametrize("fmt", PIXEL_FORMATS, ids=lambda f: f.id)
def test_multi_word_label_survives_two_cycles(fmt):
    box = Box(x_min=10, y_min=20, width=30, height=40, label="Second Box")
    once = fmt.parse(fmt.serialize([box]))
    twice = fmt.parse(fmt.serialize(once))
    assert twice[0].label == "Second Box"


@pytest.mark.parametrize("label_position", ["first", "last"])
def test_yolo_round_trip(label_position):
    width, height = 1920, 1080
    yolo = YoloFormat(label_position=label_position)
    boxes = [
        Box(x_min=100.5, y_min=200.25, width=300, height=150.75, label="person"),
        Box(x_min=960, y_min=540, width=10, height=10, label="3"),
    ]
    decimals = decimal_places_for_image(width, height)
    parsed = yolo.parse(yolo.serialize(boxes, width, height), width, height)

    assert len(parsed) == 2
    # One rounding step of a normalized value, in pixels
    tol_x = 10 ** -decimals * width
    tol_y = 10 ** -decimals * height
    for got, want in zip(parsed, boxes):
        assert got.x_min == pytest.approx(want.x_min, abs=2 * tol_x)
        assert got.y_min == pytest.approx(want.y_min, abs=2 * tol_y)
        assert got.width == pytest.approx(want.width, abs=tol_x)
        assert got.height == pytest.approx(want.height, abs=tol_y)
        assert got.label == want.label


def test_yolo_unlabeled_boxes_read_back_as_default_class():
    yolo = YoloFormat()
    box = Box(x_min=40, y_min=40, width=20, height=20)
    (parsed,) = yolo.parse(yolo.serialize([box], 100, 100), 100, 100)
    assert parsed.label == "0"


@pytest.mark.parametrize("fmt", PIXEL_FORMATS, ids=lambda f: f.id)
@pytest.mark.parametrize("label", ["Car 2", "Item 3.5", "a b c 0"])
def test_label_ending_in_a_number_round_trips(fmt, label):
    box = Box(x_min=10, y_min=20, width=30, height=40, label=label)
    (parsed,) = fmt.parse(fmt.serialize([box], 100, 100), 100, 100)
    assert parsed == box


def test_yolo_tie_rounding_stays_within_one_step():
    yolo = YoloFormat()
    box = Box(x_min=0, y_min=0, width=300, height=100, label="person")
    (parsed,) = yolo.parse(yolo.serialize([box], 1920, 1080), 1920, 1080)
    # 300 / 1920 = 0.15625 is written as 0.1562
    assert parsed.width == pytest.approx(300, abs=10 ** -4 * 1920)
