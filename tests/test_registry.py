"""Tests for format detection order, lookup and per-image resolution."""

from pathlib import Path

import pytest

from bbox_engine.registry import FormatRegistry, FormatResolutionCache, resolve_format


@pytest.fixture
def registry():
    return FormatRegistry()


@pytest.fixture
def cache():
    return FormatResolutionCache()


# =============================================================================
# FormatRegistry
# =============================================================================


class TestRegistry:
    def test_priority_order(self, registry):
        assert [p.id for p in registry.providers] == ["tesseract_box", "yolo", "pascal_voc", "coco"]

    def test_get_provider(self, registry):
        assert registry.get_provider("pascal_voc").id == "pascal_voc"
        assert registry.get_provider("nope") is None
        assert registry.get_provider(None) is None

    def test_default_is_coco(self, registry):
        assert registry.default.id == "coco"

    def test_yolo_label_position_is_passed_through(self):
        registry = FormatRegistry(yolo_label_position="first")
        assert registry.get_provider("yolo").label_position == "first"

    def test_parse_unknown_id_falls_back_to_coco(self, registry):
        (box,) = registry.parse("1 2 3 4 a", "bogus")
        assert box.label == "a"

    def test_serialize_by_id(self, registry):
        boxes = registry.parse("10 20 40 60", "pascal_voc")
        assert registry.serialize(boxes, "coco") == "10.00 20.00 30.00 40.00"


class TestDetect:
    def test_yolo(self, registry):
        assert registry.detect("0 0.5 0.5 0.2 0.2\n0 0.1 0.1 0.1 0.1").id == "yolo"

    def test_coco_when_corners_do_not_increase(self, registry):
        assert registry.detect("10 20 5 5\n50 60 5 5").id == "coco"

    def test_pascal_voc(self, registry):
        assert registry.detect("10 20 40 60\n50 60 70 80").id == "pascal_voc"

    def test_tesseract(self, registry):
        assert registry.detect("G 0 0 745 1040 0\nLand 10 20 30 40").id == "tesseract_box"

    def test_tesseract_wins_over_yolo(self, registry):
        content = "person 0.1 0.1 0.2 0.2\nperson 0.5 0.5 0.1 0.1"
        assert registry.get_provider("yolo").detect(content)
        assert registry.detect(content).id == "tesseract_box"

    def test_pascal_voc_wins_over_coco(self, registry):
        content = "10 20 40 60"
        assert registry.get_provider("coco").detect(content)
        assert registry.detect(content).id == "pascal_voc"

    def test_nothing_matches(self, registry):
        assert registry.detect("hello world") is None
        assert registry.detect("") is None


# =============================================================================
# FormatResolutionCache
# =============================================================================


class TestCache:
    def test_path_and_str_keys_match(self, registry, cache):
        cache.set(Path("img/cat.png"), registry.default)
        assert cache.get("img/cat.png") is registry.default
        assert "img/cat.png" in cache

    def test_last_write_wins(self, registry, cache):
        cache.set("a", registry.default)
        cache.set("a", registry.get_provider("yolo"))
        assert cache.get("a").id == "yolo"
        assert len(cache) == 1

    def test_remove_and_clear(self, registry, cache):
        cache.set("a", registry.default)
        cache.set("b", registry.default)
        assert cache.remove("a")
        assert not cache.remove("a")
        cache.clear()
        assert len(cache) == 0

    def test_instances_are_isolated(self, registry):
        first, second = FormatResolutionCache(), FormatResolutionCache()
        first.set("a", registry.default)
        assert second.get("a") is None


# =============================================================================
# resolve_format
# =============================================================================


class TestResolveFormat:
    def test_detected_format_is_cached(self, registry, cache):
        provider = resolve_format(registry, cache, "a.png", content="10 20 40 60")
        assert provider.id == "pascal_voc"
        assert cache.get("a.png") is provider

    def test_cached_format_wins_over_new_content(self, registry, cache):
        resolve_format(registry, cache, "a.png", content="10 20 40 60")
        provider = resolve_format(registry, cache, "a.png", content="G 0 0 745 1040 0")
        assert provider.id == "pascal_voc"

    def test_configured_when_detection_fails(self, registry, cache):
        provider = resolve_format(registry, cache, "a.png", content="???", configured="yolo")
        assert provider.id == "yolo"

    def test_configured_when_no_content(self, registry, cache):
        assert resolve_format(registry, cache, "a.png", configured="tesseract_box").id == "tesseract_box"

    def test_detection_beats_configured(self, registry, cache):
        provider = resolve_format(registry, cache, "a.png", content="10 20 40 60", configured="coco")
        assert provider.id == "pascal_voc"

    def test_configured_beats_detection_without_auto_detect(self, registry, cache):
        provider = resolve_format(
            registry, cache, "a.png", content="10 20 40 60", configured="coco", auto_detect=False,
        )
        assert provider.id == "coco"

    def test_unknown_configured_falls_back_to_coco(self, registry, cache, caplog):
        provider = resolve_format(registry, cache, "a.png", configured="bogus")
        assert provider.id == "coco"
        assert "Unknown bbox format" in caplog.text

    def test_default(self, registry, cache):
        assert resolve_format(registry, cache, "a.png").id == "coco"
        assert "a.png" in cache
