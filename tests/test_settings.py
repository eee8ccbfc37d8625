"""
Test script for settings persistence and the command line entry point.

Usage:
    python tests/test_settings.py
"""

import json
import sys
import tempfile
from pathlib import Path
from unittest import mock

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from PIL import Image

from pickscan.ocr import BoundingBox, RecognizedText, TextBlock, TextElement, TextLine, TextRecognizer
from pickscan.ocr import factory as ocr_factory
from pickscan.settings import DEFAULT_SETTINGS, load_settings, recognizer_config, save_settings

import main as cli


def test_settings_roundtrip():
    """Saved values merge over defaults; bad files fall back to defaults."""
    print("\n" + "="*60)
    print("TEST: Settings")
    print("="*60)

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "pickscan.json"

        assert load_settings(path) == DEFAULT_SETTINGS

        save_settings({"search_radius": 150.0, "upscale": 2.0}, path)
        settings = load_settings(path)
        print(f"  Loaded: {settings}")
        assert settings["search_radius"] == 150.0
        assert settings["recognizer"] == "tesseract"

        config = recognizer_config(settings)
        assert config["upscale"] == 2.0
        assert config["tesseract_cmd"] is None

        path.write_text("{not json", encoding="utf-8")
        assert load_settings(path) == DEFAULT_SETTINGS

        path.write_text(json.dumps([1, 2]), encoding="utf-8")
        assert load_settings(path) == DEFAULT_SETTINGS

    print("  [PASS] Settings")


class BoardRecognizer(TextRecognizer):
    """Recognizer that always sees a two-team odds board."""

    @property
    def name(self) -> str:
        return "board"

    def process(self, image_bytes, metadata):
        line = TextLine([
            TextElement("-110", BoundingBox(10, 10, 40, 20)),
            TextElement("Chiefs", BoundingBox(10, 40, 60, 20)),
            TextElement("Bills", BoundingBox(10, 70, 60, 20)),
        ])
        return RecognizedText(blocks=[TextBlock([line])], engine=self.name)


def test_cli():
    """The CLI prints the pick as JSON and exits 0, or 1 when nothing is found."""
    print("\n" + "="*60)
    print("TEST: CLI")
    print("="*60)

    with tempfile.TemporaryDirectory() as tmp:
        image_path = Path(tmp) / "slip.png"
        Image.new("RGB", (200, 200), "white").save(image_path)

        with mock.patch.dict(ocr_factory._RECOGNIZER_REGISTRY, {"board": BoardRecognizer}):
            ocr_factory._RECOGNIZER_CACHE.pop("board", None)
            settings = Path(tmp) / "pickscan.json"

            code = cli.main([str(image_path), "30", "15", "--recognizer", "board", "--settings", str(settings)])
            assert code == 0

            code = cli.main([str(image_path), "190", "190", "--recognizer", "board", "--settings", str(settings)])
            assert code == 1

        assert cli.main([str(Path(tmp) / "missing.png"), "0", "0", "--settings", str(settings)]) == 2

        # Bad values in the settings file exit cleanly instead of raising
        for bad in ({"recognizer": "bogus"}, {"upscale": 0}, {"search_radius": -5}):
            bad_settings = Path(tmp) / "bad.json"
            save_settings(bad, bad_settings)
            code = cli.main([str(image_path), "30", "15", "--settings", str(bad_settings)])
            print(f"  {bad} -> exit {code}")
            assert code == 2

    print("  [PASS] CLI")


def main():
    """Run all tests."""
    print("\n" + "#"*60)
    print("# SETTINGS VALIDATION TESTS")
    print("#"*60)

    tests = [
        ("Settings", test_settings_roundtrip),
        ("CLI", test_cli),
    ]

    results = []
    for name, test in tests:
        try:
            test()
            results.append((name, True))
        except AssertionError as e:
            print(f"  [FAIL] {e}")
            results.append((name, False))

    print("\n" + "="*60)
    print("SUMMARY")
    print("="*60)

    all_passed = True
    for name, passed in results:
        status = "PASS" if passed else "FAIL"
        print(f"  {name}: [{status}]")
        if not passed:
            all_passed = False

    print()
    if all_passed:
        print("All tests PASSED!")
        return 0
    else:
        print("Some tests FAILED!")
        return 1


if __name__ == "__main__":
    sys.exit(main())
