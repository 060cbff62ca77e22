import json
import os
import tempfile
import unittest

import pydantic

from . import hotspot_labels


class TestHotspotLabels(unittest.TestCase):
    def test_load_camel_case(self):
        with tempfile.TemporaryDirectory() as tempdir:
            fname = os.path.join(tempdir, "hotspots.json")
            with open(fname, "w") as f:
                json.dump(
                    {
                        "hotspots": [
                            {"id": "a", "name": "Logo", "startTime": 0, "endTime": 1500},
                            {"id": "b", "startTime": 700},
                            {"id": "c", "start_time": 10, "end_time": None},
                        ]
                    },
                    f,
                )
            loaded = hotspot_labels.HotspotsFile.load(fname)

        self.assertEqual(loaded.format, "v1")
        a, b, c = loaded.hotspots
        self.assertEqual((a.id, a.name, a.start_time, a.end_time), ("a", "Logo", 0, 1500))
        self.assertEqual((b.start_time, b.end_time), (700, None))
        self.assertEqual((c.start_time, c.end_time), (10, None))

    def test_save_and_load(self):
        hotspots_file = hotspot_labels.HotspotsFile(
            hotspots=[hotspot_labels.Hotspot(id="a", start_time=5, end_time=-1)]
        )
        with tempfile.TemporaryDirectory() as tempdir:
            fname = os.path.join(tempdir, "hotspots.json")
            hotspots_file.save(fname)
            with open(fname) as f:
                saved = json.load(f)
            loaded = hotspot_labels.HotspotsFile.load(fname)

        self.assertEqual(saved["hotspots"][0]["startTime"], 5)
        self.assertEqual(loaded.model_dump(), hotspots_file.model_dump())

    def test_invalid(self):
        with self.assertRaises(pydantic.ValidationError):
            hotspot_labels.HotspotsFile.model_validate_json(
                '{"hotspots": [{"startTime": 5}]}'
            )
        with self.assertRaises(pydantic.ValidationError):
            hotspot_labels.HotspotsFile.model_validate_json(
                '{"format": "v0", "hotspots": []}'
            )
