from __future__ import annotations

import sys
import unittest
from pathlib import Path

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from compilesoy.core.errors import ConfigurationError  # noqa: E402
from compilesoy.runtime.config import load_config, parse_bool  # noqa: E402


class LoadConfigTests(unittest.TestCase):
    def test_html_config(self) -> None:
        cfg = load_config({"soyFiles": "tpl", "outputType": "html", "template": "vit.page"}, env={})
        self.assertEqual(cfg.soy_files, Path("tpl"))
        self.assertEqual(cfg.output_type, "html")
        self.assertEqual(cfg.template, "vit.page")
        self.assertIsNone(cfg.js_output_path)

    def test_js_config_defaults(self) -> None:
        cfg = load_config({"soyFiles": "tpl", "outputType": "js", "soyJsOutputPath": "out"}, env={})
        self.assertEqual(cfg.js_output_path, Path("out"))
        self.assertTrue(cfg.js_options.generate_jsdoc)
        self.assertTrue(cfg.js_options.provide_require)
        self.assertEqual((cfg.log_format, cfg.log_level), ("text", "INFO"))

    def test_js_switches(self) -> None:
        cfg = load_config(
            {
                "soyFiles": "tpl",
                "outputType": "js",
                "soyJsOutputPath": "out",
                "shouldGenerateJsdoc": "false",
                "shouldProvideRequireJsFunctions": "No",
            },
            env={},
        )
        self.assertFalse(cfg.js_options.generate_jsdoc)
        self.assertFalse(cfg.js_options.provide_require)

    def test_invalid_output_type(self) -> None:
        with self.assertRaises(ConfigurationError) as cm:
            load_config({"soyFiles": "tpl", "outputType": "pdf"}, env={})
        self.assertIn("outputType", str(cm.exception))

    def test_missing_output_type(self) -> None:
        with self.assertRaises(ConfigurationError):
            load_config({"soyFiles": "tpl"}, env={})

    def test_missing_soy_files(self) -> None:
        with self.assertRaises(ConfigurationError):
            load_config({"outputType": "html", "template": "a"}, env={})

    def test_html_requires_template(self) -> None:
        with self.assertRaises(ConfigurationError):
            load_config({"soyFiles": "tpl", "outputType": "html"}, env={})

    def test_js_requires_output_path(self) -> None:
        with self.assertRaises(ConfigurationError):
            load_config({"soyFiles": "tpl", "outputType": "js"}, env={})

    def test_unknown_options_are_ignored(self) -> None:
        cfg = load_config(
            {"soyFiles": "tpl", "outputType": "html", "template": "a", "colour": "red"}, env={}
        )
        self.assertEqual(cfg.template, "a")

    def test_log_settings_from_env(self) -> None:
        cfg = load_config(
            {"soyFiles": "tpl", "outputType": "html", "template": "a"},
            env={"COMPILESOY_JSON_LOGS": "1", "COMPILESOY_LOG_LEVEL": "debug"},
        )
        self.assertEqual((cfg.log_format, cfg.log_level), ("json", "DEBUG"))

    def test_log_option_beats_env(self) -> None:
        cfg = load_config(
            {"soyFiles": "tpl", "outputType": "html", "template": "a", "logFormat": "text"},
            env={"COMPILESOY_JSON_LOGS": "1"},
        )
        self.assertEqual(cfg.log_format, "text")

    def test_bad_log_format(self) -> None:
        with self.assertRaises(ConfigurationError):
            load_config(
                {"soyFiles": "tpl", "outputType": "html", "template": "a", "logFormat": "xml"},
                env={},
            )


class ParseBoolTests(unittest.TestCase):
    def test_values(self) -> None:
        self.assertTrue(parse_bool("x", "TRUE", False))
        self.assertFalse(parse_bool("x", "0", True))
        self.assertTrue(parse_bool("x", None, True))

    def test_rejects_garbage(self) -> None:
        with self.assertRaises(ConfigurationError):
            parse_bool("x", "maybe", True)


if __name__ == "__main__":
    unittest.main()
