from __future__ import annotations

import os
import sys
import tempfile
import unittest
from pathlib import Path

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from jinja2 import TemplateSyntaxError, UndefinedError  # noqa: E402

from compilesoy.core.errors import TemplateNotFoundError  # noqa: E402
from compilesoy.core.models import JsSrcOptions  # noqa: E402
from compilesoy.rendering.template_engine import JinjaTemplateCompiler, namespace_for  # noqa: E402

PAGE = """\
{% macro header(title) %}<h1>{{ title }}</h1>{% endmacro %}
{% macro items(entries, sep=", ") %}{{ entries | join(sep) }}{% endmacro %}
{% macro loose() %}{{ kwargs.get("who", "nobody") }}{% endmacro %}
"""

STANDALONE = "Hello {{ name }}!"


class JinjaTemplateCompilerTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        (self.root / "vit").mkdir()
        self.page = self.root / "vit" / "page.soy"
        self.page.write_text(PAGE, encoding="utf-8")
        self.greet = self.root / "greet.soy"
        self.greet.write_text(STANDALONE, encoding="utf-8")
        self.compiler = JinjaTemplateCompiler([self.page, self.greet], root=self.root)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_namespaces(self) -> None:
        self.assertEqual(sorted(self.compiler.namespaces), ["greet", "vit.page"])
        self.assertEqual(namespace_for(self.page, self.root), "vit.page")

    def test_render_macro(self) -> None:
        out = self.compiler.render("vit.page.header", {"title": "Polling", "unused": "x"})
        self.assertEqual(out, "<h1>Polling</h1>")

    def test_render_escapes_html(self) -> None:
        out = self.compiler.render("vit.page.header", {"title": "<b>"})
        self.assertEqual(out, "<h1>&lt;b&gt;</h1>")

    def test_render_list_param(self) -> None:
        out = self.compiler.render("vit.page.items", {"entries": ["a", "b"]})
        self.assertEqual(out, "a, b")

    def test_render_kwargs_macro_gets_everything(self) -> None:
        out = self.compiler.render("vit.page.loose", {"who": "everyone"})
        self.assertEqual(out, "everyone")

    def test_render_whole_file(self) -> None:
        self.assertEqual(self.compiler.render("greet", {"name": "World"}), "Hello World!")

    def test_missing_param_fails_loudly(self) -> None:
        with self.assertRaises(UndefinedError):
            self.compiler.render("greet", {})

    def test_unknown_namespace(self) -> None:
        with self.assertRaises(TemplateNotFoundError):
            self.compiler.render("nope.header", {})

    def test_unknown_macro(self) -> None:
        with self.assertRaises(TemplateNotFoundError):
            self.compiler.render("vit.page.footer", {})

    def test_compile_to_js_one_source_per_file_in_order(self) -> None:
        sources = self.compiler.compile_to_js(JsSrcOptions())
        self.assertEqual(len(sources), 2)
        self.assertIn("goog.provide('vit.page');", sources[0])
        self.assertIn("vit.page.header = function(opt_data) {", sources[0])
        self.assertIn("goog.provide('greet');", sources[1])
        self.assertIn("Reads top-level data: name.", sources[1])

    def test_syntax_error_aborts_batch(self) -> None:
        broken = self.root / "broken.soy"
        broken.write_text("{% if %}", encoding="utf-8")
        compiler = JinjaTemplateCompiler([self.page, broken], root=self.root)
        with self.assertRaises(TemplateSyntaxError):
            compiler.compile_to_js(JsSrcOptions())

    def test_root_defaults_to_common_parent(self) -> None:
        compiler = JinjaTemplateCompiler([self.page])
        self.assertEqual(compiler.namespaces, ["page"])

    def test_kwargs_macro_is_flagged_in_js(self) -> None:
        page_js = self.compiler.compile_to_js(JsSrcOptions())[0]
        self.assertIn("opt_data Keys beyond the ones below reach the template too.", page_js)

    @unittest.skipUnless(hasattr(os, "symlink"), "symlinks not supported")
    def test_symlinked_directory_keeps_link_name(self) -> None:
        shared = self.root / "shared"
        shared.mkdir()
        target = shared / "x.soy"
        target.write_text("{% macro hi(who) %}hi {{ who }}{% endmacro %}", encoding="utf-8")
        try:
            os.symlink("shared", self.root / "lib", target_is_directory=True)
        except (OSError, NotImplementedError) as exc:
            self.skipTest(f"cannot create symlink: {exc}")
        compiler = JinjaTemplateCompiler([self.root / "lib" / "x.soy"], root=self.root)
        self.assertEqual(compiler.namespaces, ["lib.x"])
        self.assertEqual(compiler.render("lib.x.hi", {"who": "there"}), "hi there")


if __name__ == "__main__":
    unittest.main()
