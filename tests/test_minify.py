import pytest

pytest.importorskip("htmlmin")
pytest.importorskip("rcssmin")
pytest.importorskip("rjsmin")

from nestgen.modules.minify import (
    minification_available,
    minify_css_content,
    minify_html_content,
    write_html_file,
)


def test_minification_available():
    assert minification_available()


def test_minify_html_compacts_inline_code():
    html = """<html>
  <head>
    <!-- comment -->
    <style>
      .page-active {
        font-weight: bold;
      }
    </style>
  </head>
  <body>
    <script>
      const images = [1, 2, 3];
    </script>
  </body>
</html>"""

    out = minify_html_content(html)

    assert "<!-- comment -->" not in out
    assert ".page-active{font-weight:bold}" in out
    assert "const images=[1,2,3];" in out
    assert len(out) < len(html)


def test_write_html_file_creates_parents(tmp_path):
    target = tmp_path / "film" / "collections" / "font.html"
    write_html_file(target, "<p>hi</p>")
    assert target.read_text(encoding="utf-8") == "<p>hi</p>"


def _fail(content):
    raise ValueError("unsupported input")


def test_css_minification_failure_keeps_original(monkeypatch, capsys):
    import rcssmin

    monkeypatch.setattr(rcssmin, "cssmin", _fail)

    assert minify_css_content("a { color: red; }") == "a { color: red; }"
    assert "[WARNING] CSS minification failed" in capsys.readouterr().out


def test_js_minification_failure_keeps_original(monkeypatch, capsys):
    import rjsmin

    monkeypatch.setattr(rjsmin, "jsmin", _fail)

    html = minify_html_content("<script>var a = 1;</script>")

    assert "var a = 1;" in html
    assert "[WARNING] JavaScript minification failed" in capsys.readouterr().out
