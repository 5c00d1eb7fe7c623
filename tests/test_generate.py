import pytest

from nestgen.generate import build_site, main


def _write_config(root, extra=""):
    (root / "site_config.yaml").write_text(
        "minify: false\n"
        "stylesheet: null\n"
        "image_optimization:\n"
        "  enabled: false\n" + extra,
        encoding="utf-8",
    )
    return root / "site_config.yaml"


def test_build_site_runs_every_phase(site_config):
    static = site_config.static_path
    (static / "img" / "film").mkdir(parents=True)
    (static / "img" / "film" / "1a.jpg").write_bytes(b"a")
    (static / "img" / "film" / "1b.jpg").write_bytes(b"b")
    (static / "js").mkdir()
    (static / "js" / "app.js").write_text("let x = 1;", encoding="utf-8")

    result = build_site(site_config)

    dist = site_config.dist_path
    assert (dist / "index.html").exists()
    assert (dist / "film" / "about.html").exists()
    assert (dist / "film" / "root.html").read_text(encoding="utf-8") == \
        (dist / "film" / "index.html").read_text(encoding="utf-8")
    assert (dist / "static" / "img" / "film" / "1a.jpg").read_bytes() == b"a"
    assert (dist / "static" / "js" / "app.js").exists()
    assert result.assets.copied == 3
    assert len(result.pages) == 4


def test_clean_removes_stale_output(site_config):
    stale = site_config.dist_path / "old.html"
    stale.parent.mkdir(parents=True)
    stale.write_text("old", encoding="utf-8")

    build_site(site_config, clean=True)

    assert not stale.exists()
    assert (site_config.dist_path / "index.html").exists()


def test_main_succeeds(site_root):
    config_path = _write_config(site_root)

    assert main(["--config", str(config_path)]) == 0
    assert (site_root / "dist" / "index.html").exists()


def test_main_reports_missing_templates(site_root, capsys):
    config_path = _write_config(site_root)
    (site_root / "src" / "templates" / "base.html").unlink()

    assert main(["--config", str(config_path)]) == 1
    err = capsys.readouterr().err
    assert "[ERROR] Build failed" in err
    assert "base.html" in err


def test_main_reports_broken_template(site_root, capsys):
    config_path = _write_config(site_root)
    (site_root / "src" / "templates" / "base.html").write_text("<html>{{ page_title }}</html>", encoding="utf-8")

    assert main(["--config", str(config_path)]) == 1
    assert "missing slot" in capsys.readouterr().err


def test_main_with_minification(site_root):
    pytest.importorskip("htmlmin")
    pytest.importorskip("rcssmin")
    pytest.importorskip("rjsmin")
    config_path = _write_config(site_root)

    assert main(["--config", str(config_path)]) == 0
    plain = (site_root / "dist" / "film" / "about.html").read_text(encoding="utf-8")

    config_path.write_text("stylesheet: null\nimage_optimization:\n  enabled: false\n", encoding="utf-8")
    assert main(["--config", str(config_path)]) == 0
    minified = (site_root / "dist" / "film" / "about.html").read_text(encoding="utf-8")

    assert len(minified) < len(plain)
    assert "<p>about film</p>" in minified
