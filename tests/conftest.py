import pytest

from nestgen.config import config_from_dict

BASE_TEMPLATE = """<!DOCTYPE html>
<html>
<head><title>{{PAGE_TITLE}}</title></head>
<body>
<div id="header-container"></div>
<div id="content-container"></div>
<div id="footer-container"></div>
</body>
</html>
"""


def make_site(root):
    """Lay out a minimal src/ tree with templates and two content pages."""
    templates = root / "src" / "templates"
    templates.mkdir(parents=True)
    (templates / "base.html").write_text(BASE_TEMPLATE, encoding="utf-8")
    (templates / "header.html").write_text("<header>main nav</header>", encoding="utf-8")
    (templates / "header-film.html").write_text(
        '<header><nav class="page-nav"><a href="./about">about</a></nav></header>', encoding="utf-8")
    (templates / "footer.html").write_text("<footer>bye</footer>", encoding="utf-8")

    content = root / "src" / "content"
    (content / "film").mkdir(parents=True)
    (content / "index-content.html").write_text("<p>welcome</p>", encoding="utf-8")
    (content / "film" / "about-content.html").write_text("<p>about film</p>", encoding="utf-8")
    return root


@pytest.fixture
def site_root(tmp_path):
    return make_site(tmp_path)


@pytest.fixture
def site_config(site_root):
    return config_from_dict(
        {"stylesheet": None, "minify": False, "image_optimization": {"enabled": False}},
        site_root,
    )
