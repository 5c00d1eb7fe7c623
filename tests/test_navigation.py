from nestgen.config import FilmConfig
from nestgen.modules.navigation import classify_collection, render_film_header


def test_classify_collection():
    film = FilmConfig(page_types={"collections": ["font", "egg"], "commissions": ["ropes"]})

    assert classify_collection("2023", film) == "years"
    assert classify_collection("egg", film) == "collections"
    assert classify_collection("collections/font", film) == "collections"
    assert classify_collection("ropes", film) == "commissions"
    assert classify_collection("root", film) is None


def test_render_film_header_inserts_script_before_close():
    header = render_film_header("<header><nav></nav></header>", "about", "egg")

    assert header.startswith("<style>")
    assert header.rstrip().endswith("</header>")
    assert header.index("<script>") < header.index("</header>")
    assert 'const currentPage = "about";' in header
    assert 'const currentCollection = "egg";' in header


def test_render_film_header_keeps_existing_style():
    header = render_film_header('<header class="x"><a class="page-active"></a></header>')
    assert not header.startswith("<style>")


def test_render_film_header_escapes_names():
    header = render_film_header("<header></header>", current_collection="</script><b>")
    assert "</script><b>" not in header
