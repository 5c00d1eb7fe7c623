"""Site configuration loaded from site_config.yaml."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

CONFIG_FILE = "site_config.yaml"


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file and return its contents as a dict."""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return data if isinstance(data, dict) else {}


@dataclass
class ImageOptimization:
    """Fixed recompression parameters for the static asset pipeline."""

    enabled: bool = True
    jpeg_quality: int = 75
    png_colors: int = 256
    webp_quality: int = 75
    workers: int = 4


@dataclass
class FilmConfig:
    """Settings for the film (photography) sub-site."""

    site_name: str = "fi.lm.k&auml;ch"
    header_template: str = "header-film.html"
    content_subdir: str = "film"
    image_dir: str = "static/img/film"
    output_dir: str = "film"
    url_prefix: str = "/static/img/film"
    index_collection: str | None = "root"
    collection_imports: dict[str, str] = field(default_factory=dict)
    page_types: dict[str, list[str]] = field(default_factory=dict)
    year_pattern: str = r"^\d{4}$"


@dataclass
class SiteConfig:
    """Everything a build needs, passed explicitly into every builder."""

    root: Path  # Directory holding site_config.yaml; other paths resolve from here
    site_name: str = "The Nest"
    src_dir: str = "src"
    dist_dir: str = "dist"
    templates_dir: str = "templates"
    content_dir: str = "content"
    static_dir: str = "static"
    content_suffix: str = "-content.html"
    index_page: str = "index"
    base_template: str = "base.html"
    header_template: str = "header.html"
    footer_template: str = "footer.html"
    stylesheet: str | None = "static/sass/main.scss"
    stylesheet_output: str = "static/css/main.css"
    minify: bool = True
    image_optimization: ImageOptimization = field(default_factory=ImageOptimization)
    film: FilmConfig = field(default_factory=FilmConfig)

    # ------------------------------------------------------------------
    # Resolved paths
    # ------------------------------------------------------------------

    @property
    def source_path(self) -> Path:
        return self.root / self.src_dir

    @property
    def dist_path(self) -> Path:
        return self.root / self.dist_dir

    @property
    def templates_path(self) -> Path:
        return self.source_path / self.templates_dir

    @property
    def content_path(self) -> Path:
        return self.source_path / self.content_dir

    @property
    def static_path(self) -> Path:
        return self.source_path / self.static_dir

    @property
    def film_image_path(self) -> Path:
        return self.source_path / self.film.image_dir

    @property
    def film_dist_path(self) -> Path:
        return self.dist_path / self.film.output_dir

    @property
    def stylesheet_path(self) -> Path | None:
        if not self.stylesheet:
            return None
        return self.source_path / self.stylesheet

    @property
    def stylesheet_output_path(self) -> Path:
        return self.dist_path / self.stylesheet_output

    @property
    def static_dist_path(self) -> Path:
        return self.dist_path / self.static_dir


def _build_section(cls, data: Any, section: str):
    """Instantiate a config dataclass from a mapping, checking value types."""
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"'{section}' must be a mapping, got {type(data).__name__}")

    defaults = cls(root=Path(".")) if cls is SiteConfig else cls()
    known = {f.name for f in fields(cls)}
    values = {}
    for key, value in data.items():
        if key not in known or key == "root":
            print(f"[WARNING] Unknown key '{key}' in {section}, ignoring")
            continue
        default = getattr(defaults, key)
        if isinstance(default, (ImageOptimization, FilmConfig)):
            continue
        if default is not None and value is not None and not _same_kind(default, value):
            raise ValueError(
                f"'{section}.{key}' must be {type(default).__name__}, got {type(value).__name__}"
            )
        values[key] = value
    return values


def _same_kind(default: Any, value: Any) -> bool:
    if isinstance(default, bool):
        return isinstance(value, bool)
    if isinstance(default, int):
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, type(default))


def config_from_dict(data: dict[str, Any], root: Path) -> SiteConfig:
    """Build a SiteConfig from parsed YAML data."""
    values = _build_section(SiteConfig, data, "site_config")
    optimization = ImageOptimization(
        **_build_section(ImageOptimization, data.get("image_optimization"), "image_optimization")
    )
    film = FilmConfig(**_build_section(FilmConfig, data.get("film"), "film"))
    for page_type, names in film.page_types.items():
        if not isinstance(names, list):
            raise ValueError(f"'film.page_types.{page_type}' must be a list of collection names")
    # Unquoted YAML years arrive as ints
    film.page_types = {page_type: [str(name) for name in names]
                       for page_type, names in film.page_types.items()}
    return SiteConfig(root=root, image_optimization=optimization, film=film, **values)


def load_site_config(config_file: Path | str = CONFIG_FILE) -> SiteConfig:
    """Load the site configuration; a missing file means all defaults."""
    path = Path(config_file).resolve()
    data = load_yaml(path) if path.exists() else {}
    return config_from_dict(data, path.parent)
