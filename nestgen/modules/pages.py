"""Page builder: content pages and film collection galleries."""
from dataclasses import dataclass
from pathlib import Path

from nestgen.modules.assembler import PageTemplate, load_page_template, page_title
from nestgen.modules.assets import copy_tree
from nestgen.modules.discovery import find_content_files, scan_collections
from nestgen.modules.gallery import render_gallery, render_random_index
from nestgen.modules.minify import write_html_file
from nestgen.modules.navigation import classify_collection, render_film_header
from nestgen.modules.pairing import create_image_pairs

FILM_INDEX_PAGE = 'index'


@dataclass
class SiteTemplates:
    """The base skeleton and shared fragments, read once per build."""

    base: PageTemplate
    header: str
    footer: str
    film_header: str


def _read_fragment(path):
    return Path(path).read_text(encoding='utf-8')


def load_site_templates(config):
    """Load every template the build needs. Missing files abort the build."""
    templates_dir = config.templates_path
    return SiteTemplates(
        base=load_page_template(templates_dir / config.base_template),
        header=_read_fragment(templates_dir / config.header_template),
        footer=_read_fragment(templates_dir / config.footer_template),
        film_header=_read_fragment(templates_dir / config.film.header_template),
    )


def is_film_content(content_file, film_config):
    subdir = film_config.content_subdir
    if not subdir:
        return False
    return content_file.relative_dir == subdir or content_file.relative_dir.startswith(subdir + '/')


def build_content_pages(config, templates, minify=False):
    """Render one page per content file, mirroring its directory under dist."""
    written = []
    for content_file in find_content_files(config.content_path, config.content_suffix):
        print(f"  Building {content_file.output_name}...")
        content = _read_fragment(content_file.path)

        if is_film_content(content_file, config.film):
            site_name = config.film.site_name
            header = render_film_header(templates.film_header, current_page=content_file.name)
        else:
            site_name = config.site_name
            header = templates.header

        html = templates.base.render(
            page_title=page_title(site_name, content_file.name, config.index_page),
            header=header,
            content=content,
            footer=templates.footer,
        )
        output_path = config.dist_path / content_file.output_name
        write_html_file(output_path, html, minify=minify)
        written.append(output_path)
    return written


def build_collection_pages(collections, config, templates, minify=False):
    """Render one gallery page per collection.

    The designated index collection is written a second time as the film
    index page.
    """
    film = config.film
    if FILM_INDEX_PAGE in collections and film.index_collection != FILM_INDEX_PAGE:
        print(f"[WARNING] Collection '{FILM_INDEX_PAGE}' shares its output with the film index; "
              f"{film.output_dir}/{FILM_INDEX_PAGE}.html will be overwritten")

    written = []
    for collection_name, images in collections.items():
        print(f"  Building film collection: {collection_name}...")
        pairs = create_image_pairs(images)

        header = render_film_header(
            templates.film_header,
            current_page=classify_collection(collection_name, film),
            current_collection=collection_name,
        )
        html = templates.base.render(
            page_title=f'{film.site_name} - {collection_name}',
            header=header,
            content=render_gallery(collection_name, pairs, film.url_prefix),
            footer=templates.footer,
        )

        output_path = config.film_dist_path / f'{collection_name}.html'
        write_html_file(output_path, html, minify=minify)
        written.append(output_path)

        if collection_name == film.index_collection:
            index_path = config.film_dist_path / f'{FILM_INDEX_PAGE}.html'
            write_html_file(index_path, html, minify=minify)
            written.append(index_path)
    return written


def build_random_index_page(collections, config, templates, minify=False):
    """Film index showing a random image from any collection."""
    film = config.film
    html = templates.base.render(
        page_title=film.site_name,
        header=render_film_header(templates.film_header, current_page=FILM_INDEX_PAGE),
        content=render_random_index(collections, film.url_prefix),
        footer=templates.footer,
    )
    output_path = config.film_dist_path / f'{FILM_INDEX_PAGE}.html'
    write_html_file(output_path, html, minify=minify)
    return output_path


def import_collections(config):
    """Mirror configured source directories into the film image tree."""
    for src, dest in config.film.collection_imports.items():
        src_path = config.source_path / src
        if not src_path.is_dir():
            print(f"[WARNING] Collection import source not found: {src_path}")
            continue
        count = copy_tree(src_path, config.source_path / dest)
        print(f"  Imported {count} file(s) from {src} into {dest}")


def build_film_pages(config, templates, minify=False):
    """Scan the film image tree and build every collection page plus the index."""
    print("Building film pages...")
    import_collections(config)
    collections = scan_collections(config.film_image_path)

    written = build_collection_pages(collections, config, templates, minify=minify)
    if collections and config.film.index_collection not in collections:
        written.append(build_random_index_page(collections, config, templates, minify=minify))
    return written
