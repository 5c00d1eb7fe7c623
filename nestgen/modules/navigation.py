"""Active-page highlighting for the film sub-site header."""
import re

from nestgen.modules.gallery import env


def classify_collection(collection_name, film_config):
    """Return the nav section a collection belongs to, or None.

    Year collections (e.g. "2023") map to "years"; anything listed under
    film.page_types maps to that type. Nested collections also match on
    their last path segment.
    """
    leaf = collection_name.rsplit('/', 1)[-1]
    if re.match(film_config.year_pattern, leaf):
        return 'years'
    for page_type, names in film_config.page_types.items():
        if collection_name in names or leaf in names:
            return page_type
    return None


def render_film_header(header, current_page=None, current_collection=None):
    """Add the page-active style and link-highlighting script to a header."""
    if 'page-active' not in header:
        header = env.get_template('active_nav_style.html').render() + header

    script = env.get_template('active_nav.html').render(
        current_page=current_page or '',
        current_collection=current_collection or '',
    )
    if '</header>' in header:
        return header.replace('</header>', script + '\n</header>', 1)
    return header + script
