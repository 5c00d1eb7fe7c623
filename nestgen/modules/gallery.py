"""Gallery markup for film collection pages and the random-image film index."""
import os
import re
from urllib.parse import quote

from jinja2 import Environment, FileSystemLoader, select_autoescape

TEMPLATES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), os.pardir, 'templates')

_ALT_EXTENSION = re.compile(r'\.(jpg|jpeg|png)$', re.IGNORECASE)


def alt_text(filename):
    """Alt text for a gallery image: the filename without its photo extension."""
    return _ALT_EXTENSION.sub('', filename)


env = Environment(
    loader=FileSystemLoader(os.path.normpath(TEMPLATES_DIR)),
    autoescape=select_autoescape(['html']),
)
env.filters['alt_text'] = alt_text


def collection_image_base(url_prefix, collection_name):
    """URL directory holding a collection's images."""
    return f"{url_prefix.rstrip('/')}/{quote(collection_name)}"


def render_gallery(collection_name, pairs, url_prefix):
    """Markup listing every pair; hover images overlap their primary."""
    return env.get_template('gallery.html').render(
        pairs=pairs,
        image_base=collection_image_base(url_prefix, collection_name),
    )


def render_random_index(collections, url_prefix):
    """Markup showing one random image drawn from every collection."""
    images = [
        f'{collection_image_base(url_prefix, name)}/{quote(image)}'
        for name, files in collections.items()
        for image in files
    ]
    return env.get_template('film_index.html').render(images=images)
