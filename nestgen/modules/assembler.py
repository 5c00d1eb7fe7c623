"""Page assembly: base skeleton + header, content and footer fragments.

The base template is a Jinja2 template exposing four named slots. Older
skeletons written with ``{{PAGE_TITLE}}`` and ``<div id="header-container"></div>``
style container markers are turned into slot templates on load; everything
around the markers is kept as literal text, braces included.
"""
import re
from pathlib import Path

from jinja2 import Environment, StrictUndefined, nodes

TITLE_SLOT = 'page_title'
FRAGMENT_SLOTS = ('header', 'content', 'footer')
SLOTS = (TITLE_SLOT,) + FRAGMENT_SLOTS

_LEGACY_MARKER = re.compile(
    r'<div\s+id=["\'](header|content|footer)-container["\']\s*>\s*</div>'
    r'|\{\{\s*PAGE_TITLE\s*\}\}'
)
_ENDRAW = re.compile(r'(\{%[-+]?\s*endraw\s*[-+]?%\})')

# Fragments are pre-rendered HTML and go in verbatim
_env = Environment(autoescape=False, undefined=StrictUndefined, keep_trailing_newline=True)


class TemplateSlotError(ValueError):
    """Raised when a base template does not declare its slots correctly."""


def _literal(text):
    """Template source that renders text unchanged."""
    pieces = []
    for i, part in enumerate(_ENDRAW.split(text)):
        if i % 2:
            # An endraw tag cannot sit inside a raw block; emit it as a string
            pieces.append('{{ %r }}' % part)
        elif part:
            pieces.append('{% raw %}' + part + '{% endraw %}')
    return ''.join(pieces)


def normalize_legacy_markers(source):
    """Rewrite a marker skeleton into slot template source.

    Sources without any legacy marker are returned unchanged and treated as
    Jinja2 templates.
    """
    if not _LEGACY_MARKER.search(source):
        return source

    pieces = []
    pos = 0
    for match in _LEGACY_MARKER.finditer(source):
        pieces.append(_literal(source[pos:match.start()]))
        pieces.append('{{ %s }}' % (match.group(1) or TITLE_SLOT))
        pos = match.end()
    pieces.append(_literal(source[pos:]))
    return ''.join(pieces)


class PageTemplate:
    """A base skeleton whose slots are resolved by name."""

    def __init__(self, source, name='base.html'):
        self.name = name
        source = normalize_legacy_markers(source)
        self._check_slots(_env.parse(source))
        self._template = _env.from_string(source)

    def _check_slots(self, ast):
        counts = {slot: 0 for slot in SLOTS}
        for node in ast.find_all(nodes.Name):
            if node.ctx == 'load' and node.name in counts:
                counts[node.name] += 1

        missing = [slot for slot in SLOTS if counts[slot] == 0]
        if missing:
            raise TemplateSlotError(f"{self.name} is missing slot(s): {', '.join(missing)}")
        repeated = [slot for slot in FRAGMENT_SLOTS if counts[slot] > 1]
        if repeated:
            raise TemplateSlotError(f"{self.name} uses slot(s) more than once: {', '.join(repeated)}")

    def render(self, page_title, header, content, footer):
        return self._template.render(
            page_title=page_title,
            header=header,
            content=content,
            footer=footer,
        )


def load_page_template(path):
    """Read a base template from disk. Missing files propagate."""
    path = Path(path)
    return PageTemplate(path.read_text(encoding='utf-8'), name=path.name)


def page_title(site_name, page_name, index_page='index'):
    """Title for a page: the bare site name for the index page."""
    if page_name == index_page:
        return site_name
    return f'{site_name} - {page_name}'
