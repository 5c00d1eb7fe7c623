"""Compile the site's Sass stylesheet into CSS."""
from pathlib import Path

import sass


def compile_stylesheet(src, dest, minify=False):
    """Compile src (.scss/.sass) to dest. Compile errors propagate."""
    src = Path(src)
    if not src.exists():
        raise FileNotFoundError(f"Missing stylesheet source: {src}")

    css = sass.compile(filename=str(src), output_style='compressed' if minify else 'expanded')
    dest = Path(dest)
    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_text(css, encoding='utf-8')
    return dest
