"""HTML/CSS/JS minification of generated output."""
import re

_INLINE_SCRIPT = re.compile(r'(<script\b[^>]*>)(.*?)(</script>)', re.DOTALL | re.IGNORECASE)
_INLINE_STYLE = re.compile(r'(<style\b[^>]*>)(.*?)(</style>)', re.DOTALL | re.IGNORECASE)


def minification_available():
    """True when htmlmin, rcssmin and rjsmin can all be imported."""
    try:
        import htmlmin
        import rcssmin
        import rjsmin
    except ImportError as e:
        print(f"[WARNING] Minification disabled, missing library: {e}")
        return False
    return True


def minify_css_content(css_content):
    """Minify CSS content"""
    try:
        import rcssmin
        return rcssmin.cssmin(css_content)
    except Exception as e:
        print(f"    [WARNING] CSS minification failed: {e}")
        return css_content


def minify_js_content(js_content):
    """Minify JavaScript content"""
    try:
        import rjsmin
        return rjsmin.jsmin(js_content)
    except Exception as e:
        print(f"    [WARNING] JavaScript minification failed: {e}")
        return js_content


def minify_html_content(html_content):
    """Minify a page, including its inline scripts and styles."""
    import htmlmin

    html_content = _INLINE_SCRIPT.sub(
        lambda m: m.group(1) + minify_js_content(m.group(2)) + m.group(3), html_content)
    html_content = _INLINE_STYLE.sub(
        lambda m: m.group(1) + minify_css_content(m.group(2)) + m.group(3), html_content)
    try:
        return htmlmin.minify(
            html_content,
            remove_comments=True,
            remove_empty_space=True,
            reduce_boolean_attributes=True,
            keep_pre=True,
        )
    except Exception as e:
        print(f"    [WARNING] HTML minification failed: {e}")
        return html_content


def write_html_file(file_path, html_content, minify=False):
    """Write HTML content to file with optional minification"""
    if minify:
        html_content = minify_html_content(html_content)

    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, "w", encoding='utf-8') as f:
        f.write(html_content)
