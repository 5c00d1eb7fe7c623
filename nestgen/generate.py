import argparse
import shutil
import sys
from dataclasses import dataclass, field, replace
from pathlib import Path

from nestgen.config import CONFIG_FILE, load_site_config
from nestgen.modules.assets import AssetReport, copy_static_assets
from nestgen.modules.minify import minification_available
from nestgen.modules.pages import build_content_pages, build_film_pages, load_site_templates
from nestgen.modules.stylesheet import compile_stylesheet


@dataclass
class BuildResult:
    pages: list = field(default_factory=list)
    stylesheet: Path | None = None
    assets: AssetReport = field(default_factory=AssetReport)


def clean_build_directory(config):
    """Delete the dist directory to ensure a fresh build"""
    dist = config.dist_path
    if dist.exists():
        print(f"[INFO] Cleaning build directory: {dist}")
        shutil.rmtree(dist)
    else:
        print("[INFO] Build directory does not exist, nothing to clean")


def build_site(config, clean=False, minify=None, optimize_images=None):
    """Run every build phase in order; the asset pipeline always runs last.

    minify and optimize_images override the config when not None. Any
    failure propagates to the caller.
    """
    if minify is None:
        minify = config.minify
    enable_minification = minify and minification_available()

    optimization = config.image_optimization
    if optimize_images is not None:
        optimization = replace(optimization, enabled=optimize_images)

    print("Building site...")
    if clean:
        clean_build_directory(config)
    config.dist_path.mkdir(parents=True, exist_ok=True)

    result = BuildResult()
    templates = load_site_templates(config)

    print("Building content pages...")
    result.pages.extend(build_content_pages(config, templates, minify=enable_minification))
    result.pages.extend(build_film_pages(config, templates, minify=enable_minification))

    stylesheet = config.stylesheet_path
    if stylesheet is not None:
        print(f"Compiling stylesheet {config.stylesheet}...")
        result.stylesheet = compile_stylesheet(
            stylesheet, config.stylesheet_output_path, minify=enable_minification)

    print("Copying static files...")
    result.assets = copy_static_assets(config.static_path, config.static_dist_path, optimization)

    print(f"\n[INFO] Built {len(result.pages)} page(s), "
          f"copied {result.assets.copied} and recompressed {result.assets.recompressed} asset(s)")
    print("Build completed successfully!")
    return result


def main(argv=None):
    parser = argparse.ArgumentParser(description='Static site generator for The Nest and its film gallery')
    parser.add_argument('--config', default=CONFIG_FILE, metavar='PATH',
                        help=f'Site configuration file (default: {CONFIG_FILE})')
    parser.add_argument('--clean', action='store_true',
                        help='Delete the dist directory before generating')
    parser.add_argument('--no-minify', action='store_true',
                        help='Disable HTML/CSS/JS minification for debugging')
    parser.add_argument('--no-optimize-images', action='store_true',
                        help='Copy images byte-for-byte instead of recompressing them')
    args = parser.parse_args(argv)

    try:
        config = load_site_config(args.config)
        build_site(
            config,
            clean=args.clean,
            minify=False if args.no_minify else None,
            optimize_images=False if args.no_optimize_images else None,
        )
    except Exception as e:
        print(f"[ERROR] Build failed: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
