"""Content file discovery and film image collection scanning."""
import os
import re
from dataclasses import dataclass
from pathlib import Path

IMAGE_EXTENSIONS = {'.jpg', '.jpeg', '.png', '.gif', '.webp', '.svg'}

# Collection key used when the scan root itself holds images
ROOT_COLLECTION = 'root'

_NUMBER_RUN = re.compile(r'([0-9]+)')


@dataclass(frozen=True)
class ContentFile:
    """A renderable page body found under the content directory."""

    path: Path
    name: str
    relative_dir: str  # POSIX path from the content root, '' for the root itself

    @property
    def output_name(self):
        """Output path relative to the dist directory."""
        if self.relative_dir:
            return f'{self.relative_dir}/{self.name}.html'
        return f'{self.name}.html'


def find_content_files(content_dir, suffix='-content.html'):
    """Recursively collect every file under content_dir ending in suffix.

    Raises FileNotFoundError if content_dir does not exist.
    """
    content_dir = Path(content_dir)
    if not content_dir.is_dir():
        raise FileNotFoundError(f"Content directory not found: {content_dir}")

    found = []
    for root, dirs, files in os.walk(content_dir):
        dirs.sort()
        rel_dir = os.path.relpath(root, content_dir)
        rel_dir = '' if rel_dir == '.' else Path(rel_dir).as_posix()
        for file in sorted(files):
            if not file.endswith(suffix) or file == suffix:
                continue
            found.append(ContentFile(
                path=Path(root, file).resolve(),
                name=file[:-len(suffix)],
                relative_dir=rel_dir,
            ))
    return found


def natural_sort_key(name):
    """Sort key comparing digit runs by value and text case-insensitively.

    "2.jpg" sorts before "10.jpg"; names that only differ in case or in
    leading zeros fall back to the raw name so the order stays total.
    """
    parts = _NUMBER_RUN.split(name.casefold())
    key = tuple(int(part) if i % 2 else part for i, part in enumerate(parts))
    return key, name


def is_image_file(filename):
    return os.path.splitext(filename)[1].lower() in IMAGE_EXTENSIONS


def scan_image_folder(folder_path):
    """Return the naturally sorted image filenames directly inside folder_path."""
    with os.scandir(folder_path) as entries:
        images = [entry.name for entry in entries if entry.is_file() and is_image_file(entry.name)]
    return sorted(images, key=natural_sort_key)


def scan_collections(base_path, relative_path=''):
    """Map collection name to sorted image filenames for every image directory.

    A directory becomes a collection when it holds at least one image; its
    name is the POSIX path relative to the scan root, or ROOT_COLLECTION for
    the root itself. Subdirectories are always scanned. A missing root yields
    an empty mapping.
    """
    collections = {}
    base_path = Path(base_path)
    if not base_path.is_dir():
        print(f"[INFO] Image folder does not exist: {base_path}")
        return collections

    images = scan_image_folder(base_path)
    if images:
        collection_name = relative_path or ROOT_COLLECTION
        collections[collection_name] = images
        print(f"  Found collection: {collection_name} ({len(images)} images)")

    with os.scandir(base_path) as entries:
        subdirs = sorted((entry.name for entry in entries if entry.is_dir()), key=natural_sort_key)
    for subdir in subdirs:
        sub_relative = f'{relative_path}/{subdir}' if relative_path else subdir
        collections.update(scan_collections(base_path / subdir, sub_relative))

    return collections
