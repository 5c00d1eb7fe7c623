"""Static asset pipeline: mirror the static tree, recompressing raster images."""
import os
import shutil
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path

from PIL import Image

RECOMPRESS_FORMATS = {
    '.jpg': 'JPEG',
    '.jpeg': 'JPEG',
    '.png': 'PNG',
    '.webp': 'WEBP',
}


@dataclass
class AssetReport:
    copied: int = 0
    recompressed: int = 0

    @property
    def total(self):
        return self.copied + self.recompressed


def copy_tree(src_dir, dest_dir):
    """Mirror src_dir into dest_dir byte-for-byte. Returns the file count."""
    count = 0
    for root, dirs, files in os.walk(src_dir):
        rel_dir = os.path.relpath(root, src_dir)
        target_dir = Path(dest_dir) if rel_dir == '.' else Path(dest_dir, rel_dir)
        target_dir.mkdir(parents=True, exist_ok=True)
        for file in files:
            shutil.copy2(os.path.join(root, file), target_dir / file)
            count += 1
    return count


def _flatten_alpha(img):
    """JPEG has no alpha channel: composite onto white."""
    if img.mode in ('RGBA', 'LA', 'P'):
        img = img.convert('RGBA')
        background = Image.new('RGB', img.size, (255, 255, 255))
        background.paste(img, mask=img.split()[-1])
        return background
    if img.mode != 'RGB':
        return img.convert('RGB')
    return img


def recompress_image(src_file, dst_file, optimization):
    """Re-encode one image with the fixed quality settings.

    Returns True when the recompressed file was kept, False when the source
    was copied instead (animated images, or output larger than the source).
    """
    image_format = RECOMPRESS_FORMATS[os.path.splitext(src_file)[1].lower()]

    with Image.open(src_file) as img:
        if getattr(img, 'is_animated', False):
            shutil.copy2(src_file, dst_file)
            return False

        save_args = {'optimize': True}
        exif = img.info.get('exif')
        if exif and image_format != 'PNG':
            save_args['exif'] = exif

        if image_format == 'JPEG':
            img = _flatten_alpha(img)
            save_args.update(quality=optimization.jpeg_quality, progressive=True)
        elif image_format == 'PNG':
            if img.mode != 'P':
                img = img.convert('RGBA').quantize(
                    colors=optimization.png_colors, method=Image.Quantize.FASTOCTREE)
        else:
            save_args.update(quality=optimization.webp_quality)
            del save_args['optimize']

        img.save(dst_file, image_format, **save_args)

    if os.path.getsize(dst_file) >= os.path.getsize(src_file):
        shutil.copy2(src_file, dst_file)
        return False
    return True


def copy_static_assets(src_dir, dest_dir, optimization=None):
    """Mirror src_dir into dest_dir, recompressing images when enabled.

    Recompressions run on a thread pool; every one is waited on before this
    returns, and the first failure is re-raised.
    """
    report = AssetReport()
    if not os.path.isdir(src_dir):
        print(f"[INFO] No static directory at {src_dir}, skipping asset copy.")
        return report

    optimize = optimization is not None and optimization.enabled
    workers = optimization.workers if optimize else 1
    pending = []

    with ThreadPoolExecutor(max_workers=max(1, workers)) as executor:
        for root, dirs, files in os.walk(src_dir):
            rel_dir = os.path.relpath(root, src_dir)
            target_dir = Path(dest_dir) if rel_dir == '.' else Path(dest_dir, rel_dir)
            target_dir.mkdir(parents=True, exist_ok=True)

            for file in files:
                src_file = os.path.join(root, file)
                dst_file = target_dir / file
                if optimize and os.path.splitext(file)[1].lower() in RECOMPRESS_FORMATS:
                    pending.append((src_file, executor.submit(
                        recompress_image, src_file, dst_file, optimization)))
                else:
                    shutil.copy2(src_file, dst_file)
                    report.copied += 1

        for src_file, future in pending:
            try:
                kept = future.result()
            except Exception as e:
                raise RuntimeError(f"Failed to recompress {src_file}: {e}") from e
            if kept:
                report.recompressed += 1
            else:
                report.copied += 1

    return report
