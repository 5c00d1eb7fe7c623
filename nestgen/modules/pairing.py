"""Primary/hover image pairing for film galleries.

Files named ``<digits>a...`` and ``<digits>b...`` share a gallery slot: the
``a`` image is shown and the ``b`` image is revealed on hover.
"""
import re
from dataclasses import dataclass

_PAIR_PATTERN = re.compile(r'^(\d+)([ab])')


@dataclass(frozen=True)
class ImagePair:
    primary: str
    hover: str | None = None

    @property
    def has_hover(self):
        return self.hover is not None


def create_image_pairs(images):
    """Group a naturally sorted filename list into ImagePairs.

    Names without the ``<digits><a|b>`` prefix become unpaired primaries. A
    later file for an already filled slot replaces the earlier one.
    """
    buckets = {}
    for image_name in images:
        match = _PAIR_PATTERN.match(image_name)
        if match:
            key, slot = match.group(1), match.group(2)
        else:
            key, slot = image_name, 'a'

        bucket = buckets.setdefault(key, {})
        if slot in bucket:
            print(f"    [WARNING] '{image_name}' replaces '{bucket[slot]}' in pair {key}{slot}")
        bucket[slot] = image_name

    pairs = []
    for slots in buckets.values():
        if 'a' in slots:
            pairs.append(ImagePair(primary=slots['a'], hover=slots.get('b')))
        else:
            # Only a 'b' image: show it normally without hover effect
            pairs.append(ImagePair(primary=slots['b']))
    return pairs
