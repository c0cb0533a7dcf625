"""Score JPEG re-encodes of an image at several quality settings.

Run with:
    python examples/jpeg_quality_sweep.py photo.png
"""

import io
import sys

from PIL import Image

import ssimulacra


def main(path: str) -> None:
    original = Image.open(path).convert("RGB")
    metric = ssimulacra.SsimulacraMetric()

    for quality in (95, 85, 75, 50, 25, 10):
        buffer = io.BytesIO()
        original.save(buffer, format="JPEG", quality=quality)
        buffer.seek(0)
        distorted = Image.open(buffer)
        score = metric.compute(original, distorted)
        print(f"quality={quality:3d}  ssimulacra={score:.8f}  bytes={buffer.getbuffer().nbytes}")


if __name__ == "__main__":
    main(sys.argv[1])
