"""Print the Finder icon of a file as a base64-encoded PNG.

    iconfetcher <path> [size]
"""
import base64
import io
import logging
import math
import sys

from PIL import Image, ImageSequence

from finder_tools.config import (
    DEFAULT_ICON_SIZE,
    ICON_FAILURE_MESSAGE,
    ICONFETCHER_USAGE,
    configure_logging,
)
from finder_tools.errors import FinderToolsError, IconError
from finder_tools.macos import Workspace

logger = logging.getLogger(__name__)


def parse_size(args):
    """Pixel size from the optional second argument, or the default."""
    if len(args) < 2:
        return DEFAULT_ICON_SIZE
    try:
        value = float(args[1])
    except ValueError:
        return DEFAULT_ICON_SIZE
    if math.isnan(value) or math.isinf(value):
        return DEFAULT_ICON_SIZE
    # nearest pixel, halves round up
    return int(math.floor(value + 0.5))


def _pick_frame(icon, size):
    # Icon TIFFs carry one frame per representation (16, 32, ... 1024 px)
    frames = [frame.copy() for frame in ImageSequence.Iterator(icon)]
    large_enough = [f for f in frames if min(f.size) >= size]
    if large_enough:
        return min(large_enough, key=lambda f: f.width * f.height)
    return max(frames, key=lambda f: f.width * f.height)


def render_icon(data, size):
    """Draw icon `data` into a transparent size x size canvas and return PNG bytes."""
    if size < 1:
        raise IconError(f"invalid icon size: {size}")
    if not data:
        raise IconError("no icon data")

    try:
        with Image.open(io.BytesIO(data)) as icon:
            frame = _pick_frame(icon, size)
            logger.debug("drawing %sx%s frame at %spx", frame.width, frame.height, size)
            source = frame.convert("RGBA").resize((size, size), Image.Resampling.LANCZOS)

        canvas = Image.new("RGBA", (size, size), (0, 0, 0, 0))
        # no mask: pixels are copied, not blended
        canvas.paste(source, (0, 0))

        buffer = io.BytesIO()
        canvas.save(buffer, "PNG")
    except (OSError, ValueError, OverflowError, MemoryError) as exc:
        raise IconError(f"could not render icon: {exc}") from exc

    return buffer.getvalue()


def fetch_icon(path, size=DEFAULT_ICON_SIZE, workspace=None):
    workspace = workspace or Workspace()
    png = render_icon(workspace.icon_data(path), size)
    return base64.b64encode(png).decode("ascii")


def main(argv=None, workspace=None):
    args = sys.argv[1:] if argv is None else list(argv)
    configure_logging()

    if len(args) < 1:
        print(ICONFETCHER_USAGE, file=sys.stderr)
        return 1

    path = args[0]
    size = parse_size(args)

    try:
        encoded = fetch_icon(path, size, workspace)
    except FinderToolsError as exc:
        logger.debug("icon for %s failed: %s", path, exc)
        print(ICON_FAILURE_MESSAGE, file=sys.stderr)
        return 1

    print(encoded)
    return 0


if __name__ == "__main__":
    sys.exit(main())
