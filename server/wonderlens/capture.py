"""抓拍框选 — 在整帧上画红框并裁出框内区域。

与浏览器端的框选逻辑一致：以点击点为中心取一个正方形，红框 3px。
区域总是被夹在图片范围内，图片比方框小时方框随之缩小。

对外公开的参考 API：服务端直接接收客户端已标注的图片，不调用本模块；
供离线工具和测试按同一规则生成带红框的帧。
"""

from __future__ import annotations

import base64
import io
from dataclasses import dataclass

from PIL import Image, ImageDraw

DEFAULT_SQUARE_SIZE = 100
_OUTLINE_COLOR = (255, 0, 0)
_OUTLINE_WIDTH = 3


@dataclass(frozen=True)
class Region:
    left: int
    top: int
    size: int

    @property
    def right(self) -> int:
        return self.left + self.size

    @property
    def bottom(self) -> int:
        return self.top + self.size

    def box(self) -> tuple[int, int, int, int]:
        return (self.left, self.top, self.right, self.bottom)


@dataclass
class CaptureResult:
    annotated: bytes
    crop: bytes
    region: Region

    @property
    def annotated_base64(self) -> str:
        return base64.b64encode(self.annotated).decode("ascii")

    @property
    def crop_base64(self) -> str:
        return base64.b64encode(self.crop).decode("ascii")


def clamp_region(
    width: int, height: int, x: float, y: float, size: int = DEFAULT_SQUARE_SIZE
) -> Region:
    """以 (x, y) 为中心的正方形区域，平移/缩小到图片范围内。"""
    if width <= 0 or height <= 0:
        raise ValueError(f"Invalid image size: {width}x{height}")
    if size <= 0:
        raise ValueError(f"Invalid square size: {size}")

    side = min(size, width, height)
    left = round(x - side / 2)
    top = round(y - side / 2)
    left = max(0, min(left, width - side))
    top = max(0, min(top, height - side))
    return Region(left=left, top=top, size=side)


def _to_png(image: Image.Image) -> bytes:
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


def mark_region(
    frame: bytes, x: float, y: float, size: int = DEFAULT_SQUARE_SIZE
) -> CaptureResult:
    """返回 (带红框的整帧 PNG, 框内裁剪 PNG)。"""
    with Image.open(io.BytesIO(frame)) as img:
        image = img.convert("RGB")

    region = clamp_region(image.width, image.height, x, y, size)

    crop = image.crop(region.box())

    annotated = image.copy()
    draw = ImageDraw.Draw(annotated)
    draw.rectangle(
        (region.left, region.top, region.right - 1, region.bottom - 1),
        outline=_OUTLINE_COLOR,
        width=_OUTLINE_WIDTH,
    )

    return CaptureResult(annotated=_to_png(annotated), crop=_to_png(crop), region=region)
