from constants import MM_PER_METER
from schemas import DimensionTriple, PreviewResponse


def build_preview(dimensions: DimensionTriple) -> PreviewResponse:
    width = dimensions.width / MM_PER_METER
    height = dimensions.height / MM_PER_METER
    depth = dimensions.depth / MM_PER_METER
    return PreviewResponse(
        width=width,
        height=height,
        depth=depth,
        textureRepeatX=max(1.0, width / 2),
        textureRepeatY=max(1.0, height / 2),
        cameraDistance=max(width, height, depth) * 2,
    )
