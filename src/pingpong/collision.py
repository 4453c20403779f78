"""
Axis-aligned bounding box collision detection
"""


def overlaps(rect1, rect2) -> bool:
    """
    Check if two axis-aligned rectangles intersect.
    Works with anything exposing left/right/top/bottom, so both
    src.models.pingpong.Rect and pygame.Rect can be passed.
    Rectangles that only share an edge count as overlapping.
    """
    return (
        rect1.left <= rect2.right
        and rect1.right >= rect2.left
        and rect1.top <= rect2.bottom
        and rect1.bottom >= rect2.top
    )
