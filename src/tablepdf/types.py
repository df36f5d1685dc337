"""Type aliases used across the tablepdf package."""

from typing import Literal, Tuple

# Color types
RGBColor = Tuple[float, float, float]  # RGB color in 0-255 range

# Column content
ContentType = Literal["text", "image"]

# Gravity options
HorizontalGravity = Literal["left", "center", "right"]
VerticalGravity = Literal["top", "center", "bottom"]
