# Type alias for RGB colors
Color = tuple[int, int, int]

# Basic colors
WHITE: Color = (255, 255, 255)
LIGHT_GREY: Color = (200, 200, 200)
RED: Color = (255, 0, 0)
ORANGE: Color = (255, 165, 0)
LIGHT_BLUE: Color = (173, 216, 230)
