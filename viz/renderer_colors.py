# viz/renderer_colors.py
BG = (34, 34, 34)       # #222
FOOD = (255, 0, 0)      # red
SNAKE = (0, 255, 0)     # lime
TEXT = (230, 230, 230)
