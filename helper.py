# helper.py
import pygame

def hex_to_rgb(value):
    """Convert '#RRGGBB' hex string or RGB tuple to (r, g, b)."""
    if isinstance(value, (tuple, list)) and len(value) == 3:
        return tuple(value)
    if isinstance(value, str):
        value = value.strip().lstrip('#')
        return tuple(int(value[i:i+2], 16) for i in (0, 2, 4))
    raise TypeError(f"Unsupported color format: {value!r}")



def fit_text(text: str, font, max_width: int, ellipsis: str = "…") -> str:
    """Trim text from the right until font renders it within max_width."""
    if font.size(text)[0] <= max_width:
        return text
    trimmed = text
    while trimmed and font.size(trimmed + ellipsis)[0] > max_width:
        trimmed = trimmed[:-1]
    return trimmed + ellipsis if trimmed else ""


def render_text_centered(screen, text, font, color, rect):
    """Render text into the middle of rect; returns the text rect."""
    text_surf = font.render(str(text), True, color)
    text_rect = text_surf.get_rect(center=pygame.Rect(rect).center)
    screen.blit(text_surf, text_rect)
    return text_rect
