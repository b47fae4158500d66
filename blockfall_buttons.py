import pygame
from typing import Optional
from blockfall_layout import Dims
from blockfall_session import Command

class ButtonBar:
    """Clickable Left / Rotate / Right / Down row under the board."""
    def __init__(self, dims: Dims, gap: int = 6):
        self.items = [
            (Command.LEFT, "Left"),
            (Command.ROTATE, "Rotate"),
            (Command.RIGHT, "Right"),
            (Command.DOWN, "Down"),
        ]
        n = len(self.items)
        w = (dims.board_w - gap * (n - 1)) // n
        self.rects = [
            pygame.Rect(dims.buttons_x + i * (w + gap), dims.buttons_y, w, dims.buttons_h)
            for i in range(n)
        ]
        self.pressed: Optional[int] = None

    def hit(self, pos) -> Optional[Command]:
        for i, rect in enumerate(self.rects):
            if rect.collidepoint(pos):
                self.pressed = i
                return self.items[i][0]
        return None

    def release(self):
        self.pressed = None

    def draw(self, screen: pygame.Surface, font: pygame.font.Font):
        for i, ((cmd, label), rect) in enumerate(zip(self.items, self.rects)):
            fill = (120, 170, 200) if i == self.pressed else (173, 216, 230)
            pygame.draw.rect(screen, fill, rect, border_radius=5)
            text = font.render(label, True, (20, 25, 40))
            screen.blit(text, text.get_rect(center=rect.center))
