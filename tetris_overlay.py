import pygame

from tetris_render import RenderAssets


class DebugOverlay:
    """Translucent panel listing the controller's timers, toggled by the debug key."""

    def __init__(self, font_size: int = 20):
        self.font_size = font_size

    def draw(self, screen, assets: RenderAssets, game, fps=None):
        if not game.show_debug:
            return
        lines = game.debug_lines(fps)
        d = assets.dims
        h = 24 + len(lines) * (self.font_size + 4)
        s = pygame.Surface((d.panel_w - 16, h), pygame.SRCALPHA)
        s.fill((20, 25, 40, 210))
        screen.blit(s, (d.hold_x + 8, 4 * d.cell))
        y = 4 * d.cell + 12
        for line in lines:
            assets.draw_text(screen, line, self.font_size, d.hold_x + 16, y)
            y += self.font_size + 4
