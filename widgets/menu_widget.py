# /build/widgets/menu_widget.py
import pygame
import config as cfg
import helper
import showlog
from routing.outlets import MenuOutlet


class MenuWidget(MenuOutlet):
    """
    Drop-down menu drawn with pygame, driven through the MenuOutlet calls.

    Selecting by label only changes what is shown; a click on an open item
    is reported back as its index so the caller can send it to the device.
    """

    def __init__(self, uid: str, rect: pygame.Rect, font=None):
        self.uid = uid
        self.rect = pygame.Rect(rect)
        self.font = font
        self.items = []
        self.selected = -1
        self.active = True
        self.ignore_click = False
        self.open = False
        self.dirty = True

    # ------------------------------------------------------------------
    # MenuOutlet
    # ------------------------------------------------------------------
    def update_option_list(self, labels):
        selected_label = self.label()
        self.items = [str(label) for label in labels]
        # keep the shown item when it survived the update
        self.selected = self.items.index(selected_label) if selected_label in self.items else (0 if self.items else -1)
        self.open = False
        self.mark_dirty()

    def select_by_label(self, label):
        if label in self.items:
            self.selected = self.items.index(label)
            self.mark_dirty()
        else:
            showlog.debug(f"[MenuWidget] {self.uid}: no item '{label}'")

    def set_enabled(self, enabled):
        self.active = bool(enabled)
        self.mark_dirty()

    def set_click_through(self, ignore):
        self.ignore_click = bool(ignore)
        if self.ignore_click:
            self.open = False
        self.mark_dirty()

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    def label(self):
        if 0 <= self.selected < len(self.items):
            return self.items[self.selected]
        return None

    def mark_dirty(self):
        self.dirty = True

    def item_rect(self, index):
        """Rect of one open-list item (drawn below the menu)."""
        return pygame.Rect(self.rect.x, self.rect.bottom + index * self.rect.height,
                           self.rect.width, self.rect.height)

    # ------------------------------------------------------------------
    # Event handling
    # ------------------------------------------------------------------
    def handle_click(self, pos):
        """
        Returns the clicked item index, or None when no item was picked.
        Opening/closing the list is handled here too.
        """
        if self.ignore_click:
            return None
        if self.open:
            for i in range(len(self.items)):
                if self.item_rect(i).collidepoint(pos):
                    self.open = False
                    self.mark_dirty()
                    return i
            self.open = False
            self.mark_dirty()
            return None
        if self.rect.collidepoint(pos) and self.items:
            self.open = True
            self.mark_dirty()
        return None

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------
    def draw(self, screen):
        """Draw the menu (and its open list); returns the dirty rect."""
        if self.font is None:
            self.font = _default_font()
        font = self.font
        if self.active:
            bg = helper.hex_to_rgb(cfg.MENU_FILL_COLOR)
            text_col = helper.hex_to_rgb(cfg.MENU_TEXT_COLOR)
        else:
            bg = helper.hex_to_rgb(cfg.MENU_DISABLED_FILL)
            text_col = helper.hex_to_rgb(cfg.MENU_DISABLED_TEXT)
        outline = helper.hex_to_rgb(cfg.MENU_OUTLINE_COLOR)

        pygame.draw.rect(screen, bg, self.rect, border_radius=cfg.MENU_BORDER_RADIUS)
        pygame.draw.rect(screen, outline, self.rect, width=2, border_radius=cfg.MENU_BORDER_RADIUS)

        text = helper.fit_text(self.label() or "", font, self.rect.width - 30)
        text_surf = font.render(text, True, text_col)
        screen.blit(text_surf, text_surf.get_rect(midleft=(self.rect.x + 10, self.rect.centery)))

        # arrow
        ax, ay = self.rect.right - 16, self.rect.centery
        arrow_col = helper.hex_to_rgb(cfg.MENU_ARROW_COLOR) if self.active else text_col
        pygame.draw.polygon(screen, arrow_col, [(ax - 5, ay - 3), (ax + 5, ay - 3), (ax, ay + 4)])

        drawn = self.rect.copy()
        if self.open:
            for i, item in enumerate(self.items):
                r = self.item_rect(i)
                fill = helper.hex_to_rgb(cfg.MENU_ARROW_COLOR) if i == self.selected else bg
                pygame.draw.rect(screen, fill, r)
                helper.render_text_centered(screen, helper.fit_text(item, font, r.width - 10), font, text_col, r)
                drawn.union_ip(r)

        self.dirty = False
        return drawn

    def __repr__(self):
        return f"MenuWidget({self.uid!r}, {self.label()!r}, {len(self.items)} items)"


def _default_font():
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, cfg.MENU_FONT_SIZE)
