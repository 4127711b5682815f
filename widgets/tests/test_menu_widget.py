"""MenuWidget state and drawing, headless."""

from __future__ import annotations

import os
import unittest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame

from widgets.menu_widget import MenuWidget


class MenuWidgetTests(unittest.TestCase):

    @classmethod
    def setUpClass(cls) -> None:
        pygame.init()

    @classmethod
    def tearDownClass(cls) -> None:
        pygame.quit()

    def setUp(self) -> None:
        self.menu = MenuWidget("type", pygame.Rect(10, 10, 200, 30))
        self.menu.update_option_list(["All Ins", "Computer Keyboard", "No Input"])

    def test_update_keeps_selected_label_when_it_survives(self) -> None:
        self.menu.select_by_label("No Input")
        self.menu.update_option_list(["All Ins", "No Input"])
        self.assertEqual(self.menu.label(), "No Input")
        self.menu.update_option_list(["Ch. 1", "Ch. 2"])
        self.assertEqual(self.menu.label(), "Ch. 1")
        self.menu.update_option_list([])
        self.assertIsNone(self.menu.label())

    def test_unknown_label_keeps_selection(self) -> None:
        self.menu.select_by_label("Computer Keyboard")
        self.menu.select_by_label("Gone")
        self.assertEqual(self.menu.label(), "Computer Keyboard")

    def test_click_opens_then_picks_index(self) -> None:
        self.assertIsNone(self.menu.handle_click(self.menu.rect.center))
        self.assertTrue(self.menu.open)
        index = self.menu.handle_click(self.menu.item_rect(2).center)
        self.assertEqual(index, 2)
        self.assertFalse(self.menu.open)
        # picking only reports the index; the host decides what is shown
        self.assertEqual(self.menu.label(), "All Ins")

    def test_click_outside_open_list_closes_it(self) -> None:
        self.menu.handle_click(self.menu.rect.center)
        self.assertIsNone(self.menu.handle_click((400, 400)))
        self.assertFalse(self.menu.open)

    def test_click_through_ignores_clicks(self) -> None:
        self.menu.set_click_through(True)
        self.assertIsNone(self.menu.handle_click(self.menu.rect.center))
        self.assertFalse(self.menu.open)

    def test_draw_clears_dirty_flag(self) -> None:
        screen = pygame.Surface((480, 200))
        self.menu.set_enabled(False)
        self.assertTrue(self.menu.dirty)
        drawn = self.menu.draw(screen)
        self.assertFalse(self.menu.dirty)
        self.assertEqual(drawn, self.menu.rect)

    def test_open_list_is_part_of_drawn_area(self) -> None:
        screen = pygame.Surface((480, 200))
        self.menu.handle_click(self.menu.rect.center)
        drawn = self.menu.draw(screen)
        self.assertTrue(drawn.contains(self.menu.item_rect(2)))


if __name__ == "__main__":  # pragma: no cover
    unittest.main(exit=False)
