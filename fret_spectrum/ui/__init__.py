from pathlib import Path
from typing import Dict, Optional

import pygame

from ..logger import get_logger
from ..pitch import NOTE_SEQUENCE
from ..render import render
from ..session import FretboardSession
from .adapters import PygameSurface

# Get logger for this module
logger = get_logger(__name__)


class PygameUI:
    """Pygame-based UI for Fret Spectrum"""

    def __init__(self, session: FretboardSession, export_dir: Optional[str] = None):
        """Initialize the Pygame UI

        Args:
            session: The fretboard session backing the display
            export_dir: Directory PNG exports are written to (default: cwd)
        """
        self.session = session
        self.export_dir = Path(export_dir) if export_dir else Path.cwd()

        self.controls_height = 110
        board_width, board_height = session.layout.canvas_size
        self.width = max(board_width, 960)
        self.height = self.controls_height + board_height + 30
        self.bg_color = (20, 20, 30)
        self.board_color = (255, 255, 255)
        self.text_color = (255, 255, 0)
        self.secondary_color = (180, 255, 180)
        self.notice_color = (255, 160, 120)
        self.button_color = (0, 122, 255)
        self.button_text_color = (255, 255, 255)

        # Selector state; the blank entries mean "nothing selected"
        self.root_options = [""] + list(NOTE_SEQUENCE)
        self.chord_options = session.catalog.display_options()
        self.root_index = 0
        self.chord_index = 0
        # A requested name missing from the catalog; queried as-is so the
        # session reports it
        self.unknown_chord: Optional[str] = None
        self.notice = ""

        self.screen = None
        self.board = None
        self.clock = None
        self.initialized = False
        self._buttons: Dict[str, pygame.Rect] = {}

        # Fonts
        self.title_font = None
        self.medium_font = None
        self.small_font = None

        session.events.on_highlights_changed(self._on_highlights_changed)
        session.events.on_advisory(self._on_advisory)
        logger.debug("Initializing PygameUI")

    def init_screen(self):
        """Initialize the Pygame screen and resources"""
        try:
            pygame.init()
            self.screen = pygame.display.set_mode((self.width, self.height))
            pygame.display.set_caption("Fret Spectrum")

            self.title_font = pygame.font.SysFont("Arial", 28, bold=True)
            self.medium_font = pygame.font.SysFont("Arial", 22)
            self.small_font = pygame.font.SysFont("Arial", 16)

            self.board = pygame.Surface(self.session.layout.canvas_size)
            self._redraw_board()

            self.clock = pygame.time.Clock()
            self.initialized = True
            logger.info("Pygame UI initialized successfully")
            return self.screen

        except Exception as e:
            logger.error(f"Failed to initialize Pygame: {e}")
            self.cleanup()
            raise

    # ---------------------------------------------------------- selection ---
    def select(self, root: Optional[str] = None, chord: Optional[str] = None) -> None:
        """Preselect a root note and chord/scale by name."""
        if root in self.root_options:
            self.root_index = self.root_options.index(root)
        if chord:
            self.unknown_chord = None
            for i, (_, name) in enumerate(self.chord_options):
                if name == chord:
                    self.chord_index = i
                    break
            else:
                self.chord_index = 0
                self.unknown_chord = chord

    @property
    def selected_root(self) -> str:
        return self.root_options[self.root_index]

    @property
    def selected_chord(self) -> str:
        if self.unknown_chord:
            return self.unknown_chord
        return self.chord_options[self.chord_index][1]

    def cycle_root(self, step: int) -> None:
        self.root_index = (self.root_index + step) % len(self.root_options)

    def cycle_chord(self, step: int) -> None:
        self.unknown_chord = None
        self.chord_index = (self.chord_index + step) % len(self.chord_options)

    def display(self) -> None:
        """Compute and show highlights for the current selection."""
        root = self.selected_root
        if not root:
            self.notice = "Please select a base note"
            return
        self.notice = ""
        self.session.query(root, self.selected_chord or None)

    def save(self) -> Optional[Path]:
        """Export the board as a PNG named after the title."""
        if self.board is None:
            return None
        path = self.export_dir / self.session.export_filename()
        try:
            PygameSurface(self.board).save_png(path)
        except pygame.error as e:
            logger.error(f"Error saving {path}: {e}")
            self.notice = f"Could not save image: {e}"
            return None
        self.notice = f"Saved {path.name}"
        return path

    # ------------------------------------------------------------ events ---
    def _on_highlights_changed(self, result) -> None:
        if self.board is not None:
            self._redraw_board()

    def _on_advisory(self, message: str) -> None:
        self.notice = message

    def _redraw_board(self) -> None:
        surface = PygameSurface(self.board, background=self.board_color)
        surface.clear()
        render(self.session.instructions(), surface)

    def handle_event(self, event) -> bool:
        """Handle one pygame event. Returns False when the UI should exit."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                self.display()
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._handle_click(event.pos)
        return True

    def _handle_click(self, pos) -> None:
        actions = {
            "root_prev": lambda: self.cycle_root(-1),
            "root_next": lambda: self.cycle_root(1),
            "chord_prev": lambda: self.cycle_chord(-1),
            "chord_next": lambda: self.cycle_chord(1),
            "display": self.display,
            "save": self.save,
        }
        for name, rect in self._buttons.items():
            if rect.collidepoint(pos):
                actions[name]()
                return

        # Translate window coordinates into board coordinates
        self.session.click(pos[0], pos[1] - self.controls_height)

    # ----------------------------------------------------------- drawing ---
    def draw_button(self, name, text, x, y, width, height):
        """Draw a button and return True if the mouse is hovering over it."""
        rect = pygame.Rect(x, y, width, height)
        self._buttons[name] = rect
        is_hovering = rect.collidepoint(pygame.mouse.get_pos())

        if is_hovering:
            pygame.draw.rect(self.screen, self.button_color, rect)
        else:
            pygame.draw.rect(self.screen, self.button_color, rect, 2)

        text_surf = self.small_font.render(text, True, self.button_text_color)
        text_rect = text_surf.get_rect(center=rect.center)
        self.screen.blit(text_surf, text_rect)
        return is_hovering

    def draw_selector(self, name, label, value, x, y, width):
        """A '<  value  >' selector with a caption above it."""
        caption = self.small_font.render(label, True, self.secondary_color)
        self.screen.blit(caption, (x, y))
        self.draw_button(f"{name}_prev", "<", x, y + 22, 30, 30)
        self.draw_button(f"{name}_next", ">", x + width - 30, y + 22, 30, 30)
        value_surf = self.medium_font.render(value or "-", True, (255, 255, 255))
        value_rect = value_surf.get_rect(center=(x + width / 2, y + 37))
        self.screen.blit(value_surf, value_rect)

    def update_display(self):
        """Redraw the whole window"""
        if not self.initialized or not self.screen:
            return

        self.screen.fill(self.bg_color)

        self.draw_selector("root", "Base note", self.selected_root, 20, 10, 140)
        chord_label = self.unknown_chord or self.chord_options[self.chord_index][0].strip()
        self.draw_selector("chord", "Chord / scale", chord_label, 180, 10, 420)
        self.draw_button("display", "Display", 620, 32, 110, 30)
        self.draw_button("save", "Save", 740, 32, 90, 30)

        title = self.session.title
        if title:
            title_surf = self.title_font.render(title, True, self.text_color)
            self.screen.blit(title_surf, (20, 72))

        self.screen.blit(self.board, (0, self.controls_height))

        if self.notice:
            notice_surf = self.small_font.render(self.notice, True, self.notice_color)
            self.screen.blit(notice_surf, (20, self.height - 26))

        pygame.display.flip()

    def run(self, root: Optional[str] = None, chord: Optional[str] = None):
        """Run the UI loop until the window is closed.

        Args:
            root: Optional root note to display at startup
            chord: Optional chord/scale name to display at startup
        """
        if not self.initialized:
            self.init_screen()

        self.select(root, chord)
        if root:
            self.display()

        try:
            running = True
            while running:
                self.update_display()
                for event in pygame.event.get():
                    if not self.handle_event(event):
                        running = False
                        break
                self.clock.tick(30)
        except Exception as e:
            logger.error(f"An error occurred during the UI run loop: {e}", exc_info=True)
            raise
        finally:
            self.session.player.stop()
            self.cleanup()

    def cleanup(self):
        """Clean up Pygame resources"""
        if self.initialized:
            logger.info("Cleaning up Pygame UI")
            pygame.quit()
            self.initialized = False
