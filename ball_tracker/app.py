import logging
import sys

import pygame

from .config import DATA_FILE, FPS, HEIGHT, MARGIN, PALETTE, WIDTH, setup_logging
from .errors import NothingToExportError, UserIdTakenError
from .export import export_and_share, open_with_system
from .game import TrackingSession
from .ledger import Ledger
from .render import ARENA_RECT, Button, draw_frame, draw_identify, to_arena
from .storage import JsonStore

logger = logging.getLogger(__name__)

DIGITS = "0123456789"


class Game:
    def __init__(self, data_file=DATA_FILE):
        pygame.init()
        pygame.display.set_caption("Ball Tracking Game")
        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        self.clock = pygame.time.Clock()
        self.fonts = {
            "font": pygame.font.SysFont("roboto", 20),
            "big": pygame.font.SysFont("roboto", 24, bold=True),
            "small": pygame.font.SysFont("roboto", 16),
        }
        self.store = JsonStore(data_file)
        self.state = "identify"
        self.entry = ""
        self.error = ""
        self.session = None
        self.buttons = []

    def submit_user_id(self):
        if not self.entry:
            return
        user_id = int(self.entry)
        try:
            self.store.claim(user_id)
        except UserIdTakenError as e:
            logger.info("Rejected user id %s: already taken", user_id)
            self.error = str(e)
            return
        self.session = TrackingSession(Ledger.open(self.store, user_id))
        self.build_buttons()
        self.state = "play"

    def build_buttons(self):
        y = ARENA_RECT.bottom + 14
        self.start_button = Button((MARGIN, y, 160, 44), self.session.button_text, self.fonts["font"], self.session.start)
        self.export_button = Button((WIDTH - MARGIN - 160, y, 160, 44), "Export CSV", self.fonts["font"],
                                    self.export, bg=PALETTE["export"])
        self.buttons = [self.start_button, self.export_button]

    def export(self):
        ledger = self.session.ledger
        try:
            path = export_and_share(ledger.user_id, ledger.history, share=open_with_system)
        except NothingToExportError as e:
            self.session.instructions = str(e)
            return
        if path:
            self.session.instructions = "CSV file created. Opening share dialog..."

    def handle_identify(self, event):
        if event.type != pygame.KEYDOWN:
            return
        if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            self.submit_user_id()
        elif event.key == pygame.K_BACKSPACE:
            self.entry = self.entry[:-1]
            self.error = ""
        elif len(event.unicode) == 1 and event.unicode in DIGITS and len(self.entry) < 9:
            self.entry += event.unicode
            self.error = ""

    def handle_play(self, event):
        for b in self.buttons:
            b.handle(event)
        if event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE:
            self.session.lose_track()
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if ARENA_RECT.collidepoint(event.pos):
                self.session.tap(to_arena(event.pos))

    def run(self):
        while True:
            self.clock.tick(FPS)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.quit()
                if self.state == "identify":
                    self.handle_identify(event)
                elif self.state == "play":
                    self.handle_play(event)
            if self.state == "play":
                self.session.update()
                self.session.tick()
                self.start_button.text = self.session.button_text
                self.start_button.enabled = self.session.start_enabled
            self.draw()

    def quit(self):
        if self.session is not None:
            self.session.close()
        pygame.quit(); sys.exit(0)

    def draw(self):
        if self.state == "identify":
            draw_identify(self.screen, self.fonts, self.entry, self.error)
        else:
            draw_frame(self.screen, self.session, self.fonts, self.buttons)
        pygame.display.flip()


def main():
    setup_logging()
    Game().run()

if __name__ == "__main__":
    main()
