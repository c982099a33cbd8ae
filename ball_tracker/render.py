"""Drawing. Everything here reads game state and paints; nothing mutates it."""
import pygame
from typing import Dict, Iterable, List, Tuple

from .config import ARENA_HEIGHT, ARENA_WIDTH, MARGIN, PALETTE, WIDTH
from .models import AttemptResult, Ball, VisualState

ARENA_RECT = pygame.Rect(MARGIN, 240, ARENA_WIDTH, ARENA_HEIGHT)
HISTORY_RECT = pygame.Rect(MARGIN, 104, ARENA_WIDTH, 100)

BALL_COLORS = {
    VisualState.NEUTRAL: PALETTE["neutral"],
    VisualState.HIGHLIGHTED: PALETTE["target"],
    VisualState.CORRECT: PALETTE["correct"],
    VisualState.INCORRECT: PALETTE["incorrect"],
}


class Button:
    def __init__(self, rect, text, font, on_click, fg=PALETTE["white"], bg=PALETTE["panel"]):
        self.rect = pygame.Rect(rect)
        self.text = text
        self.font = font
        self.on_click = on_click
        self.fg = fg
        self.bg = bg
        self.hover = False
        self.enabled = True
    def draw(self, surf):
        if not self.enabled:
            color = PALETTE["panel_off"]
        else:
            color = tuple(min(255, c + (18 if self.hover else 0)) for c in self.bg)
        pygame.draw.rect(surf, color, self.rect, border_radius=6)
        label = self.font.render(self.text, True, self.fg)
        surf.blit(label, label.get_rect(center=self.rect.center))
    def handle(self, event):
        if event.type == pygame.MOUSEMOTION:
            self.hover = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.enabled and self.rect.collidepoint(event.pos):
                self.on_click()


def history_lines(history: Iterable[AttemptResult]) -> List[Tuple[str, tuple]]:
    """Newest first, coloured by outcome."""
    lines = []
    for r in reversed(list(history)):
        if r.completed:
            lines.append((f"Level {r.level}: Answered in {r.elapsed_seconds:.1f}s", PALETTE["ok"]))
        else:
            lines.append((f"Level {r.level}: Gave up at {r.elapsed_seconds:.1f}s", PALETTE["bad"]))
    return lines


def instruction_color(text: str) -> tuple:
    if "Incorrect" in text or "Tracked for" in text:
        return PALETTE["bad"]
    return PALETTE["text"]


def to_arena(pos, rect=ARENA_RECT) -> Tuple[float, float]:
    return pos[0] - rect.x, pos[1] - rect.y


def draw_balls(surf, balls: Iterable[Ball], rect=ARENA_RECT):
    pygame.draw.rect(surf, PALETTE["arena"], rect, border_radius=8)
    pygame.draw.rect(surf, PALETTE["border"], rect, width=2, border_radius=8)
    for ball in balls:
        center = (int(rect.x + ball.x), int(rect.y + ball.y))
        pygame.draw.circle(surf, BALL_COLORS[ball.state], center, int(ball.radius))


def draw_history(surf, history, font, rect=HISTORY_RECT):
    pygame.draw.rect(surf, PALETTE["border"], rect, width=1, border_radius=8)
    clip = surf.get_clip()
    surf.set_clip(rect.inflate(-4, -4))
    for i, (text, color) in enumerate(history_lines(history)):
        y = rect.y + 6 + i * 20
        if y > rect.bottom:
            break
        surf.blit(font.render(text, True, color), (rect.x + 8, y))
    surf.set_clip(clip)


def draw_frame(surf, session, fonts: Dict[str, "pygame.font.Font"], buttons=()):
    surf.fill(PALETTE["bg"])
    ledger = session.ledger
    head = fonts["big"].render(f"Ball Tracking Challenge (User: {ledger.user_id})", True, PALETTE["title"])
    surf.blit(head, head.get_rect(center=(WIDTH // 2, 28)))
    surf.blit(fonts["font"].render(f"Level: {session.level}", True, PALETTE["text"]), (MARGIN, 56))
    best = fonts["font"].render(f"Personal Best: {ledger.personal_best}", True, PALETTE["muted"])
    surf.blit(best, (WIDTH - MARGIN - best.get_width(), 56))
    surf.blit(fonts["small"].render("Level History", True, PALETTE["muted"]), (MARGIN, 84))
    draw_history(surf, ledger.history, fonts["small"])
    text = fonts["small"].render(session.instructions, True, instruction_color(session.instructions))
    surf.blit(text, text.get_rect(center=(WIDTH // 2, 222)))
    draw_balls(surf, session.balls)
    for b in buttons:
        b.draw(surf)


def draw_identify(surf, fonts, entry: str, error: str = ""):
    surf.fill(PALETTE["bg"])
    head = fonts["big"].render("Enter Your User ID", True, PALETTE["title"])
    surf.blit(head, head.get_rect(center=(WIDTH // 2, 220)))
    box = pygame.Rect(MARGIN, 270, WIDTH - 2 * MARGIN, 44)
    pygame.draw.rect(surf, PALETTE["white"], box, border_radius=6)
    pygame.draw.rect(surf, PALETTE["bad"] if error else PALETTE["border"], box, width=2, border_radius=6)
    shown = entry or "e.g., 12345"
    label = fonts["font"].render(shown, True, PALETTE["text"] if entry else PALETTE["muted"])
    surf.blit(label, (box.x + 12, box.y + 10))
    if error:
        surf.blit(fonts["small"].render(error, True, PALETTE["bad"]), (box.x, box.bottom + 8))
    hint = fonts["small"].render("Digits only. Press Enter to submit.", True, PALETTE["muted"])
    surf.blit(hint, hint.get_rect(center=(WIDTH // 2, box.bottom + 48)))
