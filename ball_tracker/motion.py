from typing import Iterable

from .models import Ball


def advance(ball: Ball, width: float, height: float) -> None:
    """Move a ball one tick, bouncing off the arena walls.

    Each axis is checked on its own, so a ball heading into a corner flips
    both velocity components in the same tick.
    """
    r = ball.radius
    nx = ball.x + ball.vx
    if nx - r < 0 or nx + r > width:
        ball.vx = -ball.vx
    ny = ball.y + ball.vy
    if ny - r < 0 or ny + r > height:
        ball.vy = -ball.vy
    ball.x = min(max(ball.x + ball.vx, r), width - r)
    ball.y = min(max(ball.y + ball.vy, r), height - r)


def advance_all(balls: Iterable[Ball], width: float, height: float) -> None:
    for ball in balls:
        advance(ball, width, height)
