"""A small paddle-and-ball game model driven by actions."""

from __future__ import annotations

import dataclasses
import random
from dataclasses import dataclass
from typing import Callable, Union

__all__ = [
    "Model",
    "PaddleMoveAction",
    "TickAction",
    "Action",
    "dot",
    "segment_squared_distance",
    "update",
    "WINDOW_WIDTH",
    "WINDOW_HEIGHT",
    "PADDING",
    "BORDER",
    "BALL_R",
    "BALL_INIT_V",
    "BALL_A",
    "PADDLE_WIDTH",
    "PADDLE_HEIGHT",
    "PADDLE_Y",
    "PADDLE_SENS",
    "BOUNCE_ANIM_SPEED",
    "DEATH_ANIM_SPEED",
]

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
PADDING = 20
BORDER = 4
BALL_R = 4
BALL_INIT_V = complex(0.2, 0.2)
BALL_A = 1.1
PADDLE_WIDTH = 100
PADDLE_HEIGHT = 10
PADDLE_Y = WINDOW_HEIGHT - 2 * PADDING - PADDLE_HEIGHT
PADDLE_SENS = 0.5

BOUNCE_ANIM_SPEED = 0.002
DEATH_ANIM_SPEED = 0.001

_EPSILON = 0.00000001


@dataclass(frozen=True)
class Model:
    """The game state; points are complex numbers (x + y·j)."""

    score: int = 0
    max_score: int = 0
    ball: complex = complex(WINDOW_WIDTH // 2, PADDING * 2)
    ball_v: complex = BALL_INIT_V
    paddle_x: float = float(WINDOW_WIDTH // 2 - PADDLE_WIDTH // 2)
    death_anim: float = 0.0
    bounce_anim: float = 0.0


@dataclass(frozen=True)
class PaddleMoveAction:
    """Move the paddle horizontally by ``delta`` input units."""

    delta: float


@dataclass(frozen=True)
class TickAction:
    """Advance time by ``delta`` milliseconds."""

    delta: float


Action = Union[PaddleMoveAction, TickAction]


def dot(a: complex, b: complex) -> float:
    """Dot product of two points."""
    return (a.conjugate() * b).real


def _norm(p: complex) -> float:
    return p.real * p.real + p.imag * p.imag


def segment_squared_distance(
    l1p1: complex, l1p2: complex, l2p1: complex, l2p2: complex
) -> float:
    """Squared distance between the segments l1p1–l1p2 and l2p1–l2p2."""
    u = l1p2 - l1p1
    v = l2p2 - l2p1
    w = l1p1 - l2p1
    a, b, c, d, e = dot(u, u), dot(u, v), dot(v, v), dot(u, w), dot(v, w)
    big_d = a * c - b * b
    s_d = t_d = big_d
    if big_d < _EPSILON:
        s_n, s_d = 0.0, 1.0
        t_n, t_d = e, c
    else:
        s_n = b * e - c * d
        t_n = a * e - b * d
        if s_n < 0.0:
            s_n = 0.0
            t_n, t_d = e, c
        elif s_n > s_d:
            s_n = s_d
            t_n, t_d = e + b, c
    if t_n < 0.0:
        t_n = 0.0
        if -d < 0.0:
            s_n = 0.0
        elif -d > a:
            s_n = s_d
        else:
            s_n, s_d = -d, a
    elif t_n > t_d:
        t_n = t_d
        if (-d + b) < 0.0:
            s_n = 0.0
        elif (-d + b) > a:
            s_n = s_d
        else:
            s_n, s_d = -d + b, a
    sc = 0.0 if abs(s_n) < _EPSILON else s_n / s_d
    tc = 0.0 if abs(t_n) < _EPSILON else t_n / t_d
    return _norm(w + u * sc - v * tc)


def _tick(g: Model, delta: float, rng: Callable[[], float]) -> Model:
    ball = g.ball + g.ball_v * delta
    death_anim = max(0.0, g.death_anim - delta * DEATH_ANIM_SPEED)
    bounce_anim = max(0.0, g.bounce_anim - delta * BOUNCE_ANIM_SPEED)
    vx, vy = g.ball_v.real, g.ball_v.imag
    if (vx < 0 and ball.real - BALL_R <= PADDING) or (
        vx > 0 and ball.real + BALL_R >= WINDOW_WIDTH - PADDING
    ):
        vx = -vx
    if vy < 0 and ball.imag - BALL_R <= PADDING:
        vy = -vy
    changes: dict = {"death_anim": death_anim, "bounce_anim": bounce_anim}
    paddle_distance = segment_squared_distance(
        g.ball,
        ball,
        complex(g.paddle_x - BALL_R, PADDLE_Y),
        complex(g.paddle_x + PADDLE_WIDTH + BALL_R, PADDLE_Y),
    )
    if vy > 0 and BALL_R * BALL_R > paddle_distance:
        changes.update(
            ball_v=complex(vx, -vy) * BALL_A,
            score=g.score + 1,
            bounce_anim=1.0,
        )
    elif vy > 0 and ball.imag - BALL_R >= WINDOW_HEIGHT - PADDING:
        changes.update(
            max_score=max(g.max_score, g.score),
            score=0,
            ball_v=BALL_INIT_V,
            ball=complex(
                PADDING + rng() * (WINDOW_WIDTH - PADDING * 4), PADDING * 2
            ),
            death_anim=1.0,
        )
    else:
        changes.update(ball_v=complex(vx, vy), ball=ball)
    return dataclasses.replace(g, **changes)


def update(
    model: Model, action: Action, rng: Callable[[], float] | None = None
) -> Model:
    """Return the model after applying ``action``.

    ``rng`` returns a number in [0, 1] used to place a new ball; it defaults
    to ``random.random``.
    """
    if isinstance(action, PaddleMoveAction):
        paddle_x = max(
            0.0,
            min(
                float(WINDOW_WIDTH - PADDLE_WIDTH),
                model.paddle_x + action.delta * PADDLE_SENS,
            ),
        )
        return dataclasses.replace(model, paddle_x=paddle_x)
    if isinstance(action, TickAction):
        return _tick(model, action.delta, rng or random.random)
    raise TypeError(f"unknown action: {type(action).__name__}")