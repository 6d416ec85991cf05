import pygame

from pigsgame.drawing import SCREEN_HEIGHT, SCREEN_WIDTH
from pigsgame.transition import TransitionAnimation, TransitionAnimationState


def _white():
    surface = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
    surface.fill((255, 255, 255))
    return surface


def _rgb(surface, x, y):
    return tuple(surface.get_at((x, y)))[:3]


def test_starts_finished_and_draws_nothing():
    transition = TransitionAnimation()
    surface = _white()
    transition.run(surface, 10.0)
    assert transition.state is TransitionAnimationState.FINISHED
    assert _rgb(surface, 0, 0) == (255, 255, 255)


def test_blacking_draws_from_the_left():
    transition = TransitionAnimation()
    transition.reset()
    surface = _white()
    transition.run(surface, 10.0)
    assert transition.state is TransitionAnimationState.BLACKING
    assert _rgb(surface, 0, 0) == (0, 0, 0)
    assert _rgb(surface, SCREEN_WIDTH - 1, 0) == (255, 255, 255)


def test_full_cycle_calls_callback_once():
    calls = []
    transition = TransitionAnimation()
    transition.register_transition_callback(lambda: calls.append(True))
    transition.reset()

    transition.run(_white(), 1000.0)
    assert transition.state is TransitionAnimationState.WAITING
    assert len(calls) == 1

    surface = _white()
    transition.run(surface, 100.0)
    assert transition.state is TransitionAnimationState.WAITING
    assert _rgb(surface, SCREEN_WIDTH - 1, SCREEN_HEIGHT - 1) == (0, 0, 0)

    transition.run(_white(), 500.0)
    assert transition.state is TransitionAnimationState.CLEARING

    surface = _white()
    transition.run(surface, 1.0)
    assert transition.state is TransitionAnimationState.CLEARING
    assert _rgb(surface, SCREEN_WIDTH - 1, 0) == (0, 0, 0)

    transition.run(_white(), 1000.0)
    assert transition.state is TransitionAnimationState.FINISHED
    assert len(calls) == 1


def test_reset_restarts_from_blacking():
    transition = TransitionAnimation()
    transition.reset()
    transition.run(_white(), 1000.0)
    transition.reset()
    assert transition.state is TransitionAnimationState.BLACKING