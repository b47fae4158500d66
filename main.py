import logging
import sys

import pygame

from blockfall_config import CONFIG
from blockfall_layout import compute_dims
from blockfall_render import RenderAssets
from blockfall_buttons import ButtonBar
from blockfall_input import command_for_key
from blockfall_rng import PieceRandom
from blockfall_session import GameSession

log = logging.getLogger("blockfall")

TICK_EVENT = pygame.USEREVENT + 1


def start_clock():
    pygame.time.set_timer(TICK_EVENT, int(CONFIG["TICK_MS"]))


def stop_clock():
    pygame.time.set_timer(TICK_EVENT, 0)


def sync_clock(session, running: bool) -> bool:
    """Stop the tick clock once the session is over. Returns whether it still runs."""
    if running and session.is_over:
        stop_clock()
        log.info("tick clock stopped, press R to restart")
        return False
    return running


def main():
    logging.basicConfig(level=CONFIG["LOG_LEVEL"],
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN,
                              pygame.MOUSEBUTTONUP, TICK_EVENT])

    dims = compute_dims()
    screen = pygame.display.set_mode((dims.total_w, dims.total_h))
    pygame.display.set_caption("Blockfall")
    font = pygame.font.SysFont(None, 24)
    big_font = pygame.font.SysFont(None, 42)

    render = RenderAssets(dims, font, big_font)
    buttons = ButtonBar(dims)
    clock = pygame.time.Clock()

    session = GameSession(PieceRandom(CONFIG["SEED"]))
    start_clock()
    clock_running = True

    while True:
        clock.tick(60)

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type == TICK_EVENT:
                session.tick()
            elif e.type == pygame.KEYDOWN:
                if e.key == pygame.K_r:
                    session.restart()
                    start_clock()
                    clock_running = True
                    continue
                cmd = command_for_key(e.key)
                if cmd is not None:
                    session.command(cmd)
            elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                cmd = buttons.hit(e.pos)
                if cmd is not None:
                    session.command(cmd)
            elif e.type == pygame.MOUSEBUTTONUP:
                buttons.release()

        # The session is terminal; the clock is ours to stop
        clock_running = sync_clock(session, clock_running)

        render.draw(screen, session)
        buttons.draw(screen, font)
        pygame.display.flip()


if __name__ == '__main__':
    main()
