import logging
import sys
import pygame
from blockfall_config import CONFIG
from blockfall_engine import Engine
from blockfall_input import EventQueue, TICK_EVENT, dispatch, from_pygame
from blockfall_layout import compute_dims
from blockfall_render import RenderAssets

log = logging.getLogger(__name__)


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def new_engine():
    return Engine(CONFIG["WIDTH"], CONFIG["HEIGHT"])


def main():
    logging.basicConfig(level=CONFIG["LOG_LEVEL"], format="%(asctime)s %(name)s %(levelname)s %(message)s")
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, TICK_EVENT])

    dims = compute_dims(CONFIG["WIDTH"], CONFIG["HEIGHT"])
    screen = recreate_window(dims)
    pygame.display.set_caption("Blockfall")
    font = pygame.font.SysFont(None, 28)

    render = RenderAssets(dims, font, CONFIG["WIDTH"], CONFIG["HEIGHT"])
    clock = pygame.time.Clock()

    engine = new_engine()
    queue = EventQueue()
    pygame.time.set_timer(TICK_EVENT, CONFIG["TICK_MS"])
    log.info("started %dx%d grid, tick every %d ms", CONFIG["HEIGHT"], CONFIG["WIDTH"], CONFIG["TICK_MS"])

    render.draw(screen, engine.snapshot())
    pygame.display.flip()

    while True:
        clock.tick(60)
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type == pygame.KEYDOWN and e.key == pygame.K_r:
                log.info("restart")
                engine = new_engine()
                queue = EventQueue()
                render.draw(screen, engine.snapshot())
                pygame.display.flip()
                continue
            msg = from_pygame(e)
            if msg is not None:
                queue.put(msg)

        dirty = False
        for msg in queue.drain():
            dirty = dispatch(engine, msg) or dirty
        if dirty:
            render.draw(screen, engine.snapshot())
            pygame.display.flip()


if __name__ == '__main__':
    main()
