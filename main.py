
import argparse
import logging
import pygame
from tetris_config import CONFIG
from tetris_game import Game
from tetris_input import key_from_pygame
from tetris_layout import compute_dims
from tetris_loop import FrameLoop
from tetris_render import RenderAssets
from tetris_rng import PieceRandom


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Falling-block puzzle game (pygame)")
    p.add_argument("--seed", type=int, default=CONFIG["SEED"], help="Seed for the piece randomizer")
    p.add_argument("--interval", type=int, default=CONFIG["DROP_INTERVAL_MS"],
                   help="Gravity interval in ms (default %(default)s)")
    p.add_argument("--block-size", type=int, default=CONFIG["BLOCK_SIZE"],
                   help="Pixel size of one cell (default %(default)s)")
    p.add_argument("--fps", type=int, default=CONFIG["FPS"], help="Frame rate cap (default %(default)s)")
    p.add_argument("--log-level", default=CONFIG["LOG_LEVEL"],
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = p.parse_args(argv)
    if args.interval <= 0:
        p.error("--interval must be positive")
    if args.block_size < 4:
        p.error("--block-size must be at least 4")
    return args


def apply_args(args):
    CONFIG["SEED"] = args.seed
    CONFIG["DROP_INTERVAL_MS"] = args.interval
    CONFIG["BLOCK_SIZE"] = args.block_size
    CONFIG["FPS"] = args.fps
    CONFIG["LOG_LEVEL"] = args.log_level


def main(argv=None):
    apply_args(parse_args(argv))
    logging.basicConfig(level=CONFIG["LOG_LEVEL"], format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])

    dims = compute_dims()
    screen = pygame.display.set_mode((dims.total_w, dims.total_h))
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 48)

    render = RenderAssets(dims, font, big_font)
    clock = pygame.time.Clock()
    game = Game(PieceRandom(CONFIG["SEED"]), CONFIG["DROP_INTERVAL_MS"], score_sink=render.set_score)
    game.reset(pygame.time.get_ticks())
    quit_requested = False

    def poll_input():
        nonlocal quit_requested
        keys = []
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                quit_requested = True
            elif e.type == pygame.KEYDOWN:
                if e.key == pygame.K_ESCAPE:
                    quit_requested = True
                elif e.key == pygame.K_RETURN and game.over:
                    game.reset(pygame.time.get_ticks())
                else:
                    keys.append(key_from_pygame(e.key))
        return keys

    def draw_frame(snap):
        render.draw(screen, snap)
        pygame.display.flip()
        clock.tick(CONFIG["FPS"])

    loop = FrameLoop(game, pygame.time.get_ticks, draw_frame, poll_input)
    loop.run(until=lambda: quit_requested)
    pygame.quit()


if __name__ == '__main__':
    main()
