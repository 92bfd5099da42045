import argparse
import logging
import sys
import pygame
from tetris_config import CONFIG
from tetris_client import LeaderboardClient, LeaderboardUnavailable
from tetris_game import GameSession
from tetris_input import action_for_key, apply_action
from tetris_layout import compute_dims
from tetris_prompt import NicknamePrompt
from tetris_render import RenderAssets
from tetris_rng import PieceRandom

logger = logging.getLogger("tetris")


def get_args(argv=None):
    parser = argparse.ArgumentParser(description="Retro Tetris Connect game client")
    parser.add_argument("--url", type=str, default=CONFIG["LEADERBOARD_URL"])
    parser.add_argument("--seed", type=int, default=CONFIG["SEED"])
    parser.add_argument("--log-level", type=str, default="INFO")
    return parser.parse_args(argv)


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except (TypeError, pygame.error):
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def load_ranking(client):
    """Fetch the top scores; returns (ranking, status message)."""
    try:
        return client.top_scores(), ""
    except LeaderboardUnavailable as e:
        return [], f"Ranking unavailable: {e}"


def submit_score(client, prompt, ranking):
    """Send the prompt's nickname + score; returns (ranking, status, done)."""
    if not prompt.nickname:
        return ranking, "Please enter a nickname!", False
    try:
        top = client.submit(prompt.nickname, prompt.score)
    except LeaderboardUnavailable as e:
        logger.error("could not save score: %s", e)
        return ranking, f"Could not save score: {e}", False
    return top, "Score saved!", True


def main(argv=None):
    args = get_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="[TETRIS] %(asctime)s %(levelname)s %(message)s")

    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Retro Tetris Connect")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)

    render = RenderAssets(dims, font, big_font)
    clock = pygame.time.Clock()

    game = GameSession(PieceRandom(args.seed))
    client = LeaderboardClient(args.url)
    prompt = NicknamePrompt()
    ranking, status = load_ranking(client)

    while True:
        dt = clock.tick(CONFIG["FPS"])

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type != pygame.KEYDOWN:
                continue
            # the modal owns the keyboard while it is open
            if prompt.active:
                result = prompt.handle(e)
                if result == "cancel":
                    prompt.close(); game.over = False
                elif result == "submit":
                    ranking, status, done = submit_score(client, prompt, ranking)
                    if done:
                        prompt.close(); game.over = False
                continue
            action = action_for_key(e.key, e.mod)
            if action == "start":
                status = ""
            apply_action(game, action)
            if game.over:
                prompt.open(game.score)

        game.tick(dt)
        if game.over and not prompt.active:
            prompt.open(game.score)

        render.draw(screen, game, ranking, status)
        prompt.draw(screen, font, big_font, dims.total_w, dims.total_h)
        pygame.display.flip()


if __name__ == '__main__':
    main()
