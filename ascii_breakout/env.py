import os

import gymnasium as gym
import numpy as np
import pygame
from gymnasium.spaces import MultiDiscrete

from ascii_breakout.arena import BLOCK_H, PAD_W, PAD_Y, Intent
from ascii_breakout.game import FRAME_COLS, FRAME_ROWS, Breakout, GameResult

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

# movement component of the action -> paddle intent
MOVEMENT_INTENTS = {3: Intent.LEFT, 4: Intent.RIGHT}


class GameEnv(gym.Env):
    metadata = {"render_modes": ["rgb_array"]}

    # Must be a short, user-facing control string:
    user_guide = "Controls: Use ← and → to move the paddle."

    # Must be a short, user-facing description of the game:
    game_description = (
        "Terminal-style Breakout. The ball moves one cell every few frames; "
        "break all eight blocks without letting it past the paddle."
    )

    # Should frames auto-advance or wait for user input?
    auto_advance = True

    def __init__(self, render_mode="rgb_array"):
        super().__init__()
        self.render_mode = render_mode

        # Game constants
        self.WIDTH, self.HEIGHT = 640, 400
        self.CELL_W, self.CELL_H = 9, 16
        self.OFFSET_X = (self.WIDTH - FRAME_COLS * self.CELL_W) // 2
        self.OFFSET_Y = (self.HEIGHT - FRAME_ROWS * self.CELL_H) // 2
        self.MAX_STEPS = 10000
        self.REWARD_BLOCK = 1.0
        self.REWARD_WIN = 100.0
        self.REWARD_LOSS = -10.0
        self.REWARD_STEP = -0.001

        # Colors
        self.COLOR_BG = (15, 15, 35)
        self.COLOR_WALL = (100, 110, 140)
        self.COLOR_PADDLE = (240, 240, 240)
        self.COLOR_BALL = (255, 255, 0)
        self.COLOR_UI_TEXT = (200, 200, 220)
        self.BLOCK_COLORS = [(255, 70, 70), (0, 128, 255)]

        self.observation_space = gym.spaces.Box(
            low=0, high=255, shape=(self.HEIGHT, self.WIDTH, 3), dtype=np.uint8
        )
        self.action_space = MultiDiscrete([5, 2, 2])

        # Pygame setup
        pygame.init()
        pygame.font.init()
        self.screen = pygame.Surface((self.WIDTH, self.HEIGHT))
        self.clock = pygame.time.Clock()
        self.font_cell = pygame.font.SysFont("Consolas", 16)
        self.font_large = pygame.font.SysFont("Consolas", 48, bold=True)
        self._glyph_cache = {}

        # Game state is initialized in reset()
        self.game = None
        self.steps = None
        self.score = None

        self.reset()

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)

        self.game = Breakout()
        self.steps = 0
        self.score = 0

        return self._get_observation(), self._get_info()

    def step(self, action):
        if self.game.done:
            return self._get_observation(), 0, True, False, self._get_info()

        reward = self.REWARD_STEP
        movement = int(action[0])  # 3=left, 4=right, anything else stays put
        intent = MOVEMENT_INTENTS.get(movement, Intent.NONE)

        broken_before = self.game.grid.broken_count()
        result = self.game.tick(intent)
        newly_broken = self.game.grid.broken_count() - broken_before

        reward += newly_broken * self.REWARD_BLOCK
        self.score += newly_broken

        self.steps += 1
        terminated = False
        truncated = False
        if result is GameResult.WON:
            reward += self.REWARD_WIN
            terminated = True
        elif result is GameResult.LOST:
            reward += self.REWARD_LOSS
            terminated = True
        elif self.steps >= self.MAX_STEPS:
            truncated = True

        return (
            self._get_observation(),
            reward,
            terminated,
            truncated,
            self._get_info(),
        )

    def render(self):
        return self._get_observation()

    def _get_observation(self):
        self.screen.fill(self.COLOR_BG)
        self._render_game()
        self._render_ui()
        arr = pygame.surfarray.array3d(self.screen)
        return np.transpose(arr, (1, 0, 2)).astype(np.uint8)

    def _cell_color(self, y, x):
        ball = self.game.ball
        if (y, x) == (ball.y, ball.x):
            return self.COLOR_BALL
        if y == PAD_Y and self.game.pad_x <= x < self.game.pad_x + PAD_W:
            return self.COLOR_PADDLE
        if self.game.grid.contains(y, x) and y > 0:
            return self.BLOCK_COLORS[(y // BLOCK_H) % len(self.BLOCK_COLORS)]
        return self.COLOR_WALL

    def _glyph_surface(self, char, color):
        key = (char, color)
        if key not in self._glyph_cache:
            self._glyph_cache[key] = self.font_cell.render(char, True, color)
        return self._glyph_cache[key]

    def _render_game(self):
        frame = self.game.frame()
        for y, x in zip(*np.nonzero(frame != " ")):
            y, x = int(y), int(x)
            surf = self._glyph_surface(frame[y, x], self._cell_color(y, x))
            cell_rect = pygame.Rect(
                self.OFFSET_X + x * self.CELL_W,
                self.OFFSET_Y + y * self.CELL_H,
                self.CELL_W,
                self.CELL_H,
            )
            self.screen.blit(surf, surf.get_rect(center=cell_rect.center))

    def _render_ui(self):
        if not self.game.done:
            return
        message = "YOU WIN!" if self.game.result is GameResult.WON else "GAME OVER"
        color = (0, 255, 0) if self.game.result is GameResult.WON else (255, 0, 0)
        text_surf = self.font_large.render(message, True, color)
        text_rect = text_surf.get_rect(center=(self.WIDTH // 2, self.HEIGHT // 2))

        # Semi-transparent backing for readability
        bg_rect = text_rect.inflate(20, 20)
        s = pygame.Surface(bg_rect.size, pygame.SRCALPHA)
        s.fill((0, 0, 0, 150))
        self.screen.blit(s, bg_rect)
        self.screen.blit(text_surf, text_rect)

    def _get_info(self):
        return {
            "score": self.score,
            "steps": self.steps,
            "blocks_remaining": self.game.grid.remaining(),
            "result": self.game.result.value,
        }

    def close(self):
        pygame.quit()

    def validate_implementation(self):
        # Test action space
        assert self.action_space.shape == (3,)
        assert self.action_space.nvec.tolist() == [5, 2, 2]

        # Test observation space
        test_obs = self._get_observation()
        assert test_obs.shape == (self.HEIGHT, self.WIDTH, 3)
        assert test_obs.dtype == np.uint8

        # Test reset
        obs, info = self.reset()
        assert obs.shape == (self.HEIGHT, self.WIDTH, 3)
        assert isinstance(info, dict)

        # Test step
        test_action = self.action_space.sample()
        obs, reward, term, trunc, info = self.step(test_action)
        assert obs.shape == (self.HEIGHT, self.WIDTH, 3)
        assert isinstance(reward, (int, float))
        assert isinstance(term, bool)
        assert isinstance(trunc, bool)
        assert isinstance(info, dict)

        # Paddle never leaves the arena
        self.reset()
        for _ in range(100):
            self.step([3, 0, 0])
        assert self.game.pad_x == 1, "Paddle passed the left wall"

        print("✓ Implementation validated successfully")


if __name__ == "__main__":
    # To play in a window, comment out the SDL_VIDEODRIVER line at the top
    env = GameEnv()
    obs, info = env.reset()

    try:
        screen = pygame.display.set_mode((env.WIDTH, env.HEIGHT))
        pygame.display.set_caption("ASCII Breakout")
        is_headless = False
    except pygame.error:
        print("Pygame display could not be initialized. Running in headless mode.")
        is_headless = True

    action = np.array([0, 0, 0])  # No-op, no space, no shift
    done = False
    running = True
    while running and not done:
        if not is_headless:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

            keys = pygame.key.get_pressed()
            action[0] = 0
            if keys[pygame.K_LEFT]:
                action[0] = 3
            elif keys[pygame.K_RIGHT]:
                action[0] = 4

        obs, reward, terminated, truncated, info = env.step(action)
        done = terminated or truncated

        if not is_headless:
            surf = pygame.surfarray.make_surface(np.transpose(obs, (1, 0, 2)))
            screen.blit(surf, (0, 0))
            pygame.display.flip()
            env.clock.tick(round(1 / 0.03))
        elif env.steps > 1000:
            running = False
            print("Headless run finished.")

    print(f"Result: {info['result']}, blocks broken: {info['score']}")
    env.close()
