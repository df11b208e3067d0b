from ascii_breakout.arena import PAD_MAX_X, PAD_MIN_X, PAD_W


def policy(env):
    # Strategy: keep the paddle's middle cell under the column the ball is heading
    # for. The paddle moves every frame and the ball only every few, so chasing the
    # ball's next column is enough to stay underneath it.
    ball = env.game.ball
    pad_x = env.game.pad_x
    target = ball.x + ball.dx
    middle = pad_x + PAD_W // 2

    if target < middle and pad_x > PAD_MIN_X:
        return [3, 0, 0]  # Move left
    elif target > middle and pad_x < PAD_MAX_X:
        return [4, 0, 0]  # Move right
    else:
        return [0, 0, 0]  # Underneath, or pinned against a wall
