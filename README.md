# pongfour

Pong for four players in two teams of two. It is played on one keyboard in a
1280×800 window. The first team to reach 21 points wins.

## Installing

```
pip install .
```

The package needs `pygame`.

## Playing

```
pongfour
```

The game opens on a menu that lists the controls. Click **START** to begin.

| Team   | Player   | Up   | Down |
|--------|----------|------|------|
| Team 1 | Player 1 | ↑    | ↓    |
| Team 1 | Player 2 | K    | M    |
| Team 2 | Player 1 | A    | Z    |
| Team 2 | Player 2 | F    | V    |

- The ball bounces off the top and bottom edges and off every paddle.
- A point is scored when the ball leaves the field on the left or the right.
  After each point the ball restarts from the right half of the field in a
  random diagonal direction.
- Click the `||` button in the top-right corner to pause the game, and click
  it again to go on.
- When one side reaches 21 points, the game-over screen shows the winner and
  the final score. Press **Enter** to play again.

Close the window or press **Escape** to quit.

## Using it as a library

The game logic runs without opening a window, so you can drive it yourself:

- `pongfour.ball.Ball` and `pongfour.paddle.Paddle` hold the moving objects.
  The functions `first_paddle`, `second_paddle`, `third_paddle` and
  `fourth_paddle` build the four paddles with their key bindings.
- `pongfour.geometry.Rect` is an axis-aligned rectangle with `contains`, and
  `pongfour.geometry.circle_intersects_rect` is the ball-against-paddle test.
- `pongfour.controls.Key` lists the keys the game reacts to, and
  `pongfour.controls.InputFrame` describes the input for one frame. The
  game reads it through `is_down` and `is_pressed`.
- `pongfour.world.World` holds the ball and the four paddles in their
  starting positions; `World.paddles()` returns the four paddles in order.
- `pongfour.states` holds `MenuState`, `PlayingState` and `GameOverState`.
  Each one has `update`, `draw` and `next_state`.
- `pongfour.render.Canvas` draws text and shapes onto a pygame surface.
- `pongfour.app.App.step` moves the game forward by one frame and returns the
  current screen; it draws only when the app has a canvas. `App.run` opens
  the window and runs the whole game loop.

## Tests

```
pip install .[test]
pytest
```