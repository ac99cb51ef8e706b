# sampleworks

A collection of small, self-contained programs and helpers:

- `sampleworks.textcase`: `to_snake_case`, `to_camel_case` and `to_pascal_case`.
- `sampleworks.mathtools`: `maximum`, `minimum`, `max_area_check`, `min_area_check`,
  `describe_chars`, `reverse_string`, `fibonacci`, `sum_array`, `add` and `cube_volume`.
- `sampleworks.shapes`: the `Shape` base class with `Rect` and `Circle`, a mutable
  `NamedValue`, `describe_slice`, and a demo command.
- `sampleworks.userstore`: a thread-safe in-memory `UserStore` of `User` records.
- `sampleworks.userapi`: a Flask JSON API over the user store.
- `sampleworks.proglog`: an append-only record `Log` with a Flask HTTP front end.
- `sampleworks.urlcheck`: checks which web sites respond and saves the pages that load.
- `sampleworks.userform`: turns submitted form fields into a `FormUser`.
- `sampleworks.pacman`: the rules of a Pac-Man game (board, pickups, effects, ghosts,
  player, HUD state and scene).

## Installing

```
pip install .
```

Add the `test` extra to get the test runner as well:

```
pip install ".[test]"
pytest
```

## Text and number helpers

```python
from sampleworks.textcase import to_snake_case, to_camel_case, to_pascal_case

to_snake_case("HTTPRequest")        # "http_request"
to_camel_case("hello_world")        # "helloWorld"
to_pascal_case("_hello_world")      # "HelloWorld"

from sampleworks.mathtools import fibonacci, reverse_string, cube_volume, maximum

fibonacci(4)                         # 3
reverse_string("Hello world!")       # "!dlrow olleH"
cube_volume(5)                       # 125
maximum(10, 15)                      # 15
```

```python
from sampleworks.shapes import Rect, Circle

Rect(width=10, height=10).area()       # 100
Rect(width=10, height=10).perimeter()  # 40
Circle(radius=5).perimeter()           # 31.41...
```

## The user store

A new store starts with two users, `"1"` (John Doe) and `"2"` (Jane Smith); new
users get the following ids, `"3"`, `"4"` and so on.

```python
from sampleworks.userstore import UserStore, UserNotFoundError

store = UserStore()
user = store.create("Test User", "test@example.com")
store.get_by_id(user.id)
store.update(user.id, "Renamed User", "")   # empty fields are left unchanged
store.delete(user.id)

try:
    store.get_by_id("missing")
except UserNotFoundError:
    ...
```

## The user API

`sampleworks.userapi.create_app(store, web_dir)` builds a Flask application;
`make_user_blueprint(store)` gives just the user routes. The application answers on:

- `GET /` (serves `index.html` from the web directory) and `/static/...`
- `GET /health`
- `GET /api/v1/hello`
- `GET /api/v1/users` and `POST /api/v1/users` (JSON with `name` and `email`, both required)
- `GET`, `PUT` and `DELETE /api/v1/users/<id>`

Unknown ids give 404 with `{"error": "User not found"}`. Every response carries
CORS headers and an `X-Request-ID` header; `OPTIONS` requests get 204.

## The record log

```python
from sampleworks.proglog import Log, Record, OffsetNotFoundError

log = Log()
offset = log.append(Record(value=b"hello"))   # 0
log.read(offset).value                          # b"hello"
```

`create_http_app(log)` serves it: `POST /` with `{"record": {"value": "<base64>"}}`
returns `{"offset": n}`; `GET /` with `{"offset": n}` returns the record, or 404
when the offset is past the end. `load_server_configuration` reads a document
such as:

```json
{"server": {"host": "127.0.0.1", "port": 8081}}
```

## Form validation

```python
from sampleworks.userform import form_to_user, FormError

form_to_user({"firstname": "Ian", "lastname": "Douglas", "email": "ian@example.com",
              "city": "Boulder", "age": "42"})
```

Missing fields and a non-integer age are all reported together in one
`FormError`, whose `errors` list and `to_json()` give the messages.

## The Pac-Man model

```python
from sampleworks.pacman.scene import Game

game = Game()
game.screen_width(), game.screen_height()   # (608, 700)
game.update({"right"}, set())               # keys held, keys pressed this frame
game.scene.player.score, game.scene.lives
```

Held keys `up`/`k`, `left`/`h`, `right`/`l`, `down`/`j` move; `s` pressed toggles
sound and `r` restarts. Movement starts after the 240-frame count-down.

## Commands

| Command                 | What it does                                                       |
|-------------------------|--------------------------------------------------------------------|
| `sampleworks-shapes`    | Prints the string, shape, slice and map examples.                  |
| `sampleworks-users`     | Serves the user API (`--host`, `--port` 8080, `--web-dir` `web`).   |
| `sampleworks-proglog`   | Serves a fresh record log at the address in a JSON config file.    |
| `sampleworks-urlcheck`  | Checks web sites and saves the pages that load.                    |

`sampleworks-proglog config.json` prints the address and serves there.

`sampleworks-urlcheck [URL ...]` empties `--output-dir` (default `output`), checks
every URL at once and writes each status-200 body to `<output-dir>/<host...>.txt`.
With `--watch` it instead keeps checking every `--interval` seconds (default 2)
until interrupted.

## What this package does not do

- The Pac-Man model draws nothing and plays no audio: there is no window, no images
  and no fonts. `Sounds` only tracks which effects would be playing and at what
  volume; the caller supplies key names to `Game.update` each frame.
- `sampleworks.userform` only validates form data. It stores nothing and has no
  server or database behind it.
- The user store and the record log live in memory and are lost when the process ends.