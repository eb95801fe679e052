# booruposter

A small bot that picks a random post from a Gelbooru-compatible image board
and publishes it as a note on a Misskey instance, over and over, at a fixed
interval.

Each round the bot:

1. asks the board how many posts match the configured tags and picks one at
   random;
2. checks whether the image is already in the Misskey drive (looking it up by
   the last path segment of the file URL), and if not asks Misskey to
   download it from the board, then checks again every three seconds, up to
   ten times, until the file shows up;
3. creates a note with the configured message, optionally followed by a
   blank line and a link to the original post, with the image attached;
4. sleeps for the configured post interval and starts again.

If any step fails, the error is logged and the bot waits for the configured
error timeout before starting a new round.

## Installation

```
pip install .
```

## Configuration

The bot reads a TOML file, `config.toml` in the current directory unless
another path is given on the command line. Every key is required; a missing
key or a value of the wrong type raises `ValueError`.

```toml
[account]
token = "token"
instance_url = "https://misskey.example.com"

[post]
message = "Random picture of the hour"
append_post_url = true
visibility = "public"   # one of: public, home, followers
sensitive = false

[gelbooru]
booru_url = "https://booru.example.com"
tags = ["landscape", "rating:general"]

[bot]
post_interval = 3600.0  # seconds between successful posts
error_timeout = 60.0    # seconds to wait after a failure
```

The token must belong to a Misskey account with permission to manage its
drive and create notes.

## Running

```
booruposter
```

or, with a configuration file elsewhere:

```
booruposter path/to/config.toml
```

The bot logs its progress at the info level and runs until it is stopped
with Ctrl-C.

## Using it as a library

The pieces can also be used on their own:

```python
import random

from booruposter.config import Config
from booruposter.gelbooru import GelbooruPost
from booruposter.misskey import MisskeyClient, PostVisibility

config = Config.load("config.toml")
post = GelbooruPost.random(config.booru_url, config.tags, random.Random())
client = MisskeyClient(config.token, config.instance_url)
file_id = client.find_file_by_name(post.file_name())
note_id = client.post_message("Hello", [file_id], PostVisibility.HOME)
```

- `Config.from_toml(text)` and `Config.load(path)` build a frozen `Config`.
- `GelbooruPost.random(booru_url, tags, rng)` returns a post with `file_url`
  and `post_url`; `rng` may be `None`.
- `MisskeyClient` offers `find_file_by_name`, `upload_file_from_url` and
  `post_message`.
- `booruposter.bot.Bot(config, client=None, sleep=time.sleep, rng=None)` runs
  the loop: `ensure_file(post)` returns a drive file id, uploading if needed;
  `compose_message(post)` returns the note text; `run_once()` makes one
  attempt and returns the note id, or `None` after a logged failure;
  `run_forever()` repeats it.

Failures are raised as `GelbooruError` and `MisskeyError`.

## Development

```
pip install -e ".[test]"
pytest
```