"""The posting loop: pick a booru image, put it in the drive, post a note."""

from __future__ import annotations

import argparse
import logging
import random
import time
from collections.abc import Callable, Sequence

from booruposter.config import Config
from booruposter.gelbooru import GelbooruError, GelbooruPost
from booruposter.misskey import MisskeyClient, MisskeyError

log = logging.getLogger(__name__)

POLL_INTERVAL = 3.0
POLL_ATTEMPTS = 10


class Bot:
    """Posts random booru images to a Misskey account."""

    def __init__(
        self,
        config: Config,
        client: MisskeyClient | None = None,
        sleep: Callable[[float], object] = time.sleep,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config
        self.client = client or MisskeyClient(config.token, config.instance_url)
        self.sleep = sleep
        self.rng = rng

    def ensure_file(self, post: GelbooruPost) -> str:
        """Return the drive id of the post's file, uploading it if needed."""
        name = post.file_name()
        try:
            file_id = self.client.find_file_by_name(name)
        except MisskeyError:
            pass
        else:
            log.info("Skipping upload to Misskey: %s", file_id)
            return file_id

        log.info("Requesting Misskey to download the file...")
        self.client.upload_file_from_url(post.file_url, self.config.sensitive)

        # The instance downloads asynchronously, so poll until the file shows up.
        log.info("Waiting for Misskey to download the file...")
        for attempt in range(1, POLL_ATTEMPTS + 1):
            try:
                file_id = self.client.find_file_by_name(name)
            except MisskeyError as error:
                if attempt >= POLL_ATTEMPTS:
                    raise MisskeyError(
                        f"Failed to find file on Misskey. Maybe out of drive space?: {error}"
                    ) from error
                self.sleep(POLL_INTERVAL)
            else:
                log.info("Misskey downloaded the file: %s", file_id)
                return file_id
        raise MisskeyError("Failed to find file on Misskey")

    def compose_message(self, post: GelbooruPost) -> str:
        """Text of the note for ``post``."""
        if self.config.append_post_url:
            return f"{self.config.message}\n\n{post.post_url}"
        return self.config.message

    def _back_off(self) -> None:
        log.info("Waiting %s seconds before retrying...", self.config.error_timeout)
        self.sleep(self.config.error_timeout)

    def run_once(self) -> str | None:
        """Make one posting attempt; return the note id, or None on failure."""
        log.info("Searching for a random post...")
        try:
            post = GelbooruPost.random(self.config.booru_url, self.config.tags, self.rng)
        except GelbooruError as error:
            log.error("Failed to get random post: %s", error)
            self._back_off()
            return None
        log.info("Found post: %s", post.post_url)

        try:
            file_id = self.ensure_file(post)
        except MisskeyError as error:
            log.error("Failed to upload file: %s", error)
            self._back_off()
            return None

        try:
            note_id = self.client.post_message(
                self.compose_message(post), [file_id], self.config.visibility
            )
        except MisskeyError as error:
            log.error("Failed to post note: %s", error)
            self._back_off()
            return None
        log.info("Posted note: %s", note_id)

        log.info("Waiting %s seconds before posting again...", self.config.post_interval)
        self.sleep(self.config.post_interval)
        return note_id

    def run_forever(self) -> None:
        """Keep posting until interrupted."""
        while True:
            self.run_once()


def main(argv: Sequence[str] | None = None) -> None:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        description="Post random booru images to Misskey."
    )
    parser.add_argument(
        "config", nargs="?", default="config.toml", help="path of the TOML configuration"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s > %(message)s"
    )
    config = Config.load(args.config)
    try:
        Bot(config).run_forever()
    except KeyboardInterrupt:
        pass