# SPDX-FileCopyrightText: 2023 Joonas Rautiola <joinemm@pm.me>
# SPDX-License-Identifier: MPL-2.0
# https://git.joinemm.dev/miso-bot

import os

from loguru import logger


class Keychain:
    def __init__(self):
        self.EMOJI_FILE: str = "data/emojis.txt"
        self.TEXT_FILES_DIRECTORY: str = "TextFiles"
        self.RANDOM_SEED: str | None = None

        optional = [
            "RANDOM_SEED",
        ]
        for name, default in list(self.__dict__.items()):
            value = os.environ.get(name)
            if not value:
                if name not in optional:
                    logger.info(f'No value set for env variable "{name}", using "{default}"')
                continue

            setattr(self, name, value)

    @property
    def seed(self) -> int | None:
        if self.RANDOM_SEED is None:
            return None
        try:
            return int(self.RANDOM_SEED)
        except ValueError:
            logger.warning(f'Ignoring non-integer RANDOM_SEED "{self.RANDOM_SEED}"')
            return None
