# SPDX-FileCopyrightText: 2018-2025 Joonas Rautiola <mail@joinemm.dev>
# SPDX-License-Identifier: MPL-2.0
# https://git.joinemm.dev/miso-bot

import logging
import os
import sys

import uvloop
from dotenv import load_dotenv
from loguru import logger

# dotenv has to be loaded before reading any configuration
load_dotenv()

from modules.emojibot import EmojiBot  # noqa: E402
from modules.exceptions import VocabularyError  # noqa: E402
from modules.keychain import Keychain  # noqa: E402
from modules.log import InterceptHandler  # noqa: E402
from modules.vocabulary import Vocabulary  # noqa: E402

logging.basicConfig(handlers=[InterceptHandler()], level=logging.INFO)

uvloop.install()

developer_mode = "dev" in sys.argv

if developer_mode:
    logger.info("Developer mode is ON")
    TOKEN = os.environ["EMOJI_BOT_TOKEN_BETA"]
else:
    TOKEN = os.environ["EMOJI_BOT_TOKEN"]

extensions = [
    "errorhandler",
    "events",
    "emojis",
]


def main():
    keychain = Keychain()
    try:
        vocabulary = Vocabulary.load(keychain.EMOJI_FILE)
    except VocabularyError as e:
        logger.critical(f"Unable to load emoji vocabulary: {e}")
        sys.exit(1)

    logger.info(f"Loaded {len(vocabulary)} emojis from {keychain.EMOJI_FILE}")

    bot: EmojiBot = EmojiBot(
        extensions=extensions,
        vocabulary=vocabulary,
        keychain=keychain,
        developer_mode=developer_mode,
    )
    bot.run(TOKEN, log_handler=None)


if __name__ == "__main__":
    main()
