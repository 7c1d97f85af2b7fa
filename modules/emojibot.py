# SPDX-FileCopyrightText: 2023 Joonas Rautiola <joinemm@pm.me>
# SPDX-License-Identifier: MPL-2.0
# https://git.joinemm.dev/miso-bot

import asyncio
import random
import traceback
from time import time
from typing import Any

from discord import Activity, ActivityType, AllowedMentions, Intents, Status
from discord.ext import commands
from loguru import logger

from modules.keychain import Keychain
from modules.vocabulary import Vocabulary


def stringfromtime(t: float) -> str:
    minutes, seconds = divmod(t, 60)
    if minutes:
        return f"{int(minutes)} minutes {seconds:.2f} seconds"
    return f"{seconds:.2f} seconds"


class EmojiBot(commands.AutoShardedBot):
    def __init__(
        self,
        extensions: list[str],
        vocabulary: Vocabulary,
        keychain: Keychain,
        developer_mode: bool = False,
        rng: random.Random | None = None,
        **kwargs: dict[str, Any],
    ):
        super().__init__(
            command_prefix=commands.when_mentioned,
            help_command=None,
            activity=Activity(type=ActivityType.playing, name="Booting up..."),
            allowed_mentions=AllowedMentions(everyone=False, roles=False),
            status=Status.idle,
            chunk_guilds_at_startup=False,
            intents=Intents(guilds=True),
            **kwargs,
        )
        self.extensions_to_load = extensions
        self.vocabulary = vocabulary
        self.keychain = keychain
        self.developer_mode = developer_mode
        # only ever used from the event loop thread
        self.rng = rng or random.Random(keychain.seed)
        self.start_time = time()
        self.commands_synced = False
        self.boot_up_time: float | None = None

    async def setup_hook(self):
        await self.load_all_extensions()
        boot_up_time = time() - self.start_time
        logger.info(f"Setup hook done in {stringfromtime(boot_up_time)}")

    async def load_all_extensions(self):
        logger.info("Loading extensions...")
        tasks = []

        async def load(extension):
            try:
                await self.load_extension(extension)
                logger.info(f"Loaded [ {extension} ]")
            except Exception as error:
                logger.error(f"Error loading [ {extension} ]")
                traceback.print_exception(type(error), error, error.__traceback__)

        for extension in self.extensions_to_load:
            tasks.append(load(f"cogs.{extension}"))

        await asyncio.gather(*tasks)

        logger.info("All extensions loaded successfully!")

    async def sync_commands(self):
        """Register slash commands to discord.

        Developer mode registers them to every guild separately, which takes
        effect immediately unlike global registration.
        """
        if self.developer_mode:
            for guild in self.guilds:
                self.tree.copy_global_to(guild=guild)
                synced = await self.tree.sync(guild=guild)
                logger.info(f"Synced {len(synced)} commands to guild {guild}")
        else:
            synced = await self.tree.sync()
            logger.info(f"Synced {len(synced)} commands globally")

        self.commands_synced = True

    async def on_ready(self):
        """Overrides built-in on_ready()"""
        if self.boot_up_time is None:
            self.boot_up_time = time() - self.start_time
        logger.info(f"Connected in {stringfromtime(self.boot_up_time)}")
        logger.info(f"Loaded {len(self.vocabulary)} emojis | {len(self.guilds)} guilds")

        if not self.commands_synced:
            await self.sync_commands()

        await self.change_presence(
            activity=Activity(type=ActivityType.playing, name="/emojify"),
            status=Status.online,
        )
