# SPDX-FileCopyrightText: 2023 Joonas Rautiola <joinemm@pm.me>
# SPDX-License-Identifier: MPL-2.0
# https://git.joinemm.dev/miso-bot

import asyncio
import random

import discord
from discord import app_commands
from discord.ext import commands

from modules import delivery, emojifier, exceptions
from modules.emojibot import EmojiBot


class Emojis(commands.Cog):
    """Emojify your text"""

    def __init__(self, bot):
        self.bot: EmojiBot = bot

    @staticmethod
    def require_words(text: str):
        if not text.split():
            raise exceptions.CommandWarning("Give me some words to work with!")

    @app_commands.command(
        name="emojify", description="Add random emojis to your text. :weary:"
    )
    @app_commands.describe(text="The text to emojify")
    @app_commands.checks.cooldown(5, 30)
    async def emojify(self, interaction: discord.Interaction, text: str):
        self.require_words(text)
        result = emojifier.emojify(text, self.bot.vocabulary, self.bot.rng)
        await delivery.send_response(
            interaction, result, self.bot.keychain.TEXT_FILES_DIRECTORY
        )

    @app_commands.command(
        name="english-to-emojis", description="Replaces English words with emojis. :eyes:"
    )
    @app_commands.describe(text="The text to translate")
    @app_commands.checks.cooldown(5, 30)
    async def english_to_emojis(self, interaction: discord.Interaction, text: str):
        self.require_words(text)
        await interaction.response.defer(thinking=True)

        # the worker thread gets its own generator, seeded from the shared one
        rng = random.Random(self.bot.rng.getrandbits(64))
        result = await asyncio.to_thread(
            emojifier.english_to_emojis, text, self.bot.vocabulary, rng
        )
        await delivery.send_response(
            interaction, result, self.bot.keychain.TEXT_FILES_DIRECTORY
        )


async def setup(bot):
    await bot.add_cog(Emojis(bot))
