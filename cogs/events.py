import discord
from discord import app_commands
from discord.ext import commands
from loguru import logger

from modules import log
from modules.emojibot import EmojiBot


class Events(commands.Cog):
    """Event handlers for various discord events"""

    def __init__(self, bot):
        self.bot: EmojiBot = bot

    @commands.Cog.listener()
    async def on_app_command_completion(
        self,
        interaction: discord.Interaction,
        command: app_commands.Command | app_commands.ContextMenu,
    ):
        """Runs when any slash command is completed succesfully"""
        logger.info(log.log_interaction_format(interaction))

    @commands.Cog.listener()
    async def on_guild_join(self, guild: discord.Guild):
        """Called when the bot joins a new guild"""
        logger.info(f"New guild : {guild} [{guild.id}]")
        if self.bot.developer_mode:
            self.bot.tree.copy_global_to(guild=guild)
            await self.bot.tree.sync(guild=guild)

    @commands.Cog.listener()
    async def on_guild_remove(self, guild: discord.Guild):
        """Called when the bot leaves a guild"""
        logger.info(f"Left guild {guild} [{guild.id}]")


async def setup(bot):
    await bot.add_cog(Events(bot))
