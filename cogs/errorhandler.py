from dataclasses import dataclass

import discord
from discord import app_commands
from discord.ext import commands
from loguru import logger

from modules import exceptions
from modules.emojibot import EmojiBot


@dataclass
class ErrorMessages:
    no_private_message = "This command cannot be used in a DM!"
    missing_permissions = "You require {0} permission to use this command!"
    bot_missing_permissions = "Unable execute command due to missing permissions! (I need {0})"
    not_allowed = "You cannot use this command."
    command_on_cooldown = "You are on cooldown! Please wait `{0:.0f} seconds.`"


class ErrorHander(commands.Cog):
    """Any errors during slash command invocation will propagate here"""

    def __init__(self, bot):
        self.bot: EmojiBot = bot
        self.default_error_handler = None

    async def cog_load(self):
        self.default_error_handler = self.bot.tree.on_error
        self.bot.tree.on_error = self.on_app_command_error

    async def cog_unload(self):
        if self.default_error_handler is not None:
            self.bot.tree.on_error = self.default_error_handler

    def log_format(
        self,
        interaction: discord.Interaction,
        error: Exception | None,
        message: str | None = None,
    ):
        command = interaction.command.qualified_name if interaction.command else "?"
        return (
            f"{interaction.guild} @ {interaction.user} : /{command} "
            f"=> {type(error).__name__}: {message or str(error)}"
        )

    async def send_embed(
        self,
        interaction: discord.Interaction,
        message: str,
        emoji: str = "",
        color: str | None = None,
    ):
        embed = discord.Embed(
            description=f"{emoji} {message}",
            color=int(color, 16) if color else None,
        )
        try:
            if interaction.response.is_done():
                await interaction.followup.send(embed=embed, ephemeral=True)
            else:
                await interaction.response.send_message(embed=embed, ephemeral=True)
        except discord.HTTPException:
            logger.warning(f"Unable to send error message : {message}")

    async def send_info(
        self, interaction: discord.Interaction, message: str, error: Exception | None = None
    ):
        logger.info(self.log_format(interaction, error, message))
        await self.send_embed(interaction, message, ":information_source:", "3b88c3")

    async def send_warning(
        self, interaction: discord.Interaction, message: str, error: Exception | None = None
    ):
        logger.warning(self.log_format(interaction, error, message))
        await self.send_embed(interaction, message, ":warning:", "ffcc4d")

    async def send_error(
        self,
        interaction: discord.Interaction,
        message: str,
        error: Exception | None = None,
        language="",
    ):
        logger.error(self.log_format(interaction, error, message))
        await self.send_embed(interaction, f"```{language}\n{message}```", color="be1931")

    async def on_app_command_error(
        self, interaction: discord.Interaction, error_wrapper: app_commands.AppCommandError
    ):
        """The event triggered when an error is raised while invoking a slash command"""

        # extract the original error from the CommandInvokeError wrapper
        error = getattr(error_wrapper, "original", error_wrapper)

        # handle error based on it's type
        match error:
            case exceptions.CommandInfo():
                await self.send_info(interaction, str(error), error)

            case exceptions.CommandWarning():
                await self.send_warning(interaction, str(error), error)

            case exceptions.CommandError():
                await self.send_error(interaction, str(error), error)

            case app_commands.CommandOnCooldown():
                await self.send_embed(
                    interaction,
                    ErrorMessages.command_on_cooldown.format(error.retry_after),
                    ":hourglass_flowing_sand:",
                    "ffe8b6",
                )

            case app_commands.NoPrivateMessage():
                await self.send_warning(interaction, ErrorMessages.no_private_message, error)

            case app_commands.MissingPermissions():
                permissions = ", ".join(f"`{x}`" for x in error.missing_permissions)
                await self.send_warning(
                    interaction,
                    ErrorMessages.missing_permissions.format(permissions),
                    error,
                )

            case app_commands.BotMissingPermissions():
                permissions = ", ".join(f"`{x}`" for x in error.missing_permissions)
                await self.send_warning(
                    interaction,
                    ErrorMessages.bot_missing_permissions.format(permissions),
                    error,
                )

            case app_commands.CheckFailure():
                await self.send_warning(interaction, ErrorMessages.not_allowed, error)

            case _:
                await self.send_error(
                    interaction, f"{type(error).__name__}: {error}", error, language="ex"
                )
                logger.opt(exception=error).error("Unhandled exception traceback:")


async def setup(bot):
    await bot.add_cog(ErrorHander(bot))
