# SPDX-FileCopyrightText: 2023 Joonas Rautiola <joinemm@pm.me>
# SPDX-License-Identifier: MPL-2.0
# https://git.joinemm.dev/miso-bot

import logging

import discord
from loguru import logger


class InterceptHandler(logging.Handler):
    def emit(self, record):
        # Get corresponding Loguru level if it exists
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def interaction_options(interaction: discord.Interaction) -> str:
    data = interaction.data or {}
    options = data.get("options", [])
    return " ".join(f"{o.get('name')}:{o.get('value')}" for o in options)  # type: ignore


def log_interaction_format(interaction: discord.Interaction, extra: str = ""):
    took = (discord.utils.utcnow() - interaction.created_at).total_seconds()
    guild = interaction.guild.name if interaction.guild is not None else "DM"
    user = str(interaction.user)
    command = interaction.command.qualified_name if interaction.command else "?"
    return f"{guild} @ {user} : /{command} {interaction_options(interaction)} ({took:.2f}s) {extra}"
