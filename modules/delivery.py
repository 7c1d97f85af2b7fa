# SPDX-FileCopyrightText: 2023 Joonas Rautiola <joinemm@pm.me>
# SPDX-License-Identifier: MPL-2.0
# https://git.joinemm.dev/miso-bot

import os
import tempfile

import discord
from loguru import logger

MESSAGE_LENGTH_LIMIT = 2000
TEXT_FILES_DIRECTORY = "TextFiles"


async def send(interaction: discord.Interaction, **kwargs):
    if interaction.response.is_done():
        await interaction.followup.send(**kwargs)
    else:
        await interaction.response.send_message(**kwargs)


async def send_response(
    interaction: discord.Interaction, text: str, directory: str = TEXT_FILES_DIRECTORY
):
    """Send text as a message, or as a text file attachment if it's too long"""
    if len(text) <= MESSAGE_LENGTH_LIMIT:
        return await send(interaction, content=text)

    os.makedirs(directory, exist_ok=True)
    fd, path = tempfile.mkstemp(suffix=".txt", dir=directory)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)

        logger.info(f"Sending {len(text)} characters as attachment {os.path.basename(path)}")
        file = discord.File(path, filename=os.path.basename(path))
        try:
            await send(interaction, file=file)
        finally:
            file.close()
    finally:
        os.remove(path)
