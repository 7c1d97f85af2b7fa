"""
Tests for the slash command callbacks, called directly without discord.
"""

import asyncio
import random

import pytest

from cogs.emojis import Emojis
from modules import emojifier, exceptions


def test_emojify_command(bot, interaction):
    cog = Emojis(bot)
    asyncio.run(cog.emojify.callback(cog, interaction, "determinism matters"))

    expected = emojifier.emojify("determinism matters", bot.vocabulary, random.Random(7))
    interaction.response.send_message.assert_awaited_once_with(content=expected)


def test_english_to_emojis_command(bot, interaction):
    cog = Emojis(bot)
    asyncio.run(cog.english_to_emojis.callback(cog, interaction, "my DOG is on fire"))

    interaction.response.defer.assert_awaited_once()
    interaction.response.send_message.assert_not_awaited()
    interaction.followup.send.assert_awaited_once_with(content="my :dog: is on :fire:")


@pytest.mark.parametrize("text", ["", "   \n "])
def test_commands_reject_empty_text(bot, interaction, text):
    cog = Emojis(bot)
    with pytest.raises(exceptions.CommandWarning):
        asyncio.run(cog.emojify.callback(cog, interaction, text))
    with pytest.raises(exceptions.CommandWarning):
        asyncio.run(cog.english_to_emojis.callback(cog, interaction, text))
    interaction.response.send_message.assert_not_awaited()


def test_error_handler_sends_ephemeral_warning(bot, interaction):
    from cogs.errorhandler import ErrorHander

    handler = ErrorHander(bot)
    asyncio.run(
        handler.on_app_command_error(interaction, exceptions.CommandWarning("Careful!"))
    )

    kwargs = interaction.response.send_message.await_args.kwargs
    assert kwargs["ephemeral"] is True
    assert "Careful!" in kwargs["embed"].description


def test_error_handler_uses_followup_after_defer(bot, deferred_interaction):
    from cogs.errorhandler import ErrorHander

    handler = ErrorHander(bot)
    asyncio.run(handler.on_app_command_error(deferred_interaction, ValueError("boom")))

    kwargs = deferred_interaction.followup.send.await_args.kwargs
    assert "ValueError: boom" in kwargs["embed"].description
