"""
Tests for slash command registration, with the command tree mocked out.
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock, call

from cogs.events import Events
from modules.emojibot import EmojiBot


def make_bot(developer_mode: bool):
    bot = MagicMock()
    bot.developer_mode = developer_mode
    bot.guilds = [MagicMock(name="guild one"), MagicMock(name="guild two")]
    bot.vocabulary = ["dog", "cat"]
    bot.tree.sync = AsyncMock(return_value=["emojify", "english-to-emojis"])
    bot.change_presence = AsyncMock()
    bot.commands_synced = False
    bot.boot_up_time = None
    bot.start_time = 0.0
    bot.sync_commands = lambda: EmojiBot.sync_commands(bot)
    return bot


def test_developer_mode_syncs_every_guild():
    bot = make_bot(developer_mode=True)
    asyncio.run(EmojiBot.sync_commands(bot))

    assert bot.tree.copy_global_to.call_args_list == [call(guild=g) for g in bot.guilds]
    assert bot.tree.sync.await_args_list == [call(guild=g) for g in bot.guilds]
    assert bot.commands_synced is True


def test_syncs_globally_outside_developer_mode():
    bot = make_bot(developer_mode=False)
    asyncio.run(EmojiBot.sync_commands(bot))

    bot.tree.copy_global_to.assert_not_called()
    bot.tree.sync.assert_awaited_once_with()
    assert bot.commands_synced is True


def test_commands_are_synced_only_on_first_ready():
    bot = make_bot(developer_mode=False)
    asyncio.run(EmojiBot.on_ready(bot))
    asyncio.run(EmojiBot.on_ready(bot))

    bot.tree.sync.assert_awaited_once_with()
    assert bot.change_presence.await_count == 2
    assert bot.boot_up_time is not None


def test_guild_join_syncs_in_developer_mode():
    bot = make_bot(developer_mode=True)
    guild = MagicMock()
    asyncio.run(Events(bot).on_guild_join(guild))

    bot.tree.copy_global_to.assert_called_once_with(guild=guild)
    bot.tree.sync.assert_awaited_once_with(guild=guild)


def test_guild_join_does_not_sync_globally_registered_commands():
    bot = make_bot(developer_mode=False)
    asyncio.run(Events(bot).on_guild_join(MagicMock()))

    bot.tree.copy_global_to.assert_not_called()
    bot.tree.sync.assert_not_awaited()
