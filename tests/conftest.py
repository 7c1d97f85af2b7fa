import random
from unittest.mock import AsyncMock, MagicMock

import pytest

from modules.vocabulary import Vocabulary


def make_interaction(deferred: bool = False):
    """Stand-in for discord.Interaction that records what was sent"""
    interaction = MagicMock()
    interaction.response.is_done.return_value = deferred
    interaction.response.send_message = AsyncMock()
    interaction.response.defer = AsyncMock(
        side_effect=lambda **kwargs: setattr(interaction.response.is_done, "return_value", True)
    )
    interaction.followup.send = AsyncMock()
    return interaction


@pytest.fixture
def interaction():
    return make_interaction()


@pytest.fixture
def deferred_interaction():
    return make_interaction(deferred=True)


@pytest.fixture
def bot(tmp_path):
    bot = MagicMock()
    bot.vocabulary = Vocabulary.from_lines(["dog", "cat", "fire"])
    bot.rng = random.Random(7)
    bot.keychain.TEXT_FILES_DIRECTORY = str(tmp_path / "TextFiles")
    return bot
