# SPDX-FileCopyrightText: 2023 Joonas Rautiola <joinemm@pm.me>
# SPDX-License-Identifier: MPL-2.0
# https://git.joinemm.dev/miso-bot

from discord import app_commands


class VocabularyError(Exception):
    """The emoji vocabulary could not be loaded"""


class CommandInfo(app_commands.AppCommandError):
    def __init__(self, message, **kwargs):
        super().__init__(message)
        self.kwargs = kwargs


class CommandWarning(app_commands.AppCommandError):
    def __init__(self, message, **kwargs):
        super().__init__(message)
        self.kwargs = kwargs


class CommandError(app_commands.AppCommandError):
    def __init__(self, message, **kwargs):
        super().__init__(message)
        self.kwargs = kwargs
