# SPDX-FileCopyrightText: 2018-2025 Joonas Rautiola <mail@joinemm.dev>
# SPDX-License-Identifier: MPL-2.0
# https://git.joinemm.dev/miso-bot

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator

from modules.exceptions import VocabularyError

if TYPE_CHECKING:
    from modules.emojifier import RandomSource


@dataclass(frozen=True)
class Vocabulary:
    """Ordered emoji shortcodes, without the surrounding colons"""

    entries: tuple[str, ...]

    def __post_init__(self):
        if not self.entries:
            raise VocabularyError("Emoji vocabulary is empty")

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Vocabulary":
        entries = []
        for line_number, line in enumerate(lines, start=1):
            entry = line.strip()
            if not entry:
                continue

            if ":" in entry or any(char.isspace() for char in entry):
                raise VocabularyError(
                    f"Invalid shortcode on line {line_number}: {entry!r}"
                )

            entries.append(entry)

        return cls(tuple(entries))

    @classmethod
    def load(cls, path: str) -> "Vocabulary":
        try:
            with open(path, encoding="utf-8") as f:
                return cls.from_lines(f)
        except (OSError, UnicodeDecodeError) as e:
            raise VocabularyError(f"Unable to read emoji file {path}: {e}") from e

    def choice(self, rng: "RandomSource") -> str:
        return self.entries[rng.randrange(len(self.entries))]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __getitem__(self, index: int) -> str:
        return self.entries[index]

    def __contains__(self, entry: object) -> bool:
        return entry in self.entries
