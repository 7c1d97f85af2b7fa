# SPDX-FileCopyrightText: 2018-2025 Joonas Rautiola <mail@joinemm.dev>
# SPDX-License-Identifier: MPL-2.0
# https://git.joinemm.dev/miso-bot

from typing import Iterable, Protocol, Sequence

from modules.similarity import similarity
from modules.vocabulary import Vocabulary

# words this short or shorter never get an emoji appended
MIN_EMOJIFY_LENGTH = 3

SIMILARITY_THRESHOLD = 0.70


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int:
        """Uniform integer in the range [0, stop)"""
        ...


def shortcode(entry: str) -> str:
    return f":{entry}:"


def join_tokens(tokens: Iterable[str]) -> str:
    return " ".join(tokens)


def coin_flip(rng: RandomSource) -> bool:
    return rng.randrange(2) == 1


def pick(options: Sequence[str], rng: RandomSource) -> str:
    return options[rng.randrange(len(options))]


def emojify(text: str, vocabulary: Vocabulary, rng: RandomSource) -> str:
    """Append random emojis after some of the longer words"""
    results = []

    for word in text.split():
        if len(word) > MIN_EMOJIFY_LENGTH and coin_flip(rng):
            results.append(f"{word} {shortcode(vocabulary.choice(rng))}")
        else:
            results.append(word)

    return join_tokens(results)


def candidates(
    word: str, vocabulary: Vocabulary, threshold: float = SIMILARITY_THRESHOLD
) -> list[str]:
    """Vocabulary entries that look enough like the given word"""
    word = word.lower()
    return [entry for entry in vocabulary if similarity(word, entry) > threshold]


def english_to_emojis(text: str, vocabulary: Vocabulary, rng: RandomSource) -> str:
    """Replace words with emojis that are spelled similarly.

    Words without a close enough match are kept as they were, casing included.
    """
    results = []

    for word in text.split():
        emoji_candidates = candidates(word, vocabulary)
        if emoji_candidates:
            results.append(shortcode(pick(emoji_candidates, rng)))
        else:
            results.append(word)

    return join_tokens(results)
