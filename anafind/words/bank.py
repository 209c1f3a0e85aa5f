import logging
from typing import Iterable
from anafind.core.models import QueryOptions
from anafind.core.signature import Signature
from anafind.errors import SetupError

logger = logging.getLogger(__name__)

class WordIndex:
    """
    Groups a word list by letter signature and answers sub-anagram queries.
    Built once; queries never modify it.
    """

    def __init__(self, words: Iterable[str]):
        # signature -> lowercased words sharing it, in input order
        self._buckets: dict[Signature, list[str]] = {}
        for line in words:
            word = line.strip()
            if not word:
                continue
            sig = Signature.for_word(word)
            if sig not in self._buckets:
                self._buckets[sig] = []
            self._buckets[sig].append(word.lower())
        logger.info(f"Indexed {self.word_count} words under {len(self._buckets)} signatures")

    @classmethod
    def from_file(cls, filepath: str, encoding: str = "utf-8"):
        try:
            with open(filepath, "r", encoding=encoding) as f:
                return cls(f)
        except UnicodeDecodeError as e:
            raise SetupError(str(filepath), f"cannot decode word list: {e}") from e
        except OSError as e:
            raise SetupError(str(filepath), f"cannot read word list: {e.strerror or e}") from e

    def __len__(self) -> int:
        return len(self._buckets)

    @property
    def word_count(self) -> int:
        return sum(len(bucket) for bucket in self._buckets.values())

    def anagrams(self, word: str) -> list[str]:
        """
        Returns the words whose letters are exactly those of `word`.
        """
        return list(self._buckets.get(Signature.for_word(word), []))

    def query(self, pattern: str, options: QueryOptions | None = None) -> list[str]:
        """
        Returns, sorted, every word spellable from a subset of the letters in
        `pattern` that also passes the length and positional constraints.
        """
        options = options or QueryOptions()
        if options.length is not None and options.length < options.min_length:
            logger.debug(
                f"Exact length {options.length} is below minimum {options.min_length}; nothing can match"
            )
        matcher = options.matcher
        pattern_sig = Signature.for_word(pattern)

        found = []
        for sig, bucket in self._buckets.items():
            if not pattern_sig.contains(sig):
                continue
            for word in bucket:
                if not options.accepts_length(len(word)):
                    continue
                if matcher and not matcher.matches(word):
                    continue
                found.append(word)

        found.sort()
        logger.debug(f"Query {pattern!r} matched {len(found)} words")
        return found
