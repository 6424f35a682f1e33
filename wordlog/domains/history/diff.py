from collections import Counter
from typing import List

from wordlog.domains.history.tokenizer import tokenize


class WordDiff:
    """Результат сравнения словарного состава двух текстов"""

    def __init__(self, added_words: List[str], removed_words: List[str]):
        self.added_words = added_words
        self.removed_words = removed_words

    def is_empty(self) -> bool:
        return not self.added_words and not self.removed_words

    def to_dict(self) -> dict:
        return {"addedWords": list(self.added_words), "removedWords": list(self.removed_words)}

    def __eq__(self, other) -> bool:
        if not isinstance(other, WordDiff):
            return False
        return self.added_words == other.added_words and self.removed_words == other.removed_words

    def __repr__(self) -> str:
        return f"WordDiff(added={self.added_words}, removed={self.removed_words})"


def word_diff(old_text: str, new_text: str) -> WordDiff:
    """
    Сравнение двух текстов по количеству вхождений слов.

    Слово попадает в added_words, если в новом тексте оно встречается чаще,
    и в removed_words, если реже. Насколько чаще - не учитывается, порядок
    слов тоже: перестановка слов изменением не считается.
    """
    old_counts = Counter(tokenize(old_text))
    new_counts = Counter(tokenize(new_text))

    added = set()
    removed = set()
    for word in old_counts.keys() | new_counts.keys():
        if new_counts[word] > old_counts[word]:
            added.add(word)
        elif old_counts[word] > new_counts[word]:
            removed.add(word)

    return WordDiff(added_words=sorted(added), removed_words=sorted(removed))
