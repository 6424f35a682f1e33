import re
from typing import List

# Буквы, цифры, апостроф (включая ’), подчеркивание и дефис
WORD_PATTERN = re.compile(r"[A-Za-z0-9_'’-]+")


def tokenize(text: str) -> List[str]:
    """Разбиение текста на слова в нижнем регистре"""
    if not text:
        return []
    return [word.lower() for word in WORD_PATTERN.findall(text)]
