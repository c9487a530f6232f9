"""Translation from Python attribute names to JSON object keys."""
import re

# A capitalised word: one uppercase letter followed by lowercase letters
WORD_PATTERN = re.compile(r"[A-Z][a-z]+")


def translate_name(name: str) -> str:
    """Translate an identifier to the JSON key convention, e.g. "UserID" to "user_id".

    The name is split into capitalised words and the stretches between them
    ("URL" in "URLPrefix", "B" in "PlanB"); each piece is lowercased and the
    pieces are joined with underscores. snake_case names pass through unchanged.
    """
    words: list[str] = []
    pos = 0
    for match in WORD_PATTERN.finditer(name):
        if match.start() > pos:
            words.append(name[pos:match.start()])
        words.append(match.group())
        pos = match.end()
    if pos < len(name):
        words.append(name[pos:])
    return "_".join(word.lower() for word in words)
