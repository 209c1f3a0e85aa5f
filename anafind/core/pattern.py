WILDCARD = "."

class Pattern:
    """
    Fixed-length template where '.' matches any single character.
    """

    def __init__(self, text: str):
        # Dictionary words are stored lowercased
        self.text = text.lower()

    def matches(self, word: str) -> bool:
        if len(self.text) != len(word):
            return False
        for expected, actual in zip(self.text, word):
            if expected != WILDCARD and expected != actual:
                return False
        return True

    def __repr__(self) -> str:
        return f"Pattern({self.text!r})"
