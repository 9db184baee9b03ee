"""
lexer.py - Leksicka analiza CRU formata

Pretvara sirovi tekst u niz tokena (obicnih stringova).
Separatori su novi red (\\r\\n, \\r, \\n), zarez, razmak i '~'.

Terminator linije '//' se prije razdvajanja prepisuje u '~//',
tako da uvijek postaje zaseban token cak i kad je zalijepljen
uz prethodno polje (npr. 'S=B101//').
"""
import logging
import re

logger = logging.getLogger(__name__)

TERMINATOR = "//"
SENTINEL = "~"

# Redoslijed je bitan: \r\n mora biti ispred \r
SEPARATOR = re.compile(r"\r\n|\r|\n|,|~| ")


def tokenize(text):
    """Razdvaja tekst u listu nepraznih tokena, redoslijed se cuva.
    Prazan ulaz daje praznu listu."""
    text = text.replace(TERMINATOR, SENTINEL + TERMINATOR)
    return [tok for tok in SEPARATOR.split(text) if tok]


class Lexer:
    """Leksicki analizator za CRU format.

    Tokenizira tekst odmah u konstruktoru; rezultat je u self.tokens."""

    def __init__(self, text):
        self.tokens = tokenize(text)
        logger.debug("Lexer: %d tokena", len(self.tokens))
