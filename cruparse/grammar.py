"""
grammar.py - Gramatika CRU formata

Svaki blok pocinje zaglavljem modula (npr. '+UC12'), nakon kojeg slijedi
jedna ili vise linija tijela sa tacno osam polja, uvijek ovim redom:

    1  C1  P=24  H=MA  10:00-12:00  F1  S=P202  //

Pravila su definisana kao lista (naziv, regex) parova, kao i u Lexer-u.
Redoslijed pravila je bitan - to je redoslijed polja u liniji.
"""
import re

# Zaglavlje modula: '+' + 2-4 velika slova, opcioni broj (1-2 cifre),
# opciono slovo, opciona cifra
MODULE = re.compile(r"\+[A-Z]{2,4}(\d{1,2})?[A-Z]?\d?", re.ASCII)

# Polja linije tijela (redoslijed je bitan!)
ENTRIES = [
    ('one',       re.compile(r"1")),
    ('type',      re.compile(r"[CDT]\d{1,2}", re.ASCII)),
    ('capacity',  re.compile(r"P=\d{1,3}", re.ASCII)),
    ('day',       re.compile(r"H=(L|MA|ME|J|V|S)")),
    # Sati 0-23 bez vodece nule, minute 00-59
    ('time',      re.compile(r"(\d|1\d|2[0-3]):[0-5]\d-(\d|1\d|2[0-3]):[0-5]\d", re.ASCII)),
    ('group',     re.compile(r"[A-Z]([0-9]|[A-Z])?")),
    ('room',      re.compile(r"S=[A-Z]{1,3}\d{1,3}", re.ASCII)),
    ('end',       re.compile(r"//")),
]

BODY_LENGTH = len(ENTRIES)


def matches(pattern, token):
    """Provjerava da li cijeli token odgovara patternu.
    Token koji nedostaje (None, kraj ulaza) nikad ne odgovara."""
    if token is None:
        return False
    return pattern.fullmatch(token) is not None


def is_module(token):
    """Da li token otvara novi blok modula."""
    return matches(MODULE, token)
