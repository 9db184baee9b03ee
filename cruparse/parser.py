"""
parser.py - Sintaksna provjera CRU formata

Prima niz tokena iz Lexer-a i provjerava da li se raspada na blokove:

    zaglavlje modula, zatim jedna ili vise linija tijela (8 polja)

Rezultat je samo True/False. Gdje i zasto provjera pada se ne vraca
pozivaocu, vec se samo loguje na DEBUG nivou.
"""
import logging

from .grammar import ENTRIES, MODULE, is_module, matches
from .lexer import Lexer

logger = logging.getLogger(__name__)


class Parser:
    """Iterativni validator za CRU tokene.

    Koristi peek/consume mehanizam nad nepromjenjivim nizom tokena;
    pozicija (self.pos) se samo pomjera naprijed. Instanca se koristi
    za jedan niz tokena."""

    def __init__(self, tokens):
        self.tokens = tuple(tokens)
        self.pos = 0

    def peek(self, offset=0):
        """Vraca token na trenutnoj poziciji + offset, bez pomjeranja."""
        idx = self.pos + offset
        return self.tokens[idx] if idx < len(self.tokens) else None

    def consume(self):
        """Konzumira sljedeci token. Na kraju ulaza vraca None
        (pozicija se ipak ne pomjera preko kraja)."""
        token = self.peek()
        if token is not None:
            self.pos += 1
        return token

    def at_end(self):
        return self.pos >= len(self.tokens)

    def expect(self, name, pattern):
        """Konzumira jedan token i provjerava ga patternom."""
        idx = self.pos
        token = self.consume()
        if matches(pattern, token):
            return True
        logger.debug("Token %d (%r) ne odgovara polju '%s'", idx, token, name)
        return False

    def parse_body(self):
        """Provjerava jednu liniju tijela: tacno osam polja redom.
        Sva polja se konzumiraju cak i kad neko ranije ne odgovara."""
        ok = True
        for name, pattern in ENTRIES:
            ok = self.expect(name, pattern) and ok
        return ok

    def validate(self):
        """Provjerava cijeli niz tokena i vraca True ako je u skladu sa CRU.

        Nakon prve greske se zavrsava tekuci modul (linije do sljedeceg
        zaglavlja), ali se novi modul vise ne zapocinje."""
        is_cru = True
        while not self.at_end():
            is_cru = self.expect('module', MODULE) and is_cru

            # Bar jedna linija, zatim dalje dok ne naidje novo zaglavlje
            is_cru = self.parse_body() and is_cru
            while not self.at_end() and not is_module(self.peek()):
                is_cru = self.parse_body() and is_cru

            if not is_cru:
                break

        logger.debug("Provjereno %d/%d tokena, rezultat: %s",
                     self.pos, len(self.tokens), is_cru)
        return is_cru


def parse(text):
    """Tokenizira i provjerava tekst. Vraca True ako je u skladu sa CRU.
    Prazan tekst je validan (nula blokova)."""
    lexer = Lexer(text)
    return Parser(lexer.tokens).validate()


async def parse_async(text):
    """Asinhrona varijanta parse() za asyncio pozivaoce.
    Nema stvarne konkurentnosti; rezultat je isti kao kod parse()."""
    return parse(text)
