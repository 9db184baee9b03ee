#!/usr/bin/env python3
"""
cru_check.py - Provjera da li su fajlovi rasporeda u CRU formatu

Ovaj fajl je glavni ulazni punkt. Modul cruparse/ samo odgovara sa
True/False za dati tekst; ucitavanje fajlova, logovanje i ispis
rezultata se rade ovdje.

Izlazni kod: 0 ako su svi fajlovi u skladu sa CRU formatom, inace 1.
"""

import argparse
import json
import logging
import signal
import sys

from cruparse.lexer import Lexer
from cruparse.parser import Parser
from cruparse.utils import load_source, setup_logging

# Omogucava cist izlaz pri pipe-anju (npr. | head, | grep)
signal.signal(signal.SIGPIPE, signal.SIG_DFL)


# ---------------------------------------------------------------------------
# Podrazumijevana konfiguracija
# ---------------------------------------------------------------------------
DEFAULT_ENCODING = "utf-8"

MSG_CONFORMS = "Fajl {path} je u skladu sa CRU formatom."
MSG_NOT_CONFORMS = "Fajl {path} nije u skladu sa CRU formatom."


def main(argv=None):
    # -------------------------------------------------------------------
    # Definicija CLI argumenata
    # -------------------------------------------------------------------
    parser = argparse.ArgumentParser(
        description="Provjera da li su fajlovi rasporeda u CRU formatu."
    )

    parser.add_argument("inputs", nargs="+", metavar="FAJL",
                        help="Putanja do jednog ili vise .cru fajlova")
    parser.add_argument("-e", "--encoding", default=DEFAULT_ENCODING,
                        help=f"Kodiranje ulaznih fajlova (default: {DEFAULT_ENCODING})")

    # Izlazni formati
    parser.add_argument("-j", "--json", help="Putanja za JSON sazetak")
    parser.add_argument("-s", "--stdout", action="store_true",
                        help="Ispisi JSON sazetak na standardni izlaz (stdout)")

    # Debug i inspekcija
    parser.add_argument("-t", "--tokens", action="store_true",
                        help="Ispisi tokene svakog fajla (za debug/inspekciju)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Detaljno logovanje (DEBUG)")
    parser.add_argument("--log-dir", help="Direktorij za log fajl")

    args = parser.parse_args(argv)

    setup_logging(args.verbose, args.log_dir)

    # Kad JSON ide na stdout, poruke idu na stderr
    msg_stream = sys.stderr if args.stdout else sys.stdout

    # -------------------------------------------------------------------
    # Provjera svakog fajla (Lexer -> Parser -> True/False)
    # -------------------------------------------------------------------
    results = []
    for path in args.inputs:
        text = load_source(path, args.encoding)
        lexer = Lexer(text)

        if args.tokens:
            _print_tokens(path, lexer.tokens)

        conforms = Parser(lexer.tokens).validate()
        logging.debug(f"{path}: {len(lexer.tokens)} tokena, CRU={conforms}")

        template = MSG_CONFORMS if conforms else MSG_NOT_CONFORMS
        print(template.format(path=path), file=msg_stream)
        results.append({"path": path, "conforms": conforms})

    all_conform = all(r["conforms"] for r in results)

    # -------------------------------------------------------------------
    # JSON sazetak
    # -------------------------------------------------------------------
    output_data = {"files": results, "all_conform": all_conform}

    if args.json:
        with open(args.json, 'w', encoding='utf-8') as f:
            json.dump(output_data, f, indent=4, ensure_ascii=False)
        logging.info(f"Generisan JSON: {args.json}")

    if args.stdout:
        print(json.dumps(output_data, indent=4, ensure_ascii=False))

    return 0 if all_conform else 1


# ---------------------------------------------------------------------------
# Pomocne funkcije
# ---------------------------------------------------------------------------

def _print_tokens(path, tokens):
    """Ispisuje tokene fajla, jedan po liniji sa rednim brojem.
    Koristi se sa -t/--tokens flagom za debug i inspekciju."""
    print(f"=== TOKENI: {path} ({len(tokens)}) ===", file=sys.stderr)
    for i, tok in enumerate(tokens):
        print(f"{i:5d}  {tok}", file=sys.stderr)


if __name__ == "__main__":
    sys.exit(main())
