"""
utils.py - Pomocne funkcije za cruparse modul

Sadrzi:
    - load_source: ucitavanje .cru fajla kao teksta
    - setup_logging: konfiguracija root loggera (konzola + opcioni log fajl)
"""
import logging
import os
import sys
from datetime import datetime


# ---------------------------------------------------------------------------
# Ucitavanje izvornog teksta
# ---------------------------------------------------------------------------

def load_source(file_path, encoding='utf-8'):
    """Ucitava cijeli .cru fajl kao string.

    Krajevi linija se ne prevode (newline=''), Lexer ih sam razdvaja.
    Ako fajl ne postoji ili se ne moze procitati, ispisuje gresku
    i prekida program."""
    try:
        with open(file_path, 'r', encoding=encoding, newline='') as f:
            return f.read()
    except FileNotFoundError:
        logging.error(f"Greška: Ulazni fajl '{file_path}' nije pronađen.")
        sys.exit(1)
    except UnicodeDecodeError as e:
        logging.error(f"Greška: Fajl '{file_path}' nije validan {encoding} tekst: {e}")
        sys.exit(1)
    except OSError as e:
        logging.error(f"Greška pri čitanju '{file_path}': {e}")
        sys.exit(1)


# ---------------------------------------------------------------------------
# Logovanje
# ---------------------------------------------------------------------------

def setup_logging(verbose=False, log_dir=None):
    """Postavlja root logger. Konzola dobija samo poruku, log fajl
    (ako je zadan direktorij) i vrijeme i nivo."""
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    if logger.hasHandlers():
        logger.handlers.clear()

    ch = logging.StreamHandler()
    ch.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(ch)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        timestamp = datetime.now().strftime('%Y-%m-%d-%H-%M')
        log_path = os.path.join(log_dir, f"check.{timestamp}.log")
        fh = logging.FileHandler(log_path, encoding='utf-8')
        fh.setFormatter(logging.Formatter('%(asctime)s [%(levelname)s] %(message)s'))
        logger.addHandler(fh)

    return logger
