"""
cruparse - Provjera CRU formata rasporeda

Pipeline:  .cru fajl -> Lexer -> Parser -> True/False

CRU je linijski format izvoza rasporeda (francuski univerziteti).
Modul samo provjerava da li tekst odgovara gramatici; vrijednosti polja
se ne cuvaju. Ucitavanje fajlova i ispis rezultata rade pozivaoci
(cru_check.py).
"""
