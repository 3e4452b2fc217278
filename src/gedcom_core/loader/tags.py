# src/gedcom_core/loader/tags.py

"""
Tag classification.

A GEDCOM tag is either one of the fixed GEDCOM 5.5.1 keywords or a
user-defined extension starting with an underscore (``_UID``, ``_MARNM``).
Anything else is rejected with ``UnknownTag``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from gedcom_core.core.exceptions import UnknownTag


class KnownTag(str, Enum):
    """The GEDCOM 5.5.1 tag vocabulary (case-sensitive)."""

    ABBR = "ABBR"
    ADDR = "ADDR"
    ADR1 = "ADR1"
    ADR2 = "ADR2"
    ADR3 = "ADR3"
    ADOP = "ADOP"
    AFN = "AFN"
    AGE = "AGE"
    AGNC = "AGNC"
    ALIA = "ALIA"
    ANCE = "ANCE"
    ANCI = "ANCI"
    ANUL = "ANUL"
    ASSO = "ASSO"
    AUTH = "AUTH"
    BAPL = "BAPL"
    BAPM = "BAPM"
    BARM = "BARM"
    BASM = "BASM"
    BIRT = "BIRT"
    BLES = "BLES"
    BURI = "BURI"
    CALN = "CALN"
    CAST = "CAST"
    CAUS = "CAUS"
    CENS = "CENS"
    CHAN = "CHAN"
    CHAR = "CHAR"
    CHIL = "CHIL"
    CHR = "CHR"
    CHRA = "CHRA"
    CITY = "CITY"
    CONC = "CONC"
    CONF = "CONF"
    CONL = "CONL"
    CONT = "CONT"
    COPR = "COPR"
    CORP = "CORP"
    CREM = "CREM"
    CTRY = "CTRY"
    DATA = "DATA"
    DATE = "DATE"
    DEAT = "DEAT"
    DESC = "DESC"
    DESI = "DESI"
    DEST = "DEST"
    DIV = "DIV"
    DIVF = "DIVF"
    DSCR = "DSCR"
    EDUC = "EDUC"
    EMAIL = "EMAIL"
    EMIG = "EMIG"
    ENDL = "ENDL"
    ENGA = "ENGA"
    EVEN = "EVEN"
    FACT = "FACT"
    FAM = "FAM"
    FAMC = "FAMC"
    FAMF = "FAMF"
    FAMS = "FAMS"
    FAX = "FAX"
    FCOM = "FCOM"
    FILE = "FILE"
    FONE = "FONE"
    FORM = "FORM"
    GEDC = "GEDC"
    GIVN = "GIVN"
    GRAD = "GRAD"
    HEAD = "HEAD"
    HUSB = "HUSB"
    IDNO = "IDNO"
    IMMI = "IMMI"
    INDI = "INDI"
    LANG = "LANG"
    LATI = "LATI"
    LONG = "LONG"
    MAP = "MAP"
    MARB = "MARB"
    MARC = "MARC"
    MARL = "MARL"
    MARR = "MARR"
    MARS = "MARS"
    MEDI = "MEDI"
    NAME = "NAME"
    NATI = "NATI"
    NATU = "NATU"
    NCHI = "NCHI"
    NICK = "NICK"
    NMR = "NMR"
    NOTE = "NOTE"
    NPFX = "NPFX"
    NSFX = "NSFX"
    OBJE = "OBJE"
    OCCU = "OCCU"
    ORDI = "ORDI"
    ORDN = "ORDN"
    PAGE = "PAGE"
    PEDI = "PEDI"
    PHON = "PHON"
    PLAC = "PLAC"
    POST = "POST"
    PROB = "PROB"
    PROP = "PROP"
    PUBL = "PUBL"
    QUAY = "QUAY"
    REFN = "REFN"
    RELA = "RELA"
    RELI = "RELI"
    REPO = "REPO"
    RESI = "RESI"
    RESN = "RESN"
    RETI = "RETI"
    RFN = "RFN"
    RIN = "RIN"
    ROLE = "ROLE"
    ROMN = "ROMN"
    SEX = "SEX"
    SLGC = "SLGC"
    SLGS = "SLGS"
    SOUR = "SOUR"
    SPFX = "SPFX"
    SSN = "SSN"
    STAE = "STAE"
    STAT = "STAT"
    SUBM = "SUBM"
    SUBN = "SUBN"
    SURN = "SURN"
    TEMP = "TEMP"
    TEXT = "TEXT"
    TIME = "TIME"
    TITL = "TITL"
    TRLR = "TRLR"
    TYPE = "TYPE"
    VERS = "VERS"
    WIFE = "WIFE"
    WWW = "WWW"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CustomTag:
    """A user-defined tag such as ``_UID``; ``value`` is the raw text."""

    value: str

    def __str__(self) -> str:
        return self.value


Tag = Union[KnownTag, CustomTag]

_KNOWN = {t.value: t for t in KnownTag}


def is_known_tag(raw: str) -> bool:
    return raw in _KNOWN


def classify_tag(raw: str, lineno: int = 0, column: int = 0) -> Tag:
    """
    Map a raw tag string to a KnownTag or CustomTag.

    Raises:
        UnknownTag: if ``raw`` is neither in the vocabulary nor
            underscore-prefixed. ``lineno``/``column`` are only used to
            locate the error.
    """
    known = _KNOWN.get(raw)
    if known is not None:
        return known
    if raw.startswith("_"):
        return CustomTag(raw)
    raise UnknownTag(raw, lineno=lineno, column=column)
