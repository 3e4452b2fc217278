"""
gedcom-core: GEDCOM line tokenizer and document assembler.

    from gedcom_core import GedcomParser

    document = GedcomParser().parse_text("0 @I1@ INDI\n1 NAME John /Doe/\n")
    document.resolve("@I1@").find_first("NAME").value  # 'John /Doe/'
"""

from gedcom_core.parser_core import GedcomParser, ParserOptions

__all__ = ["GedcomParser", "ParserOptions"]
