"""Default negation markers.

Only single tokens are listed: the tokenizer splits on whitespace and
apostrophes, so phrases ("ni siquiera") and contractions ("don't") can never
match a token and are left out.
"""

SPANISH_NEGATIONS: frozenset[str] = frozenset(
    {
        "no",
        "nunca",
        "jamás",
        "ni",
        "tampoco",
        "nada",
        "nadie",
        "ninguno",
        "ninguna",
        "ningún",
    }
)

ENGLISH_NEGATIONS: frozenset[str] = frozenset(
    {
        "not",
        "never",
        "neither",
        "nor",
        "nobody",
        "nothing",
        "nowhere",
        "none",
        "hardly",
        "scarcely",
        "barely",
        "rarely",
        "seldom",
        "cannot",
    }
)

FRENCH_NEGATIONS: frozenset[str] = frozenset(
    {
        "ne",
        "pas",
        "jamais",
        "rien",
        "personne",
        "aucun",
        "aucune",
        "guère",
        "point",
    }
)

PORTUGUESE_NEGATIONS: frozenset[str] = frozenset(
    {
        "não",
        "nem",
        "ninguém",
        "nenhum",
        "nenhuma",
        "tampouco",
    }
)

ITALIAN_NEGATIONS: frozenset[str] = frozenset(
    {
        "non",
        "mai",
        "niente",
        "nulla",
        "nessuno",
        "neppure",
        "neanche",
        "nemmeno",
        "appena",
    }
)

GERMAN_NEGATIONS: frozenset[str] = frozenset(
    {
        "nicht",
        "nie",
        "kein",
        "keine",
        "niemand",
        "nichts",
        "kaum",
        "selten",
        "weder",
    }
)

NEGATIONS: frozenset[str] = (
    SPANISH_NEGATIONS
    | ENGLISH_NEGATIONS
    | FRENCH_NEGATIONS
    | PORTUGUESE_NEGATIONS
    | ITALIAN_NEGATIONS
    | GERMAN_NEGATIONS
)
