"""Built-in word lexicons.

AFINN-style integer valences in [-5, 5]. These are compact starter sets;
production deployments are expected to load full word lists from JSON
files (see ``SENTIMERGE_LEXICON_FILES``).
"""

# =============================================================================
# English
# =============================================================================

ENGLISH_LEXICON: dict[str, float] = {
    # Positive
    "amazing": 4.0,
    "awesome": 4.0,
    "beautiful": 3.0,
    "best": 3.0,
    "brilliant": 4.0,
    "enjoy": 2.0,
    "excellent": 3.0,
    "fantastic": 4.0,
    "fun": 4.0,
    "glad": 3.0,
    "good": 3.0,
    "great": 3.0,
    "happy": 3.0,
    "like": 2.0,
    "love": 3.0,
    "lovely": 3.0,
    "nice": 3.0,
    "outstanding": 5.0,
    "perfect": 3.0,
    "superb": 5.0,
    "thanks": 2.0,
    "win": 4.0,
    "wonderful": 4.0,
    # Negative
    "angry": -3.0,
    "annoying": -2.0,
    "awful": -3.0,
    "bad": -3.0,
    "boring": -3.0,
    "broken": -1.0,
    "disappointed": -2.0,
    "fail": -2.0,
    "hate": -3.0,
    "horrible": -3.0,
    "lose": -3.0,
    "sad": -2.0,
    "terrible": -3.0,
    "ugly": -3.0,
    "worst": -3.0,
    "wrong": -2.0,
}

# =============================================================================
# Spanish
# =============================================================================

SPANISH_LEXICON: dict[str, float] = {
    "amor": 3.0,
    "bien": 2.0,
    "bonito": 3.0,
    "bueno": 3.0,
    "encanta": 3.0,
    "excelente": 3.0,
    "feliz": 3.0,
    "genial": 3.0,
    "gracias": 2.0,
    "increíble": 4.0,
    "maravilloso": 4.0,
    "perfecto": 3.0,
    "aburrido": -2.0,
    "horrible": -3.0,
    "malo": -3.0,
    "mal": -2.0,
    "odio": -3.0,
    "peor": -3.0,
    "terrible": -3.0,
    "triste": -2.0,
}

# =============================================================================
# French
# =============================================================================

FRENCH_LEXICON: dict[str, float] = {
    "adore": 3.0,
    "aime": 2.0,
    "beau": 3.0,
    "bien": 2.0,
    "bon": 3.0,
    "content": 2.0,
    "excellent": 3.0,
    "génial": 3.0,
    "heureux": 3.0,
    "merci": 2.0,
    "parfait": 3.0,
    "super": 3.0,
    "allergique": -2.0,
    "déteste": -3.0,
    "ennuyeux": -2.0,
    "horrible": -3.0,
    "mauvais": -3.0,
    "nul": -3.0,
    "terrible": -3.0,
    "triste": -2.0,
}

# =============================================================================
# German
# =============================================================================

GERMAN_LEXICON: dict[str, float] = {
    "froh": 2.0,
    "gut": 3.0,
    "glücklich": 3.0,
    "großartig": 4.0,
    "liebe": 3.0,
    "perfekt": 3.0,
    "schön": 3.0,
    "super": 3.0,
    "toll": 3.0,
    "wunderbar": 4.0,
    "böse": -3.0,
    "furchtbar": -3.0,
    "hasse": -3.0,
    "langweilig": -2.0,
    "schlecht": -3.0,
    "schrecklich": -3.0,
    "traurig": -2.0,
}

# =============================================================================
# Italian
# =============================================================================

ITALIAN_LEXICON: dict[str, float] = {
    "amo": 3.0,
    "bello": 3.0,
    "bene": 2.0,
    "buono": 3.0,
    "contento": 2.0,
    "felice": 3.0,
    "fantastico": 4.0,
    "grazie": 2.0,
    "ottimo": 3.0,
    "perfetto": 3.0,
    "brutto": -3.0,
    "cattivo": -3.0,
    "noioso": -2.0,
    "odio": -3.0,
    "orribile": -3.0,
    "terribile": -3.0,
    "triste": -2.0,
}

# =============================================================================
# Intensifiers (fractional valences, |v| < 1.0)
# =============================================================================

INTENSIFIER_LEXICON: dict[str, float] = {
    "very": 0.3,
    "really": 0.3,
    "extremely": 0.5,
    "incredibly": 0.5,
    "totally": 0.3,
    "muy": 0.3,
    "tan": 0.2,
    "très": 0.3,
    "vraiment": 0.3,
    "sehr": 0.3,
    "wirklich": 0.3,
    "molto": 0.3,
    "davvero": 0.3,
}
