"""Built-in emoji lexicon.

Keys are single code points: the tokenizer emits one token per non-word
symbol, so multi-character emoticons such as ":)" never reach the lexicon
as a single token and are not shipped.
"""

EMOJI_LEXICON: dict[str, float] = {
    # Positive
    "😀": 2.0,
    "😁": 2.0,
    "😂": 1.0,
    "😃": 2.0,
    "😄": 2.0,
    "😊": 2.0,
    "😍": 3.0,
    "🥰": 3.0,
    "🤩": 3.0,
    "👍": 2.0,
    "👏": 2.0,
    "🎉": 2.0,
    "💯": 2.0,
    "🔥": 1.0,
    # Negative
    "😞": -2.0,
    "😟": -2.0,
    "😠": -3.0,
    "😡": -3.0,
    "😢": -2.0,
    "😭": -2.0,
    "😱": -2.0,
    "👎": -2.0,
    "💔": -3.0,
    # Neutral (present but no effect)
    "😐": 0.0,
    "😶": 0.0,
}
