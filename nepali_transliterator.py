"""
Nepali (Devanagari) to English transliterator for voter-roll names and places
"""

import re
import unicodedata

# Devanagari independent vowels
VOWELS = {
    'अ': 'a', 'आ': 'aa', 'इ': 'i', 'ई': 'ee', 'उ': 'u', 'ऊ': 'oo',
    'ऋ': 'ri', 'ए': 'e', 'ऐ': 'ai', 'ओ': 'o', 'औ': 'au',
    'अं': 'am', 'अः': 'ah'
}

# Devanagari consonants (inherent 'a' included)
CONSONANTS = {
    # Velars
    'क': 'ka', 'ख': 'kha', 'ग': 'ga', 'घ': 'gha', 'ङ': 'nga',
    # Palatals
    'च': 'cha', 'छ': 'chha', 'ज': 'ja', 'झ': 'jha', 'ञ': 'nya',
    # Retroflexes
    'ट': 'ta', 'ठ': 'tha', 'ड': 'da', 'ढ': 'dha', 'ण': 'na',
    # Dentals
    'त': 'ta', 'थ': 'tha', 'द': 'da', 'ध': 'dha', 'न': 'na',
    # Labials
    'प': 'pa', 'फ': 'pha', 'ब': 'ba', 'भ': 'bha', 'म': 'ma',
    # Semivowels
    'य': 'ya', 'र': 'ra', 'ल': 'la', 'व': 'wa',
    # Sibilants and aspirate
    'श': 'sha', 'ष': 'sha', 'स': 'sa', 'ह': 'ha',
    # Conjuncts
    'क्ष': 'ksha', 'त्र': 'tra', 'ज्ञ': 'gya', 'श्र': 'shra'
}

# Devanagari vowel signs (mātrā); these replace the inherent 'a'
MATRAS = {
    'ा': 'aa', 'ि': 'i', 'ी': 'ee', 'ु': 'u', 'ू': 'oo',
    'ृ': 'ri', 'े': 'e', 'ै': 'ai', 'ो': 'o', 'ौ': 'au',
    'ं': 'n', 'ः': 'h', 'ँ': 'n',
    '्': ''     # Halanta/Virama
}

# Digits
NUMERALS = {
    '०': '0', '१': '1', '२': '2', '३': '3', '४': '4',
    '५': '5', '६': '6', '७': '7', '८': '8', '९': '9'
}

VIRAMA = '्'

# Zero-width space/joiners and BOM
_INVISIBLE_RE = re.compile('[\u200b-\u200d\ufeff]')
_WORD_START_RE = re.compile(r'(^|\s)(\S)')

_WORD_BREAKS = '.,-'

# Longest keys first so conjuncts win over their first letter
_VOWEL_KEYS = sorted(VOWELS, key=len, reverse=True)
_CONSONANT_KEYS = sorted(CONSONANTS, key=len, reverse=True)

_ASCII_TO_DEVANAGARI_DIGITS = str.maketrans({v: k for k, v in NUMERALS.items()})


def _match(text, i, keys):
    """Return the first of ``keys`` that starts at ``text[i]``, or None."""
    for key in keys:
        if text.startswith(key, i):
            return key
    return None


def _capitalize_words(text):
    # Whitespace only starts a word; "राम,सीता" stays "Raam,seetaa"
    return _WORD_START_RE.sub(lambda m: m.group(1) + m.group(2).upper(), text)


def transliterate_to_english(text: str) -> str:
    """
    Convert Devanagari (Nepali) text to a readable English romanization

    Latin letters, ASCII digits, punctuation and whitespace pass through.
    The inherent 'a' of a consonant is dropped before a vowel sign or
    virama and at the end of a word, and kept everywhere else. Every
    whitespace-separated word of the result starts with a capital.

    Args:
        text: Nepali text, possibly mixed with Latin (None is allowed)

    Returns:
        Romanized text; empty string for empty input
    """
    if not text:
        return ''

    text = _INVISIBLE_RE.sub('', unicodedata.normalize('NFC', text))
    result = []
    i = 0

    while i < len(text):
        char = text[i]

        if char in NUMERALS:
            result.append(NUMERALS[char])
            i += 1
            continue

        vowel = _match(text, i, _VOWEL_KEYS)
        if vowel:
            result.append(VOWELS[vowel])
            i += len(vowel)
            continue

        consonant = _match(text, i, _CONSONANT_KEYS)
        if consonant:
            trans = CONSONANTS[consonant]
            i += len(consonant)
            next_char = text[i] if i < len(text) else None

            if next_char is not None and next_char in MATRAS:
                # The sign (or virama) supplies the vowel on the next step
                trans = trans[:-1]
            elif next_char is None or next_char.isspace() or next_char in _WORD_BREAKS:
                # Word-final schwa deletion
                if len(trans) > 1:
                    trans = trans[:-1]

            result.append(trans)
            continue

        # Vowel sign without a consonant in front of it
        if char in MATRAS:
            result.append(MATRAS[char])
            i += 1
            continue

        if char == VIRAMA:
            i += 1
            continue

        result.append(char)
        i += 1

    return _capitalize_words(''.join(result))


transliterate = transliterate_to_english


def to_devanagari_digits(text: str) -> str:
    """Replace ASCII digits with Devanagari digits."""
    return text.translate(_ASCII_TO_DEVANAGARI_DIGITS)


def contains_devanagari(text: str) -> bool:
    """True when any character is in the Devanagari block."""
    return any('\u0900' <= c <= '\u097f' for c in text or '')


def translate_content(content, lang: str) -> str:
    """
    Render a voter-table cell value for the selected display language

    Args:
        content: Cell value (string, number or None)
        lang: 'ne' for Nepali digits, 'en' for English romanization

    Returns:
        Display string; other languages get the value unchanged
    """
    if content is None:
        return ''
    value = str(content)

    if lang == 'ne':
        return to_devanagari_digits(value)
    if lang == 'en':
        return transliterate_to_english(value)
    return value


if __name__ == '__main__':
    import sys

    for word in sys.argv[1:] or ['राम', 'नेपाल', 'क्षत्रिय', 'श्री ज्ञान']:
        print(f"{word:15s} → {transliterate_to_english(word)}")
