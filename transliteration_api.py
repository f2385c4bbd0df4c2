"""
Transliteration API for the voter-roll app
Serves the Nepali romanizer over HTTP (Flask) and from the command line
"""

import os
from typing import Dict, List, Tuple

from dotenv import load_dotenv
from flask import Flask, jsonify, request
from aksharamukha import transliterate as aksh_transliterate

from nepali_transliterator import (
    contains_devanagari,
    translate_content,
    transliterate_to_english,
)

# Load .env file for local development
load_dotenv()

CORS_ALLOW_ORIGIN = os.getenv('CORS_ALLOW_ORIGIN', '*')
MAX_BATCH_SIZE = int(os.getenv('MAX_BATCH_SIZE', '500'))

DEFAULT_SCHEME = 'nepali'

# Scholarly schemes handled by aksharamukha
ROMANIZATION_SCHEMES = ('HK', 'IAST', 'ITRANS', 'ISO', 'Velthuis')

DISPLAY_LANGUAGES = ('ne', 'en')

app = Flask(__name__)


def romanize(text: str, scheme: str = DEFAULT_SCHEME) -> str:
    """
    Romanize Devanagari text with the requested scheme

    Args:
        text: Devanagari text
        scheme: 'nepali' for the voter-roll romanization, or one of
            ROMANIZATION_SCHEMES

    Returns:
        Romanized text
    """
    if scheme == DEFAULT_SCHEME:
        return transliterate_to_english(text)
    return aksh_transliterate.process('Devanagari', scheme, text)


def _with_cors(response):
    response.headers.add('Access-Control-Allow-Origin', CORS_ALLOW_ORIGIN)
    return response


def _preflight():
    response = jsonify({'status': 'ok'})
    response.headers.add('Access-Control-Allow-Headers', 'Content-Type')
    response.headers.add('Access-Control-Allow-Methods', 'POST')
    return _with_cors(response)


def _error(message: str, status: int) -> Tuple:
    return _with_cors(jsonify({'success': False, 'error': message})), status


def _request_data() -> Dict:
    """Read the request body as JSON, falling back to form fields"""
    data = request.get_json(force=True, silent=True)
    if not isinstance(data, dict):
        data = request.form.to_dict()
    return data


def _validate_texts(data: Dict) -> Tuple[List[str], str]:
    """
    Pull the text(s) to convert out of a request body

    Returns:
        (texts, error message); the message is empty when the body is valid
    """
    if 'texts' in data:
        texts = data['texts']
        if not isinstance(texts, list) or not all(isinstance(t, str) for t in texts):
            return [], "'texts' must be a list of strings"
        if not texts:
            return [], "'texts' must not be empty"
        if len(texts) > MAX_BATCH_SIZE:
            return [], f"At most {MAX_BATCH_SIZE} texts per request"
        return texts, ''

    text = data.get('text', '')
    if not isinstance(text, str) or not text.strip():
        return [], 'Please provide Nepali text to transliterate'
    return [text], ''


@app.route('/api/health', methods=['GET'])
def api_health():
    return _with_cors(jsonify({
        'status': 'ok',
        'schemes': [DEFAULT_SCHEME] + list(ROMANIZATION_SCHEMES)
    }))


@app.route('/api/transliterate', methods=['POST', 'OPTIONS'])
def api_transliterate():
    """API endpoint for romanizing one text or a batch"""
    if request.method == 'OPTIONS':
        return _preflight()

    data = _request_data()
    scheme = data.get('scheme') or DEFAULT_SCHEME
    if scheme != DEFAULT_SCHEME and scheme not in ROMANIZATION_SCHEMES:
        return _error(f"Unknown scheme '{scheme}'", 400)

    texts, error = _validate_texts(data)
    if error:
        return _error(error, 400)

    try:
        converted = [romanize(text, scheme) for text in texts]
    except Exception as e:
        app.logger.exception("Transliteration failed for scheme %s", scheme)
        return _error(f'Transliteration error: {str(e)}', 500)

    if 'texts' in data:
        return _with_cors(jsonify({
            'success': True,
            'scheme': scheme,
            'results': [
                {'original': original, 'transliterated': result}
                for original, result in zip(texts, converted)
            ]
        }))

    return _with_cors(jsonify({
        'success': True,
        'scheme': scheme,
        'script': 'Devanagari' if contains_devanagari(texts[0]) else 'Latin',
        'original': texts[0],
        'transliterated': converted[0]
    }))


@app.route('/api/translate-content', methods=['POST', 'OPTIONS'])
def api_translate_content():
    """Render a voter-table cell for the selected display language"""
    if request.method == 'OPTIONS':
        return _preflight()

    data = _request_data()
    lang = data.get('lang', '')
    if lang not in DISPLAY_LANGUAGES:
        return _error(f"'lang' must be one of: {', '.join(DISPLAY_LANGUAGES)}", 400)

    return _with_cors(jsonify({
        'success': True,
        'lang': lang,
        'result': translate_content(data.get('content'), lang)
    }))


if __name__ == '__main__':
    import sys

    if len(sys.argv) > 1:
        # CLI mode
        print(transliterate_to_english(' '.join(sys.argv[1:])))
        sys.exit(0)
    else:
        # Server mode
        port = int(os.environ.get('PORT', 5000))
        debug = os.environ.get('FLASK_DEBUG', '0') == '1'
        print(f"Serving transliteration API on port {port}")
        app.run(host='0.0.0.0', port=port, debug=debug)
