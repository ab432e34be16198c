#!/usr/bin/env python3
"""
Flask web application for dictionary lookups.
"""

import argparse
from flask import Flask, jsonify, request
from ydict.dictionary import Config, Dictionary
from ydict.paths import DAT_PATH, IDX_DUMP_PATH, IDX_PATH, SUGGEST_LIMIT
from ydict.query import clean_query


def create_app(dictionary=None):
    """Build the Flask app around an (initialized) Dictionary."""
    app = Flask(__name__)
    app.config["DICTIONARY"] = dictionary

    def get_dictionary():
        d = app.config.get("DICTIONARY")
        if d is None or not d.initialized:
            return None
        return d

    @app.route('/lookup')
    def lookup():
        """Render one entry; on a miss return prefix suggestions instead."""
        d = get_dictionary()
        if d is None:
            return jsonify({'error': 'Dictionary not initialized'}), 500

        word = clean_query(request.args.get('word', ''))
        if not word:
            return jsonify({'error': 'Empty query'}), 400

        index = d.find_word(word)
        if index < 0:
            suggestions = [d.word_at(i).word for i in d.suggest(word, SUGGEST_LIMIT)]
            return jsonify({
                'error': f'Word not found: {word}',
                'suggestions': suggestions,
            }), 404

        return jsonify({
            'index': index,
            'word': d.word_at(index).word,
            'text': d.render(index),
        })

    @app.route('/suggest')
    def suggest():
        d = get_dictionary()
        if d is None:
            return jsonify({'error': 'Dictionary not initialized'}), 500

        prefix = clean_query(request.args.get('prefix', ''))
        try:
            limit = int(request.args.get('limit', SUGGEST_LIMIT))
        except ValueError:
            return jsonify({'error': 'limit must be an integer'}), 400

        indices = d.suggest(prefix, limit)
        return jsonify({
            'prefix': prefix,
            'suggestions': [{'index': i, 'word': d.word_at(i).word} for i in indices],
        })

    @app.route('/health')
    def health():
        """Health check endpoint."""
        d = get_dictionary()
        return jsonify({
            'status': 'healthy',
            'dictionary_initialized': d is not None,
            'words': d.word_count() if d is not None else 0,
        })

    return app


def initialize_dictionary(idx_path=IDX_PATH, dat_path=DAT_PATH, idx_dump_path=IDX_DUMP_PATH):
    """Load the dictionary; returns None if it can't be loaded."""
    print("[app] Loading dictionary...")
    d = Dictionary()
    if not d.init(Config(idx_path, dat_path, idx_dump_path)):
        print(f"[app] Could not load dictionary from {idx_path} / {dat_path}")
        return None
    print(f"[app] {d.version()}")
    return d


if __name__ == '__main__':
    ap = argparse.ArgumentParser()
    ap.add_argument("--idx", default=IDX_PATH, help="path to the .idx word table")
    ap.add_argument("--dat", default=DAT_PATH, help="path to the .dat definitions file")
    ap.add_argument("--port", type=int, default=5001)
    args = ap.parse_args()

    app = create_app(initialize_dictionary(args.idx, args.dat))
    app.run(debug=True, host='0.0.0.0', port=args.port)
