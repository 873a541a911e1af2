import logging

from flask import Flask, jsonify, request

from passcraft.alphabet import CharacterClass, GenerationOptions, PRESETS, options_for_preset
from passcraft.batch import generate_batch
from passcraft.errors import InvalidOptionError, PassCraftError
from passcraft.generator import generate_password
from passcraft.score import score_password

logger = logging.getLogger(__name__)

app = Flask(__name__)

def _json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}

def _flag(data: dict, key: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise InvalidOptionError(f"{key} must be true or false, got {value!r}")
    return value

def _options_from_json(data: dict) -> GenerationOptions:
    defaults = GenerationOptions()
    opts = defaults._replace(
        classes=frozenset(c for c in CharacterClass if _flag(data, c.value, True))
    )
    # a preset replaces the per-class flags
    preset = data.get('preset')
    if preset is not None:
        opts = options_for_preset(preset, opts)
    return opts._replace(
        length=data.get('length', defaults.length),
        exclude_similar=_flag(data, 'exclude_similar', False),
        exclude_ambiguous=_flag(data, 'exclude_ambiguous', False),
    )

@app.errorhandler(PassCraftError)
def handle_config_error(e):
    logger.info("rejected request: %s", e)
    return jsonify({'error': str(e)}), 400

@app.route('/')
def home():
    return jsonify({
        "message": "PassCraft API is running"
    })

@app.route('/presets')
def presets_route():
    return jsonify({
        name: [c.value for c in CharacterClass if c in classes]
        for name, classes in PRESETS.items()
    })

@app.route('/generate', methods=['POST'])
def generate_route():
    data = _json_body()
    password = generate_password(_options_from_json(data))
    return jsonify({
        'password': password,
        'strength': score_password(password).to_dict(),
    })

@app.route('/batch', methods=['POST'])
def batch_route():
    data = _json_body()
    passwords = generate_batch(_options_from_json(data), data.get('count', 10))
    return jsonify({'passwords': passwords})

@app.route('/score', methods=['POST'])
def score_route():
    data = _json_body()
    password = data.get('password', '')
    if not isinstance(password, str):
        return jsonify({'error': 'password must be a string'}), 400
    return jsonify(score_password(password).to_dict())

if __name__ == "__main__":
    app.run(debug=True)
