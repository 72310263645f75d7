# app.py: JSON service around generate / validate / find-solution
from __future__ import annotations
from typing import Any, Dict, Optional, Tuple

from flask import Flask, jsonify, request

from generator.orchestrator import find_solution, generate_puzzle, validate_solution
from models import GenerationExhausted, PuzzleInstance
from presets import PRESET_NAMES, preset_table
from request_parser import parse_generate_request, parse_order
from attempt_log import log_attempt_detail

app = Flask(__name__)


def _merge_like_mapping() -> Dict[str, Any]:
    merged: Dict[str, Any] = {}
    payload = request.get_json(silent=True)
    if isinstance(payload, dict):
        merged.update(payload)

    form_dict = request.form.to_dict(flat=False)
    for k, v in form_dict.items():
        merged.setdefault(k, v if isinstance(v, list) else [v])

    args_dict = request.args.to_dict(flat=False)
    for k, v in args_dict.items():
        merged.setdefault(k, v if isinstance(v, list) else [v])

    return merged


def _error(message: str, status: int):
    resp = jsonify({"ok": False, "error": message})
    resp.status_code = status
    return resp


def _instance_from_request(like: Dict[str, Any]) -> Tuple[Optional[PuzzleInstance], Optional[str], int]:
    """
    Use a client-held ``puzzle`` when present, otherwise regenerate from
    (preset, seed, overrides). Returns (instance, error, http_status).
    """
    if like.get("puzzle") is not None:
        instance = PuzzleInstance.from_dict(like.get("puzzle"))
        if instance is None:
            return None, "puzzle is malformed", 400
        return instance, None, 200

    preset, seed, overrides, err = parse_generate_request(like)
    if err:
        return None, err, 400
    if preset not in PRESET_NAMES:
        return None, f"unknown preset: {preset}", 400
    if seed is None or not seed.strip():
        return None, "a seed is required to rebuild the puzzle", 400
    try:
        return generate_puzzle(preset, seed, overrides), None, 200
    except GenerationExhausted as exc:
        return None, str(exc), 422


@app.route("/presets")
def presets():
    return jsonify({"ok": True, "presets": preset_table()})


@app.route("/generate", methods=["POST"])
def generate():
    like = _merge_like_mapping()
    preset, seed, overrides, err = parse_generate_request(like)
    if err:
        return _error(f"Bad request: {err} (saw keys: {', '.join(list(like.keys())[:8]) or 'none'})", 400)
    if preset not in PRESET_NAMES:
        return _error(f"unknown preset: {preset}", 400)

    try:
        instance = generate_puzzle(preset, seed, overrides)
    except GenerationExhausted as exc:
        log_attempt_detail("Request failed", route="/generate", reason=str(exc))
        return _error(str(exc), 422)

    body = instance.to_dict()
    body["ok"] = True
    return jsonify(body)


@app.route("/validate", methods=["POST"])
def validate():
    like = _merge_like_mapping()
    instance, err, status = _instance_from_request(like)
    if instance is None:
        resp = jsonify({"ok": False, "valid": False, "error": err})
        resp.status_code = status
        return resp
    order = parse_order(like.get("order"))
    return jsonify({"ok": True, "valid": validate_solution(instance, order)})


@app.route("/solution", methods=["POST"])
def solution():
    like = _merge_like_mapping()
    instance, err, status = _instance_from_request(like)
    if instance is None:
        return _error(err or "no puzzle", status)
    return jsonify({"ok": True, "solvable": instance.solvable, "solution": find_solution(instance)})


if __name__ == "__main__":
    app.run(debug=False)
