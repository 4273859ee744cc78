"""Flask entry point for the nmon to time series converter."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict

from flask import Flask, jsonify, request

from nmon2series import describe, run

BASE_DIR = Path(__file__).parent
CONFIG_PATH = BASE_DIR / "config" / "defaults.json"

app = Flask(__name__)


def load_defaults() -> dict:
    with open(CONFIG_PATH, "r", encoding="utf-8") as handle:
        return json.load(handle)


def save_defaults(data: dict) -> None:
    with open(CONFIG_PATH, "w", encoding="utf-8") as handle:
        json.dump(data, handle, indent=2)


def _options() -> Dict[str, str]:
    defaults = load_defaults()
    options = {
        "prefix": defaults.get("prefix") or "",
        "ignore_text": "1" if defaults.get("ignore_text") else "",
    }
    for key in options:
        if key in request.args:
            options[key] = request.args.get(key, "")
    return options


def _request_body() -> str:
    if request.mimetype == "multipart/form-data":
        upload = request.files.get("file")
        if upload is not None:
            return upload.read().decode("utf-8", errors="ignore")
    return request.get_data(as_text=True)


@app.get("/describe")
def api_describe():
    return jsonify(describe())


@app.post("/run")
def api_run():
    result = run(_request_body(), _options())
    if result["error"]:
        app.logger.info("nmon conversion failed: %s", result["error"])
        return jsonify(result), 400
    return jsonify(result)


@app.get("/config")
def get_config():
    return jsonify(load_defaults())


@app.post("/config")
def post_config():
    payload = request.get_json(force=True, silent=True)
    if not isinstance(payload, dict):
        return jsonify({"error": "Invalid payload"}), 400
    if not isinstance(payload.get("prefix", ""), str) or not isinstance(payload.get("ignore_text", False), bool):
        return jsonify({"error": "prefix must be a string and ignore_text a boolean"}), 400
    save_defaults(payload)
    return jsonify({"status": "ok"})


if __name__ == "__main__":
    app.run(debug=False)
