from __future__ import annotations

from dataclasses import replace

from flask import Blueprint, current_app, jsonify, request

from css_optimizer.optimizer import optimize

api_bp = Blueprint("api", __name__)


@api_bp.route("/optimize", methods=["POST"])
def optimize_css():
    """Optimize a stylesheet posted as JSON ``{"css": ..., "base_location": ...}``."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not isinstance(data.get("css"), str):
        return jsonify({"error": "css required"}), 400

    settings = current_app.extensions["settings_repo"].load()
    config = settings.optimizer_config(base_location=data.get("base_location") or None)
    if "preserve_at_rules" in data:
        if not isinstance(data["preserve_at_rules"], bool):
            return jsonify({"error": "preserve_at_rules must be a boolean"}), 400
        config = replace(config, preserve_at_rules=data["preserve_at_rules"])

    css = optimize(data["css"], config)
    return jsonify(
        {
            "css": css,
            "original_size": len(data["css"]),
            "optimized_size": len(css),
        }
    )


@api_bp.route("/settings")
def get_settings():
    """Return the current settings as JSON."""
    settings = current_app.extensions["settings_repo"].load()
    return jsonify(settings.to_dict())
