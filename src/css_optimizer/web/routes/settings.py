from __future__ import annotations

from flask import Blueprint, current_app, render_template, request

from css_optimizer.model.settings import OptimizerSettings, parse_lines

settings_bp = Blueprint("settings", __name__)


def _settings_from_form(form) -> OptimizerSettings:
    """Unchecked checkboxes are absent from the form, so presence means on."""
    return OptimizerSettings(
        enabled="enabled" in form,
        preserve_media_queries="preserve_media_queries" in form,
        exclude_font_awesome="exclude_font_awesome" in form,
        excluded_urls=parse_lines(form.get("excluded_urls", "")),
        excluded_classes=parse_lines(form.get("excluded_classes", "")),
    )


@settings_bp.route("/", methods=["GET", "POST"])
def edit_settings():
    """Show the settings form (GET) or save it (POST)."""
    repo = current_app.extensions["settings_repo"]
    saved = False
    if request.method == "POST":
        settings = _settings_from_form(request.form)
        repo.save(settings)
        saved = True
    else:
        settings = repo.load()
    return render_template("settings.html", settings=settings, saved=saved)
