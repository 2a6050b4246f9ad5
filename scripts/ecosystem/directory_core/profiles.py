"""Listing profile resolution and user config merging."""

from __future__ import annotations

import json
from pathlib import Path

from directory_core.models import FieldSpec, SortOrder

LISTING_PROFILES = ["accelerators", "media"]

BUILTIN_PROFILES: dict[str, dict] = {
    "accelerators": {
        "source": "accelerators",
        "kind": "accelerator",
        "facet_field": "city",
        "facet_label": "City",
        "ordering_field": "founded_year",
        "page_size": 9,
        "sort_order": "desc",
        "title": "Accelerators",
        "description": "Discover accelerators providing mentorship, funding, and growth opportunities for startups in Algeria.",
        "search_placeholder": "Search accelerators...",
        "empty_message": "No accelerators found",
    },
    "media": {
        "source": "media",
        "kind": "media",
        "facet_field": "category",
        "facet_label": "Category",
        "ordering_field": "founded_year",
        "page_size": 9,
        "sort_order": "desc",
        "title": "Media",
        "description": "Podcasts, newsletters and outlets covering the Algerian startup ecosystem.",
        "search_placeholder": "Search media...",
        "empty_message": "No media found",
    },
    "admin": {
        "source": "accelerators",
        "kind": "accelerator",
        "facet_field": "city",
        "facet_label": "City",
        "ordering_field": "founded_year",
        "page_size": 10,
        "sort_order": "desc",
        "title": "Manage Accelerators",
        "description": "",
        "search_placeholder": "Search...",
        "empty_message": "No results found.",
        "search_key": "name",
    },
}


def load_user_config(path: str | None) -> dict:
    if not path:
        return {}

    config_path = Path(path)
    if not config_path.exists():
        raise ValueError(f"config path not found: {config_path}")

    try:
        config = json.loads(config_path.read_text())
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON config: {exc}") from exc
    if not isinstance(config, dict):
        raise ValueError("config must be a JSON object")
    return config


def resolve_profile(profile: str, config_path: str | None = None) -> dict:
    if profile not in BUILTIN_PROFILES:
        raise ValueError(f"unknown profile: {profile}")

    user_config = load_user_config(config_path)

    selected_profile = user_config.get("profile")
    if selected_profile:
        if selected_profile not in BUILTIN_PROFILES:
            raise ValueError(f"unknown profile in config: {selected_profile}")
        profile = selected_profile
    resolved = dict(BUILTIN_PROFILES[profile])

    if "page_size" in user_config:
        value = int(user_config["page_size"])
        resolved["page_size"] = max(1, value)

    if "sort_order" in user_config:
        try:
            resolved["sort_order"] = SortOrder(user_config["sort_order"]).value
        except ValueError as exc:
            raise ValueError(f"invalid sort_order in config: {user_config['sort_order']}") from exc

    if user_config.get("data_dir"):
        resolved["data_dir"] = str(user_config["data_dir"])

    resolved["name"] = profile
    return resolved


def fields_for(profile: dict) -> FieldSpec:
    return FieldSpec(
        facet_field=profile.get("facet_field", "city"),
        ordering_field=profile.get("ordering_field", "founded_year"),
    )
