from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path

import yaml
from pydantic import ValidationError

from friendlinks.models import Endpoint, FriendsList

logger = logging.getLogger(__name__)


class FriendsFileError(RuntimeError):
    pass


def _parse(path: Path, text: str) -> object:
    suffix = path.suffix.lower()
    if suffix == ".toml":
        return tomllib.loads(text)
    if suffix in {".yml", ".yaml"}:
        return yaml.safe_load(text) or {}
    if suffix == ".json":
        return json.loads(text)
    raise FriendsFileError(f"Unsupported friends file format: {path.name}")


def load_friends(path: str | Path) -> FriendsList:
    """
    Read and validate a friends file (TOML, YAML or JSON).

    Any failure here is fatal for the run, so everything is surfaced as
    FriendsFileError with the underlying cause chained.
    """
    path = Path(path)
    if not path.exists():
        raise FriendsFileError(f"Missing friends file at {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise FriendsFileError(f"Cannot read {path}: {exc}") from exc

    try:
        data = _parse(path, text)
    except (ValueError, yaml.YAMLError) as exc:
        raise FriendsFileError(f"Cannot parse {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise FriendsFileError(f"{path} must contain a table/object at the top level")

    try:
        friends = FriendsList.model_validate(data)
    except ValidationError as exc:
        raise FriendsFileError(f"Invalid friends file {path}: {exc}") from exc

    logger.debug(
        "Loaded %d blogs and %d other sites from %s",
        len(friends.blogs),
        len(friends.non_blogs),
        path,
    )
    return friends


def visible(endpoints: list[Endpoint]) -> list[Endpoint]:
    return [e for e in endpoints if not e.hidden]
