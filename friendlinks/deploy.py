from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path

import requests

logger = logging.getLogger(__name__)


class DeployError(RuntimeError):
    pass


@dataclass
class DeployConfig:
    remote_path: str
    cache_url: str
    timeout_s: float = 10


class Deployer:
    def __init__(self, cfg: DeployConfig) -> None:
        self.cfg = cfg

    def upload(self, path: str | Path) -> None:
        logger.info("Uploading %s to %s", path, self.cfg.remote_path)
        try:
            proc = subprocess.run(["scp", str(path), self.cfg.remote_path], check=False)
        except OSError as exc:
            raise DeployError(f"Failed to run scp: {exc}") from exc
        if proc.returncode != 0:
            raise DeployError(f"scp failed with exit code {proc.returncode}")
        logger.info("Upload complete")

    def purge_cache(self) -> None:
        logger.info("Clearing cache at %s", self.cfg.cache_url)
        try:
            resp = requests.delete(self.cfg.cache_url, timeout=self.cfg.timeout_s)
        except requests.RequestException as exc:
            raise DeployError(
                f"Failed to clear cache: {exc.__class__.__name__}: {exc}"
            ) from exc
        if not resp.ok:
            raise DeployError(f"Failed to clear cache: {resp.status_code} {resp.reason}")
        logger.info("Cache cleared")

    def deploy(self, path: str | Path) -> None:
        self.upload(path)
        self.purge_cache()
