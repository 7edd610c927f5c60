from __future__ import annotations

import logging
import os
from typing import Optional

import yaml

from ..models.fingerprints import ServiceFingerprint

logger = logging.getLogger(__name__)

SIGNATURE_SUFFIXES = (".yaml", ".yml")


def load_signatures_from_dir(path: Optional[str]) -> list[ServiceFingerprint]:
    """Load every signature list found in ``*.yaml``/``*.yml`` files under ``path``.

    A missing directory yields no signatures. Files whose top level is not a
    list are skipped. Invalid entries raise ``pydantic.ValidationError``.
    """
    if not path or not os.path.isdir(path):
        return []
    signatures: list[ServiceFingerprint] = []
    for name in sorted(os.listdir(path)):
        if not name.endswith(SIGNATURE_SUFFIXES):
            continue
        with open(os.path.join(path, name), "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
        if not isinstance(raw, list):
            logger.warning("signature file skipped", extra={"file": name})
            continue
        for entry in raw:
            signatures.append(ServiceFingerprint.model_validate(entry))
        logger.info("signatures loaded", extra={"file": name, "count": len(raw)})
    return signatures
