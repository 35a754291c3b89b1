"""Canonical links for well-known licence identifiers."""

from __future__ import annotations

_OSI = "https://opensource.org/licenses"
_GNU = "https://www.gnu.org/licenses"
_CC = "https://creativecommons.org"
_LLAMA_MODELS = "https://github.com/meta-llama/llama-models/blob/main/models"


def _llama(folder: str) -> str:
    return f"{_LLAMA_MODELS}/{folder}/LICENSE"


_LICENSE_URLS = {
    "apache-2.0": "https://www.apache.org/licenses/LICENSE-2.0",
    "mit": f"{_OSI}/MIT",
    "bsd-3-clause": f"{_OSI}/BSD-3-Clause",
    "bsd-2-clause": f"{_OSI}/BSD-2-Clause",
    "gpl-3.0": f"{_GNU}/gpl-3.0.html",
    "gpl-2.0": f"{_GNU}/old-licenses/gpl-2.0.html",
    "lgpl-3.0": f"{_GNU}/lgpl-3.0.html",
    "lgpl-2.1": f"{_GNU}/old-licenses/lgpl-2.1.html",
    "cc-by-4.0": f"{_CC}/licenses/by/4.0/",
    "cc-by-sa-4.0": f"{_CC}/licenses/by-sa/4.0/",
    "cc-by-nc-4.0": f"{_CC}/licenses/by-nc/4.0/",
    "cc0-1.0": f"{_CC}/publicdomain/zero/1.0/",
    "unlicense": "https://unlicense.org/",
    "llama2": "https://github.com/facebookresearch/llama/blob/main/LICENSE",
    "llama3": _llama("llama3"),
    "llama3.1": _llama("llama3_1"),
    "llama3.2": _llama("llama3_2"),
    "llama3.3": _llama("llama3_3"),
    "llama4": _llama("llama4"),
    "bigscience-openrail-m": "https://huggingface.co/spaces/bigscience/license",
    "openrail": "https://www.licenses.ai/ai-licenses",
    "gemma": "https://ai.google.dev/gemma/terms",
}


def get_license_url(license_id: str) -> str:
    """Return the link for a licence identifier, or an empty string if unknown."""
    return _LICENSE_URLS.get(license_id.strip().lower(), "")