"""Text helpers for modelcards: frontmatter, languages, descriptions and tasks."""

from __future__ import annotations

import re

_LANGUAGE_CODES = {
    "english": "en", "spanish": "es", "french": "fr", "german": "de",
    "italian": "it", "portuguese": "pt", "russian": "ru", "chinese": "zh",
    "japanese": "ja", "korean": "ko", "arabic": "ar", "hindi": "hi",
    "dutch": "nl", "swedish": "sv", "danish": "da", "norwegian": "no",
    "finnish": "fi", "polish": "pl", "czech": "cs", "hungarian": "hu",
    "turkish": "tr", "hebrew": "he", "thai": "th", "vietnamese": "vi",
    "indonesian": "id", "malay": "ms", "tagalog": "tl", "swahili": "sw",
}

_LANGUAGE_SEPARATORS = re.compile(r"[,;]|\s+and\s+", re.ASCII)

_DESCRIPTION_PREFIXES = (
    "RedHatAI/", "meta-llama/", "microsoft/", "mistralai/", "Qwen/", "ibm-granite/",
)

_CANONICAL_WORDS = tuple(
    (re.compile(rf"\b{word}\b", re.IGNORECASE | re.ASCII), word)
    for word in (
        "Llama", "Mistral", "Granite", "Phi", "Qwen", "Whisper",
        "Instruct", "Base", "Chat", "Code",
    )
)

_QUANTIZED = re.compile(r"\bquantized\.(w\d+a\d+)\b", re.IGNORECASE | re.ASCII)
_FP8_DYNAMIC = re.compile(r"\bfp8 dynamic\b", re.IGNORECASE | re.ASCII)
_FP8 = re.compile(r"\bfp8\b", re.IGNORECASE | re.ASCII)
_SPACES = re.compile(r"\s+", re.ASCII)

_READABLE_PREFIXES = ("modelcar", "rhelai1", "model", "ai")
_VERSION_WORD = re.compile(r"\d+(\.\d+)*[a-z]*", re.ASCII)
_FAMILY_WORDS = frozenset({"granite", "llama", "mistral", "qwen", "phi", "gemma"})
_FIXED_WORDS = {
    "instruct": "Instruct", "base": "Base", "chat": "Chat",
    "quantized": "Quantized", "ibm": "IBM", "microsoft": "Microsoft",
    "meta": "Meta", "redhat": "Red Hat AI", "redhatai": "Red Hat AI",
}

# Keyword in the description -> (article and adjective, kind of model).
_LANGUAGE = "language"
_MODEL_KINDS = (
    ("instruct", "An instruction-tuned", _LANGUAGE),
    ("chat", "A conversational", "AI"),
    ("base", "A foundation", _LANGUAGE),
)
_DEFAULT_KIND = ("A large", _LANGUAGE)

# Standard task category -> phrases that map to it, in matching order.
_TASK_PHRASES = {
    "text-generation": (
        "text generation", "text-generation", f"{_LANGUAGE} modeling",
        "conversation", "conversational", "chat", "chatbot", "dialogue",
        "code generation", "coding", "programming", "completion",
        "writing", "creative writing", "storytelling",
    ),
    "text-classification": (
        "text classification", "text-classification", "classification",
        "sentiment analysis", "sentiment", "categorization", "labeling",
    ),
    "question-answering": (
        "question answering", "question-answering", "qa", "q&a",
        "question and answer", "information retrieval", "search",
    ),
    "image-classification": ("image classification", "image-classification"),
    "image-to-text": ("image captioning", "image-to-text", "image description"),
    "image-text-to-text": ("visual question answering", "image-text-to-text"),
    "image-to-image": ("image-to-image",),
    "sentence-similarity": ("sentence similarity", "sentence-similarity"),
    "text-ranking": ("text ranking", "text-ranking", "ranking"),
    "any-to-any": ("any-to-any",),
    "text-to-video": ("text-to-video",),
    "video-to-video": ("video-to-video",),
}

_TASKS = {
    phrase: category
    for category, phrases in _TASK_PHRASES.items()
    for phrase in phrases
}


def strip_yaml_frontmatter(content: str) -> str:
    """Remove a leading ``---`` delimited YAML block from markdown content.

    Content without frontmatter, or with an unclosed block, is returned unchanged.
    """
    if not content:
        return ""
    if not content.strip().startswith("---"):
        return content

    lines = content.split("\n")
    markers = (i for i, line in enumerate(lines) if line.strip() == "---")
    start = next(markers, None)
    end = next(markers, None)
    if start is None or end is None:
        return content
    return "\n".join(lines[end + 1:]).lstrip("\n")


def parse_language_names(lang_str: str) -> list[str]:
    """Turn a list of language names such as "English and French" into locale codes."""
    codes = []
    for part in _LANGUAGE_SEPARATORS.split(lang_str.lower()):
        code = _LANGUAGE_CODES.get(part.strip().strip(".,"))
        if code is not None:
            codes.append(code)
    return codes


def _remove_prefix(text: str, prefix: str) -> str:
    return text[len(prefix):] if text.startswith(prefix) else text


def generate_description_from_model_name(model_name: str) -> str:
    """Build a readable description from a model name such as "RedHatAI/Llama-3.3-70B"."""
    if not model_name:
        return ""

    cleaned = model_name
    for prefix in _DESCRIPTION_PREFIXES:
        cleaned = _remove_prefix(cleaned, prefix)
    cleaned = cleaned.replace("-", " ").replace("_", " ")

    for pattern, word in _CANONICAL_WORDS:
        cleaned = pattern.sub(word, cleaned)

    cleaned = _QUANTIZED.sub(r"(\1 quantized)", cleaned)
    cleaned = _FP8_DYNAMIC.sub("(FP8 dynamic)", cleaned)
    cleaned = _FP8.sub("(FP8)", cleaned)

    cleaned = _SPACES.sub(" ", cleaned).strip()
    if cleaned:
        cleaned = cleaned[0].upper() + cleaned[1:]
    return cleaned


def _title(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def _readable_word(word: str) -> str:
    lower = word.lower()
    if lower in _FAMILY_WORDS:
        return _title(word)
    if lower in _FIXED_WORDS:
        return _FIXED_WORDS[lower]
    if _VERSION_WORD.fullmatch(word):
        return word
    return _title(word)


def generate_readable_description(model_name: str) -> str:
    """Build a description with a model-type suffix from a registry or model name."""
    if not model_name:
        return ""

    cleaned = model_name.rsplit("/", 1)[-1]
    cleaned = cleaned.split(":", 1)[0]
    cleaned = cleaned.replace("-", " ").replace("_", " ")

    for prefix in _READABLE_PREFIXES:
        if cleaned.lower().startswith(prefix + " "):
            cleaned = cleaned[len(prefix) + 1:]

    words = [_readable_word(word) for word in cleaned.split()]
    if not words:
        return ""

    description = " ".join(words)
    lower = description.lower()
    head, kind = next(
        ((head, kind) for keyword, head, kind in _MODEL_KINDS if keyword in lower),
        _DEFAULT_KIND,
    )
    return f"{description} - {head} {kind} model"


def normalize_task(task: str) -> str:
    """Map a free-form task description to a standard task category.

    The input is returned as given when no category fits.
    """
    if not task:
        return ""

    lower = task.strip().lower()
    if lower in _TASKS:
        return _TASKS[lower]

    for phrase, category in _TASKS.items():
        if phrase in lower:
            return category

    if "question" in lower and "answer" in lower:
        return "question-answering"
    if "image" in lower and "text" in lower:
        return "image-text-to-text"
    if "image" in lower:
        return "image-classification"
    if "generat" in lower:
        return "text-generation"
    if "classif" in lower:
        return "text-classification"
    return task