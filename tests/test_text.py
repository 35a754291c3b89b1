import pytest

from modelmeta.text import (
    generate_description_from_model_name,
    generate_readable_description,
    normalize_task,
    parse_language_names,
    strip_yaml_frontmatter,
)


@pytest.mark.parametrize(
    "content, expected",
    [
        (
            "---\nlicense: apache-2.0\ntags:\n  - llm\n---\n## Model Overview\nThis is the content.",
            "## Model Overview\nThis is the content.",
        ),
        ("## Model Overview\nThis is the content.", "## Model Overview\nThis is the content."),
        ("", ""),
        ("---\nlicense: apache-2.0\n---", ""),
        ("---\nlicense: apache-2.0\n---\n\n\n## Content", "## Content"),
        (
            "---\nlicense: apache-2.0\nno closing marker",
            "---\nlicense: apache-2.0\nno closing marker",
        ),
        ("  ---\nlicense: apache-2.0\n---\n## Content", "## Content"),
        (
            "---\nlicense: apache-2.0\n---\n## Content\nSome text --- with dashes --- here",
            "## Content\nSome text --- with dashes --- here",
        ),
        ("---", "---"),
        ("---\nlicense: apache-2.0\n---\n   \n   ", "   \n   "),
        (
            "---\nlicense: apache-2.0\n---\n## Code Example\n```yaml\nname: test\n---\nvalue: 123\n```",
            "## Code Example\n```yaml\nname: test\n---\nvalue: 123\n```",
        ),
    ],
)
def test_strip_yaml_frontmatter(content, expected):
    assert strip_yaml_frontmatter(content) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("english", ["en"]),
        ("english, spanish, french", ["en", "es", "fr"]),
        ("english and spanish", ["en", "es"]),
        ("klingon", []),
        ("ENGLISH, Spanish", ["en", "es"]),
        ("german; italian.", ["de", "it"]),
    ],
)
def test_parse_language_names(text, expected):
    assert parse_language_names(text) == expected


@pytest.mark.parametrize(
    "name, expected",
    [
        ("RedHatAI/Llama-3.3-70B-Instruct", "Llama 3.3 70B Instruct"),
        ("RedHatAI/granite-3.1-8b-base-quantized.w4a16", "Granite 3.1 8b Base (w4a16 quantized)"),
        ("whisper-large-v2-quantized.w4a16", "Whisper large v2 (w4a16 quantized)"),
        ("", ""),
        ("meta-llama/Llama-3.1-8B-Instruct-FP8-dynamic", "Llama 3.1 8B Instruct ((FP8) dynamic)"),
    ],
)
def test_generate_description_from_model_name(name, expected):
    assert generate_description_from_model_name(name) == expected


@pytest.mark.parametrize(
    "name, head, kind",
    [
        (
            "registry.redhat.io/rhelai1/modelcar-granite-3-1-8b-instruct:1.5",
            "Granite 3 1 8b Instruct - An instruction-tuned",
            "language",
        ),
        ("ibm-granite-chat", "IBM Granite Chat - A conversational", "AI"),
        ("redhat-llama-base", "Red Hat AI Llama Base - A foundation", "language"),
        ("phi", "Phi - A large", "language"),
        ("ai-model", "Model - A large", "language"),
    ],
)
def test_generate_readable_description(name, head, kind):
    assert generate_readable_description(name) == f"{head} {kind} model"


@pytest.mark.parametrize("name", ["", "modelcar-"])
def test_generate_readable_description_empty(name):
    assert generate_readable_description(name) == ""


@pytest.mark.parametrize(
    "task, expected",
    [
        ("", ""),
        ("Text Generation", "text-generation"),
        ("  Sentiment  ", "text-classification"),
        ("visual question answering", "image-text-to-text"),
        ("text generation tasks", "text-generation"),
        ("Q&A bot", "question-answering"),
        ("image segmenter", "image-classification"),
        ("generative stuff", "text-generation"),
        ("Unknown Thing", "Unknown Thing"),
    ],
)
def test_normalize_task(task, expected):
    assert normalize_task(task) == expected